"""Tests for the effect scheduler's logical clock and the event bus."""

from engine.events import EventBus
from engine.scheduler import EffectScheduler
from models.events import GameEventType


class TestEffectScheduler:
    """Tests for EffectScheduler."""

    def test_not_run_before_expiry(self):
        scheduler = EffectScheduler()
        fired = []
        scheduler.schedule(1.0, lambda: fired.append(1))
        assert scheduler.advance(0.99, current_level=0) == 0
        assert fired == []
        assert len(scheduler.pending) == 1

    def test_runs_once_at_expiry(self):
        scheduler = EffectScheduler()
        fired = []
        scheduler.schedule(1.0, lambda: fired.append(1))
        assert scheduler.advance(1.0, current_level=0) == 1
        scheduler.advance(5.0, current_level=0)
        assert fired == [1]
        assert scheduler.pending == []

    def test_runs_in_expiry_order(self):
        scheduler = EffectScheduler()
        fired = []
        scheduler.schedule(2.0, lambda: fired.append("late"))
        scheduler.schedule(1.0, lambda: fired.append("early"))
        scheduler.schedule(1.0, lambda: fired.append("early-2"))
        scheduler.advance(3.0, current_level=0)
        assert fired == ["early", "early-2", "late"]

    def test_delay_is_relative_to_now(self):
        scheduler = EffectScheduler()
        scheduler.advance(10.0, current_level=0)
        effect = scheduler.schedule(1.0, lambda: None)
        assert effect.expires_at == 11.0

    def test_guard_drops_effect_after_level_change(self):
        scheduler = EffectScheduler()
        fired = []
        scheduler.schedule(1.0, lambda: fired.append(1), guard_level=2)
        assert scheduler.advance(1.0, current_level=3) == 0
        assert fired == []
        assert scheduler.pending == []

    def test_guard_passes_on_same_level(self):
        scheduler = EffectScheduler()
        fired = []
        scheduler.schedule(1.0, lambda: fired.append(1), guard_level=2)
        scheduler.advance(1.0, current_level=2)
        assert fired == [1]

    def test_unguarded_runs_on_any_level(self):
        scheduler = EffectScheduler()
        fired = []
        scheduler.schedule(1.0, lambda: fired.append(1))
        scheduler.advance(1.0, current_level=7)
        assert fired == [1]

    def test_clear(self):
        scheduler = EffectScheduler()
        scheduler.schedule(1.0, lambda: None)
        scheduler.clear()
        assert scheduler.pending == []

    def test_flush_runs_unguarded_and_drops_guarded(self):
        scheduler = EffectScheduler()
        fired = []
        scheduler.schedule(2.0, lambda: fired.append("late"))
        scheduler.schedule(1.0, lambda: fired.append("guarded"), guard_level=0)
        scheduler.schedule(1.0, lambda: fired.append("early"))
        assert scheduler.flush() == 2
        assert fired == ["early", "late"]
        assert scheduler.pending == []


class TestEventBus:
    """Tests for EventBus."""

    def test_unsubscribed_event_is_no_op(self):
        EventBus().emit(GameEventType.GAME_OVER, None)

    def test_subscribe_replaces(self):
        bus = EventBus()
        first, second = [], []
        bus.subscribe(GameEventType.LIFE_LOST, first.append)
        bus.subscribe(GameEventType.LIFE_LOST, second.append)
        bus.emit(GameEventType.LIFE_LOST, 2)
        assert first == []
        assert second == [2]

    def test_events_are_independent(self):
        bus = EventBus()
        lost = []
        bus.subscribe(GameEventType.LIFE_LOST, lost.append)
        bus.emit(GameEventType.LIFE_GAINED, 4)
        assert lost == []

    def test_clear_restores_no_op(self):
        bus = EventBus()
        lost = []
        bus.subscribe(GameEventType.LIFE_LOST, lost.append)
        bus.clear(GameEventType.LIFE_LOST)
        bus.emit(GameEventType.LIFE_LOST, 1)
        assert lost == []
