"""Logical clock for timed item effects.

Effects schedule their revert as a ScheduledEffect. The Game advances the
clock from its tick, so nothing here depends on wall-clock time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from models.events import ScheduledEffect

logger = logging.getLogger(__name__)


class EffectScheduler:
    """Runs deferred actions once the logical clock passes their expiry."""

    def __init__(self) -> None:
        self.now = 0.0
        self._pending: list[ScheduledEffect] = []

    @property
    def pending(self) -> list[ScheduledEffect]:
        return list(self._pending)

    def schedule(
        self,
        delay: float,
        action: Callable[[], None],
        *,
        guard_level: int | None = None,
        label: str = "",
    ) -> ScheduledEffect:
        """Run ``action`` after ``delay`` seconds of logical time.

        Args:
            delay: Seconds from now.
            action: Zero-argument callable to run.
            guard_level: If set, the action is dropped when the current level
                differs from this value at expiry.
            label: Name used in log records.

        Returns:
            The scheduled record.
        """
        effect = ScheduledEffect(
            expires_at=self.now + delay,
            action=action,
            guard_level=guard_level,
            label=label,
        )
        self._pending.append(effect)
        return effect

    def advance(self, dt: float, current_level: int) -> int:
        """Move the clock forward and run every effect that expired.

        Effects run in expiry order; ties keep scheduling order.

        Args:
            dt: Seconds elapsed.
            current_level: Level index used to check each effect's guard.

        Returns:
            Number of actions actually run.
        """
        self.now += dt
        due = [e for e in self._pending if e.expires_at <= self.now]
        if not due:
            return 0
        self._pending = [e for e in self._pending if e.expires_at > self.now]

        ran = 0
        for effect in sorted(due, key=lambda e: e.expires_at):
            if effect.guard_level is not None and effect.guard_level != current_level:
                logger.debug(
                    "dropping %s: level changed from %d to %d",
                    effect.label, effect.guard_level, current_level,
                )
                continue
            logger.debug("running %s", effect.label)
            effect.action()
            ran += 1
        return ran

    def clear(self) -> None:
        self._pending = []

    def flush(self) -> int:
        """Empty the queue without waiting for expiry.

        Unguarded actions run now, in expiry order. Guarded ones are dropped
        since the level they belong to is being left.

        Returns:
            Number of actions actually run.
        """
        pending = sorted(self._pending, key=lambda e: e.expires_at)
        self.clear()

        ran = 0
        for effect in pending:
            if effect.guard_level is not None:
                logger.debug("dropping %s on flush", effect.label)
                continue
            logger.debug("running %s early", effect.label)
            effect.action()
            ran += 1
        return ran
