"""Lifecycle event and timed-effect models for Riverhop."""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel


class GameEventType(str, Enum):
    """Moments in a game the presentation layer can react to."""
    LIFE_LOST = "life_lost"             # payload: remaining lives
    LIFE_GAINED = "life_gained"         # payload: new lives
    LEVEL_CLEARED = "level_cleared"     # payload: index of the level now playing
    GAME_OVER = "game_over"             # payload: the Game
    GAME_RESTART = "game_restart"
    GAME_COMPLETED = "game_completed"
    GAME_PAUSED = "game_paused"
    GAME_RESUMED = "game_resumed"


class ScheduledEffect(BaseModel):
    """A deferred action waiting on the logical clock."""
    expires_at: float                   # Clock time in seconds
    action: Callable[[], None]
    guard_level: int | None = None      # Skip the action if the level changed
    label: str = ""                     # For logging only
