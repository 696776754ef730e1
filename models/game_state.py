"""Game status and snapshot models for Riverhop."""

from enum import Enum

from pydantic import BaseModel

from models.characters import Enemy, Player


class GameStatus(str, Enum):
    """Possible states for a game."""
    NOT_STARTED = "not_started"     # level == -1
    PLAYING = "playing"
    GAME_OVER = "game_over"         # lives dropped below zero
    COMPLETED = "completed"         # every level cleared


class GameSnapshot(BaseModel):
    """What a renderer needs to draw one frame."""
    status: GameStatus
    level: int
    level_count: int
    lives: int
    max_lives: int
    paused: bool
    selecting_character: bool
    board: str | None               # Level descriptor of the current board
    player: Player
    enemies: list[Enemy] = []
