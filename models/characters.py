"""Character, enemy, and player data models for Riverhop."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from config import DEFAULT_SPRITE, ENEMY_SPRITE
from models.level import Item


class Character(BaseModel):
    """Anything drawn on the board."""
    x: float = 0                    # Column; fractional while enemies are moving
    y: int = 0                      # Row
    sprite: str                     # Visual identity, only meaningful to renderers


class Enemy(Character):
    """A bug crossing the board left to right on a road."""
    sprite: str = ENEMY_SPRITE
    speed: float = 0                # Columns per second


class Player(Character):
    """The character controlled by the user."""
    sprite: str = DEFAULT_SPRITE
    indestructible: bool = False    # Ignores enemies and water while set
    # Item kind -> effect run with the Game when the item is picked up
    gain_callbacks: dict[Item, Callable[[Any], None]] = Field(
        default_factory=dict, exclude=True
    )

    def on_gain(self, item: Item, callback: Callable[[Any], None]) -> None:
        """Register the effect for ``item``, replacing any earlier one."""
        self.gain_callbacks[item] = callback


class CharacterProfile(BaseModel):
    """A selectable player character."""
    name: str
    sprite: str
