"""Terrain, item, and level descriptor models for Riverhop."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Block(str, Enum):
    """Terrain under a board cell. Values are the wire-format symbols."""
    WATER = "W"
    GRASS = "G"
    STONE = "S"


class Item(str, Enum):
    """Collectible lying on a board cell. Values are the wire-format symbols."""
    BLUE_GEM = "b"
    GREEN_GEM = "g"
    ORANGE_GEM = "o"
    HEART = "h"
    KEY = "k"
    ROCK = "r"
    STAR = "s"
    NONE = "n"


class LevelDescriptor(BaseModel):
    """One hand-authored level, as parsed from its descriptor string."""
    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    roads: tuple[int, ...]              # Rows enemies spawn and wrap on
    blocks: tuple[Block, ...]           # width * height, row-major
    items: tuple[Item, ...] | None = None  # None when the descriptor has no item field
