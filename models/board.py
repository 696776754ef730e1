"""The playing board: terrain grid plus item overlay for one level."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from models.level import Block, Item, LevelDescriptor


class Board(BaseModel):
    """Mutable board built from a LevelDescriptor.

    Cells are stored row-major, ``index = row * width + col``. ``items`` is
    None until the first item write when the level carried no item layer.
    """
    width: int
    height: int
    roads: list[int]
    blocks: list[Block]
    items: list[Item] | None = None
    initial_items: tuple[Item, ...] | None = None  # Snapshot restored by reset_items()

    @classmethod
    def from_level(cls, level: LevelDescriptor) -> Board:
        """Build a fresh board from a level; the descriptor is left untouched."""
        return cls(
            width=level.width,
            height=level.height,
            roads=list(level.roads),
            blocks=list(level.blocks),
            items=list(level.items) if level.items is not None else None,
            initial_items=level.items,
        )

    def _index(self, row: int, col: int) -> int:
        return row * self.width + col

    def get_block(self, row: int, col: int) -> Block:
        return self.blocks[self._index(row, col)]

    def set_block(self, row: int, col: int, block: Block) -> None:
        self.blocks[self._index(row, col)] = block

    def get_item(self, row: int, col: int) -> Item:
        if self.items is None:
            return Item.NONE
        return self.items[self._index(row, col)]

    def set_item(self, row: int, col: int, item: Item) -> None:
        if self.items is None:
            self.items = [Item.NONE] * len(self.blocks)
        self.items[self._index(row, col)] = item

    def remove_item(self, row: int, col: int) -> None:
        self.set_item(row, col, Item.NONE)

    def reset_items(self) -> None:
        """Put back every item the level started with.

        Items written onto a board that had no item layer are dropped.
        """
        self.items = list(self.initial_items) if self.initial_items is not None else None

    def cells_with_block(self, block: Block) -> Iterator[tuple[int, int]]:
        """Yield (row, col) of every cell whose terrain is ``block``."""
        for index, value in enumerate(self.blocks):
            if value == block:
                yield divmod(index, self.width)

    def to_descriptor(self) -> str:
        """Encode the current board in the level descriptor format."""
        from engine.levels import encode_level

        return encode_level(self.width, self.height, self.roads, self.blocks, self.items)
