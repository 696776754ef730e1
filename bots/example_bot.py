"""Reference bot that plays Riverhop headlessly.

Confirms the first character in the selector, then every few frames picks
a simple move:
  - If the row above is water, sidestep toward the nearest dry column.
  - If an enemy is about to cross the cell above, wait.
  - Otherwise, hop up.

Usage:
    python main.py --seed 7 --seconds 60
"""

from __future__ import annotations

import random

from engine.game import Game
from models.actions import Command
from models.level import Block

DANGER_DISTANCE = 1.5   # Columns left of the target cell that count as "incoming"


def _sign(n: int) -> int:
    """Return -1, 0, or 1 based on the sign of n."""
    if n > 0:
        return 1
    if n < 0:
        return -1
    return 0


class ExampleBot:
    """Greedy bot with a fixed hop cadence and a little randomness."""

    def __init__(
        self,
        *,
        hop_every: int = 12,
        help_chance: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self.hop_every = max(1, hop_every)
        self.help_chance = help_chance
        self.rng = rng or random.Random()
        self._frame = 0

    def next_command(self, game: Game) -> Command | None:
        """Return the command for this frame, or None to do nothing."""
        if game.character_selector.has_focus:
            return Command.ENTER

        self._frame += 1
        if self._frame % self.hop_every:
            return None

        board = game.board
        if board is None:
            return None

        if self.help_chance and game.lives > 1 and self.rng.random() < self.help_chance:
            return Command.HELP

        x, y = int(game.player.x), game.player.y
        if y == 0:
            return self.rng.choice([Command.LEFT, Command.RIGHT])

        target_row = y - 1
        if board.get_block(target_row, x) == Block.WATER and not game.player.indestructible:
            dry = [
                col for col in range(board.width)
                if board.get_block(target_row, col) != Block.WATER
            ]
            if not dry:
                return None
            nearest = min(dry, key=lambda col: (abs(col - x), self.rng.random()))
            step = _sign(nearest - x)
            return Command.RIGHT if step > 0 else Command.LEFT

        for enemy in game.enemies:
            if enemy.y == target_row and 0 <= x - enemy.x <= DANGER_DISTANCE:
                return None

        return Command.UP
