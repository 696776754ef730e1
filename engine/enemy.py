"""Enemy movement: cross left to right, respawn on a random road."""

from __future__ import annotations

from typing import TYPE_CHECKING

from config import ENEMY_SPRITE
from models.characters import Enemy

if TYPE_CHECKING:
    from engine.game import Game


def create_enemy(road: int, speed: float) -> Enemy:
    """Create an enemy just off the left edge of ``road``."""
    return Enemy(x=-1, y=road, speed=speed, sprite=ENEMY_SPRITE)


def update_enemy(enemy: Enemy, dt: float, game: Game) -> Enemy:
    """Advance an enemy by one frame.

    Once it has fully left the board on the right it reappears off the left
    edge on a random road with a fresh random speed in the game's current
    speed range.

    Args:
        enemy: The enemy to move (mutated in place).
        dt: Seconds since the previous frame.
        game: Game providing the board, speed bounds, and RNG.

    Returns:
        The updated enemy.
    """
    enemy.x += enemy.speed * dt

    board = game.board
    if enemy.x >= board.width:
        enemy.x = -1
        enemy.y = board.roads[game.random_int(0, len(board.roads) - 1)]
        enemy.speed = game.random_int(game.min_enemy_speed, game.max_enemy_speed)

    return enemy
