"""Item effects applied to the game when the player picks an item up.

Timed effects schedule their own revert on the game's EffectScheduler. A
revert that could corrupt a newer level carries the level it was scheduled
on as a guard, so it is dropped if the player has moved on.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING

from config import EFFECT_DURATION_SECONDS
from models.events import GameEventType
from models.level import Block, Item

if TYPE_CHECKING:
    from engine.game import Game
    from models.characters import Player

logger = logging.getLogger(__name__)

# Items help_player() may hand out
HELP_ITEMS = (Item.HEART, Item.STAR, Item.KEY, Item.ROCK, Item.BLUE_GEM, Item.GREEN_GEM)

BLUE_GEM_SLOWDOWN = 3


def star_sprite(sprite: str) -> str:
    """Return the glowing variant of a sprite path, e.g. char-boy-star.png."""
    root, ext = os.path.splitext(sprite)
    return f"{root}-star{ext}"


def heart_effect(game: Game) -> None:
    game.lives += 1
    game.events.emit(GameEventType.LIFE_GAINED, game.lives)


def star_effect(game: Game) -> None:
    """Make the player indestructible for a short while."""
    player = game.player
    if player.indestructible:
        return

    sprite = player.sprite
    player.indestructible = True
    player.sprite = star_sprite(sprite)

    def revert() -> None:
        player.indestructible = False
        player.sprite = sprite

    game.scheduler.schedule(EFFECT_DURATION_SECONDS, revert, label="star")


def key_effect(game: Game) -> None:
    game.level_up()


def rock_effect(game: Game) -> None:
    """Turn every water block into stone until the effect wears off."""
    board = game.board
    flooded = list(board.cells_with_block(Block.WATER))
    for row, col in flooded:
        board.set_block(row, col, Block.STONE)

    def revert() -> None:
        for row, col in flooded:
            board.set_block(row, col, Block.WATER)

    game.scheduler.schedule(
        EFFECT_DURATION_SECONDS, revert, guard_level=game.level, label="rock"
    )


def blue_gem_effect(game: Game) -> None:
    """Slow every enemy down."""
    for enemy in game.enemies:
        enemy.speed /= BLUE_GEM_SLOWDOWN

    def revert() -> None:
        for enemy in game.enemies:
            enemy.speed *= BLUE_GEM_SLOWDOWN

    game.scheduler.schedule(
        EFFECT_DURATION_SECONDS, revert, guard_level=game.level, label="blue_gem"
    )


def green_gem_effect(game: Game) -> None:
    """Freeze every enemy, then give each its old speed back."""
    frozen = list(game.enemies)
    speeds = [enemy.speed for enemy in frozen]
    for enemy in frozen:
        enemy.speed = 0

    def revert() -> None:
        # A restart can rebuild the enemies without changing the level index.
        if len(game.enemies) != len(frozen):
            return
        if any(current is not old for current, old in zip(game.enemies, frozen)):
            return
        for enemy, speed in zip(game.enemies, speeds):
            enemy.speed = speed

    game.scheduler.schedule(
        EFFECT_DURATION_SECONDS, revert, guard_level=game.level, label="green_gem"
    )


def orange_gem_effect(game: Game) -> None:
    # Reserved: picking it up only removes it from the board.
    pass


EFFECTS: dict[Item, Callable[[Game], None]] = {
    Item.HEART: heart_effect,
    Item.STAR: star_effect,
    Item.KEY: key_effect,
    Item.ROCK: rock_effect,
    Item.BLUE_GEM: blue_gem_effect,
    Item.GREEN_GEM: green_gem_effect,
    Item.ORANGE_GEM: orange_gem_effect,
}


def register_default_effects(player: Player) -> Player:
    """Attach every built-in item effect to the player."""
    for item, effect in EFFECTS.items():
        player.on_gain(item, effect)
    return player
