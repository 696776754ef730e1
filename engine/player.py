"""Player input handling, movement, and item pickup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from engine.controls import parse_command
from models.actions import Command
from models.level import Item

if TYPE_CHECKING:
    from engine.game import Game

logger = logging.getLogger(__name__)

_MOVES = (Command.LEFT, Command.UP, Command.RIGHT, Command.DOWN)


def update_player(game: Game) -> None:
    """Per-frame check: advance to the next level once the player is across."""
    if game.is_level_cleared():
        game.level_up()


def handle_player_input(game: Game, command: Command | str | None) -> None:
    """Apply one logical command to the player.

    Moves are single-cell and ignored at the board edge. Unknown commands
    are ignored.
    """
    command = parse_command(command)
    if command is None:
        return

    player = game.player
    board = game.board
    if board is None and command in _MOVES:
        return
    x, y = int(player.x), player.y

    if command == Command.LEFT:
        if x > 0:
            move_player(game, x - 1, y)
    elif command == Command.UP:
        if y > 0:
            move_player(game, x, y - 1)
    elif command == Command.RIGHT:
        if x < board.width - 1:
            move_player(game, x + 1, y)
    elif command == Command.DOWN:
        if y < board.height - 1:
            move_player(game, x, y + 1)
    elif command == Command.HELP:
        game.help_player()
    elif command == Command.PAUSE:
        if game.paused:
            game.resume()
        else:
            game.pause()
    elif command == Command.QUIT:
        game.resume()
        game.character_selector.has_focus = True
        game.restart()


def move_player(game: Game, x: int, y: int) -> None:
    """Teleport the player to (x, y) and pick up whatever lies there.

    Does nothing while the game is paused. The item is removed from the board
    it was picked up on even when no effect is registered for it, and even
    when the effect itself moved the game to another level.
    """
    if game.paused:
        return

    player = game.player
    player.x = x
    player.y = y

    board = game.board
    item = board.get_item(y, x)
    if item == Item.NONE:
        return

    callback = player.gain_callbacks.get(item)
    if callback is not None:
        logger.debug("player picked up %s at (%d, %d)", item.name, x, y)
        callback(game)
    board.remove_item(y, x)
