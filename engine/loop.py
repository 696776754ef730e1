"""Headless frame loop: drives a Game the way a renderer's loop would."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel

from engine.game import Game
from models.actions import Command
from models.game_state import GameStatus

logger = logging.getLogger(__name__)

# Produces the command for the current frame, or None
CommandSource = Callable[[Game], Command | str | None]


class RunSummary(BaseModel):
    """Outcome of a headless run."""
    frames: int
    paused_frames: int
    elapsed: float          # Simulated seconds actually ticked
    status: GameStatus
    level: int
    lives: int


def run_headless(
    game: Game,
    *,
    seconds: float,
    dt: float,
    commands: CommandSource | None = None,
) -> RunSummary:
    """Run the game for up to ``seconds`` of simulated time.

    Each frame feeds one command (if any) and then ticks the game, except
    while paused, when the tick is skipped so enemies and timers hold still.
    The run ends early once the game is over or completed. A game that was
    never started is restarted first.

    Args:
        game: The game to drive.
        seconds: Simulated duration.
        dt: Seconds per frame.
        commands: Called once per frame for the input to apply.

    Returns:
        A RunSummary describing where the game ended up.
    """
    if dt <= 0:
        raise ValueError(f"dt must be positive, got {dt}")

    if game.status == GameStatus.NOT_STARTED:
        game.restart()

    max_frames = int(seconds / dt)
    frames = 0
    paused_frames = 0
    elapsed = 0.0

    while frames < max_frames:
        if game.status in (GameStatus.GAME_OVER, GameStatus.COMPLETED):
            break
        frames += 1

        if commands is not None:
            command = commands(game)
            if command is not None:
                game.handle_input(command)

        if game.paused:
            paused_frames += 1
            continue

        game.tick(dt)
        elapsed += dt

    logger.info(
        "run finished after %d frames: %s on level %d with %d lives",
        frames, game.status.value, game.level, game.lives,
    )
    return RunSummary(
        frames=frames,
        paused_frames=paused_frames,
        elapsed=elapsed,
        status=game.status,
        level=game.level,
        lives=game.lives,
    )
