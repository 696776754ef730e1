"""Headless entry point for Riverhop.

Runs the game engine without a renderer: a bot plays the shipped levels at
a fixed frame rate and every lifecycle event is printed as it happens.

Usage:
    python main.py --seed 7 --seconds 120
    python main.py --seconds 30 --json

Environment variables:
    RIVERHOP_LOG_LEVEL  logging level (default: WARNING)
"""

import argparse
import json
import logging
import random

from bots.example_bot import ExampleBot
from config import DEFAULT_FPS, LOG_LEVEL
from engine.game import Game
from engine.loop import run_headless


def build_game(seed: int | None = None) -> Game:
    """Create a game on the shipped levels with printing event handlers."""
    game = Game(rng=random.Random(seed))

    game.on_life_lost(lambda lives: print(f"  life lost, {lives} left"))
    game.on_life_gained(lambda lives: print(f"  lives: {lives}"))
    game.on_level_cleared(lambda level: print(f"Level {level + 1}/{len(game.levels)}"))
    game.on_game_over(lambda g: print(f"*** GAME OVER on level {g.level + 1} ***"))
    game.on_game_restart(lambda g: print("Starting new game..."))
    game.on_game_completed(lambda g: print("*** ALL LEVELS CLEARED ***"))
    game.on_game_paused(lambda g: print("  paused"))
    game.on_game_resumed(lambda g: print("  resumed"))
    return game


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Riverhop headlessly with a bot")
    parser.add_argument("--seed", type=int, default=None, help="Seed for game and bot RNGs")
    parser.add_argument("--seconds", type=float, default=120.0, help="Simulated seconds to run")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames per simulated second")
    parser.add_argument("--hop-every", type=int, default=12, help="Frames between bot moves")
    parser.add_argument("--help-chance", type=float, default=0.0, help="Chance the bot asks for help on a move")
    parser.add_argument("--json", action="store_true", help="Print the final snapshot as JSON")
    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = build_game(args.seed)
    bot = ExampleBot(
        hop_every=args.hop_every,
        help_chance=args.help_chance,
        rng=random.Random(args.seed),
    )

    summary = run_headless(
        game,
        seconds=args.seconds,
        dt=1.0 / max(1, args.fps),
        commands=bot.next_command,
    )

    print(
        f"\n{summary.frames} frames, {summary.elapsed:.1f}s simulated: "
        f"{summary.status.value}, level {summary.level + 1}, lives {summary.lives}"
    )
    if args.json:
        print(json.dumps(game.describe(), indent=2))


if __name__ == "__main__":
    main()
