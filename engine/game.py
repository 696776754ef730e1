"""Game orchestration: levels, lives, pause, collisions, lifecycle events."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Any

from config import (
    HIT_TOLERANCE,
    MAX_ENEMY_SPEED,
    MAX_LIVES,
    MIN_ENEMY_SPEED,
)
from engine.effects import HELP_ITEMS, register_default_effects
from engine.enemy import create_enemy, update_enemy
from engine.events import EventBus
from engine.levels import load_levels, parse_level
from engine.player import handle_player_input, update_player
from engine.scheduler import EffectScheduler
from engine.selector import CharacterSelector
from models.actions import Command
from models.board import Board
from models.characters import CharacterProfile, Enemy, Player
from models.events import GameEventType
from models.game_state import GameSnapshot, GameStatus
from models.level import Block, Item, LevelDescriptor

logger = logging.getLogger(__name__)


class Game:
    """Owns every piece of mutable game state.

    A Game starts at level -1 with no board; ``restart()`` (or ``level_up()``)
    enters level 0. The board and enemies are rebuilt on every level change,
    the player persists for the whole game.
    """

    def __init__(
        self,
        levels: list[LevelDescriptor | str] | None = None,
        *,
        rng: random.Random | None = None,
        max_lives: int = MAX_LIVES,
        min_enemy_speed: int = MIN_ENEMY_SPEED,
        max_enemy_speed: int = MAX_ENEMY_SPEED,
        selector: CharacterSelector | None = None,
    ) -> None:
        if levels is None:
            self.levels = load_levels()
        else:
            self.levels = [
                parse_level(lvl) if isinstance(lvl, str) else lvl for lvl in levels
            ]
        self.rng = rng or random.Random()

        self.level = -1
        self.initial_min_enemy_speed = min_enemy_speed
        self.initial_max_enemy_speed = max_enemy_speed
        self.min_enemy_speed = min_enemy_speed
        self.max_enemy_speed = max_enemy_speed
        self.max_lives = max_lives
        self.lives = max_lives
        self.paused = False

        self.board: Board | None = None
        self.enemies: list[Enemy] = []
        self.player = register_default_effects(Player())

        self.events = EventBus()
        self.scheduler = EffectScheduler()

        self.character_selector = selector or CharacterSelector()
        self.character_selector.has_focus = True
        self.character_selector.on_character_selected(self._character_selected)

    # ------------------------------------------------------------------
    # Level progression
    # ------------------------------------------------------------------

    def level_up(self) -> None:
        """Move on to the next level, or complete the game after the last one."""
        self.level += 1

        if self.level >= len(self.levels):
            if self.level == len(self.levels):
                logger.info("all %d levels cleared", len(self.levels))
                self.events.emit(GameEventType.GAME_COMPLETED, self)
            return

        self.min_enemy_speed += 1
        self.max_enemy_speed += 1

        self.board = Board.from_level(self.levels[self.level])

        self.lives = self.max_lives
        self.events.emit(GameEventType.LIFE_GAINED, self.lives)

        self.spawn_player()

        self.enemies = [
            create_enemy(road, self.random_int(self.min_enemy_speed, self.max_enemy_speed))
            for road in self.board.roads
        ]

        logger.info(
            "entering level %d (%dx%d, %d enemies, speed %d-%d)",
            self.level, self.board.width, self.board.height, len(self.enemies),
            self.min_enemy_speed, self.max_enemy_speed,
        )
        self.events.emit(GameEventType.LEVEL_CLEARED, self.level)

    def restart(self) -> None:
        """Start over from the first level."""
        # Timed effects end with the run they were picked up in
        self.scheduler.flush()
        self.level = -1
        self.min_enemy_speed = self.initial_min_enemy_speed
        self.max_enemy_speed = self.initial_max_enemy_speed
        self.events.emit(GameEventType.GAME_RESTART, self)
        self.level_up()

    def is_level_cleared(self) -> bool:
        """Whether the player stands on grass in the top row."""
        if self.board is None:
            return False
        return (
            self.player.y == 0
            and self.board.get_block(self.player.y, int(self.player.x)) == Block.GRASS
        )

    # ------------------------------------------------------------------
    # Player fate
    # ------------------------------------------------------------------

    def was_player_hit(self) -> bool:
        if self.player.indestructible:
            return False
        for enemy in self.enemies:
            if abs(self.player.x - enemy.x) < HIT_TOLERANCE and self.player.y == enemy.y:
                return True
        return False

    def is_player_drowning(self) -> bool:
        if self.player.indestructible or self.board is None:
            return False
        return self.board.get_block(self.player.y, int(self.player.x)) == Block.WATER

    def reset(self) -> None:
        """Take a life after a hit or drowning and replay the current level.

        Collected items reappear and the player respawns; terrain and enemies
        are left as they are.
        """
        self.lives -= 1

        if self.lives < 0:
            logger.info("game over on level %d", self.level)
            self.events.emit(GameEventType.GAME_OVER, self)
            return

        self.events.emit(GameEventType.LIFE_LOST, self.lives)
        self.board.reset_items()
        self.spawn_player()

    def spawn_player(self) -> None:
        """Put the player on a random column of the bottom row."""
        self.player.x = self.random_int(0, self.board.width - 1)
        self.player.y = self.board.height - 1

    def help_player(self) -> None:
        """Trade a life for a random item near the start.

        The player is sent to the bottom-left cell and an item is dropped on the
        first empty bottom-row cell, scanning from the right. The life is only
        taken if a free cell was found. Does nothing with zero lives.
        """
        if self.lives < 1 or self.board is None:
            return

        board = self.board
        self.player.x = 0
        self.player.y = board.height - 1

        item = HELP_ITEMS[self.random_int(0, len(HELP_ITEMS) - 1)]

        row = board.height - 1
        for col in range(board.width - 1, 0, -1):
            if board.get_item(row, col) == Item.NONE:
                board.set_item(row, col, item)
                self.lives -= 1
                logger.debug("help placed %s at (%d, %d)", item.name, col, row)
                self.events.emit(GameEventType.LIFE_LOST, self.lives)
                break

    # ------------------------------------------------------------------
    # Pause
    # ------------------------------------------------------------------

    def pause(self) -> None:
        if not self.paused:
            self.paused = True
            self.events.emit(GameEventType.GAME_PAUSED, self)

    def resume(self) -> None:
        if self.paused:
            self.paused = False
            self.events.emit(GameEventType.GAME_RESUMED, self)

    # ------------------------------------------------------------------
    # Frame update and input
    # ------------------------------------------------------------------

    def tick(self, dt: float) -> None:
        """Advance the game by one frame of ``dt`` seconds.

        Moves the enemies, checks whether the level was cleared, costs a life
        on a hit or drowning, then advances the effect clock. Pause is not
        checked here: whoever drives the loop stops calling tick while paused.
        """
        if self.status != GameStatus.PLAYING:
            return

        for enemy in self.enemies:
            update_enemy(enemy, dt, self)
        update_player(self)

        if self.status == GameStatus.PLAYING and (
            self.was_player_hit() or self.is_player_drowning()
        ):
            self.reset()

        self.advance_timers(dt)

    def advance_timers(self, dt: float) -> int:
        """Advance the logical clock that timed item effects run on."""
        return self.scheduler.advance(dt, self.level)

    def handle_input(self, command: Command | str | None) -> None:
        """Send a command to the selector while it has focus, else to the player."""
        if self.character_selector.has_focus:
            self.character_selector.handle_input(command)
        else:
            handle_player_input(self, command)

    def _character_selected(self, character: CharacterProfile) -> None:
        self.player.sprite = character.sprite
        self.character_selector.has_focus = False

    # ------------------------------------------------------------------
    # Lifecycle event subscription (one handler each)
    # ------------------------------------------------------------------

    def on_life_lost(self, handler: Callable[[int], None]) -> None:
        self.events.subscribe(GameEventType.LIFE_LOST, handler)

    def on_life_gained(self, handler: Callable[[int], None]) -> None:
        self.events.subscribe(GameEventType.LIFE_GAINED, handler)

    def on_level_cleared(self, handler: Callable[[int], None]) -> None:
        self.events.subscribe(GameEventType.LEVEL_CLEARED, handler)

    def on_game_over(self, handler: Callable[[Game], None]) -> None:
        self.events.subscribe(GameEventType.GAME_OVER, handler)

    def on_game_restart(self, handler: Callable[[Game], None]) -> None:
        self.events.subscribe(GameEventType.GAME_RESTART, handler)

    def on_game_completed(self, handler: Callable[[Game], None]) -> None:
        self.events.subscribe(GameEventType.GAME_COMPLETED, handler)

    def on_game_paused(self, handler: Callable[[Game], None]) -> None:
        self.events.subscribe(GameEventType.GAME_PAUSED, handler)

    def on_game_resumed(self, handler: Callable[[Game], None]) -> None:
        self.events.subscribe(GameEventType.GAME_RESUMED, handler)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        if self.level < 0:
            return GameStatus.NOT_STARTED
        if self.level >= len(self.levels):
            return GameStatus.COMPLETED
        if self.lives < 0:
            return GameStatus.GAME_OVER
        return GameStatus.PLAYING

    def random_int(self, lo: int, hi: int) -> int:
        """Uniform random integer in [lo, hi], both inclusive."""
        return self.rng.randint(lo, hi)

    def snapshot(self) -> GameSnapshot:
        """Read-only view of the current frame for renderers."""
        return GameSnapshot(
            status=self.status,
            level=self.level,
            level_count=len(self.levels),
            lives=self.lives,
            max_lives=self.max_lives,
            paused=self.paused,
            selecting_character=self.character_selector.has_focus,
            board=self.board.to_descriptor() if self.board is not None else None,
            player=self.player.model_copy(update={"gain_callbacks": {}}),
            enemies=[enemy.model_copy() for enemy in self.enemies],
        )

    def describe(self) -> dict[str, Any]:
        """JSON-ready dict of the snapshot."""
        return self.snapshot().model_dump(mode="json")
