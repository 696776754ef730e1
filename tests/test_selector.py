"""Tests for character selection and input mapping."""

import random

from config import CHARACTERS
from engine.controls import command_for_key, parse_command
from engine.game import Game
from engine.selector import CharacterSelector, default_characters
from models.actions import Command
from models.characters import CharacterProfile


def _make_selector(count: int = 3) -> CharacterSelector:
    """Helper to create a selector over ``count`` dummy characters."""
    return CharacterSelector(
        [CharacterProfile(name=f"c{i}", sprite=f"images/c{i}.png") for i in range(count)]
    )


class TestCharacterSelector:
    """Tests for CharacterSelector.handle_input()."""

    def test_default_roster(self):
        selector = CharacterSelector()
        assert [c.name for c in selector.characters] == [name for name, _ in CHARACTERS]
        assert selector.position == 0
        assert not selector.has_focus

    def test_right_and_left(self):
        selector = _make_selector()
        selector.handle_input(Command.RIGHT)
        selector.handle_input("right")
        assert selector.position == 2
        selector.handle_input(Command.LEFT)
        assert selector.position == 1

    def test_clamped_without_wraparound(self):
        selector = _make_selector()
        selector.handle_input(Command.LEFT)
        assert selector.position == 0
        for _ in range(5):
            selector.handle_input(Command.RIGHT)
        assert selector.position == 2

    def test_enter_fires_with_current_character(self):
        selector = _make_selector()
        chosen = []
        selector.on_character_selected(chosen.append)
        selector.handle_input(Command.RIGHT)
        selector.handle_input(Command.ENTER)
        assert chosen == [selector.characters[1]]

    def test_callback_replaced(self):
        selector = _make_selector()
        first, second = [], []
        selector.on_character_selected(first.append)
        selector.on_character_selected(second.append)
        selector.handle_input(Command.ENTER)
        assert first == []
        assert len(second) == 1

    def test_enter_with_no_characters(self):
        selector = CharacterSelector([])
        chosen = []
        selector.on_character_selected(chosen.append)
        selector.handle_input(Command.ENTER)
        assert chosen == []

    def test_other_commands_ignored(self):
        selector = _make_selector()
        for command in (Command.UP, Command.DOWN, Command.HELP, "bogus", None):
            selector.handle_input(command)
        assert selector.position == 0


class TestGameSelection:
    """The Game's default selection handler."""

    def test_selection_sets_sprite_and_releases_focus(self):
        game = Game(rng=random.Random(0))
        game.restart()
        game.handle_input(Command.RIGHT)
        game.handle_input(Command.ENTER)
        assert game.player.sprite == default_characters()[1].sprite
        assert not game.character_selector.has_focus

    def test_input_goes_to_selector_while_focused(self):
        game = Game(rng=random.Random(0))
        game.restart()
        y = game.player.y
        game.handle_input(Command.UP)
        assert game.player.y == y

    def test_input_goes_to_player_after_selection(self):
        game = Game(rng=random.Random(0))
        game.restart()
        game.handle_input(Command.ENTER)
        y = game.player.y
        game.handle_input(Command.UP)
        assert game.player.y == y - 1


class TestControls:
    """Tests for key and name parsing."""

    def test_key_codes(self):
        assert command_for_key(37) == Command.LEFT
        assert command_for_key(38) == Command.UP
        assert command_for_key(39) == Command.RIGHT
        assert command_for_key(40) == Command.DOWN
        assert command_for_key(72) == Command.HELP
        assert command_for_key(13) == Command.ENTER
        assert command_for_key(80) == Command.PAUSE
        assert command_for_key(81) == Command.QUIT

    def test_unbound_key(self):
        assert command_for_key(65) is None

    def test_custom_bindings(self):
        assert command_for_key(87, {87: "up"}) == Command.UP
        assert command_for_key(38, {87: "up"}) is None

    def test_parse_command(self):
        assert parse_command("Pause") == Command.PAUSE
        assert parse_command(Command.QUIT) == Command.QUIT
        assert parse_command("fly") is None
        assert parse_command(None) is None
        assert parse_command(5) is None
