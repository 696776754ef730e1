"""Pre-game character selection."""

from __future__ import annotations

import logging
from collections.abc import Callable

from config import CHARACTERS
from engine.controls import parse_command
from models.actions import Command
from models.characters import CharacterProfile

logger = logging.getLogger(__name__)


def default_characters() -> list[CharacterProfile]:
    """The configured roster, in display order."""
    return [CharacterProfile(name=name, sprite=sprite) for name, sprite in CHARACTERS]


class CharacterSelector:
    """Lets the user scroll through characters and confirm one."""

    def __init__(self, characters: list[CharacterProfile] | None = None) -> None:
        self.characters = default_characters() if characters is None else characters
        self.position = 0
        self.has_focus = False
        self._on_selected: Callable[[CharacterProfile], None] = lambda _c: None

    @property
    def current(self) -> CharacterProfile | None:
        if 0 <= self.position < len(self.characters):
            return self.characters[self.position]
        return None

    def on_character_selected(self, callback: Callable[[CharacterProfile], None]) -> None:
        """Set the handler fired on ``enter``, replacing any earlier one."""
        self._on_selected = callback

    def handle_input(self, command: Command | str | None) -> None:
        """Move the selection (clamped, no wraparound) or confirm it."""
        command = parse_command(command)
        if command == Command.LEFT:
            if self.position > 0:
                self.position -= 1
        elif command == Command.RIGHT:
            if self.position < len(self.characters) - 1:
                self.position += 1
        elif command == Command.ENTER:
            character = self.current
            if character is not None:
                logger.debug("selected %s", character.name)
                self._on_selected(character)
