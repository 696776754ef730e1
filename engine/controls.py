"""Mapping raw input into logical commands."""

from __future__ import annotations

from config import KEY_BINDINGS
from models.actions import Command


def command_for_key(key_code: int, bindings: dict[int, str] | None = None) -> Command | None:
    """Translate a keyboard key code into a Command.

    Args:
        key_code: Raw key code from the input device.
        bindings: Key code -> command name table; defaults to config.KEY_BINDINGS.

    Returns:
        The Command, or None for unbound keys.
    """
    name = (KEY_BINDINGS if bindings is None else bindings).get(key_code)
    return parse_command(name)


def parse_command(value: Command | str | None) -> Command | None:
    """Coerce a command name into a Command; None if it is not one."""
    if value is None or isinstance(value, Command):
        return value
    try:
        return Command(value.strip().lower())
    except (AttributeError, ValueError):
        return None
