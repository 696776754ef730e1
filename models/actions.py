"""Logical input commands for Riverhop."""

from enum import Enum


class Command(str, Enum):
    """Commands the engine understands, independent of the input device."""
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    HELP = "help"
    ENTER = "enter"                 # Confirm a character in the selector
    PAUSE = "pause"                 # Toggles pause/resume
    QUIT = "quit"                   # Back to the selector and restart
