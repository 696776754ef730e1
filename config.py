"""Game-wide configuration constants for Riverhop."""

import os

MIN_ENEMY_SPEED = 1            # Columns per second, before the first level ramp
MAX_ENEMY_SPEED = 5
MAX_LIVES = 3
EFFECT_DURATION_SECONDS = 1.0  # How long timed item effects last
HIT_TOLERANCE = 0.1            # Max |enemy.x - player.x| counted as a hit
DEFAULT_FPS = 60
LOG_LEVEL = os.environ.get("RIVERHOP_LOG_LEVEL", "WARNING")

# width:height:roads:blocks:items, row-major
LEVELS = [
    "5:3:1:GGGGGSSSSSGGGGG:nnnnnnnnnnnnnnn",
    "5:5:2,3:GGGGGWSWSWSSSSSSSSSSGGGGG:nnnnnnnnnnnnnnnngnnnnnnnn",
    "6:6:1,4:GGGGGGSSSSSSWWWWWWWWWWWWSSSSSSGGGGGG:nnnnnnnnnnnnnnnnnnnnnnnnnnnnrnnnnnnn",
    "5:6:2,3,4:GGGGGWWSWWSSSSSSSSSSSSSSSGGGGG:nnnnnnnnnnnnnnnnbnnnnnnnnnnnnn",
    "5:6:1,3,4:GGGGGSSSSSSSWSSSSSSSSSSSSGGGGG:nnnnnnnnnnngnbnnnnnnnnnnnnnnnn",
    "7:7:1,2,3,5:GGGGGGGSSSSSSSSSSSSSSSSSSSSSWWWSWWWSSSSSSSGGGGGGG:"
    "nnnnnnnnnnnnnnnnnnnnnnnnnnnnsnnnnnnnnrnnnnnnnnnnn",
    "5:5:1,3:GGGGGSSSSSSWSWSSSSSSGGGGG:nnnnnnnnnnnnnnnnnnnnnnnnn",
    "6:7:1,5:GGGGGGSSSSSSWSWSWSSWSWSWWSWSWSSSSSSSGGGGGG:nnnnnnnnnnnnnnnnnnnnnnnnnrnnnnnnnnnnnnnnnn",
    "5:5:1,2,3:WGWGWSSSSSSSSSSSSSSSGGGGG:nnnnnnnnnnnnnnnnnnnnnnnnn",
    "8:7:1,3,5:GGWWWWGGSSSSSSSSWWSSWWSSSSSSSSSSSSWWSSWWSSSSSSSSGGGGGGGG:"
    "nnnnnnnnnnnnnnnnnnnnnnngnnnnsnnnbnnnnnnnnnnnnnnnnnnnnnnn",
]

# (name, sprite) pairs offered by the character selector, in display order
CHARACTERS = [
    ("boy", "images/char-boy.png"),
    ("cat-girl", "images/char-cat-girl.png"),
    ("horn-girl", "images/char-horn-girl.png"),
    ("pink-girl", "images/char-pink-girl.png"),
    ("princess-girl", "images/char-princess-girl.png"),
]
DEFAULT_SPRITE = CHARACTERS[0][1]
ENEMY_SPRITE = "images/enemy-bug.png"

# Keyboard key codes -> logical command names
KEY_BINDINGS = {
    37: "left",
    38: "up",
    39: "right",
    40: "down",
    72: "help",
    13: "enter",
    80: "pause",
    81: "quit",
}
