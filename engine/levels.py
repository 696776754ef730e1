"""Level descriptor parsing and encoding for Riverhop."""

from __future__ import annotations

from config import LEVELS
from models.level import Block, Item, LevelDescriptor


class InvalidLevelError(ValueError):
    """Raised when a level descriptor string cannot describe a board."""


def parse_level(descriptor: str) -> LevelDescriptor:
    """Parse a colon-delimited level descriptor.

    Format is ``width:height:roads:blocks[:items]`` where ``roads`` is a
    comma-separated list of row indices (may be empty), ``blocks`` is a
    string over ``G``/``S``/``W`` and ``items`` a string over
    ``n``/``b``/``g``/``o``/``h``/``k``/``r``/``s``, both of length
    ``width * height`` in row-major order.

    Args:
        descriptor: The level string, e.g. "5:3:1:GGGGGSSSSSGGGGG".

    Returns:
        The parsed LevelDescriptor.

    Raises:
        InvalidLevelError: If any field is malformed or the dimensions disagree.
    """
    fields = descriptor.strip().split(":")
    if len(fields) not in (4, 5):
        raise InvalidLevelError(
            f"Expected 4 or 5 ':'-separated fields, got {len(fields)}"
        )

    width = _parse_int(fields[0], "width")
    height = _parse_int(fields[1], "height")
    if width <= 0 or height <= 0:
        raise InvalidLevelError(f"Board size must be positive, got {width}x{height}")

    roads: list[int] = []
    if fields[2]:
        for raw in fields[2].split(","):
            road = _parse_int(raw, "road")
            if not 0 <= road < height:
                raise InvalidLevelError(f"Road row {road} is outside 0..{height - 1}")
            roads.append(road)

    size = width * height
    blocks = _parse_cells(fields[3], size, Block, "blocks")
    items = _parse_cells(fields[4], size, Item, "items") if len(fields) == 5 else None

    return LevelDescriptor(
        width=width,
        height=height,
        roads=tuple(roads),
        blocks=blocks,
        items=items,
    )


def encode_level(
    width: int,
    height: int,
    roads: tuple[int, ...] | list[int],
    blocks: tuple[Block, ...] | list[Block],
    items: tuple[Item, ...] | list[Item] | None = None,
) -> str:
    """Encode board contents back into the descriptor wire format."""
    parts = [
        str(width),
        str(height),
        ",".join(str(r) for r in roads),
        "".join(b.value for b in blocks),
    ]
    if items is not None:
        parts.append("".join(i.value for i in items))
    return ":".join(parts)


def load_levels(descriptors: list[str] | None = None) -> list[LevelDescriptor]:
    """Parse a list of descriptors, defaulting to the shipped levels."""
    return [parse_level(d) for d in (LEVELS if descriptors is None else descriptors)]


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidLevelError(f"Invalid {name} value: {raw!r}") from None


def _parse_cells(raw: str, size: int, kind: type, name: str) -> tuple:
    if len(raw) != size:
        raise InvalidLevelError(
            f"{name} must have {size} symbols, got {len(raw)}"
        )
    try:
        return tuple(kind(symbol) for symbol in raw)
    except ValueError:
        bad = next(s for s in raw if s not in {m.value for m in kind})
        raise InvalidLevelError(f"Unknown {name} symbol: {bad!r}") from None
