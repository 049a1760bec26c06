"""Conversion between size literals (``"10MB"``) and byte counts."""

from __future__ import annotations

from .errors import SizeParseError

KILOBYTE = 1024
MEGABYTE = KILOBYTE * 1024
GIGABYTE = MEGABYTE * 1024
TERABYTE = GIGABYTE * 1024

UNITS: dict[str, int] = {
    "kb": KILOBYTE,
    "mb": MEGABYTE,
    "gb": GIGABYTE,
    "tb": TERABYTE,
}


def parse_size(text: str) -> int:
    """
    Convert a size literal to a number of bytes.

    The last two characters are the unit (kb, mb, gb, tb; case-insensitive,
    1024-based) and the rest must be a float literal. Strings of two
    characters or fewer yield 0 without an error.

    Args:
        text: Size literal, e.g. ``"10MB"`` or ``"2.5gb"``

    Returns:
        Byte count, truncated to an integer

    Raises:
        SizeParseError: If the unit is unknown or the magnitude is not a number
    """
    if len(text) <= 2:
        return 0

    magnitude, unit = text[:-2], text[-2:].lower()
    if magnitude != magnitude.strip() or "_" in magnitude:
        raise SizeParseError(f"invalid magnitude {magnitude!r}")
    try:
        value = float(magnitude)
    except ValueError as e:
        raise SizeParseError(f"invalid magnitude {magnitude!r}") from e

    multiplier = UNITS.get(unit)
    if multiplier is None:
        raise SizeParseError(f"incorrect data unit {unit}")

    try:
        return int(value * multiplier)
    except (OverflowError, ValueError) as e:
        raise SizeParseError(f"size out of range {text!r}") from e


def format_size(num_bytes: int) -> str:
    """Render a byte count with the largest fitting unit, e.g. ``"10.00MB"``."""
    unit, multiplier = "KB", KILOBYTE
    for name, size in UNITS.items():
        if abs(num_bytes) >= size:
            unit, multiplier = name.upper(), size
    return f"{num_bytes / multiplier:.2f}{unit}"
