"""Round-size parsing."""
from __future__ import annotations

import math
from typing import Any

from tick_recall.types import InvalidCountError


def parse_count(raw: Any, lo: int = 3, hi: int = 7) -> int:
    """Parse a player-entered round size.

    Accepts ints and numeric strings whose value is a whole number in
    ``[lo, hi]`` (``"4"`` and ``"4.0"`` both give 4). Raises
    ``InvalidCountError`` for anything else.
    """
    if isinstance(raw, bool):
        raise InvalidCountError(raw, f"Expected a number, got {raw!r}")
    if isinstance(raw, int):
        value: float = raw
    elif isinstance(raw, (float, str)):
        text = raw.strip() if isinstance(raw, str) else raw
        if text == "":
            raise InvalidCountError(raw, "Round size is empty")
        try:
            value = float(text)
        except ValueError:
            raise InvalidCountError(raw, f"Not a number: {raw!r}") from None
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidCountError(raw, f"Not a whole number: {raw!r}")
    else:
        raise InvalidCountError(raw, f"Unsupported round size type {type(raw).__name__}")

    count = int(value)
    if not lo <= count <= hi:
        raise InvalidCountError(raw, f"Round size {count} outside [{lo}, {hi}]")
    return count
