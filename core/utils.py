from __future__ import annotations

import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def leading_int(value: Any) -> int:
    """
    Parse the leading integer of a text cell: "34.9" -> 34, " 12kg" -> 12.
    Empty, missing or non-numeric text yields 0; never raises.
    """
    if value is None:
        return 0
    m = _LEADING_INT.match(str(value))
    if m is None:
        return 0
    return int(m.group(1))


def is_probability(value: Any) -> bool:
    """True for a real number (bools excluded) inside [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return 0.0 <= value <= 1.0


def format_percent(prob: float, decimals: int = 1) -> str:
    """0.2 -> '20.0%'."""
    return f"{prob * 100:.{decimals}f}%"
