# liftlog/core/numeric.py
from __future__ import annotations
import math
from typing import Any

# Absolute tolerance for "did this value change" checks on weight/RIR.
EPSILON = 1e-9


def maybe_num(x: Any) -> float | None:
    """A finite float, or None for blanks, junk, NaN and infinities."""
    if isinstance(x, bool) or x is None:
        return None
    if isinstance(x, str):
        x = x.strip()
        if not x:
            return None
    try:
        n = float(x)
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


def safe_num(x: Any, fallback: float = 0.0) -> float:
    n = maybe_num(x)
    return fallback if n is None else n


def round_half_away(q: float) -> int:
    return math.floor(q + 0.5) if q >= 0 else -math.floor(-q + 0.5)


def round_to_increment(value: Any, inc: Any) -> float:
    v = safe_num(value, 0.0)
    i = safe_num(inc, 0.0)
    if i <= 0:
        return v
    return round_half_away(v / i) * i


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def format_num(n: Any) -> str:
    v = safe_num(n, 0.0)
    if abs(v - round(v)) < EPSILON:
        return str(int(round(v)))
    return str(round(v, 6))


def format_weight(weight: Any, unit: str) -> str:
    return f"{format_num(weight)}{unit}"
