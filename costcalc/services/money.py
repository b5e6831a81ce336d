"""Money / rounding / parsing helpers.

Centralized so both calculators, the recalculation flow and the HTTP layer
use identical rounding semantics.

Rounding scales the raw float and rounds ties toward +infinity, so -0.5
becomes 0 and 1.005 (stored as 1.00499...) becomes 1.0.
"""

from __future__ import annotations
import math
import re
from typing import Protocol

from costcalc.core.errors import AmountOutOfRangeError

# Longest leading numeric prefix, after commas have been turned into dots
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def round_to(value: float, decimals: int) -> float:
    # floats this large carry no fractional digits
    if not math.isfinite(value) or abs(value) >= 2**53:
        return value
    scale = 10**decimals
    # + 0.0 folds -0.0 into 0.0
    return math.floor(value * scale + 0.5) / scale + 0.0


def round2(value: float) -> float:
    return round_to(value, 2)


def ensure_finite(value: float, what: str = "amount") -> float:
    if not math.isfinite(value):
        raise AmountOutOfRangeError(value, what)
    return value


def parse_decimal(text: str | None) -> float:
    """Parse user-typed numbers accepting ``,`` as decimal separator.

    Mirrors browser ``parseFloat``: leading whitespace is skipped and trailing
    garbage ignored ("12abc" -> 12.0). Returns ``nan`` when no number starts
    the string; callers coalesce that with :func:`or_default`.
    """
    if text is None:
        return math.nan
    m = _NUMERIC_PREFIX.match(text.replace(",", ".").lstrip())
    if not m:
        return math.nan
    return float(m.group(0).replace("Infinity", "inf"))


def or_default(value: float, default: float) -> float:
    """Return `default` for falsy numbers (nan and zero)."""
    if math.isnan(value) or value == 0:
        return default
    return value


def nan_to_zero(value: float) -> float:
    return 0.0 if math.isnan(value) else value


class AmountFormatter(Protocol):
    def __call__(self, value: float) -> str: ...


def make_formatter(decimals: int) -> AmountFormatter:
    """Grouping formatter with a fixed number of decimals ("1,234.50")."""

    def _format(value: float) -> str:
        if not math.isfinite(value):
            return "-"
        return f"{round_to(value, decimals):,.{decimals}f}"

    return _format
