"""One-decimal score formatting shared by every scoring path."""

from __future__ import annotations

import re
from decimal import Decimal, ROUND_HALF_UP

_ONE_DECIMAL = Decimal("0.1")
_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def format_score(value: float) -> str:
    """Format ``value`` with exactly one fractional digit.

    Rounds the exact binary value half-up, same as ``toFixed(1)`` in the web
    client (4.25 -> "4.3", 4.35 -> "4.3").
    """
    return str(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def parse_score(score: str | None) -> float:
    """Read the leading number of a score string, like ``parseFloat``.

    Trailing text is ignored ("4.5/5" reads as 4.5). Empty input, or input
    with no leading number ("inf", "n/a"), reads as 0.
    """
    if not score:
        return 0.0
    match = _LEADING_NUMBER.match(score)
    if match is None:
        return 0.0
    return float(match.group(1))
