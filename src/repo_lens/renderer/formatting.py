"""Pure formatting helpers for sizes, shares and line counts.

Rounding is half-up (``Decimal.quantize``) so ``0.125`` shows as ``0.13``
the way a browser's ``Math.round``/``toFixed`` pair would, rather than
Python's round-half-even.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

BYTE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB")
_KIB = 1024
_TWO_PLACES = Decimal("0.01")
# Swedish digit grouping.
THOUSANDS_SEPARATOR = "\u00a0"


def format_bytes(num_bytes: int) -> str:
    """Return *num_bytes* as ``"<value> <unit>"`` with at most two decimals.

    >>> format_bytes(0)
    '0 Bytes'
    >>> format_bytes(1536)
    '1.5 KB'
    """
    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative, got {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"

    unit = 0
    scaled = Decimal(num_bytes)
    while scaled >= _KIB and unit < len(BYTE_UNITS) - 1:
        scaled /= _KIB
        unit += 1

    value = scaled.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    text = f"{value:f}".rstrip("0").rstrip(".")
    return f"{text} {BYTE_UNITS[unit]}"


def percentage(part: int, total: int) -> str:
    """Share of *part* in *total* as a two-decimal string, e.g. ``"60.00"``.

    A zero *total* yields ``"0.00"`` instead of a division error.
    """
    if total <= 0:
        return "0.00"
    share = Decimal(part) * 100 / Decimal(total)
    return f"{share.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP):f}"


def bar_width(percent: str) -> str:
    """Clamp a percentage string to the 0-100 range usable as a CSS width."""
    value = min(max(Decimal(percent), Decimal(0)), Decimal(100))
    return f"{value.quantize(_TWO_PLACES):f}"


def format_lines(lines: int) -> str:
    """Group thousands, e.g. ``1234567 -> "1 234 567"`` (non-breaking spaces)."""
    return f"{lines:,}".replace(",", THOUSANDS_SEPARATOR)
