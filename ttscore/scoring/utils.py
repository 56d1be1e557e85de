"""
Decimal Utilities
ttscore/scoring/utils.py

Precision-safe rounding for means and their display.
"""

from decimal import Decimal, ROUND_HALF_UP


def to_decimal(value) -> Decimal:
    """Convert int/float/str to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_away(value: Decimal) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Decimal's ROUND_HALF_UP is "away from zero" (2.5 -> 3, -2.5 -> -3).
    """
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_one_decimal(value: Decimal) -> str:
    """Format with exactly one decimal place, half-up (20 -> '20.0')."""
    return str(to_decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
