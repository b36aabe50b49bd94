"""
odds_calc/formatting.py - Output Line Formatting

Every subcommand prints exactly one line; these helpers keep the number
rendering consistent between them.

Author: odds-calc contributors
License: MIT
"""

import math


def format_percent(probability: float, digits: int = 6) -> str:
    """
    Render a probability as a percentage string.

    Args:
        probability: Value in [0, 1] (not enforced)
        digits: Significant digits kept

    Returns:
        e.g. 0.0033 -> '0.33%', 0.95 -> '95%'
    """
    return f"{probability * 100:.{digits}g}%"


def round_half_away(value: float, decimals: int = 1) -> float:
    """Round with ties going away from zero (2.25 -> 2.3, -2.25 -> -2.3)."""
    factor = 10 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def format_odds(odds: int) -> str:
    """'1 in N' with thousands separators."""
    return f"1 in {odds:,}"
