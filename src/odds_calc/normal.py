"""
odds_calc/normal.py - Standard Deviation <-> Percentile Converter

One scalar input, three interpretations chosen by its magnitude:

- v < 20:        v standard deviations -> two-tailed mass within [-v, v]
                 mass = Φ(v) - Φ(-v), odds of landing outside = 1 in round(2 / (1 - mass))
- 20 <= v < 100: v percent two-tailed confidence -> z = Φ⁻¹(1 - (100 - v) / 200)
- v >= 100:      one-sided rarity "1 in v" -> z = Φ⁻¹(1 - 1/v)

Upper tails are evaluated through the survival function (and its inverse)
so neither the odds nor the z-score blow up as the tail vanishes.

Author: odds-calc contributors
License: MIT
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

from scipy.stats import norm

from .formatting import format_odds, format_percent, round_half_away

logger = logging.getLogger(__name__)


# Branch thresholds
STD_UPPER = 20.0
PERCENT_UPPER = 100.0


class ConversionMode(Enum):
    """How the input value was interpreted."""
    STD_TO_PERCENT = "std_to_percent"
    PERCENT_TO_STD = "percent_to_std"
    RARITY_TO_STD = "rarity_to_std"


@dataclass(frozen=True)
class StdConversion:
    """Result of a single std/percent conversion."""
    value: float
    mode: ConversionMode
    percent: Optional[float] = None  # two-tailed mass, as a fraction
    odds: Optional[int] = None       # 1 in N outside the interval
    z_score: Optional[float] = None  # rounded to one decimal

    def render(self) -> str:
        if self.mode is ConversionMode.STD_TO_PERCENT:
            return f"{format_percent(self.percent)} ({format_odds(self.odds)})"
        return f"{self.z_score}"


def std_to_percent(std: float) -> StdConversion:
    """
    Probability mass of the standard normal within [-std, std].

    Args:
        std: Number of standard deviations

    Returns:
        StdConversion with percent (fraction) and the '1 in N' odds of
        falling outside the interval
    """
    mass = norm.cdf(std) - norm.cdf(-std)
    # 1 - mass == 2 * sf(std), exact even where mass rounds to 1.0
    outside = 2.0 * norm.sf(std)
    odds = int(round(2.0 / outside))

    logger.debug(f"std_to_percent: std={std}, mass={mass:.12g}, outside={outside:.6g}")
    return StdConversion(
        value=std,
        mode=ConversionMode.STD_TO_PERCENT,
        percent=float(mass),
        odds=odds,
    )


def percent_to_std(percent: float) -> StdConversion:
    """
    z-score bounding a symmetric two-tailed confidence level.

    Args:
        percent: Confidence level in percent, e.g. 95

    Returns:
        StdConversion with z_score rounded to one decimal
    """
    tail = (PERCENT_UPPER - percent) / 200.0
    z = norm.isf(tail)
    logger.debug(f"percent_to_std: percent={percent}, tail={tail:.6g}, z={z:.6f}")
    return StdConversion(
        value=percent,
        mode=ConversionMode.PERCENT_TO_STD,
        z_score=round_half_away(float(z), 1),
    )


def rarity_to_std(denominator: float) -> StdConversion:
    """
    One-sided z-score for a '1 in denominator' event.

    Args:
        denominator: Rarity, e.g. 1000 for a 1-in-1000 event

    Returns:
        StdConversion with z_score rounded to one decimal
    """
    z = norm.isf(1.0 / denominator)
    logger.debug(f"rarity_to_std: 1 in {denominator}, z={z:.6f}")
    return StdConversion(
        value=denominator,
        mode=ConversionMode.RARITY_TO_STD,
        z_score=round_half_away(float(z), 1),
    )


def convert_std(value: float) -> StdConversion:
    """
    Dispatch to the conversion matching the magnitude of value.

    Raises:
        ValueError: value is nan or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite value: {value}")

    if value < STD_UPPER:
        return std_to_percent(value)
    elif value < PERCENT_UPPER:
        return percent_to_std(value)
    else:
        return rarity_to_std(value)
