"""
tests/test_normal.py - Std / Percentile Converter Tests

Covers the three branches of convert_std:
1. v < 20        std count -> two-tailed percentage and '1 in N' odds
2. 20 <= v < 100 two-tailed confidence percent -> z-score
3. v >= 100      one-sided rarity -> z-score

Author: odds-calc contributors
License: MIT
"""

import math
import pytest

from odds_calc.formatting import format_percent, round_half_away
from odds_calc.normal import (
    ConversionMode,
    convert_std,
    percent_to_std,
    rarity_to_std,
    std_to_percent,
)


class TestStdToPercent:
    """v < 20: mass of the standard normal inside [-v, v]."""

    def test_zero_std_is_empty_interval(self):
        result = convert_std(0.0)

        assert result.mode is ConversionMode.STD_TO_PERCENT
        assert result.percent == 0.0, f"Expected 0% mass at 0 std, got {result.percent}"
        assert result.odds == 2
        assert result.render() == "0% (1 in 2)"

    def test_196_std_is_95_percent(self):
        result = std_to_percent(1.959964)

        assert result.percent == pytest.approx(0.95, abs=1e-6)
        assert result.odds == 40

    def test_one_std(self):
        result = std_to_percent(1.0)

        assert result.percent == pytest.approx(0.682689, abs=1e-6)
        assert result.odds == 6

    def test_large_std_keeps_finite_odds(self):
        """Mass rounds to 1.0 but the tail is still resolved through sf()."""
        result = convert_std(10.0)

        assert result.percent == pytest.approx(1.0)
        assert result.odds > 10 ** 20
        assert result.render().startswith("100% (1 in ")

    def test_mass_increases_with_std(self):
        masses = [std_to_percent(v).percent for v in (0.5, 1.0, 2.0, 3.0)]
        assert masses == sorted(masses)


class TestPercentToStd:
    """20 <= v < 100: symmetric two-tailed confidence level."""

    @pytest.mark.parametrize("percent, expected", [
        (20.0, 0.3),
        (50.0, 0.7),
        (95.0, 2.0),
        (99.0, 2.6),
    ])
    def test_known_quantiles(self, percent, expected):
        result = convert_std(percent)

        assert result.mode is ConversionMode.PERCENT_TO_STD
        assert result.z_score == expected, \
            f"{percent}% should map to {expected} std, got {result.z_score}"

    def test_render_is_bare_z(self):
        assert percent_to_std(50.0).render() == "0.7"


class TestRarityToStd:
    """v >= 100: one-sided '1 in v' events."""

    @pytest.mark.parametrize("denominator, expected", [
        (100.0, 2.3),
        (1000.0, 3.1),
        (1e6, 4.8),
    ])
    def test_known_quantiles(self, denominator, expected):
        result = convert_std(denominator)

        assert result.mode is ConversionMode.RARITY_TO_STD
        assert result.z_score == expected

    def test_huge_denominator_stays_finite(self):
        result = rarity_to_std(1e300)
        assert math.isfinite(result.z_score)


class TestInvalidInput:

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            convert_std(value)


class TestFormatting:

    def test_round_half_away_from_zero(self):
        assert round_half_away(2.25, 1) == 2.3
        assert round_half_away(-2.25, 1) == -2.3
        assert round_half_away(0.04, 1) == 0.0

    def test_format_percent(self):
        assert format_percent(1.0) == "100%"
        assert format_percent(0.0033) == "0.33%"
        assert format_percent(0.1859) == "18.59%"
