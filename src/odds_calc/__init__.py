"""
odds-calc - Small Numeric Utilities

- Standard deviation <-> percentile conversion under the standard normal
- Harmonic-sum "1 of n" rarity estimate
- French one-year mortality, expected age of death and days left

Author: odds-calc contributors
License: MIT
"""

__version__ = "0.1.0"
__author__ = "odds-calc contributors"

from .normal import (
    ConversionMode,
    StdConversion,
    convert_std,
    std_to_percent,
    percent_to_std,
    rarity_to_std,
)

from .harmonic import (
    harmonic_number,
    reimann_zeta,
)

from .mortality import (
    Gender,
    AgeError,
    TooOldError,
    age_now,
    mortality_rate_fr,
    get_qx,
    die_next_year_france,
    expected_age_of_death,
    days_left,
)

__all__ = [
    # Normal distribution
    "ConversionMode",
    "StdConversion",
    "convert_std",
    "std_to_percent",
    "percent_to_std",
    "rarity_to_std",

    # Harmonic
    "harmonic_number",
    "reimann_zeta",

    # Mortality
    "Gender",
    "AgeError",
    "TooOldError",
    "age_now",
    "mortality_rate_fr",
    "get_qx",
    "die_next_year_france",
    "expected_age_of_death",
    "days_left",
]
