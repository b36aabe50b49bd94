"""
odds_calc/mortality.py - French Period Mortality Lookup

Banded one-year death rates for France (per-mille, by sex) and the
quantities derived from them:

- q(x):               probability of dying within the next year = rate(x) / 1000
- Expected age death: Σ age_k × (1 - q) / Σ (1 - q), ages x..109
- Days left:          (expected age of death - x) × 365.25, truncated

Age is attained age on today's date, counting every birthday as June 15.

Author: odds-calc contributors
License: MIT
"""

import calendar
from datetime import date
from enum import Enum
from typing import Optional
import numpy as np
import logging

logger = logging.getLogger(__name__)


class Gender(Enum):
    """Table column selector."""
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, text: str) -> "Gender":
        """Case-insensitive parse of 'male' / 'female'."""
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid gender: {text!r} (expected 'male' or 'female')") from None


class AgeError(ValueError):
    """Attained age cannot be represented (future birth year or > MAX_REPRESENTABLE_AGE)."""


class TooOldError(ValueError):
    """Expected age of death already reached."""


# =============================================================================
# FRANCE ONE-YEAR MORTALITY (PER-MILLE)
# Bands are inclusive; BAND_UPPER[i] is the last age of band i.
# Ages outside [0, MAX_AGE] have no rate (0).
# =============================================================================

MAX_AGE = 110
MAX_REPRESENTABLE_AGE = 255
DAYS_PER_YEAR = 365.25

# June 15 is day 166 of a common year, 167 of a leap year
BIRTHDAY_ORDINAL = 166

BAND_UPPER = np.array([
    0, 4, 9, 14, 19, 24, 29, 34, 39, 44,
    49, 54, 59, 64, 69, 79, 89, 110,
], dtype=np.int64)

FRANCE_MALE = np.array([
    3.3, 0.2, 0.1, 0.1, 0.3,      # 0, 1-4, 5-9, 10-14, 15-19
    0.5, 0.7, 0.8, 1.1, 1.6,      # 20-24 .. 40-44
    2.7, 4.2, 6.7, 10.7, 15.6,    # 45-49 .. 65-69
    26.9, 79.6, 235.6,            # 70-79, 80-89, 90-110
], dtype=np.float64)

FRANCE_FEMALE = np.array([
    2.8, 0.2, 0.1, 0.1, 0.1,      # 0, 1-4, 5-9, 10-14, 15-19
    0.2, 0.2, 0.3, 0.5, 0.8,      # 20-24 .. 40-44
    1.4, 2.3, 3.4, 5.0, 7.2,      # 45-49 .. 65-69
    13.6, 51.7, 185.9,            # 70-79, 80-89, 90-110
], dtype=np.float64)

for _table in (BAND_UPPER, FRANCE_MALE, FRANCE_FEMALE):
    _table.setflags(write=False)


def _birthday_ordinal(year: int) -> int:
    return BIRTHDAY_ORDINAL + (1 if calendar.isleap(year) else 0)


def age_now(year: int, today: Optional[date] = None) -> int:
    """
    Attained age of someone born on June 15 of year.

    Args:
        year: Birth year
        today: Reference date (defaults to date.today())

    Returns:
        Age in whole years

    Raises:
        AgeError: age negative or above MAX_REPRESENTABLE_AGE
    """
    today = today or date.today()
    age = today.year - year
    if today.timetuple().tm_yday < _birthday_ordinal(year):
        age -= 1

    if not 0 <= age <= MAX_REPRESENTABLE_AGE:
        raise AgeError(f"Age {age} (born {year}) is out of range 0-{MAX_REPRESENTABLE_AGE}")
    return age


def mortality_rate_fr(age: int, gender: Gender) -> float:
    """
    Per-mille one-year death rate for an attained age.

    Args:
        age: Attained age
        gender: Gender.MALE or Gender.FEMALE

    Returns:
        Rate per thousand; 0.0 outside [0, MAX_AGE]
    """
    if age < 0 or age > MAX_AGE:
        return 0.0

    band = int(np.searchsorted(BAND_UPPER, age, side='left'))
    table = FRANCE_MALE if gender is Gender.MALE else FRANCE_FEMALE
    return float(table[band])


def get_qx(age: int, gender: Gender) -> float:
    """Probability of dying within the next year at an attained age."""
    return mortality_rate_fr(age, gender) / 1000.0


def die_next_year_france(year: int, gender: Gender = Gender.MALE,
                         today: Optional[date] = None) -> float:
    """
    Probability that someone born in year dies within the next twelve months.

    Args:
        year: Birth year
        gender: Table column
        today: Reference date

    Returns:
        Probability [0, 1]
    """
    age = age_now(year, today)
    qx = get_qx(age, gender)
    logger.info(f"Age {age} ({gender.value}): q = {qx:.6f}")
    return qx


def expected_age_of_death(year: int, gender: Gender = Gender.MALE,
                          today: Optional[date] = None,
                          rate_by_simulated_age: bool = False) -> float:
    """
    Survival-weighted mean age over the remaining years to MAX_AGE.

    Each step from the current age up to MAX_AGE - 1 is weighted by
    (1 - q), q being a probability (rate / 1000), so every weight is
    positive at any age in the table. By default q is the rate at the
    *current* age for every step, which makes the result the midpoint of
    [age, MAX_AGE - 1]; rate_by_simulated_age=True reads q at each
    stepped age instead.

    Args:
        year: Birth year
        gender: Table column
        today: Reference date
        rate_by_simulated_age: Re-read q for each simulated age

    Returns:
        Expected age of death in years

    Raises:
        ValueError: no weight accumulated (current age >= MAX_AGE)
    """
    current_age = age_now(year, today)
    current_qx = get_qx(current_age, gender)

    total_weight = 0.0
    total_age = 0.0
    for age in range(current_age, MAX_AGE):
        qx = get_qx(age, gender) if rate_by_simulated_age else current_qx
        weight = 1.0 - qx
        total_weight += weight
        total_age += age * weight

    if total_weight <= 0.0:
        raise ValueError("Failed to calculate expected age of death.")

    expected = total_age / total_weight
    logger.info(f"Expected age of death from age {current_age} ({gender.value}): {expected:.2f}")
    return expected


def days_left(year: int, gender: Gender = Gender.MALE,
              today: Optional[date] = None) -> int:
    """
    Days between today and the expected age of death.

    Raises:
        TooOldError: expected age of death <= current age
    """
    current_age = age_now(year, today)
    expected = expected_age_of_death(year, gender, today)

    if expected <= current_age:
        raise TooOldError("you are too old")

    remaining_years = expected - current_age
    return int(remaining_years * DAYS_PER_YEAR)
