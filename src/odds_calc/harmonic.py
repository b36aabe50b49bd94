"""
odds_calc/harmonic.py - Harmonic-Sum Rarity Estimator ("Reimann Zeta")

Heuristic expected share of being the single pick out of n ranked candidates:

    H(n)  = Σ_{i=1}^{n} 1/i
    value = (1 / positions) / H(n)

Author: odds-calc contributors
License: MIT
"""

import numpy as np
import logging

logger = logging.getLogger(__name__)


# Largest n accepted (unsigned 64-bit)
MAX_N = 2 ** 64 - 1

# Above this n the asymptotic expansion is exact to double precision
# and avoids allocating an n-element array.
DIRECT_SUM_LIMIT = 1_000_000


def harmonic_number(n: int) -> float:
    """
    n-th harmonic number H(n).

    Args:
        n: Number of terms (>= 1)

    Returns:
        Σ 1/i for i = 1..n
    """
    if n < 1:
        raise ValueError(f"Harmonic number needs n >= 1, got {n}")
    if n > MAX_N:
        raise ValueError(f"Harmonic number needs n <= {MAX_N}, got a {len(str(n))}-digit n")

    if n <= DIRECT_SUM_LIMIT:
        # Sum smallest terms first
        return float(np.sum(1.0 / np.arange(n, 0, -1, dtype=np.float64)))

    n = float(n)
    return float(
        np.log(n) + np.euler_gamma
        + 1.0 / (2.0 * n)
        - 1.0 / (12.0 * n ** 2)
        + 1.0 / (120.0 * n ** 4)
    )


def reimann_zeta(n: int, positions: int = 1) -> float:
    """
    Expected value of '1 of n', spread over a number of positions.

    Args:
        n: Size of the field
        positions: Number of positions sharing the pick

    Returns:
        Probability as a fraction (1.0 == 100%)

    Raises:
        ValueError: n or positions below 1
    """
    if positions < 1:
        raise ValueError(f"positions must be >= 1, got {positions}")

    h_n = harmonic_number(n)
    value = (1.0 / positions) / h_n

    logger.debug(f"reimann_zeta: n={n}, positions={positions}, H(n)={h_n:.12g}, value={value:.12g}")
    return value
