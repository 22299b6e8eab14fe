"""Portfolio-level return and risk aggregation.

Return series of different lengths are aligned by truncating every series to
the shortest common length, keeping the most recent observations. A symbol
whose series is empty cannot be aligned at all: it contributes a zero mean
return and enters the covariance matrix with the default volatility squared
on its diagonal and no covariance with the other symbols.
"""

import logging
from collections.abc import Mapping, Sequence

import numpy as np

from portfolio_blend.config import DEFAULT_VOLATILITY
from portfolio_blend.models.allocation import PortfolioStats

logger = logging.getLogger(__name__)


def _has_returns(returns_by_symbol: Mapping[str, Sequence[float]], symbol: str) -> bool:
    return len(returns_by_symbol.get(symbol, ())) > 0


def align_returns(series: Sequence[Sequence[float]]) -> np.ndarray:
    """Stack non-empty *series* into an (assets x periods) array.

    Each row keeps the trailing ``min(len)`` observations of its series.
    """
    if not series:
        return np.empty((0, 0))
    length = min(len(s) for s in series)
    if length == 0:
        raise ValueError("Cannot align an empty return series")
    return np.array([list(s)[-length:] for s in series], dtype=float)


def covariance_matrix(
    returns_by_symbol: Mapping[str, Sequence[float]],
    symbols: Sequence[str],
    default_volatility: float = DEFAULT_VOLATILITY,
) -> np.ndarray:
    """Population covariance (divisor = count) between symbols' returns."""
    n = len(symbols)
    cov = np.zeros((n, n))
    measured = [i for i, s in enumerate(symbols) if _has_returns(returns_by_symbol, s)]
    unmeasured = [i for i in range(n) if i not in measured]

    if measured:
        aligned = align_returns([returns_by_symbol[symbols[i]] for i in measured])
        sub = np.atleast_2d(np.cov(aligned, bias=True))
        cov[np.ix_(measured, measured)] = sub

    for i in unmeasured:
        logger.debug("No returns for %s, using default variance", symbols[i])
        cov[i, i] = default_volatility**2

    return cov


def compute_stats(
    weights: Mapping[str, float],
    returns_by_symbol: Mapping[str, Sequence[float]],
    default_volatility: float = DEFAULT_VOLATILITY,
) -> PortfolioStats:
    if not weights:
        return PortfolioStats()

    symbols = list(weights)
    w = np.array([weights[s] for s in symbols], dtype=float)

    means = np.array(
        [
            float(np.mean(returns_by_symbol[s]))
            if _has_returns(returns_by_symbol, s)
            else 0.0
            for s in symbols
        ]
    )
    expected_return = float(w @ means)

    cov = covariance_matrix(returns_by_symbol, symbols, default_volatility)
    variance = float(w @ cov @ w)
    # rounding can push a near-zero variance negative
    expected_volatility = max(0.0, variance) ** 0.5

    return PortfolioStats(
        expected_return=expected_return,
        expected_volatility=expected_volatility,
    )
