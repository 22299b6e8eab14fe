import logging
from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd

from portfolio_blend.config import DEFAULT_VOLATILITY, VOLATILITY_FLOOR
from portfolio_blend.models.market import HistoryPoint

logger = logging.getLogger(__name__)


def compute_returns(history: Sequence[HistoryPoint]) -> list[float]:
    """Simple periodic returns between consecutive closes.

    Histories with fewer than two points yield an empty series.
    """
    if len(history) < 2:
        return []
    close = pd.Series([p.close for p in history], dtype=float)
    return [float(r) for r in close.pct_change(fill_method=None).iloc[1:]]


def estimate_volatility(
    returns: Sequence[float],
    floor: float = VOLATILITY_FLOOR,
    default: float = DEFAULT_VOLATILITY,
) -> float:
    """Population standard deviation of *returns*, floored at *floor*.

    An empty series has no measurable dispersion and reports *default*
    instead; treat that value as low confidence.
    """
    if len(returns) == 0:
        return default
    arr = np.asarray(returns, dtype=float)
    variance = float(np.mean((arr - arr.mean()) ** 2))
    return max(floor, variance**0.5)


def volatility_map(
    returns_by_symbol: Mapping[str, Sequence[float]],
    floor: float = VOLATILITY_FLOOR,
    default: float = DEFAULT_VOLATILITY,
) -> dict[str, float]:
    vols: dict[str, float] = {}
    for sym, returns in returns_by_symbol.items():
        if len(returns) == 0:
            logger.debug("No returns for %s, assuming volatility %.2f", sym, default)
        vols[sym] = estimate_volatility(returns, floor=floor, default=default)
    return vols
