import logging
from collections.abc import Mapping, Sequence

from portfolio_blend.config import MIN_DEFENSIVE_SIZE
from portfolio_blend.errors import InvalidUniverseError
from portfolio_blend.models.allocation import AllocationEntry

logger = logging.getLogger(__name__)


def defensive_subset_size(universe_size: int, minimum: int = MIN_DEFENSIVE_SIZE) -> int:
    return max(minimum, universe_size // 3)


def select_lowest_volatility(
    volatilities: Mapping[str, float], k: int
) -> dict[str, float]:
    """Restrict *volatilities* to its *k* calmest symbols.

    Equal volatilities are ordered by first appearance in the input, so the
    chosen subset never depends on sort stability.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    ranked = sorted(
        enumerate(volatilities.items()),
        key=lambda item: (item[1][1], item[0]),
    )
    return {sym: vol for _, (sym, vol) in ranked[:k]}


def inverse_volatility_weights(volatilities: Mapping[str, float]) -> dict[str, float]:
    if not volatilities:
        raise InvalidUniverseError("Cannot weight an empty universe")
    raw = {sym: 1.0 / vol for sym, vol in volatilities.items()}
    total = sum(raw.values())
    return {sym: w / total for sym, w in raw.items()}


def blend_allocations(
    full: Mapping[str, float],
    defensive: Mapping[str, float],
    risk_preference: float,
    universe: Sequence[str],
) -> dict[str, float]:
    """Interpolate between the full and defensive weightings.

    ``risk_preference`` of 1 returns *full*, 0 returns *defensive* (zero for
    symbols outside the subset). The result is renormalized over *universe*.
    """
    blended = {
        sym: full.get(sym, 0.0) * risk_preference
        + defensive.get(sym, 0.0) * (1 - risk_preference)
        for sym in universe
    }
    total = sum(blended.values())
    if total == 0:
        logger.debug("Blended weights sum to zero, leaving them unnormalized")
        total = 1.0
    return {sym: w / total for sym, w in blended.items()}


def rank_allocations(weights: Mapping[str, float]) -> list[AllocationEntry]:
    # sorted() is stable: ties keep universe order
    ordered = sorted(weights.items(), key=lambda item: -item[1])
    return [AllocationEntry(symbol=sym, weight=w) for sym, w in ordered]
