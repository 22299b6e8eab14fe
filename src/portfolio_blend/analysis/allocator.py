import logging
from collections.abc import Mapping, Sequence

from portfolio_blend.analysis.returns import compute_returns, volatility_map
from portfolio_blend.analysis.statistics import compute_stats
from portfolio_blend.analysis.universe import normalize_risk, risk_percent
from portfolio_blend.analysis.weighting import (
    blend_allocations,
    defensive_subset_size,
    inverse_volatility_weights,
    rank_allocations,
    select_lowest_volatility,
)
from portfolio_blend.config import AllocationConfig
from portfolio_blend.data.market_data import MarketDataProvider
from portfolio_blend.errors import InvalidUniverseError
from portfolio_blend.models.allocation import OptimizeRequest, OptimizeResponse

logger = logging.getLogger(__name__)


class PortfolioAllocator:
    """Blend an inverse-volatility core with its low-volatility subset."""

    def __init__(self, config: AllocationConfig | None = None) -> None:
        self.config = config or AllocationConfig()

    def allocate(
        self,
        returns_by_symbol: Mapping[str, Sequence[float]],
        risk: float,
    ) -> OptimizeResponse:
        universe = list(returns_by_symbol)
        if not universe:
            raise InvalidUniverseError("At least one symbol is required")

        cfg = self.config
        risk = normalize_risk(
            risk, low=cfg.min_risk, high=cfg.max_risk, default=cfg.default_risk
        )

        vols = volatility_map(
            returns_by_symbol,
            floor=cfg.volatility_floor,
            default=cfg.default_volatility,
        )
        k = defensive_subset_size(len(universe), cfg.min_defensive_size)
        full = inverse_volatility_weights(vols)
        defensive = inverse_volatility_weights(select_lowest_volatility(vols, k))
        weights = blend_allocations(full, defensive, risk, universe)
        logger.debug("Defensive subset: %s", ", ".join(defensive))

        stats = compute_stats(
            weights, returns_by_symbol, default_volatility=cfg.default_volatility
        )

        return OptimizeResponse(
            allocations=rank_allocations(weights),
            expected_return=stats.expected_return,
            expected_volatility=stats.expected_volatility,
            rationale=build_rationale(risk, universe),
        )


def build_rationale(risk: float, universe: Sequence[str]) -> str:
    return "\n".join(
        [
            "Inverse-volatility core blended with low-vol subset "
            f"based on risk {risk_percent(risk)}%.",
            f"Universe: {', '.join(universe)}.",
            "Objective: diversify across uncorrelated assets "
            "and downweight volatile names.",
        ]
    )


async def run_optimization(
    request: OptimizeRequest,
    provider: MarketDataProvider,
    config: AllocationConfig | None = None,
) -> OptimizeResponse:
    """Fetch every history, then allocate.

    A failed fetch propagates as ``DataUnavailableError`` and the engine is
    never invoked.
    """
    histories = await provider.fetch_histories(request.symbols)
    returns = {sym: compute_returns(h) for sym, h in histories.items()}
    allocator = PortfolioAllocator(config or provider.config)
    return allocator.allocate(returns, request.risk)
