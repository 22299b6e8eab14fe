from portfolio_blend.models.allocation import (
    AllocationEntry,
    GoalInterpretation,
    OptimizeRequest,
    OptimizeResponse,
    PortfolioStats,
)
from portfolio_blend.models.market import HistoryPoint, Quote

__all__ = [
    "AllocationEntry",
    "GoalInterpretation",
    "HistoryPoint",
    "OptimizeRequest",
    "OptimizeResponse",
    "PortfolioStats",
    "Quote",
]
