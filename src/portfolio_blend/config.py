from pydantic import BaseModel, Field

DEFAULT_UNIVERSE: list[str] = ["VTI", "BND", "IAU"]

DEFAULT_TICKERS: list[str] = [
    "VTI",
    "VOO",
    "AAPL",
    "MSFT",
    "NVDA",
    "AMZN",
    "BND",
    "IAU",
    "TLT",
]

MIN_RISK = 0.1
MAX_RISK = 0.95
DEFAULT_RISK = 0.6

DEFAULT_VOLATILITY = 0.2  # placeholder for series with < 2 prices
VOLATILITY_FLOOR = 1e-6
MIN_DEFENSIVE_SIZE = 2


class AllocationConfig(BaseModel):
    default_universe: list[str] = Field(default_factory=lambda: DEFAULT_UNIVERSE.copy())

    min_risk: float = MIN_RISK
    max_risk: float = MAX_RISK
    default_risk: float = DEFAULT_RISK

    default_volatility: float = DEFAULT_VOLATILITY
    volatility_floor: float = VOLATILITY_FLOOR
    min_defensive_size: int = MIN_DEFENSIVE_SIZE

    history_period: str = "1y"
    history_interval: str = "1d"
    history_window: int = 260  # ~1 trading year

    max_workers: int = 4
