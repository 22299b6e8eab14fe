from pydantic import BaseModel, ConfigDict, Field


class HistoryPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    close: float = Field(gt=0.0)


class Quote(BaseModel):
    symbol: str
    price: float
    change: float = 0.0
    change_percent: float = 0.0
    currency: str | None = None
    market_time: str | None = None
