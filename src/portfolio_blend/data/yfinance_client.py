import logging

import pandas as pd
import yfinance as yf

from portfolio_blend.errors import DataUnavailableError
from portfolio_blend.models.market import HistoryPoint, Quote

logger = logging.getLogger(__name__)


class YFinanceClient:
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol.upper()
        self._ticker: yf.Ticker | None = None

    @property
    def ticker(self) -> yf.Ticker:
        if self._ticker is None:
            self._ticker = yf.Ticker(self.symbol)
        return self._ticker

    def get_history(
        self,
        period: str = "1y",
        interval: str = "1d",
    ) -> pd.DataFrame:
        try:
            df = self.ticker.history(period=period, interval=interval)
        except Exception as e:
            logger.warning("Failed to fetch history for %s", self.symbol)
            raise DataUnavailableError(self.symbol, str(e)) from e
        if df is None or df.empty:
            logger.warning("Empty history for %s", self.symbol)
            raise DataUnavailableError(self.symbol, "empty history")
        return df

    def get_quote(self) -> Quote:
        df = self.get_history(period="5d", interval="1d")
        close = df["Close"].dropna()
        if close.empty:
            raise DataUnavailableError(self.symbol, "no closing prices")

        price = float(close.iloc[-1])
        prev = float(close.iloc[-2]) if len(close) > 1 else price
        change = price - prev

        return Quote(
            symbol=self.symbol,
            price=price,
            change=change,
            change_percent=(change / prev * 100) if prev else 0.0,
            currency=self._get_currency(),
            market_time=pd.Timestamp(close.index[-1]).isoformat(),
        )

    def _get_currency(self) -> str | None:
        try:
            return self.ticker.fast_info.currency
        except Exception:
            logger.debug("No currency for %s", self.symbol)
            return None


def history_from_frame(df: pd.DataFrame) -> list[HistoryPoint]:
    """Convert a price frame (DatetimeIndex, ``Close`` column) to points.

    Missing or non-positive closes are dropped, as are repeated dates.
    """
    if df.empty or "Close" not in df.columns:
        return []

    close = df["Close"].dropna()
    close = close[close > 0].sort_index()

    points: list[HistoryPoint] = []
    seen: set[str] = set()
    for ts, value in close.items():
        day = pd.Timestamp(ts).date().isoformat()
        if day in seen:
            continue
        seen.add(day)
        points.append(HistoryPoint(date=day, close=float(value)))
    return points
