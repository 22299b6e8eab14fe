import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from portfolio_blend.config import AllocationConfig
from portfolio_blend.data.yfinance_client import YFinanceClient, history_from_frame
from portfolio_blend.models.market import HistoryPoint, Quote

logger = logging.getLogger(__name__)


class MarketDataProvider:
    def __init__(self, config: AllocationConfig | None = None) -> None:
        self.config = config or AllocationConfig()

    def _client(self, symbol: str) -> YFinanceClient:
        return YFinanceClient(symbol)

    def get_history(self, symbol: str) -> list[HistoryPoint]:
        df = self._client(symbol).get_history(
            period=self.config.history_period,
            interval=self.config.history_interval,
        )
        points = history_from_frame(df)
        return points[-self.config.history_window :]

    def get_quote(self, symbol: str) -> Quote:
        return self._client(symbol).get_quote()

    async def fetch_histories(
        self, symbols: list[str]
    ) -> dict[str, list[HistoryPoint]]:
        """Fetch all histories concurrently, keyed in *symbols* order.

        The first failure is re-raised once every fetch has finished.
        """
        loop = asyncio.get_running_loop()
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            results = await asyncio.gather(
                *[
                    loop.run_in_executor(executor, self.get_history, sym)
                    for sym in symbols
                ],
                return_exceptions=True,
            )

        histories: dict[str, list[HistoryPoint]] = {}
        for sym, result in zip(symbols, results):
            if isinstance(result, BaseException):
                logger.warning("History fetch failed for %s", sym)
                raise result
            logger.debug("Fetched %d points for %s", len(result), sym)
            histories[sym] = result
        return histories
