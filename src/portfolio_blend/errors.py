class PortfolioBlendError(Exception):
    """Base class for errors raised by portfolio_blend."""


class InvalidUniverseError(PortfolioBlendError, ValueError):
    """The symbol universe is empty where at least one symbol is required."""


class DataUnavailableError(PortfolioBlendError):
    """Market data for a symbol could not be fetched."""

    def __init__(self, symbol: str, reason: str = "") -> None:
        self.symbol = symbol
        self.reason = reason
        message = f"Data unavailable for {symbol}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
