import logging
import math
from collections.abc import Iterable
from typing import Any

from portfolio_blend.config import DEFAULT_RISK, DEFAULT_UNIVERSE, MAX_RISK, MIN_RISK

logger = logging.getLogger(__name__)


def normalize_symbols(
    symbols: Iterable[str] | None,
    default: list[str] | None = None,
) -> list[str]:
    """Upper-case and de-duplicate *symbols*, keeping first-seen order.

    An empty result is replaced by *default* (the built-in universe when not
    given), so callers never hand the engine an empty universe.
    """
    seen: set[str] = set()
    result: list[str] = []
    for raw in symbols or []:
        if not isinstance(raw, str):
            continue
        sym = raw.strip().upper()
        if sym and sym not in seen:
            seen.add(sym)
            result.append(sym)
    if not result:
        fallback = DEFAULT_UNIVERSE if default is None else default
        logger.debug("Empty symbol list, using default universe %s", fallback)
        return list(fallback)
    return result


def normalize_risk(
    value: Any,
    low: float = MIN_RISK,
    high: float = MAX_RISK,
    default: float = DEFAULT_RISK,
) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if math.isnan(value):
        return default
    return min(high, max(low, float(value)))


def parse_symbol_list(text: str) -> list[str]:
    return [part.strip() for part in text.split(",") if part.strip()]


def risk_percent(risk: float) -> int:
    """Whole-number percentage of *risk*, rounding halves up."""
    return math.floor(risk * 100 + 0.5)
