import pytest
from pydantic import ValidationError

from portfolio_blend.analysis.returns import (
    compute_returns,
    estimate_volatility,
    volatility_map,
)
from portfolio_blend.models.market import HistoryPoint


def make_points(closes: list[float]) -> list[HistoryPoint]:
    return [
        HistoryPoint(date=f"2025-01-{i + 1:02d}", close=c) for i, c in enumerate(closes)
    ]


class TestComputeReturns:
    def test_simple_returns(self):
        returns = compute_returns(make_points([100.0, 110.0, 99.0]))
        assert len(returns) == 2
        assert returns[0] == pytest.approx(0.10)
        assert returns[1] == pytest.approx(-0.10)

    def test_empty_history(self):
        assert compute_returns([]) == []

    def test_single_point(self):
        assert compute_returns(make_points([100.0])) == []

    def test_one_fewer_than_points(self):
        points = make_points([10.0, 11.0, 12.0, 13.0, 14.0])
        assert len(compute_returns(points)) == len(points) - 1


class TestHistoryPoint:
    def test_rejects_non_positive_close(self):
        with pytest.raises(ValidationError):
            HistoryPoint(date="2025-01-01", close=0.0)

    def test_frozen(self):
        p = HistoryPoint(date="2025-01-01", close=10.0)
        with pytest.raises(ValidationError):
            p.close = 11.0


class TestEstimateVolatility:
    def test_population_std(self):
        # mean 0.02, squared deviations 1e-4 each, divisor 2
        assert estimate_volatility([0.01, 0.03]) == pytest.approx(0.01)

    def test_uses_count_not_count_minus_one(self):
        returns = [0.1, -0.1, 0.1, -0.1]
        assert estimate_volatility(returns) == pytest.approx(0.1)

    def test_constant_series_is_floored(self):
        assert estimate_volatility([0.01, 0.01, 0.01]) == 1e-6

    def test_empty_series_default(self):
        assert estimate_volatility([]) == 0.2

    def test_custom_floor_and_default(self):
        assert estimate_volatility([0.0, 0.0], floor=1e-3) == 1e-3
        assert estimate_volatility([], default=0.5) == 0.5


class TestVolatilityMap:
    def test_keeps_symbol_order(self):
        vols = volatility_map({"B": [0.01, 0.03], "A": []})
        assert list(vols) == ["B", "A"]
        assert vols["B"] == pytest.approx(0.01)
        assert vols["A"] == 0.2
