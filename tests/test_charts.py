from portfolio_blend.models.allocation import AllocationEntry, OptimizeResponse
from portfolio_blend.models.market import HistoryPoint
from portfolio_blend.output.charts import (
    generate_allocation_chart,
    generate_history_chart,
)


def _make_points(n: int = 60) -> list[HistoryPoint]:
    return [
        HistoryPoint(date=f"2025-{1 + i // 28:02d}-{1 + i % 28:02d}", close=100 + i)
        for i in range(n)
    ]


class TestHistoryChart:
    def test_generates_png(self, tmp_path):
        path = generate_history_chart(_make_points(), "AAPL", tmp_path)
        assert path is not None
        assert path.exists()
        assert path.suffix == ".png"
        assert "AAPL_history" in path.name

    def test_creates_output_dir(self, tmp_path):
        out = tmp_path / "charts"
        path = generate_history_chart(_make_points(), "VTI", out)
        assert path is not None
        assert out.is_dir()

    def test_empty_history(self, tmp_path):
        assert generate_history_chart([], "AAPL", tmp_path) is None


class TestAllocationChart:
    def test_generates_png(self, tmp_path):
        result = OptimizeResponse(
            allocations=[
                AllocationEntry(symbol="BND", weight=0.6),
                AllocationEntry(symbol="VTI", weight=0.3),
                AllocationEntry(symbol="IAU", weight=0.1),
            ]
        )
        path = generate_allocation_chart(result, tmp_path)
        assert path is not None
        assert path.exists()
        assert path.name == "allocation.png"

    def test_empty_allocation(self, tmp_path):
        assert generate_allocation_chart(OptimizeResponse(), tmp_path) is None
