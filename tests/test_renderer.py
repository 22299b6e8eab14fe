from io import StringIO

from rich.console import Console

from portfolio_blend.analysis.goals import interpret_goal
from portfolio_blend.models.allocation import AllocationEntry, OptimizeResponse
from portfolio_blend.models.market import HistoryPoint, Quote
from portfolio_blend.output.renderer import AllocationRenderer


def _renderer() -> tuple[AllocationRenderer, StringIO]:
    buf = StringIO()
    console = Console(file=buf, width=120, color_system=None)
    return AllocationRenderer(console), buf


class TestAllocationRenderer:
    def test_allocation(self):
        renderer, buf = _renderer()
        renderer.render_allocation(
            OptimizeResponse(
                allocations=[
                    AllocationEntry(symbol="BND", weight=0.75),
                    AllocationEntry(symbol="VTI", weight=0.25),
                ],
                expected_return=0.0005,
                expected_volatility=0.0071,
                rationale="Universe: VTI, BND.",
            )
        )
        out = buf.getvalue()
        assert "BND" in out
        assert "75.00%" in out
        assert "0.710%" in out
        assert "Universe: VTI, BND." in out

    def test_quote(self):
        renderer, buf = _renderer()
        renderer.render_quote(
            Quote(symbol="AAPL", price=190.5, change=-1.5, change_percent=-0.78)
        )
        out = buf.getvalue()
        assert "$190.50" in out
        assert "-1.50" in out

    def test_history(self):
        renderer, buf = _renderer()
        points = [
            HistoryPoint(date=f"2025-01-{d:02d}", close=100.0 + d) for d in range(1, 16)
        ]
        renderer.render_history("VTI", points, rows=5)
        out = buf.getvalue()
        assert "2025-01-15" in out
        assert "2025-01-10" not in out.split("15 points")[0]
        assert "15 points, 2025-01-01 to 2025-01-15" in out

    def test_goal(self):
        renderer, buf = _renderer()
        renderer.render_goal(interpret_goal("aggressive"))
        assert "85%" in buf.getvalue()
