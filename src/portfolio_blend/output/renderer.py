from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from portfolio_blend.models.allocation import GoalInterpretation, OptimizeResponse
from portfolio_blend.models.market import HistoryPoint, Quote
from portfolio_blend.output.formatters import (
    change_color,
    fmt_pct,
    fmt_price,
    fmt_signed,
    weight_bar,
)


class AllocationRenderer:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_allocation(self, result: OptimizeResponse) -> None:
        table = Table(title="Allocation", show_header=True)
        table.add_column("Symbol", style="cyan")
        table.add_column("Weight", justify="right")
        table.add_column("", justify="left")

        for entry in result.allocations:
            table.add_row(
                entry.symbol,
                fmt_pct(entry.weight),
                weight_bar(entry.weight),
            )
        self.console.print(table)

        stats = Table(show_header=False)
        stats.add_column("Metric", style="cyan")
        stats.add_column("Value", justify="right")
        stats.add_row("Expected Return", fmt_pct(result.expected_return, 3))
        stats.add_row("Expected Volatility", fmt_pct(result.expected_volatility, 3))
        self.console.print(stats)

        self.console.print(Panel(result.rationale, title="Rationale", style="dim"))

    def render_goal(self, goal: GoalInterpretation) -> None:
        self.console.print(Panel("\n".join(goal.notes), title="Goal", style="cyan"))

    def render_quote(self, quote: Quote) -> None:
        color = change_color(quote.change)
        text = Text()
        text.append(f"{quote.symbol}  ", style="bold")
        text.append(fmt_price(quote.price, quote.currency))
        text.append(
            f"  {fmt_signed(quote.change)} ({fmt_signed(quote.change_percent)}%)",
            style=color,
        )
        if quote.market_time:
            text.append(f"\n{quote.market_time}", style="dim")
        self.console.print(Panel(text, title="Quote"))

    def render_history(
        self, symbol: str, points: list[HistoryPoint], rows: int = 10
    ) -> None:
        table = Table(title=f"{symbol} — last {min(rows, len(points))} closes")
        table.add_column("Date", style="cyan")
        table.add_column("Close", justify="right")
        for p in points[-rows:]:
            table.add_row(p.date, fmt_price(p.close))
        self.console.print(table)
        if points:
            first, last = points[0].date, points[-1].date
            self.console.print(f"[dim]{len(points)} points, {first} to {last}[/dim]")
