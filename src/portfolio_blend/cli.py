import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console

from portfolio_blend.analysis.universe import parse_symbol_list
from portfolio_blend.config import DEFAULT_RISK, DEFAULT_TICKERS, AllocationConfig
from portfolio_blend.data.market_data import MarketDataProvider
from portfolio_blend.models.allocation import (
    GoalInterpretation,
    OptimizeRequest,
    OptimizeResponse,
)
from portfolio_blend.output.renderer import AllocationRenderer

logger = logging.getLogger(__name__)
console = Console()

SUBCOMMANDS = ("optimize", "quote", "history")
DEFAULT_SYMBOL = "AAPL"


def _add_verbose(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="blend",
        description="Risk-blended inverse-volatility allocation",
    )
    sub = p.add_subparsers(dest="command")

    # --- optimize (default) ---
    optimize = sub.add_parser("optimize", help="Allocate across a universe")
    optimize.add_argument(
        "symbols",
        nargs="*",
        help="Ticker symbols (space or comma separated); defaults to VTI BND IAU",
    )
    optimize.add_argument(
        "--risk",
        type=float,
        default=None,
        help="Risk preference between 0.1 (defensive) and 0.95 (aggressive)",
    )
    optimize.add_argument(
        "--goal",
        default=None,
        help="Free-text goal used to pick the risk preference when --risk is absent",
    )
    optimize.add_argument(
        "--watchlist",
        action="store_true",
        help="Add the built-in watch-list (" + ", ".join(DEFAULT_TICKERS) + ")",
    )
    optimize.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    optimize.add_argument(
        "--chart",
        type=Path,
        default=None,
        help="Directory for an allocation chart",
    )
    _add_verbose(optimize)

    # --- quote ---
    quote = sub.add_parser("quote", help="Show the latest quote for a symbol")
    quote.add_argument(
        "symbol", nargs="?", default=DEFAULT_SYMBOL, help="Ticker symbol"
    )
    _add_verbose(quote)

    # --- history ---
    history = sub.add_parser("history", help="Show about one year of closes")
    history.add_argument(
        "symbol", nargs="?", default=DEFAULT_SYMBOL, help="Ticker symbol"
    )
    history.add_argument(
        "--rows",
        type=int,
        default=10,
        help="Number of recent closes to print",
    )
    history.add_argument(
        "--chart",
        type=Path,
        default=None,
        help="Directory for a price chart",
    )
    _add_verbose(history)

    return p


def _resolve_risk(args: argparse.Namespace) -> tuple[float, GoalInterpretation | None]:
    if args.risk is not None:
        return args.risk, None
    if args.goal:
        from portfolio_blend.analysis.goals import interpret_goal

        goal = interpret_goal(args.goal)
        return goal.risk, goal
    return DEFAULT_RISK, None


def _run_optimize(args: argparse.Namespace) -> None:
    """Execute the optimize subcommand."""
    from portfolio_blend.analysis.allocator import run_optimization

    config = AllocationConfig()
    renderer = AllocationRenderer(console)
    risk, goal = _resolve_risk(args)
    symbols = [sym for s in args.symbols for sym in parse_symbol_list(s)]
    if args.watchlist:
        symbols += DEFAULT_TICKERS
    request = OptimizeRequest(symbols=symbols, risk=risk)
    provider = MarketDataProvider(config)

    if goal and not args.json:
        renderer.render_goal(goal)

    names = ", ".join(request.symbols)
    with console.status(f"[cyan]Fetching history for {names}..."):
        result: OptimizeResponse = asyncio.run(
            run_optimization(request, provider, config)
        )

    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        renderer.render_allocation(result)

    if args.chart:
        from portfolio_blend.output.charts import generate_allocation_chart

        path = generate_allocation_chart(result, args.chart)
        if path:
            console.print(f"[green]Chart saved to {path}[/green]")


def _run_quote(args: argparse.Namespace) -> None:
    """Execute the quote subcommand."""
    provider = MarketDataProvider()
    with console.status(f"[cyan]Fetching quote for {args.symbol.upper()}..."):
        quote = provider.get_quote(args.symbol)
    AllocationRenderer(console).render_quote(quote)


def _run_history(args: argparse.Namespace) -> None:
    """Execute the history subcommand."""
    provider = MarketDataProvider()
    symbol = args.symbol.upper()
    with console.status(f"[cyan]Fetching history for {symbol}..."):
        points = provider.get_history(symbol)
    AllocationRenderer(console).render_history(symbol, points, rows=args.rows)

    if args.chart:
        from portfolio_blend.output.charts import generate_history_chart

        path = generate_history_chart(points, symbol, args.chart)
        if path:
            console.print(f"[green]Chart saved to {path}[/green]")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    # Treat a leading non-subcommand argument as a symbol list for optimize
    if argv and argv[0] not in (*SUBCOMMANDS, "-h", "--help"):
        argv.insert(0, "optimize")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        if args.command == "optimize":
            _run_optimize(args)
        elif args.command == "quote":
            _run_quote(args)
        elif args.command == "history":
            _run_history(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
