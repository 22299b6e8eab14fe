from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
import matplotlib.dates as mdates
import matplotlib.pyplot as plt
import pandas as pd

from portfolio_blend.models.allocation import OptimizeResponse
from portfolio_blend.models.market import HistoryPoint

matplotlib.use("Agg")

logger = logging.getLogger(__name__)

COLORS = {
    "close": "#111827",
    "fill": "#111827",
    "weight": "#1f77b4",
}


def _apply_style(ax: plt.Axes) -> None:
    ax.set_facecolor("white")
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.tick_params(labelsize=9)
    handles, labels = ax.get_legend_handles_labels()
    if handles:
        ax.legend(fontsize=9, loc="upper left")


def _save_figure(fig: plt.Figure, path: Path) -> None:
    fig.savefig(
        path,
        dpi=150,
        bbox_inches="tight",
        facecolor="white",
        edgecolor="none",
    )
    plt.close(fig)


def generate_history_chart(
    points: list[HistoryPoint], symbol: str, output_dir: Path
) -> Path | None:
    if not points:
        return None
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        dates = pd.to_datetime([p.date for p in points])
        close = [p.close for p in points]

        fig, ax = plt.subplots(figsize=(12, 5))
        fig.suptitle(f"{symbol} — Close", fontsize=14, fontweight="bold")
        ax.plot(dates, close, color=COLORS["close"], linewidth=1.2, label="Close")
        ax.fill_between(dates, close, min(close), color=COLORS["fill"], alpha=0.08)
        ax.set_ylabel("Price ($)", fontsize=10)
        _apply_style(ax)

        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %Y"))
        fig.autofmt_xdate()

        path = output_dir / f"{symbol}_history.png"
        _save_figure(fig, path)
        return path
    except Exception:
        logger.warning("Failed to generate history chart", exc_info=True)
        return None


def generate_allocation_chart(
    result: OptimizeResponse, output_dir: Path
) -> Path | None:
    if not result.allocations:
        return None
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        symbols = [a.symbol for a in result.allocations]
        weights = [a.weight * 100 for a in result.allocations]

        fig, ax = plt.subplots(figsize=(10, 0.5 * len(symbols) + 2))
        fig.suptitle("Allocation", fontsize=14, fontweight="bold")
        ax.barh(symbols, weights, color=COLORS["weight"], alpha=0.8)
        ax.invert_yaxis()
        for i, w in enumerate(weights):
            ax.text(w, i, f" {w:.1f}%", va="center", fontsize=9)
        ax.set_xlabel("Weight (%)", fontsize=10)
        _apply_style(ax)

        path = output_dir / "allocation.png"
        _save_figure(fig, path)
        return path
    except Exception:
        logger.warning("Failed to generate allocation chart", exc_info=True)
        return None
