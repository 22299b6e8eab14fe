def fmt_pct(value: float | None, decimals: int = 2) -> str:
    """Format a fraction (0.1234) as a percentage (12.34%)."""
    if value is None:
        return "N/A"
    return f"{value * 100:.{decimals}f}%"


def fmt_signed(value: float | None, decimals: int = 2) -> str:
    if value is None:
        return "N/A"
    return f"{value:+,.{decimals}f}"


def fmt_price(value: float | None, currency: str | None = None) -> str:
    if value is None:
        return "N/A"
    if currency and currency != "USD":
        return f"{value:,.2f} {currency}"
    return f"${value:,.2f}"


def change_color(value: float) -> str:
    if value > 0:
        return "green"
    if value < 0:
        return "red"
    return "yellow"


def weight_bar(weight: float, width: int = 20) -> str:
    filled = round(max(0.0, min(1.0, weight)) * width)
    return "█" * filled + "░" * (width - filled)
