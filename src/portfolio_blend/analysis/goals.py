from portfolio_blend.analysis.universe import risk_percent
from portfolio_blend.config import DEFAULT_RISK
from portfolio_blend.models.allocation import GoalInterpretation

AGGRESSIVE_RISK = 0.85
CONSERVATIVE_RISK = 0.35


def interpret_goal(text: str) -> GoalInterpretation:
    """Map a free-text investment goal onto a risk preference and horizon.

    Keyword matching only; the first matching keyword wins.
    """
    lowered = text.lower()

    if "aggressive" in lowered:
        risk = AGGRESSIVE_RISK
    elif "conservative" in lowered or "retire" in lowered:
        risk = CONSERVATIVE_RISK
    else:
        risk = DEFAULT_RISK

    if "short" in lowered:
        horizon = 1
    elif "medium" in lowered:
        horizon = 5
    else:
        horizon = 10

    notes = [
        f"Interpreted risk tolerance: {risk_percent(risk)}%",
        f"Investment horizon: ~{horizon} years",
        "Strategy: core index funds with satellite growth "
        "and duration-balanced bonds",
    ]
    return GoalInterpretation(risk=risk, horizon_years=horizon, notes=notes)
