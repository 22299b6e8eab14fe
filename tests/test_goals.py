from portfolio_blend.analysis.goals import interpret_goal


class TestInterpretGoal:
    def test_aggressive(self):
        goal = interpret_goal("I want an AGGRESSIVE growth portfolio")
        assert goal.risk == 0.85
        assert goal.notes[0] == "Interpreted risk tolerance: 85%"

    def test_conservative(self):
        assert interpret_goal("conservative income").risk == 0.35

    def test_retirement(self):
        assert interpret_goal("Saving to retire in 20 years").risk == 0.35

    def test_aggressive_wins(self):
        assert interpret_goal("aggressive but conservative").risk == 0.85

    def test_default(self):
        goal = interpret_goal("balanced")
        assert goal.risk == 0.6
        assert goal.horizon_years == 10

    def test_horizon(self):
        assert interpret_goal("short term").horizon_years == 1
        assert interpret_goal("medium term").horizon_years == 5

    def test_notes(self):
        goal = interpret_goal("medium term")
        assert len(goal.notes) == 3
        assert goal.notes[1] == "Investment horizon: ~5 years"
