"""Unit tests for MacroService."""

from health_tools.domain.energy import Goal, MacroService


class TestMacroService:
    """Test macro calculation with goal-specific distributions."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MacroService()

    def test_calculate_macros_lose_weight_goal(self):
        """Test macro calculation for weight loss."""
        macros = self.service.calculate(2000, 80.0, Goal.LOSE_WEIGHT)

        # Protein: 2.0 g/kg = 160g = 640 kcal
        assert macros.protein.grams == 160
        # Fat: 30% = 600 kcal = 67g (rounded from 66.67)
        assert macros.fat.grams == 67
        # Carbs: remainder = 760 kcal = 190g
        assert macros.carbs.grams == 190
        assert macros.fiber_g == 28

    def test_calculate_macros_maintain_goal(self):
        """Test macro calculation for maintenance."""
        macros = self.service.calculate(2500, 75.0, Goal.MAINTAIN)

        # Protein: 1.8 g/kg = 135g = 540 kcal
        assert macros.protein.grams == 135
        assert macros.fat.grams == 83
        # Carbs: 1210 kcal = 302.5g, rounded half up
        assert macros.carbs.grams == 303

    def test_calculate_macros_gain_muscle_goal(self):
        """Test macro calculation for muscle gain (25% fat)."""
        macros = self.service.calculate(3000, 90.0, Goal.GAIN_MUSCLE)

        assert macros.protein.grams == 198
        assert macros.fat.calories == 750
        assert macros.fat.percentage == 25

    def test_percentages(self):
        macros = self.service.calculate(2000, 80.0, Goal.LOSE_WEIGHT)

        assert (macros.protein.percentage, macros.carbs.percentage, macros.fat.percentage) == (
            32,
            38,
            30,
        )

    def test_carbs_never_negative(self):
        """Protein alone exceeds the budget: carbs floor at zero."""
        macros = self.service.calculate(1200, 150.0, Goal.GAIN_MUSCLE)

        assert macros.carbs.calories == 0
        assert macros.carbs.grams == 0
