"""Unit tests for EnergyService (BMR, TDEE, calorie goals)."""

import pytest

from health_tools.domain.energy import (
    ENERGY_INPUT_ADAPTER,
    ActivityLevel,
    BMRFormula,
    CalorieNeedsInput,
    EnergyService,
    Goal,
    HarrisBenedictInput,
    KatchMcArdleInput,
    MifflinStJeorInput,
    WarningLevel,
)
from health_tools.domain.shared import InputValidationError, parse_input


def _mifflin(**overrides):
    values = dict(
        age=30,
        gender="male",
        weight=80,
        height=180,
        activity_level="moderately_active",
    )
    values.update(overrides)
    return MifflinStJeorInput(**values)


class TestEnergyService:
    """Test the detailed BMR/TDEE calculator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = EnergyService()

    def test_mifflin_reference_male(self):
        """10×80 + 6.25×180 - 5×30 + 5 = 1780; × 1.55 = 2759."""
        result = self.service.calculate(_mifflin())

        assert result.formula == BMRFormula.MIFFLIN_ST_JEOR
        assert result.bmr == 1780
        assert result.tdee == 2759

    def test_mifflin_female(self):
        """10×60 + 6.25×165 - 5×25 - 161 = 1345.25."""
        result = self.service.calculate(
            _mifflin(age=25, gender="female", weight=60, height=165)
        )

        assert result.bmr == 1345

    def test_harris_benedict_male(self):
        data = HarrisBenedictInput(
            age=30, gender="male", weight=80, height=180, activity_level="sedentary"
        )

        result = self.service.calculate(data)

        assert result.bmr == 1854

    def test_katch_mcardle(self):
        """LBM 64 kg -> 370 + 21.6 × 64 = 1752.4."""
        data = KatchMcArdleInput(
            age=30,
            gender="male",
            weight=80,
            height=180,
            activity_level="sedentary",
            body_fat_percentage=20,
        )

        result = self.service.calculate(data)

        assert result.bmr == 1752

    def test_health_adjustments(self):
        """Current smoker +10%, caffeine boost capped at 10%."""
        smoker = self.service.calculate(_mifflin(smoking="current"))
        caffeine = self.service.calculate(_mifflin(caffeine_drinks=12))

        assert smoker.bmr == 1958
        assert caffeine.bmr == 1958

    def test_calorie_goals(self):
        """0.5 kg/week = 550 kcal/day."""
        result = self.service.calculate(_mifflin())
        goals = result.calorie_goals

        assert goals.maintenance == 2759
        assert goals.weight_loss.moderate == 2209
        assert goals.weight_loss.aggressive == 1659
        assert goals.weight_gain.moderate == 3309
        assert goals.custom_goal == 2759

    def test_custom_goal_follows_goal_and_rate(self):
        result = self.service.calculate(
            _mifflin(goal="lose_weight", weight_change_rate=1.0)
        )

        assert result.calorie_goals.custom_goal == 1659
        assert result.macros.goal.calories == 1659

    def test_metabolic_insights_optional(self):
        with_insights = self.service.calculate(_mifflin())
        without = self.service.calculate(_mifflin(include_metabolic_age=False))

        assert with_insights.metabolic_insights is not None
        assert without.metabolic_insights is None

    def test_older_adult_caution(self):
        result = self.service.calculate(_mifflin(age=70))

        assert WarningLevel.CAUTION in [w.level for w in result.warnings]

    def test_tdee_monotonic_in_activity(self):
        tdees = [
            self.service.calculate(_mifflin(activity_level=level.value)).tdee
            for level in ActivityLevel
        ]

        assert tdees == sorted(tdees)

    def test_default_formula_through_parsing(self):
        data = parse_input(
            ENERGY_INPUT_ADAPTER,
            {
                "age": 30,
                "gender": "male",
                "weight": 80,
                "height": 180,
                "activity_level": "moderately_active",
            },
            discriminator="formula",
            defaults={"formula": "mifflin_st_jeor"},
        )

        assert isinstance(data, MifflinStJeorInput)

    def test_katch_body_fat_plausibility(self):
        """40% body fat is outside the male range for Katch-McArdle."""
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                ENERGY_INPUT_ADAPTER,
                {
                    "formula": "katch_mcardle",
                    "age": 30,
                    "gender": "male",
                    "weight": 80,
                    "height": 180,
                    "activity_level": "sedentary",
                    "body_fat_percentage": 40,
                },
                discriminator="formula",
            )

        assert "body_fat_percentage" in exc_info.value.field_errors

    def test_idempotent(self):
        data = _mifflin(goal="gain_muscle")

        assert self.service.calculate(data) == self.service.calculate(data)

    def test_zero_bmr_at_range_limits(self):
        """Female, 120 years, 20 kg, 89.76 cm: Mifflin gives 0 kcal."""
        data = _mifflin(
            age=120, gender="female", weight=20, height=89.76, activity_level="sedentary"
        )

        result = self.service.calculate(data)

        assert result.bmr == 0
        assert result.metabolic_insights is None
        assert result.warnings[0].level == WarningLevel.CRITICAL
        assert "implausible BMR" in result.warnings[0].message

    def test_negative_bmr_still_returns_result(self):
        """Harris-Benedict goes below zero for the smallest in-range bodies."""
        data = HarrisBenedictInput(
            age=120,
            gender="male",
            weight=20,
            height=50,
            activity_level="sedentary",
            goal="lose_weight",
            weight_change_rate=2,
        )

        result = self.service.calculate(data)

        assert result.bmr == -85
        assert result.metabolic_insights is None
        assert result.macros.goal.calories < 0
        assert result.macros.goal.fat.calories == 0
        assert result.macros.goal.carbs.calories == 0
        assert result.macros.goal.fiber_g == 0
        assert result.warnings[0].level == WarningLevel.CRITICAL


class TestCalorieNeeds:
    """Test the everyday calorie-needs calculator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = EnergyService()

    def test_maintenance(self):
        data = CalorieNeedsInput(
            age=30,
            gender="male",
            weight=80,
            height=180,
            activity_level="moderately_active",
        )

        result = self.service.calculate_calorie_needs(data)

        assert result.bmr == 1780
        assert result.maintenance_calories == 2759
        assert result.goal_calories == 2759
        assert result.goal == Goal.MAINTAIN
        assert result.weekly_weight_change_kg == 0.0

    def test_moderate_loss(self):
        data = CalorieNeedsInput(
            age=30,
            gender="male",
            weight=80,
            height=180,
            activity_level="moderately_active",
            goal="lose_weight",
        )

        result = self.service.calculate_calorie_needs(data)

        assert result.goal_calories == 2209
        assert result.floor_applied is False
        assert result.weekly_weight_change_kg == -0.5

    def test_minimum_floor(self):
        """Fast loss for a small sedentary woman is floored at 1200 kcal."""
        data = CalorieNeedsInput(
            age=25,
            gender="female",
            weight=50,
            height=160,
            activity_level="sedentary",
            goal="lose_weight",
            pace="fast",
        )

        result = self.service.calculate_calorie_needs(data)

        assert result.goal_calories == 1200
        assert result.floor_applied is True
        assert result.weekly_weight_change_kg == -0.23

    def test_macros_match_goal_calories(self):
        data = CalorieNeedsInput(
            age=40,
            gender="female",
            weight=65,
            height=168,
            activity_level="lightly_active",
            goal="gain_weight",
        )

        result = self.service.calculate_calorie_needs(data)

        assert result.macros.calories == result.goal_calories
