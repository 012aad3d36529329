"""Unit tests for HydrationService."""

import pytest

from health_tools.domain.hydration import (
    HydrationInput,
    HydrationService,
    IntakeStatus,
    baseline_need,
    compare_intake,
    holliday_segar,
)
from health_tools.domain.shared import Gender, InputValidationError, parse_input


def _input(**overrides):
    values = dict(weight=70, height=175, age=25, gender="male", climate="cool")
    values.update(overrides)
    return HydrationInput(**values)


class TestHydrationService:
    """Test baseline blend and additive adjustments."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = HydrationService()

    @pytest.mark.parametrize("weight,expected", [(5, 0.5), (15, 1.25), (70, 2.5)])
    def test_holliday_segar(self, weight, expected):
        assert holliday_segar(weight) == pytest.approx(expected)

    def test_baseline_blend(self):
        """0.4 × 2.45 + 0.3 × 2.5 + 0.3 × 2.8 = 2.57 L."""
        assert baseline_need(70, 25, Gender.MALE) == pytest.approx(2.57)

    def test_no_adjustments(self):
        result = self.service.calculate(_input())

        assert result.baseline_liters == 2.57
        assert result.total_liters == 2.57
        assert result.adjustments.exercise == 0.0
        assert result.total_fl_oz == 87
        assert result.hourly_ml == 161

    def test_exercise_adjustment(self):
        """One hour of moderate exercise adds 0.5 L at normal sweat rate."""
        result = self.service.calculate(_input(exercise_minutes=60))

        assert result.adjustments.exercise == 0.5
        assert result.total_liters == 3.07

    def test_total_monotonic_in_exercise(self):
        totals = [
            self.service.calculate(_input(exercise_minutes=minutes)).total_liters
            for minutes in (0, 30, 60, 120, 240)
        ]

        assert totals == sorted(totals)

    def test_climate_adjustment(self):
        result = self.service.calculate(_input(climate="hot"))

        assert result.adjustments.climate == pytest.approx(0.64, abs=0.01)
        assert "Hot Weather" in [tip.category for tip in result.tips]

    def test_pregnancy_and_breastfeeding_are_additive(self):
        result = self.service.calculate(
            _input(gender="female", pregnant=True, breastfeeding=True)
        )

        assert result.adjustments.pregnancy_breastfeeding == 1.0

    def test_duplicate_conditions_counted_once(self):
        once = self.service.calculate(_input(health_conditions=["fever"]))
        twice = self.service.calculate(_input(health_conditions=["fever", "fever"]))

        assert once.total_liters == twice.total_liters

    def test_caffeine_and_alcohol(self):
        result = self.service.calculate(_input(caffeine_mg=450, alcohol_drinks=2))

        assert result.adjustments.caffeine == 0.2
        assert result.adjustments.alcohol == 0.2

    def test_intake_comparison(self):
        result = self.service.calculate(_input(current_intake_liters=1.5))

        assert result.intake_comparison.status == IntakeStatus.LOW
        assert result.intake_comparison.difference_liters == -1.07

    @pytest.mark.parametrize(
        "current,expected",
        [(2.0, IntakeStatus.LOW), (2.6, IntakeStatus.ADEQUATE), (3.0, IntakeStatus.HIGH)],
    )
    def test_compare_intake(self, current, expected):
        assert compare_intake(current, 2.5).status == expected

    def test_pregnancy_requires_female(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                HydrationInput,
                {"weight": 70, "height": 175, "age": 30, "gender": "male", "pregnant": True},
            )

        assert list(exc_info.value.field_errors) == ["pregnant"]

    def test_imperial_weight(self):
        data = parse_input(
            HydrationInput,
            {"weight": 154.32, "weight_unit": "lb", "height": 175, "age": 25, "gender": "male"},
        )

        assert data.weight == pytest.approx(70, abs=0.01)

    def test_warning_signs_are_read_only(self):
        first = self.service.calculate(_input())

        with pytest.raises(AttributeError):
            first.warning_signs.dehydration.append("Extra")

        second = self.service.calculate(_input())
        assert "Extra" not in second.warning_signs.dehydration
