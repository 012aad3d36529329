"""Unit tests for BMIService."""

import pytest

from health_tools.domain.bmi import BMICategory, BMIInput, BMIService, calculate_bmi
from health_tools.domain.shared import parse_input


class TestBMIService:
    """Test adult BMI, categories and ideal weight range."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMIService()

    def test_calculate_bmi_normal(self):
        """70 kg at 175 cm -> 22.9."""
        result = self.service.calculate(BMIInput(weight=70, height=175))

        assert result.bmi == 22.9
        assert result.category == BMICategory.NORMAL
        assert result.category_label == "Normal weight"
        assert result.weight_to_ideal_kg == 0.0

    def test_category_boundary(self):
        """At 1 m height BMI equals weight: 24.9 normal, 25.0 overweight."""
        normal = self.service.calculate(BMIInput(weight=24.9, height=100))
        overweight = self.service.calculate(BMIInput(weight=25.0, height=100))

        assert normal.category == BMICategory.NORMAL
        assert overweight.category == BMICategory.OVERWEIGHT

    def test_category_follows_reported_value(self):
        """24.96 rounds to 25.0, so the label says overweight."""
        result = self.service.calculate(BMIInput(weight=24.96, height=100))

        assert result.bmi == 25.0
        assert result.category == BMICategory.OVERWEIGHT

    @pytest.mark.parametrize(
        "weight,expected",
        [
            (50, BMICategory.UNDERWEIGHT),
            (90, BMICategory.OVERWEIGHT),
            (110, BMICategory.OBESE),
        ],
    )
    def test_categories(self, weight, expected):
        result = self.service.calculate(BMIInput(weight=weight, height=180))

        assert result.category == expected
        assert result.recommendations

    def test_ideal_weight_range(self):
        """18.5 × 1.75² = 56.7 kg, 24.9 × 1.75² = 76.3 kg."""
        result = self.service.calculate(BMIInput(weight=70, height=175))

        assert result.ideal_weight.min_kg == 56.7
        assert result.ideal_weight.max_kg == 76.3

    def test_weight_to_ideal_is_signed(self):
        heavy = self.service.calculate(BMIInput(weight=90, height=175))
        light = self.service.calculate(BMIInput(weight=50, height=175))

        assert heavy.weight_to_ideal_kg == -13.7
        assert light.weight_to_ideal_kg == 6.7

    def test_bmi_monotonic_in_weight(self):
        bmis = [calculate_bmi(w, 170) for w in range(40, 200, 5)]

        assert bmis == sorted(bmis)

    def test_bmi_decreases_with_height(self):
        bmis = [calculate_bmi(80, h) for h in range(150, 210, 5)]

        assert bmis == sorted(bmis, reverse=True)

    def test_imperial_input(self):
        """176 lb at 5 ft 10 in -> 25.3."""
        data = parse_input(
            BMIInput,
            {
                "weight": 176,
                "weight_unit": "lb",
                "height": 5,
                "height_unit": "ft_in",
                "height_inches": 10,
            },
        )

        result = self.service.calculate(data)

        assert result.bmi == 25.3
        assert result.category == BMICategory.OVERWEIGHT

    def test_idempotent(self):
        data = BMIInput(weight=82.5, height=181)

        assert self.service.calculate(data) == self.service.calculate(data)
