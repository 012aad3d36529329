"""Unit tests for KidsBMIService."""

import pytest

from health_tools.domain.kids_bmi import (
    BMI_PERCENTILE_TABLE,
    Confidence,
    KidsBMICategory,
    KidsBMIInput,
    KidsBMIService,
    bmi_percentile,
    percentile_bands,
    percentile_z_score,
    predict_adult_height,
)
from health_tools.domain.shared import Gender, InputValidationError, parse_input


class TestPercentiles:
    """Test reference-table interpolation."""

    def test_tabulated_age_uses_row(self):
        assert percentile_bands(120, Gender.MALE) == pytest.approx(
            BMI_PERCENTILE_TABLE[Gender.MALE][120]
        )

    def test_interpolates_between_ages(self):
        """102 months sits halfway between the 84 and 120 month rows."""
        bands = percentile_bands(102, Gender.FEMALE)
        lower = BMI_PERCENTILE_TABLE[Gender.FEMALE][84]
        upper = BMI_PERCENTILE_TABLE[Gender.FEMALE][120]

        assert bands == pytest.approx(tuple((a + b) / 2 for a, b in zip(lower, upper)))

    def test_exact_breakpoints(self):
        assert bmi_percentile(16.7, 120, Gender.MALE) == pytest.approx(50)
        assert bmi_percentile(23.0, 120, Gender.MALE) == pytest.approx(95)

    def test_above_p95(self):
        """25% over p95 adds 1 percentile point."""
        assert bmi_percentile(28.75, 120, Gender.MALE) == pytest.approx(96)
        assert bmi_percentile(60, 120, Gender.MALE) == 99

    @pytest.mark.parametrize("gender", list(Gender))
    @pytest.mark.parametrize("months", [24, 60, 102, 150, 228])
    def test_monotonic_in_bmi(self, gender, months):
        percentiles = [bmi_percentile(b / 10, months, gender) for b in range(100, 400, 5)]

        assert percentiles == sorted(percentiles)

    @pytest.mark.parametrize("months", [36, 48, 60, 84, 120, 156, 192])
    def test_continuous_across_tabulated_ages(self, months):
        at = bmi_percentile(18.0, months, Gender.MALE)
        before = bmi_percentile(18.0, months - 1, Gender.MALE)
        after = bmi_percentile(18.0, months + 1, Gender.MALE)

        assert abs(at - before) < 2
        assert abs(at - after) < 2

    def test_z_score(self):
        assert percentile_z_score(50) == pytest.approx(0)
        assert percentile_z_score(97.5) == pytest.approx(1.96, abs=0.01)
        assert percentile_z_score(0) == pytest.approx(percentile_z_score(0.1))


class TestPredictAdultHeight:
    def test_mid_parent(self):
        """(165 + 180) / 2 + 6.5 = 179 cm for a boy."""
        prediction = predict_adult_height(140, 10, Gender.MALE, 165, 180)

        assert prediction.height_cm == 179
        assert prediction.confidence == Confidence.MODERATE

    def test_growth_velocity(self):
        prediction = predict_adult_height(140, 10, Gender.FEMALE)

        assert prediction.height_cm == 158
        assert prediction.confidence == Confidence.LOW

    def test_near_adult(self):
        prediction = predict_adult_height(175, 17, Gender.MALE)

        assert prediction.height_cm == 177
        assert prediction.confidence == Confidence.HIGH


class TestKidsBMIService:
    """Test the full kids' BMI result."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = KidsBMIService()

    def test_healthy_weight_boy(self):
        data = KidsBMIInput(age_years=10, gender="male", height=140, weight=33)

        result = self.service.calculate(data)

        assert result.bmi == 16.8
        assert result.age_in_months == 120
        assert result.growth_chart.percentile == 52.0
        assert result.growth_chart.category.category == KidsBMICategory.HEALTHY_WEIGHT
        assert result.warnings == []

    def test_obese_boy_gets_warning(self):
        data = KidsBMIInput(age_years=10, gender="male", height=140, weight=50)

        result = self.service.calculate(data)

        assert result.growth_chart.category.category == KidsBMICategory.OBESE
        assert len(result.warnings) == 1

    def test_guidance_by_age(self):
        data = KidsBMIInput(age_years=4, gender="female", height=102, weight=16)

        result = self.service.calculate(data)

        assert result.activity.daily_minutes == 180
        assert result.activity.sleep_hours == "10-14 hours"
        assert result.nutrition.daily_calories.moderately_active == 1400

    def test_implausible_height(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                KidsBMIInput,
                {"age_years": 3, "gender": "male", "height": 160, "weight": 15},
            )

        assert "height" in exc_info.value.field_errors

    def test_idempotent(self):
        data = KidsBMIInput(age_years=12, age_months=6, gender="female", height=152, weight=42)

        assert self.service.calculate(data) == self.service.calculate(data)
