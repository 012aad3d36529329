"""Unit tests for BloodPressureService."""

import pytest

from health_tools.domain.blood_pressure import (
    BloodPressureCategory,
    BloodPressureInput,
    BloodPressureService,
    RiskLevel,
    classify_blood_pressure,
)
from health_tools.domain.shared import InputValidationError, parse_input


class TestBloodPressureService:
    """Test AHA category assignment."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BloodPressureService()

    @pytest.mark.parametrize(
        "systolic,diastolic,expected",
        [
            (115, 75, BloodPressureCategory.NORMAL),
            (120, 79, BloodPressureCategory.ELEVATED),
            (129, 79, BloodPressureCategory.ELEVATED),
            (130, 70, BloodPressureCategory.STAGE_1),
            (118, 80, BloodPressureCategory.STAGE_1),
            (140, 85, BloodPressureCategory.STAGE_2),
            (125, 90, BloodPressureCategory.STAGE_2),
            (180, 100, BloodPressureCategory.CRISIS),
            (150, 120, BloodPressureCategory.CRISIS),
        ],
    )
    def test_categories(self, systolic, diastolic, expected):
        assert classify_blood_pressure(systolic, diastolic) == expected

    def test_normal_reading(self):
        result = self.service.calculate(BloodPressureInput(systolic=118, diastolic=76))

        assert result.category == BloodPressureCategory.NORMAL
        assert result.risk_level == RiskLevel.LOW
        assert result.pulse_pressure == 42
        assert result.urgent is False

    def test_crisis_is_urgent(self):
        result = self.service.calculate(BloodPressureInput(systolic=185, diastolic=110))

        assert result.label == "Hypertensive Crisis"
        assert result.risk_level == RiskLevel.CRITICAL
        assert result.urgent is True

    def test_older_adult_recommendation(self):
        younger = self.service.calculate(BloodPressureInput(systolic=135, diastolic=85, age=40))
        older = self.service.calculate(BloodPressureInput(systolic=135, diastolic=85, age=70))

        assert len(older.recommendations) == len(younger.recommendations) + 1

    def test_kpa_input(self):
        """16 / 10.5 kPa ≈ 120 / 79 mmHg."""
        data = parse_input(BloodPressureInput, {"systolic": 16, "diastolic": 10.5, "unit": "kPa"})

        result = self.service.calculate(data)

        assert result.systolic == 120
        assert result.diastolic == 79
        assert result.category == BloodPressureCategory.ELEVATED

    def test_systolic_must_exceed_diastolic(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(BloodPressureInput, {"systolic": 80, "diastolic": 90})

        assert list(exc_info.value.field_errors) == ["systolic"]
