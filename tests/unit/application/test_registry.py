"""Unit tests for the calculator registry."""

from datetime import date

import pytest

from health_tools.application import CALCULATORS, get_calculator, run_calculator
from health_tools.domain.bmi import BMIResult
from health_tools.domain.energy import BMRFormula
from health_tools.domain.heart_rate import ZoneMethod
from health_tools.domain.shared import CalculatorNotFoundError, InputValidationError

TODAY = date(2024, 3, 1)


class TestRegistry:
    """Test lookup and execution of registered calculators."""

    def test_registered_names(self):
        assert set(CALCULATORS) == {
            "bmi",
            "kids_bmi",
            "bmr",
            "calories",
            "body_fat",
            "blood_sugar",
            "blood_pressure",
            "cholesterol",
            "heart_rate",
            "hydration",
            "vitamin_d",
            "ovulation",
            "due_date",
            "sleep",
            "sleep_duration",
        }

    def test_dated_calculators(self):
        dated = {name for name, entry in CALCULATORS.items() if entry.dated}

        assert dated == {"ovulation", "due_date"}

    def test_unknown_calculator(self):
        with pytest.raises(CalculatorNotFoundError) as exc_info:
            get_calculator("bmi2")

        assert exc_info.value.name == "bmi2"

    def test_run_bmi(self):
        result = run_calculator("bmi", {"weight": 70, "height": 175}, TODAY)

        assert isinstance(result, BMIResult)
        assert result.bmi == 22.9

    def test_default_formula(self):
        raw = {
            "age": 30,
            "gender": "male",
            "weight": 80,
            "height": 180,
            "activity_level": "moderately_active",
        }

        result = run_calculator("bmr", raw, TODAY)

        assert result.formula == BMRFormula.MIFFLIN_ST_JEOR
        assert result.bmr == 1780

    def test_default_heart_rate_method(self):
        result = run_calculator(
            "heart_rate", {"age": 30, "resting_heart_rate": 60}, TODAY
        )

        assert result.method == ZoneMethod.KARVONEN
        assert result.heart_rate_reserve == 130

    def test_dated_rule_uses_today(self):
        with pytest.raises(InputValidationError) as exc_info:
            run_calculator("ovulation", {"last_period_date": "2024-03-05"}, TODAY)

        assert "last_period_date" in exc_info.value.field_errors

    def test_dated_result(self):
        result = run_calculator("due_date", {"last_period_date": "2024-01-01"}, TODAY)

        assert result.due_date == date(2024, 10, 7)
        assert result.gestational_age.weeks == 8

    def test_run_cholesterol_in_mmol(self):
        raw = {
            "total_cholesterol": 5.0,
            "hdl_cholesterol": 1.2,
            "triglycerides": 1.5,
            "unit": "mmol_l",
            "age": 50,
            "gender": "female",
        }

        result = run_calculator("cholesterol", raw, TODAY)

        assert result.ldl_estimated is True
        assert [r.lipid_type.value for r in result.readings][:2] == ["total", "ldl"]
        assert result.readings[1].label == "Near Optimal"

    def test_run_vitamin_d_in_nmol(self):
        raw = {"level": 50, "unit": "nmol_l", "age": 40, "gender": "male"}

        result = run_calculator("vitamin_d", raw, TODAY)

        assert result.status.level_ng_ml == 20.0
        assert result.status.category.value == "insufficient"

    def test_sleep_duration(self):
        result = run_calculator("sleep_duration", {"hours": 8, "age": 30}, TODAY)

        assert result.quality.value == "excellent"

    def test_rejected_input(self):
        with pytest.raises(InputValidationError) as exc_info:
            run_calculator("bmi", {"weight": 70}, TODAY)

        assert "height" in exc_info.value.field_errors
