"""Unit tests for CholesterolService."""

import pytest

from health_tools.domain.cholesterol import (
    CholesterolInput,
    CholesterolService,
    FactorImpact,
    LipidType,
    LipidWarningLevel,
    RiskCategory,
    StatinIntensity,
    TreatmentPriority,
    estimate_ldl,
)
from health_tools.domain.shared import InputValidationError, parse_input


class TestCholesterolService:
    """Test lipid categories, ratios and risk scoring."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = CholesterolService()
        self.panel = CholesterolInput(
            total_cholesterol=220,
            hdl_cholesterol=45,
            triglycerides=150,
            age=50,
            gender="male",
        )

    def test_friedewald_estimate(self):
        assert estimate_ldl(200, 50, 150) == 120
        assert estimate_ldl(200, 50, 400) is None
        assert estimate_ldl(150, 140, 100) is None

    def test_readings(self):
        """220 / 45 / 150 -> Friedewald LDL 145."""
        result = self.service.calculate(self.panel)
        by_type = {r.lipid_type: r for r in result.readings}

        assert result.ldl_estimated is True
        assert by_type[LipidType.LDL].value_mg_dl == 145.0
        assert by_type[LipidType.LDL].label == "Borderline High"
        assert by_type[LipidType.TOTAL].label == "Borderline High"
        assert by_type[LipidType.HDL].label == "Borderline"
        assert by_type[LipidType.TRIGLYCERIDES].label == "Borderline High"
        assert by_type[LipidType.NON_HDL].value_mg_dl == 175.0

    def test_ratios(self):
        ratios = self.service.calculate(self.panel).ratios

        assert (ratios.total_to_hdl.value, ratios.total_to_hdl.label) == (4.9, "Good")
        assert (ratios.ldl_to_hdl.value, ratios.ldl_to_hdl.label) == (3.2, "Borderline")
        assert (ratios.triglyceride_to_hdl.value, ratios.triglyceride_to_hdl.label) == (
            3.3,
            "Good",
        )

    def test_intermediate_risk(self):
        """Male over 45 scores 3 points: 9% ten-year risk."""
        result = self.service.calculate(self.panel)

        assert result.risk.ten_year_risk == 9.0
        assert result.risk.category == RiskCategory.INTERMEDIATE
        assert result.risk.lifetime_risk == 23
        assert result.treatment.ldl_target == 100
        assert result.treatment.priority == TreatmentPriority.MEDICATION_CONSIDERATION
        assert result.treatment.statin.intensity == StatinIntensity.MODERATE
        assert result.treatment.monitoring_frequency == "Every 3-6 months"
        assert [i.category for i in result.insights] == ["Metabolic Pattern"]
        assert result.warnings == []

    def test_low_risk_lifestyle_only(self):
        data = CholesterolInput(
            total_cholesterol=180,
            hdl_cholesterol=65,
            triglycerides=80,
            age=30,
            gender="female",
        )

        result = self.service.calculate(data)

        assert result.readings[1].label == "Optimal"
        assert result.risk.ten_year_risk == 1.0
        assert result.risk.category == RiskCategory.LOW
        assert [f.impact for f in result.risk.risk_factors] == [FactorImpact.PROTECTIVE]
        assert result.treatment.priority == TreatmentPriority.LIFESTYLE
        assert result.treatment.statin.indicated is False
        assert result.treatment.monitoring_frequency == "Annually"

    def test_high_risk_cluster(self):
        data = CholesterolInput(
            total_cholesterol=240,
            hdl_cholesterol=35,
            triglycerides=250,
            age=60,
            gender="male",
            smoking_status="current",
            diabetes_status="type2",
        )

        result = self.service.calculate(data)

        assert result.risk.ten_year_risk == 28.8
        assert result.risk.category == RiskCategory.HIGH
        assert result.risk.lifetime_risk == 60
        assert result.treatment.ldl_target == 70
        assert result.treatment.statin.intensity == StatinIntensity.HIGH
        assert "Complete smoking cessation" in result.treatment.lifestyle_interventions
        assert "Risk Clustering" in [i.category for i in result.insights]
        assert [w.level for w in result.warnings] == [LipidWarningLevel.WARNING]

    def test_measured_very_high_ldl(self):
        data = CholesterolInput(
            total_cholesterol=300,
            ldl_cholesterol=200,
            hdl_cholesterol=50,
            triglycerides=120,
            age=50,
            gender="male",
        )

        result = self.service.calculate(data)

        assert result.ldl_estimated is False
        assert result.readings[1].label == "Very High"
        assert result.risk.ten_year_risk == 11.7
        assert result.warnings[0].level == LipidWarningLevel.URGENT
        assert "familial hypercholesterolemia" in result.warnings[0].message

    def test_very_high_triglycerides_skip_ldl(self):
        data = CholesterolInput(
            total_cholesterol=260,
            hdl_cholesterol=35,
            triglycerides=600,
            age=30,
            gender="female",
            physical_activity="sedentary",
        )

        result = self.service.calculate(data)

        assert [r.lipid_type for r in result.readings] == [
            LipidType.TOTAL,
            LipidType.HDL,
            LipidType.TRIGLYCERIDES,
            LipidType.NON_HDL,
        ]
        assert result.ldl_estimated is False
        assert result.ratios.ldl_to_hdl is None
        assert result.risk.ten_year_risk == 3.6
        assert [i.category for i in result.insights] == ["Metabolic Pattern", "Lifestyle"]
        assert len(result.warnings) == 1
        assert "pancreatitis" in result.warnings[0].message

    def test_mmol_input(self):
        """5.0 mmol/L total cholesterol is 193.35 mg/dL."""
        data = parse_input(
            CholesterolInput,
            {
                "total_cholesterol": 5.0,
                "hdl_cholesterol": 1.2,
                "triglycerides": 1.5,
                "unit": "mmol_l",
                "age": 45,
                "gender": "female",
            },
        )

        result = self.service.calculate(data)

        assert result.readings[0].value_mg_dl == pytest.approx(193.35, abs=0.051)
        assert result.readings[0].value_mmol_l == 5.0
        assert result.readings[0].label == "Desirable"

    def test_mmol_out_of_range(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                CholesterolInput,
                {
                    "total_cholesterol": 30,
                    "hdl_cholesterol": 1.2,
                    "triglycerides": 1.5,
                    "unit": "mmol_l",
                    "age": 45,
                    "gender": "female",
                },
            )

        assert list(exc_info.value.field_errors) == ["total_cholesterol"]

    def test_hdl_must_be_below_total(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                CholesterolInput,
                {
                    "total_cholesterol": 120,
                    "hdl_cholesterol": 130,
                    "triglycerides": 100,
                    "age": 45,
                    "gender": "male",
                },
            )

        assert list(exc_info.value.field_errors) == ["hdl_cholesterol"]

    def test_prior_cvd_at_young_age_rejected(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                CholesterolInput,
                {
                    "total_cholesterol": 200,
                    "hdl_cholesterol": 50,
                    "triglycerides": 100,
                    "age": 30,
                    "gender": "male",
                    "prior_cvd": True,
                },
            )

        assert "prior_cvd" in exc_info.value.field_errors

    def test_idempotent(self):
        assert self.service.calculate(self.panel) == self.service.calculate(self.panel)
