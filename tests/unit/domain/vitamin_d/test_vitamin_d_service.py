"""Unit tests for VitaminDService."""

import pytest

from health_tools.domain.shared import InputValidationError, parse_input
from health_tools.domain.vitamin_d import (
    RiskLevel,
    Season,
    SkinType,
    VitaminDCategory,
    VitaminDInput,
    VitaminDService,
    VitaminDWarningLevel,
    assess_deficiency_risk,
    estimate_level,
    sun_exposure,
    vitamin_d_status,
)


class TestVitaminDService:
    """Test status bands, risk scoring and supplementation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = VitaminDService()

    @pytest.mark.parametrize(
        "level,expected",
        [
            (11.9, VitaminDCategory.SEVERE_DEFICIENCY),
            (12, VitaminDCategory.DEFICIENCY),
            (20, VitaminDCategory.INSUFFICIENT),
            (30, VitaminDCategory.SUFFICIENT),
            (50, VitaminDCategory.HIGH_NORMAL),
            (100, VitaminDCategory.EXCESSIVE),
        ],
    )
    def test_status_bands(self, level, expected):
        assert vitamin_d_status(level).category == expected

    def test_measured_insufficient(self):
        data = VitaminDInput(level=25, age=40, gender="male")

        result = self.service.calculate(data)

        assert result.status.label == "Insufficient"
        assert result.status.level_nmol_l == 62.5
        assert result.status.estimated is False
        assert result.supplementation.recommended is True
        assert result.supplementation.daily_dose.optimal == 1000
        assert result.supplementation.duration == "1-3 months, then maintenance dose"
        assert result.deficiency_risk.level == RiskLevel.VERY_LOW
        assert result.deficiency_risk.risk_factors == []
        assert result.warnings == []

    def test_estimated_level(self):
        """Fair skin in summer: 25 + 5 + 8 = 38 ng/mL."""
        data = VitaminDInput(age=40, gender="female")

        result = self.service.calculate(data)

        assert estimate_level(data) == 38
        assert result.status.estimated is True
        assert result.status.category == VitaminDCategory.SUFFICIENT
        assert result.supplementation.recommended is True
        assert result.supplementation.daily_dose.optimal == 800

    def test_estimate_clamped_to_floor(self):
        data = VitaminDInput(
            age=40,
            gender="female",
            skin_type="very_dark",
            season="winter",
            sun_exposure_hours=0.5,
            dietary_intake="very_low",
        )

        result = self.service.calculate(data)

        assert estimate_level(data) == 10
        assert result.status.category == VitaminDCategory.SEVERE_DEFICIENCY
        assert result.warnings[0].level == VitaminDWarningLevel.URGENT
        assert result.deficiency_risk.score == 8
        assert result.deficiency_risk.level == RiskLevel.VERY_HIGH
        assert [i.category for i in result.insights] == [
            "Seasonal Health",
            "Genetic Factors",
            "Lifestyle Pattern",
        ]

    def test_dose_adjusted_for_age_and_bmi(self):
        data = VitaminDInput(level=15, age=70, gender="female", bmi=32)

        dose = self.service.calculate(data).supplementation.daily_dose

        assert (dose.minimum, dose.optimal, dose.maximum) == (1000, 3600, 6600)

    @pytest.mark.parametrize(
        "sunscreen_use,expected",
        [("sometimes", RiskLevel.LOW), ("always", RiskLevel.MODERATE)],
    )
    def test_risk_band_edges(self, sunscreen_use, expected):
        """Age over 65 scores 2 (low); always using sunscreen adds 1 (moderate)."""
        data = VitaminDInput(age=70, gender="male", sunscreen_use=sunscreen_use)

        assert assess_deficiency_risk(data).level == expected

    def test_excessive_level(self):
        result = self.service.calculate(VitaminDInput(level=120, age=40, gender="male"))

        assert result.status.category == VitaminDCategory.EXCESSIVE
        assert result.supplementation.recommended is False
        assert result.supplementation.daily_dose.optimal == 0
        assert "toxic" in result.warnings[0].message

    def test_kidney_disease_with_supplements(self):
        data = VitaminDInput(
            level=35,
            age=50,
            gender="female",
            supplement_use="moderate_dose",
            supplement_dose=1000,
            medical_conditions=["kidney_disease"],
        )

        result = self.service.calculate(data)

        assert [w.level for w in result.warnings] == [VitaminDWarningLevel.WARNING]
        assert result.supplementation.contraindications == [
            "Kidney disease - requires medical supervision"
        ]
        assert result.deficiency_risk.score == 0
        assert result.deficiency_risk.level == RiskLevel.VERY_LOW

    def test_sun_exposure_by_skin_and_season(self):
        winter = sun_exposure(SkinType.VERY_FAIR, Season.WINTER)
        summer = sun_exposure(SkinType.FAIR, Season.SUMMER)

        assert (winter.minimum_minutes, winter.optimal_minutes, winter.maximum_minutes) == (
            8,
            15,
            30,
        )
        assert winter.spf == 50
        assert (summer.optimal_minutes, summer.spf) == (12, 30)

    def test_nmol_input(self):
        data = parse_input(
            VitaminDInput, {"level": 75, "unit": "nmol_l", "age": 40, "gender": "male"}
        )

        result = self.service.calculate(data)

        assert result.status.level_ng_ml == 30.0
        assert result.status.category == VitaminDCategory.SUFFICIENT

    def test_nmol_out_of_range(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                VitaminDInput, {"level": 600, "unit": "nmol_l", "age": 40, "gender": "male"}
            )

        assert list(exc_info.value.field_errors) == ["level"]

    def test_supplement_dose_required(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                VitaminDInput,
                {"age": 40, "gender": "female", "supplement_use": "low_dose"},
            )

        assert list(exc_info.value.field_errors) == ["supplement_dose"]

    def test_pregnancy_for_female_only(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                VitaminDInput,
                {"age": 30, "gender": "male", "pregnancy_status": "pregnant"},
            )

        assert list(exc_info.value.field_errors) == ["pregnancy_status"]

    def test_idempotent(self):
        data = VitaminDInput(age=40, gender="female")

        assert self.service.calculate(data) == self.service.calculate(data)
