"""Vitamin D value objects."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from ..shared.units import nmol_to_ng_ml
from ..shared.value_objects import CalculatorInput, CalculatorResult, Gender


class VitaminDUnit(str, Enum):
    NG_ML = "ng_ml"
    NMOL_L = "nmol_l"


class VitaminDCategory(str, Enum):
    SEVERE_DEFICIENCY = "severe_deficiency"
    DEFICIENCY = "deficiency"
    INSUFFICIENT = "insufficient"
    SUFFICIENT = "sufficient"
    HIGH_NORMAL = "high_normal"
    EXCESSIVE = "excessive"

    def label(self) -> str:
        return self.value.replace("_", " ").title()


class SkinType(str, Enum):
    VERY_FAIR = "very_fair"
    FAIR = "fair"
    MEDIUM = "medium"
    OLIVE = "olive"
    BROWN = "brown"
    VERY_DARK = "very_dark"

    def exposure_minutes(self) -> int:
        """Midday sun needed on a spring or autumn day."""
        minutes = {
            SkinType.VERY_FAIR: 10,
            SkinType.FAIR: 15,
            SkinType.MEDIUM: 20,
            SkinType.OLIVE: 25,
            SkinType.BROWN: 30,
            SkinType.VERY_DARK: 40,
        }
        return minutes[self]

    def spf(self) -> int:
        factors = {
            SkinType.VERY_FAIR: 50,
            SkinType.FAIR: 30,
            SkinType.MEDIUM: 30,
            SkinType.OLIVE: 20,
            SkinType.BROWN: 20,
            SkinType.VERY_DARK: 15,
        }
        return factors[self]

    @property
    def is_dark(self) -> bool:
        return self in (SkinType.BROWN, SkinType.VERY_DARK)


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"

    def exposure_multiplier(self) -> float:
        multipliers = {
            Season.SPRING: 1.0,
            Season.SUMMER: 0.8,
            Season.FALL: 1.0,
            Season.WINTER: 1.5,
        }
        return multipliers[self]


class SunscreenUse(str, Enum):
    NEVER = "never"
    SOMETIMES = "sometimes"
    USUALLY = "usually"
    ALWAYS = "always"


class DietaryIntake(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class SupplementUse(str, Enum):
    NONE = "none"
    LOW_DOSE = "low_dose"
    MODERATE_DOSE = "moderate_dose"
    HIGH_DOSE = "high_dose"


class PregnancyStatus(str, Enum):
    NOT_PREGNANT = "not_pregnant"
    PREGNANT = "pregnant"
    BREASTFEEDING = "breastfeeding"


class MedicalCondition(str, Enum):
    OSTEOPOROSIS = "osteoporosis"
    KIDNEY_DISEASE = "kidney_disease"
    LIVER_DISEASE = "liver_disease"
    MALABSORPTION = "malabsorption"
    HYPERPARATHYROIDISM = "hyperparathyroidism"
    SARCOIDOSIS = "sarcoidosis"


class RiskLevel(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class FactorImpact(str, Enum):
    PROTECTIVE = "protective"
    MODERATE = "moderate"
    HIGH = "high"


class VitaminDWarningLevel(str, Enum):
    CAUTION = "caution"
    WARNING = "warning"
    URGENT = "urgent"


class VitaminDInput(CalculatorInput):
    """
    Blood level (optional) and sun, diet and health factors.

    ``level`` is stored in ng/mL; ``unit`` records the unit it was
    entered in. Without a measured level, one is estimated from the
    other factors.
    """

    level: Optional[float] = Field(None, ge=5, le=200, description="25(OH)D (ng/mL)")
    unit: VitaminDUnit = VitaminDUnit.NG_ML
    age: int = Field(..., ge=1, le=100, description="Age in years")
    gender: Gender
    skin_type: SkinType = SkinType.FAIR
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    season: Season = Season.SUMMER
    sun_exposure_hours: float = Field(2, ge=0, le=12, description="Hours per day")
    sunscreen_use: SunscreenUse = SunscreenUse.SOMETIMES
    dietary_intake: DietaryIntake = DietaryIntake.LOW
    supplement_use: SupplementUse = SupplementUse.NONE
    supplement_dose: Optional[float] = Field(None, ge=0, le=10000, description="IU per day")
    bmi: Optional[float] = Field(None, ge=15, le=50)
    pregnancy_status: PregnancyStatus = PregnancyStatus.NOT_PREGNANT
    medical_conditions: List[MedicalCondition] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _normalize_unit(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("unit") != VitaminDUnit.NMOL_L.value:
            return data
        data = dict(data)
        value = data.get("level")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            data["level"] = nmol_to_ng_ml(value)
        return data

    def conditional_errors(self) -> Dict[str, str]:
        errors = {}
        if self.supplement_use is not SupplementUse.NONE and not self.supplement_dose:
            errors["supplement_dose"] = "Current supplement dose is required when using supplements"
        if self.pregnancy_status is not PregnancyStatus.NOT_PREGNANT and self.gender is Gender.MALE:
            errors["pregnancy_status"] = "Pregnancy status applies to female users only"
        return errors


class VitaminDStatus(CalculatorResult):
    level_ng_ml: float
    level_nmol_l: float
    estimated: bool = Field(..., description="No measured level; inferred from risk factors")
    category: VitaminDCategory
    label: str
    range: str
    recommendations: List[str]


class RiskFactor(CalculatorResult):
    factor: str
    impact: FactorImpact
    description: str


class DeficiencyRisk(CalculatorResult):
    level: RiskLevel
    score: int = Field(..., ge=0)
    risk_factors: List[RiskFactor]
    seasonal_note: str


class SunExposure(CalculatorResult):
    """Daily midday exposure in minutes."""

    minimum_minutes: int
    optimal_minutes: int
    maximum_minutes: int
    spf: int
    precautions: List[str]


class DailyDose(CalculatorResult):
    """International units per day."""

    minimum: int
    optimal: int
    maximum: int


class SupplementGuidance(CalculatorResult):
    recommended: bool
    daily_dose: DailyDose
    supplement_type: str
    duration: str
    contraindications: List[str]


class VitaminDInsight(CalculatorResult):
    category: str
    insight: str


class VitaminDWarning(CalculatorResult):
    level: VitaminDWarningLevel
    message: str
    recommendations: List[str]


class VitaminDResult(CalculatorResult):
    status: VitaminDStatus
    deficiency_risk: DeficiencyRisk
    sun_exposure: SunExposure
    supplementation: SupplementGuidance
    food_sources: List[str]
    insights: List[VitaminDInsight]
    warnings: List[VitaminDWarning]
