"""Hydration value objects."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import Field

from ..shared.value_objects import BodyMeasurementsInput, CalculatorResult, Gender


class HydrationActivityLevel(str, Enum):
    """Daily activity outside planned exercise."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def description(self) -> str:
        descriptions = {
            HydrationActivityLevel.SEDENTARY: "Mostly sitting, little movement during the day",
            HydrationActivityLevel.LIGHT: "Light movement, some walking",
            HydrationActivityLevel.MODERATE: "On your feet for part of the day",
            HydrationActivityLevel.ACTIVE: "Physically demanding job or daily training",
            HydrationActivityLevel.VERY_ACTIVE: "Heavy physical work or intense daily training",
        }
        return descriptions[self]


class Climate(str, Enum):
    COOL = "cool"
    TEMPERATE = "temperate"
    WARM = "warm"
    HOT = "hot"
    VERY_HOT = "very_hot"

    def baseline_fraction(self) -> float:
        """Extra fluid as a fraction of baseline need."""
        fractions = {
            Climate.COOL: 0.0,
            Climate.TEMPERATE: 0.05,
            Climate.WARM: 0.15,
            Climate.HOT: 0.25,
            Climate.VERY_HOT: 0.40,
        }
        return fractions[self]


class ExerciseIntensity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    def liters_per_hour(self) -> float:
        rates = {
            ExerciseIntensity.LOW: 0.3,
            ExerciseIntensity.MODERATE: 0.5,
            ExerciseIntensity.HIGH: 0.8,
        }
        return rates[self]


class SweatRate(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"

    def multiplier(self) -> float:
        multipliers = {SweatRate.LOW: 0.8, SweatRate.NORMAL: 1.0, SweatRate.HIGH: 1.3}
        return multipliers[self]


class HealthCondition(str, Enum):
    DIABETES = "diabetes"
    KIDNEY_DISEASE = "kidney_disease"
    HEART_DISEASE = "heart_disease"
    FEVER = "fever"
    VOMITING_DIARRHEA = "vomiting_diarrhea"

    def baseline_fraction(self) -> float:
        fractions = {
            HealthCondition.DIABETES: 0.10,
            HealthCondition.KIDNEY_DISEASE: 0.05,
            HealthCondition.HEART_DISEASE: 0.05,
            HealthCondition.FEVER: 0.13,
            HealthCondition.VOMITING_DIARRHEA: 0.20,
        }
        return fractions[self]


class IntakeStatus(str, Enum):
    ADEQUATE = "adequate"
    LOW = "low"
    HIGH = "high"


class HydrationInput(BodyMeasurementsInput):
    """Body data, environment and fluid-affecting habits."""

    weight: float = Field(..., ge=40, le=300, description="Body weight (kg)")
    height: float = Field(..., ge=100, le=250, description="Height (cm)")
    age: int = Field(..., ge=18, le=100, description="Age in years")
    gender: Gender
    activity_level: HydrationActivityLevel = HydrationActivityLevel.MODERATE
    climate: Climate = Climate.TEMPERATE
    exercise_minutes: float = Field(0, ge=0, le=480, description="Exercise per day (min)")
    exercise_intensity: ExerciseIntensity = ExerciseIntensity.MODERATE
    sweat_rate: SweatRate = SweatRate.NORMAL
    health_conditions: List[HealthCondition] = Field(default_factory=list)
    pregnant: bool = False
    breastfeeding: bool = False
    caffeine_mg: float = Field(0, ge=0, le=1000, description="Caffeine per day (mg)")
    alcohol_drinks: float = Field(0, ge=0, le=20, description="Standard drinks per day")
    current_intake_liters: Optional[float] = Field(
        None, ge=0, le=10, description="Current daily fluid intake (L)"
    )

    def conditional_errors(self) -> Dict[str, str]:
        if self.gender is Gender.FEMALE:
            return {}
        errors = {}
        if self.pregnant:
            errors["pregnant"] = "Pregnancy applies to female users only"
        if self.breastfeeding:
            errors["breastfeeding"] = "Breastfeeding applies to female users only"
        return errors


class FluidAdjustments(CalculatorResult):
    """Liters added on top of the baseline need, 2 decimals."""

    exercise: float
    climate: float
    health_conditions: float
    pregnancy_breastfeeding: float
    caffeine: float
    alcohol: float


class TimedRecommendation(CalculatorResult):
    timing: str
    amount: str
    reason: str


class HydrationTip(CalculatorResult):
    category: str
    tip: str


class WarningSigns(CalculatorResult):
    dehydration: Tuple[str, ...]
    overhydration: Tuple[str, ...]


class IntakeComparison(CalculatorResult):
    current_liters: float
    recommended_liters: float
    difference_liters: float
    status: IntakeStatus


class HydrationResult(CalculatorResult):
    baseline_liters: float
    adjustments: FluidAdjustments
    total_liters: float
    total_fl_oz: int
    total_cups: float
    hourly_ml: int
    activity_description: str
    recommendations: List[TimedRecommendation]
    tips: List[HydrationTip]
    insights: List[HydrationTip]
    warning_signs: WarningSigns
    intake_comparison: Optional[IntakeComparison] = None
