"""Kids' BMI value objects and CDC reference data."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import Field

from ..shared.lookup import ThresholdTable
from ..shared.value_objects import BodyMeasurementsInput, CalculatorResult, Gender

PERCENTILE_KEYS: Tuple[int, ...] = (5, 10, 25, 50, 75, 85, 95)

# BMI at p5, p10, p25, p50, p75, p85, p95 by age in months (simplified CDC charts)
BMI_PERCENTILE_TABLE: Dict[Gender, Dict[int, Tuple[float, ...]]] = {
    Gender.MALE: {
        24: (14.8, 15.2, 15.8, 16.5, 17.3, 17.8, 19.3),
        36: (14.3, 14.7, 15.3, 16.0, 16.9, 17.5, 19.2),
        48: (13.9, 14.3, 14.9, 15.7, 16.8, 17.6, 19.4),
        60: (13.7, 14.1, 14.7, 15.6, 16.8, 17.7, 19.8),
        84: (13.6, 14.0, 14.7, 15.7, 17.1, 18.2, 20.6),
        120: (14.0, 14.5, 15.4, 16.7, 18.4, 19.8, 23.0),
        156: (15.1, 15.7, 16.9, 18.5, 20.8, 22.6, 26.8),
        192: (16.6, 17.3, 18.6, 20.5, 23.1, 25.2, 29.7),
        228: (17.8, 18.6, 20.0, 22.0, 24.8, 27.1, 31.8),
    },
    Gender.FEMALE: {
        24: (14.4, 14.8, 15.4, 16.2, 17.1, 17.7, 19.2),
        36: (13.9, 14.3, 14.9, 15.8, 16.9, 17.6, 19.4),
        48: (13.6, 14.0, 14.6, 15.5, 16.8, 17.8, 19.9),
        60: (13.4, 13.8, 14.4, 15.4, 16.8, 18.0, 20.4),
        84: (13.3, 13.7, 14.4, 15.6, 17.4, 18.9, 22.1),
        120: (13.8, 14.3, 15.3, 16.9, 19.3, 21.4, 25.6),
        156: (15.4, 16.0, 17.3, 19.4, 22.1, 24.2, 28.6),
        192: (16.3, 17.0, 18.4, 20.7, 23.7, 25.9, 30.7),
        228: (16.8, 17.5, 19.0, 21.3, 24.4, 26.8, 32.0),
    },
}


class KidsBMICategory(str, Enum):
    UNDERWEIGHT = "underweight"
    HEALTHY_WEIGHT = "healthy_weight"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    def label(self) -> str:
        return self.value.replace("_", " ").title()


KIDS_BMI_CATEGORIES: ThresholdTable[KidsBMICategory] = ThresholdTable(
    bounds=(5.0, 85.0, 95.0),
    labels=tuple(KidsBMICategory),
)


class Confidence(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class GrowthPhase(str, Enum):
    EARLY_CHILDHOOD = "early_childhood"
    MIDDLE_CHILDHOOD = "middle_childhood"
    PRE_ADOLESCENT = "pre_adolescent"
    ADOLESCENT = "adolescent"


class KidsBMIInput(BodyMeasurementsInput):
    """Child measurements; height/weight may be entered in imperial units."""

    age_years: int = Field(..., ge=2, le=19, description="Age in whole years")
    age_months: int = Field(0, ge=0, le=11, description="Additional months")
    gender: Gender
    height: float = Field(..., ge=50, le=250, description="Height (cm)")
    weight: float = Field(..., ge=5, le=200, description="Weight (kg)")
    mother_height: Optional[float] = Field(None, ge=120, le=200, description="cm")
    father_height: Optional[float] = Field(None, ge=120, le=220, description="cm")

    @property
    def age_in_months(self) -> int:
        return self.age_years * 12 + self.age_months

    def conditional_errors(self) -> Dict[str, str]:
        if self.age_years < 5 and self.height > 150:
            return {"height": "Height seems too tall for a child under 5"}
        if self.age_years > 15 and self.height < 120:
            return {"height": "Height seems too short for a teenager over 15"}
        return {}


class PercentileBands(CalculatorResult):
    """Interpolated BMI at each reference percentile for the child's age."""

    p5: float
    p10: float
    p25: float
    p50: float
    p75: float
    p85: float
    p95: float


class KidsCategoryInfo(CalculatorResult):
    category: KidsBMICategory
    label: str
    description: str
    percentile_range: str
    recommendations: List[str]


class GrowthChart(CalculatorResult):
    percentile: float = Field(..., ge=0, le=99)
    z_score: float
    category: KidsCategoryInfo
    comparison_to_average: str
    bands: PercentileBands


class HeightRange(CalculatorResult):
    min_cm: float
    max_cm: float


class PredictedAdultHeight(CalculatorResult):
    height_cm: int
    range: HeightRange
    confidence: Confidence
    method: str


class DailyCalories(CalculatorResult):
    sedentary: int
    moderately_active: int
    active: int


class KidsMacro(CalculatorResult):
    grams: int
    percentage: int


class KidsMacros(CalculatorResult):
    protein: KidsMacro
    carbohydrates: KidsMacro
    fats: KidsMacro


class NutritionGuidance(CalculatorResult):
    daily_calories: DailyCalories
    macronutrients: KidsMacros
    daily_water_cups: int


class ActivityGuidance(CalculatorResult):
    daily_minutes: int
    moderate_minutes: int
    vigorous_minutes: int
    strength_days_per_week: int
    max_screen_hours: int
    screen_time_tips: List[str]
    sleep_hours: str


class DevelopmentalContext(CalculatorResult):
    growth_phase: GrowthPhase
    typical_growth_pattern: str
    parenting_tips: List[str]


class KidsWarning(CalculatorResult):
    message: str
    recommendations: List[str]


class KidsBMIResult(CalculatorResult):
    bmi: float
    age_in_months: int
    growth_chart: GrowthChart
    predicted_adult_height: PredictedAdultHeight
    nutrition: NutritionGuidance
    activity: ActivityGuidance
    development: DevelopmentalContext
    insights: List[str]
    warnings: List[KidsWarning]
