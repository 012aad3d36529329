"""Heart rate zone value objects."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Tuple, Union

from pydantic import Field, TypeAdapter

from ..shared.activity import ActivityLevel
from ..shared.value_objects import CalculatorInput, CalculatorResult


class ZoneMethod(str, Enum):
    AGE_FORMULA = "age_formula"
    KARVONEN = "karvonen"
    CUSTOM_MAX = "custom_max"


class TrainingGoal(str, Enum):
    FAT_BURN = "fat_burn"
    AEROBIC = "aerobic"
    ANAEROBIC = "anaerobic"
    VO2_MAX = "vo2_max"
    RECOVERY = "recovery"


class ZoneName(str, Enum):
    """Training zones from lowest to highest intensity."""

    RECOVERY = "recovery"
    FAT_BURN = "fat_burn"
    AEROBIC = "aerobic"
    ANAEROBIC = "anaerobic"
    VO2_MAX = "vo2_max"

    def label(self) -> str:
        labels = {
            ZoneName.RECOVERY: "Recovery Zone",
            ZoneName.FAT_BURN: "Fat Burn Zone",
            ZoneName.AEROBIC: "Aerobic Zone",
            ZoneName.ANAEROBIC: "Anaerobic Zone",
            ZoneName.VO2_MAX: "VO2 Max Zone",
        }
        return labels[self]


def age_predicted_max(age: int) -> int:
    """Fox formula: 220 - age."""
    return 220 - age


class _HeartRateInputBase(CalculatorInput):
    age: int = Field(..., ge=15, le=100, description="Age in years")
    resting_heart_rate: Optional[int] = Field(
        None, ge=40, le=120, description="Resting heart rate (bpm)"
    )
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    goals: List[TrainingGoal] = Field(
        default_factory=lambda: [TrainingGoal.FAT_BURN, TrainingGoal.AEROBIC]
    )

    def max_heart_rate_bpm(self) -> int:
        return age_predicted_max(self.age)

    def conditional_errors(self) -> Dict[str, str]:
        if (
            self.resting_heart_rate is not None
            and self.resting_heart_rate >= self.max_heart_rate_bpm()
        ):
            return {
                "resting_heart_rate": "Resting heart rate must be lower than maximum heart rate"
            }
        return {}


class AgeFormulaInput(_HeartRateInputBase):
    method: Literal["age_formula"] = "age_formula"


class KarvonenInput(_HeartRateInputBase):
    """Heart rate reserve method; resting heart rate is required."""

    method: Literal["karvonen"] = "karvonen"
    resting_heart_rate: int = Field(..., ge=40, le=120, description="Resting heart rate (bpm)")


class CustomMaxInput(_HeartRateInputBase):
    method: Literal["custom_max"] = "custom_max"
    max_heart_rate: int = Field(..., ge=120, le=220, description="Tested maximum heart rate (bpm)")

    def max_heart_rate_bpm(self) -> int:
        return self.max_heart_rate

    def conditional_errors(self) -> Dict[str, str]:
        errors = {}
        if self.max_heart_rate < 0.8 * age_predicted_max(self.age):
            errors["max_heart_rate"] = "Maximum heart rate seems too low for your age"
        errors.update(super().conditional_errors())
        return errors


HeartRateInput = Annotated[
    Union[AgeFormulaInput, KarvonenInput, CustomMaxInput],
    Field(discriminator="method"),
]

HEART_RATE_INPUT_ADAPTER: TypeAdapter[HeartRateInput] = TypeAdapter(HeartRateInput)


# ═══════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════


class HeartRateZone(CalculatorResult):
    zone: ZoneName
    name: str
    description: str
    purpose: str
    benefits: List[str]
    min_bpm: int
    max_bpm: int
    min_percentage: int
    max_percentage: int
    intensity: str
    duration: str
    examples: List[str]


class ZoneRecommendation(CalculatorResult):
    zone: ZoneName
    recommendation: str
    reason: str
    sessions_per_week: str
    session_duration: str


class TrainingTip(CalculatorResult):
    category: str
    tip: str


class MethodologyInfo(CalculatorResult):
    name: str
    description: str
    accuracy: str
    advantages: Tuple[str, ...]
    limitations: Tuple[str, ...]


class FitnessInsight(CalculatorResult):
    category: str
    insight: str


class HeartRateResult(CalculatorResult):
    method: ZoneMethod
    max_heart_rate: int
    resting_heart_rate: Optional[int] = None
    heart_rate_reserve: Optional[int] = Field(
        None, description="Max minus resting heart rate, Karvonen only"
    )
    zones: List[HeartRateZone]
    recommendations: List[ZoneRecommendation]
    training_tips: List[TrainingTip]
    methodology: MethodologyInfo
    fitness_insights: List[FitnessInsight]
