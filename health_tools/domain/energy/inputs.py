"""Energy calculator inputs.

``EnergyInput`` is a tagged union on ``formula``; each variant carries
exactly the fields its BMR equation needs.
"""

from __future__ import annotations

from typing import Annotated, Dict, Literal, Union

from pydantic import Field, TypeAdapter

from ..shared.activity import ActivityLevel
from ..shared.value_objects import BodyMeasurementsInput, Gender
from .value_objects import (
    CalorieGoal,
    DiabetesType,
    Goal,
    Pace,
    SmokingStatus,
    ThyroidCondition,
)

# Plausible body-fat range per sex for Katch-McArdle
BODY_FAT_LIMITS = {
    Gender.MALE: (3.0, 35.0),
    Gender.FEMALE: (10.0, 45.0),
}


class EnergyInputBase(BodyMeasurementsInput):
    """Fields shared by all BMR formulas."""

    age: int = Field(..., ge=10, le=120, description="Age in years")
    gender: Gender
    weight: float = Field(..., ge=20, le=500, description="Body weight (kg)")
    height: float = Field(..., ge=50, le=300, description="Height (cm)")
    activity_level: ActivityLevel
    goal: Goal = Goal.MAINTAIN
    weight_change_rate: float = Field(
        0.5, ge=0.25, le=2.0, description="Target weight change (kg/week)"
    )
    thyroid: ThyroidCondition = ThyroidCondition.NONE
    diabetes: DiabetesType = DiabetesType.NONE
    smoking: SmokingStatus = SmokingStatus.NEVER
    caffeine_drinks: int = Field(0, ge=0, le=20, description="Caffeinated drinks per day")
    include_metabolic_age: bool = True


class MifflinStJeorInput(EnergyInputBase):
    formula: Literal["mifflin_st_jeor"] = "mifflin_st_jeor"


class HarrisBenedictInput(EnergyInputBase):
    formula: Literal["harris_benedict"] = "harris_benedict"


class KatchMcArdleInput(EnergyInputBase):
    """Katch-McArdle needs body fat to derive lean mass."""

    formula: Literal["katch_mcardle"] = "katch_mcardle"
    body_fat_percentage: float = Field(..., ge=3, le=50, description="Body fat (%)")

    def conditional_errors(self) -> Dict[str, str]:
        low, high = BODY_FAT_LIMITS[self.gender]
        if not low <= self.body_fat_percentage <= high:
            return {
                "body_fat_percentage": (
                    f"Body fat for {self.gender.value}s must be between "
                    f"{low:g}% and {high:g}%"
                )
            }
        return {}


EnergyInput = Annotated[
    Union[MifflinStJeorInput, HarrisBenedictInput, KatchMcArdleInput],
    Field(discriminator="formula"),
]

ENERGY_INPUT_ADAPTER: TypeAdapter[EnergyInput] = TypeAdapter(EnergyInput)


class CalorieNeedsInput(BodyMeasurementsInput):
    """Everyday calorie-needs input (Mifflin-St Jeor, no medical factors)."""

    age: int = Field(..., ge=15, le=120, description="Age in years")
    gender: Gender
    weight: float = Field(..., ge=30, le=300, description="Body weight (kg)")
    height: float = Field(..., ge=100, le=250, description="Height (cm)")
    activity_level: ActivityLevel
    goal: CalorieGoal = CalorieGoal.MAINTAIN_WEIGHT
    pace: Pace = Pace.MODERATE
