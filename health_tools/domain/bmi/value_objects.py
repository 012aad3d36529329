"""BMI value objects."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import Field

from ..shared.lookup import ThresholdTable
from ..shared.value_objects import BodyMeasurementsInput, CalculatorResult


class BMICategory(str, Enum):
    """Adult BMI category (WHO cut points)."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    def label(self) -> str:
        labels = {
            BMICategory.UNDERWEIGHT: "Underweight",
            BMICategory.NORMAL: "Normal weight",
            BMICategory.OVERWEIGHT: "Overweight",
            BMICategory.OBESE: "Obese",
        }
        return labels[self]


BMI_CATEGORIES: ThresholdTable[BMICategory] = ThresholdTable(
    bounds=(18.5, 25.0, 30.0),
    labels=(
        BMICategory.UNDERWEIGHT,
        BMICategory.NORMAL,
        BMICategory.OVERWEIGHT,
        BMICategory.OBESE,
    ),
)

IDEAL_BMI_MIN = 18.5
IDEAL_BMI_MAX = 24.9


class BMIInput(BodyMeasurementsInput):
    """Adult BMI input; weight and height stored in kg and cm."""

    weight: float = Field(..., ge=20, le=500, description="Body weight (kg)")
    height: float = Field(..., ge=50, le=300, description="Height (cm)")


class IdealWeightRange(CalculatorResult):
    min_kg: float
    max_kg: float


class BMIResult(CalculatorResult):
    """Adult BMI with category, ideal weight range and guidance."""

    bmi: float = Field(..., description="BMI rounded to 1 decimal")
    category: BMICategory
    category_label: str
    ideal_weight: IdealWeightRange
    weight_to_ideal_kg: float = Field(
        ...,
        description="Signed kg to the nearest edge of the ideal range, 0 inside it",
    )
    interpretation: str
    recommendations: List[str]
