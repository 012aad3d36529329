"""BMI calculation service.

Body Mass Index with WHO categories and the ideal weight range for a
given height.
"""

from __future__ import annotations

from typing import Dict, List

import structlog

from ..shared.body import calculate_bmi
from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up
from .value_objects import (
    BMI_CATEGORIES,
    IDEAL_BMI_MAX,
    IDEAL_BMI_MIN,
    BMICategory,
    BMIInput,
    BMIResult,
    IdealWeightRange,
)

logger = structlog.get_logger(__name__)

_INTERPRETATIONS: Dict[BMICategory, str] = {
    BMICategory.UNDERWEIGHT: (
        "Your BMI is below the healthy range. Being underweight can be linked "
        "to nutritional deficiencies and a weaker immune system."
    ),
    BMICategory.NORMAL: (
        "Your BMI is within the healthy range for your height."
    ),
    BMICategory.OVERWEIGHT: (
        "Your BMI is above the healthy range. Carrying extra weight raises the "
        "risk of heart disease, type 2 diabetes and high blood pressure."
    ),
    BMICategory.OBESE: (
        "Your BMI is in the obese range, which is associated with a "
        "significantly higher risk of chronic disease."
    ),
}

_RECOMMENDATIONS: Dict[BMICategory, List[str]] = {
    BMICategory.UNDERWEIGHT: [
        "Talk to a healthcare provider about a healthy weight gain plan",
        "Eat nutrient-dense foods with healthy fats and lean protein",
        "Add strength training to build muscle mass",
    ],
    BMICategory.NORMAL: [
        "Keep a balanced diet rich in whole foods",
        "Aim for at least 150 minutes of moderate activity per week",
        "Check your weight regularly to stay in range",
    ],
    BMICategory.OVERWEIGHT: [
        "Aim for a gradual loss of 0.25-0.5 kg per week",
        "Increase daily activity and limit sugary drinks",
        "Favour vegetables, whole grains and lean protein",
    ],
    BMICategory.OBESE: [
        "Consult a healthcare provider for a personalised plan",
        "Set small, sustainable goals for diet and activity",
        "Ask about screening for blood pressure, cholesterol and blood sugar",
    ],
}


def ideal_weight_range(height_cm: float) -> IdealWeightRange:
    """Weights that put the given height inside the normal BMI band."""
    height_m_sq = (height_cm / 100) ** 2
    return IdealWeightRange(
        min_kg=round_half_up(IDEAL_BMI_MIN * height_m_sq, 1),
        max_kg=round_half_up(IDEAL_BMI_MAX * height_m_sq, 1),
    )


class BMIService(ICalculator[BMIInput, BMIResult]):
    """Adult Body Mass Index calculator.

    Formula:
        BMI = weight (kg) / height (m)²

    Categories (half-open bands):
        < 18.5 underweight, [18.5, 25) normal, [25, 30) overweight, >= 30 obese

    Example:
        >>> service = BMIService()
        >>> result = service.calculate(BMIInput(weight=70, height=175))
        >>> result.bmi, result.category.value
        (22.9, 'normal')
    """

    def calculate(self, data: BMIInput) -> BMIResult:
        bmi = round_half_up(calculate_bmi(data.weight, data.height), 1)
        category = BMI_CATEGORIES.classify(bmi)
        ideal = ideal_weight_range(data.height)

        if data.weight < ideal.min_kg:
            weight_to_ideal = ideal.min_kg - data.weight
        elif data.weight > ideal.max_kg:
            weight_to_ideal = ideal.max_kg - data.weight
        else:
            weight_to_ideal = 0.0

        logger.debug("bmi.calculated", bmi=bmi, category=category.value)

        return BMIResult(
            bmi=bmi,
            category=category,
            category_label=category.label(),
            ideal_weight=ideal,
            weight_to_ideal_kg=round_half_up(weight_to_ideal, 1),
            interpretation=_INTERPRETATIONS[category],
            recommendations=list(_RECOMMENDATIONS[category]),
        )
