"""BloodPressureService - AHA blood pressure categories."""

from __future__ import annotations

from typing import Dict, List, Tuple

import structlog

from ..shared.lookup import ThresholdTable
from ..shared.ports import ICalculator
from ..shared.rounding import round_int
from .value_objects import (
    BloodPressureCategory,
    BloodPressureInput,
    BloodPressureResult,
    RiskLevel,
)

logger = structlog.get_logger(__name__)

# The worse of the two readings wins
SYSTOLIC_TABLE: ThresholdTable[BloodPressureCategory] = ThresholdTable(
    bounds=(120.0, 130.0, 140.0, 180.0),
    labels=tuple(BloodPressureCategory),
)
DIASTOLIC_TABLE: ThresholdTable[BloodPressureCategory] = ThresholdTable(
    bounds=(80.0, 90.0, 120.0),
    labels=(
        BloodPressureCategory.NORMAL,
        BloodPressureCategory.STAGE_1,
        BloodPressureCategory.STAGE_2,
        BloodPressureCategory.CRISIS,
    ),
)

_SEVERITY = list(BloodPressureCategory)

_DETAILS: Dict[BloodPressureCategory, Tuple[RiskLevel, str, List[str]]] = {
    BloodPressureCategory.NORMAL: (
        RiskLevel.LOW,
        "Your blood pressure is in the normal range.",
        [
            "Maintain your current healthy lifestyle",
            "Continue regular physical activity",
            "Monitor blood pressure annually",
        ],
    ),
    BloodPressureCategory.ELEVATED: (
        RiskLevel.MODERATE,
        "Your blood pressure is elevated. Act now to keep it from developing "
        "into high blood pressure.",
        [
            "Adopt a heart-healthy diet",
            "Increase physical activity to 150 minutes per week",
            "Reduce sodium intake to less than 2,300 mg daily",
            "Monitor blood pressure monthly",
        ],
    ),
    BloodPressureCategory.STAGE_1: (
        RiskLevel.HIGH,
        "You have Stage 1 hypertension. Lifestyle changes and possibly "
        "medication are recommended.",
        [
            "See your doctor within a month for evaluation",
            "Follow the DASH diet",
            "Manage stress through relaxation techniques",
            "Monitor blood pressure weekly",
        ],
    ),
    BloodPressureCategory.STAGE_2: (
        RiskLevel.HIGH,
        "You have Stage 2 hypertension. Medical treatment is typically recommended.",
        [
            "Schedule an appointment with your doctor promptly",
            "Monitor blood pressure daily",
            "Limit alcohol and quit smoking",
            "Reduce sodium intake to less than 2,300 mg daily",
        ],
    ),
    BloodPressureCategory.CRISIS: (
        RiskLevel.CRITICAL,
        "This reading suggests a hypertensive crisis. Seek immediate medical attention.",
        [
            "Call emergency services if you have chest pain, shortness of breath or vision changes",
            "Do not drive yourself to the hospital",
            "Rest quietly until help arrives",
        ],
    ),
}


def classify_blood_pressure(systolic: float, diastolic: float) -> BloodPressureCategory:
    """AHA category: the more severe of the systolic and diastolic bands."""
    by_systolic = SYSTOLIC_TABLE.classify(systolic)
    by_diastolic = DIASTOLIC_TABLE.classify(diastolic)
    return max(by_systolic, by_diastolic, key=_SEVERITY.index)


class BloodPressureService(ICalculator[BloodPressureInput, BloodPressureResult]):
    """Categorize a blood pressure reading (AHA 2017 guideline).

    Categories:
        Normal:    < 120 and < 80
        Elevated:  120-129 and < 80
        Stage 1:   130-139 or 80-89
        Stage 2:   >= 140 or >= 90
        Crisis:    >= 180 or >= 120
    """

    def calculate(self, data: BloodPressureInput) -> BloodPressureResult:
        category = classify_blood_pressure(data.systolic, data.diastolic)
        risk, interpretation, recommendations = _DETAILS[category]
        recommendations = list(recommendations)

        if data.age is not None and data.age >= 65:
            recommendations.append(
                "Discuss age-specific blood pressure targets with your doctor"
            )

        logger.debug("blood_pressure.calculated", category=category.value)

        return BloodPressureResult(
            systolic=round_int(data.systolic),
            diastolic=round_int(data.diastolic),
            pulse_pressure=round_int(data.systolic - data.diastolic),
            category=category,
            label=category.label(),
            risk_level=risk,
            interpretation=interpretation,
            urgent=category is BloodPressureCategory.CRISIS,
            recommendations=recommendations,
        )
