"""BloodSugarService - glucose and HbA1c classification with risk level."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import structlog

from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up, round_int
from ..shared.units import mg_dl_to_mmol
from .value_objects import (
    GLUCOSE_TABLES,
    HBA1C_CONTROL_TABLE,
    HBA1C_TABLE,
    RISK_LEVELS,
    BloodSugarInput,
    BloodSugarResult,
    EmergencyWarning,
    EstimatedAverageGlucose,
    GlucoseCategory,
    GlucoseReading,
    HbA1cControl,
    HbA1cReading,
    ReadingType,
    RiskAssessment,
    WarningSeverity,
)

logger = structlog.get_logger(__name__)

_LABELS: Dict[Tuple[ReadingType, GlucoseCategory], str] = {
    (ReadingType.FASTING, GlucoseCategory.LOW): "Hypoglycemia",
    (ReadingType.FASTING, GlucoseCategory.NORMAL): "Normal",
    (ReadingType.FASTING, GlucoseCategory.PREDIABETES): "Prediabetes",
    (ReadingType.FASTING, GlucoseCategory.DIABETES): "Diabetes Range",
    (ReadingType.POST_MEAL, GlucoseCategory.LOW): "Hypoglycemia",
    (ReadingType.POST_MEAL, GlucoseCategory.NORMAL): "Normal",
    (ReadingType.POST_MEAL, GlucoseCategory.PREDIABETES): "Elevated",
    (ReadingType.POST_MEAL, GlucoseCategory.DIABETES): "High",
    (ReadingType.RANDOM, GlucoseCategory.LOW): "Hypoglycemia",
    (ReadingType.RANDOM, GlucoseCategory.NORMAL): "Normal",
    (ReadingType.RANDOM, GlucoseCategory.PREDIABETES): "Elevated",
    (ReadingType.RANDOM, GlucoseCategory.DIABETES): "Diabetes Range",
}

_GLUCOSE_RECOMMENDATIONS: Dict[GlucoseCategory, List[str]] = {
    GlucoseCategory.LOW: [
        "Treat immediately with 15 g of fast-acting carbohydrates",
        "Recheck in 15 minutes",
        "Contact your healthcare provider if episodes are frequent",
    ],
    GlucoseCategory.NORMAL: [
        "Maintain a healthy lifestyle",
        "Continue regular screening if you are at risk",
    ],
    GlucoseCategory.PREDIABETES: [
        "Lifestyle changes are recommended",
        "Increase physical activity, especially after meals",
        "Follow up with your healthcare provider",
    ],
    GlucoseCategory.DIABETES: [
        "Consult your healthcare provider promptly",
        "Confirm with repeat testing",
        "Monitor blood sugar regularly",
    ],
}

_HBA1C_RECOMMENDATIONS: Dict[Optional[HbA1cControl], List[str]] = {
    None: [],
    HbA1cControl.GOOD: [
        "Maintain your current diabetes management",
        "Keep up regular monitoring and follow-up",
    ],
    HbA1cControl.FAIR: [
        "Review your diabetes management plan",
        "Discuss medication adjustments with your doctor",
        "Monitor more frequently",
    ],
    HbA1cControl.POOR: [
        "Seek a medical consultation soon",
        "Have a comprehensive management review",
        "Ask about screening for complications",
    ],
}

_RISK_FACTOR_TEXT = {
    GlucoseCategory.PREDIABETES: "Reading in the prediabetes range",
    GlucoseCategory.DIABETES: "Reading in the diabetes range",
}

_LIFESTYLE_TIPS: Dict[GlucoseCategory, List[str]] = {
    GlucoseCategory.LOW: [
        "Eat regular meals and avoid skipping breakfast",
        "Carry fast-acting carbohydrates with you",
    ],
    GlucoseCategory.NORMAL: [
        "Keep a balanced diet rich in fiber",
        "Stay active for at least 150 minutes per week",
    ],
    GlucoseCategory.PREDIABETES: [
        "Losing 5-7% of body weight lowers diabetes risk substantially",
        "Replace refined carbohydrates with whole grains",
        "Take a short walk after meals",
    ],
    GlucoseCategory.DIABETES: [
        "Spread carbohydrates evenly across the day",
        "Track your readings to share with your care team",
        "Stay well hydrated",
    ],
}


def _range_label(reading_type: ReadingType, category: GlucoseCategory) -> str:
    lower, upper = GLUCOSE_TABLES[reading_type].band(category)
    if lower is None:
        return f"<{upper:g} mg/dL"
    if upper is None:
        return f"≥{lower:g} mg/dL"
    return f"{lower:g}-{upper - 1:g} mg/dL"


def classify_glucose(value_mg_dl: float, reading_type: ReadingType) -> GlucoseCategory:
    return GLUCOSE_TABLES[reading_type].classify(value_mg_dl)


def hba1c_to_mmol_mol(percentage: float) -> float:
    """IFCC units from NGSP percentage."""
    return (percentage - 2.15) * 10.929


def estimated_average_glucose(percentage: float) -> float:
    """eAG in mg/dL (ADAG study): 28.7 × A1c - 46.7."""
    return 28.7 * percentage - 46.7


def _emergency_for_glucose(value_mg_dl: float) -> Optional[EmergencyWarning]:
    if value_mg_dl < 54:
        return EmergencyWarning(
            severity=WarningSeverity.SEVERE,
            message="Severe hypoglycemia detected - immediate action required",
            actions=[
                "Treat with 15-20 g of fast-acting carbohydrates immediately",
                "Call emergency services if the person is unconscious",
                "Recheck glucose in 15 minutes",
            ],
        )
    if value_mg_dl < 70:
        return EmergencyWarning(
            severity=WarningSeverity.URGENT,
            message="Hypoglycemia detected - treat immediately",
            actions=[
                "Consume 15 g of fast-acting carbohydrates",
                "Recheck in 15 minutes",
                "Repeat treatment if still low",
            ],
        )
    if value_mg_dl > 400:
        return EmergencyWarning(
            severity=WarningSeverity.SEVERE,
            message="Extremely high blood sugar - seek immediate medical care",
            actions=[
                "Contact emergency services",
                "Check for ketones if possible",
                "Stay hydrated",
            ],
        )
    if value_mg_dl > 300:
        return EmergencyWarning(
            severity=WarningSeverity.URGENT,
            message="Very high blood sugar - contact your healthcare provider today",
            actions=[
                "Contact your healthcare provider",
                "Check for ketones if you have type 1 diabetes",
                "Drink water and avoid sugary drinks",
            ],
        )
    return None


class BloodSugarService(ICalculator[BloodSugarInput, BloodSugarResult]):
    """Classify glucose readings and HbA1c against ADA thresholds.

    Overall risk combines the worst reading with diabetes history:
        score = severity(worst) + history bump, capped at 3
        0 low, 1 moderate, 2 high, 3 very high
    """

    def _glucose_readings(self, data: BloodSugarInput) -> List[GlucoseReading]:
        supplied = (
            (ReadingType.FASTING, data.fasting_glucose),
            (ReadingType.POST_MEAL, data.post_meal_glucose),
            (ReadingType.RANDOM, data.random_glucose),
        )
        readings = []
        for reading_type, value in supplied:
            if value is None:
                continue
            category = classify_glucose(value, reading_type)
            readings.append(
                GlucoseReading(
                    reading_type=reading_type,
                    value_mg_dl=round_half_up(value, 1),
                    value_mmol_l=round_half_up(mg_dl_to_mmol(value), 1),
                    category=category,
                    label=_LABELS[(reading_type, category)],
                    range=_range_label(reading_type, category),
                    recommendations=list(_GLUCOSE_RECOMMENDATIONS[category]),
                )
            )
        return readings

    def _hba1c(self, percentage: float) -> HbA1cReading:
        category = HBA1C_TABLE.classify(percentage)
        control = None
        label = {
            GlucoseCategory.NORMAL: "Normal",
            GlucoseCategory.PREDIABETES: "Prediabetes",
        }.get(category)
        if category is GlucoseCategory.DIABETES:
            control = HBA1C_CONTROL_TABLE.classify(percentage)
            label = f"Diabetes - {control.value.title()} Control"

        eag = estimated_average_glucose(percentage)
        recommendations = list(_HBA1C_RECOMMENDATIONS[control]) or list(
            _GLUCOSE_RECOMMENDATIONS[category]
        )
        return HbA1cReading(
            percentage=round_half_up(percentage, 1),
            mmol_mol=round_int(hba1c_to_mmol_mol(percentage)),
            estimated_average_glucose=EstimatedAverageGlucose(
                mg_dl=round_int(eag),
                mmol_l=round_half_up(mg_dl_to_mmol(eag), 1),
            ),
            category=category,
            label=label or category.value.title(),
            control=control,
            recommendations=recommendations,
        )

    def _emergency(self, data: BloodSugarInput) -> Optional[EmergencyWarning]:
        warnings = [
            _emergency_for_glucose(value)
            for value in (data.fasting_glucose, data.post_meal_glucose, data.random_glucose)
            if value is not None
        ]
        if data.hba1c is not None and data.hba1c > 10:
            warnings.append(
                EmergencyWarning(
                    severity=WarningSeverity.CAUTION,
                    message="Very high HbA1c - increased risk of complications",
                    actions=[
                        "Schedule an appointment with your healthcare provider soon",
                        "Review your diabetes management plan",
                    ],
                )
            )
        present = [w for w in warnings if w is not None]
        if not present:
            return None
        return max(present, key=lambda w: w.severity.rank())

    def calculate(self, data: BloodSugarInput) -> BloodSugarResult:
        readings = self._glucose_readings(data)
        hba1c = self._hba1c(data.hba1c) if data.hba1c is not None else None

        categories = [r.category for r in readings]
        if hba1c is not None:
            categories.append(hba1c.category)
        worst = max(categories, key=lambda c: (c.severity(), c is GlucoseCategory.LOW))

        score = min(worst.severity() + data.diabetes_history.risk_bump(), len(RISK_LEVELS) - 1)
        factors = [
            _RISK_FACTOR_TEXT[c] for c in dict.fromkeys(categories) if c in _RISK_FACTOR_TEXT
        ]
        if data.diabetes_history.risk_bump():
            factors.append(
                f"Diabetes history: {data.diabetes_history.value.replace('_', ' ')}"
            )

        logger.debug(
            "blood_sugar.calculated",
            worst=worst.value,
            risk=RISK_LEVELS[score].value,
            readings=len(categories),
        )

        return BloodSugarResult(
            glucose_readings=readings,
            hba1c=hba1c,
            worst_category=worst,
            risk=RiskAssessment(level=RISK_LEVELS[score], score=score, factors=factors),
            emergency_warning=self._emergency(data),
            lifestyle_tips=list(_LIFESTYLE_TIPS[worst]),
        )
