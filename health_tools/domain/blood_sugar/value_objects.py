"""Blood sugar value objects."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from ..shared.lookup import ThresholdTable
from ..shared.units import mmol_to_mg_dl
from ..shared.value_objects import CalculatorInput, CalculatorResult

GLUCOSE_FIELDS = ("fasting_glucose", "post_meal_glucose", "random_glucose")


class GlucoseUnit(str, Enum):
    MG_DL = "mg_dl"
    MMOL_L = "mmol_l"


class ReadingType(str, Enum):
    FASTING = "fasting"
    POST_MEAL = "post_meal"
    RANDOM = "random"


class GlucoseCategory(str, Enum):
    """Severity-ordered glucose category shared by all reading types."""

    LOW = "low"
    NORMAL = "normal"
    PREDIABETES = "prediabetes"
    DIABETES = "diabetes"

    def severity(self) -> int:
        """Diabetes severity; hypoglycemia is handled as an emergency warning."""
        scores = {
            GlucoseCategory.LOW: 0,
            GlucoseCategory.NORMAL: 0,
            GlucoseCategory.PREDIABETES: 1,
            GlucoseCategory.DIABETES: 2,
        }
        return scores[self]


class HbA1cControl(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class DiabetesHistory(str, Enum):
    NONE = "none"
    FAMILY_HISTORY = "family_history"
    PREDIABETES = "prediabetes"
    GESTATIONAL = "gestational"
    DIAGNOSED = "diagnosed"

    def risk_bump(self) -> int:
        bumps = {
            DiabetesHistory.NONE: 0,
            DiabetesHistory.FAMILY_HISTORY: 1,
            DiabetesHistory.PREDIABETES: 1,
            DiabetesHistory.GESTATIONAL: 1,
            DiabetesHistory.DIAGNOSED: 2,
        }
        return bumps[self]


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class WarningSeverity(str, Enum):
    CAUTION = "caution"
    URGENT = "urgent"
    SEVERE = "severe"

    def rank(self) -> int:
        return [WarningSeverity.CAUTION, WarningSeverity.URGENT, WarningSeverity.SEVERE].index(self)


_GLUCOSE_LABELS = (
    GlucoseCategory.LOW,
    GlucoseCategory.NORMAL,
    GlucoseCategory.PREDIABETES,
    GlucoseCategory.DIABETES,
)

# mg/dL, ADA cut points
GLUCOSE_TABLES: Dict[ReadingType, ThresholdTable[GlucoseCategory]] = {
    ReadingType.FASTING: ThresholdTable(bounds=(70.0, 100.0, 126.0), labels=_GLUCOSE_LABELS),
    ReadingType.POST_MEAL: ThresholdTable(bounds=(70.0, 140.0, 200.0), labels=_GLUCOSE_LABELS),
    ReadingType.RANDOM: ThresholdTable(bounds=(70.0, 140.0, 200.0), labels=_GLUCOSE_LABELS),
}

HBA1C_TABLE: ThresholdTable[GlucoseCategory] = ThresholdTable(
    bounds=(5.7, 6.5),
    labels=(GlucoseCategory.NORMAL, GlucoseCategory.PREDIABETES, GlucoseCategory.DIABETES),
)

HBA1C_CONTROL_TABLE: ThresholdTable[HbA1cControl] = ThresholdTable(
    bounds=(7.0, 8.0),
    labels=(HbA1cControl.GOOD, HbA1cControl.FAIR, HbA1cControl.POOR),
)

RISK_LEVELS = (RiskLevel.LOW, RiskLevel.MODERATE, RiskLevel.HIGH, RiskLevel.VERY_HIGH)


class BloodSugarInput(CalculatorInput):
    """
    Glucose readings and/or HbA1c with diabetes history.

    Glucose values are stored in mg/dL; ``glucose_unit`` records the unit
    they were entered in. At least one reading is required.
    """

    fasting_glucose: Optional[float] = Field(None, ge=50, le=500, description="mg/dL")
    post_meal_glucose: Optional[float] = Field(
        None, ge=50, le=500, description="mg/dL, 2 hours after a meal"
    )
    random_glucose: Optional[float] = Field(None, ge=50, le=500, description="mg/dL")
    hba1c: Optional[float] = Field(None, ge=3, le=20, description="HbA1c (%)")
    glucose_unit: GlucoseUnit = GlucoseUnit.MG_DL
    diabetes_history: DiabetesHistory = DiabetesHistory.NONE

    @model_validator(mode="before")
    @classmethod
    def _normalize_glucose_unit(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("glucose_unit") != GlucoseUnit.MMOL_L.value:
            return data
        data = dict(data)
        for field in GLUCOSE_FIELDS:
            value = data.get(field)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                data[field] = mmol_to_mg_dl(value)
        return data

    def conditional_errors(self) -> Dict[str, str]:
        if all(getattr(self, field) is None for field in (*GLUCOSE_FIELDS, "hba1c")):
            return {"fasting_glucose": "At least one glucose or HbA1c reading is required"}
        return {}


class GlucoseReading(CalculatorResult):
    reading_type: ReadingType
    value_mg_dl: float
    value_mmol_l: float
    category: GlucoseCategory
    label: str
    range: str
    recommendations: List[str]


class EstimatedAverageGlucose(CalculatorResult):
    mg_dl: int
    mmol_l: float


class HbA1cReading(CalculatorResult):
    percentage: float
    mmol_mol: int
    estimated_average_glucose: EstimatedAverageGlucose
    category: GlucoseCategory
    label: str
    control: Optional[HbA1cControl] = Field(
        None, description="Glycemic control band, only in the diabetic range"
    )
    recommendations: List[str]


class RiskAssessment(CalculatorResult):
    level: RiskLevel
    score: int = Field(..., ge=0, le=3)
    factors: List[str]


class EmergencyWarning(CalculatorResult):
    severity: WarningSeverity
    message: str
    actions: List[str]


class BloodSugarResult(CalculatorResult):
    glucose_readings: List[GlucoseReading]
    hba1c: Optional[HbA1cReading] = None
    worst_category: GlucoseCategory
    risk: RiskAssessment
    emergency_warning: Optional[EmergencyWarning] = None
    lifestyle_tips: List[str]
