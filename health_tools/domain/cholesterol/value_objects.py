"""Cholesterol value objects."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from ..shared.units import cholesterol_mmol_to_mg_dl, triglyceride_mmol_to_mg_dl
from ..shared.value_objects import CalculatorInput, CalculatorResult, Gender

CHOLESTEROL_FIELDS = ("total_cholesterol", "ldl_cholesterol", "hdl_cholesterol")


class CholesterolUnit(str, Enum):
    MG_DL = "mg_dl"
    MMOL_L = "mmol_l"


class LipidType(str, Enum):
    TOTAL = "total"
    LDL = "ldl"
    HDL = "hdl"
    TRIGLYCERIDES = "triglycerides"
    NON_HDL = "non_hdl"


class SmokingStatus(str, Enum):
    NEVER = "never"
    FORMER = "former"
    CURRENT = "current"


class DiabetesStatus(str, Enum):
    NONE = "none"
    PREDIABETES = "prediabetes"
    TYPE1 = "type1"
    TYPE2 = "type2"

    def risk_points(self) -> int:
        points = {
            DiabetesStatus.NONE: 0,
            DiabetesStatus.PREDIABETES: 1,
            DiabetesStatus.TYPE1: 2,
            DiabetesStatus.TYPE2: 2,
        }
        return points[self]


class FamilyHistory(str, Enum):
    NONE = "none"
    PREMATURE_CAD = "premature_cad"
    STROKE = "stroke"
    BOTH = "both"


class PhysicalActivity(str, Enum):
    SEDENTARY = "sedentary"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class RiskCategory(str, Enum):
    LOW = "low"
    BORDERLINE = "borderline"
    INTERMEDIATE = "intermediate"
    HIGH = "high"


class FactorImpact(str, Enum):
    PROTECTIVE = "protective"
    MODERATE = "moderate"
    HIGH = "high"


class TreatmentPriority(str, Enum):
    LIFESTYLE = "lifestyle"
    MEDICATION_CONSIDERATION = "medication_consideration"
    MEDICATION_INDICATED = "medication_indicated"


class StatinIntensity(str, Enum):
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class LipidWarningLevel(str, Enum):
    CAUTION = "caution"
    WARNING = "warning"
    URGENT = "urgent"


class CholesterolInput(CalculatorInput):
    """
    Lipid panel plus cardiovascular risk factors.

    Panel values are stored in mg/dL; ``unit`` records the unit they were
    entered in. LDL is optional and estimated from the rest of the panel
    when missing.
    """

    total_cholesterol: float = Field(..., ge=100, le=500, description="mg/dL")
    ldl_cholesterol: Optional[float] = Field(None, ge=30, le=400, description="mg/dL")
    hdl_cholesterol: float = Field(..., ge=20, le=150, description="mg/dL")
    triglycerides: float = Field(..., ge=30, le=1000, description="mg/dL")
    unit: CholesterolUnit = CholesterolUnit.MG_DL
    age: int = Field(..., ge=20, le=100, description="Age in years")
    gender: Gender
    smoking_status: SmokingStatus = SmokingStatus.NEVER
    diabetes_status: DiabetesStatus = DiabetesStatus.NONE
    family_history: FamilyHistory = FamilyHistory.NONE
    physical_activity: PhysicalActivity = PhysicalActivity.MODERATE
    prior_cvd: bool = Field(False, description="Previous cardiovascular disease")

    @model_validator(mode="before")
    @classmethod
    def _normalize_unit(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("unit") != CholesterolUnit.MMOL_L.value:
            return data
        data = dict(data)
        for field in (*CHOLESTEROL_FIELDS, "triglycerides"):
            value = data.get(field)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                convert = (
                    triglyceride_mmol_to_mg_dl
                    if field == "triglycerides"
                    else cholesterol_mmol_to_mg_dl
                )
                data[field] = convert(value)
        return data

    def conditional_errors(self) -> Dict[str, str]:
        errors = {}
        if self.hdl_cholesterol >= self.total_cholesterol:
            errors["hdl_cholesterol"] = "HDL cholesterol must be lower than total cholesterol"
        if self.prior_cvd and self.age < 40:
            errors["prior_cvd"] = "Prior CVD at young age requires specialist consultation"
        return errors


class LipidReading(CalculatorResult):
    lipid_type: LipidType
    value_mg_dl: float
    value_mmol_l: float
    label: str
    range: str
    target: str
    recommendations: List[str]


class LipidRatio(CalculatorResult):
    value: float
    label: str


class CholesterolRatios(CalculatorResult):
    total_to_hdl: LipidRatio
    ldl_to_hdl: Optional[LipidRatio] = Field(
        None, description="Only when an LDL value is measured or can be estimated"
    )
    triglyceride_to_hdl: LipidRatio


class RiskFactor(CalculatorResult):
    factor: str
    impact: FactorImpact
    description: str


class CardiovascularRisk(CalculatorResult):
    ten_year_risk: float = Field(..., description="Simplified estimate (%)")
    category: RiskCategory
    lifetime_risk: int = Field(..., description="Simplified estimate (%)")
    risk_factors: List[RiskFactor]


class StatinRecommendation(CalculatorResult):
    indicated: bool
    intensity: StatinIntensity
    reasoning: str


class TreatmentPlan(CalculatorResult):
    ldl_target: int = Field(..., description="mg/dL")
    priority: TreatmentPriority
    statin: StatinRecommendation
    lifestyle_interventions: List[str]
    monitoring_frequency: str


class LipidInsight(CalculatorResult):
    category: str
    insight: str


class LipidWarning(CalculatorResult):
    level: LipidWarningLevel
    message: str
    recommendations: List[str]


class CholesterolResult(CalculatorResult):
    readings: List[LipidReading]
    ldl_estimated: bool = Field(..., description="LDL came from the Friedewald equation")
    ratios: CholesterolRatios
    risk: CardiovascularRisk
    treatment: TreatmentPlan
    insights: List[LipidInsight]
    warnings: List[LipidWarning]
