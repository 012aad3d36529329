"""Blood pressure value objects."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from ..shared.units import kpa_to_mmhg
from ..shared.value_objects import CalculatorInput, CalculatorResult


class PressureUnit(str, Enum):
    MMHG = "mmHg"
    KPA = "kPa"


class BloodPressureCategory(str, Enum):
    """AHA 2017 categories, ordered by severity."""

    NORMAL = "normal"
    ELEVATED = "elevated"
    STAGE_1 = "stage_1"
    STAGE_2 = "stage_2"
    CRISIS = "crisis"

    def label(self) -> str:
        labels = {
            BloodPressureCategory.NORMAL: "Normal",
            BloodPressureCategory.ELEVATED: "Elevated",
            BloodPressureCategory.STAGE_1: "Stage 1 Hypertension",
            BloodPressureCategory.STAGE_2: "Stage 2 Hypertension",
            BloodPressureCategory.CRISIS: "Hypertensive Crisis",
        }
        return labels[self]


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class BloodPressureInput(CalculatorInput):
    """Systolic/diastolic reading; stored in mmHg, ``unit`` is the entry unit."""

    systolic: float = Field(..., ge=50, le=300, description="Systolic (mmHg)")
    diastolic: float = Field(..., ge=30, le=200, description="Diastolic (mmHg)")
    unit: PressureUnit = PressureUnit.MMHG
    age: Optional[int] = Field(None, ge=1, le=120)

    @model_validator(mode="before")
    @classmethod
    def _normalize_unit(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("unit") != PressureUnit.KPA.value:
            return data
        data = dict(data)
        for field in ("systolic", "diastolic"):
            value = data.get(field)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                data[field] = kpa_to_mmhg(value)
        return data

    def conditional_errors(self) -> Dict[str, str]:
        if self.systolic <= self.diastolic:
            return {"systolic": "Systolic pressure must be higher than diastolic pressure"}
        return {}


class BloodPressureResult(CalculatorResult):
    systolic: int
    diastolic: int
    pulse_pressure: int
    category: BloodPressureCategory
    label: str
    risk_level: RiskLevel
    interpretation: str
    urgent: bool
    recommendations: List[str]
