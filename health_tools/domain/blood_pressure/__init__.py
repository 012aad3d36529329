"""Blood pressure category calculator."""

from .blood_pressure_service import BloodPressureService, classify_blood_pressure
from .value_objects import (
    BloodPressureCategory,
    BloodPressureInput,
    BloodPressureResult,
    PressureUnit,
    RiskLevel,
)

__all__ = [
    "BloodPressureCategory",
    "BloodPressureInput",
    "BloodPressureResult",
    "BloodPressureService",
    "PressureUnit",
    "RiskLevel",
    "classify_blood_pressure",
]
