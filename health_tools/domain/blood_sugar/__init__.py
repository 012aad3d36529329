"""Blood sugar (glucose and HbA1c) calculator."""

from .blood_sugar_service import (
    BloodSugarService,
    classify_glucose,
    estimated_average_glucose,
    hba1c_to_mmol_mol,
)
from .value_objects import (
    BloodSugarInput,
    BloodSugarResult,
    DiabetesHistory,
    GlucoseCategory,
    GlucoseUnit,
    HbA1cControl,
    ReadingType,
    RiskLevel,
    WarningSeverity,
)

__all__ = [
    "BloodSugarInput",
    "BloodSugarResult",
    "BloodSugarService",
    "DiabetesHistory",
    "GlucoseCategory",
    "GlucoseUnit",
    "HbA1cControl",
    "ReadingType",
    "RiskLevel",
    "WarningSeverity",
    "classify_glucose",
    "estimated_average_glucose",
    "hba1c_to_mmol_mol",
]
