"""Lipid panel and cardiovascular risk calculator."""

from .cholesterol_service import CholesterolService, assess_risk, estimate_ldl
from .value_objects import (
    CholesterolInput,
    CholesterolResult,
    CholesterolUnit,
    DiabetesStatus,
    FactorImpact,
    FamilyHistory,
    LipidType,
    LipidWarningLevel,
    PhysicalActivity,
    RiskCategory,
    SmokingStatus,
    StatinIntensity,
    TreatmentPriority,
)

__all__ = [
    "CholesterolInput",
    "CholesterolResult",
    "CholesterolService",
    "CholesterolUnit",
    "DiabetesStatus",
    "FactorImpact",
    "FamilyHistory",
    "LipidType",
    "LipidWarningLevel",
    "PhysicalActivity",
    "RiskCategory",
    "SmokingStatus",
    "StatinIntensity",
    "TreatmentPriority",
    "assess_risk",
    "estimate_ldl",
]
