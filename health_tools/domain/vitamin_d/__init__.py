"""Vitamin D status and supplementation calculator."""

from .value_objects import (
    DietaryIntake,
    MedicalCondition,
    PregnancyStatus,
    RiskLevel,
    Season,
    SkinType,
    SunscreenUse,
    SupplementUse,
    VitaminDCategory,
    VitaminDInput,
    VitaminDResult,
    VitaminDUnit,
    VitaminDWarningLevel,
)
from .vitamin_d_service import (
    VitaminDService,
    assess_deficiency_risk,
    estimate_level,
    sun_exposure,
    vitamin_d_status,
)

__all__ = [
    "DietaryIntake",
    "MedicalCondition",
    "PregnancyStatus",
    "RiskLevel",
    "Season",
    "SkinType",
    "SunscreenUse",
    "SupplementUse",
    "VitaminDCategory",
    "VitaminDInput",
    "VitaminDResult",
    "VitaminDService",
    "VitaminDUnit",
    "VitaminDWarningLevel",
    "assess_deficiency_risk",
    "estimate_level",
    "sun_exposure",
    "vitamin_d_status",
]
