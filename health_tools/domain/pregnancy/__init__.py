"""Pregnancy due date calculator."""

from .pregnancy_service import (
    PregnancyService,
    baby_development,
    gestational_age,
    upcoming_milestones,
)
from .value_objects import (
    PREGNANCY_INPUT_ADAPTER,
    ConceptionInput,
    DatingMethod,
    LMPInput,
    PregnancyInput,
    PregnancyResult,
    Trimester,
    UltrasoundInput,
)

__all__ = [
    "PREGNANCY_INPUT_ADAPTER",
    "ConceptionInput",
    "DatingMethod",
    "LMPInput",
    "PregnancyInput",
    "PregnancyResult",
    "PregnancyService",
    "Trimester",
    "UltrasoundInput",
    "baby_development",
    "gestational_age",
    "upcoming_milestones",
]
