"""Daily hydration calculator."""

from .hydration_service import (
    HydrationService,
    baseline_need,
    compare_intake,
    holliday_segar,
)
from .value_objects import (
    Climate,
    ExerciseIntensity,
    HealthCondition,
    HydrationActivityLevel,
    HydrationInput,
    HydrationResult,
    IntakeStatus,
    SweatRate,
)

__all__ = [
    "Climate",
    "ExerciseIntensity",
    "HealthCondition",
    "HydrationActivityLevel",
    "HydrationInput",
    "HydrationResult",
    "HydrationService",
    "IntakeStatus",
    "SweatRate",
    "baseline_need",
    "compare_intake",
    "holliday_segar",
]
