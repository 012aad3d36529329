"""Sleep cycle scheduling."""

from .sleep_service import SleepService, classify_chronotype, format_minutes
from .value_objects import (
    Chronotype,
    ScheduleMode,
    SleepDurationAssessment,
    SleepDurationInput,
    SleepInput,
    SleepQuality,
    SleepResult,
    SleepTime,
)

__all__ = [
    "Chronotype",
    "ScheduleMode",
    "SleepDurationAssessment",
    "SleepDurationInput",
    "SleepInput",
    "SleepQuality",
    "SleepResult",
    "SleepService",
    "SleepTime",
    "classify_chronotype",
    "format_minutes",
]
