"""Sleep scheduling value objects."""

from __future__ import annotations

from datetime import time
from enum import Enum
from typing import List

from pydantic import Field

from ..shared.value_objects import CalculatorInput, CalculatorResult

SLEEP_CYCLE_MINUTES = 90
CYCLE_OPTIONS = (4, 5, 6)
MINUTES_PER_DAY = 24 * 60


class ScheduleMode(str, Enum):
    """``bedtime``: find bedtimes for a wake time; ``waketime``: the reverse."""

    BEDTIME = "bedtime"
    WAKETIME = "waketime"


class SleepQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class Chronotype(str, Enum):
    EARLY_BIRD = "early_bird"
    INTERMEDIATE = "intermediate"
    NIGHT_OWL = "night_owl"

    def label(self) -> str:
        return self.value.replace("_", " ").title()

    def ideal_bedtime(self) -> str:
        bedtimes = {
            Chronotype.EARLY_BIRD: "21:30",
            Chronotype.INTERMEDIATE: "22:30",
            Chronotype.NIGHT_OWL: "23:30",
        }
        return bedtimes[self]

    def ideal_wake_time(self) -> str:
        wake_times = {
            Chronotype.EARLY_BIRD: "06:00",
            Chronotype.INTERMEDIATE: "07:00",
            Chronotype.NIGHT_OWL: "08:00",
        }
        return wake_times[self]


class SleepInput(CalculatorInput):
    mode: ScheduleMode
    target_time: time = Field(
        ..., description="Wake time (bedtime mode) or bedtime (waketime mode), HH:MM"
    )
    fall_asleep_minutes: int = Field(15, ge=5, le=60)
    include_cycles: bool = True
    sleep_duration_hours: float = Field(
        8, ge=4, le=12, description="Used when cycles are not included"
    )


class SleepDurationInput(CalculatorInput):
    hours: float = Field(..., ge=0, le=24, description="Nightly sleep (hours)")
    age: int = Field(..., ge=1, le=120)


class SleepTime(CalculatorResult):
    time: str = Field(..., description="HH:MM")
    cycles: int
    quality: SleepQuality
    total_sleep_minutes: int
    rem_cycles: int
    deep_sleep_cycles: int
    description: str


class CircadianInfo(CalculatorResult):
    chronotype: Chronotype
    label: str
    ideal_bedtime: str
    ideal_wake_time: str


class SleepResult(CalculatorResult):
    mode: ScheduleMode
    target_time: str
    recommended_times: List[SleepTime]
    cycle_minutes: int = SLEEP_CYCLE_MINUTES
    circadian: CircadianInfo
    tips: List[str]


class SleepDurationAssessment(CalculatorResult):
    hours: float
    quality: SleepQuality
    ideal_min_hours: int
    ideal_max_hours: int
    insights: List[str]
