"""SleepService - bedtimes and wake times aligned to sleep cycles."""

from __future__ import annotations

from datetime import time
from typing import Dict, List, Tuple

import structlog

from ..shared.lookup import ThresholdTable
from ..shared.ports import ICalculator
from ..shared.rounding import round_int
from .value_objects import (
    CYCLE_OPTIONS,
    MINUTES_PER_DAY,
    SLEEP_CYCLE_MINUTES,
    Chronotype,
    CircadianInfo,
    ScheduleMode,
    SleepDurationAssessment,
    SleepInput,
    SleepQuality,
    SleepResult,
    SleepTime,
)

logger = structlog.get_logger(__name__)

NOON = 12 * 60

# Bedtime minutes with early-morning times shifted past midnight (+24h)
CHRONOTYPES: ThresholdTable[Chronotype] = ThresholdTable(
    bounds=(22 * 60, 24 * 60),
    labels=(Chronotype.EARLY_BIRD, Chronotype.INTERMEDIATE, Chronotype.NIGHT_OWL),
)

SLEEP_TIPS = [
    "Avoid caffeine 6 hours before bedtime",
    "Keep your bedroom cool (15-19°C)",
    "Use blackout curtains or an eye mask",
    "Keep a consistent bedtime routine",
    "Avoid screens 1 hour before bed",
    "Exercise regularly, but not close to bedtime",
]

_CYCLE_QUALITY: Dict[int, SleepQuality] = {
    5: SleepQuality.EXCELLENT,
    6: SleepQuality.GOOD,
    4: SleepQuality.FAIR,
}

_DURATION_INSIGHTS: Dict[SleepQuality, List[str]] = {
    SleepQuality.EXCELLENT: [
        "You are getting the optimal amount of sleep for your age",
        "This duration supports memory consolidation and immune function",
    ],
    SleepQuality.GOOD: [
        "Your sleep duration is close to optimal",
        "Small adjustments could help optimize your rest",
    ],
    SleepQuality.FAIR: [
        "Your sleep duration could be improved",
        "Consider adjusting your schedule for better rest",
    ],
    SleepQuality.POOR: [
        "Your sleep duration is well outside the recommended range",
        "This may affect your health and cognitive function",
    ],
}


def to_minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def format_minutes(minutes: int) -> str:
    """Minutes since midnight, wrapped to one day, as HH:MM."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def classify_chronotype(bedtime_minutes: int) -> Chronotype:
    """Early bird before 22:00, intermediate until midnight, night owl after."""
    minutes = bedtime_minutes % MINUTES_PER_DAY
    if minutes < NOON:
        minutes += MINUTES_PER_DAY
    return CHRONOTYPES.classify(minutes)


def _evening_order(minutes: int) -> int:
    minutes %= MINUTES_PER_DAY
    return minutes + MINUTES_PER_DAY if minutes < NOON else minutes


def _duration_quality(cycles: int) -> SleepQuality:
    if cycles == 5:
        return SleepQuality.EXCELLENT
    if cycles >= 4:
        return SleepQuality.GOOD
    return SleepQuality.FAIR


def _sleep_time(
    minutes: int, cycles: int, sleep_minutes: int, quality: SleepQuality, description: str
) -> SleepTime:
    return SleepTime(
        time=format_minutes(minutes),
        cycles=cycles,
        quality=quality,
        total_sleep_minutes=sleep_minutes,
        rem_cycles=round_int(cycles * 0.25),
        deep_sleep_cycles=round_int(cycles * 0.2),
        description=description,
    )


class SleepService(ICalculator[SleepInput, SleepResult]):
    """
    Align bedtime or wake time with 90-minute sleep cycles.

    bedtime mode:  bed = wake - cycles × 90 - latency
    waketime mode: wake = bed + latency + cycles × 90

    Candidates use 4, 5 and 6 cycles (5 is the sweet spot), or a single
    fixed duration when cycles are switched off.
    """

    def _candidates(self, data: SleepInput) -> List[Tuple[int, SleepTime]]:
        target = to_minutes(data.target_time)
        direction = -1 if data.mode is ScheduleMode.BEDTIME else 1

        if data.include_cycles:
            plans = [
                (
                    cycles,
                    cycles * SLEEP_CYCLE_MINUTES,
                    _CYCLE_QUALITY[cycles],
                    f"{cycles} sleep cycles ({cycles * SLEEP_CYCLE_MINUTES / 60:.1f} hours of sleep)",
                )
                for cycles in CYCLE_OPTIONS
            ]
        else:
            sleep_minutes = round_int(data.sleep_duration_hours * 60)
            cycles = round_int(sleep_minutes / SLEEP_CYCLE_MINUTES)
            plans = [
                (
                    cycles,
                    sleep_minutes,
                    _duration_quality(cycles),
                    f"{data.sleep_duration_hours:g} hours of sleep (about {cycles} cycles)",
                )
            ]

        candidates = []
        for cycles, sleep_minutes, quality, description in plans:
            minutes = target + direction * (sleep_minutes + data.fall_asleep_minutes)
            candidates.append(
                (minutes, _sleep_time(minutes, cycles, sleep_minutes, quality, description))
            )
        return candidates

    def calculate(self, data: SleepInput) -> SleepResult:
        candidates = self._candidates(data)

        if data.mode is ScheduleMode.BEDTIME:
            bedtime = min((minutes for minutes, _ in candidates), key=_evening_order)
        else:
            bedtime = to_minutes(data.target_time)
        chronotype = classify_chronotype(bedtime)

        ranked = sorted(
            (slot for _, slot in candidates),
            key=lambda slot: (slot.quality is not SleepQuality.EXCELLENT, -slot.cycles),
        )

        logger.debug(
            "sleep.calculated",
            mode=data.mode.value,
            options=len(ranked),
            chronotype=chronotype.value,
        )

        return SleepResult(
            mode=data.mode,
            target_time=format_minutes(to_minutes(data.target_time)),
            recommended_times=ranked,
            circadian=CircadianInfo(
                chronotype=chronotype,
                label=chronotype.label(),
                ideal_bedtime=chronotype.ideal_bedtime(),
                ideal_wake_time=chronotype.ideal_wake_time(),
            ),
            tips=list(SLEEP_TIPS),
        )

    def assess_duration(self, hours: float, age: int) -> SleepDurationAssessment:
        """
        Rate a nightly sleep duration against the recommendation for an age.

        Ideal ranges: 8-10 h under 18, 7-9 h under 65, 7-8 h from 65.
        Excellent inside the range, good within 1 h of it, fair within
        2 h, poor otherwise.
        """
        if age < 18:
            low, high = 8, 10
        elif age < 65:
            low, high = 7, 9
        else:
            low, high = 7, 8

        if low <= hours <= high:
            quality = SleepQuality.EXCELLENT
        elif low - 1 <= hours <= high + 1:
            quality = SleepQuality.GOOD
        elif low - 2 <= hours <= high + 2:
            quality = SleepQuality.FAIR
        else:
            quality = SleepQuality.POOR

        return SleepDurationAssessment(
            hours=hours,
            quality=quality,
            ideal_min_hours=low,
            ideal_max_hours=high,
            insights=list(_DURATION_INSIGHTS[quality]),
        )
