"""OvulationService - fertile window and cycle phase for a given day."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Tuple

import structlog

from ..shared.ports import IDatedCalculator
from .value_objects import (
    FERTILE_DAYS_BEFORE_OVULATION,
    LUTEAL_PHASE_DAYS,
    PROJECTED_CYCLES,
    CyclePhase,
    FertilityLevel,
    OvulationInput,
    OvulationResult,
    PhaseWindow,
    ProjectedCycle,
)

logger = structlog.get_logger(__name__)

_PHASE_RECOMMENDATIONS: Dict[CyclePhase, List[str]] = {
    CyclePhase.MENSTRUAL: [
        "Stay hydrated and consider iron-rich foods",
        "Light exercise like walking or yoga can help with cramps",
        "Track your flow and symptoms",
    ],
    CyclePhase.FOLLICULAR: [
        "Start tracking cervical mucus changes",
        "Eat a diet rich in folate and antioxidants",
        "Consider ovulation predictor kits as ovulation approaches",
    ],
    CyclePhase.OVULATION: [
        "This is your most fertile time",
        "Cervical mucus is typically clear and stretchy",
        "Basal body temperature may rise slightly after ovulation",
    ],
    CyclePhase.LUTEAL: [
        "Monitor for early pregnancy symptoms if trying to conceive",
        "Keep a regular sleep schedule and manage stress",
        "Limit caffeine and alcohol",
    ],
    CyclePhase.OUTSIDE_CYCLE: [
        "Today falls outside the entered cycle; enter your most recent period "
        "for current predictions",
    ],
}

_PHASE_DESCRIPTIONS: Dict[CyclePhase, str] = {
    CyclePhase.MENSTRUAL: "Menstruation occurs",
    CyclePhase.FOLLICULAR: "Follicles mature in the ovaries",
    CyclePhase.OVULATION: "An egg is released",
    CyclePhase.LUTEAL: "The uterine lining thickens",
}


def ovulation_date(last_period: date, cycle_length: int) -> date:
    """Ovulation falls 14 days before the next period."""
    return last_period + timedelta(days=cycle_length - LUTEAL_PHASE_DAYS)


def fertile_window(ovulation: date) -> Tuple[date, date]:
    """Five days before ovulation through ovulation day."""
    return ovulation - timedelta(days=FERTILE_DAYS_BEFORE_OVULATION), ovulation


def cycle_phase(data: OvulationInput, today: date) -> CyclePhase:
    lmp = data.last_period_date
    ovulation = ovulation_date(lmp, data.cycle_length)
    next_period = lmp + timedelta(days=data.cycle_length)

    if today < lmp or today >= next_period:
        return CyclePhase.OUTSIDE_CYCLE
    if today < lmp + timedelta(days=data.period_length):
        return CyclePhase.MENSTRUAL
    if today < ovulation:
        return CyclePhase.FOLLICULAR
    if today == ovulation:
        return CyclePhase.OVULATION
    return CyclePhase.LUTEAL


def fertility_level(today: date, window_start: date, window_end: date) -> FertilityLevel:
    if window_start <= today <= window_end:
        return FertilityLevel.HIGH
    margin = timedelta(days=2)
    if window_start - margin <= today <= window_end + margin:
        return FertilityLevel.MEDIUM
    return FertilityLevel.LOW


class OvulationService(IDatedCalculator[OvulationInput, OvulationResult]):
    """
    Predict ovulation and the fertile window from the last period.

    Calendar method:
        ovulation      = LMP + (cycle length - 14) days
        fertile window = [ovulation - 5, ovulation]
        next period    = LMP + cycle length

    Example:
        LMP 2024-01-01, 28-day cycle -> ovulation 2024-01-15,
        fertile window from 2024-01-10, next period 2024-01-29
    """

    def calculate(self, data: OvulationInput, today: date) -> OvulationResult:
        lmp = data.last_period_date
        ovulation = ovulation_date(lmp, data.cycle_length)
        window_start, window_end = fertile_window(ovulation)
        next_period = lmp + timedelta(days=data.cycle_length)

        phase = cycle_phase(data, today)
        fertility = fertility_level(today, window_start, window_end)
        days_until_ovulation = max(0, (ovulation - today).days)

        phases = [
            PhaseWindow(
                phase=CyclePhase.MENSTRUAL,
                start=lmp,
                end=lmp + timedelta(days=data.period_length - 1),
                description=_PHASE_DESCRIPTIONS[CyclePhase.MENSTRUAL],
            ),
            PhaseWindow(
                phase=CyclePhase.FOLLICULAR,
                start=lmp + timedelta(days=data.period_length),
                end=ovulation - timedelta(days=1),
                description=_PHASE_DESCRIPTIONS[CyclePhase.FOLLICULAR],
            ),
            PhaseWindow(
                phase=CyclePhase.OVULATION,
                start=ovulation,
                end=ovulation,
                description=_PHASE_DESCRIPTIONS[CyclePhase.OVULATION],
            ),
            PhaseWindow(
                phase=CyclePhase.LUTEAL,
                start=ovulation + timedelta(days=1),
                end=next_period - timedelta(days=1),
                description=_PHASE_DESCRIPTIONS[CyclePhase.LUTEAL],
            ),
        ]
        # Short cycles with long periods leave no follicular days
        phases = [p for p in phases if p.start <= p.end]

        future_cycles = []
        for i in range(1, PROJECTED_CYCLES + 1):
            start = lmp + timedelta(days=data.cycle_length * i)
            cycle_ovulation = ovulation_date(start, data.cycle_length)
            fertile_start, fertile_end = fertile_window(cycle_ovulation)
            future_cycles.append(
                ProjectedCycle(
                    cycle=i + 1,
                    period_start=start,
                    ovulation_date=cycle_ovulation,
                    fertile_window_start=fertile_start,
                    fertile_window_end=fertile_end,
                )
            )

        recommendations = list(_PHASE_RECOMMENDATIONS[phase])
        if fertility is FertilityLevel.HIGH:
            recommendations.append("Peak fertility window - optimal time for conception")
        elif fertility is FertilityLevel.MEDIUM:
            recommendations.append("Moderately fertile - consider tracking ovulation signs")
        if 0 < days_until_ovulation <= 7:
            recommendations.append(f"Ovulation expected in {days_until_ovulation} days")

        logger.debug(
            "ovulation.calculated",
            phase=phase.value,
            fertility=fertility.value,
            cycle_length=data.cycle_length,
        )

        return OvulationResult(
            ovulation_date=ovulation,
            fertile_window_start=window_start,
            fertile_window_end=window_end,
            next_period_date=next_period,
            current_phase=phase,
            cycle_day=max(1, (today - lmp).days + 1),
            days_until_ovulation=days_until_ovulation,
            days_until_next_period=max(0, (next_period - today).days),
            fertility_level=fertility,
            phases=phases,
            future_cycles=future_cycles,
            recommendations=recommendations,
        )
