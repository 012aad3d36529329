"""Ovulation value objects."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, List

from pydantic import Field

from ..shared.value_objects import CalculatorInput, CalculatorResult

LUTEAL_PHASE_DAYS = 14
FERTILE_DAYS_BEFORE_OVULATION = 5
PROJECTED_CYCLES = 6


class CyclePhase(str, Enum):
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"
    OUTSIDE_CYCLE = "outside_cycle"


class FertilityLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class OvulationInput(CalculatorInput):
    last_period_date: date = Field(..., description="First day of the last period")
    cycle_length: int = Field(28, ge=21, le=35, description="Days")
    period_length: int = Field(5, ge=3, le=8, description="Days")

    def dated_errors(self, today: date) -> Dict[str, str]:
        if self.last_period_date > today:
            return {"last_period_date": "Last period date cannot be in the future"}
        return {}


class PhaseWindow(CalculatorResult):
    phase: CyclePhase
    start: date
    end: date
    description: str


class ProjectedCycle(CalculatorResult):
    cycle: int
    period_start: date
    ovulation_date: date
    fertile_window_start: date
    fertile_window_end: date


class OvulationResult(CalculatorResult):
    ovulation_date: date
    fertile_window_start: date
    fertile_window_end: date
    next_period_date: date
    current_phase: CyclePhase
    cycle_day: int = Field(..., ge=1)
    days_until_ovulation: int = Field(..., ge=0)
    days_until_next_period: int = Field(..., ge=0)
    fertility_level: FertilityLevel
    phases: List[PhaseWindow]
    future_cycles: List[ProjectedCycle]
    recommendations: List[str]
