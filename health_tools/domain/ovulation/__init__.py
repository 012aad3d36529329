"""Ovulation and fertile window calculator."""

from .ovulation_service import (
    OvulationService,
    cycle_phase,
    fertile_window,
    fertility_level,
    ovulation_date,
)
from .value_objects import (
    CyclePhase,
    FertilityLevel,
    OvulationInput,
    OvulationResult,
)

__all__ = [
    "CyclePhase",
    "FertilityLevel",
    "OvulationInput",
    "OvulationResult",
    "OvulationService",
    "cycle_phase",
    "fertile_window",
    "fertility_level",
    "ovulation_date",
]
