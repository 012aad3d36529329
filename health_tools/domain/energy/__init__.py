"""Energy expenditure: BMR, TDEE, calorie goals and macronutrients."""

from ..shared.activity import ActivityLevel
from .bmr_service import BMRService, harris_benedict, katch_mcardle, mifflin_st_jeor
from .energy_service import EnergyService, calculate_tdee, calorie_goals
from .inputs import (
    ENERGY_INPUT_ADAPTER,
    CalorieNeedsInput,
    EnergyInput,
    EnergyInputBase,
    HarrisBenedictInput,
    KatchMcArdleInput,
    MifflinStJeorInput,
)
from .macro_service import MacroService
from .results import CalorieNeedsResult, EnergyResult, MacroBreakdown
from .value_objects import (
    BMRFormula,
    CalorieGoal,
    DiabetesType,
    Goal,
    Pace,
    SmokingStatus,
    ThyroidCondition,
    WarningLevel,
)

__all__ = [
    "ENERGY_INPUT_ADAPTER",
    "ActivityLevel",
    "BMRFormula",
    "BMRService",
    "CalorieGoal",
    "CalorieNeedsInput",
    "CalorieNeedsResult",
    "DiabetesType",
    "EnergyInput",
    "EnergyInputBase",
    "EnergyResult",
    "EnergyService",
    "Goal",
    "HarrisBenedictInput",
    "KatchMcArdleInput",
    "MacroBreakdown",
    "MacroService",
    "MifflinStJeorInput",
    "Pace",
    "SmokingStatus",
    "ThyroidCondition",
    "WarningLevel",
    "calculate_tdee",
    "calorie_goals",
    "harris_benedict",
    "katch_mcardle",
    "mifflin_st_jeor",
]
