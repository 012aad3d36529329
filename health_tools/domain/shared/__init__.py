"""Shared domain primitives used by every calculator."""

from .activity import ActivityLevel
from .body import calculate_bmi
from .errors import (
    CalculatorNotFoundError,
    DomainError,
    InputValidationError,
    UnsupportedMethodError,
)
from .lookup import ThresholdTable, interpolate
from .parsing import parse_input
from .ports import ICalculator, IDatedCalculator
from .rounding import round_half_up, round_int
from .value_objects import (
    BodyMeasurementsInput,
    CalculatorInput,
    CalculatorResult,
    Gender,
    HeightUnit,
    WeightUnit,
)

__all__ = [
    "ActivityLevel",
    "BodyMeasurementsInput",
    "CalculatorNotFoundError",
    "CalculatorInput",
    "CalculatorResult",
    "DomainError",
    "Gender",
    "HeightUnit",
    "ICalculator",
    "IDatedCalculator",
    "InputValidationError",
    "ThresholdTable",
    "UnsupportedMethodError",
    "WeightUnit",
    "calculate_bmi",
    "interpolate",
    "parse_input",
    "round_half_up",
    "round_int",
]
