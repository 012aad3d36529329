"""Adult BMI calculator."""

from .bmi_service import BMIService, calculate_bmi, ideal_weight_range
from .value_objects import BMICategory, BMIInput, BMIResult, IdealWeightRange

__all__ = [
    "BMICategory",
    "BMIInput",
    "BMIResult",
    "BMIService",
    "IdealWeightRange",
    "calculate_bmi",
    "ideal_weight_range",
]
