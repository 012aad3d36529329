"""BMI-for-age percentile calculator for children and teens."""

from .kids_bmi_service import (
    KidsBMIService,
    bmi_percentile,
    percentile_bands,
    percentile_z_score,
    predict_adult_height,
)
from .value_objects import (
    BMI_PERCENTILE_TABLE,
    KIDS_BMI_CATEGORIES,
    Confidence,
    KidsBMICategory,
    KidsBMIInput,
    KidsBMIResult,
)

__all__ = [
    "BMI_PERCENTILE_TABLE",
    "KIDS_BMI_CATEGORIES",
    "Confidence",
    "KidsBMICategory",
    "KidsBMIInput",
    "KidsBMIResult",
    "KidsBMIService",
    "bmi_percentile",
    "percentile_bands",
    "percentile_z_score",
    "predict_adult_height",
]
