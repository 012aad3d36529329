"""Heart rate training zone calculator."""

from .heart_rate_service import (
    ZONE_DEFINITIONS,
    HeartRateZoneService,
    calculate_zones,
    target_heart_rate,
)
from .value_objects import (
    HEART_RATE_INPUT_ADAPTER,
    AgeFormulaInput,
    CustomMaxInput,
    HeartRateInput,
    HeartRateResult,
    HeartRateZone,
    KarvonenInput,
    TrainingGoal,
    ZoneMethod,
    ZoneName,
    age_predicted_max,
)

__all__ = [
    "HEART_RATE_INPUT_ADAPTER",
    "ZONE_DEFINITIONS",
    "AgeFormulaInput",
    "CustomMaxInput",
    "HeartRateInput",
    "HeartRateResult",
    "HeartRateZone",
    "HeartRateZoneService",
    "KarvonenInput",
    "TrainingGoal",
    "ZoneMethod",
    "ZoneName",
    "age_predicted_max",
    "calculate_zones",
    "target_heart_rate",
]
