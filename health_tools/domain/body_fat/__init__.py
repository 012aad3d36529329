"""Body fat percentage calculator."""

from .body_fat_service import BodyFatService, siri
from .value_objects import (
    BODY_FAT_INPUT_ADAPTER,
    BodyFatCategory,
    BodyFatInput,
    BodyFatMethod,
    BodyFatResult,
    JacksonPollock3Input,
    JacksonPollock7Input,
    USNavyInput,
    YMCAInput,
)

__all__ = [
    "BODY_FAT_INPUT_ADAPTER",
    "BodyFatCategory",
    "BodyFatInput",
    "BodyFatMethod",
    "BodyFatResult",
    "BodyFatService",
    "JacksonPollock3Input",
    "JacksonPollock7Input",
    "USNavyInput",
    "YMCAInput",
    "siri",
]
