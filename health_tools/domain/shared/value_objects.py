"""
Shared value objects.

Immutable, validated primitives reused by every calculator:
gender, measurement units and the base input/result models.
"""

from __future__ import annotations

from enum import Enum
from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from .units import feet_inches_to_cm, inches_to_cm, lb_to_kg

CONDITIONAL_FIELD_ERROR = "conditional_field"


class Gender(str, Enum):
    """Biological sex used by sex-specific formulas."""

    MALE = "male"
    FEMALE = "female"


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


class HeightUnit(str, Enum):
    CM = "cm"
    IN = "in"
    FT_IN = "ft_in"


def conditional_field_error(field_errors: Dict[str, str]) -> PydanticCustomError:
    """Build the pydantic error carrying per-field messages for cross-field rules."""
    summary = "; ".join(f"{field}: {msg}" for field, msg in field_errors.items())
    return PydanticCustomError(
        CONDITIONAL_FIELD_ERROR,
        "{summary}",
        {"summary": summary, "field_errors": dict(field_errors)},
    )


class CalculatorInput(BaseModel):
    """
    Base class for every calculator input.

    Inputs are frozen and reject unknown fields. Subclasses declare
    per-field ranges with ``Field(ge=..., le=...)`` and express
    cross-field rules (method-specific required fields, plausibility
    checks) by overriding :meth:`conditional_errors`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def conditional_errors(self) -> Dict[str, str]:
        """Return ``{field: message}`` for violated cross-field rules."""
        return {}

    def dated_errors(self, today: date) -> Dict[str, str]:
        """Rules relative to the current date, checked when validation
        runs with a ``today`` context."""
        return {}

    @model_validator(mode="after")
    def _check_conditional_fields(self, info: ValidationInfo) -> "CalculatorInput":
        errors = self.conditional_errors()
        today = (info.context or {}).get("today")
        if today is not None:
            errors = {**self.dated_errors(today), **errors}
        if errors:
            raise conditional_field_error(errors)
        return self


class CalculatorResult(BaseModel):
    """Base class for immutable calculation results."""

    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════
# UNIT NORMALIZATION
# ═══════════════════════════════════════════════════════════


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def normalize_body_units(data: Any) -> Any:
    """
    Convert ``weight`` and ``height`` in a raw input mapping to kg and cm.

    Recognised keys:
        weight_unit: ``kg`` (default) or ``lb``
        height_unit: ``cm`` (default), ``in`` or ``ft_in``
        height_inches: extra inches when ``height_unit`` is ``ft_in``
            (``height`` then holds whole feet)

    Unit keys are consumed. Non-numeric values are passed through so
    that field validation reports them against ``weight``/``height``.
    """
    if not isinstance(data, dict):
        return data

    data = dict(data)
    errors: Dict[str, str] = {}

    raw_weight_unit = data.pop("weight_unit", WeightUnit.KG.value)
    raw_height_unit = data.pop("height_unit", HeightUnit.CM.value)
    raw_inches = data.pop("height_inches", None)

    try:
        weight_unit = WeightUnit(raw_weight_unit)
    except ValueError:
        errors["weight_unit"] = "Weight unit must be one of: kg, lb"
        weight_unit = WeightUnit.KG

    try:
        height_unit = HeightUnit(raw_height_unit)
    except ValueError:
        errors["height_unit"] = "Height unit must be one of: cm, in, ft_in"
        height_unit = HeightUnit.CM

    weight = _as_number(data.get("weight"))
    if weight is not None and weight_unit is WeightUnit.LB:
        data["weight"] = lb_to_kg(weight)

    height = _as_number(data.get("height"))
    if height is not None and height_unit is HeightUnit.IN:
        data["height"] = inches_to_cm(height)
    elif height is not None and height_unit is HeightUnit.FT_IN:
        inches = 0.0 if raw_inches is None else _as_number(raw_inches)
        if not 2 <= height <= 9:
            errors["height"] = "Height in feet must be between 2 and 9"
        if inches is None or not 0 <= inches <= 11:
            errors["height_inches"] = "Inches must be between 0 and 11"
        if "height" not in errors and "height_inches" not in errors:
            data["height"] = feet_inches_to_cm(height, inches or 0.0)
    elif raw_inches is not None:
        errors["height_inches"] = "Inches are only accepted with height_unit 'ft_in'"

    if errors:
        raise conditional_field_error(errors)
    return data


class BodyMeasurementsInput(CalculatorInput):
    """Calculator input whose weight/height may arrive in imperial units.

    Values are stored as kg and cm; declared ranges apply to the metric
    values.
    """

    @model_validator(mode="before")
    @classmethod
    def _normalize_units(cls, data: Any) -> Any:
        return normalize_body_units(data)
