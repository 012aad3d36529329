"""
Raw input parsing.

Turns a mapping of raw form values into a validated calculator input,
or raises :class:`InputValidationError` with field-keyed messages.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from .errors import InputValidationError
from .value_objects import CONDITIONAL_FIELD_ERROR

logger = structlog.get_logger(__name__)

ROOT_FIELD = "input"
_UNION_TAG_ERRORS = frozenset({"union_tag_invalid", "union_tag_not_found"})


def _validate(input_type: Any, values: Any, context: Optional[Dict[str, Any]]) -> Any:
    if isinstance(input_type, TypeAdapter):
        return input_type.validate_python(values, context=context)
    return input_type.model_validate(values, context=context)


def field_errors_from(
    exc: ValidationError, discriminator: Optional[str] = None
) -> Dict[str, str]:
    """
    Flatten a pydantic ValidationError into ``{field: message}``.

    Args:
        exc: Error raised while validating raw input
        discriminator: Tag field name when the input is a tagged union;
            the leading tag segment is dropped from error locations

    Returns:
        First message per field, in error order
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        ctx = error.get("ctx") or {}
        if error["type"] == CONDITIONAL_FIELD_ERROR:
            for field, message in ctx.get("field_errors", {}).items():
                errors.setdefault(field, message)
            continue

        if error["type"] in _UNION_TAG_ERRORS and discriminator:
            errors.setdefault(discriminator, error["msg"])
            continue

        loc = list(error["loc"])
        if discriminator and loc:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or ROOT_FIELD
        errors.setdefault(field, error["msg"])
    return errors


def parse_input(
    input_type: Any,
    raw: Mapping[str, Any],
    discriminator: Optional[str] = None,
    defaults: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> Any:
    """
    Validate raw values against a calculator input type.

    Args:
        input_type: Input model class, or a TypeAdapter over a tagged union
        raw: Raw form values (JSON-compatible)
        discriminator: Tag field of a tagged union, for error keys
        defaults: Values applied when missing from ``raw``
        today: Reference date for rules such as "not in the future"

    Returns:
        Validated, unit-normalized input instance

    Raises:
        InputValidationError: If any field is rejected

    Example:
        >>> parse_input(BMIInput, {"weight": 70, "height": 175})
        BMIInput(weight=70.0, height=175.0)
    """
    values: Any = raw
    if defaults and isinstance(raw, Mapping):
        values = {**defaults, **raw}
    context = {"today": today} if today is not None else None
    try:
        return _validate(input_type, values, context)
    except ValidationError as exc:
        field_errors = field_errors_from(exc, discriminator)
        logger.debug("input.rejected", fields=sorted(field_errors))
        raise InputValidationError(field_errors) from exc
