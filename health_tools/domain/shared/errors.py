"""
Domain exceptions.

Typed exceptions for explicit error handling across all calculators.
"""

from __future__ import annotations

from typing import Dict


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All calculator exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# INPUT EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class InputValidationError(DomainError):
    """
    Raw calculator input was rejected before any calculation ran.

    Raised when:
    - A value is outside its declared range
    - An enum value is not recognised
    - A method-specific field is missing (e.g. hip for female US Navy)

    Attributes:
        field_errors: Mapping of field path to human readable message

    Example:
        >>> raise InputValidationError({"hip": "Hip measurement is required"})
    """

    def __init__(self, field_errors: Dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        summary = "; ".join(
            f"{field}: {message}" for field, message in self.field_errors.items()
        )
        super().__init__(summary or "Invalid input")


# ═══════════════════════════════════════════════════════════
# CALCULATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class UnsupportedMethodError(DomainError):
    """
    A calculation dispatcher received a variant it does not know.

    This is a caller contract violation, not a user error: validated
    input can never produce it.

    Example:
        >>> raise UnsupportedMethodError("body_fat", "calipers_9")
    """

    def __init__(self, calculator: str, method: object) -> None:
        self.calculator = calculator
        self.method = method
        super().__init__(f"Unsupported {calculator} method: {method!r}")


class CalculatorNotFoundError(DomainError):
    """
    No calculator is registered under the requested name.

    Example:
        >>> raise CalculatorNotFoundError("bmx")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown calculator: {name!r}")
