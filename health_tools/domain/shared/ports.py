"""Calculator ports - interfaces implemented by every calculation service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
ResultT = TypeVar("ResultT")


class ICalculator(ABC, Generic[InputT, ResultT]):
    """Port for a pure calculator.

    Given the same validated input, ``calculate`` always returns an equal
    result and never raises.
    """

    @abstractmethod
    def calculate(self, data: InputT) -> ResultT:
        """Calculate the result for validated input.

        Args:
            data: Validated, unit-normalized input

        Returns:
            Immutable calculation result
        """
        pass


class IDatedCalculator(ABC, Generic[InputT, ResultT]):
    """Port for a calculator whose result depends on the current date.

    The date is an explicit argument so results stay reproducible.
    """

    @abstractmethod
    def calculate(self, data: InputT, today: date) -> ResultT:
        """Calculate the result as of ``today``.

        Args:
            data: Validated input
            today: Reference date for "current" values

        Returns:
            Immutable calculation result
        """
        pass
