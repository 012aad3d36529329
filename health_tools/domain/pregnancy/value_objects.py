"""Pregnancy due date value objects."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from ..shared.value_objects import CalculatorInput, CalculatorResult

PREGNANCY_DAYS_FROM_LMP = 280
# Fixed 40 weeks from LMP, so every dating method lands on the same day
DUE_DATE_OFFSET = timedelta(days=PREGNANCY_DAYS_FROM_LMP)
PREGNANCY_DAYS_FROM_CONCEPTION = 266
CONCEPTION_OFFSET_DAYS = 14


class DatingMethod(str, Enum):
    LMP = "lmp"
    CONCEPTION = "conception"
    ULTRASOUND = "ultrasound"


class Trimester(int, Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3


def _future_error(field: str, value: date, today: date) -> Dict[str, str]:
    if value > today:
        return {field: "Date cannot be in the future"}
    return {}


class LMPInput(CalculatorInput):
    """Dating from the first day of the last menstrual period."""

    method: Literal["lmp"] = "lmp"
    last_period_date: date
    cycle_length: int = Field(28, ge=21, le=45, description="Days")

    def gestation_start(self) -> date:
        return self.last_period_date

    def conception_estimate(self) -> date:
        return self.last_period_date + timedelta(days=self.cycle_length - CONCEPTION_OFFSET_DAYS)

    def due_date(self) -> date:
        return self.last_period_date + DUE_DATE_OFFSET

    def dated_errors(self, today: date) -> Dict[str, str]:
        return _future_error("last_period_date", self.last_period_date, today)


class ConceptionInput(CalculatorInput):
    """Dating from a known conception date."""

    method: Literal["conception"] = "conception"
    conception_date: date

    def gestation_start(self) -> date:
        return self.conception_date - timedelta(days=CONCEPTION_OFFSET_DAYS)

    def conception_estimate(self) -> date:
        return self.conception_date

    def due_date(self) -> date:
        return self.conception_date + timedelta(days=PREGNANCY_DAYS_FROM_CONCEPTION)

    def dated_errors(self, today: date) -> Dict[str, str]:
        return _future_error("conception_date", self.conception_date, today)


class UltrasoundInput(CalculatorInput):
    """Dating from a scan and the gestational age measured at it."""

    method: Literal["ultrasound"] = "ultrasound"
    ultrasound_date: date
    gestational_weeks: int = Field(..., ge=4, le=42)
    gestational_days: int = Field(0, ge=0, le=6)

    def gestation_start(self) -> date:
        """Estimated LMP: scan date minus gestational age."""
        return self.ultrasound_date - timedelta(
            weeks=self.gestational_weeks, days=self.gestational_days
        )

    def conception_estimate(self) -> date:
        return self.gestation_start() + timedelta(days=CONCEPTION_OFFSET_DAYS)

    def due_date(self) -> date:
        return self.gestation_start() + DUE_DATE_OFFSET

    def dated_errors(self, today: date) -> Dict[str, str]:
        return _future_error("ultrasound_date", self.ultrasound_date, today)


PregnancyInput = Annotated[
    Union[LMPInput, ConceptionInput, UltrasoundInput],
    Field(discriminator="method"),
]

PREGNANCY_INPUT_ADAPTER: TypeAdapter[PregnancyInput] = TypeAdapter(PregnancyInput)


# ═══════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════


class GestationalAge(CalculatorResult):
    weeks: int = Field(..., ge=0)
    days: int = Field(..., ge=0, le=6)
    total_days: int = Field(..., ge=0)


class DateRange(CalculatorResult):
    start: date
    end: date


class KeyDates(CalculatorResult):
    conception: date
    implantation: DateRange
    first_trimester_end: date
    second_trimester_end: date
    viability: date
    full_term: date


class Milestone(CalculatorResult):
    week: int
    title: str
    description: str
    expected_date: date


class DeliveryWindows(CalculatorResult):
    """Weeks remaining until each delivery threshold, floored at 0."""

    preterm: int
    full_term: int
    due_date: int
    post_term: int


class AccuracyInfo(CalculatorResult):
    method: DatingMethod
    reliability: str
    note: str


class PregnancyResult(CalculatorResult):
    method: DatingMethod
    due_date: date
    conception_date: date
    gestational_age: GestationalAge
    trimester: Trimester
    days_until_due: int = Field(..., ge=0)
    weeks_until_due: int = Field(..., ge=0)
    percent_complete: float = Field(..., ge=0, le=100)
    key_dates: KeyDates
    upcoming_milestones: List[Milestone]
    delivery_windows: DeliveryWindows
    baby_development: Optional[str] = Field(
        None, description="Development stage for the current week, from week 4"
    )
    accuracy: AccuracyInfo
