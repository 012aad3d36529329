"""
Calculator registry.

Maps the public calculator names to their input type, parsing options
and service entry point, so callers can run any calculator from raw
form values without knowing its module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional

from health_tools.domain.blood_pressure import BloodPressureInput, BloodPressureService
from health_tools.domain.blood_sugar import BloodSugarInput, BloodSugarService
from health_tools.domain.bmi import BMIInput, BMIService
from health_tools.domain.body_fat import BODY_FAT_INPUT_ADAPTER, BodyFatService
from health_tools.domain.cholesterol import CholesterolInput, CholesterolService
from health_tools.domain.energy import (
    ENERGY_INPUT_ADAPTER,
    CalorieNeedsInput,
    EnergyService,
)
from health_tools.domain.heart_rate import HEART_RATE_INPUT_ADAPTER, HeartRateZoneService
from health_tools.domain.hydration import HydrationInput, HydrationService
from health_tools.domain.kids_bmi import KidsBMIInput, KidsBMIService
from health_tools.domain.ovulation import OvulationInput, OvulationService
from health_tools.domain.pregnancy import PREGNANCY_INPUT_ADAPTER, PregnancyService
from health_tools.domain.shared import (
    CalculatorNotFoundError,
    CalculatorResult,
    parse_input,
)
from health_tools.domain.sleep import SleepDurationInput, SleepInput, SleepService
from health_tools.domain.vitamin_d import VitaminDInput, VitaminDService

Runner = Callable[[Any, date], CalculatorResult]


@dataclass(frozen=True)
class CalculatorEntry:
    """One registered calculator.

    ``run`` receives the validated input and the reference date; calculators
    that are not date-dependent ignore the date.
    """

    name: str
    description: str
    input_type: Any
    run: Runner
    discriminator: Optional[str] = None
    defaults: Mapping[str, Any] = field(default_factory=dict)
    dated: bool = False

    def parse(self, raw: Mapping[str, Any], today: date) -> Any:
        return parse_input(
            self.input_type,
            raw,
            discriminator=self.discriminator,
            defaults=self.defaults,
            today=today if self.dated else None,
        )

    def execute(self, raw: Mapping[str, Any], today: date) -> CalculatorResult:
        """Validate raw values and run the calculation.

        Raises:
            InputValidationError: If the raw values are rejected
        """
        return self.run(self.parse(raw, today), today)


def _build_entries() -> List[CalculatorEntry]:
    bmi = BMIService()
    kids_bmi = KidsBMIService()
    energy = EnergyService()
    body_fat = BodyFatService()
    blood_sugar = BloodSugarService()
    blood_pressure = BloodPressureService()
    cholesterol = CholesterolService()
    heart_rate = HeartRateZoneService()
    hydration = HydrationService()
    vitamin_d = VitaminDService()
    ovulation = OvulationService()
    pregnancy = PregnancyService()
    sleep = SleepService()

    return [
        CalculatorEntry(
            name="bmi",
            description="Adult body mass index with ideal weight range",
            input_type=BMIInput,
            run=lambda data, _: bmi.calculate(data),
        ),
        CalculatorEntry(
            name="kids_bmi",
            description="BMI-for-age percentile for ages 2 to 19",
            input_type=KidsBMIInput,
            run=lambda data, _: kids_bmi.calculate(data),
        ),
        CalculatorEntry(
            name="bmr",
            description="Basal metabolic rate, TDEE, calorie goals and macros",
            input_type=ENERGY_INPUT_ADAPTER,
            run=lambda data, _: energy.calculate(data),
            discriminator="formula",
            defaults={"formula": "mifflin_st_jeor"},
        ),
        CalculatorEntry(
            name="calories",
            description="Daily calorie needs for a weight goal",
            input_type=CalorieNeedsInput,
            run=lambda data, _: energy.calculate_calorie_needs(data),
        ),
        CalculatorEntry(
            name="body_fat",
            description="Body fat percentage by US Navy, YMCA or skinfold methods",
            input_type=BODY_FAT_INPUT_ADAPTER,
            run=lambda data, _: body_fat.calculate(data),
            discriminator="method",
            defaults={"method": "us_navy"},
        ),
        CalculatorEntry(
            name="blood_sugar",
            description="Glucose reading and HbA1c classification",
            input_type=BloodSugarInput,
            run=lambda data, _: blood_sugar.calculate(data),
        ),
        CalculatorEntry(
            name="blood_pressure",
            description="Blood pressure category and risk",
            input_type=BloodPressureInput,
            run=lambda data, _: blood_pressure.calculate(data),
        ),
        CalculatorEntry(
            name="cholesterol",
            description="Lipid panel categories and cardiovascular risk",
            input_type=CholesterolInput,
            run=lambda data, _: cholesterol.calculate(data),
        ),
        CalculatorEntry(
            name="heart_rate",
            description="Heart rate training zones",
            input_type=HEART_RATE_INPUT_ADAPTER,
            run=lambda data, _: heart_rate.calculate(data),
            discriminator="method",
            defaults={"method": "karvonen"},
        ),
        CalculatorEntry(
            name="hydration",
            description="Daily water intake",
            input_type=HydrationInput,
            run=lambda data, _: hydration.calculate(data),
        ),
        CalculatorEntry(
            name="vitamin_d",
            description="Vitamin D status, deficiency risk and supplementation",
            input_type=VitaminDInput,
            run=lambda data, _: vitamin_d.calculate(data),
        ),
        CalculatorEntry(
            name="ovulation",
            description="Ovulation date, fertile window and cycle phase",
            input_type=OvulationInput,
            run=ovulation.calculate,
            dated=True,
        ),
        CalculatorEntry(
            name="due_date",
            description="Pregnancy due date and gestational progress",
            input_type=PREGNANCY_INPUT_ADAPTER,
            run=pregnancy.calculate,
            discriminator="method",
            defaults={"method": "lmp"},
            dated=True,
        ),
        CalculatorEntry(
            name="sleep",
            description="Bedtimes or wake times aligned to sleep cycles",
            input_type=SleepInput,
            run=lambda data, _: sleep.calculate(data),
        ),
        CalculatorEntry(
            name="sleep_duration",
            description="Nightly sleep duration rated for age",
            input_type=SleepDurationInput,
            run=lambda data, _: sleep.assess_duration(data.hours, data.age),
        ),
    ]


CALCULATORS: Dict[str, CalculatorEntry] = {entry.name: entry for entry in _build_entries()}


def get_calculator(name: str) -> CalculatorEntry:
    """Return the registered calculator.

    Raises:
        CalculatorNotFoundError: If no calculator has this name
    """
    try:
        return CALCULATORS[name]
    except KeyError:
        raise CalculatorNotFoundError(name) from None


def run_calculator(name: str, raw: Mapping[str, Any], today: date) -> CalculatorResult:
    """Parse raw form values and run the named calculator as of ``today``."""
    return get_calculator(name).execute(raw, today)
