"""BMRService - Basal Metabolic Rate calculation."""

from __future__ import annotations

from typing import Dict, Tuple

from ..shared.errors import UnsupportedMethodError
from ..shared.value_objects import Gender
from .inputs import (
    HarrisBenedictInput,
    KatchMcArdleInput,
    MifflinStJeorInput,
    EnergyInputBase,
)
from .value_objects import BMRFormula, DiabetesType, Reliability, SmokingStatus

_FORMULA_INFO: Dict[BMRFormula, Tuple[str, Reliability]] = {
    BMRFormula.MIFFLIN_ST_JEOR: (
        "Mifflin-St Jeor equation (most accurate for general population)",
        Reliability.HIGH,
    ),
    BMRFormula.HARRIS_BENEDICT: (
        "Harris-Benedict equation (revised 1984)",
        Reliability.MODERATE,
    ),
    BMRFormula.KATCH_MCARDLE: (
        "Katch-McArdle equation (most accurate for lean individuals)",
        Reliability.HIGH,
    ),
}

MAX_CAFFEINE_BOOST = 0.10


def mifflin_st_jeor(weight: float, height: float, age: float, gender: Gender) -> float:
    """Mifflin-St Jeor BMR in kcal/day.

    Formula:
        Men:   10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """
    base = 10 * weight + 6.25 * height - 5 * age
    return base + 5 if gender is Gender.MALE else base - 161


def harris_benedict(weight: float, height: float, age: float, gender: Gender) -> float:
    """Revised Harris-Benedict BMR (Roza & Shizgal, 1984)."""
    if gender is Gender.MALE:
        return 88.362 + 13.397 * weight + 4.799 * height - 5.677 * age
    return 447.593 + 9.247 * weight + 3.098 * height - 4.330 * age


def katch_mcardle(weight: float, body_fat_percentage: float) -> float:
    """Katch-McArdle BMR from lean body mass: 370 + 21.6 × LBM(kg)."""
    lean_mass = weight * (1 - body_fat_percentage / 100)
    return 370 + 21.6 * lean_mass


class BMRService:
    """Calculate BMR with the selected equation and health adjustments.

    Adjustments are multiplicative and applied in a fixed order:
    thyroid, diabetes, smoking, caffeine.
    """

    def base_bmr(self, data: EnergyInputBase) -> float:
        """Unadjusted BMR for the formula carried by ``data``."""
        if isinstance(data, MifflinStJeorInput):
            return mifflin_st_jeor(data.weight, data.height, data.age, data.gender)
        elif isinstance(data, HarrisBenedictInput):
            return harris_benedict(data.weight, data.height, data.age, data.gender)
        elif isinstance(data, KatchMcArdleInput):
            return katch_mcardle(data.weight, data.body_fat_percentage)
        else:
            raise UnsupportedMethodError("bmr", getattr(data, "formula", data))

    def apply_adjustments(self, bmr: float, data: EnergyInputBase) -> float:
        adjusted = bmr * data.thyroid.multiplier()

        if data.diabetes is not DiabetesType.NONE:
            adjusted *= 1.05

        if data.smoking is SmokingStatus.CURRENT:
            adjusted *= 1.10

        if data.caffeine_drinks > 0:
            adjusted *= 1 + min(data.caffeine_drinks * 0.02, MAX_CAFFEINE_BOOST)

        return adjusted

    def calculate(self, data: EnergyInputBase) -> float:
        """Adjusted BMR in kcal/day (unrounded).

        Example:
            >>> data = MifflinStJeorInput(
            ...     age=30, gender="male", weight=80, height=180,
            ...     activity_level="sedentary",
            ... )
            >>> BMRService().calculate(data)
            1780.0
        """
        return self.apply_adjustments(self.base_bmr(data), data)

    @staticmethod
    def describe(formula: BMRFormula) -> Tuple[str, Reliability]:
        return _FORMULA_INFO[formula]
