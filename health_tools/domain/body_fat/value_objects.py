"""Body fat value objects.

``BodyFatInput`` is a tagged union on ``method``; each variant carries
the measurements its equation needs. Sex-dependent requirements (hip for
female US Navy, the 3-site skinfold set) are cross-field rules.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Tuple, Union

from pydantic import Field, TypeAdapter

from ..shared.lookup import ThresholdTable
from ..shared.value_objects import CalculatorInput, CalculatorResult, Gender

Skinfold = Annotated[float, Field(ge=5, le=50, description="Skinfold thickness (mm)")]


class BodyFatMethod(str, Enum):
    US_NAVY = "us_navy"
    YMCA = "ymca"
    JACKSON_POLLOCK_3 = "jackson_pollock_3"
    JACKSON_POLLOCK_7 = "jackson_pollock_7"


class BodyFatCategory(str, Enum):
    ESSENTIAL = "essential"
    ATHLETIC = "athletic"
    FITNESS = "fitness"
    AVERAGE = "average"
    OBESE = "obese"

    def label(self) -> str:
        if self is BodyFatCategory.ESSENTIAL:
            return "Essential Fat"
        return self.value.title()


_CATEGORY_ORDER = (
    BodyFatCategory.ESSENTIAL,
    BodyFatCategory.ATHLETIC,
    BodyFatCategory.FITNESS,
    BodyFatCategory.AVERAGE,
    BodyFatCategory.OBESE,
)

BODY_FAT_CATEGORIES: Dict[Gender, ThresholdTable[BodyFatCategory]] = {
    Gender.MALE: ThresholdTable(bounds=(6.0, 14.0, 18.0, 25.0), labels=_CATEGORY_ORDER),
    Gender.FEMALE: ThresholdTable(bounds=(14.0, 21.0, 25.0, 32.0), labels=_CATEGORY_ORDER),
}

# Physiological floor of the essential band
ESSENTIAL_FAT_MIN = {Gender.MALE: 2.0, Gender.FEMALE: 10.0}

# Skinfold sites per 3-site protocol
JP3_SITES: Dict[Gender, Tuple[str, ...]] = {
    Gender.MALE: ("chest", "abdominal", "thigh"),
    Gender.FEMALE: ("tricep", "suprailiac", "thigh"),
}


class _BodyFatInputBase(CalculatorInput):
    gender: Gender
    age: int = Field(..., ge=18, le=100, description="Age in years")
    weight: float = Field(..., ge=40, le=300, description="Body weight (kg)")
    height: float = Field(..., ge=100, le=250, description="Height (cm)")


class USNavyInput(_BodyFatInputBase):
    """US Navy circumference method; females also need hip."""

    method: Literal["us_navy"] = "us_navy"
    neck: float = Field(..., ge=20, le=60, description="Neck circumference (cm)")
    waist: float = Field(..., ge=50, le=150, description="Waist circumference (cm)")
    hip: Optional[float] = Field(None, ge=70, le=160, description="Hip circumference (cm)")

    def conditional_errors(self) -> Dict[str, str]:
        if self.gender is Gender.FEMALE:
            if self.hip is None:
                return {"hip": "Hip measurement is required for women"}
            if self.waist + self.hip <= self.neck:
                return {"neck": "Neck must be smaller than waist plus hip"}
        elif self.waist <= self.neck:
            return {"waist": "Waist must be larger than neck"}
        return {}


class YMCAInput(_BodyFatInputBase):
    method: Literal["ymca"] = "ymca"
    abdomen: float = Field(..., ge=50, le=150, description="Abdominal circumference (cm)")


class JacksonPollock3Input(_BodyFatInputBase):
    """3-site skinfolds: chest/abdominal/thigh (men), tricep/suprailiac/thigh (women)."""

    method: Literal["jackson_pollock_3"] = "jackson_pollock_3"
    chest: Optional[Skinfold] = None
    abdominal: Optional[Skinfold] = None
    thigh: Optional[Skinfold] = None
    tricep: Optional[Skinfold] = None
    suprailiac: Optional[Skinfold] = None

    def conditional_errors(self) -> Dict[str, str]:
        return {
            site: f"{site.title()} skinfold is required for {self.gender.value}s"
            for site in JP3_SITES[self.gender]
            if getattr(self, site) is None
        }

    def skinfold_sum(self) -> float:
        return sum(getattr(self, site) for site in JP3_SITES[self.gender])


class JacksonPollock7Input(_BodyFatInputBase):
    method: Literal["jackson_pollock_7"] = "jackson_pollock_7"
    chest: Skinfold
    axilla: Skinfold
    tricep: Skinfold
    subscapular: Skinfold
    abdominal: Skinfold
    suprailiac: Skinfold
    thigh: Skinfold

    def skinfold_sum(self) -> float:
        return (
            self.chest
            + self.axilla
            + self.tricep
            + self.subscapular
            + self.abdominal
            + self.suprailiac
            + self.thigh
        )


BodyFatInput = Annotated[
    Union[USNavyInput, YMCAInput, JacksonPollock3Input, JacksonPollock7Input],
    Field(discriminator="method"),
]

BODY_FAT_INPUT_ADAPTER: TypeAdapter[BodyFatInput] = TypeAdapter(BodyFatInput)


# ═══════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════


class MethodInfo(CalculatorResult):
    name: str
    description: str
    accuracy: str
    pros: Tuple[str, ...]
    cons: Tuple[str, ...]


class CategoryInfo(CalculatorResult):
    category: BodyFatCategory
    label: str
    description: str
    range: str


class BodyComposition(CalculatorResult):
    fat_mass: float
    lean_mass: float
    muscle_mass: float
    bone_mass: float


class HealthInsight(CalculatorResult):
    category: str
    insight: str


class BodyFatRecommendation(CalculatorResult):
    type: str
    recommendation: str


class BodyFatResult(CalculatorResult):
    method: BodyFatMethod
    body_fat_percentage: float
    category: CategoryInfo
    bmi: float
    composition: BodyComposition
    methodology: MethodInfo
    health_insights: List[HealthInsight]
    recommendations: List[BodyFatRecommendation]
