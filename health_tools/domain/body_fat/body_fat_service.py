"""BodyFatService - body fat percentage and composition."""

from __future__ import annotations

import math
from typing import Dict, List, cast

import structlog

from ..shared.body import calculate_bmi
from ..shared.errors import UnsupportedMethodError
from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up
from ..shared.units import cm_to_inches, kg_to_lb
from ..shared.value_objects import Gender
from .value_objects import (
    BODY_FAT_CATEGORIES,
    ESSENTIAL_FAT_MIN,
    BodyComposition,
    BodyFatCategory,
    BodyFatInput,
    BodyFatMethod,
    BodyFatRecommendation,
    BodyFatResult,
    CategoryInfo,
    HealthInsight,
    JacksonPollock3Input,
    JacksonPollock7Input,
    MethodInfo,
    USNavyInput,
    YMCAInput,
)

logger = structlog.get_logger(__name__)

BONE_MASS_FRACTION = 0.15

# Reported percentages are clamped to this range; lean mass stays above bone mass
MIN_BODY_FAT = 0.0
MAX_BODY_FAT = 75.0

_METHOD_INFO: Dict[BodyFatMethod, MethodInfo] = {
    BodyFatMethod.US_NAVY: MethodInfo(
        name="US Navy Method",
        description="Uses circumference measurements to estimate body fat percentage",
        accuracy="Good (±3-4%)",
        pros=[
            "Simple measurements with a tape measure",
            "No special equipment required",
            "Widely validated and used",
        ],
        cons=[
            "Less accurate than skinfold methods",
            "Affected by measurement technique",
            "May overestimate in very lean individuals",
        ],
    ),
    BodyFatMethod.YMCA: MethodInfo(
        name="YMCA Method",
        description="Uses waist circumference and body weight for estimation",
        accuracy="Moderate (±4-5%)",
        pros=[
            "Single, quick measurement",
            "Good for tracking changes over time",
            "Correlates well with health risks",
        ],
        cons=[
            "Less accurate than multi-site methods",
            "Does not account for muscle mass",
            "Affected by bloating and posture",
        ],
    ),
    BodyFatMethod.JACKSON_POLLOCK_3: MethodInfo(
        name="Jackson-Pollock 3-Site",
        description="Uses skinfold measurements at three sex-specific body sites",
        accuracy="Very Good (±2-3%)",
        pros=[
            "More accurate than circumference methods",
            "Validated by extensive research",
            "Widely used in the fitness industry",
        ],
        cons=[
            "Requires skinfold calipers",
            "Accuracy depends on technique",
            "Less accurate for obese individuals",
        ],
    ),
    BodyFatMethod.JACKSON_POLLOCK_7: MethodInfo(
        name="Jackson-Pollock 7-Site",
        description="Most comprehensive skinfold method using seven measurement sites",
        accuracy="Excellent (±1-2%)",
        pros=[
            "Highest accuracy of field methods",
            "Comprehensive body assessment",
            "Reference standard for skinfold testing",
        ],
        cons=[
            "Requires extensive training",
            "Time-consuming measurements",
            "Requires high-quality calipers",
        ],
    ),
}

_CATEGORY_DESCRIPTIONS: Dict[BodyFatCategory, str] = {
    BodyFatCategory.ESSENTIAL: "Minimum fat needed for physiological functions",
    BodyFatCategory.ATHLETIC: "Typical for athletes and very fit individuals",
    BodyFatCategory.FITNESS: "Fit and healthy range",
    BodyFatCategory.AVERAGE: "Average range for the general population",
    BodyFatCategory.OBESE: "Above the healthy range, may pose health risks",
}

_RECOMMENDATIONS: Dict[BodyFatCategory, List[BodyFatRecommendation]] = {
    BodyFatCategory.ESSENTIAL: [
        BodyFatRecommendation(
            type="Health Warning",
            recommendation=(
                "Your body fat percentage is very low. Check with a healthcare "
                "provider that this is healthy for you."
            ),
        ),
        BodyFatRecommendation(
            type="Nutrition",
            recommendation=(
                "Eat enough calories and fat to support hormone production and "
                "overall health."
            ),
        ),
    ],
    BodyFatCategory.ATHLETIC: [
        BodyFatRecommendation(
            type="Maintenance",
            recommendation=(
                "Keep your body composition with a consistent training routine "
                "and balanced nutrition."
            ),
        ),
        BodyFatRecommendation(
            type="Performance",
            recommendation=(
                "Consider periodized training and nutrition to optimize "
                "performance at healthy fat levels."
            ),
        ),
    ],
    BodyFatCategory.AVERAGE: [
        BodyFatRecommendation(
            type="Fitness",
            recommendation=(
                "Add resistance training to build muscle and lower body fat "
                "percentage."
            ),
        ),
        BodyFatRecommendation(
            type="Nutrition",
            recommendation=(
                "Focus on nutrient-dense whole foods and adequate protein "
                "(0.8-1.2 g per kg of body weight)."
            ),
        ),
    ],
    BodyFatCategory.OBESE: [
        BodyFatRecommendation(
            type="Nutrition",
            recommendation=(
                "Create a moderate calorie deficit and prioritize protein to "
                "preserve muscle while losing fat."
            ),
        ),
        BodyFatRecommendation(
            type="Exercise",
            recommendation=(
                "Combine 150+ minutes of moderate cardio with 2-3 strength "
                "sessions per week."
            ),
        ),
        BodyFatRecommendation(
            type="Lifestyle",
            recommendation=(
                "Sleep 7-9 hours and manage stress; both affect body composition."
            ),
        ),
    ],
}
_RECOMMENDATIONS[BodyFatCategory.FITNESS] = _RECOMMENDATIONS[BodyFatCategory.ATHLETIC]


def siri(density: float) -> float:
    """Siri equation: body fat % from body density (g/cm³)."""
    return 495 / density - 450


def us_navy(data: USNavyInput) -> float:
    """US Navy circumference equation (all lengths in cm)."""
    if data.gender is Gender.MALE:
        return (
            495
            / (
                1.0324
                - 0.19077 * math.log10(data.waist - data.neck)
                + 0.15456 * math.log10(data.height)
            )
            - 450
        )
    hip = cast(float, data.hip)
    return (
        495
        / (
            1.29579
            - 0.35004 * math.log10(data.waist + hip - data.neck)
            + 0.22100 * math.log10(data.height)
        )
        - 450
    )


def ymca(data: YMCAInput) -> float:
    """YMCA equation; defined over waist in inches and weight in pounds."""
    waist_in = cm_to_inches(data.abdomen)
    weight_lb = kg_to_lb(data.weight)
    constant = 98.42 if data.gender is Gender.MALE else 76.76
    return (4.15 * waist_in - 0.082 * weight_lb - constant) / weight_lb * 100


def jackson_pollock_3(data: JacksonPollock3Input) -> float:
    s = data.skinfold_sum()
    if data.gender is Gender.MALE:
        density = 1.10938 - 0.0008267 * s + 0.0000016 * s**2 - 0.0002574 * data.age
    else:
        density = 1.0994921 - 0.0009929 * s + 0.0000023 * s**2 - 0.0001392 * data.age
    return siri(density)


def jackson_pollock_7(data: JacksonPollock7Input) -> float:
    s = data.skinfold_sum()
    if data.gender is Gender.MALE:
        density = 1.112 - 0.00043499 * s + 0.00000055 * s**2 - 0.00028826 * data.age
    else:
        density = 1.097 - 0.00046971 * s + 0.00000056 * s**2 - 0.00012828 * data.age
    return siri(density)


def _category_range(gender: Gender, category: BodyFatCategory) -> str:
    lower, upper = BODY_FAT_CATEGORIES[gender].band(category)
    if lower is None:
        lower = ESSENTIAL_FAT_MIN[gender]
    if upper is None:
        return f"{lower:g}%+"
    return f"{lower:g}-{upper:g}%"


_OUT_OF_RANGE_INSIGHT = HealthInsight(
    category="Measurement Check",
    insight=(
        "These measurements fall outside the range this method was built for, "
        "so the percentage shown is a limit rather than an estimate. "
        "Double-check them or try another method."
    ),
)


def _health_insights(pct: float, bmi: float, age: int, gender: Gender) -> List[HealthInsight]:
    male = gender is Gender.MALE
    insights: List[HealthInsight] = []

    if bmi > 25 and pct < (18 if male else 25):
        insights.append(
            HealthInsight(
                category="Body Composition",
                insight=(
                    "Your BMI indicates overweight, but your body fat is healthy. "
                    "This suggests higher muscle mass."
                ),
            )
        )
    elif bmi < 25 and pct > (20 if male else 28):
        insights.append(
            HealthInsight(
                category="Body Composition",
                insight=(
                    "Your BMI is normal, but body fat is elevated. Strength "
                    "training can help build muscle mass."
                ),
            )
        )

    if age > 40:
        insights.append(
            HealthInsight(
                category="Age Factor",
                insight=(
                    "After 40, keeping muscle mass matters more as body fat "
                    "naturally tends to rise with age."
                ),
            )
        )

    if pct > (25 if male else 32):
        insights.append(
            HealthInsight(
                category="Health Risk",
                insight=(
                    "Higher body fat is associated with cardiovascular disease, "
                    "diabetes and metabolic syndrome."
                ),
            )
        )
    elif pct < (6 if male else 14):
        insights.append(
            HealthInsight(
                category="Health Risk",
                insight=(
                    "Very low body fat can affect hormone production and immune "
                    "function."
                ),
            )
        )

    return insights


class BodyFatService(ICalculator[BodyFatInput, BodyFatResult]):
    """Body fat percentage via four interchangeable methods.

    Methods:
        - US Navy: circumference log-linear equation (hip for women)
        - YMCA: waist circumference and weight
        - Jackson-Pollock 3-site / 7-site: skinfold sum → density → Siri

    Body composition:
        fat mass = % × weight; lean = weight - fat;
        bone ≈ 15% of weight; muscle = lean - bone
    """

    def raw_percentage(self, data: BodyFatInput) -> float:
        """Unrounded body fat percentage from the method's equation."""
        if isinstance(data, USNavyInput):
            return us_navy(data)
        elif isinstance(data, YMCAInput):
            return ymca(data)
        elif isinstance(data, JacksonPollock3Input):
            return jackson_pollock_3(data)
        elif isinstance(data, JacksonPollock7Input):
            return jackson_pollock_7(data)
        else:
            raise UnsupportedMethodError("body_fat", getattr(data, "method", data))

    def calculate(self, data: BodyFatInput) -> BodyFatResult:
        method = BodyFatMethod(data.method)
        raw = self.raw_percentage(data)
        pct = min(MAX_BODY_FAT, max(MIN_BODY_FAT, raw))

        fat_mass = pct / 100 * data.weight
        lean_mass = data.weight - fat_mass
        bone_mass = data.weight * BONE_MASS_FRACTION
        muscle_mass = lean_mass - bone_mass

        category = BODY_FAT_CATEGORIES[data.gender].classify(pct)
        bmi = calculate_bmi(data.weight, data.height)

        insights = _health_insights(pct, bmi, data.age, data.gender)
        if pct != raw:
            insights.insert(0, _OUT_OF_RANGE_INSIGHT)

        logger.debug(
            "body_fat.calculated",
            method=method.value,
            body_fat=round_half_up(pct, 1),
            category=category.value,
        )

        return BodyFatResult(
            method=method,
            body_fat_percentage=round_half_up(pct, 1),
            category=CategoryInfo(
                category=category,
                label=category.label(),
                description=_CATEGORY_DESCRIPTIONS[category],
                range=_category_range(data.gender, category),
            ),
            bmi=round_half_up(bmi, 1),
            composition=BodyComposition(
                fat_mass=round_half_up(fat_mass, 1),
                lean_mass=round_half_up(lean_mass, 1),
                muscle_mass=round_half_up(muscle_mass, 1),
                bone_mass=round_half_up(bone_mass, 1),
            ),
            methodology=_METHOD_INFO[method],
            health_insights=insights,
            recommendations=list(_RECOMMENDATIONS[category]),
        )
