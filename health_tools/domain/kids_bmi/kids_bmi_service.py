"""KidsBMIService - BMI-for-age percentiles for children and teens."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import structlog
from scipy import stats

from ..shared.body import calculate_bmi
from ..shared.lookup import interpolate
from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up, round_int
from ..shared.value_objects import Gender
from .value_objects import (
    BMI_PERCENTILE_TABLE,
    KIDS_BMI_CATEGORIES,
    PERCENTILE_KEYS,
    ActivityGuidance,
    Confidence,
    DailyCalories,
    DevelopmentalContext,
    GrowthChart,
    GrowthPhase,
    HeightRange,
    KidsBMICategory,
    KidsBMIInput,
    KidsBMIResult,
    KidsCategoryInfo,
    KidsMacro,
    KidsMacros,
    KidsWarning,
    NutritionGuidance,
    PercentileBands,
    PredictedAdultHeight,
)

logger = structlog.get_logger(__name__)

MAX_PERCENTILE = 99.0
MID_PARENT_OFFSET_CM = 6.5
PREDICTION_MARGIN_CM = 5.0

_CATEGORY_INFO: Dict[KidsBMICategory, Tuple[str, str, List[str]]] = {
    KidsBMICategory.UNDERWEIGHT: (
        "Below the 5th percentile for children of the same age and sex",
        "< 5th percentile",
        [
            "Consult your pediatrician about healthy weight gain strategies",
            "Focus on nutrient-dense, calorie-rich foods",
            "Ensure adequate protein intake for growth",
            "Monitor growth patterns regularly",
        ],
    ),
    KidsBMICategory.HEALTHY_WEIGHT: (
        "Between the 5th and 85th percentile for children of the same age and sex",
        "5th - 85th percentile",
        [
            "Maintain current healthy eating patterns",
            "Continue regular physical activity",
            "Ensure balanced nutrition for growth",
            "Keep up regular check-ups with your healthcare provider",
        ],
    ),
    KidsBMICategory.OVERWEIGHT: (
        "Between the 85th and 95th percentile for children of the same age and sex",
        "85th - 95th percentile",
        [
            "Focus on healthy lifestyle changes for the whole family",
            "Increase physical activity gradually",
            "Limit sugary drinks and high-calorie snacks",
            "Consult your pediatrician for guidance",
        ],
    ),
    KidsBMICategory.OBESE: (
        "At or above the 95th percentile for children of the same age and sex",
        "≥ 95th percentile",
        [
            "Work with your healthcare team on a weight management plan",
            "Focus on family-based lifestyle changes",
            "Make gradual, sustainable changes to diet and activity",
            "Schedule regular monitoring by healthcare professionals",
        ],
    ),
}

_DEVELOPMENT: Dict[GrowthPhase, Tuple[str, List[str]]] = {
    GrowthPhase.EARLY_CHILDHOOD: (
        "Steady growth of 5-8 cm and 2-3 kg per year",
        [
            "Offer a variety of healthy foods several times",
            "Keep mealtimes positive and pressure-free",
            "Encourage active play and exploration",
        ],
    ),
    GrowthPhase.MIDDLE_CHILDHOOD: (
        "Steady growth of 5-6 cm and 2-3 kg per year",
        [
            "Involve children in meal planning and preparation",
            "Encourage participation in sports and activities",
            "Set consistent rules around screen time",
        ],
    ),
    GrowthPhase.PRE_ADOLESCENT: (
        "Growth spurts may begin, especially in girls",
        [
            "Discuss body changes and healthy development",
            "Continue family meals and healthy habits",
            "Address body image concerns positively",
        ],
    ),
    GrowthPhase.ADOLESCENT: (
        "Rapid growth spurts during puberty",
        [
            "Respect growing independence while providing guidance",
            "Support healthy coping with body changes",
            "Encourage a balanced approach to school and health",
        ],
    ),
}

SCREEN_TIME_TIPS = [
    "Avoid screens during meals",
    "No screens 1 hour before bedtime",
    "Choose educational content when possible",
]


def percentile_bands(age_months: int, gender: Gender) -> Tuple[float, ...]:
    """BMI at each reference percentile, interpolated linearly between
    tabulated ages and clamped to the first/last row outside the table."""
    rows = sorted(BMI_PERCENTILE_TABLE[gender].items())
    return tuple(
        interpolate(age_months, [(month, values[i]) for month, values in rows])
        for i in range(len(PERCENTILE_KEYS))
    )


def bmi_percentile(bmi: float, age_months: int, gender: Gender) -> float:
    """
    Estimate the BMI-for-age percentile.

    Piecewise-linear through (0, 0) and each (p_k BMI, k) up to p95.
    Above p95 the percentile grows by 4 points per 100% over p95,
    capped at 99.
    """
    bands = percentile_bands(age_months, gender)
    p95 = bands[-1]
    if bmi > p95:
        return min(MAX_PERCENTILE, 95 + (bmi - p95) / p95 * 4)
    points = [(0.0, 0.0)] + [(b, float(k)) for b, k in zip(bands, PERCENTILE_KEYS)]
    return max(0.0, interpolate(bmi, points))


def percentile_z_score(percentile: float) -> float:
    """Standard normal quantile of a percentile in (0, 100)."""
    p = min(max(percentile, 0.1), 99.9) / 100
    return float(stats.norm.ppf(p))


def predict_adult_height(
    height_cm: float,
    age: int,
    gender: Gender,
    mother_height: Optional[float] = None,
    father_height: Optional[float] = None,
) -> PredictedAdultHeight:
    """Near-adult, mid-parent, or growth-velocity height projection."""
    if age >= 16:
        predicted = height_cm + (2 if gender is Gender.MALE else 1)
        confidence = Confidence.HIGH
        method = "Current height (near adult)"
    elif mother_height is not None and father_height is not None:
        mid_parent = (mother_height + father_height) / 2
        offset = MID_PARENT_OFFSET_CM if gender is Gender.MALE else -MID_PARENT_OFFSET_CM
        predicted = mid_parent + offset
        confidence = Confidence.MODERATE
        method = "Mid-parent height method"
    else:
        if gender is Gender.MALE:
            remaining = max(0, 18 - age) * 4
        else:
            remaining = max(0, 16 - age) * 3
        predicted = height_cm + remaining
        confidence = Confidence.MODERATE if age > 12 else Confidence.LOW
        method = "Growth velocity projection"

    return PredictedAdultHeight(
        height_cm=round_int(predicted),
        range=HeightRange(
            min_cm=round_half_up(predicted - PREDICTION_MARGIN_CM, 1),
            max_cm=round_half_up(predicted + PREDICTION_MARGIN_CM, 1),
        ),
        confidence=confidence,
        method=method,
    )


def _base_calories(age: int, gender: Gender) -> int:
    if age <= 3:
        return 1000
    if age <= 8:
        return 1200 + (age - 3) * 200
    if age <= 13:
        return 1800 + (age - 8) * 100
    if gender is Gender.MALE:
        return 2200 + (age - 13) * 200
    return 2000 + (age - 13) * 100


def nutrition_guidance(age: int, gender: Gender) -> NutritionGuidance:
    """Daily calories by age band, split 15% protein / 50% carbs / 30% fat."""
    base = _base_calories(age, gender)
    if age <= 8:
        water_cups = 5
    elif age <= 13:
        water_cups = 7
    else:
        water_cups = 8
    return NutritionGuidance(
        daily_calories=DailyCalories(
            sedentary=round_int(base * 0.9),
            moderately_active=base,
            active=round_int(base * 1.2),
        ),
        macronutrients=KidsMacros(
            protein=KidsMacro(grams=round_int(base * 0.15 / 4), percentage=15),
            carbohydrates=KidsMacro(grams=round_int(base * 0.50 / 4), percentage=50),
            fats=KidsMacro(grams=round_int(base * 0.30 / 9), percentage=30),
        ),
        daily_water_cups=water_cups,
    )


def activity_guidance(age: int) -> ActivityGuidance:
    daily = 180 if age <= 5 else 60
    screen_hours = 1 if age <= 5 else 2 if age <= 12 else 3
    if age <= 5:
        sleep = "10-14 hours"
    elif age <= 13:
        sleep = "9-11 hours"
    else:
        sleep = "8-10 hours"
    return ActivityGuidance(
        daily_minutes=daily,
        moderate_minutes=round_int(daily * 0.7),
        vigorous_minutes=round_int(daily * 0.3),
        strength_days_per_week=0 if age <= 5 else 3,
        max_screen_hours=screen_hours,
        screen_time_tips=list(SCREEN_TIME_TIPS),
        sleep_hours=sleep,
    )


def growth_phase(age: int) -> GrowthPhase:
    if age <= 5:
        return GrowthPhase.EARLY_CHILDHOOD
    if age <= 10:
        return GrowthPhase.MIDDLE_CHILDHOOD
    if age <= 13:
        return GrowthPhase.PRE_ADOLESCENT
    return GrowthPhase.ADOLESCENT


def _comparison_to_average(percentile: float) -> str:
    if percentile < 50:
        return f"{round_int(50 - percentile)} percentile points below average"
    if percentile > 50:
        return f"{round_int(percentile - 50)} percentile points above average"
    return "At the average"


class KidsBMIService(ICalculator[KidsBMIInput, KidsBMIResult]):
    """
    BMI-for-age for children aged 2-19.

    Adult BMI cut-offs do not apply to children; the BMI is ranked
    against age- and sex-specific reference percentiles instead:
        < 5th        underweight
        5th - 85th   healthy weight
        85th - 95th  overweight
        >= 95th      obese

    References:
        CDC BMI-for-age growth charts (2000)
    """

    def calculate(self, data: KidsBMIInput) -> KidsBMIResult:
        months = data.age_in_months
        bmi = calculate_bmi(data.weight, data.height)
        percentile = round_half_up(bmi_percentile(bmi, months, data.gender), 1)
        category = KIDS_BMI_CATEGORIES.classify(percentile)
        description, percentile_range, recommendations = _CATEGORY_INFO[category]

        bands = percentile_bands(months, data.gender)
        chart = GrowthChart(
            percentile=percentile,
            z_score=round_half_up(percentile_z_score(percentile), 2),
            category=KidsCategoryInfo(
                category=category,
                label=category.label(),
                description=description,
                percentile_range=percentile_range,
                recommendations=list(recommendations),
            ),
            comparison_to_average=_comparison_to_average(percentile),
            bands=PercentileBands(
                **{f"p{k}": round_half_up(b, 1) for k, b in zip(PERCENTILE_KEYS, bands)}
            ),
        )

        nutrition = nutrition_guidance(data.age_years, data.gender)
        activity = activity_guidance(data.age_years)
        phase = growth_phase(data.age_years)
        pattern, tips = _DEVELOPMENT[phase]

        warnings = []
        if percentile >= 95 or percentile < 5:
            warnings.append(
                KidsWarning(
                    message="BMI is outside the healthy range for age and sex",
                    recommendations=[
                        "Schedule an appointment with your pediatrician",
                        "Discuss growth patterns and family history",
                        "Consider a nutritional assessment if recommended",
                    ],
                )
            )

        insights = [
            f"Your child is in the {category.label().lower()} range "
            f"({round_int(percentile)}th percentile) for their age and sex.",
            f"At age {data.age_years}, your child needs about "
            f"{nutrition.daily_calories.moderately_active} calories per day for healthy growth.",
            f"Children this age should get at least {activity.daily_minutes} "
            f"minutes of physical activity daily.",
        ]

        logger.debug(
            "kids_bmi.calculated",
            age_months=months,
            percentile=percentile,
            category=category.value,
        )

        return KidsBMIResult(
            bmi=round_half_up(bmi, 1),
            age_in_months=months,
            growth_chart=chart,
            predicted_adult_height=predict_adult_height(
                data.height,
                data.age_years,
                data.gender,
                data.mother_height,
                data.father_height,
            ),
            nutrition=nutrition,
            activity=activity,
            development=DevelopmentalContext(
                growth_phase=phase,
                typical_growth_pattern=pattern,
                parenting_tips=list(tips),
            ),
            insights=insights,
            warnings=warnings,
        )
