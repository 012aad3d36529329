"""Advisory content for energy results: factors, insights, tips and warnings."""

from __future__ import annotations

from typing import List, Optional

from ..shared.activity import ActivityLevel
from ..shared.rounding import round_int
from ..shared.value_objects import Gender
from .bmr_service import mifflin_st_jeor
from .results import (
    ActivityRecommendation,
    BMRFactor,
    EnergyWarning,
    MetabolicFactor,
    MetabolicInsights,
    NutritionTip,
    Recommendation,
)
from .value_objects import (
    FactorStatus,
    Goal,
    MetabolicComparison,
    Priority,
    WarningLevel,
)

# Reference bodies for the age/sex average BMR
_REFERENCE_BODY = {
    Gender.MALE: (70.0, 175.0),
    Gender.FEMALE: (60.0, 165.0),
}

# Lean threshold (% body fat) counted as a muscle-mass advantage
_LEAN_BODY_FAT = {Gender.MALE: 15.0, Gender.FEMALE: 25.0}


def average_bmr(age: int, gender: Gender) -> float:
    weight, height = _REFERENCE_BODY[gender]
    return mifflin_st_jeor(weight, height, age, gender)


def metabolic_insights(
    age: int,
    gender: Gender,
    bmr: int,
    activity_level: ActivityLevel,
    body_fat_percentage: Optional[float] = None,
) -> MetabolicInsights:
    """Compare BMR with the age/sex average and derive a metabolic age."""
    avg = average_bmr(age, gender)
    metabolic_age = round_int(age / (bmr / avg))

    if bmr > avg * 1.1:
        comparison = MetabolicComparison.ABOVE_AVERAGE
    elif bmr < avg * 0.9:
        comparison = MetabolicComparison.BELOW_AVERAGE
    else:
        comparison = MetabolicComparison.AVERAGE

    lean = (
        body_fat_percentage is not None
        and body_fat_percentage < _LEAN_BODY_FAT[gender]
    )
    if activity_level in (ActivityLevel.VERY_ACTIVE, ActivityLevel.EXTREMELY_ACTIVE):
        activity_status = FactorStatus.POSITIVE
    elif activity_level is ActivityLevel.SEDENTARY:
        activity_status = FactorStatus.NEGATIVE
    else:
        activity_status = FactorStatus.NEUTRAL

    if age < 30:
        age_status = FactorStatus.POSITIVE
    elif age > 50:
        age_status = FactorStatus.NEGATIVE
    else:
        age_status = FactorStatus.NEUTRAL

    return MetabolicInsights(
        average_bmr=round_int(avg),
        metabolic_age=metabolic_age,
        comparison=comparison,
        factors=[
            MetabolicFactor(
                factor="Muscle Mass",
                status=FactorStatus.POSITIVE if lean else FactorStatus.NEUTRAL,
                description="More muscle mass increases metabolic rate",
            ),
            MetabolicFactor(
                factor="Activity Level",
                status=activity_status,
                description="Regular exercise boosts metabolism",
            ),
            MetabolicFactor(
                factor="Age Factor",
                status=age_status,
                description="Metabolism naturally slows with age",
            ),
        ],
        recommendations=[
            Recommendation(
                category="Strength Training",
                recommendation="Include resistance training 2-3x per week to build muscle mass",
                priority=Priority.HIGH,
            ),
            Recommendation(
                category="Protein Intake",
                recommendation="Consume adequate protein to support muscle maintenance",
                priority=Priority.HIGH,
            ),
            Recommendation(
                category="Sleep Quality",
                recommendation="Aim for 7-9 hours of quality sleep to optimize metabolism",
                priority=Priority.MEDIUM,
            ),
        ],
    )


def bmr_factors(
    age: int, gender: Gender, weight: float, height: float, activity_level: ActivityLevel
) -> List[BMRFactor]:
    return [
        BMRFactor(
            name="Age",
            value=f"{age} years",
            impact="BMR decreases ~1-2% per decade after age 30",
        ),
        BMRFactor(
            name="Gender",
            value=gender.value.title(),
            impact="Males typically have 10-15% higher BMR than females",
        ),
        BMRFactor(
            name="Body Weight",
            value=f"{round_int(weight)} kg",
            impact="Larger bodies require more energy to maintain basic functions",
        ),
        BMRFactor(
            name="Height",
            value=f"{round_int(height)} cm",
            impact="Taller individuals have larger organs requiring more energy",
        ),
        BMRFactor(
            name="Activity Level",
            value=activity_level.label(),
            impact="Regular exercise increases overall metabolic rate",
        ),
    ]


def activity_recommendations(calorie_gap: float) -> List[ActivityRecommendation]:
    """Suggested training mix by sign of (goal calories - TDEE)."""
    if calorie_gap < 0:
        plan = [
            ("Brisk Walking", "45 minutes", "5 days/week", 300),
            ("Strength Training", "45 minutes", "3 days/week", 250),
            ("High-Intensity Interval Training", "20 minutes", "3 days/week", 400),
        ]
    elif calorie_gap > 0:
        plan = [
            ("Strength Training", "60 minutes", "4 days/week", 300),
            ("Light Cardio", "30 minutes", "2 days/week", 200),
        ]
    else:
        plan = [
            ("Mixed Cardio", "30 minutes", "4 days/week", 250),
            ("Strength Training", "45 minutes", "2 days/week", 200),
        ]
    return [
        ActivityRecommendation(
            type=kind, duration=duration, frequency=frequency, calories_burned=burned
        )
        for kind, duration, frequency, burned in plan
    ]


def nutrition_tips(goal: Goal) -> List[NutritionTip]:
    tips = [
        NutritionTip(
            category="Meal Timing",
            tip="Eat regular meals every 3-4 hours to keep energy levels stable",
            importance=Priority.MEDIUM,
        ),
        NutritionTip(
            category="Hydration",
            tip="Drink plenty of water; dehydration can slow metabolism by 2-3%",
            importance=Priority.HIGH,
        ),
        NutritionTip(
            category="Protein",
            tip="Include protein in every meal to support muscle maintenance",
            importance=Priority.HIGH,
        ),
        NutritionTip(
            category="Fiber",
            tip="Choose high-fiber foods; they require more energy to digest",
            importance=Priority.MEDIUM,
        ),
    ]
    if goal is Goal.LOSE_WEIGHT:
        tips.append(
            NutritionTip(
                category="Calorie Cycling",
                tip="Consider 1-2 higher calorie days per week to limit metabolic adaptation",
                importance=Priority.MEDIUM,
            )
        )
    elif goal is Goal.GAIN_MUSCLE:
        tips.append(
            NutritionTip(
                category="Post-Workout",
                tip="Have protein and carbs within 30 minutes after strength training",
                importance=Priority.HIGH,
            )
        )
    elif goal is Goal.GAIN_WEIGHT:
        tips.append(
            NutritionTip(
                category="Energy Density",
                tip="Add calorie-dense whole foods such as nuts, olive oil and dried fruit",
                importance=Priority.MEDIUM,
            )
        )
    return tips


def energy_warnings(goal_calories: int, bmr: int, tdee: int, age: int) -> List[EnergyWarning]:
    """Advisory warnings; never blocks a result."""
    warnings: List[EnergyWarning] = []

    if bmr <= 0:
        warnings.append(
            EnergyWarning(
                level=WarningLevel.CRITICAL,
                message=(
                    "These measurements give an implausible BMR, so the calorie "
                    "targets below are not meaningful"
                ),
                recommendations=[
                    "Check the entered age, weight and height",
                    "Ask a healthcare provider for a measured resting metabolic rate",
                ],
            )
        )

    if goal_calories < bmr * 0.8:
        warnings.append(
            EnergyWarning(
                level=WarningLevel.CRITICAL,
                message=(
                    "Your target calories are significantly below your BMR, which "
                    "may slow metabolism and cause muscle loss"
                ),
                recommendations=[
                    "Consider a more moderate calorie deficit",
                    "Increase physical activity instead of restricting calories severely",
                    "Consult a healthcare provider or registered dietitian",
                ],
            )
        )

    if goal_calories > tdee + 1000:
        warnings.append(
            EnergyWarning(
                level=WarningLevel.WARNING,
                message="A very large calorie surplus may lead to excessive fat gain",
                recommendations=[
                    "Consider a more moderate surplus (300-500 calories)",
                    "Focus on strength training to promote muscle growth",
                    "Monitor body composition changes regularly",
                ],
            )
        )

    if age > 65:
        warnings.append(
            EnergyWarning(
                level=WarningLevel.CAUTION,
                message="Metabolic rate estimates may be less accurate for older adults",
                recommendations=[
                    "Monitor your response to calorie targets carefully",
                    "Consider consulting a healthcare provider",
                    "Focus on maintaining muscle mass through strength training",
                ],
            )
        )

    return warnings
