"""HydrationService - daily fluid needs with adjustments."""

from __future__ import annotations

from typing import List, Optional

import structlog

from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up, round_int
from ..shared.units import liters_to_fl_oz
from ..shared.value_objects import Gender
from .value_objects import (
    Climate,
    FluidAdjustments,
    HealthCondition,
    HydrationActivityLevel,
    HydrationInput,
    HydrationResult,
    HydrationTip,
    IntakeComparison,
    IntakeStatus,
    TimedRecommendation,
    WarningSigns,
)

logger = structlog.get_logger(__name__)

WAKING_HOURS = 16
FL_OZ_PER_CUP = 8
PREGNANCY_EXTRA_LITERS = 0.3
BREASTFEEDING_EXTRA_LITERS = 0.7
ALCOHOL_LITERS_PER_DRINK = 0.1
ADEQUATE_INTAKE_TOLERANCE = 0.10

WARNING_SIGNS = WarningSigns(
    dehydration=[
        "Dark yellow urine or decreased urination",
        "Thirst, dry mouth, or sticky saliva",
        "Fatigue, dizziness, or headache",
        "Dry skin that tents when pinched",
        "Rapid heartbeat or breathing",
    ],
    overhydration=[
        "Clear, colorless urine with frequent urination",
        "Headache, nausea, or vomiting",
        "Confusion or disorientation",
        "Muscle weakness or cramps",
        "Swelling in hands, feet, or lips",
    ],
)


def holliday_segar(weight_kg: float) -> float:
    """Holliday-Segar maintenance fluid in liters.

    First 10 kg: 100 ml/kg
    Next 10 kg:  50 ml/kg
    Above 20 kg: 20 ml/kg
    """
    if weight_kg <= 10:
        return weight_kg * 100 / 1000
    if weight_kg <= 20:
        return (1000 + (weight_kg - 10) * 50) / 1000
    return (1500 + (weight_kg - 20) * 20) / 1000


def _age_gender_ml_per_kg(age: int, gender: Gender) -> float:
    if gender is Gender.MALE:
        rates = (40, 35, 30)
    else:
        rates = (35, 31, 27)
    if age < 30:
        return rates[0]
    if age < 55:
        return rates[1]
    return rates[2]


def baseline_need(weight_kg: float, age: int, gender: Gender) -> float:
    """
    Weighted blend of three baseline estimates, in liters.

    Formula:
        0.4 × (35 ml/kg) + 0.3 × Holliday-Segar + 0.3 × (age/gender ml/kg)
    """
    weight_based = weight_kg * 35 / 1000
    age_gender = weight_kg * _age_gender_ml_per_kg(age, gender) / 1000
    return weight_based * 0.4 + holliday_segar(weight_kg) * 0.3 + age_gender * 0.3


def exercise_adjustment(data: HydrationInput) -> float:
    if data.exercise_minutes == 0:
        return 0.0
    if data.weight > 70:
        weight_factor = 1.1
    elif data.weight < 60:
        weight_factor = 0.9
    else:
        weight_factor = 1.0
    hours = data.exercise_minutes / 60
    return (
        data.exercise_intensity.liters_per_hour()
        * hours
        * data.sweat_rate.multiplier()
        * weight_factor
    )


def caffeine_adjustment(caffeine_mg: float) -> float:
    if caffeine_mg > 400:
        return 0.2
    if caffeine_mg > 200:
        return 0.1
    return 0.0


def _recommendations(total: float, exercise_minutes: float) -> List[TimedRecommendation]:
    recommendations = [
        TimedRecommendation(
            timing="Upon waking",
            amount="500-750 ml",
            reason="Rehydrate after overnight fluid loss",
        )
    ]
    if exercise_minutes > 0:
        recommendations.append(
            TimedRecommendation(
                timing="2-3 hours before exercise",
                amount="400-600 ml",
                reason="Start activity well hydrated",
            )
        )
        recommendations.append(
            TimedRecommendation(
                timing="15-20 minutes before exercise",
                amount="200-300 ml",
                reason="Top off fluid levels without discomfort",
            )
        )
    if exercise_minutes > 30:
        recommendations.append(
            TimedRecommendation(
                timing="Every 15-20 minutes during exercise",
                amount="150-250 ml",
                reason="Replace fluid losses and maintain performance",
            )
        )
    if exercise_minutes > 0:
        recommendations.append(
            TimedRecommendation(
                timing="Within 2 hours after exercise",
                amount="150% of fluid lost",
                reason="Restore hydration and aid recovery",
            )
        )
    recommendations.append(
        TimedRecommendation(
            timing="Throughout the day",
            amount=f"{round_int(total * 1000 / WAKING_HOURS)} ml per hour",
            reason="Keep hydration steady without overloading the kidneys",
        )
    )
    recommendations.append(
        TimedRecommendation(
            timing="30 minutes before meals",
            amount="200-300 ml",
            reason="Aid digestion and help control appetite",
        )
    )
    return recommendations


def _tips(data: HydrationInput) -> List[HydrationTip]:
    tips = [
        HydrationTip(
            category="Daily Habits",
            tip="Start each day with a glass of water and keep a water bottle with you.",
        ),
        HydrationTip(
            category="Monitoring",
            tip="Pale yellow urine indicates good hydration; dark yellow suggests dehydration.",
        ),
    ]
    if data.activity_level in (HydrationActivityLevel.ACTIVE, HydrationActivityLevel.VERY_ACTIVE):
        tips.append(
            HydrationTip(
                category="Exercise Hydration",
                tip="Weigh yourself before and after exercise and drink 150% of the weight lost.",
            )
        )
    if data.climate in (Climate.HOT, Climate.VERY_HOT):
        tips.append(
            HydrationTip(
                category="Hot Weather",
                tip="Drink cool fluids and add electrolytes during prolonged heat exposure.",
            )
        )
    if HealthCondition.DIABETES in data.health_conditions:
        tips.append(
            HydrationTip(
                category="Diabetes Management",
                tip="Dehydration can affect glucose control; monitor blood sugar closely.",
            )
        )
    if data.pregnant:
        tips.append(
            HydrationTip(
                category="Pregnancy",
                tip="Increase fluids gradually and choose water over sugary drinks.",
            )
        )
    if data.breastfeeding:
        tips.append(
            HydrationTip(
                category="Breastfeeding",
                tip="Drink a glass of water each time you nurse.",
            )
        )
    tips.append(
        HydrationTip(
            category="Food Sources",
            tip="Watermelon, cucumber, oranges, lettuce and soups all contribute to hydration.",
        )
    )
    return tips


def _insights(data: HydrationInput) -> List[HydrationTip]:
    insights = []
    if data.weight > 90:
        insights.append(
            HydrationTip(
                category="Body Size",
                tip="A larger body needs more fluid; your total accounts for this.",
            )
        )
    if data.age > 65:
        insights.append(
            HydrationTip(
                category="Age Factor",
                tip="Thirst sensation decreases with age. Drink on a schedule rather than by thirst.",
            )
        )
    if data.exercise_minutes > 60:
        insights.append(
            HydrationTip(
                category="Exercise Duration",
                tip="Sessions over an hour call for electrolyte replacement.",
            )
        )
    if data.caffeine_mg > 400:
        insights.append(
            HydrationTip(
                category="Caffeine Intake",
                tip="High caffeine intake has a mild diuretic effect; your needs are adjusted upward.",
            )
        )
    return insights


def compare_intake(current: float, recommended: float) -> IntakeComparison:
    """Adequate within 10% of the recommendation, otherwise low or high."""
    difference = current - recommended
    if abs(difference) / recommended <= ADEQUATE_INTAKE_TOLERANCE:
        status = IntakeStatus.ADEQUATE
    elif difference < 0:
        status = IntakeStatus.LOW
    else:
        status = IntakeStatus.HIGH
    return IntakeComparison(
        current_liters=round_half_up(current, 2),
        recommended_liters=round_half_up(recommended, 2),
        difference_liters=round_half_up(difference, 2),
        status=status,
    )


class HydrationService(ICalculator[HydrationInput, HydrationResult]):
    """Estimate daily fluid needs.

    total = baseline + exercise + climate + conditions
            + pregnancy/breastfeeding + caffeine + alcohol
    """

    def calculate(self, data: HydrationInput) -> HydrationResult:
        baseline = baseline_need(data.weight, data.age, data.gender)

        exercise = exercise_adjustment(data)
        climate = baseline * data.climate.baseline_fraction()
        conditions = baseline * sum(
            c.baseline_fraction() for c in dict.fromkeys(data.health_conditions)
        )
        maternal = 0.0
        if data.pregnant:
            maternal += PREGNANCY_EXTRA_LITERS
        if data.breastfeeding:
            maternal += BREASTFEEDING_EXTRA_LITERS
        caffeine = caffeine_adjustment(data.caffeine_mg)
        alcohol = data.alcohol_drinks * ALCOHOL_LITERS_PER_DRINK

        total = baseline + exercise + climate + conditions + maternal + caffeine + alcohol
        fl_oz = liters_to_fl_oz(total)

        comparison: Optional[IntakeComparison] = None
        if data.current_intake_liters is not None:
            comparison = compare_intake(data.current_intake_liters, total)

        logger.debug(
            "hydration.calculated",
            baseline=round_half_up(baseline, 2),
            total=round_half_up(total, 2),
        )

        return HydrationResult(
            baseline_liters=round_half_up(baseline, 2),
            adjustments=FluidAdjustments(
                exercise=round_half_up(exercise, 2),
                climate=round_half_up(climate, 2),
                health_conditions=round_half_up(conditions, 2),
                pregnancy_breastfeeding=round_half_up(maternal, 2),
                caffeine=round_half_up(caffeine, 2),
                alcohol=round_half_up(alcohol, 2),
            ),
            total_liters=round_half_up(total, 2),
            total_fl_oz=round_int(fl_oz),
            total_cups=round_half_up(fl_oz / FL_OZ_PER_CUP, 1),
            hourly_ml=round_int(total * 1000 / WAKING_HOURS),
            activity_description=data.activity_level.description(),
            recommendations=_recommendations(total, data.exercise_minutes),
            tips=_tips(data),
            insights=_insights(data),
            warning_signs=WARNING_SIGNS,
            intake_comparison=comparison,
        )
