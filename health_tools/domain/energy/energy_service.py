"""EnergyService - BMR, TDEE, calorie goals and macros.

One service backs both the detailed BMR calculator (``calculate``) and
the everyday calorie-needs calculator (``calculate_calorie_needs``).
"""

from __future__ import annotations

from typing import Optional

import structlog

from ..shared.activity import ActivityLevel
from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up, round_int
from ..shared.value_objects import Gender
from . import insights
from .bmr_service import BMRService, mifflin_st_jeor
from .inputs import CalorieNeedsInput, EnergyInputBase, KatchMcArdleInput
from .macro_service import MacroService
from .results import (
    ActivityInfo,
    CalorieGoals,
    CalorieNeedsResult,
    EnergyResult,
    MacroBreakdowns,
    WeightGainTargets,
    WeightLossTargets,
)
from .value_objects import KCAL_PER_KG_FAT, BMRFormula, Goal

logger = structlog.get_logger(__name__)

# Minimum safe daily intake (kcal) for unsupervised diets
MINIMUM_CALORIES = {Gender.FEMALE: 1200, Gender.MALE: 1500}


def daily_adjustment(kg_per_week: float) -> float:
    """Daily kcal deficit/surplus for a weekly weight change (7700 kcal/kg)."""
    return kg_per_week * KCAL_PER_KG_FAT / 7


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """TDEE = BMR × PAL multiplier."""
    return bmr * activity_level.pal_multiplier()


def calorie_goals(tdee: float, goal: Goal, weight_change_rate: float) -> CalorieGoals:
    """Fixed-rate targets plus the custom target for ``goal``."""
    return CalorieGoals(
        maintenance=round_int(tdee),
        weight_loss=WeightLossTargets(
            conservative=round_int(tdee - daily_adjustment(0.25)),
            moderate=round_int(tdee - daily_adjustment(0.5)),
            aggressive=round_int(tdee - daily_adjustment(1.0)),
        ),
        weight_gain=WeightGainTargets(
            lean=round_int(tdee + daily_adjustment(0.25)),
            moderate=round_int(tdee + daily_adjustment(0.5)),
            bulking=round_int(tdee + daily_adjustment(1.0)),
        ),
        custom_goal=round_int(
            tdee + goal.calorie_direction() * daily_adjustment(weight_change_rate)
        ),
    )


class EnergyService(ICalculator[EnergyInputBase, EnergyResult]):
    """Energy expenditure calculator.

    Pipeline:
        1. BMR with the selected formula, then health adjustments
        2. TDEE = BMR × activity multiplier
        3. Calorie goals from TDEE ± rate × 7700 / 7
        4. Macro split for maintenance and goal calories
        5. Advisory insights and warnings
    """

    def __init__(
        self,
        bmr_service: Optional[BMRService] = None,
        macro_service: Optional[MacroService] = None,
    ) -> None:
        self._bmr = bmr_service or BMRService()
        self._macros = macro_service or MacroService()

    def calculate(self, data: EnergyInputBase) -> EnergyResult:
        """Calculate BMR, TDEE, goals and macros for one person.

        Example:
            >>> result = EnergyService().calculate(MifflinStJeorInput(
            ...     age=30, gender="male", weight=80, height=180,
            ...     activity_level="moderately_active",
            ... ))
            >>> result.bmr, result.tdee
            (1780, 2759)
        """
        formula = BMRFormula(data.formula)
        bmr_value = self._bmr.calculate(data)
        tdee_value = calculate_tdee(bmr_value, data.activity_level)
        bmr = round_int(bmr_value)
        tdee = round_int(tdee_value)

        goals = calorie_goals(tdee_value, data.goal, data.weight_change_rate)
        macros = MacroBreakdowns(
            maintenance=self._macros.calculate(goals.maintenance, data.weight, data.goal),
            goal=self._macros.calculate(goals.custom_goal, data.weight, data.goal),
        )

        body_fat = (
            data.body_fat_percentage if isinstance(data, KatchMcArdleInput) else None
        )
        metabolic = None
        if data.include_metabolic_age and bmr > 0:
            metabolic = insights.metabolic_insights(
                data.age, data.gender, bmr, data.activity_level, body_fat
            )

        method_description, reliability = self._bmr.describe(formula)

        logger.debug(
            "energy.calculated",
            formula=formula.value,
            bmr=bmr,
            tdee=tdee,
            goal=data.goal.value,
        )

        return EnergyResult(
            formula=formula,
            method_description=method_description,
            reliability=reliability,
            bmr=bmr,
            tdee=tdee,
            factors=insights.bmr_factors(
                data.age, data.gender, data.weight, data.height, data.activity_level
            ),
            calorie_goals=goals,
            macros=macros,
            metabolic_insights=metabolic,
            activity_recommendations=insights.activity_recommendations(
                goals.custom_goal - tdee_value
            ),
            nutrition_tips=insights.nutrition_tips(data.goal),
            warnings=insights.energy_warnings(goals.custom_goal, bmr, tdee, data.age),
        )

    def calculate_calorie_needs(self, data: CalorieNeedsInput) -> CalorieNeedsResult:
        """Everyday calorie needs with the minimum-safe floor applied.

        Always uses Mifflin-St Jeor without health adjustments.
        """
        goal = data.goal.to_goal()
        bmr_value = mifflin_st_jeor(data.weight, data.height, data.age, data.gender)
        tdee_value = calculate_tdee(bmr_value, data.activity_level)
        maintenance = round_int(tdee_value)

        kg_per_week = data.pace.kg_per_week() * goal.calorie_direction()
        target = round_int(tdee_value + daily_adjustment(kg_per_week))

        minimum = MINIMUM_CALORIES[data.gender]
        floor_applied = target < minimum
        goal_calories = max(target, minimum)

        # Report the change the floored target actually delivers
        weekly_change = (goal_calories - tdee_value) * 7 / KCAL_PER_KG_FAT
        if goal is Goal.MAINTAIN:
            weekly_change = 0.0

        logger.debug(
            "calorie_needs.calculated",
            tdee=maintenance,
            goal_calories=goal_calories,
            floor_applied=floor_applied,
        )

        bmr = round_int(bmr_value)
        return CalorieNeedsResult(
            bmr=bmr,
            tdee=maintenance,
            maintenance_calories=maintenance,
            goal=goal,
            goal_calories=goal_calories,
            minimum_calories=minimum,
            floor_applied=floor_applied,
            weekly_weight_change_kg=round_half_up(weekly_change, 2),
            macros=self._macros.calculate(goal_calories, data.weight, goal),
            activity=ActivityInfo(
                level=data.activity_level,
                label=data.activity_level.label(),
                description=data.activity_level.description(),
                examples=data.activity_level.examples(),
            ),
            nutrition_tips=insights.nutrition_tips(goal),
            warnings=insights.energy_warnings(goal_calories, bmr, maintenance, data.age),
        )
