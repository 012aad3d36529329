"""Energy calculator results."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..shared.activity import ActivityLevel
from ..shared.value_objects import CalculatorResult
from .value_objects import (
    BMRFormula,
    FactorStatus,
    Goal,
    MetabolicComparison,
    Priority,
    Reliability,
    WarningLevel,
)


class MacroNutrient(CalculatorResult):
    grams: int = Field(..., ge=0)
    calories: int = Field(..., ge=0)
    percentage: int = Field(..., description="Share of total calories (%)")


class MacroBreakdown(CalculatorResult):
    """Protein/carbs/fat split for one calorie target."""

    calories: int
    protein: MacroNutrient
    carbs: MacroNutrient
    fat: MacroNutrient
    fiber_g: int = Field(..., description="14 g per 1000 kcal")


class MacroBreakdowns(CalculatorResult):
    maintenance: MacroBreakdown
    goal: MacroBreakdown


class WeightLossTargets(CalculatorResult):
    conservative: int = Field(..., description="0.25 kg/week")
    moderate: int = Field(..., description="0.5 kg/week")
    aggressive: int = Field(..., description="1 kg/week")


class WeightGainTargets(CalculatorResult):
    lean: int = Field(..., description="0.25 kg/week")
    moderate: int = Field(..., description="0.5 kg/week")
    bulking: int = Field(..., description="1 kg/week")


class CalorieGoals(CalculatorResult):
    maintenance: int
    weight_loss: WeightLossTargets
    weight_gain: WeightGainTargets
    custom_goal: int = Field(..., description="Target for the selected goal and rate")


class BMRFactor(CalculatorResult):
    name: str
    value: str
    impact: str


class MetabolicFactor(CalculatorResult):
    factor: str
    status: FactorStatus
    description: str


class Recommendation(CalculatorResult):
    category: str
    recommendation: str
    priority: Priority


class MetabolicInsights(CalculatorResult):
    average_bmr: int
    metabolic_age: int
    comparison: MetabolicComparison
    factors: List[MetabolicFactor]
    recommendations: List[Recommendation]


class ActivityRecommendation(CalculatorResult):
    type: str
    duration: str
    frequency: str
    calories_burned: int


class NutritionTip(CalculatorResult):
    category: str
    tip: str
    importance: Priority


class EnergyWarning(CalculatorResult):
    level: WarningLevel
    message: str
    recommendations: List[str]


class EnergyResult(CalculatorResult):
    """BMR/TDEE result with goals, macros and advisory data."""

    formula: BMRFormula
    method_description: str
    reliability: Reliability
    bmr: int
    tdee: int
    factors: List[BMRFactor]
    calorie_goals: CalorieGoals
    macros: MacroBreakdowns
    metabolic_insights: Optional[MetabolicInsights] = None
    activity_recommendations: List[ActivityRecommendation]
    nutrition_tips: List[NutritionTip]
    warnings: List[EnergyWarning]


class ActivityInfo(CalculatorResult):
    level: ActivityLevel
    label: str
    description: str
    examples: List[str]


class CalorieNeedsResult(CalculatorResult):
    """Everyday calorie needs with a minimum-safe floor."""

    bmr: int
    tdee: int
    maintenance_calories: int
    goal: Goal
    goal_calories: int
    minimum_calories: int
    floor_applied: bool
    weekly_weight_change_kg: float = Field(
        ..., description="Expected change per week, negative for loss"
    )
    macros: MacroBreakdown
    activity: ActivityInfo
    nutrition_tips: List[NutritionTip]
    warnings: List[EnergyWarning]
