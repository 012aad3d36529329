"""Energy value objects - goals, formulas and health factors."""

from __future__ import annotations

from enum import Enum

KCAL_PER_KG_FAT = 7700


class Goal(str, Enum):
    """Body composition goal driving calorie target and macro split."""

    MAINTAIN = "maintain"
    LOSE_WEIGHT = "lose_weight"
    GAIN_WEIGHT = "gain_weight"
    GAIN_MUSCLE = "gain_muscle"

    def protein_multiplier(self) -> float:
        """Protein target in g per kg of body weight.

        Example:
            >>> Goal.GAIN_MUSCLE.protein_multiplier()
            2.2
        """
        multipliers = {
            Goal.MAINTAIN: 1.8,
            Goal.LOSE_WEIGHT: 2.0,
            Goal.GAIN_WEIGHT: 1.8,
            Goal.GAIN_MUSCLE: 2.2,
        }
        return multipliers[self]

    def fat_percentage(self) -> float:
        """Fraction of calories from fat."""
        return 0.25 if self is Goal.GAIN_MUSCLE else 0.30

    def calorie_direction(self) -> float:
        """Signed share of the weekly-rate adjustment applied to TDEE."""
        directions = {
            Goal.MAINTAIN: 0.0,
            Goal.LOSE_WEIGHT: -1.0,
            Goal.GAIN_WEIGHT: 1.0,
            Goal.GAIN_MUSCLE: 0.7,  # lean bulk: smaller surplus
        }
        return directions[self]


class CalorieGoal(str, Enum):
    """Goal vocabulary of the calorie-needs calculator."""

    LOSE_WEIGHT = "lose_weight"
    MAINTAIN_WEIGHT = "maintain_weight"
    GAIN_WEIGHT = "gain_weight"

    def to_goal(self) -> Goal:
        mapping = {
            CalorieGoal.LOSE_WEIGHT: Goal.LOSE_WEIGHT,
            CalorieGoal.MAINTAIN_WEIGHT: Goal.MAINTAIN,
            CalorieGoal.GAIN_WEIGHT: Goal.GAIN_WEIGHT,
        }
        return mapping[self]


class Pace(str, Enum):
    """Weight change pace for the calorie-needs calculator."""

    SLOW = "slow"
    MODERATE = "moderate"
    FAST = "fast"

    def kg_per_week(self) -> float:
        rates = {Pace.SLOW: 0.25, Pace.MODERATE: 0.5, Pace.FAST: 0.75}
        return rates[self]


class BMRFormula(str, Enum):
    MIFFLIN_ST_JEOR = "mifflin_st_jeor"
    HARRIS_BENEDICT = "harris_benedict"
    KATCH_MCARDLE = "katch_mcardle"


class ThyroidCondition(str, Enum):
    NONE = "none"
    HYPOTHYROID = "hypothyroid"
    HYPERTHYROID = "hyperthyroid"

    def multiplier(self) -> float:
        multipliers = {
            ThyroidCondition.NONE: 1.0,
            ThyroidCondition.HYPOTHYROID: 0.85,
            ThyroidCondition.HYPERTHYROID: 1.20,
        }
        return multipliers[self]


class DiabetesType(str, Enum):
    NONE = "none"
    TYPE1 = "type1"
    TYPE2 = "type2"


class SmokingStatus(str, Enum):
    NEVER = "never"
    FORMER = "former"
    CURRENT = "current"


class Reliability(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class WarningLevel(str, Enum):
    CAUTION = "caution"
    WARNING = "warning"
    CRITICAL = "critical"


class MetabolicComparison(str, Enum):
    ABOVE_AVERAGE = "above_average"
    AVERAGE = "average"
    BELOW_AVERAGE = "below_average"


class FactorStatus(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
