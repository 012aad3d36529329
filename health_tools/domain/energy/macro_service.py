"""MacroService - Macronutrient distribution calculation."""

from __future__ import annotations

from ..shared.rounding import round_int
from .results import MacroBreakdown, MacroNutrient
from .value_objects import Goal

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9
FIBER_G_PER_1000_KCAL = 14


class MacroService:
    """Calculate macronutrient distribution based on goal.

    Distributes daily calories into protein, carbohydrates and fat:

        - Protein: goal-dependent g/kg of body weight
          (2.2 gain muscle, 2.0 lose weight, 1.8 otherwise)
        - Fat: 25% of calories when gaining muscle, 30% otherwise
        - Carbs: remaining calories, never negative
        - Fiber: 14 g per 1000 kcal

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def calculate(self, calories: int, weight: float, goal: Goal) -> MacroBreakdown:
        """Calculate macro distribution.

        Args:
            calories: Daily calorie target (whole kcal)
            weight: Body weight in kg
            goal: Body composition goal

        Returns:
            MacroBreakdown: grams, kcal and share of each macro

        Example:
            >>> split = MacroService().calculate(2000, 80.0, Goal.LOSE_WEIGHT)
            >>> split.protein.grams, split.fat.grams, split.carbs.grams
            (160, 67, 190)
        """
        # Targets below zero (implausible inputs) split an empty budget
        budget = max(0, calories)

        # 1. Protein (g/kg)
        protein_g = round_int(weight * goal.protein_multiplier())
        protein_cal = protein_g * KCAL_PER_G_PROTEIN

        # 2. Fat (share of calories)
        fat_pct = goal.fat_percentage()
        fat_cal = round_int(budget * fat_pct)
        fat_g = round_int(fat_cal / KCAL_PER_G_FAT)

        # 3. Carbs (remainder)
        carb_cal = max(0, budget - protein_cal - fat_cal)
        carbs_g = round_int(carb_cal / KCAL_PER_G_CARBS)

        return MacroBreakdown(
            calories=calories,
            protein=MacroNutrient(
                grams=protein_g,
                calories=protein_cal,
                percentage=self._share(protein_cal, budget),
            ),
            carbs=MacroNutrient(
                grams=carbs_g,
                calories=carb_cal,
                percentage=self._share(carb_cal, budget),
            ),
            fat=MacroNutrient(
                grams=fat_g,
                calories=fat_cal,
                percentage=round_int(fat_pct * 100),
            ),
            fiber_g=round_int(budget / 1000 * FIBER_G_PER_1000_KCAL),
        )

    @staticmethod
    def _share(part: float, total: float) -> int:
        if total <= 0:
            return 0
        return round_int(part / total * 100)
