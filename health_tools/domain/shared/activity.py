"""Physical activity level shared by the energy and training calculators."""

from __future__ import annotations

from enum import Enum
from typing import List


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    - SEDENTARY: Little or no exercise (desk job)
    - LIGHTLY_ACTIVE: Light exercise 1-3 days/week
    - MODERATELY_ACTIVE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTREMELY_ACTIVE: Very hard exercise, physical job or twice-daily training
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"

    def pal_multiplier(self) -> float:
        """Get PAL multiplier applied to BMR.

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY_ACTIVE: 1.375,
            ActivityLevel.MODERATELY_ACTIVE: 1.55,
            ActivityLevel.VERY_ACTIVE: 1.725,
            ActivityLevel.EXTREMELY_ACTIVE: 1.9,
        }
        return multipliers[self]

    def label(self) -> str:
        return self.value.replace("_", " ").title()

    def description(self) -> str:
        descriptions = {
            ActivityLevel.SEDENTARY: "Little to no exercise, desk job",
            ActivityLevel.LIGHTLY_ACTIVE: "Light exercise 1-3 days per week",
            ActivityLevel.MODERATELY_ACTIVE: "Moderate exercise 3-5 days per week",
            ActivityLevel.VERY_ACTIVE: "Hard exercise 6-7 days per week",
            ActivityLevel.EXTREMELY_ACTIVE: (
                "Very hard exercise, physical job, or training twice a day"
            ),
        }
        return descriptions[self]

    def examples(self) -> List[str]:
        examples = {
            ActivityLevel.SEDENTARY: ["Office work", "Reading", "Computer work"],
            ActivityLevel.LIGHTLY_ACTIVE: ["Walking", "Light yoga", "Casual cycling"],
            ActivityLevel.MODERATELY_ACTIVE: ["Jogging", "Swimming", "Weight training"],
            ActivityLevel.VERY_ACTIVE: ["Running", "Sports training", "Heavy lifting"],
            ActivityLevel.EXTREMELY_ACTIVE: [
                "Athletic training",
                "Construction work",
                "Professional sports",
            ],
        }
        return list(examples[self])
