"""Body measures used by more than one calculator."""

from __future__ import annotations


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Raw BMI = kg / m²."""
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)
