"""Application layer: calculator registry and dispatch."""

from .registry import CALCULATORS, CalculatorEntry, get_calculator, run_calculator

__all__ = ["CALCULATORS", "CalculatorEntry", "get_calculator", "run_calculator"]
