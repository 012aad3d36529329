"""Rounding helpers.

Python's ``round`` uses banker's rounding. Reported health figures
round halves away from zero, so 0.5 cycles becomes 1 and 1780.5 kcal
becomes 1781.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    return int(round_half_up(value))
