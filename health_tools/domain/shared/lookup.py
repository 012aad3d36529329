"""
Threshold tables and piecewise-linear interpolation.

Every calculator classifies values against ordered breakpoint tables.
Keeping the lookup in one place guarantees half-open intervals
``[lower, upper)`` with no gaps or overlaps between adjacent bands.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ThresholdTable(Generic[T]):
    """Ordered bands over the real line.

    ``bounds[i]`` is the inclusive lower edge of ``labels[i + 1]``; the
    first label covers everything below ``bounds[0]``.

    Example:
        >>> table = ThresholdTable((18.5, 25.0, 30.0), ("under", "normal", "over", "obese"))
        >>> table.classify(24.9), table.classify(25.0)
        ('normal', 'over')
    """

    bounds: Tuple[float, ...]
    labels: Tuple[T, ...]

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.bounds) + 1:
            raise ValueError("ThresholdTable needs exactly one more label than bounds")
        if any(b >= a for a, b in zip(self.bounds[1:], self.bounds)):
            raise ValueError("ThresholdTable bounds must be strictly increasing")

    def classify(self, value: float) -> T:
        return self.labels[bisect_right(self.bounds, value)]

    def band(self, label: T) -> Tuple[Optional[float], Optional[float]]:
        """Return ``(lower, upper)`` for a label; open ends are ``None``."""
        index = self.labels.index(label)
        lower = self.bounds[index - 1] if index > 0 else None
        upper = self.bounds[index] if index < len(self.bounds) else None
        return lower, upper


def interpolate(x: float, points: Sequence[Tuple[float, float]]) -> float:
    """Piecewise-linear interpolation through ``points`` sorted by x.

    Values outside the covered range are clamped to the first or last y,
    never extrapolated.
    """
    if not points:
        raise ValueError("interpolate() needs at least one point")
    if x <= points[0][0]:
        return points[0][1]
    if x >= points[-1][0]:
        return points[-1][1]

    xs = [px for px, _ in points]
    upper = bisect_right(xs, x)
    x0, y0 = points[upper - 1]
    x1, y1 = points[upper]
    if x1 == x0:
        return y1
    return y0 + (y1 - y0) * (x - x0) / (x1 - x0)
