"""Unit tests for threshold tables, interpolation and rounding."""

import pytest

from health_tools.domain.shared.lookup import ThresholdTable, interpolate
from health_tools.domain.shared.rounding import round_half_up, round_int


class TestThresholdTable:
    """Test half-open band lookup."""

    def setup_method(self):
        self.table = ThresholdTable(
            bounds=(18.5, 25.0, 30.0),
            labels=("under", "normal", "over", "obese"),
        )

    def test_lower_edge_is_inclusive(self):
        assert self.table.classify(18.5) == "normal"
        assert self.table.classify(25.0) == "over"
        assert self.table.classify(30.0) == "obese"

    def test_just_below_edge(self):
        assert self.table.classify(24.9) == "normal"
        assert self.table.classify(18.4) == "under"

    def test_open_ends(self):
        assert self.table.classify(-100) == "under"
        assert self.table.classify(1000) == "obese"

    def test_band(self):
        assert self.table.band("under") == (None, 18.5)
        assert self.table.band("normal") == (18.5, 25.0)
        assert self.table.band("obese") == (30.0, None)

    def test_rejects_label_count_mismatch(self):
        with pytest.raises(ValueError):
            ThresholdTable(bounds=(1.0, 2.0), labels=("a", "b"))

    def test_rejects_unordered_bounds(self):
        with pytest.raises(ValueError):
            ThresholdTable(bounds=(2.0, 1.0), labels=("a", "b", "c"))


class TestInterpolate:
    """Test piecewise-linear interpolation."""

    POINTS = [(0.0, 0.0), (10.0, 100.0), (20.0, 120.0)]

    def test_midpoint(self):
        assert interpolate(5.0, self.POINTS) == pytest.approx(50.0)
        assert interpolate(15.0, self.POINTS) == pytest.approx(110.0)

    def test_exact_breakpoint(self):
        assert interpolate(10.0, self.POINTS) == pytest.approx(100.0)

    def test_clamped_outside_range(self):
        assert interpolate(-5.0, self.POINTS) == 0.0
        assert interpolate(50.0, self.POINTS) == 120.0

    def test_empty_points(self):
        with pytest.raises(ValueError):
            interpolate(1.0, [])


class TestRounding:
    """Halves round away from zero."""

    def test_half_up(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(24.95, 1) == 25.0

    def test_round_int(self):
        assert round_int(1780.5) == 1781
        assert round_int(1.25) == 1
        assert isinstance(round_int(3.7), int)
