"""Unit tests for unit conversion helpers."""

import pytest

from health_tools.domain.shared.units import (
    cm_to_feet_inches,
    cm_to_inches,
    feet_inches_to_cm,
    inches_to_cm,
    kg_to_lb,
    kpa_to_mmhg,
    lb_to_kg,
    mg_dl_to_mmol,
    mmol_to_mg_dl,
)


class TestUnitConversions:
    """Test imperial/metric conversions."""

    def test_pounds_to_kilograms(self):
        """1 lb is 0.453592 kg."""
        assert lb_to_kg(1) == pytest.approx(0.453592)
        assert lb_to_kg(176) == pytest.approx(79.832192)

    def test_inches_to_centimetres(self):
        assert inches_to_cm(1) == pytest.approx(2.54)

    def test_feet_and_inches(self):
        """5 ft 10 in = 70 in = 177.8 cm."""
        assert feet_inches_to_cm(5, 10) == pytest.approx(177.8)

    @pytest.mark.parametrize("pounds", [44.0, 150.5, 176.0, 400.0])
    def test_weight_round_trip(self, pounds):
        """Imperial -> metric -> imperial recovers the input."""
        assert kg_to_lb(lb_to_kg(pounds)) == pytest.approx(pounds)

    @pytest.mark.parametrize("inches", [20.0, 65.5, 72.0])
    def test_height_round_trip(self, inches):
        assert cm_to_inches(inches_to_cm(inches)) == pytest.approx(inches)

    def test_feet_inches_round_trip(self):
        feet, inches = cm_to_feet_inches(feet_inches_to_cm(5, 10))

        assert feet == 5
        assert inches == pytest.approx(10)

    def test_pressure_and_glucose(self):
        assert kpa_to_mmhg(16) == pytest.approx(120.00992)
        assert mg_dl_to_mmol(mmol_to_mg_dl(5.5)) == pytest.approx(5.5)
