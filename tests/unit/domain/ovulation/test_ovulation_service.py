"""Unit tests for OvulationService."""

from datetime import date

from health_tools.domain.ovulation import (
    CyclePhase,
    FertilityLevel,
    OvulationInput,
    OvulationService,
    fertility_level,
)


class TestOvulationService:
    """Test calendar-method ovulation prediction."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = OvulationService()
        self.data = OvulationInput(last_period_date=date(2024, 1, 1))

    def test_reference_example(self):
        """LMP 2024-01-01, 28 days -> ovulation 01-15, window from 01-10, period 01-29."""
        result = self.service.calculate(self.data, today=date(2024, 1, 5))

        assert result.ovulation_date == date(2024, 1, 15)
        assert result.fertile_window_start == date(2024, 1, 10)
        assert result.fertile_window_end == date(2024, 1, 15)
        assert result.next_period_date == date(2024, 1, 29)

    def test_menstrual_phase(self):
        result = self.service.calculate(self.data, today=date(2024, 1, 3))

        assert result.current_phase == CyclePhase.MENSTRUAL
        assert result.cycle_day == 3
        assert result.days_until_ovulation == 12

    def test_ovulation_day(self):
        result = self.service.calculate(self.data, today=date(2024, 1, 15))

        assert result.current_phase == CyclePhase.OVULATION
        assert result.fertility_level == FertilityLevel.HIGH
        assert result.days_until_ovulation == 0

    def test_luteal_phase(self):
        result = self.service.calculate(self.data, today=date(2024, 1, 20))

        assert result.current_phase == CyclePhase.LUTEAL
        assert result.days_until_next_period == 9

    def test_outside_cycle(self):
        """Dates past the next period are not silently mapped to a phase."""
        result = self.service.calculate(self.data, today=date(2024, 3, 1))

        assert result.current_phase == CyclePhase.OUTSIDE_CYCLE
        assert result.days_until_next_period == 0

    def test_fertility_margin(self):
        start, end = date(2024, 1, 10), date(2024, 1, 15)

        assert fertility_level(date(2024, 1, 8), start, end) == FertilityLevel.MEDIUM
        assert fertility_level(date(2024, 1, 17), start, end) == FertilityLevel.MEDIUM
        assert fertility_level(date(2024, 1, 7), start, end) == FertilityLevel.LOW

    def test_future_cycles(self):
        result = self.service.calculate(self.data, today=date(2024, 1, 5))

        assert len(result.future_cycles) == 6
        assert result.future_cycles[0].cycle == 2
        assert result.future_cycles[0].period_start == date(2024, 1, 29)
        assert result.future_cycles[0].ovulation_date == date(2024, 2, 12)

    def test_phases_contiguous(self):
        result = self.service.calculate(self.data, today=date(2024, 1, 5))

        for previous, current in zip(result.phases, result.phases[1:]):
            assert (current.start - previous.end).days == 1
        assert result.phases[-1].end == date(2024, 1, 28)

    def test_short_cycle_drops_empty_phase(self):
        """21-day cycle with an 8-day period leaves no follicular days."""
        data = OvulationInput(
            last_period_date=date(2024, 1, 1), cycle_length=21, period_length=8
        )

        result = self.service.calculate(data, today=date(2024, 1, 2))

        phases = [window.phase for window in result.phases]
        assert CyclePhase.FOLLICULAR not in phases
        assert CyclePhase.MENSTRUAL in phases

    def test_idempotent(self):
        today = date(2024, 1, 12)

        assert self.service.calculate(self.data, today) == self.service.calculate(
            self.data, today
        )
