"""Unit tests for PregnancyService."""

from datetime import date

import pytest

from health_tools.domain.pregnancy import (
    PREGNANCY_INPUT_ADAPTER,
    ConceptionInput,
    DatingMethod,
    LMPInput,
    PregnancyService,
    Trimester,
    UltrasoundInput,
    baby_development,
    gestational_age,
)
from health_tools.domain.shared import InputValidationError, parse_input

TODAY = date(2024, 3, 1)


class TestPregnancyService:
    """Test due date and progress for each dating method."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PregnancyService()
        self.lmp = LMPInput(last_period_date=date(2024, 1, 1))

    def test_lmp_due_date(self):
        """LMP 2024-01-01 -> due 2024-10-07 (280 days, across Feb 29)."""
        result = self.service.calculate(self.lmp, TODAY)

        assert result.method == DatingMethod.LMP
        assert result.due_date == date(2024, 10, 7)
        assert result.conception_date == date(2024, 1, 15)

    def test_progress(self):
        """60 days after LMP: 8 weeks 4 days, first trimester."""
        result = self.service.calculate(self.lmp, TODAY)

        assert result.gestational_age.weeks == 8
        assert result.gestational_age.days == 4
        assert result.trimester == Trimester.FIRST
        assert result.days_until_due == 220
        assert result.weeks_until_due == 31
        assert result.percent_complete == 21.4

    def test_conception_method(self):
        data = ConceptionInput(conception_date=date(2024, 1, 15))

        result = self.service.calculate(data, TODAY)

        assert result.due_date == date(2024, 10, 7)
        assert result.gestational_age.total_days == 60

    def test_ultrasound_method(self):
        """A scan at 8w4d on 2024-03-01 puts the LMP at 2024-01-01."""
        data = UltrasoundInput(
            ultrasound_date=TODAY, gestational_weeks=8, gestational_days=4
        )

        result = self.service.calculate(data, TODAY)

        assert result.due_date == date(2024, 10, 7)
        assert result.accuracy.method == DatingMethod.ULTRASOUND

    def test_dating_methods_agree(self):
        """LMP and conception 14 days later give the same due date."""
        today = date(2024, 4, 1)
        by_lmp = self.service.calculate(
            LMPInput(last_period_date=date(2024, 3, 1)), today
        )
        by_conception = self.service.calculate(
            ConceptionInput(conception_date=date(2024, 3, 15)), today
        )

        assert by_lmp.due_date == date(2024, 12, 6)
        assert by_conception.due_date == by_lmp.due_date
        assert (by_lmp.due_date - date(2024, 3, 1)).days == 280

    def test_longer_cycle_moves_conception(self):
        data = LMPInput(last_period_date=date(2024, 1, 1), cycle_length=35)

        result = self.service.calculate(data, TODAY)

        assert result.conception_date == date(2024, 1, 22)
        assert result.accuracy.note == "Based on a 35-day cycle"

    @pytest.mark.parametrize(
        "today,expected",
        [
            (date(2024, 3, 31), Trimester.FIRST),
            (date(2024, 4, 1), Trimester.SECOND),
            (date(2024, 7, 8), Trimester.THIRD),
        ],
    )
    def test_trimester_boundaries(self, today, expected):
        """Week 13 starts the second trimester, week 27 the third."""
        result = self.service.calculate(self.lmp, today)

        assert result.trimester == expected

    def test_upcoming_milestones(self):
        result = self.service.calculate(self.lmp, TODAY)
        weeks = [m.week for m in result.upcoming_milestones]

        assert weeks == [8, 11, 18]
        assert result.upcoming_milestones[0].expected_date == date(2024, 2, 26)

    def test_key_dates(self):
        result = self.service.calculate(self.lmp, TODAY)

        assert result.key_dates.full_term == date(2024, 9, 16)
        assert result.key_dates.implantation.start == date(2024, 1, 21)

    def test_before_lmp_clamped(self):
        result = self.service.calculate(self.lmp, date(2023, 12, 20))

        assert result.gestational_age.total_days == 0
        assert result.trimester == Trimester.FIRST

    def test_baby_development(self):
        assert baby_development(2) is None
        assert baby_development(21) == "Hearing developing, movements can be felt"

    def test_gestational_age(self):
        age = gestational_age(date(2024, 1, 1), date(2024, 1, 30))

        assert (age.weeks, age.days) == (4, 1)

    def test_future_lmp_rejected(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                PREGNANCY_INPUT_ADAPTER,
                {"method": "lmp", "last_period_date": "2024-04-01"},
                discriminator="method",
                today=TODAY,
            )

        assert exc_info.value.field_errors == {
            "last_period_date": "Date cannot be in the future"
        }

    def test_ultrasound_requires_weeks(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_input(
                PREGNANCY_INPUT_ADAPTER,
                {"method": "ultrasound", "ultrasound_date": "2024-02-01"},
                discriminator="method",
                today=TODAY,
            )

        assert "gestational_weeks" in exc_info.value.field_errors

    def test_idempotent(self):
        assert self.service.calculate(self.lmp, TODAY) == self.service.calculate(
            self.lmp, TODAY
        )
