"""PregnancyService - due date and gestational progress."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

import structlog

from ..shared.lookup import ThresholdTable
from ..shared.ports import IDatedCalculator
from ..shared.rounding import round_half_up
from .value_objects import (
    PREGNANCY_DAYS_FROM_LMP,
    AccuracyInfo,
    DateRange,
    DatingMethod,
    DeliveryWindows,
    GestationalAge,
    KeyDates,
    LMPInput,
    Milestone,
    PregnancyInput,
    PregnancyResult,
    Trimester,
)

logger = structlog.get_logger(__name__)

TRIMESTERS: ThresholdTable[Trimester] = ThresholdTable(
    bounds=(13.0, 27.0),
    labels=(Trimester.FIRST, Trimester.SECOND, Trimester.THIRD),
)

MILESTONE_LOOKAHEAD_WEEKS = 12
MAX_MILESTONES = 4

# (week, title, description)
MILESTONES: Tuple[Tuple[int, str, str], ...] = (
    (8, "First Prenatal Visit", "Initial checkup and dating ultrasound"),
    (11, "Genetic Screening Window", "NIPT and CVS testing available"),
    (18, "Anatomy Scan", "Detailed fetal anatomy ultrasound"),
    (24, "Glucose Screening", "Gestational diabetes testing"),
    (28, "Third Trimester Monitoring", "More frequent checkups begin"),
    (36, "Group B Strep Test", "GBS screening before delivery"),
    (37, "Full Term", "Baby is considered full term"),
    (40, "Due Date", "Your estimated due date"),
)

# (from week, development)
DEVELOPMENT_STAGES: Tuple[Tuple[int, str], ...] = (
    (4, "Neural tube forming, heart begins to beat"),
    (8, "All major organs present, fingers and toes forming"),
    (12, "Reflexes developing"),
    (16, "Hair and nails growing"),
    (20, "Hearing developing, movements can be felt"),
    (24, "Lungs developing, viability outside the womb"),
    (28, "Eyes can open, brain developing rapidly"),
    (32, "Bones hardening, gaining weight rapidly"),
    (36, "Lungs nearly mature, preparing for birth"),
    (40, "Ready for birth"),
)

_RELIABILITY: Dict[DatingMethod, str] = {
    DatingMethod.LMP: "Moderate (±14 days)",
    DatingMethod.CONCEPTION: "High (±7 days)",
    DatingMethod.ULTRASOUND: "High (±5-7 days)",
}


def gestational_age(start: date, today: date) -> GestationalAge:
    """Completed weeks and days since the gestation start, floored at 0."""
    total = max(0, (today - start).days)
    return GestationalAge(weeks=total // 7, days=total % 7, total_days=total)


def baby_development(week: int) -> Optional[str]:
    current = None
    for from_week, development in DEVELOPMENT_STAGES:
        if from_week <= week:
            current = development
    return current


def upcoming_milestones(lmp: date, current_week: int) -> List[Milestone]:
    relevant = [
        Milestone(
            week=week,
            title=title,
            description=description,
            expected_date=lmp + timedelta(weeks=week),
        )
        for week, title, description in MILESTONES
        if current_week <= week <= current_week + MILESTONE_LOOKAHEAD_WEEKS
    ]
    return relevant[:MAX_MILESTONES]


def _accuracy(data: PregnancyInput) -> AccuracyInfo:
    method = DatingMethod(data.method)
    if isinstance(data, LMPInput):
        note = f"Based on a {data.cycle_length}-day cycle"
    elif method is DatingMethod.CONCEPTION:
        note = "Based on a known conception date"
    else:
        note = "Based on ultrasound measurements"
    return AccuracyInfo(method=method, reliability=_RELIABILITY[method], note=note)


class PregnancyService(IDatedCalculator[PregnancyInput, PregnancyResult]):
    """
    Estimate the due date and current progress of a pregnancy.

    Dating methods:
        lmp:         due = LMP + 280 days
        conception:  due = conception + 266 days
        ultrasound:  LMP estimated as scan date - gestational age,
                     due = estimated LMP + 280 days

    Gestational age is counted from the (estimated) LMP; trimesters
    are weeks 0-12, 13-26 and 27+.

    Example:
        LMP 2024-01-01 -> due date 2024-10-07
    """

    def calculate(self, data: PregnancyInput, today: date) -> PregnancyResult:
        lmp = data.gestation_start()
        due = data.due_date()
        conception = data.conception_estimate()

        age = gestational_age(lmp, today)
        days_until_due = max(0, (due - today).days)
        percent = min(100.0, age.total_days / PREGNANCY_DAYS_FROM_LMP * 100)

        key_dates = KeyDates(
            conception=conception,
            implantation=DateRange(
                start=conception + timedelta(days=6),
                end=conception + timedelta(days=10),
            ),
            first_trimester_end=lmp + timedelta(days=91),
            second_trimester_end=lmp + timedelta(days=189),
            viability=lmp + timedelta(days=168),
            full_term=lmp + timedelta(days=259),
        )

        windows = DeliveryWindows(
            preterm=max(0, 37 - age.weeks),
            full_term=max(0, 39 - age.weeks),
            due_date=max(0, 40 - age.weeks),
            post_term=max(0, 42 - age.weeks),
        )

        trimester = TRIMESTERS.classify(age.weeks)

        logger.debug(
            "pregnancy.calculated",
            method=data.method,
            weeks=age.weeks,
            trimester=trimester.value,
        )

        return PregnancyResult(
            method=DatingMethod(data.method),
            due_date=due,
            conception_date=conception,
            gestational_age=age,
            trimester=trimester,
            days_until_due=days_until_due,
            weeks_until_due=days_until_due // 7,
            percent_complete=round_half_up(percent, 1),
            key_dates=key_dates,
            upcoming_milestones=upcoming_milestones(lmp, age.weeks),
            delivery_windows=windows,
            baby_development=baby_development(age.weeks),
            accuracy=_accuracy(data),
        )
