"""HeartRateZoneService - five-zone training heart rates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import structlog

from ..shared.activity import ActivityLevel
from ..shared.ports import ICalculator
from ..shared.rounding import round_int
from .value_objects import (
    FitnessInsight,
    HeartRateInput,
    HeartRateResult,
    HeartRateZone,
    KarvonenInput,
    MethodologyInfo,
    TrainingGoal,
    TrainingTip,
    ZoneMethod,
    ZoneName,
    ZoneRecommendation,
    age_predicted_max,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ZoneDefinition:
    zone: ZoneName
    min_percent: int
    max_percent: int
    description: str
    purpose: str
    benefits: Tuple[str, ...]
    intensity: str
    duration: str
    examples: Tuple[str, ...]


# Contiguous: each zone's max percent is the next zone's min percent
ZONE_DEFINITIONS: Tuple[ZoneDefinition, ...] = (
    ZoneDefinition(
        zone=ZoneName.RECOVERY,
        min_percent=50,
        max_percent=60,
        description="Active recovery and warm-up",
        purpose="Recovery, warm-up, and cool-down",
        benefits=(
            "Promotes recovery",
            "Improves circulation",
            "Reduces muscle soreness",
            "Safe for daily activity",
        ),
        intensity="Very Light",
        duration="20-60 minutes",
        examples=("Walking", "Light stretching", "Easy yoga", "Gentle cycling"),
    ),
    ZoneDefinition(
        zone=ZoneName.FAT_BURN,
        min_percent=60,
        max_percent=70,
        description="Optimal fat burning and base building",
        purpose="Fat burning and aerobic base development",
        benefits=(
            "Burns fat efficiently",
            "Builds aerobic base",
            "Low stress on body",
            "Sustainable for long duration",
        ),
        intensity="Light",
        duration="30-90 minutes",
        examples=("Brisk walking", "Easy jogging", "Leisure cycling", "Swimming laps"),
    ),
    ZoneDefinition(
        zone=ZoneName.AEROBIC,
        min_percent=70,
        max_percent=80,
        description="Cardiovascular fitness improvement",
        purpose="Cardiovascular fitness and endurance",
        benefits=(
            "Improves cardiovascular fitness",
            "Increases stamina",
            "Enhances oxygen delivery",
            "Burns calories efficiently",
        ),
        intensity="Moderate",
        duration="20-60 minutes",
        examples=("Steady running", "Cycling", "Group fitness classes", "Dance workouts"),
    ),
    ZoneDefinition(
        zone=ZoneName.ANAEROBIC,
        min_percent=80,
        max_percent=90,
        description="High-intensity training and lactate threshold",
        purpose="Lactate threshold and high-intensity performance",
        benefits=(
            "Improves lactate threshold",
            "Increases power output",
            "Enhances speed",
            "Builds mental toughness",
        ),
        intensity="Hard",
        duration="10-40 minutes",
        examples=("Interval training", "Tempo runs", "Hill climbing", "Circuit training"),
    ),
    ZoneDefinition(
        zone=ZoneName.VO2_MAX,
        min_percent=90,
        max_percent=100,
        description="Maximum oxygen uptake and peak performance",
        purpose="Maximum oxygen uptake and neuromuscular power",
        benefits=(
            "Maximizes VO2 max",
            "Improves peak power",
            "Enhances speed and agility",
            "Develops anaerobic capacity",
        ),
        intensity="Maximum",
        duration="30 seconds - 8 minutes",
        examples=(
            "Sprint intervals",
            "High-intensity intervals",
            "Race pace efforts",
            "Plyometric exercises",
        ),
    ),
)

_METHODOLOGY: Dict[ZoneMethod, MethodologyInfo] = {
    ZoneMethod.AGE_FORMULA: MethodologyInfo(
        name="Age-Based Formula (220 - Age)",
        description="Simple formula using age to estimate maximum heart rate",
        accuracy="Moderate (±10-12 bpm)",
        advantages=[
            "Simple and widely known",
            "No additional measurements needed",
            "Good starting point for beginners",
        ],
        limitations=[
            "Does not account for individual fitness",
            "Ignores resting heart rate",
            "May overestimate for older adults",
        ],
    ),
    ZoneMethod.KARVONEN: MethodologyInfo(
        name="Karvonen Method (Heart Rate Reserve)",
        description="Uses both maximum and resting heart rate for more personalized zones",
        accuracy="Good (±5-8 bpm)",
        advantages=[
            "More personalized than the age formula",
            "Accounts for individual fitness level",
            "Better for trained athletes",
        ],
        limitations=[
            "Requires an accurate resting heart rate",
            "Still estimates maximum heart rate",
            "Resting heart rate varies with stress and health",
        ],
    ),
    ZoneMethod.CUSTOM_MAX: MethodologyInfo(
        name="Custom Maximum Heart Rate",
        description="Uses your tested maximum heart rate for precise calculations",
        accuracy="Excellent (±2-3 bpm)",
        advantages=[
            "Most accurate method",
            "Uses your actual maximum heart rate",
            "Accounts for individual variation",
        ],
        limitations=[
            "Requires maximum heart rate testing",
            "Testing can be dangerous if not supervised",
            "Maximum heart rate changes over time",
        ],
    ),
}

# goal -> (zone, template, reason, sessions per week, session duration)
_GOAL_PLANS: Dict[TrainingGoal, Tuple[ZoneName, str, str, str, str]] = {
    TrainingGoal.FAT_BURN: (
        ZoneName.FAT_BURN,
        "Train in {low}-{high} bpm for optimal fat burning",
        "This zone maximizes fat oxidation while remaining sustainable for longer durations",
        "3-5",
        "30-60 minutes",
    ),
    TrainingGoal.AEROBIC: (
        ZoneName.AEROBIC,
        "Target {low}-{high} bpm for cardiovascular fitness",
        "This zone improves your cardiovascular system and increases endurance capacity",
        "3-4",
        "20-60 minutes",
    ),
    TrainingGoal.ANAEROBIC: (
        ZoneName.ANAEROBIC,
        "Train at {low}-{high} bpm for power and speed",
        "This zone improves your lactate threshold and high-intensity performance",
        "1-2",
        "10-40 minutes",
    ),
    TrainingGoal.VO2_MAX: (
        ZoneName.VO2_MAX,
        "Short intervals at {low}-{high} bpm for maximum oxygen uptake",
        "This zone maximizes your body's ability to use oxygen and improves peak performance",
        "1-2",
        "Intervals of 30 seconds to 8 minutes",
    ),
    TrainingGoal.RECOVERY: (
        ZoneName.RECOVERY,
        "Use {low}-{high} bpm for active recovery days",
        "This zone promotes recovery while maintaining movement and circulation",
        "1-3",
        "20-45 minutes",
    ),
}


def target_heart_rate(
    percent: int, max_hr: int, resting_hr: Optional[int] = None
) -> int:
    """Heart rate at an intensity percent.

    Karvonen (resting given): (max - resting) × pct + resting
    Otherwise:                max × pct
    """
    if resting_hr is None:
        return round_int(max_hr * percent / 100)
    return round_int((max_hr - resting_hr) * percent / 100 + resting_hr)


def calculate_zones(max_hr: int, resting_hr: Optional[int] = None) -> List[HeartRateZone]:
    return [
        HeartRateZone(
            zone=definition.zone,
            name=definition.zone.label(),
            description=definition.description,
            purpose=definition.purpose,
            benefits=list(definition.benefits),
            min_bpm=target_heart_rate(definition.min_percent, max_hr, resting_hr),
            max_bpm=target_heart_rate(definition.max_percent, max_hr, resting_hr),
            min_percentage=definition.min_percent,
            max_percentage=definition.max_percent,
            intensity=definition.intensity,
            duration=definition.duration,
            examples=list(definition.examples),
        )
        for definition in ZONE_DEFINITIONS
    ]


def _recommendations(
    goals: List[TrainingGoal], zones: List[HeartRateZone]
) -> List[ZoneRecommendation]:
    by_zone = {z.zone: z for z in zones}
    recommendations = []
    for goal in dict.fromkeys(goals):
        zone_name, template, reason, frequency, duration = _GOAL_PLANS[goal]
        zone = by_zone[zone_name]
        recommendations.append(
            ZoneRecommendation(
                zone=zone_name,
                recommendation=template.format(low=zone.min_bpm, high=zone.max_bpm),
                reason=reason,
                sessions_per_week=frequency,
                session_duration=duration,
            )
        )
    return recommendations


def _training_tips(goals: List[TrainingGoal], activity: ActivityLevel) -> List[TrainingTip]:
    tips = []
    if TrainingGoal.FAT_BURN in goals:
        tips.append(
            TrainingTip(
                category="Fat Burning",
                tip="Exercise in the fat burn zone for 30-60 minutes, 3-5 times per week.",
            )
        )
    if TrainingGoal.AEROBIC in goals:
        tips.append(
            TrainingTip(
                category="Endurance",
                tip="Build your aerobic base with 80% of training in lower zones. "
                "This improves efficiency and allows for harder efforts when needed.",
            )
        )
    if TrainingGoal.ANAEROBIC in goals or TrainingGoal.VO2_MAX in goals:
        tips.append(
            TrainingTip(
                category="High Intensity",
                tip="Limit high-intensity training to 1-3 sessions per week "
                "with adequate recovery between sessions.",
            )
        )

    if activity in (ActivityLevel.SEDENTARY, ActivityLevel.LIGHTLY_ACTIVE):
        tips.append(
            TrainingTip(
                category="Getting Started",
                tip="Start with 20-30 minutes in the recovery and fat burn zones. "
                "Increase duration before increasing intensity.",
            )
        )
    elif activity in (ActivityLevel.VERY_ACTIVE, ActivityLevel.EXTREMELY_ACTIVE):
        tips.append(
            TrainingTip(
                category="Advanced Training",
                tip="Use heart rate zones to keep a proper intensity distribution. "
                "Include regular recovery sessions to prevent overtraining.",
            )
        )

    tips.append(
        TrainingTip(
            category="Monitoring",
            tip="Check your heart rate regularly during exercise. If you cannot reach "
            "your target zone, you may be overtrained or dehydrated.",
        )
    )
    tips.append(
        TrainingTip(
            category="Safety",
            tip="Always warm up gradually and cool down properly. Stop exercising if "
            "you feel dizzy, have chest pain, or unusual shortness of breath.",
        )
    )
    return tips


def _fitness_insights(
    max_hr: int, resting_hr: Optional[int], age: int, activity: ActivityLevel
) -> List[FitnessInsight]:
    insights = []
    expected = age_predicted_max(age)
    if max_hr > expected + 10:
        insights.append(
            FitnessInsight(
                category="Maximum Heart Rate",
                insight="Your maximum heart rate is higher than average for your age, "
                "which may reflect genetics or a high fitness level.",
            )
        )
    elif max_hr < expected - 10:
        insights.append(
            FitnessInsight(
                category="Maximum Heart Rate",
                insight="Your maximum heart rate is lower than average for your age. "
                "This is normal for some people and does not indicate poor fitness.",
            )
        )

    if resting_hr is not None:
        if resting_hr < 60:
            text = (
                "Your resting heart rate indicates excellent cardiovascular fitness. "
                "Elite athletes often rest at 40-60 bpm."
            )
        elif resting_hr > 80:
            text = (
                "Your resting heart rate suggests room for cardiovascular improvement. "
                "Regular aerobic exercise can lower it."
            )
        else:
            text = (
                "Your resting heart rate is in the healthy range. "
                "Continue regular exercise to maintain it."
            )
        insights.append(FitnessInsight(category="Resting Heart Rate", insight=text))

    if age > 50:
        insights.append(
            FitnessInsight(
                category="Age Considerations",
                insight="Maximum heart rate naturally decreases with age. Focus on "
                "consistency and enjoyment rather than intensity alone.",
            )
        )
    if activity is ActivityLevel.SEDENTARY:
        insights.append(
            FitnessInsight(
                category="Activity Level",
                insight="A heart rate based exercise program can significantly improve "
                "your cardiovascular health. Begin slowly and progress gradually.",
            )
        )
    return insights


class HeartRateZoneService(ICalculator[HeartRateInput, HeartRateResult]):
    """Calculate five training zones from maximum (and resting) heart rate.

    Methods:
        age_formula: max = 220 - age, zones as % of max
        karvonen:    max = 220 - age, zones as % of heart rate reserve
        custom_max:  tested max, zones as % of max
    """

    def calculate(self, data: HeartRateInput) -> HeartRateResult:
        method = ZoneMethod(data.method)
        max_hr = data.max_heart_rate_bpm()
        resting = data.resting_heart_rate

        reserve = None
        karvonen_resting = None
        if isinstance(data, KarvonenInput):
            reserve = max_hr - data.resting_heart_rate
            karvonen_resting = data.resting_heart_rate

        zones = calculate_zones(max_hr, karvonen_resting)

        logger.debug(
            "heart_rate.calculated",
            method=method.value,
            max_hr=max_hr,
            reserve=reserve,
        )

        return HeartRateResult(
            method=method,
            max_heart_rate=max_hr,
            resting_heart_rate=resting,
            heart_rate_reserve=reserve,
            zones=zones,
            recommendations=_recommendations(data.goals, zones),
            training_tips=_training_tips(data.goals, data.activity_level),
            methodology=_METHODOLOGY[method],
            fitness_insights=_fitness_insights(max_hr, resting, data.age, data.activity_level),
        )
