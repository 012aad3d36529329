"""VitaminDService - 25(OH)D status, deficiency risk and supplementation."""

from __future__ import annotations

from typing import Dict, List, Tuple

import structlog

from ..shared.lookup import ThresholdTable
from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up, round_int
from ..shared.units import NMOL_L_PER_NG_ML
from .value_objects import (
    DailyDose,
    DeficiencyRisk,
    DietaryIntake,
    FactorImpact,
    MedicalCondition,
    PregnancyStatus,
    RiskFactor,
    RiskLevel,
    Season,
    SkinType,
    SunExposure,
    SunscreenUse,
    SupplementGuidance,
    SupplementUse,
    VitaminDCategory,
    VitaminDInput,
    VitaminDInsight,
    VitaminDResult,
    VitaminDStatus,
    VitaminDWarning,
    VitaminDWarningLevel,
)

logger = structlog.get_logger(__name__)

# ng/mL, Endocrine Society bands
STATUS_TABLE: ThresholdTable[VitaminDCategory] = ThresholdTable(
    bounds=(12.0, 20.0, 30.0, 50.0, 100.0),
    labels=tuple(VitaminDCategory),
)

# Risk score upper edges are inclusive, so the bounds sit half a point above
RISK_TABLE: ThresholdTable[RiskLevel] = ThresholdTable(
    bounds=(0.5, 2.5, 4.5, 7.5),
    labels=tuple(RiskLevel),
)

ESTIMATE_BASE_LEVEL = 25.0
ESTIMATE_RANGE = (10.0, 60.0)
_BELOW_SUFFICIENT = (
    VitaminDCategory.SEVERE_DEFICIENCY,
    VitaminDCategory.DEFICIENCY,
    VitaminDCategory.INSUFFICIENT,
)

_SUPPLEMENT_BOOST: Dict[SupplementUse, float] = {
    SupplementUse.NONE: 0.0,
    SupplementUse.LOW_DOSE: 5.0,
    SupplementUse.MODERATE_DOSE: 10.0,
    SupplementUse.HIGH_DOSE: 15.0,
}

_STATUS_DETAILS: Dict[VitaminDCategory, Tuple[str, Tuple[str, ...]]] = {
    VitaminDCategory.SEVERE_DEFICIENCY: (
        "<12 ng/mL (<30 nmol/L)",
        ("Immediate medical consultation required",
         "High-dose vitamin D supplementation",
         "Increase sun exposure with proper protection",
         "Include vitamin D-rich foods in diet",
         "Consider underlying causes of deficiency"),
    ),
    VitaminDCategory.DEFICIENCY: (
        "12-19 ng/mL (30-49 nmol/L)",
        ("Consult healthcare provider for supplementation",
         "Increase safe sun exposure",
         "Add vitamin D supplements to routine",
         "Include fortified foods in diet",
         "Monitor levels regularly"),
    ),
    VitaminDCategory.INSUFFICIENT: (
        "20-29 ng/mL (50-74 nmol/L)",
        ("Consider moderate supplementation",
         "Optimize sun exposure safely",
         "Include vitamin D-rich foods",
         "Monitor seasonal changes"),
    ),
    VitaminDCategory.SUFFICIENT: (
        "30-49 ng/mL (75-124 nmol/L)",
        ("Maintain current vitamin D intake",
         "Continue safe sun exposure habits",
         "Monitor during winter months"),
    ),
    VitaminDCategory.HIGH_NORMAL: (
        "50-99 ng/mL (125-249 nmol/L)",
        ("Monitor supplement dosage",
         "No need to increase intake further",
         "Regular monitoring recommended"),
    ),
    VitaminDCategory.EXCESSIVE: (
        "≥100 ng/mL (≥250 nmol/L)",
        ("Immediate medical consultation required",
         "Reduce or stop supplementation",
         "Monitor for toxicity symptoms",
         "Check calcium and phosphorus levels"),
    ),
}

# (minimum, optimal, maximum) IU per day, and duration
_DOSES: Dict[VitaminDCategory, Tuple[Tuple[int, int, int], str]] = {
    VitaminDCategory.SEVERE_DEFICIENCY: ((2000, 4000, 6000), "3-6 months, then maintenance dose"),
    VitaminDCategory.DEFICIENCY: ((1000, 2000, 4000), "2-4 months, then maintenance dose"),
    VitaminDCategory.INSUFFICIENT: ((800, 1000, 2000), "1-3 months, then maintenance dose"),
    VitaminDCategory.SUFFICIENT: ((400, 800, 1000), "Maintenance dose"),
    VitaminDCategory.HIGH_NORMAL: ((0, 0, 0), "Ongoing maintenance"),
    VitaminDCategory.EXCESSIVE: ((0, 0, 0), "Ongoing maintenance"),
}

_CONTRAINDICATIONS: Dict[MedicalCondition, str] = {
    MedicalCondition.KIDNEY_DISEASE: "Kidney disease - requires medical supervision",
    MedicalCondition.SARCOIDOSIS: "Sarcoidosis - may worsen hypercalcemia",
    MedicalCondition.HYPERPARATHYROIDISM: "Hyperparathyroidism - may exacerbate calcium elevation",
}

FOOD_SOURCES = (
    "Fatty fish (salmon, mackerel, sardines): 400-1000 IU per 100 g",
    "Cod liver oil: about 1360 IU per tablespoon",
    "Egg yolks: 40-50 IU each",
    "UV-exposed mushrooms: 375-400 IU per cup",
    "Fortified milk, plant milks and orange juice: 100-140 IU per 240 ml",
    "Fortified cereals: 40-100 IU per serving",
)

SUN_PRECAUTIONS = (
    "Expose skin between 10:00 and 15:00, when UVB is strongest",
    "Start with shorter exposure times and gradually increase",
    "Cover up or apply sunscreen after the recommended time",
    "Wear UV-protective sunglasses",
)


def estimate_level(data: VitaminDInput) -> float:
    """Rough 25(OH)D estimate (ng/mL) from exposure, skin, season and intake."""
    level = ESTIMATE_BASE_LEVEL
    if data.sun_exposure_hours > 4:
        level += 10
    elif data.sun_exposure_hours < 1:
        level -= 10

    if data.skin_type in (SkinType.VERY_FAIR, SkinType.FAIR):
        level += 5
    elif data.skin_type.is_dark:
        level -= 10

    if data.season is Season.WINTER:
        level -= 8
    elif data.season is Season.SUMMER:
        level += 8

    level += _SUPPLEMENT_BOOST[data.supplement_use]

    if data.dietary_intake is DietaryIntake.HIGH:
        level += 5
    elif data.dietary_intake is DietaryIntake.VERY_LOW:
        level -= 5

    low, high = ESTIMATE_RANGE
    return max(low, min(high, level))


def vitamin_d_status(level: float, estimated: bool = False) -> VitaminDStatus:
    category = STATUS_TABLE.classify(level)
    value_range, recommendations = _STATUS_DETAILS[category]
    return VitaminDStatus(
        level_ng_ml=round_half_up(level, 1),
        level_nmol_l=round_half_up(level * NMOL_L_PER_NG_ML, 1),
        estimated=estimated,
        category=category,
        label=category.label(),
        range=value_range,
        recommendations=list(recommendations),
    )


def assess_deficiency_risk(data: VitaminDInput) -> DeficiencyRisk:
    score = 0
    factors: List[RiskFactor] = []

    def add(points: int, factor: str, impact: FactorImpact, description: str) -> None:
        nonlocal score
        score += points
        factors.append(RiskFactor(factor=factor, impact=impact, description=description))

    if data.age > 65:
        add(2, "Advanced Age", FactorImpact.MODERATE,
            "Older adults have reduced ability to synthesize vitamin D")
    elif data.age < 18:
        add(1, "Young Age", FactorImpact.MODERATE,
            "Growing children and adolescents have higher vitamin D needs")

    if data.skin_type.is_dark:
        add(3, "Dark Skin Pigmentation", FactorImpact.HIGH,
            "Higher melanin reduces vitamin D synthesis from sun exposure")
    elif data.skin_type is SkinType.VERY_FAIR:
        add(0, "Fair Skin", FactorImpact.PROTECTIVE,
            "Fair skin synthesizes vitamin D more efficiently from sun exposure")

    if data.sun_exposure_hours < 1:
        add(3, "Limited Sun Exposure", FactorImpact.HIGH,
            "Minimal sun exposure significantly reduces vitamin D synthesis")
    elif data.sun_exposure_hours > 3:
        add(0, "Adequate Sun Exposure", FactorImpact.PROTECTIVE,
            "Regular sun exposure supports vitamin D synthesis")

    if data.season is Season.WINTER:
        add(2, "Winter Season", FactorImpact.MODERATE,
            "Reduced UV exposure during winter months decreases vitamin D synthesis")
    if data.latitude is not None and abs(data.latitude) > 35:
        add(2, "High Latitude Location", FactorImpact.MODERATE,
            "Living at higher latitudes reduces year-round UV exposure")
    if data.sunscreen_use is SunscreenUse.ALWAYS:
        add(1, "Frequent Sunscreen Use", FactorImpact.MODERATE,
            "Regular sunscreen use can reduce vitamin D synthesis")
    if data.bmi is not None and data.bmi > 30:
        add(2, "Obesity", FactorImpact.MODERATE,
            "Higher BMI is associated with lower vitamin D bioavailability")
    if MedicalCondition.MALABSORPTION in data.medical_conditions:
        add(3, "Malabsorption Disorder", FactorImpact.HIGH,
            "Malabsorption conditions significantly impair vitamin D absorption")
    if data.pregnancy_status is not PregnancyStatus.NOT_PREGNANT:
        add(1, "Pregnancy/Breastfeeding", FactorImpact.MODERATE,
            "Increased vitamin D needs during pregnancy and breastfeeding")

    if data.supplement_use is not SupplementUse.NONE:
        add(-2, "Vitamin D Supplementation", FactorImpact.PROTECTIVE,
            "Regular supplementation helps maintain adequate vitamin D levels")
    if data.dietary_intake is DietaryIntake.HIGH:
        add(-1, "High Dietary Intake", FactorImpact.PROTECTIVE,
            "Diet rich in vitamin D sources supports adequate levels")

    if data.season is Season.WINTER:
        note = "Levels typically run 10-15% lower; consider more supplementation in winter"
    else:
        note = "Levels are typically higher with more sun; keep exposure safe"

    return DeficiencyRisk(
        level=RISK_TABLE.classify(score),
        score=max(0, score),
        risk_factors=factors,
        seasonal_note=note,
    )


def sun_exposure(skin_type: SkinType, season: Season) -> SunExposure:
    optimal = skin_type.exposure_minutes() * season.exposure_multiplier()
    return SunExposure(
        minimum_minutes=round_int(optimal * 0.5),
        optimal_minutes=round_int(optimal),
        maximum_minutes=round_int(optimal * 2),
        spf=skin_type.spf(),
        precautions=list(SUN_PRECAUTIONS),
    )


def supplement_guidance(data: VitaminDInput, status: VitaminDStatus) -> SupplementGuidance:
    (minimum, optimal, maximum), duration = _DOSES[status.category]
    if optimal:
        if data.age > 65:
            optimal += 400
            maximum += 400
        if data.pregnancy_status is not PregnancyStatus.NOT_PREGNANT:
            optimal += 400
            maximum += 600
        if data.bmi is not None and data.bmi > 30:
            optimal = round_int(optimal * 1.5)
            maximum = round_int(maximum * 1.5)

    return SupplementGuidance(
        recommended=status.estimated or status.category in _BELOW_SUFFICIENT,
        daily_dose=DailyDose(minimum=minimum, optimal=optimal, maximum=maximum),
        supplement_type="Vitamin D3 (cholecalciferol), taken with a meal containing fat",
        duration=duration,
        contraindications=[
            note for condition, note in _CONTRAINDICATIONS.items()
            if condition in data.medical_conditions
        ],
    )


def _insights(data: VitaminDInput, risk: DeficiencyRisk) -> List[VitaminDInsight]:
    insights: List[VitaminDInsight] = []
    if data.season is Season.WINTER and risk.level is not RiskLevel.VERY_LOW:
        insights.append(VitaminDInsight(
            category="Seasonal Health",
            insight="Winter months significantly reduce vitamin D synthesis; "
                    "consider increasing supplementation",
        ))
    if data.skin_type.is_dark:
        insights.append(VitaminDInsight(
            category="Genetic Factors",
            insight="Higher melanin content requires longer sun exposure for adequate "
                    "vitamin D synthesis",
        ))
    if data.age > 65:
        insights.append(VitaminDInsight(
            category="Age-Related Changes",
            insight="Aging reduces the skin's ability to produce vitamin D; regular "
                    "supplementation is often necessary",
        ))
    if data.latitude is not None and abs(data.latitude) > 40:
        insights.append(VitaminDInsight(
            category="Geographic Location",
            insight="Living at higher latitudes limits year-round vitamin D synthesis "
                    "from sunlight",
        ))
    if data.sun_exposure_hours < 1 and data.supplement_use is SupplementUse.NONE:
        insights.append(VitaminDInsight(
            category="Lifestyle Pattern",
            insight="Limited sun exposure combined with no supplementation creates "
                    "high deficiency risk",
        ))
    return insights


def _warnings(data: VitaminDInput, status: VitaminDStatus) -> List[VitaminDWarning]:
    warnings: List[VitaminDWarning] = []
    if status.category is VitaminDCategory.SEVERE_DEFICIENCY:
        warnings.append(VitaminDWarning(
            level=VitaminDWarningLevel.URGENT,
            message="Severe vitamin D deficiency; medical attention recommended",
            recommendations=[
                "Consult a healthcare provider promptly",
                "Consider high-dose vitamin D therapy under supervision",
                "Evaluate for underlying causes",
                "Check calcium and phosphorus levels",
            ],
        ))
    if status.category is VitaminDCategory.EXCESSIVE:
        warnings.append(VitaminDWarning(
            level=VitaminDWarningLevel.URGENT,
            message="Vitamin D levels are in the toxic range",
            recommendations=[
                "Stop all vitamin D supplementation",
                "Seek medical evaluation",
                "Monitor for symptoms of toxicity",
                "Check calcium and kidney function",
            ],
        ))
    if (
        MedicalCondition.KIDNEY_DISEASE in data.medical_conditions
        and data.supplement_use is not SupplementUse.NONE
    ):
        warnings.append(VitaminDWarning(
            level=VitaminDWarningLevel.WARNING,
            message="Vitamin D supplementation with kidney disease requires medical supervision",
            recommendations=[
                "Consult a nephrologist before supplementing",
                "Monitor calcium and phosphorus levels",
                "Use only prescribed vitamin D forms",
            ],
        ))
    return warnings


class VitaminDService(ICalculator[VitaminDInput, VitaminDResult]):
    """
    Assess vitamin D status from a 25(OH)D level, or estimate it.

    Status (ng/mL; 1 ng/mL = 2.5 nmol/L):
        < 12     severe deficiency
        12-19    deficiency
        20-29    insufficient
        30-49    sufficient
        50-99    high normal
        >= 100   excessive

    Without a measured level the status comes from a rough estimate
    (25 ng/mL adjusted for sun, skin type, season, supplements and diet,
    clamped to 10-60) and supplementation is always recommended.
    """

    def calculate(self, data: VitaminDInput) -> VitaminDResult:
        if data.level is None:
            status = vitamin_d_status(estimate_level(data), estimated=True)
        else:
            status = vitamin_d_status(data.level)

        risk = assess_deficiency_risk(data)

        logger.debug(
            "vitamin_d.calculated",
            category=status.category.value,
            estimated=status.estimated,
            risk=risk.level.value,
        )

        return VitaminDResult(
            status=status,
            deficiency_risk=risk,
            sun_exposure=sun_exposure(data.skin_type, data.season),
            supplementation=supplement_guidance(data, status),
            food_sources=list(FOOD_SOURCES),
            insights=_insights(data, risk),
            warnings=_warnings(data, status),
        )
