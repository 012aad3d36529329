"""CholesterolService - lipid panel categories and cardiovascular risk."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import structlog

from ..shared.lookup import ThresholdTable
from ..shared.ports import ICalculator
from ..shared.rounding import round_half_up, round_int
from ..shared.units import CHOLESTEROL_MG_DL_PER_MMOL_L, TRIGLYCERIDE_MG_DL_PER_MMOL_L
from ..shared.value_objects import Gender
from .value_objects import (
    CardiovascularRisk,
    CholesterolInput,
    CholesterolRatios,
    CholesterolResult,
    FactorImpact,
    FamilyHistory,
    LipidInsight,
    LipidRatio,
    LipidReading,
    LipidType,
    LipidWarning,
    LipidWarningLevel,
    PhysicalActivity,
    RiskCategory,
    RiskFactor,
    SmokingStatus,
    StatinIntensity,
    StatinRecommendation,
    TreatmentPlan,
    TreatmentPriority,
)

logger = structlog.get_logger(__name__)

# Friedewald is unreliable above this triglyceride level (mg/dL)
FRIEDEWALD_MAX_TRIGLYCERIDES = 400.0

# NCEP ATP III cut points, mg/dL
LIPID_TABLES: Dict[LipidType, ThresholdTable[str]] = {
    LipidType.TOTAL: ThresholdTable(
        bounds=(200.0, 240.0), labels=("Desirable", "Borderline High", "High")
    ),
    LipidType.LDL: ThresholdTable(
        bounds=(100.0, 130.0, 160.0, 190.0),
        labels=("Optimal", "Near Optimal", "Borderline High", "High", "Very High"),
    ),
    LipidType.HDL: ThresholdTable(bounds=(40.0, 60.0), labels=("Low", "Borderline", "High")),
    LipidType.TRIGLYCERIDES: ThresholdTable(
        bounds=(150.0, 200.0, 500.0),
        labels=("Normal", "Borderline High", "High", "Very High"),
    ),
    LipidType.NON_HDL: ThresholdTable(
        bounds=(130.0, 160.0, 190.0),
        labels=("Optimal", "Near Optimal", "Borderline High", "High"),
    ),
}

LIPID_TARGETS: Dict[LipidType, str] = {
    LipidType.TOTAL: "<200 mg/dL",
    LipidType.LDL: "<100 mg/dL (varies by risk)",
    LipidType.HDL: ">40 mg/dL (men), >50 mg/dL (women)",
    LipidType.TRIGLYCERIDES: "<150 mg/dL",
    LipidType.NON_HDL: "<130 mg/dL (varies by risk)",
}

_NON_HDL_ADVICE = (
    "Focus on reducing total cholesterol",
    "Address all atherogenic lipoproteins",
    "Consider comprehensive therapy",
)

# (type, label) -> (range, recommendations)
_READING_DETAILS: Dict[Tuple[LipidType, str], Tuple[str, Tuple[str, ...]]] = {
    (LipidType.TOTAL, "Desirable"): (
        "<200 mg/dL",
        ("Maintain current healthy lifestyle", "Continue regular monitoring",
         "Focus on heart-healthy diet"),
    ),
    (LipidType.TOTAL, "Borderline High"): (
        "200-239 mg/dL",
        ("Adopt heart-healthy diet", "Increase physical activity",
         "Consider lifestyle counseling"),
    ),
    (LipidType.TOTAL, "High"): (
        "≥240 mg/dL",
        ("Implement comprehensive lifestyle changes", "Consult healthcare provider",
         "Consider medication evaluation"),
    ),
    (LipidType.LDL, "Optimal"): (
        "<100 mg/dL",
        ("Maintain excellent control", "Continue current management", "Regular monitoring"),
    ),
    (LipidType.LDL, "Near Optimal"): (
        "100-129 mg/dL",
        ("Optimize diet and exercise", "Consider risk factor modification", "Monitor closely"),
    ),
    (LipidType.LDL, "Borderline High"): (
        "130-159 mg/dL",
        ("Implement therapeutic lifestyle changes", "Consider medication if high risk",
         "Regular follow-up required"),
    ),
    (LipidType.LDL, "High"): (
        "160-189 mg/dL",
        ("Aggressive lifestyle modifications", "Likely medication needed",
         "Consult cardiologist"),
    ),
    (LipidType.LDL, "Very High"): (
        "≥190 mg/dL",
        ("Immediate medical attention", "High-intensity statin likely needed",
         "Screen for genetic causes"),
    ),
    (LipidType.HDL, "Low"): (
        "<40 mg/dL (men), <50 mg/dL (women)",
        ("Increase physical activity", "Quit smoking if applicable",
         "Consider niacin or fibrate therapy", "Weight loss if overweight"),
    ),
    (LipidType.HDL, "Borderline"): (
        "40-59 mg/dL",
        ("Regular aerobic exercise", "Moderate alcohol if appropriate",
         "Maintain healthy weight", "Monitor regularly"),
    ),
    (LipidType.HDL, "High"): (
        "≥60 mg/dL",
        ("Excellent! Maintain current lifestyle", "Continue regular exercise",
         "This provides cardioprotection"),
    ),
    (LipidType.TRIGLYCERIDES, "Normal"): (
        "<150 mg/dL",
        ("Maintain current lifestyle", "Continue healthy diet", "Regular physical activity"),
    ),
    (LipidType.TRIGLYCERIDES, "Borderline High"): (
        "150-199 mg/dL",
        ("Reduce refined carbohydrates", "Limit alcohol consumption",
         "Increase omega-3 fatty acids"),
    ),
    (LipidType.TRIGLYCERIDES, "High"): (
        "200-499 mg/dL",
        ("Significant dietary changes needed", "Consider medication",
         "Address insulin resistance"),
    ),
    (LipidType.TRIGLYCERIDES, "Very High"): (
        "≥500 mg/dL",
        ("Immediate medical attention", "Risk of pancreatitis", "Aggressive treatment needed"),
    ),
    (LipidType.NON_HDL, "Optimal"): ("<130 mg/dL", _NON_HDL_ADVICE),
    (LipidType.NON_HDL, "Near Optimal"): ("130-159 mg/dL", _NON_HDL_ADVICE),
    (LipidType.NON_HDL, "Borderline High"): ("160-189 mg/dL", _NON_HDL_ADVICE),
    (LipidType.NON_HDL, "High"): ("≥190 mg/dL", _NON_HDL_ADVICE),
}

_RATIO_LABELS = ("Excellent", "Good", "Borderline", "Poor")
TOTAL_TO_HDL_TABLE: ThresholdTable[str] = ThresholdTable(
    bounds=(3.5, 5.0, 6.0), labels=_RATIO_LABELS
)
LDL_TO_HDL_TABLE: ThresholdTable[str] = ThresholdTable(
    bounds=(2.0, 3.0, 4.0), labels=_RATIO_LABELS
)
TRIGLYCERIDE_TO_HDL_TABLE: ThresholdTable[str] = ThresholdTable(
    bounds=(2.0, 4.0, 6.0), labels=_RATIO_LABELS
)

# Ten-year risk (%)
RISK_TABLE: ThresholdTable[RiskCategory] = ThresholdTable(
    bounds=(5.0, 7.5, 20.0), labels=tuple(RiskCategory)
)

_MONITORING: Dict[RiskCategory, str] = {
    RiskCategory.LOW: "Annually",
    RiskCategory.BORDERLINE: "Annually",
    RiskCategory.INTERMEDIATE: "Every 3-6 months",
    RiskCategory.HIGH: "Every 6-12 weeks initially, then every 3-6 months",
}


def estimate_ldl(total: float, hdl: float, triglycerides: float) -> Optional[float]:
    """Friedewald LDL (mg/dL): total - HDL - triglycerides / 5.

    Returns None when triglycerides are too high for the equation or the
    estimate is not positive; a direct LDL measurement is needed then.
    """
    if triglycerides >= FRIEDEWALD_MAX_TRIGLYCERIDES:
        return None
    ldl = total - hdl - triglycerides / 5
    return ldl if ldl > 0 else None


def _reading(lipid_type: LipidType, value: float) -> LipidReading:
    label = LIPID_TABLES[lipid_type].classify(value)
    value_range, recommendations = _READING_DETAILS[(lipid_type, label)]
    per_mmol = (
        TRIGLYCERIDE_MG_DL_PER_MMOL_L
        if lipid_type is LipidType.TRIGLYCERIDES
        else CHOLESTEROL_MG_DL_PER_MMOL_L
    )
    return LipidReading(
        lipid_type=lipid_type,
        value_mg_dl=round_half_up(value, 1),
        value_mmol_l=round_half_up(value / per_mmol, 2),
        label=label,
        range=value_range,
        target=LIPID_TARGETS[lipid_type],
        recommendations=list(recommendations),
    )


def _ratio(value: float, table: ThresholdTable[str]) -> LipidRatio:
    return LipidRatio(value=round_half_up(value, 1), label=table.classify(value))


def assess_risk(data: CholesterolInput, ldl: Optional[float]) -> CardiovascularRisk:
    """Simplified point score turned into ten-year and lifetime risk estimates."""
    score = 0
    factors: List[RiskFactor] = []

    def add(points: int, factor: str, impact: FactorImpact, description: str) -> None:
        nonlocal score
        score += points
        factors.append(RiskFactor(factor=factor, impact=impact, description=description))

    male = data.gender is Gender.MALE
    if data.age >= 45:
        add(2 if male else 1, "Age", FactorImpact.MODERATE,
            f"Age {data.age} increases cardiovascular risk")
    if male:
        add(1, "Male Gender", FactorImpact.MODERATE, "Male gender is an independent risk factor")
    if data.hdl_cholesterol >= 60:
        add(-1, "High HDL", FactorImpact.PROTECTIVE,
            "High HDL cholesterol provides cardioprotection")
    elif data.hdl_cholesterol < 40:
        add(1, "Low HDL", FactorImpact.HIGH, "Low HDL cholesterol significantly increases risk")
    if data.smoking_status is SmokingStatus.CURRENT:
        add(2, "Current Smoking", FactorImpact.HIGH,
            "Smoking dramatically increases cardiovascular risk")
    if data.diabetes_status.risk_points():
        add(data.diabetes_status.risk_points(), "Diabetes", FactorImpact.HIGH,
            "Diabetes significantly increases cardiovascular risk")
    if data.family_history is not FamilyHistory.NONE:
        add(1, "Family History", FactorImpact.MODERATE,
            "Family history of premature cardiovascular disease")
    if data.prior_cvd:
        add(3, "Prior CVD", FactorImpact.HIGH,
            "Previous cardiovascular disease significantly increases risk")

    ten_year = float(min(max(score * 3, 1), 40))
    if ldl is not None and ldl > 160:
        ten_year *= 1.3
    if data.triglycerides > 200:
        ten_year *= 1.2

    return CardiovascularRisk(
        ten_year_risk=round_half_up(ten_year, 1),
        category=RISK_TABLE.classify(ten_year),
        lifetime_risk=round_int(min(ten_year * 2.5, 60.0)),
        risk_factors=factors,
    )


def treatment_plan(
    data: CholesterolInput, risk: CardiovascularRisk, ldl: Optional[float]
) -> TreatmentPlan:
    if data.prior_cvd or risk.category is RiskCategory.HIGH:
        target, priority = 70, TreatmentPriority.MEDICATION_INDICATED
        intensity = StatinIntensity.HIGH
        reasoning = "High-intensity statin recommended for very high risk patients"
    elif risk.category is RiskCategory.INTERMEDIATE or (ldl is not None and ldl >= 190):
        target, priority = 100, TreatmentPriority.MEDICATION_CONSIDERATION
        intensity = StatinIntensity.MODERATE
        reasoning = "Moderate-intensity statin should be considered"
    elif risk.category is RiskCategory.BORDERLINE:
        target, priority = 130, TreatmentPriority.MEDICATION_CONSIDERATION
        intensity = StatinIntensity.LOW
        reasoning = "Consider statin if lifestyle changes insufficient"
    else:
        target, priority = 130, TreatmentPriority.LIFESTYLE
        intensity = StatinIntensity.NONE
        reasoning = "Focus on lifestyle modifications first"

    smoker = data.smoking_status is SmokingStatus.CURRENT
    interventions = [
        "Adopt a heart-healthy diet (Mediterranean or DASH): 5-15% LDL reduction",
        "Regular aerobic exercise, 150 min/week at moderate intensity: "
        "5-10% LDL reduction and higher HDL",
        "Achieve and maintain a healthy weight: 5-20% lipid improvement",
        "Complete smoking cessation" if smoker else "Maintain tobacco-free status",
    ]

    return TreatmentPlan(
        ldl_target=target,
        priority=priority,
        statin=StatinRecommendation(
            indicated=intensity is not StatinIntensity.NONE,
            intensity=intensity,
            reasoning=reasoning,
        ),
        lifestyle_interventions=interventions,
        monitoring_frequency=_MONITORING[risk.category],
    )


def _insights(data: CholesterolInput, risk: CardiovascularRisk) -> List[LipidInsight]:
    insights: List[LipidInsight] = []
    if data.triglycerides / data.hdl_cholesterol > 3:
        insights.append(LipidInsight(
            category="Metabolic Pattern",
            insight="High triglyceride-to-HDL ratio suggests insulin resistance",
        ))
    high_factors = [f for f in risk.risk_factors if f.impact is FactorImpact.HIGH]
    if len(high_factors) >= 2:
        insights.append(LipidInsight(
            category="Risk Clustering",
            insight="Multiple high-risk factors present, aggressive intervention needed",
        ))
    if data.age < 40 and risk.category is not RiskCategory.LOW:
        insights.append(LipidInsight(
            category="Early Risk",
            insight="Elevated risk at young age may indicate genetic predisposition",
        ))
    if data.physical_activity is PhysicalActivity.SEDENTARY:
        insights.append(LipidInsight(
            category="Lifestyle",
            insight="Sedentary lifestyle significantly contributes to cardiovascular risk",
        ))
    return insights


def _warnings(
    data: CholesterolInput, risk: CardiovascularRisk, ldl: Optional[float]
) -> List[LipidWarning]:
    warnings: List[LipidWarning] = []
    if ldl is not None and ldl >= 190:
        warnings.append(LipidWarning(
            level=LipidWarningLevel.URGENT,
            message="LDL cholesterol ≥190 mg/dL indicates possible familial hypercholesterolemia",
            recommendations=[
                "Immediate consultation with lipid specialist",
                "Family screening recommended",
                "Genetic testing consideration",
                "Aggressive treatment indicated",
            ],
        ))
    if data.triglycerides >= 500:
        warnings.append(LipidWarning(
            level=LipidWarningLevel.URGENT,
            message="Triglycerides ≥500 mg/dL carry a risk of acute pancreatitis",
            recommendations=[
                "Immediate medical attention required",
                "Consider hospitalization if symptomatic",
                "Aggressive triglyceride-lowering therapy",
                "Strict dietary fat restriction",
            ],
        ))
    if risk.category is RiskCategory.HIGH and not data.prior_cvd:
        warnings.append(LipidWarning(
            level=LipidWarningLevel.WARNING,
            message="High cardiovascular risk equivalent to coronary disease",
            recommendations=[
                "Treat as secondary prevention",
                "Aggressive risk factor modification",
                "Consider cardiology consultation",
                "Frequent monitoring required",
            ],
        ))
    return warnings


class CholesterolService(ICalculator[CholesterolInput, CholesterolResult]):
    """
    Classify a lipid panel and estimate cardiovascular risk.

    Readings (mg/dL):
        Total:          <200 desirable, 200-239 borderline high, >=240 high
        LDL:            <100 optimal ... >=190 very high
        HDL:            <40 low, 40-59 borderline, >=60 high
        Triglycerides:  <150 normal ... >=500 very high
        Non-HDL:        total - HDL, <130 optimal ... >=190 high

    Missing LDL is estimated with the Friedewald equation
    (total - HDL - triglycerides / 5) when triglycerides are below 400.

    Example:
        total 220, HDL 45, triglycerides 150 -> LDL 145 (borderline high)
    """

    def calculate(self, data: CholesterolInput) -> CholesterolResult:
        ldl = data.ldl_cholesterol
        ldl_estimated = False
        if ldl is None:
            ldl = estimate_ldl(data.total_cholesterol, data.hdl_cholesterol, data.triglycerides)
            ldl_estimated = ldl is not None

        readings = [_reading(LipidType.TOTAL, data.total_cholesterol)]
        if ldl is not None:
            readings.append(_reading(LipidType.LDL, ldl))
        readings.append(_reading(LipidType.HDL, data.hdl_cholesterol))
        readings.append(_reading(LipidType.TRIGLYCERIDES, data.triglycerides))
        readings.append(
            _reading(LipidType.NON_HDL, data.total_cholesterol - data.hdl_cholesterol)
        )

        hdl = data.hdl_cholesterol
        ratios = CholesterolRatios(
            total_to_hdl=_ratio(data.total_cholesterol / hdl, TOTAL_TO_HDL_TABLE),
            ldl_to_hdl=_ratio(ldl / hdl, LDL_TO_HDL_TABLE) if ldl is not None else None,
            triglyceride_to_hdl=_ratio(data.triglycerides / hdl, TRIGLYCERIDE_TO_HDL_TABLE),
        )

        risk = assess_risk(data, ldl)

        logger.debug(
            "cholesterol.calculated",
            ldl_estimated=ldl_estimated,
            risk_category=risk.category.value,
        )

        return CholesterolResult(
            readings=readings,
            ldl_estimated=ldl_estimated,
            ratios=ratios,
            risk=risk,
            treatment=treatment_plan(data, risk, ldl),
            insights=_insights(data, risk),
            warnings=_warnings(data, risk, ldl),
        )
