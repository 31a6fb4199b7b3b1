"""
Cardiovascular Calculators — anticoagulation risk scores

    chads2-vasc   stroke risk in atrial fibrillation     0–9 points
    has-bled      major bleeding risk on anticoagulation 0–9 points

The atrial-fibrillation precondition note for CHA₂DS₂-VASc is attached by
the contraindication advisor, not here.
"""
from typing import Any, List, Mapping

from medcalc.core.calculators.base import (
    CalculatorResult,
    SafetyWarning,
    WarningLevel,
)
from medcalc.core.calculators.checks import check_range, components_note
from medcalc.core.calculators.params import Cha2ds2VascParams, HasBledParams

# ── Thresholds ────────────────────────────────────────────────────────────────

CHA_AGE_HIGH     = 75    # +2
CHA_AGE_MODERATE = 65    # +1
HAS_BLED_ELDERLY = 65    # strictly greater than
HAS_BLED_HIGH    = 3


def calculate_cha2ds2_vasc(params: Mapping[str, Any]) -> CalculatorResult:
    p = Cha2ds2VascParams.from_mapping(params)
    warnings: List[SafetyWarning] = []
    check_range(p.age, "age", warnings)

    score = 0
    components: List[str] = []

    if p.chf:
        score += 1
        components.append("CHF (+1)")
    if p.hypertension:
        score += 1
        components.append("Hypertension (+1)")
    if p.age >= CHA_AGE_HIGH:
        score += 2
        components.append("Age ≥75 years (+2)")
    elif p.age >= CHA_AGE_MODERATE:
        score += 1
        components.append("Age 65-74 years (+1)")
    if p.diabetes:
        score += 1
        components.append("Diabetes (+1)")
    if p.stroke_tia:
        score += 2
        components.append("Stroke/TIA/Thromboembolism (+2)")
    if p.vascular_disease:
        score += 1
        components.append("Vascular disease (+1)")
    if p.female:
        score += 1
        components.append("Female sex (+1)")

    if score == 0:
        interpretation = "Low risk - No anticoagulation recommended (unless other indications)"
    elif score == 1:
        interpretation = "Low-moderate risk - Consider anticoagulation (warfarin, DOAC)"
    elif score <= 4:
        interpretation = "Moderate-high risk - Anticoagulation recommended (warfarin or DOAC)"
    else:
        interpretation = "High risk - Anticoagulation strongly recommended (warfarin or DOAC)"

    return CalculatorResult(
        value=score,
        unit="points",
        interpretation=interpretation,
        formula=(
            "CHADS2-VASc = CHF + Hypertension + Age + Diabetes + Stroke/TIA + "
            "Vascular disease + Sex"
        ),
        citation=(
            "Lip GY, et al. Refining clinical risk stratification for predicting stroke and "
            "thromboembolism in atrial fibrillation using a novel risk factor-based approach: "
            "the euro heart survey on atrial fibrillation. Chest. 2010;137(2):263-72."
        ),
        warnings=tuple(warnings),
        notes=(
            components_note(components),
            "This score helps guide anticoagulation decisions in atrial fibrillation.",
            "Consider bleeding risk (HAS-BLED score) when making anticoagulation decisions.",
            "DOACs (direct oral anticoagulants) are often preferred over warfarin.",
        ),
    )


def calculate_has_bled(params: Mapping[str, Any]) -> CalculatorResult:
    p = HasBledParams.from_mapping(params)
    warnings: List[SafetyWarning] = []
    check_range(p.age, "age", warnings)

    contributors = (
        (p.hypertension, "Hypertension (+1)"),
        (p.abnormal_renal, "Abnormal renal function (+1)"),
        (p.abnormal_liver, "Abnormal liver function (+1)"),
        (p.stroke, "Stroke (+1)"),
        (p.bleeding_history, "Bleeding history (+1)"),
        (p.labile_inr, "Labile INR (+1)"),
        (p.age > HAS_BLED_ELDERLY, "Elderly >65 years (+1)"),
        (p.drugs, "Drugs (antiplatelet/NSAID) (+1)"),
        (p.alcohol, "Alcohol (+1)"),
    )
    components = [label for present, label in contributors if present]
    score = len(components)

    if score >= HAS_BLED_HIGH:
        interpretation = (
            "High bleeding risk - Caution with anticoagulation - consider bleeding risk "
            "vs. stroke risk"
        )
    else:
        interpretation = (
            "Low-moderate bleeding risk - Generally safe for anticoagulation if indicated"
        )

    warnings.append(SafetyWarning(
        level=WarningLevel.INFO,
        message=(
            "HAS-BLED score should be used alongside CHADS2-VASc to balance stroke risk vs. "
            "bleeding risk in anticoagulation decisions."
        ),
    ))

    return CalculatorResult(
        value=score,
        unit="points",
        interpretation=interpretation,
        formula=(
            "HAS-BLED = Hypertension + Abnormal renal/liver + Stroke + Bleeding + "
            "Labile INR + Elderly + Drugs + Alcohol"
        ),
        citation=(
            "Pisters R, et al. A novel user-friendly score (HAS-BLED) to assess 1-year risk "
            "of major bleeding in patients with atrial fibrillation. Chest. 2010;138(5):1093-100."
        ),
        warnings=tuple(warnings),
        notes=(
            components_note(components),
            "Score ≥3: High bleeding risk",
            "Use alongside CHADS2-VASc to balance stroke vs. bleeding risk",
            "High HAS-BLED does not necessarily contraindicate anticoagulation",
        ),
    )
