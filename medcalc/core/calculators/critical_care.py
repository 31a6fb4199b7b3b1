"""
Critical Care Calculators — organ failure, sepsis, VTE, pneumonia, liver

    sofa         Sequential Organ Failure Assessment        0–24 points
    qsofa        quick SOFA sepsis screen                   0–3 points
    wells        Wells score for PE probability             0–12.5 points
    curb65       CURB-65 pneumonia severity                 0–5 points
    anion-gap    Na⁺ − (Cl⁻ + HCO₃⁻)                         mEq/L
    child-pugh   Child-Pugh cirrhosis severity              5–15 points
    meld         MELD transplant priority                   6–40 points
"""
import math
from typing import Any, List, Mapping, Tuple

from medcalc.core.calculators.base import CalculatorResult, SafetyWarning, round_half_up
from medcalc.core.calculators.checks import check_range, components_note
from medcalc.core.calculators.params import (
    AnionGapParams,
    ChildPughParams,
    Curb65Params,
    MeldParams,
    QsofaParams,
    SofaParams,
    WellsParams,
)
from medcalc.utils.exceptions import DomainError, MissingParameterError

# ── Thresholds ────────────────────────────────────────────────────────────────

# SOFA sub-score cut-offs as (threshold, points), checked in order
SOFA_RESPIRATORY = ((100, 4), (200, 3), (300, 2), (400, 1))      # PaO2/FiO2 below
SOFA_PLATELETS   = ((20, 4), (50, 3), (100, 2), (150, 1))        # ×10³/µL below
SOFA_BILIRUBIN   = ((12, 4), (6, 3), (2, 2), (1.2, 1))           # mg/dL at or above
SOFA_CARDIO      = ((3, 4), (2, 3), (1, 1))                      # proxy at or above
SOFA_CNS         = ((6, 4), (10, 3), (13, 2), (15, 1))           # GCS below
SOFA_RENAL       = ((5, 4), (3.5, 3), (2, 2), (1.2, 1))          # mg/dL at or above
SOFA_GCS_MIN     = 3
SOFA_GCS_MAX     = 15

QSOFA_SBP = 100
QSOFA_RR  = 22

WELLS_HR = 100

CURB_UREA_MMOL = 7
CURB_UREA_MGDL = 19
CURB_RR        = 30
CURB_SBP       = 90
CURB_DBP       = 60
CURB_AGE       = 65

ANION_GAP_HIGH = 16
ANION_GAP_LOW  = 8

MELD_CAP          = 40
MELD_DIALYSIS_CR  = 4.0


# ── Helpers ───────────────────────────────────────────────────────────────────

def _points_below(value: float, table: Tuple[Tuple[float, int], ...]) -> int:
    for threshold, points in table:
        if value < threshold:
            return points
    return 0


def _points_at_or_above(value: float, table: Tuple[Tuple[float, int], ...]) -> int:
    for threshold, points in table:
        if value >= threshold:
            return points
    return 0


# ── SOFA ──────────────────────────────────────────────────────────────────────

def calculate_sofa(params: Mapping[str, Any]) -> CalculatorResult:
    """
    Simplified SOFA. Each organ system scores 0–4; the cardiovascular input is
    a 0–3+ proxy for MAP/vasopressor use. Anuria (urineOutput == 0) scores
    renal 4 regardless of creatinine, which may then be omitted.

    Raises:
        MissingParameterError: creatinine absent without anuria.
        DomainError: cns outside the Glasgow Coma Scale (3-15).
    """
    p = SofaParams.from_mapping(params)
    warnings: List[SafetyWarning] = []

    anuric = p.urine_output == 0
    if p.creatinine is None and not anuric:
        raise MissingParameterError("creatinine", "sofa")
    if p.creatinine is not None:
        check_range(p.creatinine, "creatinine", warnings)
    if p.cns < SOFA_GCS_MIN or p.cns > SOFA_GCS_MAX:
        raise DomainError(
            f"CNS score is a Glasgow Coma Scale total and must be {SOFA_GCS_MIN}-{SOFA_GCS_MAX}",
            calculator="sofa",
            details={"parameter": "cns", "value": p.cns},
        )

    renal = 4 if anuric else _points_at_or_above(p.creatinine, SOFA_RENAL)
    subscores = (
        ("Respiratory", _points_below(p.respiratory, SOFA_RESPIRATORY)),
        ("Platelets", _points_below(p.platelets, SOFA_PLATELETS)),
        ("Bilirubin", _points_at_or_above(p.bilirubin, SOFA_BILIRUBIN)),
        ("Cardiovascular", _points_at_or_above(p.cardiovascular, SOFA_CARDIO)),
        ("CNS", _points_below(p.cns, SOFA_CNS)),
        ("Renal", renal),
    )
    score = sum(points for _, points in subscores)
    components = [f"{name}: {points}" for name, points in subscores if points]

    if score >= 15:
        interpretation = "Very high risk of mortality"
    elif score >= 10:
        interpretation = "High risk of mortality"
    elif score >= 5:
        interpretation = "Moderate risk"
    else:
        interpretation = "Low risk"

    return CalculatorResult(
        value=score,
        unit="points",
        interpretation=interpretation,
        formula="SOFA = Respiratory + Platelets + Bilirubin + Cardiovascular + CNS + Renal",
        citation=(
            "Vincent JL, et al. The SOFA (Sepsis-related Organ Failure Assessment) score to "
            "describe organ dysfunction/failure. Intensive Care Med. 1996;22(7):707-10."
        ),
        warnings=tuple(warnings),
        notes=(
            components_note(components),
            "Maximum score: 24 points",
            "Higher scores indicate worse organ dysfunction",
            "Used to track organ failure over time in ICU patients",
        ),
    )


# ── qSOFA ─────────────────────────────────────────────────────────────────────

def calculate_qsofa(params: Mapping[str, Any]) -> CalculatorResult:
    p = QsofaParams.from_mapping(params)
    warnings: List[SafetyWarning] = []
    check_range(p.systolic_bp, "systolicBP", warnings)

    contributors = (
        (p.altered_mental_status, "Altered mental status (+1)"),
        (p.systolic_bp <= QSOFA_SBP, "Systolic BP ≤100 mmHg (+1)"),
        (p.respiratory_rate >= QSOFA_RR, "Respiratory rate ≥22/min (+1)"),
    )
    components = [label for present, label in contributors if present]
    score = len(components)

    if score >= 2:
        interpretation = "High risk of poor outcome - consider sepsis evaluation"
    else:
        interpretation = "Low risk"

    return CalculatorResult(
        value=score,
        unit="points",
        interpretation=interpretation,
        formula="qSOFA = Altered mental status + Systolic BP ≤100 + Respiratory rate ≥22",
        citation=(
            "Singer M, et al. The Third International Consensus Definitions for Sepsis and "
            "Septic Shock (Sepsis-3). JAMA. 2016;315(8):801-10."
        ),
        warnings=tuple(warnings),
        notes=(
            components_note(components),
            "Maximum score: 3 points",
            "Score ≥2 suggests increased risk of poor outcome",
            "Used as a quick bedside screening tool for sepsis",
        ),
    )


# ── Wells ─────────────────────────────────────────────────────────────────────

def calculate_wells(params: Mapping[str, Any]) -> CalculatorResult:
    p = WellsParams.from_mapping(params)
    warnings: List[SafetyWarning] = []
    check_range(p.heart_rate, "heartRate", warnings)

    contributors = (
        (p.clinical_symptoms_dvt, 3, "Clinical symptoms of DVT (+3)"),
        (p.pe_more_likely, 3, "PE more likely than alternative diagnosis (+3)"),
        (p.heart_rate > WELLS_HR, 1.5, "Heart rate >100 bpm (+1.5)"),
        (p.immobility or p.surgery, 1.5, "Immobility or surgery (+1.5)"),
        (p.previous_dvt, 1.5, "Previous DVT/PE (+1.5)"),
        (p.hemoptysis, 1, "Hemoptysis (+1)"),
        (p.malignancy, 1, "Malignancy (+1)"),
    )
    score = sum(points for present, points, _ in contributors if present)
    components = [label for present, _, label in contributors if present]

    if score > 6:
        interpretation = "High probability - consider diagnostic imaging"
    elif score > 4:
        interpretation = "Moderate probability - consider diagnostic imaging"
    else:
        interpretation = "Low probability - D-dimer may be helpful"

    return CalculatorResult(
        value=round_half_up(score, 1),
        unit="points",
        interpretation=interpretation,
        formula=(
            "Wells Score = Clinical DVT symptoms + PE more likely + Heart rate + "
            "Immobility/Surgery + Previous DVT/PE + Hemoptysis + Malignancy"
        ),
        citation=(
            "Wells PS, et al. Derivation of a simple clinical model to categorize patients "
            "probability of pulmonary embolism. J Thromb Haemost. 2000;85(3):416-20."
        ),
        warnings=tuple(warnings),
        notes=(
            components_note(components),
            "Score >6: High probability",
            "Score 4-6: Moderate probability",
            "Score <4: Low probability",
        ),
    )


# ── CURB-65 ───────────────────────────────────────────────────────────────────

def calculate_curb65(params: Mapping[str, Any]) -> CalculatorResult:
    p = Curb65Params.from_mapping(params)
    warnings: List[SafetyWarning] = []
    check_range(p.age, "age", warnings)
    check_range(p.systolic_bp, "systolicBP", warnings)
    check_range(p.diastolic_bp, "diastolicBP", warnings)

    urea_threshold = CURB_UREA_MGDL if p.urea_unit == "mg/dL" else CURB_UREA_MMOL
    contributors = (
        (p.confusion, "Confusion (+1)"),
        (p.urea > urea_threshold, f"Urea >{urea_threshold} {p.urea_unit} (+1)"),
        (p.respiratory_rate >= CURB_RR, "Respiratory rate ≥30/min (+1)"),
        (p.systolic_bp < CURB_SBP or p.diastolic_bp < CURB_DBP, "Blood pressure <90/60 mmHg (+1)"),
        (p.age >= CURB_AGE, "Age ≥65 years (+1)"),
    )
    components = [label for present, label in contributors if present]
    score = len(components)

    if score >= 3:
        interpretation = "Severe pneumonia - Consider hospital admission, possibly ICU"
    elif score == 2:
        interpretation = "Moderate severity - Consider hospital admission"
    else:
        interpretation = "Low severity - May be suitable for outpatient treatment"

    return CalculatorResult(
        value=score,
        unit="points",
        interpretation=interpretation,
        formula="CURB-65 = Confusion + Urea + Respiratory rate + Blood pressure + Age",
        citation=(
            "Lim WS, et al. BTS guidelines for the management of community acquired pneumonia "
            "in adults. Thorax. 2001;56 Suppl 4:IV1-64."
        ),
        warnings=tuple(warnings),
        notes=(
            components_note(components),
            "Score 0-1: Low severity, consider outpatient",
            "Score 2: Moderate severity, consider hospital admission",
            "Score ≥3: Severe, consider ICU admission",
        ),
    )


# ── Anion gap ─────────────────────────────────────────────────────────────────

def calculate_anion_gap(params: Mapping[str, Any]) -> CalculatorResult:
    p = AnionGapParams.from_mapping(params)
    if p.sodium <= 0 or p.chloride <= 0 or p.bicarbonate <= 0:
        raise DomainError(
            "Sodium, chloride, and bicarbonate must be positive values",
            calculator="anion-gap",
        )

    anion_gap = p.sodium - (p.chloride + p.bicarbonate)

    if anion_gap > ANION_GAP_HIGH:
        interpretation = (
            "High anion gap metabolic acidosis - consider: ketoacidosis, lactic acidosis, "
            "toxins, renal failure"
        )
    elif anion_gap < ANION_GAP_LOW:
        interpretation = (
            "Low anion gap - consider: hypoalbuminemia, multiple myeloma, lithium toxicity"
        )
    else:
        interpretation = "Normal anion gap"

    return CalculatorResult(
        value=round_half_up(anion_gap, 1),
        unit="mEq/L",
        interpretation=interpretation,
        formula="Anion Gap = Na⁺ - (Cl⁻ + HCO₃⁻)",
        citation=(
            "Emmett M, Narins RG. Clinical use of the anion gap. "
            "Medicine (Baltimore). 1977;56(1):38-54."
        ),
        notes=(
            "Normal range: 8-16 mEq/L",
            "High anion gap suggests unmeasured anions (lactate, ketones, etc.)",
            "Low anion gap is less common",
        ),
    )


# ── Child-Pugh ────────────────────────────────────────────────────────────────

_GRADE_POINTS = {"none": 1, "mild": 2, "moderate-severe": 3}
_GRADE_LABELS = {"none": "No", "mild": "Mild", "moderate-severe": "Moderate-severe"}


def calculate_child_pugh(params: Mapping[str, Any]) -> CalculatorResult:
    p = ChildPughParams.from_mapping(params)
    components: List[str] = []

    if p.bilirubin < 2:
        bilirubin = 1
        components.append("Bilirubin <2 mg/dL (1)")
    elif p.bilirubin <= 3:
        bilirubin = 2
        components.append("Bilirubin 2-3 mg/dL (2)")
    else:
        bilirubin = 3
        components.append("Bilirubin >3 mg/dL (3)")

    if p.albumin > 3.5:
        albumin = 1
        components.append("Albumin >3.5 g/dL (1)")
    elif p.albumin >= 2.8:
        albumin = 2
        components.append("Albumin 2.8-3.5 g/dL (2)")
    else:
        albumin = 3
        components.append("Albumin <2.8 g/dL (3)")

    if p.inr < 1.7:
        inr = 1
        components.append("INR <1.7 (1)")
    elif p.inr <= 2.3:
        inr = 2
        components.append("INR 1.7-2.3 (2)")
    else:
        inr = 3
        components.append("INR >2.3 (3)")

    ascites = _GRADE_POINTS[p.ascites]
    components.append(f"{_GRADE_LABELS[p.ascites]} ascites ({ascites})")
    encephalopathy = _GRADE_POINTS[p.encephalopathy]
    components.append(f"{_GRADE_LABELS[p.encephalopathy]} encephalopathy ({encephalopathy})")

    score = bilirubin + albumin + inr + ascites + encephalopathy

    if score <= 6:
        interpretation = (
            "Class A - Well-compensated disease - "
            "Good prognosis, 1-year survival ~100%"
        )
    elif score <= 9:
        interpretation = (
            "Class B - Significant functional compromise - "
            "Moderate prognosis, 1-year survival ~80%"
        )
    else:
        interpretation = (
            "Class C - Decompensated disease - "
            "Poor prognosis, 1-year survival ~45%"
        )

    return CalculatorResult(
        value=score,
        unit="points",
        interpretation=interpretation,
        formula="Child-Pugh = Bilirubin + Albumin + INR + Ascites + Encephalopathy",
        citation=(
            "Pugh RN, et al. Transection of the oesophagus for bleeding oesophageal varices. "
            "Br J Surg. 1973;60(8):646-9."
        ),
        notes=(
            components_note(components),
            "Class A (5-6 points): Good prognosis",
            "Class B (7-9 points): Moderate prognosis",
            "Class C (10-15 points): Poor prognosis",
            "Used to assess prognosis and guide treatment in cirrhosis",
        ),
    )


# ── MELD ──────────────────────────────────────────────────────────────────────

def calculate_meld(params: Mapping[str, Any]) -> CalculatorResult:
    """
    MELD = 3.78·ln(bilirubin) + 11.2·ln(INR) + 9.57·ln(creatinine) + 6.43

    Each laboratory value is floored at 1.0; dialysis sets creatinine to 4.0.
    The rounded score is capped at 40.
    """
    p = MeldParams.from_mapping(params)
    if p.bilirubin <= 0 or p.inr <= 0 or p.creatinine <= 0:
        raise DomainError(
            "Bilirubin, INR, and creatinine must be positive values",
            calculator="meld",
        )
    warnings: List[SafetyWarning] = []
    check_range(p.creatinine, "creatinine", warnings)

    bilirubin = max(p.bilirubin, 1)
    inr = max(p.inr, 1)
    creatinine = MELD_DIALYSIS_CR if p.on_dialysis else max(p.creatinine, 1)

    raw = (
        3.78 * math.log(bilirubin)
        + 11.2 * math.log(inr)
        + 9.57 * math.log(creatinine)
        + 6.43
    )
    meld = min(round_half_up(raw), MELD_CAP)

    if meld >= 25:
        interpretation = "Very high priority for liver transplant"
    elif meld >= 18:
        interpretation = "High priority for liver transplant"
    elif meld >= 15:
        interpretation = "Moderate priority"
    else:
        interpretation = "Lower priority"

    notes = [
        f"MELD Score: {meld} points",
        "Used for liver transplant prioritization",
        "MELD ≥25: Very high priority",
        "MELD 18-24: High priority",
        "MELD 15-17: Moderate priority",
        "MELD <15: Lower priority",
    ]
    if p.on_dialysis:
        notes.append("Patient on dialysis - creatinine set to 4.0 mg/dL")

    return CalculatorResult(
        value=meld,
        unit="points",
        interpretation=interpretation,
        formula="MELD = 3.78 × ln(bilirubin) + 11.2 × ln(INR) + 9.57 × ln(creatinine) + 6.43",
        citation=(
            "Kamath PS, et al. A model to predict survival in patients with end-stage liver "
            "disease. Hepatology. 2001;33(2):464-70."
        ),
        warnings=tuple(warnings),
        notes=tuple(notes),
    )
