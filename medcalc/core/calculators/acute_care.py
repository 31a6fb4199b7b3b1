"""
Acute Care Calculators — bedside ECG, neuro and burn assessments

    qtc-correction       heart-rate corrected QT interval     ms
    glasgow-coma-scale   GCS                                  3–15 points
    parkland-formula     burn resuscitation fluid, 24 h       mL
"""
from typing import Any, List, Mapping

from medcalc.core.calculators.base import (
    CalculatorResult,
    SafetyWarning,
    WarningLevel,
    round_half_up,
)
from medcalc.core.calculators.checks import check_range
from medcalc.core.calculators.params import GlasgowComaParams, ParklandParams, QtcParams
from medcalc.utils.exceptions import DomainError

# ── Thresholds ────────────────────────────────────────────────────────────────

QTC_HIGH_RISK  = 500
QTC_PROLONGED  = 480
QTC_BORDERLINE = 450

GCS_SEVERE   = 8
GCS_MODERATE = 12
GCS_SCALES = {
    "eyeOpening": ("Eye opening", 4),
    "verbalResponse": ("Verbal response", 5),
    "motorResponse": ("Motor response", 6),
}

PARKLAND_ML_PER_KG_PCT = 4
BURN_CENTER_TBSA = 20


# ── QTc ───────────────────────────────────────────────────────────────────────

_QTC_FORMULAS = {
    "bazett": ("Bazett's", "QTc = QT / √(RR in seconds)"),
    "fridericia": ("Fridericia's", "QTc = QT / ∛(RR in seconds)"),
    "framingham": ("Framingham", "QTc = QT + 154 × (1 - RR in seconds)"),
}


def correct_qt(qt_ms: float, rr_seconds: float, formula: str = "bazett") -> float:
    """Apply one of the three QT correction formulas. Returns milliseconds."""
    if formula == "bazett":
        return qt_ms / rr_seconds ** 0.5
    if formula == "fridericia":
        return qt_ms / rr_seconds ** (1 / 3)
    return qt_ms + 154 * (1 - rr_seconds)


def calculate_qtc(params: Mapping[str, Any]) -> CalculatorResult:
    """
    Corrected QT. The RR interval is taken from ``rr`` (ms) when supplied,
    otherwise derived from heart rate as 60000 / HR.

    Raises:
        DomainError: non-positive QT, or neither RR nor heart rate usable.
    """
    p = QtcParams.from_mapping(params)
    warnings: List[SafetyWarning] = []

    if p.qt <= 0:
        raise DomainError("QT interval must be positive", calculator="qtc-correction")

    if p.rr is not None and p.rr > 0:
        rr_ms = p.rr
    elif p.heart_rate is not None and p.heart_rate > 0:
        check_range(p.heart_rate, "heartRate", warnings)
        rr_ms = 60000 / p.heart_rate
    else:
        raise DomainError(
            "Either RR interval (ms) or heart rate (bpm) must be provided",
            calculator="qtc-correction",
        )

    qtc = correct_qt(p.qt, rr_ms / 1000, p.formula)
    name, description = _QTC_FORMULAS[p.formula]

    if qtc > QTC_HIGH_RISK:
        interpretation = "Prolonged QTc - HIGH RISK of torsades de pointes"
        warnings.append(SafetyWarning(
            level=WarningLevel.CRITICAL_ADVISORY,
            message=(
                "QTc >500 ms is associated with high risk of torsades de pointes. Review "
                "medications and consider discontinuation of QT-prolonging drugs."
            ),
        ))
    elif qtc > QTC_PROLONGED:
        interpretation = "Prolonged QTc - Moderate risk"
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                "QTc >480 ms (men) or >470 ms (women) is prolonged. Review medications for "
                "QT-prolonging effects."
            ),
        ))
    elif qtc > QTC_BORDERLINE:
        interpretation = "Borderline prolonged QTc"
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                "QTc >450 ms (men) or >470 ms (women) may be prolonged. Monitor and review "
                "medications."
            ),
        ))
    else:
        interpretation = "Normal QTc"

    return CalculatorResult(
        value=round_half_up(qtc),
        unit="ms",
        interpretation=interpretation,
        formula=f"{name} formula: {description}",
        citation=(
            "Bazett HC. An analysis of the time-relations of electrocardiograms. "
            "Heart. 1920;7:353-70."
        ),
        warnings=tuple(warnings),
        notes=(
            "Normal QTc: <450 ms (men), <470 ms (women)",
            f"RR interval: {round_half_up(rr_ms)} ms",
            "Prolonged QTc increases risk of torsades de pointes",
            "Many medications can prolong QT interval",
            "Review all medications for QT-prolonging effects",
        ),
    )


# ── Glasgow Coma Scale ────────────────────────────────────────────────────────

def calculate_gcs(params: Mapping[str, Any]) -> CalculatorResult:
    p = GlasgowComaParams.from_mapping(params)
    scores = {
        "eyeOpening": p.eye_opening,
        "verbalResponse": p.verbal_response,
        "motorResponse": p.motor_response,
    }
    for key, value in scores.items():
        label, top = GCS_SCALES[key]
        if value < 1 or value > top:
            raise DomainError(
                f"{label} score must be 1-{top}",
                calculator="glasgow-coma-scale",
                details={"parameter": key, "value": value},
            )
        if not float(value).is_integer():
            raise DomainError(
                f"{label} score must be a whole number (received: {value:g})",
                calculator="glasgow-coma-scale",
                details={"parameter": key, "value": value},
            )

    eye, verbal, motor = int(p.eye_opening), int(p.verbal_response), int(p.motor_response)
    gcs = eye + verbal + motor

    if gcs <= GCS_SEVERE:
        interpretation = "Severe brain injury - consider intubation"
    elif gcs <= GCS_MODERATE:
        interpretation = "Moderate brain injury"
    else:
        interpretation = "Mild or no brain injury"

    return CalculatorResult(
        value=gcs,
        unit="points",
        interpretation=interpretation,
        formula="GCS = Eye Opening + Verbal Response + Motor Response",
        citation=(
            "Teasdale G, Jennett B. Assessment of coma and impaired consciousness. "
            "Lancet. 1974;2(7872):81-4."
        ),
        notes=(
            f"Score components: E{eye} V{verbal} M{motor}",
            "Eye Opening: 4=Spontaneous, 3=To voice, 2=To pain, 1=None",
            "Verbal Response: 5=Oriented, 4=Confused, 3=Inappropriate words, "
            "2=Incomprehensible, 1=None",
            "Motor Response: 6=Obeys commands, 5=Localizes pain, 4=Withdraws, "
            "3=Abnormal flexion, 2=Extension, 1=None",
            "GCS ≤8: Severe brain injury, consider intubation",
            "GCS 9-12: Moderate brain injury",
            "GCS 13-15: Mild or no brain injury",
        ),
    )


# ── Parkland ──────────────────────────────────────────────────────────────────

def calculate_parkland(params: Mapping[str, Any]) -> CalculatorResult:
    """Total 24 h fluid = 4 mL × weight (kg) × %TBSA; half in the first 8 h."""
    p = ParklandParams.from_mapping(params)
    warnings: List[SafetyWarning] = []

    if p.weight <= 0:
        raise DomainError("Weight must be positive", calculator="parkland-formula")
    if p.burn_percentage <= 0 or p.burn_percentage > 100:
        raise DomainError(
            "Burn percentage must be between 0 and 100",
            calculator="parkland-formula",
            details={"burnPercentage": p.burn_percentage},
        )
    check_range(p.weight, "weight", warnings)

    total = PARKLAND_ML_PER_KG_PCT * p.weight * p.burn_percentage
    first_8h = total / 2
    next_16h = total / 2
    total_ml = round_half_up(total)

    if p.burn_percentage > BURN_CENTER_TBSA:
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                "Burns >20% TBSA require specialized burn care. "
                "Transfer to burn center if possible."
            ),
        ))

    return CalculatorResult(
        value=total_ml,
        unit="mL",
        interpretation=f"Total fluid: {total_ml} mL over 24 hours",
        formula="Parkland Formula: 4 mL × weight (kg) × %TBSA",
        citation=(
            "Baxter CR. Fluid volume and electrolyte changes in the early postburn period. "
            "Clin Plast Surg. 1974;1(4):693-703."
        ),
        warnings=tuple(warnings),
        notes=(
            f"Total fluid: {total_ml} mL over 24 hours",
            f"First 8 hours: {round_half_up(first_8h)} mL ({round_half_up(first_8h / 8)} mL/hour)",
            f"Next 16 hours: {round_half_up(next_16h)} mL ({round_half_up(next_16h / 16)} mL/hour)",
            "Use lactated Ringer's solution",
            "Adjust based on urine output (target: 0.5-1 mL/kg/hour)",
            "For burns >20% TBSA, consider transfer to burn center",
        ),
    )
