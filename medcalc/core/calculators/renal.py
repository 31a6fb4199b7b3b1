"""
Renal Calculators — kidney function estimates

    creatinine-clearance   Cockcroft-Gault CrCl       mL/min
    mdrd                   4-variable MDRD eGFR       mL/min/1.73m²
    ckd-epi                CKD-EPI eGFR               mL/min/1.73m²

All three equations are validated for adults only and raise DomainError
below 18 years. Results are staged on the KDIGO CKD thresholds.
"""
from typing import Any, List, Mapping, Tuple

from medcalc.core.calculators.base import (
    CalculatorResult,
    SafetyWarning,
    WarningLevel,
    round_half_up,
)
from medcalc.core.calculators.checks import check_range
from medcalc.core.calculators.params import CockcroftGaultParams, EgfrParams
from medcalc.core.calculators.units import creatinine_mgdl_to_umol
from medcalc.core.validation.ranges import format_number as _fmt
from medcalc.utils.exceptions import DomainError

ADULT_AGE = 18

# (lower bound, interpretation, CKD stage), highest first
CKD_STAGES: Tuple[Tuple[float, str, str], ...] = (
    (90, "Normal or high", "Stage 1-2 (if kidney damage present)"),
    (60, "Mildly decreased", "Stage 2"),
    (45, "Mildly to moderately decreased", "Stage 3a"),
    (30, "Moderately to severely decreased", "Stage 3b"),
    (15, "Severely decreased", "Stage 4"),
)
KIDNEY_FAILURE = ("Kidney failure", "Stage 5 (dialysis may be needed)")


def stage_kidney_function(rate: float) -> str:
    """Interpretation string for a clearance / eGFR value in mL/min."""
    for lower, interpretation, stage in CKD_STAGES:
        if rate >= lower:
            return f"{interpretation} - CKD {stage}"
    interpretation, stage = KIDNEY_FAILURE
    return f"{interpretation} - CKD {stage}"


def _require_adult(age: float, message: str, calculator: str) -> None:
    if age < ADULT_AGE:
        raise DomainError(message, calculator=calculator, details={"age": age})


def _creatinine_note(creatinine: float) -> str:
    umol = round_half_up(creatinine_mgdl_to_umol(creatinine), 1)
    return f"Serum creatinine: {_fmt(creatinine)} mg/dL ({_fmt(umol)} µmol/L)"


def calculate_creatinine_clearance(params: Mapping[str, Any]) -> CalculatorResult:
    """
    Cockcroft-Gault:

        CrCl = [(140 − age) × weight × (0.85 if female)] / (72 × creatinine)
    """
    p = CockcroftGaultParams.from_mapping(params)
    warnings: List[SafetyWarning] = []
    check_range(p.age, "age", warnings)
    check_range(p.weight, "weight", warnings)
    check_range(p.creatinine, "creatinine", warnings)
    _require_adult(
        p.age,
        "Cockcroft-Gault formula is validated for adults (≥18 years). "
        "For pediatric patients, consider Schwartz formula.",
        "creatinine-clearance",
    )

    is_female = p.gender == "female"
    gender_factor = 0.85 if is_female else 1.0
    crcl = ((140 - p.age) * p.weight * gender_factor) / (72 * p.creatinine)

    return CalculatorResult(
        value=round_half_up(crcl, 1),
        unit="mL/min",
        interpretation=stage_kidney_function(crcl),
        formula=(
            f"CrCl = [(140 - age) × weight (kg) × {gender_factor}] / "
            f"[72 × creatinine (mg/dL)] (Cockcroft-Gault, {p.gender})"
        ),
        citation=(
            "Cockcroft DW, Gault MH. Prediction of creatinine clearance from serum creatinine. "
            "Nephron. 1976;16(1):31-41."
        ),
        warnings=tuple(warnings),
        notes=(
            "Used for drug dosing adjustments in renal impairment.",
            "For more accurate GFR estimation, consider MDRD or CKD-EPI equations.",
            "Formula assumes stable renal function. Not accurate in acute kidney injury.",
            f"Gender factor: {'0.85 (female)' if is_female else '1.0 (male)'}",
            _creatinine_note(p.creatinine),
        ),
    )


def calculate_mdrd(params: Mapping[str, Any]) -> CalculatorResult:
    """eGFR = 175 × Cr^−1.154 × age^−0.203 × (0.742 if female) × (1.212 if black)."""
    p = EgfrParams.from_mapping(params, "mdrd")
    warnings: List[SafetyWarning] = []
    check_range(p.age, "age", warnings)
    check_range(p.creatinine, "creatinine", warnings)
    _require_adult(p.age, "MDRD equation is validated for adults (≥18 years)", "mdrd")

    is_female = p.gender == "female"
    egfr = 175 * p.creatinine ** -1.154 * p.age ** -0.203
    if is_female:
        egfr *= 0.742
    if p.is_black:
        egfr *= 1.212

    return CalculatorResult(
        value=round_half_up(egfr, 1),
        unit="mL/min/1.73m²",
        interpretation=stage_kidney_function(egfr),
        formula=(
            f"eGFR = 175 × (creatinine^-1.154) × (age^-0.203) × "
            f"{'0.742' if is_female else '1.0'} × {'1.212' if p.is_black else '1.0'} "
            f"(MDRD, {p.gender}{', black' if p.is_black else ''})"
        ),
        citation=(
            "Levey AS, et al. A more accurate method to estimate glomerular filtration rate "
            "from serum creatinine: a new prediction equation. Ann Intern Med. 1999;130(6):461-70."
        ),
        warnings=tuple(warnings),
        notes=(
            "MDRD equation estimates GFR normalized to 1.73 m² body surface area",
            "More accurate than Cockcroft-Gault for GFR estimation",
            "Note: Race coefficient (1.212 for black) is controversial - some guidelines "
            "recommend race-neutral equations",
            "For more recent estimates, consider CKD-EPI equation",
            _creatinine_note(p.creatinine),
        ),
    )


def calculate_ckd_epi(params: Mapping[str, Any]) -> CalculatorResult:
    """
    CKD-EPI, piecewise by sex on min(Cr/κ, 1):

        eGFR = 141 × min(Cr/κ, 1)^α × 0.993^age × (1.018 if female)

    κ = 0.7 / 0.9 and α = −0.329 / −0.411 for female / male. The legacy race
    multiplier (1.159) applies only when race-neutral mode is switched off.
    """
    p = EgfrParams.from_mapping(params, "ckd-epi")
    warnings: List[SafetyWarning] = []
    check_range(p.age, "age", warnings)
    check_range(p.creatinine, "creatinine", warnings)
    _require_adult(p.age, "CKD-EPI equation is validated for adults (≥18 years)", "ckd-epi")

    is_female = p.gender == "female"
    kappa, alpha = (0.7, -0.329) if is_female else (0.9, -0.411)
    ratio = min(p.creatinine / kappa, 1)

    egfr = 141 * ratio ** alpha * 0.993 ** p.age
    if is_female:
        egfr *= 1.018
    if not p.use_race_neutral and p.is_black:
        egfr *= 1.159

    if p.use_race_neutral:
        warnings.append(SafetyWarning(
            level=WarningLevel.INFO,
            message=(
                "Using race-neutral CKD-EPI equation (2021 version). "
                "This is the current recommended approach."
            ),
        ))

    return CalculatorResult(
        value=round_half_up(egfr, 1),
        unit="mL/min/1.73m²",
        interpretation=stage_kidney_function(egfr),
        formula=(
            f"CKD-EPI equation ("
            f"{'race-neutral' if p.use_race_neutral else 'with race coefficient'}, {p.gender})"
        ),
        citation=(
            "Levey AS, et al. A new equation to estimate glomerular filtration rate. "
            "Ann Intern Med. 2009;150(9):604-12."
        ),
        warnings=tuple(warnings),
        notes=(
            "CKD-EPI is more accurate than MDRD, especially at GFR >60",
            "Race-neutral version (2021) is now recommended",
            "More accurate for drug dosing than MDRD",
            _creatinine_note(p.creatinine),
        ),
    )
