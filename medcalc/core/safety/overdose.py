"""
Overdose Prevention

Per-drug mg/kg ceilings plus a drug-agnostic safety net for names the
table does not know. Exceeding a ceiling is labelled CRITICAL_ADVISORY:
the computed dose is still returned so the clinician can see it.
"""
from dataclasses import dataclass
from typing import Dict, List

from medcalc.core.calculators.base import (
    SafetyWarning,
    WarningCategory,
    WarningLevel,
    round_half_up,
)
from medcalc.core.validation.ranges import format_number as _fmt

APPROACHING_FRACTION = 0.9
EXTREME_DOSE_MG_KG = 100
VERY_HIGH_DOSE_MG_KG = 50


@dataclass(frozen=True)
class MaxDose:
    mg_kg: float
    notes: str


# Maximum daily dose limits (mg/kg/day). Extend with a formulary source.
MAX_DAILY_DOSES: Dict[str, MaxDose] = {
    "acetaminophen": MaxDose(75, "Maximum 4g/day in adults, 75 mg/kg/day in children"),
    "ibuprofen":     MaxDose(40, "Maximum 2400 mg/day in adults, 40 mg/kg/day in children"),
    "amoxicillin":   MaxDose(90, "Maximum 3g/day in adults, 90 mg/kg/day in children"),
}


def check_overdose(drug_name: str, dose_mg_kg: float, weight_kg: float) -> List[SafetyWarning]:
    """Compare a per-kg dose against the drug's ceiling, if the drug is known."""
    warnings: List[SafetyWarning] = []

    max_dose = MAX_DAILY_DOSES.get(drug_name.strip().lower())
    if max_dose is None:
        return warnings

    if dose_mg_kg > max_dose.mg_kg:
        warnings.append(SafetyWarning(
            level=WarningLevel.CRITICAL_ADVISORY,
            message=(
                f"Dose {_fmt(dose_mg_kg)} mg/kg exceeds maximum recommended dose of "
                f"{_fmt(max_dose.mg_kg)} mg/kg for {drug_name}. {max_dose.notes}. "
                f"DO NOT ADMINISTER without clinical review. "
                f"(Total {_fmt(round_half_up(dose_mg_kg * weight_kg, 2))} mg vs maximum "
                f"{_fmt(round_half_up(max_dose.mg_kg * weight_kg, 2))} mg for {_fmt(weight_kg)} kg.)"
            ),
            category=WarningCategory.OVERDOSE,
        ))
    elif dose_mg_kg >= max_dose.mg_kg * APPROACHING_FRACTION:
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                f"Dose {_fmt(dose_mg_kg)} mg/kg is approaching maximum recommended dose of "
                f"{_fmt(max_dose.mg_kg)} mg/kg for {drug_name}. Please verify."
            ),
            category=WarningCategory.OVERDOSE,
        ))

    return warnings


def check_extreme_dose(dose_mg_kg: float) -> List[SafetyWarning]:
    """Safety net applied to every drug, known or not."""
    if dose_mg_kg > EXTREME_DOSE_MG_KG:
        return [SafetyWarning(
            level=WarningLevel.CRITICAL_ADVISORY,
            message=(
                f"Dose {_fmt(dose_mg_kg)} mg/kg is extremely high (>100 mg/kg). Please verify "
                "calculation and drug name. DO NOT ADMINISTER without clinical review."
            ),
            category=WarningCategory.OVERDOSE,
        )]
    if dose_mg_kg > VERY_HIGH_DOSE_MG_KG:
        return [SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                f"Dose {_fmt(dose_mg_kg)} mg/kg is very high (>50 mg/kg). Please verify "
                "calculation and drug name."
            ),
            category=WarningCategory.OVERDOSE,
        )]
    return []
