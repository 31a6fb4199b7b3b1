"""
Contraindication Checking

Calculator-specific caveats about where a formula is (or is not) valid.
Advisory only: nothing here aborts an invocation.
"""
from typing import Any, List, Mapping

from medcalc.core.calculators.base import (
    CalculatorType,
    SafetyWarning,
    WarningCategory,
    WarningLevel,
)
from medcalc.core.validation.extremes import is_number

CG_UNSTABLE_CREATININE = 5      # mg/dL
CG_MIN_AGE = 18
CG_ELDERLY_AGE = 80


def _cockcroft_gault(params: Mapping[str, Any]) -> List[SafetyWarning]:
    warnings: List[SafetyWarning] = []
    creatinine = params.get("creatinine")
    age = params.get("age")

    if is_number(creatinine) and creatinine > CG_UNSTABLE_CREATININE:
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                "Cockcroft-Gault formula may not be accurate in unstable renal function "
                "or acute kidney injury. Consider alternative methods."
            ),
            category=WarningCategory.CONTRAINDICATION,
        ))

    if is_number(age) and age < CG_MIN_AGE:
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                "Cockcroft-Gault formula is validated for adults (≥18 years). For pediatric "
                "patients, consider Schwartz formula or other pediatric-specific methods."
            ),
            category=WarningCategory.CONTRAINDICATION,
        ))

    if is_number(age) and age > CG_ELDERLY_AGE:
        warnings.append(SafetyWarning(
            level=WarningLevel.INFO,
            message=(
                "Cockcroft-Gault formula may be less accurate in elderly patients "
                "(>80 years). Consider clinical context."
            ),
            category=WarningCategory.GERIATRIC,
        ))

    return warnings


def _cha2ds2_vasc(params: Mapping[str, Any]) -> List[SafetyWarning]:
    return [SafetyWarning(
        level=WarningLevel.INFO,
        message=(
            "CHA2DS2-VASc score is validated for patients with atrial fibrillation. "
            "Ensure patient has confirmed AF before using this score."
        ),
        category=WarningCategory.CONTRAINDICATION,
    )]


_RULES = {
    CalculatorType.CREATININE_CLEARANCE: _cockcroft_gault,
    CalculatorType.CHA2DS2_VASC: _cha2ds2_vasc,
}


def check_contraindications(calculator_type: str, params: Mapping[str, Any]) -> List[SafetyWarning]:
    """Return contraindication advisories for ``calculator_type`` (possibly none)."""
    try:
        key = CalculatorType(calculator_type)
    except ValueError:
        return []
    rule = _RULES.get(key)
    return rule(params) if rule else []
