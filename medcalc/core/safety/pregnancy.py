"""
Pregnancy and Lactation Warnings
"""
from typing import List

from medcalc.core.calculators.base import SafetyWarning, WarningCategory, WarningLevel


def check_pregnancy_lactation(is_pregnant: bool = False, is_lactating: bool = False) -> List[SafetyWarning]:
    """Explicit warnings for a patient flagged pregnant and/or lactating."""
    warnings: List[SafetyWarning] = []

    if is_pregnant:
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                "Patient is pregnant. Many drugs require dose adjustments or are "
                "contraindicated in pregnancy. Consult pregnancy category and manufacturer "
                "guidelines before prescribing."
            ),
            category=WarningCategory.PREGNANCY,
        ))

    if is_lactating:
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=(
                "Patient is lactating. Consider drug transfer to breast milk and potential "
                "effects on infant. Consult lactation safety data before prescribing."
            ),
            category=WarningCategory.PREGNANCY,
        ))

    return warnings


def get_pregnancy_lactation_reminder() -> SafetyWarning:
    """Generic reminder for dosing calculators when no flag was supplied."""
    return SafetyWarning(
        level=WarningLevel.INFO,
        message=(
            "If patient is pregnant or lactating, verify drug safety and dosing "
            "recommendations. Many drugs require special consideration in these populations."
        ),
        category=WarningCategory.PREGNANCY,
    )
