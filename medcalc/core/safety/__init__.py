"""
Safety Layer

Advisory checks attached to successful calculator results, plus the
mandatory disclaimer block. Nothing here aborts an invocation.
"""
from .advisors import advise
from .contraindications import check_contraindications
from .disclaimers import (
    CALCULATOR_DISCLAIMER,
    DOSING_DISCLAIMER,
    MEDICAL_DISCLAIMERS,
    format_with_disclaimer,
    get_calculator_disclaimer,
)
from .overdose import MAX_DAILY_DOSES, MaxDose, check_extreme_dose, check_overdose
from .pregnancy import check_pregnancy_lactation, get_pregnancy_lactation_reminder

__all__ = [
    "advise",
    "check_contraindications",
    "CALCULATOR_DISCLAIMER",
    "DOSING_DISCLAIMER",
    "MEDICAL_DISCLAIMERS",
    "format_with_disclaimer",
    "get_calculator_disclaimer",
    "MAX_DAILY_DOSES",
    "MaxDose",
    "check_extreme_dose",
    "check_overdose",
    "check_pregnancy_lactation",
    "get_pregnancy_lactation_reminder",
]
