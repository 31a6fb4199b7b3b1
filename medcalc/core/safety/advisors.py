"""
Advisor Dispatch

Runs the advisory layer for one calculator type after its formula has
succeeded. Some calculators trigger no advisor at all.

    creatinine-clearance      contraindications
    chads2-vasc               contraindications
    pediatric-dosing-weight   overdose, extreme dose, pregnancy/lactation
"""
from typing import Any, List, Mapping

from medcalc.core.calculators.base import CalculatorType, SafetyWarning
from medcalc.core.calculators.params import PediatricDosingParams

from .contraindications import check_contraindications
from .overdose import check_extreme_dose, check_overdose
from .pregnancy import check_pregnancy_lactation, get_pregnancy_lactation_reminder


def _dosing_advisories(params: Mapping[str, Any]) -> List[SafetyWarning]:
    p = PediatricDosingParams.from_mapping(params)
    warnings: List[SafetyWarning] = []
    warnings.extend(check_overdose(p.drug_name, p.dose_per_kg, p.weight))
    warnings.extend(check_extreme_dose(p.dose_per_kg))
    if p.is_pregnant or p.is_lactating:
        warnings.extend(check_pregnancy_lactation(p.is_pregnant, p.is_lactating))
    else:
        warnings.append(get_pregnancy_lactation_reminder())
    return warnings


def advise(calculator_type: CalculatorType, params: Mapping[str, Any]) -> List[SafetyWarning]:
    """All advisor warnings for a successful ``calculator_type`` invocation, in order."""
    warnings = check_contraindications(calculator_type, params)
    if calculator_type == CalculatorType.PEDIATRIC_DOSING_WEIGHT:
        warnings.extend(_dosing_advisories(params))
    return warnings
