"""
Dosing Calculators

    pediatric-dosing-weight   Dose (mg) = dose per kg (mg/kg) × weight (kg)

Weight is not checked against the adult range table (10–500 kg): neonates
weigh far less. It is governed by the extreme-value scanner and by the
per-band plausibility window. Overdose and pregnancy/lactation advisories
are attached by the advisor dispatch.
"""
from typing import Any, List, Mapping

from medcalc.core.calculators.base import (
    CalculatorResult,
    SafetyWarning,
    WarningCategory,
    WarningLevel,
    round_half_up,
)
from medcalc.core.calculators.checks import check_range
from medcalc.core.calculators.params import PediatricDosingParams
from medcalc.core.validation.pediatric import (
    get_pediatric_age_info,
    validate_pediatric_dosing,
)
from medcalc.core.validation.ranges import format_number as _fmt
from medcalc.utils.exceptions import ParameterValidationError


def calculate_pediatric_dosing_weight(params: Mapping[str, Any]) -> CalculatorResult:
    p = PediatricDosingParams.from_mapping(params)
    warnings: List[SafetyWarning] = []
    check_range(p.age, "age", warnings)

    validation = validate_pediatric_dosing(p.age, p.weight)
    if not validation.valid:
        message = f"Pediatric validation errors: {', '.join(validation.errors)}"
        raise ParameterValidationError(message, parameter="age", errors=validation.errors)
    for message in validation.warnings:
        warnings.append(SafetyWarning(
            level=WarningLevel.WARNING,
            message=message,
            category=WarningCategory.PEDIATRIC,
        ))

    age_info = get_pediatric_age_info(p.age)
    warnings.append(SafetyWarning(
        level=WarningLevel.INFO,
        message=(
            f"Patient age group: {age_info.description} ({age_info.age_range}). "
            "Pediatric dosing may require age-specific considerations."
        ),
        category=WarningCategory.PEDIATRIC,
    ))

    total_dose = round_half_up(p.dose_per_kg * p.weight, 2)

    return CalculatorResult(
        value=total_dose,
        unit="mg",
        interpretation=(
            f"Total dose: {_fmt(total_dose)} mg "
            f"({_fmt(p.dose_per_kg)} mg/kg × {_fmt(p.weight)} kg)"
        ),
        formula="Dose (mg) = Dose per kg (mg/kg) × Weight (kg)",
        citation=(
            "Pediatric dosing guidelines vary by drug. Consult drug-specific references "
            "and institutional protocols."
        ),
        warnings=tuple(warnings),
        notes=(
            f"Drug: {p.drug_name}",
            f"Patient: {_fmt(p.age)} years old, {_fmt(p.weight)} kg ({age_info.description})",
            f"Dosing: {_fmt(p.dose_per_kg)} mg/kg",
            "Always verify dosing with drug-specific references.",
            "Consider age-specific pharmacokinetic differences in pediatric patients.",
            "Monitor for therapeutic response and adverse effects.",
        ),
    )
