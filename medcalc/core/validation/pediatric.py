"""
Pediatric Age Group Validation

Classifies patients into life-stage bands and checks weight plausibility
within the band before weight-based dosing.

Band boundaries:
    neonate     age ≤ 28 days
    infant      28 days < age ≤ 1 year (365.25 days)
    child       1 year < age < 13 years
    adolescent  13 ≤ age < 18 years
    adult       age ≥ 18 years
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from medcalc.utils.exceptions import ParameterValidationError

DAYS_PER_YEAR = 365.25
NEONATE_MAX_DAYS = 28


class PediatricAgeGroup(str, Enum):
    NEONATE    = "neonate"
    INFANT     = "infant"
    CHILD      = "child"
    ADOLESCENT = "adolescent"
    ADULT      = "adult"


@dataclass(frozen=True)
class PediatricAgeInfo:
    group: PediatricAgeGroup
    age_range: str
    description: str


PEDIATRIC_AGE_GROUPS: Dict[PediatricAgeGroup, PediatricAgeInfo] = {
    PediatricAgeGroup.NEONATE: PediatricAgeInfo(
        PediatricAgeGroup.NEONATE, "0-28 days", "Neonatal period (0-28 days of life)"),
    PediatricAgeGroup.INFANT: PediatricAgeInfo(
        PediatricAgeGroup.INFANT, "29 days - 1 year", "Infancy (29 days to 1 year)"),
    PediatricAgeGroup.CHILD: PediatricAgeInfo(
        PediatricAgeGroup.CHILD, "1-12 years", "Childhood (1-12 years)"),
    PediatricAgeGroup.ADOLESCENT: PediatricAgeInfo(
        PediatricAgeGroup.ADOLESCENT, "13-18 years", "Adolescence (13-18 years)"),
    PediatricAgeGroup.ADULT: PediatricAgeInfo(
        PediatricAgeGroup.ADULT, "18+ years", "Adulthood (18 years and older)"),
}

# Typical weight window (kg) per band. Adolescents and adults have none.
WEIGHT_WINDOWS: Dict[PediatricAgeGroup, Tuple[float, float]] = {
    PediatricAgeGroup.NEONATE: (0.5, 5.0),
    PediatricAgeGroup.INFANT:  (2.0, 15.0),
    PediatricAgeGroup.CHILD:   (8.0, 50.0),
}

_BAND_LABELS = {
    PediatricAgeGroup.NEONATE: "Neonate",
    PediatricAgeGroup.INFANT:  "Infant",
    PediatricAgeGroup.CHILD:   "Child",
}


@dataclass
class PediatricDosingValidation:
    valid: bool
    group: Optional[PediatricAgeGroup] = None
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def classify_age(age_years: float) -> PediatricAgeGroup:
    """
    Map an age in years to its life-stage band.

    Raises:
        ParameterValidationError: for a negative age.
    """
    if age_years < 0:
        raise ParameterValidationError("Age cannot be negative", parameter="age")

    age_days = age_years * DAYS_PER_YEAR

    if age_days <= NEONATE_MAX_DAYS:
        return PediatricAgeGroup.NEONATE
    if age_days <= DAYS_PER_YEAR:
        return PediatricAgeGroup.INFANT
    if age_years < 13:
        return PediatricAgeGroup.CHILD
    if age_years < 18:
        return PediatricAgeGroup.ADOLESCENT
    return PediatricAgeGroup.ADULT


def get_pediatric_age_info(age_years: float) -> PediatricAgeInfo:
    return PEDIATRIC_AGE_GROUPS[classify_age(age_years)]


def is_pediatric(age_years: float) -> bool:
    return age_years < 18


def validate_pediatric_dosing(age_years: float, weight_kg: float) -> PediatricDosingValidation:
    """
    Band-specific weight plausibility. A weight outside the band window is a
    warning; a negative age or weight is an error.
    """
    result = PediatricDosingValidation(valid=True)

    if age_years < 0:
        result.errors.append("Age cannot be negative")
    if weight_kg < 0:
        result.errors.append("Weight cannot be negative")
    if result.errors:
        result.valid = False
        return result

    group = classify_age(age_years)
    result.group = group

    window = WEIGHT_WINDOWS.get(group)
    if window is not None:
        low, high = window
        if weight_kg < low or weight_kg > high:
            result.warnings.append(
                f"{_BAND_LABELS[group]} weight outside typical range "
                f"({low:g}-{high:g} kg). Please verify."
            )

    return result
