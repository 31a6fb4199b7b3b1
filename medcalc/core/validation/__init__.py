"""
Validation Module

Input gates that run before any formula: absolute/typical ranges,
cross-parameter extreme-value sweep and pediatric band classification.
"""
from .ranges import (
    PARAMETER_RANGES,
    ParameterRange,
    RangeValidationResult,
    validate_range,
    validate_weight,
    validate_height,
    validate_age,
    validate_creatinine,
    validate_heart_rate,
    validate_systolic_bp,
    validate_diastolic_bp,
)
from .extremes import (
    ExtremeValueFinding,
    FindingSeverity,
    scan_extreme_values,
    validate_positive_numbers,
    validate_finite_numbers,
)
from .pediatric import (
    PediatricAgeGroup,
    PediatricAgeInfo,
    PEDIATRIC_AGE_GROUPS,
    classify_age,
    get_pediatric_age_info,
    is_pediatric,
    validate_pediatric_dosing,
)

__all__ = [
    "PARAMETER_RANGES",
    "ParameterRange",
    "RangeValidationResult",
    "validate_range",
    "validate_weight",
    "validate_height",
    "validate_age",
    "validate_creatinine",
    "validate_heart_rate",
    "validate_systolic_bp",
    "validate_diastolic_bp",
    "ExtremeValueFinding",
    "FindingSeverity",
    "scan_extreme_values",
    "validate_positive_numbers",
    "validate_finite_numbers",
    "PediatricAgeGroup",
    "PediatricAgeInfo",
    "PEDIATRIC_AGE_GROUPS",
    "classify_age",
    "get_pediatric_age_info",
    "is_pediatric",
    "validate_pediatric_dosing",
]
