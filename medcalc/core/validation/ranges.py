"""
Parameter Range Validation

Static absolute and "typical" bounds per physiological quantity.
A value outside the hard bounds is invalid (the caller must abort);
a value outside the soft bounds is valid but carries a warning.
"""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ParameterRange:
    """Hard bounds ``min``/``max`` with optional soft bounds ``warn_min``/``warn_max``."""
    min: float
    max: float
    unit: str
    warn_min: Optional[float] = None
    warn_max: Optional[float] = None

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Range min {self.min} exceeds max {self.max}")
        if self.has_soft_bounds and not (
            self.min <= self.warn_min <= self.warn_max <= self.max
        ):
            raise ValueError(
                f"Soft bounds {self.warn_min}-{self.warn_max} must lie within "
                f"{self.min}-{self.max}"
            )

    @property
    def has_soft_bounds(self) -> bool:
        return self.warn_min is not None and self.warn_max is not None


@dataclass(frozen=True)
class RangeValidationResult:
    valid: bool
    warning: Optional[str] = None
    error: Optional[str] = None


PARAMETER_RANGES: Dict[str, ParameterRange] = {
    "weight":      ParameterRange(10,   500, "kg",    warn_min=20,  warn_max=200),
    "height":      ParameterRange(50,   250, "cm",    warn_min=100, warn_max=220),
    "age":         ParameterRange(0,    150, "years", warn_min=0,   warn_max=120),
    "creatinine":  ParameterRange(0.1,  20,  "mg/dL", warn_min=0.5, warn_max=1.5),
    "heartRate":   ParameterRange(20,   250, "bpm",   warn_min=50,  warn_max=120),
    "systolicBP":  ParameterRange(50,   300, "mmHg",  warn_min=90,  warn_max=140),
    "diastolicBP": ParameterRange(30,   200, "mmHg",  warn_min=60,  warn_max=90),
}


def format_number(number: float) -> str:
    """70.0 -> "70", 1.25 -> "1.25"."""
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


_fmt = format_number


def validate_range(value: float, parameter_name: str) -> RangeValidationResult:
    """
    Check ``value`` against the range table entry for ``parameter_name``.

    Raises:
        KeyError: if ``parameter_name`` has no range table entry.
    """
    rng = PARAMETER_RANGES[parameter_name]

    if value < rng.min or value > rng.max:
        return RangeValidationResult(
            valid=False,
            error=(
                f"{parameter_name} value {_fmt(value)} {rng.unit} is outside acceptable range "
                f"({_fmt(rng.min)}-{_fmt(rng.max)} {rng.unit}). Please verify input."
            ),
        )

    if rng.has_soft_bounds and (value < rng.warn_min or value > rng.warn_max):
        return RangeValidationResult(
            valid=True,
            warning=(
                f"{parameter_name} value {_fmt(value)} {rng.unit} is outside typical range "
                f"({_fmt(rng.warn_min)}-{_fmt(rng.warn_max)} {rng.unit}). Please verify."
            ),
        )

    return RangeValidationResult(valid=True)


def validate_weight(weight: float) -> RangeValidationResult:
    return validate_range(weight, "weight")


def validate_height(height: float) -> RangeValidationResult:
    return validate_range(height, "height")


def validate_age(age: float) -> RangeValidationResult:
    return validate_range(age, "age")


def validate_creatinine(creatinine: float) -> RangeValidationResult:
    return validate_range(creatinine, "creatinine")


def validate_heart_rate(heart_rate: float) -> RangeValidationResult:
    return validate_range(heart_rate, "heartRate")


def validate_systolic_bp(systolic_bp: float) -> RangeValidationResult:
    return validate_range(systolic_bp, "systolicBP")


def validate_diastolic_bp(diastolic_bp: float) -> RangeValidationResult:
    return validate_range(diastolic_bp, "diastolicBP")
