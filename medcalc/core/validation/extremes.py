"""
Extreme Value Detection

Input-integrity guards that run on every invocation regardless of which
calculator is selected. These catch typos (a shifted decimal point, a
weight entered in grams) that may still fall inside a clinical range.

Gate order used by the engine:
    1. validate_finite_numbers / validate_positive_numbers  (any field)
    2. scan_extreme_values                                  (weight, height, age, creatinine)
"""
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Dict, List, Mapping

import numpy as np

from .ranges import format_number as _fmt


class FindingSeverity(str, Enum):
    """
    FATAL   – physiologically impossible, aborts the invocation
    WARNING – unusual but possible, carried forward as an advisory
    """
    FATAL   = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ExtremeValueFinding:
    """A single extreme-value hit."""
    parameter: str
    severity: FindingSeverity
    message: str
    is_extreme: bool = True

    @property
    def is_fatal(self) -> bool:
        return self.severity == FindingSeverity.FATAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parameter": self.parameter,
            "is_extreme": self.is_extreme,
            "severity": self.severity.value,
            "message": self.message,
        }


def is_number(value: Any) -> bool:
    """True for real numbers; booleans are flags, not numbers."""
    return isinstance(value, Real) and not isinstance(value, bool)


def _numeric(params: Mapping[str, Any], name: str):
    value = params.get(name)
    return value if is_number(value) else None


def scan_extreme_values(params: Mapping[str, Any]) -> List[ExtremeValueFinding]:
    """
    Cross-parameter sanity sweep. Absent or non-numeric fields are skipped.

    Thresholds:
        weight      >500 fatal, (200, 500] warning, <0.5 fatal
        height      >250 fatal, (220, 250] warning, <30 fatal
        age         >120 warning, <0 fatal
        creatinine  >15 warning (consider AKI), <0.1 warning
    """
    findings: List[ExtremeValueFinding] = []

    weight = _numeric(params, "weight")
    if weight is not None:
        if weight > 500:
            findings.append(ExtremeValueFinding(
                "weight", FindingSeverity.FATAL,
                f"Weight {_fmt(weight)} kg is extremely high (>500 kg). Please verify input.",
            ))
        elif weight > 200:
            findings.append(ExtremeValueFinding(
                "weight", FindingSeverity.WARNING,
                f"Weight {_fmt(weight)} kg is very high (>200 kg). Please verify.",
            ))
        if weight < 0.5:
            findings.append(ExtremeValueFinding(
                "weight", FindingSeverity.FATAL,
                f"Weight {_fmt(weight)} kg is extremely low (<0.5 kg). Please verify input.",
            ))

    height = _numeric(params, "height")
    if height is not None:
        if height > 250:
            findings.append(ExtremeValueFinding(
                "height", FindingSeverity.FATAL,
                f"Height {_fmt(height)} cm is extremely high (>250 cm). Please verify input.",
            ))
        elif height > 220:
            findings.append(ExtremeValueFinding(
                "height", FindingSeverity.WARNING,
                f"Height {_fmt(height)} cm is very high (>220 cm). Please verify.",
            ))
        if height < 30:
            findings.append(ExtremeValueFinding(
                "height", FindingSeverity.FATAL,
                f"Height {_fmt(height)} cm is extremely low (<30 cm). Please verify input.",
            ))

    age = _numeric(params, "age")
    if age is not None:
        if age > 120:
            findings.append(ExtremeValueFinding(
                "age", FindingSeverity.WARNING,
                f"Age {_fmt(age)} years is very high (>120 years). Please verify.",
            ))
        if age < 0:
            findings.append(ExtremeValueFinding(
                "age", FindingSeverity.FATAL,
                "Age cannot be negative.",
            ))

    creatinine = _numeric(params, "creatinine")
    if creatinine is not None:
        if creatinine > 15:
            findings.append(ExtremeValueFinding(
                "creatinine", FindingSeverity.WARNING,
                f"Creatinine {_fmt(creatinine)} mg/dL is very high (>15 mg/dL). "
                "Please verify and consider acute kidney injury.",
            ))
        if creatinine < 0.1:
            findings.append(ExtremeValueFinding(
                "creatinine", FindingSeverity.WARNING,
                f"Creatinine {_fmt(creatinine)} mg/dL is very low (<0.1 mg/dL). Please verify.",
            ))

    return findings


def validate_positive_numbers(params: Mapping[str, Any]) -> List[str]:
    """One error string per numeric field below zero, whatever it represents."""
    errors: List[str] = []
    for key, value in params.items():
        if is_number(value) and value < 0:
            errors.append(f"{key} cannot be negative (received: {_fmt(value)})")
    return errors


def validate_finite_numbers(params: Mapping[str, Any]) -> List[str]:
    """
    One error string per NaN/Inf numeric field. NaN compares false against
    every threshold, so it would otherwise slip through all range checks.
    """
    errors: List[str] = []
    for key, value in params.items():
        if not is_number(value):
            continue
        try:
            finite = bool(np.isfinite(float(value)))
        except OverflowError:
            finite = False
        if not finite:
            errors.append(f"{key} must be a finite number (received: {value})")
    return errors
