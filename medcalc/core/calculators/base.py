"""
Clinical Calculator Layer — Base Types

Defines the data contracts every formula produces and the orchestrator
consumes. These are calculator-agnostic and consumed by the report renderer,
the audit log and the HTTP layer.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

# A single calculator input as it arrives from the caller.
ParameterValue = Union[int, float, str, bool, None]
Number = Union[int, float]


class CalculatorType(str, Enum):
    """Closed set of registry keys. The value is the public wire key."""
    BMI                     = "bmi"
    BSA                     = "bsa"
    IBW                     = "ibw"
    CHA2DS2_VASC            = "chads2-vasc"
    HAS_BLED                = "has-bled"
    CREATININE_CLEARANCE    = "creatinine-clearance"
    MDRD                    = "mdrd"
    CKD_EPI                 = "ckd-epi"
    PEDIATRIC_DOSING_WEIGHT = "pediatric-dosing-weight"
    SOFA                    = "sofa"
    QSOFA                   = "qsofa"
    WELLS                   = "wells"
    CURB65                  = "curb65"
    CHILD_PUGH              = "child-pugh"
    MELD                    = "meld"
    ANION_GAP               = "anion-gap"
    QTC_CORRECTION          = "qtc-correction"
    GLASGOW_COMA_SCALE      = "glasgow-coma-scale"
    PARKLAND_FORMULA        = "parkland-formula"

    @property
    def is_dosing(self) -> bool:
        """Dosing calculators carry the extended safety disclaimer."""
        return "dosing" in self.value or "dose" in self.value


class WarningLevel(str, Enum):
    """
    Severity of an advisory attached to a *successful* result.

    INFO              – context the clinician should know
    WARNING           – unusual input or borderline finding, verify
    CRITICAL_ADVISORY – maximally alarming label (e.g. dose above the known
                        ceiling). The number is still returned; nothing at
                        this level aborts. Aborts are exceptions, see
                        ``medcalc.utils.exceptions``.
    """
    INFO              = "info"
    WARNING           = "warning"
    CRITICAL_ADVISORY = "error"


class WarningCategory(str, Enum):
    CONTRAINDICATION = "contraindication"
    OVERDOSE         = "overdose"
    PREGNANCY        = "pregnancy"
    PEDIATRIC        = "pediatric"
    GERIATRIC        = "geriatric"


@dataclass(frozen=True)
class SafetyWarning:
    """One advisory message attached to a calculator result."""
    level: WarningLevel
    message: str
    category: Optional[WarningCategory] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"level": self.level.value, "message": self.message}
        if self.category is not None:
            data["category"] = self.category.value
        return data


@dataclass(frozen=True)
class CalculatorResult:
    """
    Output of one formula evaluation.

    Immutable: the orchestrator produces a new instance with the merged
    warnings (``with_warnings``) instead of mutating this one.
    """
    value: Number
    formula: str
    citation: str
    unit: Optional[str] = None
    interpretation: Optional[str] = None
    notes: Tuple[str, ...] = field(default_factory=tuple)
    warnings: Tuple[SafetyWarning, ...] = field(default_factory=tuple)

    def with_warnings(self, warnings: Tuple[SafetyWarning, ...]) -> "CalculatorResult":
        return CalculatorResult(
            value=self.value,
            formula=self.formula,
            citation=self.citation,
            unit=self.unit,
            interpretation=self.interpretation,
            notes=self.notes,
            warnings=tuple(warnings),
        )

    @property
    def has_critical_advisory(self) -> bool:
        return any(w.level == WarningLevel.CRITICAL_ADVISORY for w in self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "unit": self.unit,
            "interpretation": self.interpretation,
            "formula": self.formula,
            "citation": self.citation,
            "notes": list(self.notes),
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass(frozen=True)
class CalculatorResponse:
    """Structured result plus the rendered text report (disclaimer included)."""
    calculator_type: CalculatorType
    result: CalculatorResult
    formatted_output: str


def round_half_up(value: float, digits: int = 0) -> Number:
    """
    Round exact halves upward: ``floor(x * 10**n + 0.5) / 10**n``.
    Python's ``round`` rounds halves to even.
    """
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    if digits == 0:
        return int(rounded)
    return rounded
