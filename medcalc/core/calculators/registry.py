"""
Calculator Registry

Static mapping of every CalculatorType to its formula function. The set of
calculators is closed: an import-time check fails loudly if a CalculatorType
member is missing here.

Adding a calculator:
    1. Add a member to CalculatorType (base.py)
    2. Add a typed record to params.py
    3. Implement calculate_<name>(params) -> CalculatorResult in its family module
    4. Register it in _REGISTRY below
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping

from .acute_care import calculate_gcs, calculate_parkland, calculate_qtc
from .base import CalculatorResult, CalculatorType
from .cardiovascular import calculate_cha2ds2_vasc, calculate_has_bled
from .critical_care import (
    calculate_anion_gap,
    calculate_child_pugh,
    calculate_curb65,
    calculate_meld,
    calculate_qsofa,
    calculate_sofa,
    calculate_wells,
)
from .dosing import calculate_pediatric_dosing_weight
from .general import calculate_bmi, calculate_bsa, calculate_ibw
from .renal import calculate_ckd_epi, calculate_creatinine_clearance, calculate_mdrd
from medcalc.utils.exceptions import UnknownCalculatorError

CalculatorFn = Callable[[Mapping[str, Any]], CalculatorResult]


@dataclass(frozen=True)
class CalculatorDefinition:
    calculator_type: CalculatorType
    title: str
    description: str
    compute: CalculatorFn

    def to_dict(self) -> Dict[str, Any]:
        return {
            "calculator_type": self.calculator_type.value,
            "title": self.title,
            "description": self.description,
            "dosing": self.calculator_type.is_dosing,
        }


def _define(calculator_type: CalculatorType, title: str, description: str, compute: CalculatorFn):
    return calculator_type, CalculatorDefinition(calculator_type, title, description, compute)


# ── Registry: calculator type → definition ───────────────────────────────────
_REGISTRY: Dict[CalculatorType, CalculatorDefinition] = dict([
    _define(CalculatorType.BMI, "Body Mass Index",
            "Weight relative to height squared, WHO weight bands", calculate_bmi),
    _define(CalculatorType.BSA, "Body Surface Area",
            "Mosteller body surface area for drug dosing", calculate_bsa),
    _define(CalculatorType.IBW, "Ideal Body Weight",
            "Devine ideal body weight from height and sex", calculate_ibw),
    _define(CalculatorType.CHA2DS2_VASC, "CHA2DS2-VASc Score",
            "Stroke risk in atrial fibrillation", calculate_cha2ds2_vasc),
    _define(CalculatorType.HAS_BLED, "HAS-BLED Score",
            "Major bleeding risk on anticoagulation", calculate_has_bled),
    _define(CalculatorType.CREATININE_CLEARANCE, "Creatinine Clearance",
            "Cockcroft-Gault creatinine clearance with CKD staging",
            calculate_creatinine_clearance),
    _define(CalculatorType.MDRD, "MDRD eGFR",
            "4-variable MDRD estimated glomerular filtration rate", calculate_mdrd),
    _define(CalculatorType.CKD_EPI, "CKD-EPI eGFR",
            "CKD-EPI estimated glomerular filtration rate, race-neutral by default",
            calculate_ckd_epi),
    _define(CalculatorType.PEDIATRIC_DOSING_WEIGHT, "Pediatric Weight-Based Dosing",
            "Total dose from mg/kg and weight with overdose and age-band checks",
            calculate_pediatric_dosing_weight),
    _define(CalculatorType.SOFA, "SOFA Score",
            "Sequential organ failure assessment in ICU patients", calculate_sofa),
    _define(CalculatorType.QSOFA, "qSOFA Score",
            "Quick bedside sepsis screen", calculate_qsofa),
    _define(CalculatorType.WELLS, "Wells Score",
            "Pretest probability of pulmonary embolism", calculate_wells),
    _define(CalculatorType.CURB65, "CURB-65 Score",
            "Community-acquired pneumonia severity", calculate_curb65),
    _define(CalculatorType.CHILD_PUGH, "Child-Pugh Score",
            "Cirrhosis severity and prognosis class", calculate_child_pugh),
    _define(CalculatorType.MELD, "MELD Score",
            "End-stage liver disease transplant priority", calculate_meld),
    _define(CalculatorType.ANION_GAP, "Anion Gap",
            "Serum anion gap for metabolic acidosis work-up", calculate_anion_gap),
    _define(CalculatorType.QTC_CORRECTION, "QTc Correction",
            "Heart-rate corrected QT interval (Bazett, Fridericia, Framingham)",
            calculate_qtc),
    _define(CalculatorType.GLASGOW_COMA_SCALE, "Glasgow Coma Scale",
            "Level of consciousness from eye, verbal and motor responses", calculate_gcs),
    _define(CalculatorType.PARKLAND_FORMULA, "Parkland Formula",
            "24-hour burn resuscitation fluid requirement", calculate_parkland),
])

_missing = [t.value for t in CalculatorType if t not in _REGISTRY]
if _missing:
    raise RuntimeError(f"Calculator types without a registered formula: {', '.join(_missing)}")


def available_calculators() -> List[str]:
    """Registry keys in declaration order."""
    return [t.value for t in _REGISTRY]


def has_calculator(calculator_type: str) -> bool:
    try:
        return CalculatorType(calculator_type) in _REGISTRY
    except ValueError:
        return False


def resolve_calculator_type(calculator_type: str) -> CalculatorType:
    """
    Raises:
        UnknownCalculatorError: if ``calculator_type`` is not a registry key.
    """
    try:
        return CalculatorType(calculator_type)
    except ValueError:
        raise UnknownCalculatorError(calculator_type, available_calculators()) from None


def get_calculator(calculator_type: str) -> CalculatorDefinition:
    return _REGISTRY[resolve_calculator_type(calculator_type)]


def list_calculators() -> List[CalculatorDefinition]:
    return list(_REGISTRY.values())
