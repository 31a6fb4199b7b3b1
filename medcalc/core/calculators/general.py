"""
General Calculators — body size

    bmi   Body Mass Index                       kg/m²
    bsa   Body Surface Area (Mosteller)         m²
    ibw   Ideal Body Weight (Devine)            kg

Heights are normalised to centimetres before the range table is applied,
so ``heightUnit="m"`` or ``"inches"`` is range-checked on the same scale.
"""
from typing import Any, List, Mapping

from medcalc.core.calculators.base import CalculatorResult, SafetyWarning, round_half_up
from medcalc.core.calculators.checks import check_range
from medcalc.core.calculators.params import BodyMeasureParams, IdealBodyWeightParams
from medcalc.core.calculators.units import cm_to_inches, cm_to_metres, height_to_cm
from medcalc.utils.exceptions import DomainError

# ── Thresholds ────────────────────────────────────────────────────────────────

BMI_UNDERWEIGHT = 18.5
BMI_NORMAL      = 25
BMI_OVERWEIGHT  = 30

DEVINE_MIN_HEIGHT_IN = 60
DEVINE_BASE_MALE     = 50
DEVINE_BASE_FEMALE   = 45.5
DEVINE_KG_PER_INCH   = 2.3


def _body_measures(p: BodyMeasureParams, warnings: List[SafetyWarning]) -> float:
    height_cm = height_to_cm(p.height, p.height_unit)
    check_range(p.weight, "weight", warnings)
    check_range(height_cm, "height", warnings)
    return height_cm


def calculate_bmi(params: Mapping[str, Any]) -> CalculatorResult:
    """BMI = weight (kg) / height (m)²."""
    p = BodyMeasureParams.from_mapping(params, "bmi")
    warnings: List[SafetyWarning] = []
    height_m = cm_to_metres(_body_measures(p, warnings))

    bmi = p.weight / (height_m * height_m)

    if bmi < BMI_UNDERWEIGHT:
        interpretation = "Underweight"
    elif bmi < BMI_NORMAL:
        interpretation = "Normal weight"
    elif bmi < BMI_OVERWEIGHT:
        interpretation = "Overweight"
    else:
        interpretation = "Obese"

    return CalculatorResult(
        value=round_half_up(bmi, 1),
        unit="kg/m²",
        interpretation=interpretation,
        formula="BMI = weight (kg) / height (m)²",
        citation="World Health Organization. BMI classification.",
        warnings=tuple(warnings),
        notes=(
            "BMI is a screening tool and does not directly measure body fat.",
            "May not be accurate for athletes, elderly, or those with high muscle mass.",
        ),
    )


def calculate_bsa(params: Mapping[str, Any]) -> CalculatorResult:
    """BSA (m²) = √[(height (cm) × weight (kg)) / 3600]."""
    p = BodyMeasureParams.from_mapping(params, "bsa")
    warnings: List[SafetyWarning] = []
    height_cm = _body_measures(p, warnings)

    bsa = ((height_cm * p.weight) / 3600) ** 0.5

    return CalculatorResult(
        value=round_half_up(bsa, 2),
        unit="m²",
        formula="BSA = √[(height (cm) × weight (kg)) / 3600] (Mosteller formula)",
        citation=(
            "Mosteller RD. Simplified calculation of body-surface area. "
            "N Engl J Med. 1987;317(17):1098."
        ),
        warnings=tuple(warnings),
        notes=(
            "Mosteller formula is commonly used for drug dosing and chemotherapy.",
            "Alternative formulas: DuBois (BSA = 0.007184 × height^0.725 × weight^0.425) or Haycock.",
        ),
    )


def calculate_ibw(params: Mapping[str, Any]) -> CalculatorResult:
    """
    Devine ideal body weight.

        male:   IBW = 50   + 2.3 × (height (in) − 60)
        female: IBW = 45.5 + 2.3 × (height (in) − 60)

    Raises:
        DomainError: height below 60 inches, where the formula is undefined.
    """
    p = IdealBodyWeightParams.from_mapping(params)
    warnings: List[SafetyWarning] = []

    height_cm = height_to_cm(p.height, p.height_unit)
    check_range(height_cm, "height", warnings)
    height_in = cm_to_inches(height_cm)

    if height_in < DEVINE_MIN_HEIGHT_IN:
        raise DomainError(
            "Devine formula is not validated for height < 60 inches (152 cm)",
            calculator="ibw",
            details={"height_inches": round_half_up(height_in, 1)},
        )

    base = DEVINE_BASE_MALE if p.gender == "male" else DEVINE_BASE_FEMALE
    ibw = base + DEVINE_KG_PER_INCH * (height_in - DEVINE_MIN_HEIGHT_IN)

    return CalculatorResult(
        value=round_half_up(ibw, 1),
        unit="kg",
        formula=(
            f"IBW = {base:g} + 2.3 × (height (inches) - 60) (Devine formula, {p.gender})"
        ),
        citation="Devine BJ. Gentamicin therapy. Drug Intell Clin Pharm. 1974;8:650-655.",
        warnings=tuple(warnings),
        notes=(
            "IBW is used for drug dosing calculations, especially for aminoglycosides.",
            "Alternative formulas: Robinson (similar to Devine) or adjusted body weight for obese patients.",
            "For patients > 120% IBW, consider using adjusted body weight.",
        ),
    )
