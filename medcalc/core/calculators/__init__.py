"""
Clinical Calculator Layer

Formula registry and the data contracts every calculator produces.

Usage:
    from medcalc.core.calculators import CalculatorType, get_calculator
    from medcalc.core.calculators.engine import CalculatorEngine

    engine = CalculatorEngine()
    response = engine.invoke(CalculatorType.BMI, {"weight": 70, "height": 175})
"""
from .base import (
    CalculatorResponse,
    CalculatorResult,
    CalculatorType,
    SafetyWarning,
    WarningCategory,
    WarningLevel,
    round_half_up,
)
from .registry import (
    CalculatorDefinition,
    available_calculators,
    get_calculator,
    has_calculator,
    list_calculators,
    resolve_calculator_type,
)

__all__ = [
    "CalculatorResponse",
    "CalculatorResult",
    "CalculatorType",
    "SafetyWarning",
    "WarningCategory",
    "WarningLevel",
    "round_half_up",
    "CalculatorDefinition",
    "available_calculators",
    "get_calculator",
    "has_calculator",
    "list_calculators",
    "resolve_calculator_type",
]
