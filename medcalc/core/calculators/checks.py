"""
Shared helpers for formula functions: range gates and score notes.
"""
from typing import List, Sequence

from medcalc.core.calculators.base import SafetyWarning, WarningLevel
from medcalc.core.validation.ranges import validate_range
from medcalc.utils.exceptions import ParameterValidationError


def check_range(value: float, parameter_name: str, warnings: List[SafetyWarning]) -> None:
    """
    Apply the range table to ``value``.

    A hard violation raises ParameterValidationError; a soft one is appended
    to ``warnings`` as a warning-level advisory.
    """
    result = validate_range(value, parameter_name)
    if not result.valid:
        raise ParameterValidationError(result.error, parameter=parameter_name)
    if result.warning:
        warnings.append(SafetyWarning(level=WarningLevel.WARNING, message=result.warning))


def components_note(components: Sequence[str]) -> str:
    return f"Score components: {', '.join(components) or 'None'}"
