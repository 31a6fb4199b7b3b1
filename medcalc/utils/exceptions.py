"""
Custom Exception Hierarchy

Provides specific exception types for the ways a calculator invocation
can abort, with structured error information for API responses.

Only these exceptions stop a calculation. Safety advisories labelled
``WarningLevel.CRITICAL_ADVISORY`` are attached to a returned result and
are never raised.
"""
from typing import Optional, Dict, Any, List


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class UnknownCalculatorError(CalculatorError):
    """Requested calculator type is not in the registry."""

    def __init__(
        self,
        calculator_type: str,
        available: Optional[List[str]] = None,
    ):
        super().__init__(
            message=f"Unknown calculator type: {calculator_type}",
            code="UNKNOWN_CALCULATOR",
            details={"calculator_type": calculator_type, "available": list(available or [])}
        )
        self.calculator_type = calculator_type


class ParameterValidationError(CalculatorError):
    """Input rejected before any formula runs (range, sign, type, extreme value)."""

    def __init__(
        self,
        message: str,
        parameter: str = "unknown",
        errors: Optional[List[str]] = None,
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=code,
            details={"parameter": parameter, "errors": list(errors or [message]), **(details or {})}
        )
        self.parameter = parameter
        self.errors = list(errors or [message])


class MissingParameterError(ParameterValidationError):
    """A required field of a calculator's parameter record is absent."""

    def __init__(self, parameter: str, calculator: str = "unknown"):
        super().__init__(
            message=f"Missing required parameter '{parameter}' for {calculator}",
            parameter=parameter,
            code="MISSING_PARAMETER",
            details={"calculator": calculator}
        )


class DomainError(CalculatorError):
    """Formula precondition not met (value outside the formula's validated domain)."""

    def __init__(
        self,
        message: str,
        calculator: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="DOMAIN_ERROR",
            details={"calculator": calculator, **(details or {})}
        )
        self.calculator = calculator
