"""
Utilities Package - Logging and Exception Handling
"""
from .logging import configure_audit_logger, get_audit_logger, get_logger, setup_logging
from .exceptions import (
    CalculatorError,
    UnknownCalculatorError,
    ParameterValidationError,
    MissingParameterError,
    DomainError,
)

__all__ = [
    "configure_audit_logger",
    "get_audit_logger",
    "get_logger",
    "setup_logging",
    "CalculatorError",
    "UnknownCalculatorError",
    "ParameterValidationError",
    "MissingParameterError",
    "DomainError",
]
