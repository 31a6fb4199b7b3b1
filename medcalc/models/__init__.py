from .calculator import (
    AuditClearResponse,
    AuditEntryResponse,
    AuditLogResponse,
    CalculatorInfo,
    CalculatorListResponse,
    CalculatorRequest,
    CalculatorResponseModel,
    CalculatorResultResponse,
    ErrorResponse,
    HealthResponse,
    SafetyWarningResponse,
)

__all__ = [
    "AuditClearResponse",
    "AuditEntryResponse",
    "AuditLogResponse",
    "CalculatorInfo",
    "CalculatorListResponse",
    "CalculatorRequest",
    "CalculatorResponseModel",
    "CalculatorResultResponse",
    "ErrorResponse",
    "HealthResponse",
    "SafetyWarningResponse",
]
