"""
API request/response schemas for the calculator endpoints.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

Scalar = Union[bool, int, float, str, None]


class HealthResponse(BaseModel):
    """Service health status."""
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
    calculators: int


class CalculatorRequest(BaseModel):
    """Parameters for one calculator invocation."""
    parameters: Dict[str, Scalar] = Field(default_factory=dict)
    session_id: Optional[str] = Field(default=None, max_length=128)


class SafetyWarningResponse(BaseModel):
    level: str
    message: str
    category: Optional[str] = None


class CalculatorResultResponse(BaseModel):
    value: Union[int, float]
    unit: Optional[str] = None
    interpretation: Optional[str] = None
    formula: str
    citation: str
    notes: List[str] = Field(default_factory=list)
    warnings: List[SafetyWarningResponse] = Field(default_factory=list)


class CalculatorResponseModel(BaseModel):
    """Structured result plus the rendered text report."""
    calculator_type: str
    result: CalculatorResultResponse
    formatted_output: str


class CalculatorInfo(BaseModel):
    calculator_type: str
    title: str
    description: str
    dosing: bool


class CalculatorListResponse(BaseModel):
    count: int
    calculators: List[CalculatorInfo]


class AuditEntryResponse(BaseModel):
    timestamp: str
    calculator_type: str
    inputs: Dict[str, Any]
    output: Optional[Any] = None
    session_id: Optional[str] = None
    error: Optional[str] = None


class AuditLogResponse(BaseModel):
    count: int
    capacity: int
    entries: List[AuditEntryResponse]


class AuditClearResponse(BaseModel):
    cleared: int


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
