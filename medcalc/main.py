"""
Clinical Calculator Service - FastAPI Application

API endpoints for:
- Service health
- Calculator catalog and invocation
- Audit trail inspection and clearing
"""
from datetime import datetime

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from medcalc.config import (
    API_TITLE,
    API_VERSION,
    AUDIT_LOG_CAPACITY,
    AUDIT_LOG_DEFAULT_LIMIT,
    CORS_ALLOW_ORIGINS,
    HOST,
    PORT,
)
from medcalc.core.audit import AuditLog
from medcalc.core.calculators import available_calculators, list_calculators
from medcalc.core.calculators.engine import CalculatorEngine
from medcalc.models import (
    AuditClearResponse,
    AuditLogResponse,
    CalculatorListResponse,
    CalculatorRequest,
    CalculatorResponseModel,
    ErrorResponse,
    HealthResponse,
)
from medcalc.utils.exceptions import CalculatorError, UnknownCalculatorError
from medcalc.utils.logging import get_logger

logger = get_logger(__name__)

# ---- Engine Singleton ----
_audit_log = AuditLog(capacity=AUDIT_LOG_CAPACITY)
_engine = CalculatorEngine(audit_log=_audit_log)


# ---- FastAPI Application ----

app = FastAPI(
    title=API_TITLE,
    description="Clinical scoring and dosing calculators with input validation, "
                "safety advisories and an audit trail",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

START_TIME = datetime.now()


# ---- Error Handling ----

@app.exception_handler(CalculatorError)
async def calculator_error_handler(request: Request, exc: CalculatorError):
    status_code = 404 if isinstance(exc, UnknownCalculatorError) else 422
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# ---- API Endpoints ----

def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
        calculators=len(available_calculators()),
    )


@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.get("/api/v1/calculators", response_model=CalculatorListResponse, tags=["Calculators"])
def get_calculators():
    """List every registered calculator."""
    calculators = [definition.to_dict() for definition in list_calculators()]
    return CalculatorListResponse(count=len(calculators), calculators=calculators)


@app.post(
    "/api/v1/calculators/{calculator_type}",
    response_model=CalculatorResponseModel,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    tags=["Calculators"],
)
def run_calculator(calculator_type: str, request: CalculatorRequest):
    """
    Run one calculator.

    Validation and domain failures return 422 with a structured error body;
    an unknown calculator type returns 404. Critical safety advisories are
    returned inside a successful result, never as an error.
    """
    response = _engine.invoke(calculator_type, request.parameters, session_id=request.session_id)
    return CalculatorResponseModel(
        calculator_type=response.calculator_type.value,
        result=response.result.to_dict(),
        formatted_output=response.formatted_output,
    )


@app.get("/api/v1/audit", response_model=AuditLogResponse, tags=["Audit"])
def get_audit_log(limit: int = Query(AUDIT_LOG_DEFAULT_LIMIT, ge=1)):
    """Most recent audit entries, oldest first."""
    entries = _audit_log.recent(min(limit, _audit_log.capacity))
    return AuditLogResponse(
        count=len(entries),
        capacity=_audit_log.capacity,
        entries=[entry.to_dict() for entry in entries],
    )


@app.delete("/api/v1/audit", response_model=AuditClearResponse, tags=["Audit"])
def clear_audit_log():
    """Remove every audit entry."""
    return AuditClearResponse(cleared=_audit_log.clear())


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
