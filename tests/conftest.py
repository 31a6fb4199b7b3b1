"""
Pytest Configuration and Fixtures

Shared fixtures for calculator tests.
"""
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from medcalc.core.audit import AuditLog
from medcalc.core.calculators.engine import CalculatorEngine


@pytest.fixture
def audit_log() -> AuditLog:
    """Isolated audit log with a small capacity."""
    return AuditLog(capacity=5, echo=False)


@pytest.fixture
def engine(audit_log) -> CalculatorEngine:
    """Engine wired to the isolated audit log."""
    return CalculatorEngine(audit_log=audit_log)


@pytest.fixture
def adult_renal_params() -> dict:
    return {"age": 60, "weight": 72, "creatinine": 1.0, "gender": "male"}


@pytest.fixture
def temp_session_id() -> str:
    """Generate a temporary session ID."""
    import uuid
    return str(uuid.uuid4())
