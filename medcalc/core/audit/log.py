"""
Calculator Audit Log

Records every calculator invocation (success or failure) for QA and
liability review. Inputs are sanitised: no patient identifiers and no
nested structures are stored.

The log is a bounded ring buffer owned by whoever constructs it (normally
the CalculatorEngine). Appends are serialised with a lock so concurrent
request threads cannot interleave or lose entries.
"""
from __future__ import annotations

import json
import math
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Mapping, Optional, Protocol

from medcalc.config import AUDIT_ECHO, AUDIT_LOG_CAPACITY, AUDIT_LOG_DEFAULT_LIMIT
from medcalc.utils.logging import configure_audit_logger, get_audit_logger, get_logger

logger = get_logger(__name__)
audit_logger = get_audit_logger()

SENSITIVE_FIELDS = (
    "patientname",
    "patientid",
    "mrn",
    "ssn",
    "dateofbirth",
    "address",
    "phone",
    "email",
)


def sanitize_inputs(inputs: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Drop fields that may identify a patient and keep only scalar values.

    A field is dropped when its lower-cased name contains any entry of
    SENSITIVE_FIELDS. Non-finite floats are stored as their string form.
    """
    sanitized: Dict[str, Any] = {}
    for key, value in inputs.items():
        lowered = str(key).lower()
        if any(name in lowered for name in SENSITIVE_FIELDS):
            continue
        if isinstance(value, float) and not math.isfinite(value):
            sanitized[key] = repr(value)
        elif isinstance(value, (bool, int, float, str)):
            sanitized[key] = value
    return sanitized


@dataclass(frozen=True)
class AuditLogEntry:
    calculator_type: str
    inputs: Dict[str, Any]
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    output: Optional[Any] = None
    session_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "calculator_type": self.calculator_type,
            "inputs": dict(self.inputs),
            "output": self.output,
            "session_id": self.session_id,
            "error": self.error,
        }


class AuditSink(Protocol):
    """Anything the engine can hand finished audit entries to."""

    def record(self, entry: AuditLogEntry) -> None:
        ...


class AuditLog:
    """
    Bounded in-memory audit trail. Once ``capacity`` entries are held the
    oldest is evicted for each new one.
    """

    def __init__(self, capacity: int = AUDIT_LOG_CAPACITY, echo: bool = AUDIT_ECHO):
        if capacity < 1:
            raise ValueError(f"Audit log capacity must be at least 1 (got {capacity})")
        self.capacity = capacity
        self.echo = echo
        if echo:
            configure_audit_logger(True)
        self._entries: Deque[AuditLogEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def record(self, entry: AuditLogEntry) -> None:
        with self._lock:
            self._entries.append(entry)
        if self.echo:
            audit_logger.debug(json.dumps(entry.to_dict(), default=str))

    def log_usage(
        self,
        calculator_type: str,
        inputs: Mapping[str, Any],
        output: Optional[Any] = None,
        error: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> AuditLogEntry:
        """Sanitise ``inputs``, build an entry and record it."""
        entry = AuditLogEntry(
            calculator_type=calculator_type,
            inputs=sanitize_inputs(inputs),
            output=output,
            session_id=session_id,
            error=error,
        )
        self.record(entry)
        return entry

    def recent(self, limit: int = AUDIT_LOG_DEFAULT_LIMIT) -> List[AuditLogEntry]:
        """The ``limit`` most recent entries, oldest first."""
        if limit <= 0:
            return []
        with self._lock:
            entries = list(self._entries)
        return entries[-limit:]

    def clear(self) -> int:
        """Remove every entry. Returns how many were removed."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.info(f"Audit log cleared ({removed} entries removed)")
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
