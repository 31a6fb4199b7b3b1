"""
Unit Tests for the Audit Log
"""
import json
import logging
import threading

import pytest

from medcalc.core.audit import AuditLog, AuditLogEntry, sanitize_inputs
from medcalc.utils.logging import AUDIT_LOGGER_NAME, configure_audit_logger


class TestSanitizeInputs:
    """Tests for identifier stripping."""

    def test_identifiers_dropped(self):
        sanitized = sanitize_inputs({
            "weight": 70,
            "patientName": "Jane Doe",
            "MRN": "12345",
            "patient_email": "jane@example.com",
        })
        assert sanitized == {"weight": 70}

    def test_only_scalars_kept(self):
        sanitized = sanitize_inputs({
            "age": 40,
            "gender": "female",
            "hasCHF": True,
            "nested": {"a": 1},
            "items": [1, 2],
            "missing": None,
        })
        assert sanitized == {"age": 40, "gender": "female", "hasCHF": True}

    def test_non_finite_floats_stored_as_text(self):
        sanitized = sanitize_inputs({"weight": float("inf"), "height": float("nan")})
        assert sanitized == {"weight": "inf", "height": "nan"}


class TestAuditLog:
    """Tests for the bounded ring buffer."""

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            AuditLog(capacity=0)

    def test_log_usage_sanitises(self, audit_log):
        entry = audit_log.log_usage("bmi", {"weight": 70, "ssn": "000-00-0000"}, output=22.9)
        assert entry.inputs == {"weight": 70}
        assert entry.succeeded
        assert audit_log.recent() == [entry]

    def test_oldest_entries_evicted(self, audit_log):
        for i in range(8):
            audit_log.log_usage("bmi", {"weight": 60 + i})
        assert len(audit_log) == 5
        assert [e.inputs["weight"] for e in audit_log.recent()] == [63, 64, 65, 66, 67]

    def test_recent_limit(self, audit_log):
        for i in range(4):
            audit_log.log_usage("gcs", {"eyeOpening": i + 1})
        assert [e.inputs["eyeOpening"] for e in audit_log.recent(2)] == [3, 4]
        assert len(audit_log.recent(100)) == 4
        assert audit_log.recent(0) == []

    def test_clear(self, audit_log):
        audit_log.log_usage("bmi", {"weight": 70})
        audit_log.log_usage("bmi", {"weight": 71})
        assert audit_log.clear() == 2
        assert len(audit_log) == 0
        assert audit_log.clear() == 0

    def test_failure_entry(self, audit_log):
        entry = audit_log.log_usage("ibw", {"height": 150}, error="Devine formula is not validated")
        assert not entry.succeeded
        data = entry.to_dict()
        assert data["error"] == "Devine formula is not validated"
        assert data["output"] is None
        assert data["timestamp"]

    def test_concurrent_appends_not_lost(self):
        log = AuditLog(capacity=1000, echo=False)

        def worker(n):
            for i in range(50):
                log.record(AuditLogEntry(calculator_type="bmi", inputs={"worker": n, "i": i}))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(log) == 400


class TestAuditEcho:
    """Tests for the medcalc.audit logging channel."""

    def test_echo_emitted_on_audit_channel(self, caplog):
        log = AuditLog(capacity=5, echo=True)
        log.log_usage("bmi", {"weight": 70, "patientName": "Jane Doe"}, output=22.9)
        configure_audit_logger(False)

        echoes = [r for r in caplog.records if r.name == AUDIT_LOGGER_NAME]
        assert len(echoes) == 1
        assert echoes[0].levelno == logging.DEBUG
        assert json.loads(echoes[0].getMessage())["inputs"] == {"weight": 70}

    def test_no_echo_when_disabled(self, caplog):
        configure_audit_logger(False)
        log = AuditLog(capacity=5, echo=False)
        with caplog.at_level(logging.DEBUG):
            log.log_usage("bmi", {"weight": 70})
        assert not [r for r in caplog.records if r.name == AUDIT_LOGGER_NAME]

    def test_channel_level(self):
        assert configure_audit_logger(True).level == logging.DEBUG
        assert configure_audit_logger(False).level == logging.NOTSET
