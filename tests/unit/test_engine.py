"""
Unit Tests for the Calculator Engine

Tests for the gate sequence, warning merge order and audit recording.
"""
import math

import pytest

from medcalc.core.calculators import CalculatorType, WarningCategory, WarningLevel
from medcalc.core.calculators.engine import CalculatorEngine
from medcalc.core.validation import scan_extreme_values
from medcalc.utils.exceptions import (
    DomainError,
    MissingParameterError,
    ParameterValidationError,
    UnknownCalculatorError,
)


class _ListSink:
    def __init__(self):
        self.entries = []

    def record(self, entry):
        self.entries.append(entry)


class TestEngineSuccess:
    """Tests for successful invocations."""

    def test_bmi_response(self, engine, audit_log):
        response = engine.invoke("bmi", {"weight": 70, "height": 175})
        assert response.calculator_type == CalculatorType.BMI
        assert response.result.value == 22.9
        assert response.formatted_output.startswith("**Calculator: BMI**")
        assert "FOR EDUCATIONAL USE ONLY" in response.formatted_output

        entry = audit_log.recent()[-1]
        assert entry.succeeded
        assert entry.output == 22.9
        assert entry.inputs == {"weight": 70, "height": 175}

    def test_enum_key_accepted(self, engine):
        assert engine.invoke(CalculatorType.BSA, {"weight": 70, "height": 175}).result.value == 1.84

    def test_height_in_metres_passes_scanner(self, engine):
        response = engine.invoke("bmi", {"weight": 70, "height": 1.75, "heightUnit": "m"})
        assert response.result.value == 22.9
        assert response.result.warnings == ()

    def test_idempotent(self, engine, audit_log):
        params = {"age": 60, "weight": 72, "creatinine": 1.0}
        first = engine.invoke("creatinine-clearance", params)
        second = engine.invoke("creatinine-clearance", params)
        assert first.result == second.result
        assert first.formatted_output == second.formatted_output
        assert len(audit_log) == 2

    def test_session_id_recorded(self, engine, audit_log, temp_session_id):
        engine.invoke("qsofa", {"systolicBP": 120, "respiratoryRate": 16},
                      session_id=temp_session_id)
        assert audit_log.recent()[-1].session_id == temp_session_id

    def test_dosing_report_has_extended_disclaimer(self, engine):
        response = engine.invoke(
            "pediatric-dosing-weight", {"weight": 20, "age": 6, "dosePerKg": 15}
        )
        assert "Critical Safety Warnings for Dosing Calculators" in response.formatted_output


class TestWarningMerge:
    """Tests for the scanner → formula → advisor ordering."""

    def test_scanner_warning_comes_first(self, engine):
        response = engine.invoke("bmi", {"weight": 250, "height": 190})
        warnings = response.result.warnings
        assert warnings[0].message == scan_extreme_values({"weight": 250})[0].message
        assert warnings[0].level == WarningLevel.WARNING
        assert "outside typical range" in warnings[1].message

    def test_advisor_warnings_come_last(self, engine):
        response = engine.invoke("chads2-vasc", {"age": 70})
        assert "atrial fibrillation" in response.result.warnings[-1].message

    def test_overdose_is_returned_not_raised(self, engine, audit_log):
        response = engine.invoke(
            "pediatric-dosing-weight",
            {"weight": 20, "age": 6, "dosePerKg": 80, "drugName": "acetaminophen"},
        )
        assert response.result.value == 1600.0
        assert response.result.has_critical_advisory
        overdose = [w for w in response.result.warnings if w.category == WarningCategory.OVERDOSE]
        assert overdose[0].level == WarningLevel.CRITICAL_ADVISORY
        assert "🚨" in response.formatted_output
        assert audit_log.recent()[-1].succeeded


class TestEngineAborts:
    """Tests for aborts and their audit records."""

    def test_unknown_calculator(self, engine, audit_log):
        with pytest.raises(UnknownCalculatorError):
            engine.invoke("apache-ii", {"age": 50})
        entry = audit_log.recent()[-1]
        assert entry.calculator_type == "apache-ii"
        assert entry.error == "Unknown calculator type: apache-ii"
        assert entry.output is None

    def test_negative_value(self, engine, audit_log):
        with pytest.raises(ParameterValidationError) as exc_info:
            engine.invoke("bmi", {"weight": -70, "height": 175})
        assert exc_info.value.message == (
            "Validation errors: weight cannot be negative (received: -70)"
        )
        assert not audit_log.recent()[-1].succeeded

    def test_non_finite_value(self, engine, audit_log):
        with pytest.raises(ParameterValidationError) as exc_info:
            engine.invoke("bmi", {"weight": math.nan, "height": 175})
        assert exc_info.value.message.startswith("Validation errors:")
        assert audit_log.recent()[-1].inputs["weight"] == "nan"

    def test_extreme_value_aborts_before_formula(self, engine):
        with pytest.raises(ParameterValidationError) as exc_info:
            engine.invoke("bmi", {"weight": 501, "height": 175})
        assert exc_info.value.message.startswith("Extreme value errors:")
        assert exc_info.value.parameter == "weight"

    def test_missing_parameter(self, engine):
        with pytest.raises(MissingParameterError):
            engine.invoke("bmi", {"weight": 70})

    def test_domain_error(self, engine, audit_log):
        with pytest.raises(DomainError):
            engine.invoke("ibw", {"height": 150})
        assert "Devine" in audit_log.recent()[-1].error

    def test_unexpected_failure_is_audited(self, engine, audit_log, monkeypatch):
        def boom(calculator_type, params):
            raise RuntimeError("advisor offline")

        monkeypatch.setattr("medcalc.core.calculators.engine.advise", boom)
        with pytest.raises(RuntimeError):
            engine.invoke("bmi", {"weight": 70, "height": 175})
        assert audit_log.recent()[-1].error == "advisor offline"


class TestAuditWiring:
    """Tests for the injected audit sink."""

    def test_custom_sink(self):
        sink = _ListSink()
        engine = CalculatorEngine(audit_log=sink)
        engine.invoke("anion-gap", {"sodium": 140, "chloride": 104, "bicarbonate": 24})
        assert len(sink.entries) == 1
        assert sink.entries[0].calculator_type == "anion-gap"

    def test_identifiers_never_stored(self, engine, audit_log):
        engine.invoke("bmi", {"weight": 70, "height": 175, "patientName": "Jane Doe"})
        assert "patientName" not in audit_log.recent()[-1].inputs

    def test_capacity_bound(self, engine, audit_log):
        for weight in range(60, 67):
            engine.invoke("bmi", {"weight": weight, "height": 175})
        assert len(audit_log) == audit_log.capacity
        assert [e.inputs["weight"] for e in audit_log.recent()] == [62, 63, 64, 65, 66]
