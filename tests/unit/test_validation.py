"""
Unit Tests for Validation Module

Tests for the range table, the extreme-value scanner and pediatric age bands.
"""
import pytest

from medcalc.core.validation import (
    PARAMETER_RANGES,
    ParameterRange,
    FindingSeverity,
    PediatricAgeGroup,
    classify_age,
    get_pediatric_age_info,
    is_pediatric,
    scan_extreme_values,
    validate_creatinine,
    validate_finite_numbers,
    validate_pediatric_dosing,
    validate_positive_numbers,
    validate_range,
    validate_weight,
)
from medcalc.core.validation.ranges import format_number
from medcalc.utils.exceptions import ParameterValidationError


class TestParameterRanges:
    """Tests for the static range table."""

    def test_table_covers_physiological_quantities(self):
        assert set(PARAMETER_RANGES) == {
            "weight", "height", "age", "creatinine",
            "heartRate", "systolicBP", "diastolicBP",
        }

    def test_soft_bounds_inside_hard_bounds(self):
        for rng in PARAMETER_RANGES.values():
            assert rng.min <= rng.warn_min <= rng.warn_max <= rng.max

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            ParameterRange(10, 5, "kg")

    def test_soft_bounds_outside_hard_bounds_rejected(self):
        with pytest.raises(ValueError):
            ParameterRange(10, 100, "kg", warn_min=5, warn_max=50)

    def test_format_number(self):
        assert format_number(70.0) == "70"
        assert format_number(1.25) == "1.25"
        assert format_number(3) == "3"


class TestValidateRange:
    """Tests for hard and soft range checks."""

    def test_typical_value_is_clean(self):
        result = validate_weight(70)
        assert result.valid
        assert result.warning is None
        assert result.error is None

    def test_value_outside_typical_range_warns(self):
        result = validate_weight(250)
        assert result.valid
        assert result.warning == (
            "weight value 250 kg is outside typical range (20-200 kg). Please verify."
        )

    def test_value_outside_hard_range_is_invalid(self):
        result = validate_weight(5)
        assert not result.valid
        assert result.error == (
            "weight value 5 kg is outside acceptable range (10-500 kg). Please verify input."
        )

    def test_boundaries_are_inclusive(self):
        assert validate_weight(10).valid
        assert validate_weight(500).valid
        assert validate_weight(200).warning is None

    def test_creatinine_typical_range(self):
        assert validate_creatinine(1.0).warning is None
        assert validate_creatinine(2.0).warning == (
            "creatinine value 2 mg/dL is outside typical range (0.5-1.5 mg/dL). Please verify."
        )

    def test_unknown_parameter(self):
        with pytest.raises(KeyError):
            validate_range(1, "sodium")


class TestExtremeValueScanner:
    """Tests for cross-parameter input-integrity checks."""

    def test_weight_above_500_is_fatal(self):
        findings = scan_extreme_values({"weight": 501})
        assert len(findings) == 1
        assert findings[0].severity == FindingSeverity.FATAL
        assert findings[0].is_fatal

    def test_weight_250_warns_only(self):
        findings = scan_extreme_values({"weight": 250})
        assert len(findings) == 1
        assert findings[0].severity == FindingSeverity.WARNING
        assert not findings[0].is_fatal

    def test_weight_150_has_no_finding(self):
        assert scan_extreme_values({"weight": 150}) == []

    def test_weight_below_half_kilo_is_fatal(self):
        findings = scan_extreme_values({"weight": 0.3})
        assert [f.severity for f in findings] == [FindingSeverity.FATAL]

    def test_height_thresholds(self):
        assert scan_extreme_values({"height": 251})[0].is_fatal
        assert scan_extreme_values({"height": 225})[0].severity == FindingSeverity.WARNING
        assert scan_extreme_values({"height": 20})[0].is_fatal

    def test_age_thresholds(self):
        assert scan_extreme_values({"age": -1})[0].is_fatal
        assert scan_extreme_values({"age": 130})[0].severity == FindingSeverity.WARNING

    def test_high_creatinine_mentions_aki(self):
        findings = scan_extreme_values({"creatinine": 16})
        assert findings[0].severity == FindingSeverity.WARNING
        assert "acute kidney injury" in findings[0].message

    def test_absent_and_non_numeric_fields_skipped(self):
        assert scan_extreme_values({}) == []
        assert scan_extreme_values({"weight": "heavy", "age": True}) == []

    def test_finding_to_dict(self):
        data = scan_extreme_values({"weight": 501})[0].to_dict()
        assert data["severity"] == "error"
        assert data["parameter"] == "weight"
        assert data["is_extreme"] is True


class TestInputGates:
    """Tests for the sign and finiteness gates."""

    def test_negative_fields_reported_individually(self):
        errors = validate_positive_numbers({"a": -1, "b": 2, "c": "x", "d": -0.5})
        assert errors == [
            "a cannot be negative (received: -1)",
            "d cannot be negative (received: -0.5)",
        ]

    def test_booleans_are_not_numbers(self):
        assert validate_positive_numbers({"flag": False}) == []

    def test_non_finite_fields_reported(self):
        errors = validate_finite_numbers({"a": float("nan"), "b": float("inf"), "c": 1})
        assert len(errors) == 2
        assert errors[0].startswith("a must be a finite number")


class TestPediatricClassifier:
    """Tests for pediatric age bands."""

    @pytest.mark.parametrize("age,group", [
        (0.0, PediatricAgeGroup.NEONATE),
        (0.05, PediatricAgeGroup.NEONATE),
        (0.09, PediatricAgeGroup.INFANT),
        (1.0, PediatricAgeGroup.INFANT),
        (12.99, PediatricAgeGroup.CHILD),
        (13.0, PediatricAgeGroup.ADOLESCENT),
        (17.9, PediatricAgeGroup.ADOLESCENT),
        (18, PediatricAgeGroup.ADULT),
    ])
    def test_classify(self, age, group):
        assert classify_age(age) == group

    def test_negative_age_rejected(self):
        with pytest.raises(ParameterValidationError):
            classify_age(-0.1)

    def test_age_info(self):
        info = get_pediatric_age_info(0.05)
        assert info.age_range == "0-28 days"
        assert info.description == "Neonatal period (0-28 days of life)"

    def test_is_pediatric(self):
        assert is_pediatric(17.9)
        assert not is_pediatric(18)


class TestPediatricDosingValidation:
    """Tests for band-specific weight plausibility."""

    def test_neonate_in_window(self):
        result = validate_pediatric_dosing(0.05, 3.5)
        assert result.valid
        assert result.group == PediatricAgeGroup.NEONATE
        assert result.warnings == []

    def test_neonate_out_of_window_warns(self):
        result = validate_pediatric_dosing(0.05, 6)
        assert result.valid
        assert result.warnings == [
            "Neonate weight outside typical range (0.5-5 kg). Please verify."
        ]

    def test_child_out_of_window_warns(self):
        result = validate_pediatric_dosing(5, 60)
        assert result.warnings == [
            "Child weight outside typical range (8-50 kg). Please verify."
        ]

    def test_adolescent_has_no_window(self):
        assert validate_pediatric_dosing(15, 80).warnings == []

    def test_negative_inputs_are_errors(self):
        result = validate_pediatric_dosing(-1, -2)
        assert not result.valid
        assert result.errors == ["Age cannot be negative", "Weight cannot be negative"]
