"""
Typed Parameter Records

Each calculator reads its inputs through one frozen record built from the
caller's open ``{name: scalar}`` mapping. Required fields fail fast with
MissingParameterError instead of silently computing with zero; optional
flags default to False; enumerated strings are checked against their
allowed values. Unknown keys are ignored.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from medcalc.core.validation.extremes import is_number
from medcalc.utils.exceptions import MissingParameterError, ParameterValidationError

_TRUE_STRINGS = {"true", "yes", "1"}
_FALSE_STRINGS = {"false", "no", "0"}

GENDERS = ("male", "female")
HEIGHT_UNITS = ("cm", "m")
IBW_HEIGHT_UNITS = ("cm", "inches")
UREA_UNITS = ("mmol/L", "mg/dL")
QTC_FORMULAS = ("bazett", "fridericia", "framingham")
SEVERITY_GRADES = ("none", "mild", "moderate-severe")


class _Reader:
    """Pulls typed values out of a raw parameter mapping for one calculator."""

    def __init__(self, params: Mapping[str, Any], calculator: str):
        self._params = params
        self._calculator = calculator

    def number(self, key: str, required: bool = True, default: Optional[float] = None) -> Optional[float]:
        value = self._params.get(key)
        if value is None:
            if required:
                raise MissingParameterError(key, self._calculator)
            return default
        if not is_number(value):
            raise ParameterValidationError(
                f"{key} must be a number (received: {value!r})", parameter=key
            )
        return value

    def flag(self, key: str, default: bool = False) -> bool:
        value = self._params.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if is_number(value) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise ParameterValidationError(
            f"{key} must be true or false (received: {value!r})", parameter=key
        )

    def choice(self, key: str, choices: Sequence[str], default: str) -> str:
        value = self._params.get(key)
        if value is None:
            return default
        if isinstance(value, str):
            lowered = value.strip().lower()
            for option in choices:
                if option.lower() == lowered:
                    return option
        raise ParameterValidationError(
            f"{key} must be one of {', '.join(choices)} (received: {value!r})", parameter=key
        )

    def text(self, key: str, default: str) -> str:
        value = self._params.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            raise ParameterValidationError(
                f"{key} must be a string (received: {value!r})", parameter=key
            )
        return value.strip() or default


# ── General ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BodyMeasureParams:
    """BMI and BSA."""
    weight: float
    height: float
    height_unit: str = "cm"

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any], calculator: str = "bmi") -> "BodyMeasureParams":
        r = _Reader(params, calculator)
        return cls(
            weight=r.number("weight"),
            height=r.number("height"),
            height_unit=r.choice("heightUnit", HEIGHT_UNITS, "cm"),
        )


@dataclass(frozen=True)
class IdealBodyWeightParams:
    height: float
    height_unit: str = "cm"
    gender: str = "male"

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "IdealBodyWeightParams":
        r = _Reader(params, "ibw")
        return cls(
            height=r.number("height"),
            height_unit=r.choice("heightUnit", IBW_HEIGHT_UNITS, "cm"),
            gender=r.choice("gender", GENDERS, "male"),
        )


# ── Cardiovascular ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Cha2ds2VascParams:
    age: float
    chf: bool = False
    hypertension: bool = False
    diabetes: bool = False
    stroke_tia: bool = False
    vascular_disease: bool = False
    female: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "Cha2ds2VascParams":
        r = _Reader(params, "chads2-vasc")
        gender = r.choice("gender", GENDERS, "male")
        return cls(
            age=r.number("age"),
            chf=r.flag("hasCHF"),
            hypertension=r.flag("hasHypertension"),
            diabetes=r.flag("hasDiabetes"),
            stroke_tia=r.flag("hasStrokeTIA"),
            vascular_disease=r.flag("hasVascularDisease"),
            female=gender == "female" or r.flag("isFemale"),
        )


@dataclass(frozen=True)
class HasBledParams:
    age: float
    hypertension: bool = False
    abnormal_renal: bool = False
    abnormal_liver: bool = False
    stroke: bool = False
    bleeding_history: bool = False
    labile_inr: bool = False
    drugs: bool = False
    alcohol: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "HasBledParams":
        r = _Reader(params, "has-bled")
        return cls(
            age=r.number("age"),
            hypertension=r.flag("hasHypertension"),
            abnormal_renal=r.flag("abnormalRenal"),
            abnormal_liver=r.flag("abnormalLiver"),
            stroke=r.flag("hasStroke"),
            bleeding_history=r.flag("bleedingHistory"),
            labile_inr=r.flag("labileINR"),
            drugs=r.flag("drugs"),
            alcohol=r.flag("alcohol"),
        )


# ── Renal ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CockcroftGaultParams:
    age: float
    weight: float
    creatinine: float
    gender: str = "male"

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "CockcroftGaultParams":
        r = _Reader(params, "creatinine-clearance")
        return cls(
            age=r.number("age"),
            weight=r.number("weight"),
            creatinine=r.number("creatinine"),
            gender=r.choice("gender", GENDERS, "male"),
        )


@dataclass(frozen=True)
class EgfrParams:
    """MDRD and CKD-EPI."""
    age: float
    creatinine: float
    gender: str = "male"
    is_black: bool = False
    use_race_neutral: bool = True

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any], calculator: str = "mdrd") -> "EgfrParams":
        r = _Reader(params, calculator)
        return cls(
            age=r.number("age"),
            creatinine=r.number("creatinine"),
            gender=r.choice("gender", GENDERS, "male"),
            is_black=r.flag("isBlack"),
            use_race_neutral=r.flag("useRaceNeutral", default=True),
        )


# ── Dosing ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PediatricDosingParams:
    weight: float
    age: float
    dose_per_kg: float
    drug_name: str = "medication"
    is_pregnant: bool = False
    is_lactating: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "PediatricDosingParams":
        r = _Reader(params, "pediatric-dosing-weight")
        return cls(
            weight=r.number("weight"),
            age=r.number("age"),
            dose_per_kg=r.number("dosePerKg"),
            drug_name=r.text("drugName", "medication"),
            is_pregnant=r.flag("isPregnant"),
            is_lactating=r.flag("isLactating"),
        )


# ── Critical care ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SofaParams:
    respiratory: float        # PaO2/FiO2 ratio
    platelets: float          # ×10³/µL
    bilirubin: float          # mg/dL
    cardiovascular: float     # simplified 0-3+ proxy
    cns: float                # Glasgow Coma Scale
    creatinine: Optional[float]  # mg/dL, may be absent when anuric
    urine_output: Optional[float] = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "SofaParams":
        r = _Reader(params, "sofa")
        return cls(
            respiratory=r.number("respiratory"),
            platelets=r.number("platelets"),
            bilirubin=r.number("bilirubin"),
            cardiovascular=r.number("cardiovascular"),
            cns=r.number("cns"),
            creatinine=r.number("creatinine", required=False),
            urine_output=r.number("urineOutput", required=False),
        )


@dataclass(frozen=True)
class QsofaParams:
    systolic_bp: float
    respiratory_rate: float
    altered_mental_status: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "QsofaParams":
        r = _Reader(params, "qsofa")
        return cls(
            systolic_bp=r.number("systolicBP"),
            respiratory_rate=r.number("respiratoryRate"),
            altered_mental_status=r.flag("alteredMentalStatus"),
        )


@dataclass(frozen=True)
class WellsParams:
    heart_rate: float
    clinical_symptoms_dvt: bool = False
    pe_more_likely: bool = False
    immobility: bool = False
    surgery: bool = False
    previous_dvt: bool = False
    hemoptysis: bool = False
    malignancy: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "WellsParams":
        r = _Reader(params, "wells")
        return cls(
            heart_rate=r.number("heartRate"),
            clinical_symptoms_dvt=r.flag("clinicalSymptomsDVT"),
            pe_more_likely=r.flag("peMoreLikely"),
            immobility=r.flag("immobility"),
            surgery=r.flag("surgery"),
            previous_dvt=r.flag("previousDVT"),
            hemoptysis=r.flag("hemoptysis"),
            malignancy=r.flag("malignancy"),
        )


@dataclass(frozen=True)
class Curb65Params:
    urea: float
    respiratory_rate: float
    systolic_bp: float
    diastolic_bp: float
    age: float
    confusion: bool = False
    urea_unit: str = "mmol/L"

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "Curb65Params":
        r = _Reader(params, "curb65")
        return cls(
            urea=r.number("urea"),
            respiratory_rate=r.number("respiratoryRate"),
            systolic_bp=r.number("systolicBP"),
            diastolic_bp=r.number("diastolicBP"),
            age=r.number("age"),
            confusion=r.flag("confusion"),
            urea_unit=r.choice("ureaUnit", UREA_UNITS, "mmol/L"),
        )


@dataclass(frozen=True)
class AnionGapParams:
    sodium: float
    chloride: float
    bicarbonate: float

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "AnionGapParams":
        r = _Reader(params, "anion-gap")
        return cls(
            sodium=r.number("sodium"),
            chloride=r.number("chloride"),
            bicarbonate=r.number("bicarbonate"),
        )


@dataclass(frozen=True)
class ChildPughParams:
    bilirubin: float
    albumin: float
    inr: float
    ascites: str = "none"
    encephalopathy: str = "none"

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "ChildPughParams":
        r = _Reader(params, "child-pugh")
        return cls(
            bilirubin=r.number("bilirubin"),
            albumin=r.number("albumin"),
            inr=r.number("inr"),
            ascites=r.choice("ascites", SEVERITY_GRADES, "none"),
            encephalopathy=r.choice("encephalopathy", SEVERITY_GRADES, "none"),
        )


@dataclass(frozen=True)
class MeldParams:
    bilirubin: float
    inr: float
    creatinine: float
    on_dialysis: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "MeldParams":
        r = _Reader(params, "meld")
        return cls(
            bilirubin=r.number("bilirubin"),
            inr=r.number("inr"),
            creatinine=r.number("creatinine"),
            on_dialysis=r.flag("onDialysis"),
        )


# ── Acute care ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class QtcParams:
    qt: float                            # ms
    rr: Optional[float] = None           # ms
    heart_rate: Optional[float] = None   # bpm
    formula: str = "bazett"

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "QtcParams":
        r = _Reader(params, "qtc-correction")
        return cls(
            qt=r.number("qt"),
            rr=r.number("rr", required=False),
            heart_rate=r.number("heartRate", required=False),
            formula=r.choice("formula", QTC_FORMULAS, "bazett"),
        )


@dataclass(frozen=True)
class GlasgowComaParams:
    eye_opening: float
    verbal_response: float
    motor_response: float

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "GlasgowComaParams":
        r = _Reader(params, "glasgow-coma-scale")
        return cls(
            eye_opening=r.number("eyeOpening"),
            verbal_response=r.number("verbalResponse"),
            motor_response=r.number("motorResponse"),
        )


@dataclass(frozen=True)
class ParklandParams:
    weight: float
    burn_percentage: float

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "ParklandParams":
        r = _Reader(params, "parkland-formula")
        return cls(
            weight=r.number("weight"),
            burn_percentage=r.number("burnPercentage"),
        )
