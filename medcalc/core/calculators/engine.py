"""
Calculator Engine

Central orchestrator. Runs one calculator invocation through the fixed
gate sequence and records it in the audit log.

Pipeline per invocation:
    1. Resolve the calculator type              (UnknownCalculatorError)
    2. Finite / non-negative gate on all fields (ParameterValidationError)
    3. Extreme-value scan; fatal hits abort     (ParameterValidationError)
    4. Formula                                  (ParameterValidationError, DomainError)
    5. Merge warnings: scanner → formula → advisors
    6. Render the report with its disclaimer
    7. Audit the invocation
    8. Return

Any abort is audited with its error message and re-raised; no partial
report is ever returned.

Usage:
    from medcalc.core.calculators.engine import CalculatorEngine

    engine = CalculatorEngine()
    response = engine.invoke("bmi", {"weight": 70, "height": 175})
    print(response.result.value, response.formatted_output)
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from medcalc.core.audit.log import AuditLog, AuditLogEntry, AuditSink, sanitize_inputs
from medcalc.core.reports.calculator_report import render_report
from medcalc.core.safety.advisors import advise
from medcalc.core.validation.extremes import (
    is_number,
    scan_extreme_values,
    validate_finite_numbers,
    validate_positive_numbers,
)
from medcalc.utils.exceptions import CalculatorError, ParameterValidationError
from medcalc.utils.logging import get_logger

from .base import CalculatorResponse, CalculatorType, SafetyWarning, WarningLevel
from .registry import get_calculator, resolve_calculator_type
from .units import height_to_cm

logger = get_logger(__name__)


def _scan_view(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy of ``params`` with height expressed in centimetres, so the
    extreme-value thresholds see the same scale whatever heightUnit says.
    """
    view = dict(params)
    height = view.get("height")
    unit = view.get("heightUnit")
    if is_number(height) and isinstance(unit, str) and unit.strip().lower() in ("m", "inches"):
        view["height"] = height_to_cm(height, unit.strip().lower())
    return view


class CalculatorEngine:
    """
    Runs calculator invocations.

    Stateless apart from the injected audit sink, so one engine can serve
    concurrent requests; the default AuditLog serialises its own appends.
    """

    def __init__(self, audit_log: Optional[AuditSink] = None):
        self.audit_log = audit_log if audit_log is not None else AuditLog()
        logger.info(f"CalculatorEngine initialised (audit sink: {type(self.audit_log).__name__})")

    def invoke(
        self,
        calculator_type: str,
        parameters: Optional[Mapping[str, Any]] = None,
        session_id: Optional[str] = None,
    ) -> CalculatorResponse:
        """
        Run ``calculator_type`` on ``parameters``.

        Returns:
            CalculatorResponse with the result (merged warnings) and the
            rendered report.

        Raises:
            UnknownCalculatorError, ParameterValidationError, DomainError
        """
        params = dict(parameters or {})
        key = calculator_type.value if isinstance(calculator_type, CalculatorType) else str(calculator_type)

        try:
            response = self._run(key, params)
        except CalculatorError as exc:
            self._audit(key, params, error=exc.message, session_id=session_id)
            logger.warning(f"CalculatorEngine [{key}]: aborted {exc.code} - {exc.message}")
            raise
        except Exception as exc:
            self._audit(key, params, error=str(exc), session_id=session_id)
            logger.error(f"CalculatorEngine [{key}]: unexpected failure {exc}", exc_info=True)
            raise

        result = response.result
        self._audit(key, params, output=result.value, session_id=session_id)
        logger.info(
            f"CalculatorEngine [{key}]: value={result.value} "
            f"warnings={len(result.warnings)}"
        )
        if result.has_critical_advisory:
            logger.warning(f"CalculatorEngine [{key}]: result carries a critical advisory")
        return response

    def _run(self, key: str, params: Dict[str, Any]) -> CalculatorResponse:
        definition = get_calculator(key)
        calculator_type = resolve_calculator_type(key)

        gate_errors = validate_finite_numbers(params) + validate_positive_numbers(params)
        if gate_errors:
            raise ParameterValidationError(
                f"Validation errors: {', '.join(gate_errors)}",
                errors=gate_errors,
            )

        findings = scan_extreme_values(_scan_view(params))
        fatal = [f for f in findings if f.is_fatal]
        if fatal:
            messages = [f.message for f in fatal]
            raise ParameterValidationError(
                f"Extreme value errors: {', '.join(messages)}",
                parameter=fatal[0].parameter,
                errors=messages,
            )

        result = definition.compute(params)

        warnings: List[SafetyWarning] = [
            SafetyWarning(level=WarningLevel.WARNING, message=f.message) for f in findings
        ]
        warnings.extend(result.warnings)
        warnings.extend(advise(calculator_type, params))
        result = result.with_warnings(tuple(warnings))

        return CalculatorResponse(
            calculator_type=calculator_type,
            result=result,
            formatted_output=render_report(result, calculator_type.value),
        )

    def _audit(
        self,
        key: str,
        params: Mapping[str, Any],
        output: Optional[Any] = None,
        error: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.audit_log.record(AuditLogEntry(
            calculator_type=key,
            inputs=sanitize_inputs(params),
            output=output,
            session_id=session_id,
            error=error,
        ))
