"""
Calculator Report Renderer

Turns a CalculatorResult into the markdown-like text report returned to
callers, then appends the mandatory disclaimer block.

Layout:
    **Calculator: <TYPE>**
    **Formula:** ...
    **Result:** <value> <unit>
    **Interpretation:** ...
    **Warnings:**    one line per advisory, icon by level
    **Notes:**       one • bullet per note
    **Reference:** ...
    ---
    <disclaimer>
"""
from typing import List

from medcalc.core.calculators.base import CalculatorResult, WarningLevel
from medcalc.core.safety.disclaimers import format_with_disclaimer
from medcalc.core.validation.ranges import format_number

WARNING_ICONS = {
    WarningLevel.CRITICAL_ADVISORY: "🚨",
    WarningLevel.WARNING:           "⚠️",
    WarningLevel.INFO:              "ℹ️",
}


def format_calculator_output(result: CalculatorResult, calculator_type: str) -> str:
    """Render ``result`` without the disclaimer."""
    lines: List[str] = [f"**Calculator: {calculator_type.upper()}**", ""]

    if result.formula:
        lines += [f"**Formula:** {result.formula}", ""]

    value = f"**Result:** {format_number(result.value)}"
    if result.unit:
        value += f" {result.unit}"
    lines += [value, ""]

    if result.interpretation:
        lines += [f"**Interpretation:** {result.interpretation}", ""]

    if result.warnings:
        lines.append("**Warnings:**")
        lines += [f"{WARNING_ICONS[w.level]} {w.message}" for w in result.warnings]
        lines.append("")

    if result.notes:
        lines.append("**Notes:**")
        lines += [f"• {note}" for note in result.notes]
        lines.append("")

    if result.citation:
        lines.append(f"**Reference:** {result.citation}")

    return "\n".join(lines) + "\n"


def render_report(result: CalculatorResult, calculator_type: str) -> str:
    """Full report: rendered result plus the disclaimer for ``calculator_type``."""
    return format_with_disclaimer(format_calculator_output(result, calculator_type), calculator_type)
