"""
Report Generation Module

Renders calculator results as text reports with the mandatory disclaimer.
"""
from .calculator_report import WARNING_ICONS, format_calculator_output, render_report

__all__ = [
    "WARNING_ICONS",
    "format_calculator_output",
    "render_report",
]
