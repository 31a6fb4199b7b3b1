"""
Calculator core: validation, formulas, safety advisories, audit and reports.
"""
