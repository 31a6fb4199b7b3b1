"""
Unit conversions used by the formula families.
"""

CM_PER_INCH = 2.54
CM_PER_METRE = 100
CREATININE_UMOL_PER_MGDL = 88.4


def height_to_cm(height: float, unit: str = "cm") -> float:
    """Normalise a height given in ``cm``, ``m`` or ``inches`` to centimetres."""
    if unit == "m":
        return height * CM_PER_METRE
    if unit == "inches":
        return height * CM_PER_INCH
    return height


def cm_to_metres(height_cm: float) -> float:
    return height_cm / CM_PER_METRE


def cm_to_inches(height_cm: float) -> float:
    return height_cm / CM_PER_INCH


def creatinine_mgdl_to_umol(creatinine_mgdl: float) -> float:
    return creatinine_mgdl * CREATININE_UMOL_PER_MGDL
