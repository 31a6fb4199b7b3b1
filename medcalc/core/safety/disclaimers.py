"""
Medical Disclaimers

Standardized disclaimers appended to every calculator report. The block
cannot be switched off; dosing calculators get the extended variant.
"""

MEDICAL_DISCLAIMERS = {
    "PRIMARY": (
        "⚠️ FOR EDUCATIONAL USE ONLY - Not a substitute for professional medical advice, "
        "diagnosis, or treatment."
    ),
    "ALWAYS_CONSULT": "Always consult qualified healthcare professionals for medical decisions.",
    "NOT_SOLE_BASIS": "Do not use as the sole basis for clinical decisions.",
    "EDUCATIONAL_PURPOSE": "This information is provided for educational and informational purposes only.",
}

CALCULATOR_DISCLAIMER = f"""
{MEDICAL_DISCLAIMERS["PRIMARY"]}
{MEDICAL_DISCLAIMERS["ALWAYS_CONSULT"]}
{MEDICAL_DISCLAIMERS["NOT_SOLE_BASIS"]}
{MEDICAL_DISCLAIMERS["EDUCATIONAL_PURPOSE"]}

**Important Notes:**
- This calculator is a tool to assist healthcare professionals
- Results should be interpreted in clinical context
- Always verify calculations through multiple sources
- Consider individual patient factors and circumstances
- Follow established clinical guidelines and protocols
"""

DOSING_DISCLAIMER = f"""
{MEDICAL_DISCLAIMERS["PRIMARY"]}
{MEDICAL_DISCLAIMERS["ALWAYS_CONSULT"]}
{MEDICAL_DISCLAIMERS["NOT_SOLE_BASIS"]}

**Critical Safety Warnings for Dosing Calculators:**
- Verify patient allergies and contraindications before prescribing
- Check for drug-drug interactions
- Consider renal and hepatic function
- Adjust for age, weight, and other patient-specific factors
- Monitor therapeutic drug levels when appropriate
- Follow institutional protocols and formularies
- This calculator does not replace clinical judgment
"""

REPORT_SEPARATOR = "\n\n---\n\n"


def get_calculator_disclaimer(calculator_type: str) -> str:
    if "dosing" in calculator_type or "dose" in calculator_type:
        return f"{CALCULATOR_DISCLAIMER}\n{DOSING_DISCLAIMER}"
    return CALCULATOR_DISCLAIMER


def format_with_disclaimer(content: str, calculator_type: str = "") -> str:
    return f"{content}{REPORT_SEPARATOR}{get_calculator_disclaimer(calculator_type)}"
