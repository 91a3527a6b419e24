"""Prompt templates for discharge summary generation.

The prompt is a deterministic function of the record: the same input always
yields the same text, and every clinician-supplied field appears in it.
"""

from typing import Optional

from ...domain.entities.discharge_summary import DischargeSummary

NOT_AVAILABLE = "N/A"

SYSTEM_PROMPT_TEMPLATE = (
    "You are a senior pediatrician at {hospital_name}. "
    "Write professional, concise discharge summaries."
)

USER_PROMPT_TEMPLATE = """\
Create an official {hospital_name} discharge summary for the following patient:

PATIENT: {patient_name}, {age}y/{gender}, IP: {ip_number}, Bed: {bed_number}
FATHER: {father_name}, MOTHER: {mother_name}
UNIT: {unit_of_admission}, Consultant: {consultant_name}
ADMISSION: {admission_date}, DISCHARGE: {discharge_date}

ADMITTING DX: {admitting_diagnosis}
DISCHARGE DX: {discharge_diagnosis}
COMORBIDITIES: {comorbidities}
COMPLICATIONS: {complications}

COURSE IN HOSPITAL: {hospital_course}

INVESTIGATIONS:
Blood: {blood_investigations}
Imaging: {imaging_investigations}
Other: {other_investigations}

IV MEDICATIONS GIVEN: {iv_medications}
MEDICATIONS: {discharge_medications}
FOLLOW UP: {follow_up_plan}
INSTRUCTIONS: {special_instructions}
CONDITION: {discharge_condition}

Format the output as a professional medical discharge summary.
Do not use markdown formatting (like ** or #). Just plain text with clear section headers.
Start with "DISCHARGE SUMMARY" centered.
"""


def _or_na(value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        return NOT_AVAILABLE
    return value


def build_system_prompt(hospital_name: str) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(hospital_name=hospital_name)


def build_discharge_prompt(summary: DischargeSummary, hospital_name: str) -> str:
    """Render the user prompt for one record, with ``N/A`` for empty optional fields."""
    values = {name: _or_na(value) for name, value in summary.input_data().items()}
    return USER_PROMPT_TEMPLATE.format(hospital_name=hospital_name, **values)
