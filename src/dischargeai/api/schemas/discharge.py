"""
Pydantic schemas for discharge summary API endpoints.

JSON bodies use camelCase names (``patientName``); attributes stay
snake_case. Field titles double as the form labels in the web UI.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ...core.utils.datetime_utils import is_valid_iso_date
from ...domain.entities.discharge_summary import MAX_AGE_YEARS, REQUIRED_TEXT_FIELDS, DischargeSummary
from ...domain.enums.discharge import DischargeCondition, Gender, UnitOfAdmission


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DischargeSummaryCreate(CamelModel):
    """Request schema for creating a discharge summary."""

    # Patient details
    patient_name: str = Field(..., min_length=1, title="Patient Name")
    age: int = Field(..., ge=0, le=MAX_AGE_YEARS, strict=True, title="Age (Years)")
    gender: Gender = Field(..., title="Gender")
    father_name: Optional[str] = Field(None, title="Father's Name")
    mother_name: Optional[str] = Field(None, title="Mother's Name")
    ip_number: str = Field(..., min_length=1, title="IP Number", description="Inpatient admission number")
    bed_number: Optional[str] = Field(None, title="Bed Number")
    unit_of_admission: UnitOfAdmission = Field(..., title="Unit of Admission")
    admission_date: str = Field(..., title="Date of Admission", json_schema_extra={"format": "date"})
    discharge_date: str = Field(..., title="Date of Discharge", json_schema_extra={"format": "date"})
    consultant_name: str = Field(..., min_length=1, title="Consultant")

    # Clinical data
    admitting_diagnosis: str = Field(..., min_length=1, title="Admitting Diagnosis")
    comorbidities: Optional[str] = Field(None, title="Comorbidities")
    discharge_diagnosis: str = Field(..., min_length=1, title="Discharge Diagnosis")
    complications: Optional[str] = Field(None, title="Complications")
    blood_investigations: Optional[str] = Field(None, title="Blood Investigations")
    imaging_investigations: Optional[str] = Field(None, title="Imaging Investigations")
    other_investigations: Optional[str] = Field(None, title="Other Investigations")
    hospital_course: str = Field(..., min_length=1, title="Course in Hospital")

    # Discharge planning
    discharge_medications: str = Field(..., min_length=1, title="Discharge Medications")
    iv_medications: Optional[str] = Field(None, title="IV Medications Given")
    follow_up_plan: str = Field(..., min_length=1, title="Follow-up Plan")
    special_instructions: Optional[str] = Field(None, title="Special Instructions")
    discharge_condition: DischargeCondition = Field(..., title="Condition at Discharge")

    @field_validator(*REQUIRED_TEXT_FIELDS)
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("blank_string", "Must not be blank")
        return v

    @field_validator("admission_date", "discharge_date")
    @classmethod
    def validate_iso_date(cls, v: str) -> str:
        if not is_valid_iso_date(v):
            raise PydanticCustomError("date_format", "Date must be in YYYY-MM-DD format")
        return v

    def to_entity(self) -> DischargeSummary:
        """Build an unsaved domain entity from the request."""
        return DischargeSummary(**self.model_dump())


class DischargeSummaryResponse(DischargeSummaryCreate):
    """A stored discharge summary."""

    id: int = Field(..., description="Discharge summary ID")
    generated_summary: Optional[str] = Field(None, description="Narrative produced at creation")
    created_at: datetime = Field(..., description="Insertion timestamp (UTC)")

    @classmethod
    def from_entity(cls, summary: DischargeSummary) -> "DischargeSummaryResponse":
        return cls(
            id=summary.id,
            generated_summary=summary.generated_summary,
            created_at=summary.created_at,
            **summary.input_data(),
        )
