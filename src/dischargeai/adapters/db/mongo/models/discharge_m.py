"""
MongoDB Beanie models used by the persistence layer.

Dates entered on the form are stored as ISO text, as submitted.
"""

from datetime import datetime
from typing import Optional

import pymongo
from beanie import Document, Indexed
from pydantic import Field


class DischargeSummaryMongo(Document):
    """MongoDB model for a discharge summary."""

    summary_id: Indexed(int, unique=True) = Field(..., description="Auto-incremented public ID")

    # Patient details
    patient_name: str = Field(..., description="Patient name")
    age: int = Field(..., description="Age in years")
    gender: str = Field(..., description="Male, Female or Other")
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    ip_number: str = Field(..., description="Inpatient admission number")
    bed_number: Optional[str] = None
    unit_of_admission: str = Field(..., description="Clinical unit")
    admission_date: str = Field(..., description="ISO date string")
    discharge_date: str = Field(..., description="ISO date string")
    consultant_name: str = Field(..., description="Consultant name")

    # Clinical data
    admitting_diagnosis: str
    comorbidities: Optional[str] = None
    discharge_diagnosis: str
    complications: Optional[str] = None
    blood_investigations: Optional[str] = None
    imaging_investigations: Optional[str] = None
    other_investigations: Optional[str] = None
    hospital_course: str

    # Discharge planning
    discharge_medications: str
    iv_medications: Optional[str] = None
    follow_up_plan: str
    special_instructions: Optional[str] = None
    discharge_condition: str

    # Generated content
    generated_summary: Optional[str] = Field(None, description="Narrative produced at creation")

    created_at: datetime = Field(..., description="Insertion timestamp (UTC)")

    class Settings:
        name = "discharge_summaries"
        indexes = [
            [("created_at", pymongo.DESCENDING), ("summary_id", pymongo.DESCENDING)],
        ]


class CounterMongo(Document):
    """Named sequence used to hand out integer IDs."""

    id: str = Field(..., description="Sequence name")
    seq: int = Field(default=0, description="Last value handed out")

    class Settings:
        name = "counters"
