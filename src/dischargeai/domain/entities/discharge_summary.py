"""DischargeSummary domain entity: one patient's discharge record."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..enums.discharge import DischargeCondition, Gender, UnitOfAdmission
from ..errors import InvalidDischargeDataError
from ...core.utils.datetime_utils import is_valid_iso_date

# Attributes a clinician must fill in; checked for blank values
REQUIRED_TEXT_FIELDS: Tuple[str, ...] = (
    "patient_name",
    "ip_number",
    "consultant_name",
    "admitting_diagnosis",
    "discharge_diagnosis",
    "hospital_course",
    "discharge_medications",
    "follow_up_plan",
)

# Upper bound for age in years
MAX_AGE_YEARS = 150

# Attributes assigned by the system, never supplied on create
SYSTEM_FIELDS: Tuple[str, ...] = ("id", "generated_summary", "created_at")


@dataclass
class DischargeSummary:
    """Discharge summary domain entity."""

    # Patient details
    patient_name: str
    age: int
    gender: Gender
    ip_number: str
    unit_of_admission: UnitOfAdmission
    admission_date: str
    discharge_date: str
    consultant_name: str

    # Clinical data
    admitting_diagnosis: str
    discharge_diagnosis: str
    hospital_course: str

    # Discharge planning
    discharge_medications: str
    follow_up_plan: str
    discharge_condition: DischargeCondition

    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    bed_number: Optional[str] = None
    comorbidities: Optional[str] = None
    complications: Optional[str] = None
    blood_investigations: Optional[str] = None
    imaging_investigations: Optional[str] = None
    other_investigations: Optional[str] = None
    iv_medications: Optional[str] = None
    special_instructions: Optional[str] = None

    # Assigned at creation
    id: Optional[int] = None
    generated_summary: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate discharge data."""
        self.gender = Gender(self.gender)
        self.unit_of_admission = UnitOfAdmission(self.unit_of_admission)
        self.discharge_condition = DischargeCondition(self.discharge_condition)
        self._validate_discharge_data()

    def _validate_discharge_data(self) -> None:
        for name in REQUIRED_TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidDischargeDataError(name, f"{name} is required")

        if isinstance(self.age, bool) or not isinstance(self.age, int) or not 0 <= self.age <= MAX_AGE_YEARS:
            raise InvalidDischargeDataError("age", f"Age must be a whole number from 0 to {MAX_AGE_YEARS}, got {self.age!r}")

        for name in ("admission_date", "discharge_date"):
            if not is_valid_iso_date(getattr(self, name)):
                raise InvalidDischargeDataError(name, f"{name} must be a date in YYYY-MM-DD form")

    @classmethod
    def input_field_names(cls) -> Tuple[str, ...]:
        """Names of every clinician-supplied attribute, in declaration order."""
        return tuple(f.name for f in fields(cls) if f.name not in SYSTEM_FIELDS)

    def input_data(self) -> Dict[str, Any]:
        """Clinician-supplied attributes with enums reduced to their values."""
        data = asdict(self)
        for name in SYSTEM_FIELDS:
            data.pop(name)
        for name in ("gender", "unit_of_admission", "discharge_condition"):
            data[name] = data[name].value
        return data

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def age_sex(self) -> str:
        """Age/sex label used on printed documents, e.g. ``2y / Male``."""
        return f"{self.age}y / {self.gender.value}"
