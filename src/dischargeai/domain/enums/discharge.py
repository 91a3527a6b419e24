"""
Categorical values used on a discharge summary.
"""

from enum import Enum


class Gender(str, Enum):
    """Patient gender options offered on the intake form."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class UnitOfAdmission(str, Enum):
    """Clinical unit the patient was admitted under."""
    GENERAL_PEDIATRICS = "Unit 1 - General Pediatrics"
    RESPIRATORY = "Unit 2 - Respiratory"
    NEUROLOGY = "Unit 3 - Neurology"
    NICU = "NICU"
    PICU = "PICU"


class DischargeCondition(str, Enum):
    """Outcome status at discharge."""
    RECOVERED = "Recovered"
    IMPROVED = "Improved"
    STABLE = "Stable"
    TRANSFERRED = "Transferred"
    LAMA = "LAMA"  # Left Against Medical Advice

    @property
    def label(self) -> str:
        if self is DischargeCondition.LAMA:
            return "LAMA (Left Against Medical Advice)"
        return self.value
