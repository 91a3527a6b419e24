"""Seed the store with one demonstration record when it is empty."""

import logging
from typing import Optional

from ...domain.entities.discharge_summary import DischargeSummary
from ...domain.enums.discharge import DischargeCondition, Gender, UnitOfAdmission
from ..ports.repositories.discharge_repo import DischargeSummaryRepository

logger = logging.getLogger("dischargeai")

DEMO_GENERATED_SUMMARY = (
    "DISCHARGE SUMMARY\n\n"
    "PATIENT DETAILS\nName: Baby of Priya\nAge/Sex: 2y/Male\nIP No: IP123456\n"
    "Unit: PICU\nConsultant: Dr. S. Kumar\n\n"
    "DIAGNOSIS\nAdmitting: Acute Bronchiolitis\nDischarge: Acute Bronchiolitis - Resolved\n\n"
    "COURSE IN HOSPITAL\nAdmitted with respiratory distress. Started on O2 support and "
    "nebulization. Gradually weaned off O2. Feeds established. Discharged in stable condition.\n\n"
    "ADVICE ON DISCHARGE\nContinue medications as prescribed. Review in OPD after 1 week."
)


def build_demo_summary() -> DischargeSummary:
    return DischargeSummary(
        patient_name="Baby of Priya",
        age=2,
        gender=Gender.MALE,
        father_name="Ramesh",
        mother_name="Priya",
        ip_number="IP123456",
        bed_number="PICU-05",
        unit_of_admission=UnitOfAdmission.PICU,
        admission_date="2023-10-01",
        discharge_date="2023-10-05",
        consultant_name="Dr. S. Kumar",
        admitting_diagnosis="Acute Bronchiolitis",
        discharge_diagnosis="Acute Bronchiolitis - Resolved",
        hospital_course=(
            "Admitted with respiratory distress. Started on O2 support and nebulization. "
            "Gradually weaned off O2. Feeds established. Discharged in stable condition."
        ),
        discharge_medications="Syp. Ascoril LS 2.5ml TDS x 5 days",
        follow_up_plan="Review in OPD after 1 week (12/10/2023)",
        discharge_condition=DischargeCondition.STABLE,
        generated_summary=DEMO_GENERATED_SUMMARY,
    )


class SeedDischargeSummariesUseCase:
    """Insert the demo record without calling the completion provider."""

    def __init__(self, repository: DischargeSummaryRepository):
        self._repository = repository

    async def execute(self) -> Optional[DischargeSummary]:
        if await self._repository.count() > 0:
            logger.debug("Store already has records; skipping demo seed")
            return None
        logger.info("Seeding database with demo discharge summary...")
        stored = await self._repository.create(build_demo_summary())
        logger.info("Seeding complete (id=%s)", stored.id)
        return stored
