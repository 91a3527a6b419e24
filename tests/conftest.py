"""
Shared fixtures: an app wired to the in-memory store and a scripted
completion service, so no database or provider is needed.
"""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from dischargeai.adapters.db.memory.discharge_repository import InMemoryDischargeSummaryRepository
from dischargeai.app import create_app
from dischargeai.application.ports.services.completion_service import (
    CompletionRequest,
    TextCompletionService,
)
from dischargeai.core.config import AzureOpenAISettings, OpenAISettings, Settings, StorageSettings
from dischargeai.core.container import ServiceNames, build_container
from dischargeai.domain.entities.discharge_summary import DischargeSummary

FAKE_NARRATIVE = (
    "DISCHARGE SUMMARY\n\n"
    "COURSE IN HOSPITAL\nAdmitted with respiratory distress, weaned off oxygen.\n\n"
    "ADVICE ON DISCHARGE\nReview in OPD after 1 week."
)


class FakeCompletionService(TextCompletionService):
    """Scripted completion service that records every request."""

    def __init__(self, reply: Optional[str] = FAKE_NARRATIVE, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.requests: List[CompletionRequest] = []

    async def complete(self, request: CompletionRequest) -> Optional[str]:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    return Settings(
        app_env="testing",
        seed_demo_data=False,
        storage=StorageSettings(backend="memory"),
        openai=OpenAISettings(api_key=""),
        azure_openai=AzureOpenAISettings(endpoint="", api_key=""),
    )


@pytest.fixture
def repository():
    return InMemoryDischargeSummaryRepository()


@pytest.fixture
def completion():
    return FakeCompletionService()


@pytest.fixture
def app(settings, repository, completion):
    container = build_container(settings)
    container.register_singleton(ServiceNames.DISCHARGE_REPOSITORY, repository)
    container.register_singleton(ServiceNames.COMPLETION_SERVICE, completion)
    return create_app(settings=settings, container=container)


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app (runs the lifespan)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def valid_payload():
    return {
        "patientName": "Baby of Priya",
        "age": 2,
        "gender": "Male",
        "ipNumber": "IP123456",
        "unitOfAdmission": "PICU",
        "admissionDate": "2023-10-01",
        "dischargeDate": "2023-10-05",
        "consultantName": "Dr. S. Kumar",
        "admittingDiagnosis": "Acute Bronchiolitis",
        "dischargeDiagnosis": "Acute Bronchiolitis - Resolved",
        "hospitalCourse": "Admitted with respiratory distress. Started on O2 support and nebulization.",
        "dischargeMedications": "Syp. Ascoril LS 2.5ml TDS x 5 days",
        "followUpPlan": "Review in OPD after 1 week",
        "dischargeCondition": "Stable",
    }


@pytest.fixture
def full_payload(valid_payload):
    return {
        **valid_payload,
        "fatherName": "Ramesh",
        "motherName": "Priya",
        "bedNumber": "PICU-05",
        "comorbidities": "None",
        "complications": "Transient desaturation on day 2",
        "bloodInvestigations": "CBC normal, CRP 4",
        "imagingInvestigations": "CXR: hyperinflation",
        "otherInvestigations": "RSV antigen positive",
        "ivMedications": "IV fluids for 24 hours",
        "specialInstructions": "Watch for fast breathing",
    }


@pytest.fixture
def draft():
    """An unsaved discharge summary entity."""
    return DischargeSummary(
        patient_name="Baby of Priya",
        age=2,
        gender="Male",
        ip_number="IP123456",
        unit_of_admission="PICU",
        admission_date="2023-10-01",
        discharge_date="2023-10-05",
        consultant_name="Dr. S. Kumar",
        admitting_diagnosis="Acute Bronchiolitis",
        discharge_diagnosis="Acute Bronchiolitis - Resolved",
        hospital_course="Admitted with respiratory distress.",
        discharge_medications="Syp. Ascoril LS 2.5ml TDS x 5 days",
        follow_up_plan="Review in OPD after 1 week",
        discharge_condition="Stable",
    )
