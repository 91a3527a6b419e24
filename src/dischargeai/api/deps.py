"""FastAPI dependency providers.

Every provider resolves from the per-application container on
``app.state.container``, so tests swap adapters by registering singletons.
"""

from typing import Annotated, Optional

from fastapi import Depends, Request

from ..application.ports.repositories.discharge_repo import DischargeSummaryRepository
from ..application.ports.services.completion_service import TextCompletionService
from ..application.ports.services.document_exporter import DocumentExporter
from ..application.use_cases.create_discharge_summary import CreateDischargeSummaryUseCase
from ..core.config import Settings
from ..core.container import Container, ServiceNames
from .errors import DischargeSummaryNotFoundError

MAX_DISCHARGE_ID = 2**63 - 1


def get_container(request: Request) -> Container:
    """Get the application's dependency container."""
    return request.app.state.container


def get_app_settings(container: Annotated[Container, Depends(get_container)]) -> Settings:
    return container.settings


def get_discharge_repository(
    container: Annotated[Container, Depends(get_container)],
) -> DischargeSummaryRepository:
    """Get discharge summary repository instance."""
    return container.get(ServiceNames.DISCHARGE_REPOSITORY)


def get_completion_service(
    container: Annotated[Container, Depends(get_container)],
) -> TextCompletionService:
    """Get text completion service instance (built on first use)."""
    return container.get(ServiceNames.COMPLETION_SERVICE)


def get_pdf_exporter(container: Annotated[Container, Depends(get_container)]) -> DocumentExporter:
    return container.get(ServiceNames.PDF_EXPORTER)


def get_docx_exporter(container: Annotated[Container, Depends(get_container)]) -> DocumentExporter:
    return container.get(ServiceNames.DOCX_EXPORTER)


def get_create_discharge_use_case(
    settings: Annotated[Settings, Depends(get_app_settings)],
    repository: Annotated[DischargeSummaryRepository, Depends(get_discharge_repository)],
    completion_service: Annotated[TextCompletionService, Depends(get_completion_service)],
) -> CreateDischargeSummaryUseCase:
    return CreateDischargeSummaryUseCase(
        repository=repository,
        completion_service=completion_service,
        hospital_name=settings.hospital.name,
        max_tokens=settings.openai.max_tokens,
    )


def coerce_discharge_id(summary_id: str) -> Optional[int]:
    """Integer form of a path id, or None when it cannot name a stored record."""
    if not (summary_id.isascii() and summary_id.isdigit()) or int(summary_id) > MAX_DISCHARGE_ID:
        return None
    return int(summary_id)


def parse_discharge_id(summary_id: str) -> int:
    parsed = coerce_discharge_id(summary_id)
    if parsed is None:
        raise DischargeSummaryNotFoundError(summary_id)
    return parsed


AppSettingsDep = Annotated[Settings, Depends(get_app_settings)]
DischargeRepositoryDep = Annotated[DischargeSummaryRepository, Depends(get_discharge_repository)]
PdfExporterDep = Annotated[DocumentExporter, Depends(get_pdf_exporter)]
DocxExporterDep = Annotated[DocumentExporter, Depends(get_docx_exporter)]
CreateDischargeUseCaseDep = Annotated[CreateDischargeSummaryUseCase, Depends(get_create_discharge_use_case)]
DischargeIdDep = Annotated[int, Depends(parse_discharge_id)]
