"""Discharge summary API endpoints.

Create runs generation before persistence; reads and exports never call the
completion provider.
"""

import logging
from typing import List

from fastapi import APIRouter, Response, status
from starlette.concurrency import run_in_threadpool

from ...application.ports.repositories.discharge_repo import DischargeSummaryRepository
from ...application.ports.services.document_exporter import DocumentExporter
from ...domain.entities.discharge_summary import DischargeSummary
from ...observability.tracing import add_span_attribute, trace_operation
from ..deps import (
    CreateDischargeUseCaseDep,
    DischargeIdDep,
    DischargeRepositoryDep,
    DocxExporterDep,
    PdfExporterDep,
)
from ..errors import DischargeSummaryNotFoundError
from ..schemas import (
    DischargeSummaryCreate,
    DischargeSummaryResponse,
    MessageResponse,
    ValidationErrorResponse,
)

router = APIRouter(prefix="/api/discharges", tags=["discharges"])
logger = logging.getLogger("dischargeai")

NOT_FOUND_RESPONSE = {404: {"model": MessageResponse, "description": "Summary not found"}}


async def _load_summary(repository: DischargeSummaryRepository, summary_id: int) -> DischargeSummary:
    summary = await repository.get_by_id(summary_id)
    if summary is None:
        raise DischargeSummaryNotFoundError(str(summary_id))
    return summary


async def _export(summary: DischargeSummary, exporter: DocumentExporter) -> Response:
    with trace_operation(
        "document_export", {"export.format": exporter.extension, "discharge.id": summary.id}
    ) as span:
        content = await run_in_threadpool(exporter.render, summary)
        add_span_attribute(span, "export.bytes", len(content))

    logger.info("Exported discharge summary %s as %s", summary.id, exporter.extension)
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={exporter.filename(summary)}"},
    )


@router.post(
    "",
    response_model=DischargeSummaryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid input"},
        500: {"model": MessageResponse, "description": "Generation or storage failed"},
    },
)
async def create_discharge_summary(body: DischargeSummaryCreate, use_case: CreateDischargeUseCaseDep):
    """
    Create a discharge summary.

    Generates the narrative with the language model, then stores the record
    with the narrative attached.
    """
    stored = await use_case.execute(body.to_entity())
    return DischargeSummaryResponse.from_entity(stored)


@router.get("", response_model=List[DischargeSummaryResponse])
async def list_discharge_summaries(repository: DischargeRepositoryDep):
    """All discharge summaries, newest first."""
    summaries = await repository.list_all()
    return [DischargeSummaryResponse.from_entity(s) for s in summaries]


@router.get("/{summary_id}", response_model=DischargeSummaryResponse, responses=NOT_FOUND_RESPONSE)
async def get_discharge_summary(summary_id: DischargeIdDep, repository: DischargeRepositoryDep):
    summary = await _load_summary(repository, summary_id)
    return DischargeSummaryResponse.from_entity(summary)


@router.get(
    "/{summary_id}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}, **NOT_FOUND_RESPONSE},
)
async def download_discharge_pdf(
    summary_id: DischargeIdDep, repository: DischargeRepositoryDep, exporter: PdfExporterDep
):
    """Download the discharge summary as PDF."""
    summary = await _load_summary(repository, summary_id)
    return await _export(summary, exporter)


@router.get(
    "/{summary_id}/docx",
    response_class=Response,
    responses={
        200: {"content": {"application/vnd.openxmlformats-officedocument.wordprocessingml.document": {}}},
        **NOT_FOUND_RESPONSE,
    },
)
async def download_discharge_docx(
    summary_id: DischargeIdDep, repository: DischargeRepositoryDep, exporter: DocxExporterDep
):
    """Download the discharge summary as a Word document."""
    summary = await _load_summary(repository, summary_id)
    return await _export(summary, exporter)
