"""Server-rendered pages: dashboard, new discharge form and read-only detail view."""

import json
from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ...core.utils.datetime_utils import format_display_date, get_current_timestamp
from ...domain.enums.discharge import DischargeCondition
from ..deps import AppSettingsDep, DischargeRepositoryDep, coerce_discharge_id
from ..schemas import DischargeSummaryCreate

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "web" / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["display_date"] = format_display_date

router = APIRouter(tags=["pages"], include_in_schema=False, default_response_class=HTMLResponse)

# Tab id, tab title, attribute names shown on that tab
FORM_TABS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    (
        "patient",
        "Patient Details",
        (
            "patient_name", "age", "gender", "father_name", "mother_name", "ip_number",
            "bed_number", "unit_of_admission", "admission_date", "discharge_date", "consultant_name",
        ),
    ),
    (
        "clinical",
        "Clinical Data",
        (
            "admitting_diagnosis", "comorbidities", "discharge_diagnosis", "complications",
            "blood_investigations", "imaging_investigations", "other_investigations", "hospital_course",
        ),
    ),
    (
        "planning",
        "Discharge Planning",
        (
            "discharge_medications", "iv_medications", "follow_up_plan",
            "special_instructions", "discharge_condition",
        ),
    ),
)

TEXTAREA_FIELDS = frozenset({
    "comorbidities", "complications", "blood_investigations", "imaging_investigations",
    "other_investigations", "hospital_course", "discharge_medications", "iv_medications",
    "follow_up_plan", "special_instructions",
})

OPTION_LABELS = {condition.value: condition.label for condition in DischargeCondition}


@dataclass
class FormField:
    name: str
    label: str
    widget: str
    required: bool
    options: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class FormTab:
    id: str
    title: str
    fields: List[FormField]


def build_form_tabs() -> List[FormTab]:
    """Describe the form from the create schema so labels and choices stay in one place."""
    schema = DischargeSummaryCreate.model_json_schema(by_alias=True)
    model_fields = DischargeSummaryCreate.model_fields
    tabs = []
    for tab_id, title, names in FORM_TABS:
        tab_fields = []
        for name in names:
            info = model_fields[name]
            alias = info.alias or name
            options: List[Tuple[str, str]] = []
            annotation = info.annotation
            if isinstance(annotation, type) and issubclass(annotation, Enum):
                widget = "select"
                options = [(m.value, OPTION_LABELS.get(m.value, m.value)) for m in annotation]
            elif name in TEXTAREA_FIELDS:
                widget = "textarea"
            elif schema["properties"][alias].get("format") == "date":
                widget = "date"
            elif annotation is int:
                widget = "number"
            else:
                widget = "text"
            tab_fields.append(FormField(
                name=alias,
                label=info.title or alias,
                widget=widget,
                required=info.is_required(),
                options=options,
            ))
        tabs.append(FormTab(id=tab_id, title=title, fields=tab_fields))
    return tabs


@router.get("/")
async def dashboard(request: Request, repository: DischargeRepositoryDep, settings: AppSettingsDep):
    summaries = await repository.list_all()
    now = get_current_timestamp()
    this_month = sum(
        1 for s in summaries
        if s.created_at and (s.created_at.year, s.created_at.month) == (now.year, now.month)
    )
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"summaries": summaries, "this_month": this_month, "hospital": settings.hospital},
    )


@router.get("/discharges/new")
async def new_discharge(request: Request, settings: AppSettingsDep):
    schema = DischargeSummaryCreate.model_json_schema(by_alias=True)
    return templates.TemplateResponse(
        request,
        "new_discharge.html",
        {
            "tabs": build_form_tabs(),
            "schema_json": json.dumps(schema),
            "hospital": settings.hospital,
        },
    )


@router.get("/discharges/{summary_id}")
async def discharge_detail(
    request: Request, summary_id: str, repository: DischargeRepositoryDep, settings: AppSettingsDep
):
    parsed_id = coerce_discharge_id(summary_id)
    summary = await repository.get_by_id(parsed_id) if parsed_id is not None else None
    if summary is None:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"hospital": settings.hospital},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return templates.TemplateResponse(
        request,
        "discharge_detail.html",
        {"summary": summary, "hospital": settings.hospital},
    )
