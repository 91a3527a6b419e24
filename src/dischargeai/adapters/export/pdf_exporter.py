"""
PDF rendering of a discharge summary using ReportLab.

Layout: institutional header, rule, patient details, diagnosis, the
generated narrative (justified) and a closing disclaimer. Page breaks are
left to the flowable layout engine.
"""

from __future__ import annotations

import html
import io
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Flowable, HRFlowable, Paragraph, SimpleDocTemplate, Spacer

from dischargeai.application.ports.services.document_exporter import DocumentExporter
from dischargeai.core.config import HospitalSettings
from dischargeai.domain.entities.discharge_summary import DischargeSummary

NO_SUMMARY_TEXT = "No summary generated."
DISCLAIMER_TEXT = "This is a computer-generated document."

# Separator between label pairs sharing a line
_GAP = "&nbsp;" * 4


def _esc(text: Optional[str]) -> str:
    """HTML-escape plain text (None-safe)."""
    if not text:
        return ""
    return html.escape(str(text))


def _nl2br(text: str) -> str:
    """Convert multi-line text into ReportLab markup with <br/>."""
    return "<br/>".join(html.escape(line) for line in text.splitlines())


class PdfDischargeExporter(DocumentExporter):
    """Renders a stored discharge summary as an A4 PDF."""

    media_type = "application/pdf"
    extension = "pdf"

    def __init__(self, hospital: HospitalSettings):
        self._hospital = hospital
        self._styles = self._build_styles()

    @staticmethod
    def _build_styles() -> dict:
        base = getSampleStyleSheet()
        normal = ParagraphStyle("DsNormal", parent=base["Normal"], fontName="Helvetica", fontSize=10, leading=13)
        return {
            "hospital": ParagraphStyle(
                "DsHospital", parent=normal, fontName="Helvetica", fontSize=20, leading=24, alignment=TA_CENTER
            ),
            "department": ParagraphStyle(
                "DsDepartment", parent=normal, fontSize=14, leading=18, alignment=TA_CENTER
            ),
            "address": ParagraphStyle("DsAddress", parent=normal, fontSize=10, alignment=TA_CENTER),
            "section": ParagraphStyle(
                "DsSection", parent=normal, fontName="Helvetica-Bold", fontSize=12, leading=15, spaceAfter=2
            ),
            "body": normal,
            "narrative": ParagraphStyle("DsNarrative", parent=normal, alignment=TA_JUSTIFY),
            "footer": ParagraphStyle("DsFooter", parent=normal, fontSize=8, leading=10, alignment=TA_CENTER),
        }

    def _line(self, text: str) -> Paragraph:
        return Paragraph(text, self._styles["body"])

    def _story(self, summary: DischargeSummary) -> List[Flowable]:
        s = self._styles
        story: List[Flowable] = [
            Paragraph(_esc(self._hospital.name), s["hospital"]),
            Paragraph(_esc(self._hospital.department), s["department"]),
            Paragraph(_esc(self._hospital.address), s["address"]),
            Spacer(1, 4 * mm),
            HRFlowable(width="100%", thickness=1, color=colors.black),
            Spacer(1, 4 * mm),
        ]

        story.append(Paragraph("PATIENT DETAILS", s["section"]))
        story.append(
            self._line(f"Name: {_esc(summary.patient_name)}{_GAP}Age/Sex: {_esc(summary.age_sex)}")
        )
        story.append(
            self._line(
                f"IP No: {_esc(summary.ip_number)}{_GAP}Unit: {_esc(summary.unit_of_admission.value)}"
            )
        )
        story.append(self._line(f"Consultant: {_esc(summary.consultant_name)}"))
        story.append(
            self._line(f"DOA: {_esc(summary.admission_date)}{_GAP}DOD: {_esc(summary.discharge_date)}")
        )
        story.append(Spacer(1, 4 * mm))

        story.append(Paragraph("DIAGNOSIS", s["section"]))
        story.append(self._line(f"Admitting: {_esc(summary.admitting_diagnosis)}"))
        story.append(self._line(f"Discharge: {_esc(summary.discharge_diagnosis)}"))
        story.append(Spacer(1, 4 * mm))

        story.append(Paragraph("SUMMARY OF COURSE &amp; MANAGEMENT", s["section"]))
        story.append(Paragraph(_nl2br(summary.generated_summary or NO_SUMMARY_TEXT), s["narrative"]))

        story.append(Spacer(1, 10 * mm))
        story.append(Paragraph(DISCLAIMER_TEXT, s["footer"]))
        return story

    def render(self, summary: DischargeSummary) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=18 * mm,
            rightMargin=18 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"Discharge Summary - {summary.ip_number}",
        )
        doc.build(self._story(summary))
        return buffer.getvalue()
