"""
Word (DOCX) rendering of a discharge summary using python-docx.

Carries a reduced field set compared to the PDF: identity lines, then the
generated narrative.
"""

import io

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from dischargeai.application.ports.services.document_exporter import DocumentExporter
from dischargeai.core.config import HospitalSettings
from dischargeai.domain.entities.discharge_summary import DischargeSummary

NO_SUMMARY_TEXT = "No summary generated."


class DocxDischargeExporter(DocumentExporter):
    """Renders a stored discharge summary as a Word document."""

    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    extension = "docx"

    def __init__(self, hospital: HospitalSettings):
        self._hospital = hospital

    def render(self, summary: DischargeSummary) -> bytes:
        doc = Document()

        doc.add_heading(self._hospital.name, level=1).alignment = WD_ALIGN_PARAGRAPH.CENTER
        doc.add_heading(self._hospital.department, level=2).alignment = WD_ALIGN_PARAGRAPH.CENTER
        doc.add_paragraph(self._hospital.address).alignment = WD_ALIGN_PARAGRAPH.CENTER
        doc.add_paragraph("")

        p = doc.add_paragraph()
        p.add_run("Name: ").bold = True
        p.add_run(f"{summary.patient_name}\t\t")
        p.add_run("Age/Sex: ").bold = True
        p.add_run(summary.age_sex)

        p = doc.add_paragraph()
        p.add_run("IP No: ").bold = True
        p.add_run(f"{summary.ip_number}\t\t")
        p.add_run("DOA: ").bold = True
        p.add_run(summary.admission_date)

        doc.add_paragraph("")
        doc.add_heading("DISCHARGE SUMMARY", level=3).alignment = WD_ALIGN_PARAGRAPH.CENTER
        doc.add_paragraph(summary.generated_summary or NO_SUMMARY_TEXT)

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()
