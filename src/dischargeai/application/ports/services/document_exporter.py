"""
Document exporter interface for downloadable discharge summaries.
"""

from abc import ABC, abstractmethod

from ....core.utils.file_utils import build_export_filename
from ....domain.entities.discharge_summary import DischargeSummary


class DocumentExporter(ABC):
    """Renders one stored discharge summary into a downloadable document."""

    media_type: str = "application/octet-stream"
    extension: str = "bin"

    @abstractmethod
    def render(self, summary: DischargeSummary) -> bytes:
        """Render the document; pure function of the record."""
        pass

    def filename(self, summary: DischargeSummary) -> str:
        """Attachment filename, embedding the record's IP number."""
        return build_export_filename(summary.ip_number, self.extension)
