"""
Discharge summary repository interface for data access abstraction.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.discharge_summary import DischargeSummary


class DischargeSummaryRepository(ABC):
    """Abstract repository for discharge summary data access.

    Records are only ever created and read; there is no update or delete.
    """

    @abstractmethod
    async def create(self, summary: DischargeSummary) -> DischargeSummary:
        """Insert a new record, assigning ``id`` and ``created_at``.

        ``generated_summary`` is stored exactly as supplied by the caller.
        """
        pass

    @abstractmethod
    async def get_by_id(self, summary_id: int) -> Optional[DischargeSummary]:
        """Find a record by ID; ``None`` when absent."""
        pass

    @abstractmethod
    async def list_all(self) -> List[DischargeSummary]:
        """All records, newest first (``created_at`` descending, then insertion order)."""
        pass

    async def count(self) -> int:
        """Number of stored records."""
        return len(await self.list_all())
