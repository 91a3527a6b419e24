"""
In-process implementation of DischargeSummaryRepository.

Used when ``STORAGE_BACKEND=memory`` (local development) and in tests.
Records live for the lifetime of the process.
"""

import itertools
from dataclasses import replace
from typing import Dict, List, Optional

from dischargeai.application.ports.repositories.discharge_repo import DischargeSummaryRepository
from dischargeai.core.utils.datetime_utils import get_current_timestamp
from dischargeai.domain.entities.discharge_summary import DischargeSummary


class InMemoryDischargeSummaryRepository(DischargeSummaryRepository):
    """Dictionary-backed repository with auto-incrementing ids."""

    def __init__(self) -> None:
        self._records: Dict[int, DischargeSummary] = {}
        self._ids = itertools.count(1)

    async def create(self, summary: DischargeSummary) -> DischargeSummary:
        """Store a copy with a fresh id and timestamp."""
        stored = replace(summary, id=next(self._ids), created_at=get_current_timestamp())
        self._records[stored.id] = stored
        return replace(stored)

    async def get_by_id(self, summary_id: int) -> Optional[DischargeSummary]:
        record = self._records.get(summary_id)
        return replace(record) if record else None

    async def list_all(self) -> List[DischargeSummary]:
        ordered = sorted(
            self._records.values(),
            key=lambda record: (record.created_at, record.id),
            reverse=True,
        )
        return [replace(record) for record in ordered]

    async def count(self) -> int:
        return len(self._records)
