"""
MongoDB implementation of DischargeSummaryRepository.
"""

import logging
from typing import List, Optional

from beanie.exceptions import CollectionWasNotInitialized
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from dischargeai.application.ports.repositories.discharge_repo import DischargeSummaryRepository
from dischargeai.core.exceptions import DatabaseError
from dischargeai.core.utils.datetime_utils import ensure_utc, get_current_timestamp
from dischargeai.domain.entities.discharge_summary import DischargeSummary

from ..models.discharge_m import CounterMongo, DischargeSummaryMongo

logger = logging.getLogger("dischargeai")

SEQUENCE_NAME = "discharge_summaries"


def _mongo_timestamp():
    """Current UTC time at the millisecond precision BSON dates keep."""
    now = get_current_timestamp()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _require_initialized() -> None:
    """Raise DatabaseError until init_beanie has bound the document models."""
    try:
        DischargeSummaryMongo.get_settings()
        CounterMongo.get_settings()
    except CollectionWasNotInitialized as e:
        raise DatabaseError("Database is not initialized") from e


class MongoDischargeSummaryRepository(DischargeSummaryRepository):
    """MongoDB implementation of DischargeSummaryRepository."""

    async def _next_id(self) -> int:
        """Atomically increment and return the discharge summary sequence."""
        counter = await CounterMongo.get_motor_collection().find_one_and_update(
            {"_id": SEQUENCE_NAME},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    async def create(self, summary: DischargeSummary) -> DischargeSummary:
        """Insert a discharge summary with a fresh ID."""
        _require_initialized()
        try:
            summary_id = await self._next_id()
            document = DischargeSummaryMongo(
                summary_id=summary_id,
                generated_summary=summary.generated_summary,
                created_at=_mongo_timestamp(),
                **summary.input_data(),
            )
            await document.insert()
        except PyMongoError as e:
            logger.error("Failed to insert discharge summary: %s", e)
            raise DatabaseError("Failed to store discharge summary") from e
        return self._mongo_to_domain(document)

    async def get_by_id(self, summary_id: int) -> Optional[DischargeSummary]:
        """Find a discharge summary by ID."""
        _require_initialized()
        try:
            document = await DischargeSummaryMongo.find_one(
                DischargeSummaryMongo.summary_id == summary_id
            )
        except PyMongoError as e:
            logger.error("Failed to load discharge summary %s: %s", summary_id, e)
            raise DatabaseError("Failed to load discharge summary") from e
        if not document:
            return None
        return self._mongo_to_domain(document)

    async def list_all(self) -> List[DischargeSummary]:
        """All discharge summaries, newest first."""
        _require_initialized()
        try:
            documents = await DischargeSummaryMongo.find_all().sort(
                -DischargeSummaryMongo.created_at,
                -DischargeSummaryMongo.summary_id,
            ).to_list()
        except PyMongoError as e:
            logger.error("Failed to list discharge summaries: %s", e)
            raise DatabaseError("Failed to list discharge summaries") from e
        return [self._mongo_to_domain(document) for document in documents]

    async def count(self) -> int:
        _require_initialized()
        try:
            return await DischargeSummaryMongo.find_all().count()
        except PyMongoError as e:
            raise DatabaseError("Failed to count discharge summaries") from e

    def _mongo_to_domain(self, document: DischargeSummaryMongo) -> DischargeSummary:
        """Convert MongoDB model to domain entity."""
        data = document.model_dump(include=set(DischargeSummary.input_field_names()))
        return DischargeSummary(
            id=document.summary_id,
            generated_summary=document.generated_summary,
            created_at=ensure_utc(document.created_at),
            **data,
        )
