"""Create Discharge Summary use case: generate the narrative, then persist."""

import logging

from ...domain.entities.discharge_summary import DischargeSummary
from ..ports.repositories.discharge_repo import DischargeSummaryRepository
from ..ports.services.completion_service import CompletionRequest, TextCompletionService
from ..utils.discharge_prompt import build_discharge_prompt, build_system_prompt

logger = logging.getLogger("dischargeai")

GENERATION_FALLBACK_TEXT = "Summary generation failed."


class CreateDischargeSummaryUseCase:
    """Use case for generating and storing a new discharge summary."""

    def __init__(
        self,
        repository: DischargeSummaryRepository,
        completion_service: TextCompletionService,
        hospital_name: str,
        max_tokens: int,
    ):
        self._repository = repository
        self._completion_service = completion_service
        self._hospital_name = hospital_name
        self._max_tokens = max_tokens

    async def execute(self, draft: DischargeSummary) -> DischargeSummary:
        """
        Generate the narrative for ``draft`` and store the record.

        The provider is called first; a CompletionError propagates and nothing
        is written. An empty completion is replaced by the fallback text.
        """
        if draft.is_persisted or draft.generated_summary is not None:
            raise ValueError("Discharge summary has already been generated")

        request = CompletionRequest(
            system_prompt=build_system_prompt(self._hospital_name),
            user_prompt=build_discharge_prompt(draft, self._hospital_name),
            max_tokens=self._max_tokens,
        )
        text = await self._completion_service.complete(request)
        if not text or not text.strip():
            logger.warning(
                "Empty completion for discharge summary (ip_number=%s); storing fallback text",
                draft.ip_number,
            )
            text = GENERATION_FALLBACK_TEXT

        draft.generated_summary = text
        stored = await self._repository.create(draft)
        logger.info("Discharge summary created: id=%s ip_number=%s", stored.id, stored.ip_number)
        return stored
