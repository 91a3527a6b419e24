"""
OpenAI-based text completion service implementation.
"""

import logging
from typing import Optional

from openai import OpenAIError

from dischargeai.adapters.external.llm_gateway import call_llm_with_telemetry
from dischargeai.adapters.external.prompt_registry import PromptScenario
from dischargeai.application.ports.services.completion_service import (
    CompletionError,
    CompletionRequest,
    TextCompletionService,
)
from dischargeai.core.ai_client import ChatCompletionClient

logger = logging.getLogger("dischargeai")


class OpenAICompletionService(TextCompletionService):
    """OpenAI implementation of TextCompletionService."""

    def __init__(self, client: ChatCompletionClient):
        self._client = client
        logger.info("[CompletionService] Initialized", extra={"model": client.model})

    async def complete(self, request: CompletionRequest) -> Optional[str]:
        messages = [
            {"role": "system", "content": request.system_prompt},
            {"role": "user", "content": request.user_prompt},
        ]
        try:
            response = await call_llm_with_telemetry(
                ai_client=self._client,
                scenario=PromptScenario.DISCHARGE_SUMMARY,
                messages=messages,
                max_tokens=request.max_tokens,
            )
        except OpenAIError as e:
            raise CompletionError(str(e) or type(e).__name__) from e

        if not response.choices:
            logger.warning("Completion response contained no choices")
            return None
        return response.choices[0].message.content
