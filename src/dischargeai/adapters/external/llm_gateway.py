"""
Centralized LLM gateway with telemetry and prompt version tracking.

This module provides a unified interface for making LLM calls with:
- Prompt version tracking per scenario
- OpenTelemetry span attributes (latency, token usage)
- Consistent logging of failures
"""

import logging
import time
from typing import Any, Dict, List, Optional

from dischargeai.adapters.external.prompt_registry import PROMPT_VERSIONS, PromptScenario
from dischargeai.core.ai_client import ChatCompletionClient
from dischargeai.observability.tracing import (
    add_span_attribute,
    set_span_status,
    trace_operation,
)

logger = logging.getLogger(__name__)


async def call_llm_with_telemetry(
    ai_client: ChatCompletionClient,
    scenario: PromptScenario,
    messages: List[Dict[str, str]],
    max_tokens: Optional[int] = None,
    **kwargs: Any,
) -> Any:
    """
    Central gateway for LLM calls with telemetry.

    Args:
        ai_client: ChatCompletionClient instance
        scenario: PromptScenario enum value for this LLM call
        messages: List of message dicts for the LLM
        max_tokens: Optional max tokens for response
        **kwargs: Additional arguments passed to chat completion

    Returns:
        LLM response object
    """
    prompt_version = PROMPT_VERSIONS.get(scenario, "UNKNOWN")
    start_time = time.perf_counter()

    with trace_operation(
        "llm_call",
        {
            "llm.scenario": scenario.value,
            "llm.prompt_version": prompt_version,
            "llm.model": ai_client.model,
        },
    ) as span:
        try:
            response = await ai_client.chat(messages=messages, max_tokens=max_tokens, **kwargs)
        except Exception as e:
            latency_ms = (time.perf_counter() - start_time) * 1000.0
            add_span_attribute(span, "llm.latency_ms", latency_ms)
            add_span_attribute(span, "llm.error", str(e)[:200])
            set_span_status(span, success=False, error_message=str(e))
            logger.error(
                f"LLM call failed: scenario={scenario.value} "
                f"version={prompt_version} error={str(e)}"
            )
            raise

        latency_ms = (time.perf_counter() - start_time) * 1000.0
        add_span_attribute(span, "llm.latency_ms", latency_ms)
        usage = getattr(response, "usage", None)
        if usage:
            add_span_attribute(span, "llm.tokens", getattr(usage, "total_tokens", 0))
        set_span_status(span, success=True)

        logger.info(
            f"LLM call completed: scenario={scenario.value} "
            f"version={prompt_version} latency_ms={latency_ms:.2f}"
        )
        return response
