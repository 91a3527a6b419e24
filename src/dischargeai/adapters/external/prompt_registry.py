"""
Prompt registry for LLM scenarios and version tracking.

Every completion call is tagged with its scenario and the version of the
prompt template it used, so traces can be compared across prompt changes.
"""

from __future__ import annotations

from enum import Enum


class PromptScenario(str, Enum):
    """LLM scenarios for telemetry and prompt versioning."""

    DISCHARGE_SUMMARY = "discharge_summary"


# Bump when the template in application/utils/discharge_prompt.py changes.
PROMPT_VERSIONS: dict[PromptScenario, str] = {
    PromptScenario.DISCHARGE_SUMMARY: "DISCHARGE_V1_2023-10-01",
}


__all__ = ["PromptScenario", "PROMPT_VERSIONS"]
