"""
Text-completion service interface for narrative generation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ....core.exceptions import CompletionError


@dataclass(frozen=True)
class CompletionRequest:
    """One single-turn completion request."""

    system_prompt: str
    user_prompt: str
    max_tokens: Optional[int] = None


class TextCompletionService(ABC):
    """Abstract single-shot text completion capability."""

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> Optional[str]:
        """
        Send one request and return the first completion's text.

        Args:
            request: System instruction, user prompt and length ceiling

        Returns:
            The text, or None/empty when the provider answered with no content

        Raises:
            CompletionError: the provider could not be reached or refused the call
        """
        pass


__all__ = ["CompletionError", "CompletionRequest", "TextCompletionService"]
