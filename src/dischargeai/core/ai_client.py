"""
Chat-completion client wrapper for the text-generation provider.

Design goals:
- One client per application, built from settings
- OpenAI-compatible endpoint by default (API key + base URL)
- Azure OpenAI when an Azure endpoint is configured
- Retries are governed by ``OPENAI_MAX_RETRIES`` only

This class is intentionally minimal and focused on correctness.
Telemetry is handled by the LLM gateway.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

from openai import AsyncAzureOpenAI, AsyncOpenAI

from .config import Settings


class ChatCompletionClient:
    """
    Thin wrapper around the async OpenAI SDK clients.

    This client:
    - Connects directly to the configured provider (no proxy)
    - Uses the model (or Azure deployment) name from configuration
    """

    def __init__(
        self,
        client: Union[AsyncOpenAI, AsyncAzureOpenAI],
        model: str,
        max_tokens: int,
        temperature: Optional[float] = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatCompletionClient":
        """Build the client for the configured provider."""
        openai_settings = settings.openai
        azure = settings.azure_openai

        if azure.is_configured:
            if not azure.deployment_name:
                raise ValueError(
                    "Azure OpenAI deployment name is required. "
                    "Set AZURE_OPENAI_DEPLOYMENT_NAME."
                )
            # Normalize endpoint: Azure SDK does not expect trailing slash
            client = AsyncAzureOpenAI(
                api_key=azure.api_key,
                api_version=azure.api_version,
                azure_endpoint=azure.endpoint.rstrip("/"),
                max_retries=openai_settings.max_retries,
            )
            model = azure.deployment_name
        else:
            client = AsyncOpenAI(
                api_key=openai_settings.api_key,
                base_url=openai_settings.base_url or None,
                max_retries=openai_settings.max_retries,
            )
            model = openai_settings.model

        return cls(
            client,
            model=model,
            max_tokens=openai_settings.max_tokens,
            temperature=openai_settings.temperature,
        )

    @property
    def model(self) -> str:
        return self._model

    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    async def chat(
        self,
        messages: Sequence[Dict[str, str]],
        *,
        max_tokens: Optional[int] = None,
        **kwargs: Any,
    ):
        """
        Single, non-streaming chat completion.

        Args:
            messages: OpenAI chat messages list.
            max_tokens: Optional ceiling override. Defaults to the configured ceiling.
            **kwargs: Passed directly to the SDK.
        """
        if self._temperature is not None:
            kwargs.setdefault("temperature", self._temperature)
        return await self._client.chat.completions.create(
            model=self._model,
            messages=list(messages),
            max_completion_tokens=max_tokens or self._max_tokens,
            **kwargs,
        )


__all__ = ["ChatCompletionClient"]
