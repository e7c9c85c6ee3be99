"""OpenAI adapters for the remote capability ports (AsyncOpenAI).

Both adapters are thin forwarders: they convert internal messages to the
OpenAI wire format, call the SDK and hand back the text or vector. Every
SDK failure is re-raised as ``ProviderError``; degradation is the caller's
job.

Usage:
    chat = OpenAIChatClient(api_key="sk-...", model="gpt-4o-mini")
    text = await chat.complete_chat(messages, ChatOptions(max_tokens=150))

    embedder = OpenAIEmbeddingClient(api_key="sk-...")
    vector = await embedder.generate_embedding("Hello world")
"""

from __future__ import annotations

import os
from typing import Any

import openai
from openai import AsyncOpenAI

from ainotes.ai.ports import ChatCompletionPort, EmbeddingPort
from ainotes.ai.schemas import ChatOptions, Message, ProviderError

_PROVIDER_NAME = "openai"

# Models that require max_completion_tokens instead of max_tokens.
_MAX_COMPLETION_TOKENS_PREFIXES = ("o1", "o3", "o4", "gpt-5", "gpt-4.1")
# Reasoning models additionally do not support the temperature parameter.
_REASONING_MODEL_PREFIXES = ("o1", "o3", "o4")


def _make_client(api_key: str | None, timeout: float) -> AsyncOpenAI:
    resolved_key = api_key or os.environ.get("OPENAI_API_KEY")
    if not resolved_key:
        raise ProviderError(
            provider=_PROVIDER_NAME,
            message="API key is required. Pass api_key or set OPENAI_API_KEY environment variable.",
            status_code=None,
        )
    # Retries are handled by ainotes.ai.retry, not by the SDK.
    return AsyncOpenAI(api_key=resolved_key, timeout=timeout, max_retries=0)


def _to_provider_error(exc: openai.APIError) -> ProviderError:
    status_code = exc.status_code if isinstance(exc, openai.APIStatusError) else None
    return ProviderError(provider=_PROVIDER_NAME, message=str(exc), status_code=status_code)


class OpenAIChatClient(ChatCompletionPort):
    """Chat completion port backed by the OpenAI API.

    Args:
        api_key: OpenAI API key. Falls back to the ``OPENAI_API_KEY``
            environment variable when *None*.
        model: Chat model identifier.
        timeout: Per-request transport timeout in seconds.

    Raises:
        ProviderError: If no API key is found.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        *,
        timeout: float = 30.0,
    ) -> None:
        self._client = _make_client(api_key, timeout)
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def _request_kwargs(self, options: ChatOptions) -> dict[str, Any]:
        """Map ChatOptions onto the parameter names the model accepts."""
        kwargs: dict[str, Any] = {"temperature": options.temperature}
        if self._model.startswith(_MAX_COMPLETION_TOKENS_PREFIXES):
            kwargs["max_completion_tokens"] = options.max_tokens
        else:
            kwargs["max_tokens"] = options.max_tokens
        if self._model.startswith(_REASONING_MODEL_PREFIXES):
            kwargs.pop("temperature", None)
        return kwargs

    async def complete_chat(self, messages: list[Message], options: ChatOptions) -> str:
        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=self._convert_messages(messages),
                **self._request_kwargs(options),
            )
        except openai.APIError as exc:
            raise _to_provider_error(exc) from exc

        if not completion.choices:
            raise ProviderError(
                provider=_PROVIDER_NAME,
                message="Chat completion returned no choices",
            )
        return completion.choices[0].message.content or ""

    @staticmethod
    def _convert_messages(messages: list[Message]) -> list[dict[str, str]]:
        """Convert internal Message objects to OpenAI API format."""
        return [{"role": m.role, "content": m.content} for m in messages]


class OpenAIEmbeddingClient(EmbeddingPort):
    """Embedding port backed by the OpenAI embeddings endpoint.

    Parameters
    ----------
    api_key : str | None
        OpenAI API key; falls back to ``OPENAI_API_KEY``.
    model : str
        Embedding model name (default: ``text-embedding-3-small``).
    dimensions : int
        Output vector dimensions (default: 1536).
    timeout : float
        Per-request transport timeout in seconds.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "text-embedding-3-small",
        dimensions: int = 1536,
        *,
        timeout: float = 30.0,
    ) -> None:
        self._client = _make_client(api_key, timeout)
        self._model = model
        self._dimensions = dimensions

    async def generate_embedding(self, text: str) -> list[float]:
        try:
            response = await self._client.embeddings.create(
                input=[text],
                model=self._model,
                dimensions=self._dimensions,
            )
        except openai.APIError as exc:
            raise _to_provider_error(exc) from exc

        if not response.data:
            raise ProviderError(
                provider=_PROVIDER_NAME,
                message="Embedding response contained no data",
            )
        return list(response.data[0].embedding)
