"""Abstract remote capability ports.

The enrichment service talks to the model provider only through these two
narrow interfaces, so tests can substitute an ``AsyncMock`` or a small fake
for the network-backed adapters in ``ainotes.ai.openai_client``.

Usage:
    class MyChatClient(ChatCompletionPort):
        async def complete_chat(self, messages, options) -> str:
            ...

    class MyEmbeddingClient(EmbeddingPort):
        async def generate_embedding(self, text) -> list[float]:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ainotes.ai.schemas import ChatOptions, Message


class ChatCompletionPort(ABC):
    """Sends role-tagged messages to a chat model and returns its text."""

    @abstractmethod
    async def complete_chat(self, messages: list[Message], options: ChatOptions) -> str:
        """Send a chat request and return the response text verbatim.

        Args:
            messages: The conversation as a list of Messages.
            options: Generation parameters (max_tokens, temperature).

        Returns:
            The generated text.

        Raises:
            ProviderError: If the provider request fails.
        """
        ...


class EmbeddingPort(ABC):
    """Turns a string into a fixed-length numeric vector."""

    @abstractmethod
    async def generate_embedding(self, text: str) -> list[float]:
        """Embed a single text.

        Raises:
            ProviderError: If the provider request fails.
        """
        ...
