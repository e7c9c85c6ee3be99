"""Fake AI ports for testing.

Deterministic and inspectable: every call is recorded, responses are
predictable, and failures can be injected per input text.
"""

from __future__ import annotations

import hashlib

from ainotes.ai.ports import ChatCompletionPort, EmbeddingPort
from ainotes.ai.schemas import ChatOptions, Message, ProviderError


class FakeChatPort(ChatCompletionPort):
    """Returns a fixed reply; raises when a prompt contains a failing marker."""

    def __init__(self, reply: str = "fake reply", fail_on: set[str] | None = None) -> None:
        self.reply = reply
        self.fail_on = fail_on or set()
        self.calls: list[tuple[list[Message], ChatOptions]] = []

    async def complete_chat(self, messages: list[Message], options: ChatOptions) -> str:
        self.calls.append((messages, options))
        prompt = "\n".join(m.content for m in messages)
        for marker in self.fail_on:
            if marker in prompt:
                raise ProviderError(provider="fake", message=f"chat failed for {marker}", status_code=400)
        return self.reply


class FakeEmbeddingPort(EmbeddingPort):
    """Deterministic small vectors derived from a hash of the input text."""

    def __init__(self, dim: int = 8, fail_on: set[str] | None = None) -> None:
        self.dim = dim
        self.fail_on = fail_on or set()
        self.calls: list[str] = []

    async def generate_embedding(self, text: str) -> list[float]:
        self.calls.append(text)
        for marker in self.fail_on:
            if marker in text:
                raise ProviderError(provider="fake", message=f"embedding failed for {marker}", status_code=400)
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        return [digest[i] / 255.0 + 0.01 for i in range(self.dim)]
