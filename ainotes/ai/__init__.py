"""Remote model provider access: ports, OpenAI adapters and prompts."""

from ainotes.ai.ports import ChatCompletionPort, EmbeddingPort
from ainotes.ai.schemas import ChatOptions, Message, ProviderError

__all__ = [
    "ChatCompletionPort",
    "ChatOptions",
    "EmbeddingPort",
    "Message",
    "ProviderError",
]
