"""Value types exchanged with the AI ports."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    role: Role
    content: str


class ChatOptions(BaseModel):
    """Per-request generation limits.

    ``max_tokens`` caps the completion length; ``temperature`` trades
    determinism for variety (0.0 to 2.0).
    """

    model_config = ConfigDict(frozen=True)

    max_tokens: int = Field(default=256, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)


class ProviderError(Exception):
    """A remote AI call failed.

    ``status_code`` is the HTTP status reported by the provider, or None
    when the request never got a response (timeout, connection reset).
    """

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        self.provider = provider
        self.message = message
        self.status_code = status_code
        detail = f"{provider}: {message}"
        if status_code is not None:
            detail += f" (status {status_code})"
        super().__init__(detail)

    @property
    def is_transient(self) -> bool:
        """True for rate limits, server errors and transport failures."""
        if self.status_code is None:
            return True
        return self.status_code == 429 or self.status_code >= 500
