"""FastAPI dependencies that assemble the enrichment stack per request."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.ai.openai_client import OpenAIChatClient, OpenAIEmbeddingClient
from ainotes.ai.ports import ChatCompletionPort, EmbeddingPort
from ainotes.config import get_settings
from ainotes.database import get_db
from ainotes.services.enrichment import ContentEnrichmentService, EnrichmentOptions
from ainotes.services.note_store import NoteStore


@lru_cache
def get_chat_port() -> ChatCompletionPort:
    settings = get_settings()
    return OpenAIChatClient(
        api_key=settings.OPENAI_API_KEY or None,
        model=settings.CHAT_MODEL,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
    )


@lru_cache
def get_embedding_port() -> EmbeddingPort:
    settings = get_settings()
    return OpenAIEmbeddingClient(
        api_key=settings.OPENAI_API_KEY or None,
        model=settings.EMBEDDING_MODEL,
        dimensions=settings.EMBEDDING_DIMENSION,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
    )


@lru_cache
def get_enrichment_options() -> EnrichmentOptions:
    return EnrichmentOptions.from_settings(get_settings())


def get_note_store(db: AsyncSession = Depends(get_db)) -> NoteStore:
    return NoteStore(db)


def get_enrichment_service(
    store: NoteStore = Depends(get_note_store),
    chat: ChatCompletionPort = Depends(get_chat_port),
    embedder: EmbeddingPort = Depends(get_embedding_port),
    options: EnrichmentOptions = Depends(get_enrichment_options),
) -> ContentEnrichmentService:
    return ContentEnrichmentService(chat, embedder, store=store, options=options)
