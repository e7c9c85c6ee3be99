"""ASGI entry point: ``uvicorn ainotes.main:app``."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ainotes import __version__
from ainotes.api.admin import router as admin_router
from ainotes.api.notes import router as notes_router
from ainotes.config import get_settings
from ainotes.database import create_tables, engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create missing tables on startup, dispose the engine on shutdown."""
    await create_tables(engine)
    logger.info("AINotes %s started (chat model %s)", __version__, get_settings().CHAT_MODEL)
    yield
    await engine.dispose()


app = FastAPI(
    title="AINotes",
    description="Notes enriched with AI summaries, tags and related-note search",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(notes_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


@app.get("/api/health", tags=["health"])
async def health_check() -> dict[str, str]:
    return {"status": "ok"}
