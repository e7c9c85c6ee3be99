import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Must be set before ainotes.config is imported anywhere.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "unit-test-signing-key")
os.environ.setdefault("OPENAI_API_KEY", "sk-test-key-fake")

from tests.fakes import FakeChatPort, FakeEmbeddingPort  # noqa: E402


@pytest_asyncio.fixture
async def test_db() -> AsyncIterator[AsyncSession]:
    """Session bound to a private in-memory SQLite database with the schema created."""
    from ainotes.database import create_tables

    # StaticPool keeps the single in-memory connection alive for the whole test
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)

    sessions = async_sessionmaker(engine, expire_on_commit=False)
    async with sessions() as session:
        yield session
        await session.rollback()
    await engine.dispose()


@pytest.fixture
def chat_port() -> FakeChatPort:
    return FakeChatPort()


@pytest.fixture
def embedding_port() -> FakeEmbeddingPort:
    return FakeEmbeddingPort()


@pytest_asyncio.fixture
async def test_app(test_db, chat_port, embedding_port):
    """The API wired to the test session and fake AI ports (no retries)."""
    from ainotes.api.deps import get_chat_port, get_embedding_port, get_enrichment_options
    from ainotes.database import get_db
    from ainotes.main import app
    from ainotes.services.enrichment import EnrichmentOptions

    async def _db():
        yield test_db

    app.dependency_overrides.update(
        {
            get_db: _db,
            get_chat_port: lambda: chat_port,
            get_embedding_port: lambda: embedding_port,
            get_enrichment_options: lambda: EnrichmentOptions(retry_attempts=1),
        }
    )
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client


def make_auth_headers(sub: str = "testuser") -> dict[str, str]:
    """Bearer header for an access token owned by *sub*."""
    from ainotes.services.auth_service import issue_owner_token

    return {"Authorization": f"Bearer {issue_owner_token(sub)}"}
