"""Runtime configuration read from the environment (and an optional .env)."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the API and its AI enrichment pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # --- Database ---
    DATABASE_URL: str = "sqlite+aiosqlite:///./ainotes.db"

    # --- JWT ---
    JWT_SECRET: str = "change-this-secret-key"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # --- OpenAI ---
    OPENAI_API_KEY: str = ""
    CHAT_MODEL: str = "gpt-4o-mini"
    OPENAI_TIMEOUT_SECONDS: float = 30.0

    # --- Embeddings ---
    EMBEDDING_MODEL: str = "text-embedding-3-small"
    EMBEDDING_DIMENSION: int = 1536

    # --- HTTP ---
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # --- Enrichment ---
    MAX_SUMMARY_TOKENS: int = 150
    RELATED_NOTES_COUNT: int = 5
    SIMILARITY_THRESHOLD: float | None = None  # unset = no minimum score
    AI_RETRY_ATTEMPTS: int = 2
    AI_RETRY_BASE_DELAY: float = 0.5
    BATCH_CONCURRENCY: int = 1

    @property
    def async_database_url(self) -> str:
        """DATABASE_URL rewritten to use asyncpg or aiosqlite."""
        url = self.DATABASE_URL
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif url.startswith("sqlite://"):
            url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
