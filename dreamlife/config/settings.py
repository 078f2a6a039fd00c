"""
Global settings from environment variables.
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DreamLifeSettings(BaseSettings):
    """
    Global configuration loaded from environment variables.

    Environment variables should be prefixed with DREAMLIFE_
    Example: DREAMLIFE_DEBUG=true, DREAMLIFE_MONGO_URI=mongodb://localhost:27017
    """

    model_config = SettingsConfigDict(
        env_prefix="DREAMLIFE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        protected_namespaces=(),
    )

    # Core settings
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False

    # Storage settings
    mongo_uri: str | None = None
    mongo_db_name: str = "dreamlife"
    knowledge_collection: str = "knowledgebases"

    # OpenAI
    openai_api_key: SecretStr | None = None
    openai_base_url: str | None = None
    embedding_model: str = "text-embedding-3-small"
    completion_model: str = "gpt-3.5-turbo"

    # Answer resolution policy
    reuse_threshold: float = Field(default=0.9, ge=0.0, le=1.0)
    adapt_threshold: float = Field(default=0.65, ge=0.0, le=1.0)
    retrieval_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    retrieval_top_k: int = Field(default=5, ge=1)
    adapt_context_size: int = Field(default=3, ge=1)
    adapt_temperature: float = Field(default=0.55, ge=0.0, le=2.0)
    adapt_max_tokens: int = Field(default=260, ge=1)
    generate_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    generate_max_tokens: int = Field(default=300, ge=1)
    completion_timeout: float = Field(default=8.0, gt=0.0)

    # Engine context
    embedding_cache_size: int | None = Field(default=None, ge=1)  # None = unbounded
    dedupe_in_flight: bool = True

    # Chat sessions
    session_history_limit: int = Field(default=50, ge=1)
    session_idle_timeout: float = 2 * 60 * 60
    session_cleanup_interval: float = 30 * 60

    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    host: str = "0.0.0.0"
    port: int = 3000


# Global settings instance (singleton)
settings = DreamLifeSettings()


__all__ = ["DreamLifeSettings", "settings"]
