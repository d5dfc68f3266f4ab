"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide the sandbox defaults (chunk size, top_k, retriever mode)

Collaborators:
  - api/main.py: reads settings for CORS and startup logging
  - crosscutting/logger.py: log level and JSON toggle
  - interfaces/api/http/schemas: request validation limits

Constraints:
  - No business logic, pure configuration

Notes:
  - Singleton via lru_cache
  - Defaults mirror the sandbox UI: 90-word chunks, top 3, hybrid retrieval
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_RETRIEVER_MODES = {"semantic", "keyword", "hybrid"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/production)
        log_level: Root log level (default: INFO)
        log_json: Emit JSON log lines (default: True)
        allowed_origins: Comma-separated CORS origins
        default_dataset_id: Dataset preselected by clients (must be registered)
        default_chunk_size: Words per chunk (default: 90)
        max_chunk_size: Upper bound accepted by the API (default: 400)
        default_top_k: Chunks returned per retrieval (default: 3)
        max_top_k: Upper bound accepted by the API (default: 20)
        default_retriever_mode: semantic|keyword|hybrid (default: hybrid)
        max_query_chars: Maximum query length (default: 2_000)
    """

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"

    # Sandbox defaults
    default_dataset_id: str = "support-playbook"
    default_chunk_size: int = 90
    max_chunk_size: int = 400
    default_top_k: int = 3
    max_top_k: int = 20
    default_retriever_mode: str = "hybrid"

    # API limits
    max_query_chars: int = 2_000

    @field_validator("default_chunk_size", "max_chunk_size")
    @classmethod
    def chunk_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("chunk size must be greater than 0")
        return v

    @field_validator("default_top_k", "max_top_k")
    @classmethod
    def top_k_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("top_k must be greater than 0")
        return v

    @field_validator("max_query_chars")
    @classmethod
    def max_query_chars_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_query_chars must be greater than 0")
        return v

    @field_validator("default_retriever_mode")
    @classmethod
    def retriever_mode_valid(cls, v: str) -> str:
        mode = (v or "hybrid").strip().lower()
        if mode not in _RETRIEVER_MODES:
            raise ValueError("default_retriever_mode must be semantic, keyword, or hybrid")
        return mode

    @model_validator(mode="after")
    def validate_defaults_within_limits(self):
        if self.default_chunk_size > self.max_chunk_size:
            raise ValueError(
                f"default_chunk_size ({self.default_chunk_size}) must not exceed "
                f"max_chunk_size ({self.max_chunk_size})"
            )
        if self.default_top_k > self.max_top_k:
            raise ValueError(
                f"default_top_k ({self.default_top_k}) must not exceed "
                f"max_top_k ({self.max_top_k})"
            )
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
