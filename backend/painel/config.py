"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (GEMINI_API_KEY) come from the environment or .env, never hardcoded
    - get_settings() is cached (lru_cache): single instance per process
    - A missing Gemini key is allowed at startup; generation calls report it

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - CORS_ORIGIN keeps the single-string form ("*" or comma-separated origins)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from painel.core.quota import QUOTA_PATTERNS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Gemini (generative-language REST API)
    gemini_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-1.5-flash"
    gemini_timeout_seconds: float = 60.0
    quota_error_patterns: list[str] = list(QUOTA_PATTERNS)

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v):
        """GEMINI_API_KEY= (empty) in .env means "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # IBGE aggregates API, table 6397 (PNAD Contínua rates), Brazil level
    ibge_aggregate_url: str = (
        "https://servicodados.ibge.gov.br/api/v3/agregados/6397"
        "/periodos/all/variaveis/all?localidades=N1[1]"
    )
    ibge_timeout_seconds: float = 30.0

    # HTTP server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000
    cors_origin: str = "*"
    static_dir: str = "static"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origin.split(",") if o.strip()] or ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
