"""Application settings via pydantic-settings.

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  DEVELOPER QUICK-START  — What env vars do I need?
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#  None. The portal runs entirely on the in-memory mock store, so every
#  setting has a working default. The knobs below only change behavior:
#
#    APP_ENV           development | staging | production
#    LOG_LEVEL         DEBUG | INFO | WARNING | ERROR
#    ALLOWED_ORIGINS   Comma-separated CORS origins for the frontend
#    MOCK_LATENCY_MS   Artificial delay before every mock API call
#    DOI_PREFIX        Registrant prefix used when publishing papers
#    DOI_YEAR          Year segment of synthesized DOIs
#    SUBMISSION_FEE    Fee attached to new submissions
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables.

    Called by: Every module that needs configuration (via ``get_settings()``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: str = "development"
    log_level: str = "INFO"
    # Comma-separated CORS origins.
    allowed_origins: str = "http://localhost:3000"
    # Canonical frontend URL, used as the CORS fallback origin.
    app_base_url: str = "http://localhost:3000"

    # ─── Mock Layer ───────────────────────────────────────────────────────────
    # 0 resolves every call immediately. Anything higher makes the frontend
    # loading states visible during demos.
    mock_latency_ms: int = 0

    # ─── Publishing ───────────────────────────────────────────────────────────
    # Published papers get DOIs shaped like 10.1000/example.2024.007
    doi_prefix: str = "10.1000/example"
    doi_year: int = 2024
    submission_fee: int = 150

    # ─── Computed Properties ──────────────────────────────────────────────────

    @property
    def is_production(self) -> bool:
        """True when app_env is explicitly set to 'production'."""
        return self.app_env == "production"

    @property
    def mock_latency_seconds(self) -> float:
        """Simulated latency converted for ``asyncio.sleep``."""
        return max(self.mock_latency_ms, 0) / 1000

    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a normalized list."""
        origins = [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]
        if not origins:
            return [self.normalized_app_base_url]
        return origins

    @property
    def normalized_app_base_url(self) -> str:
        """Return APP_BASE_URL without a trailing slash."""
        return self.app_base_url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
