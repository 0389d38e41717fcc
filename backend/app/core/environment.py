"""environment.py — Centralized environment manager.

Reads APP_ENV from settings and provides helpers for startup validation
and environment metadata.

Environment overview:
    development → Debug tooling on, console logs, /docs enabled.
    staging     → Same as development, intended for shared demos.
    production  → JSON logs, /docs disabled, wildcard CORS rejected.

Called by: main.py (startup), middleware.py (headers), routes/health.py
Depends on: config.py (Settings)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from app.config import get_settings

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"

# ─── Valid Environments ───────────────────────────────────────────────────────

VALID_ENVS = frozenset({"development", "staging", "production"})

ENV_DEVELOPMENT = "development"
ENV_STAGING = "staging"
ENV_PRODUCTION = "production"


# ─── Environment Info ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EnvironmentInfo:
    """Immutable snapshot of the current environment configuration.

    Returned by ``get_environment_info()`` and used in health responses
    and middleware headers.
    """

    app_env: str               # "development" | "staging" | "production"
    version: str               # Semantic version of the app
    features: dict[str, bool]  # Feature flags derived from settings


def get_environment_info() -> EnvironmentInfo:
    """Build an EnvironmentInfo snapshot from current settings.

    Returns:
        EnvironmentInfo with env, version, and feature flags.
    """
    settings = get_settings()

    features = {
        "mock_data": True,
        "simulated_latency": settings.mock_latency_ms > 0,
        "debug_tools": settings.app_env != ENV_PRODUCTION,
    }

    return EnvironmentInfo(
        app_env=settings.app_env,
        version=APP_VERSION,
        features=features,
    )


# ─── Startup Validation ──────────────────────────────────────────────────────


def _is_valid_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_environment() -> None:
    """Validate environment configuration on startup.

    Checks:
        - APP_ENV is one of the valid environments.
        - MOCK_LATENCY_MS is not negative.
        - ALLOWED_ORIGINS and APP_BASE_URL are full http(s) URLs.
        - Production never allows a wildcard origin.

    Called by: main.py ``lifespan()`` on app startup.

    Raises:
        ValueError: If APP_ENV is not recognized or the latency is negative.
        RuntimeError: If the CORS configuration is unusable.
    """
    settings = get_settings()

    if settings.app_env not in VALID_ENVS:
        raise ValueError(
            f"Invalid APP_ENV='{settings.app_env}'. "
            f"Must be one of: {sorted(VALID_ENVS)}"
        )

    if settings.mock_latency_ms < 0:
        raise ValueError(f"MOCK_LATENCY_MS must be >= 0, got {settings.mock_latency_ms}")

    allowed_origins = settings.allowed_origins_list

    if "*" in allowed_origins:
        if settings.app_env == ENV_PRODUCTION:
            raise RuntimeError("ALLOWED_ORIGINS cannot contain '*' in production.")
        logger.warning("ALLOWED_ORIGINS contains '*'. This is unsafe outside local development.")
        allowed_origins = [origin for origin in allowed_origins if origin != "*"]

    invalid_origins = [origin for origin in allowed_origins if not _is_valid_http_url(origin)]
    if invalid_origins:
        raise RuntimeError(f"ALLOWED_ORIGINS has invalid URL(s): {', '.join(invalid_origins)}")

    if not _is_valid_http_url(settings.normalized_app_base_url):
        raise RuntimeError("APP_BASE_URL must be a full http(s) URL (example: https://app.example.com).")

    logger.info(
        "Environment initialized: env=%s, latency_ms=%d",
        settings.app_env,
        settings.mock_latency_ms,
    )


def to_dict(info: EnvironmentInfo) -> dict[str, Any]:
    """Serialize EnvironmentInfo to a JSON-safe dict.

    Used by the health endpoint.
    """
    return {
        "app_env": info.app_env,
        "version": info.version,
        "features": info.features,
    }
