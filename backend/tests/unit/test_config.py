"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

from app.config import Settings, get_settings


def test_default_settings():
    """Settings should have sensible defaults."""
    settings = Settings(_env_file=None)
    assert settings.app_env == "development"
    assert settings.is_production is False
    assert settings.mock_latency_ms == 0
    assert settings.doi_prefix == "10.1000/example"
    assert settings.doi_year == 2024
    assert settings.submission_fee == 150


def test_production_detection():
    """is_production should be True when app_env is 'production'."""
    settings = Settings(_env_file=None, app_env="production")
    assert settings.is_production is True


def test_latency_seconds_never_negative():
    assert Settings(_env_file=None, mock_latency_ms=1500).mock_latency_seconds == 1.5
    assert Settings(_env_file=None, mock_latency_ms=-10).mock_latency_seconds == 0


def test_allowed_origins_list_parsing():
    """ALLOWED_ORIGINS should parse into a trimmed list."""
    settings = Settings(
        _env_file=None,
        allowed_origins="https://app.example.com, https://admin.example.com ",
        app_base_url="https://app.example.com/",
    )
    assert settings.allowed_origins_list == [
        "https://app.example.com",
        "https://admin.example.com",
    ]
    assert settings.normalized_app_base_url == "https://app.example.com"


def test_allowed_origins_fallback_to_app_base_url():
    """When ALLOWED_ORIGINS is empty, fallback to APP_BASE_URL."""
    settings = Settings(
        _env_file=None,
        allowed_origins="",
        app_base_url="https://app.example.com",
    )
    assert settings.allowed_origins_list == ["https://app.example.com"]


def test_get_settings_returns_singleton():
    """get_settings should return the same instance on repeated calls."""
    assert get_settings() is get_settings()


def test_settings_ignores_unrelated_env_keys(tmp_path: Path):
    """Loading from env files should ignore unknown keys."""
    env_file = tmp_path / "test.env"
    env_file.write_text(
        "\n".join(
            [
                "MOCK_LATENCY_MS=300",
                "DOI_PREFIX=10.5555/journal",
                "SOME_UNRELATED_KEY=value",
            ]
        )
    )
    settings = Settings(_env_file=env_file)
    assert settings.mock_latency_ms == 300
    assert settings.doi_prefix == "10.5555/journal"
