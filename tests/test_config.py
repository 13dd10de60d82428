"""Test environment-driven settings."""
import pytest

from calculator_web.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PROJECT_NAME", "ENVIRONMENT", "API_PREFIX", "HOST", "PORT", "LOG_LEVEL", "CORS_ALLOW_ORIGINS", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.environment == "local"
    assert settings.api_prefix == "/api"
    assert settings.port == 8080
    assert settings.cors_allow_origins == ["*"]
    assert settings.docs_enabled


def test_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://calc.example.com"]')
    settings = Settings(_env_file=None)
    assert settings.environment == "prod"
    assert settings.port == 9090
    assert settings.log_level == "DEBUG"
    assert settings.cors_allow_origins == ["https://calc.example.com"]
    assert not settings.docs_enabled


def test_invalid_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
