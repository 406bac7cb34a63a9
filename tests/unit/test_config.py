import pytest

from showroom.utils import config


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    for name in ("API_PREFIX", "CORS_ALLOWED_ORIGINS", "LOG_LEVEL", "SHOWROOM_SEED_PASSWORD", "SHOWROOM_FLAG"):
        monkeypatch.delenv(name, raising=False)
    config.refresh_config_cache()
    yield
    config.refresh_config_cache()


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("off", False), ("", False)],
)
def test_env_flag_normalization(monkeypatch, raw, expected):
    monkeypatch.setenv("SHOWROOM_FLAG", raw)
    assert config.env_flag("SHOWROOM_FLAG") is expected


def test_env_flag_unknown_value_uses_default(monkeypatch):
    monkeypatch.setenv("SHOWROOM_FLAG", "maybe")
    assert config.env_flag("SHOWROOM_FLAG", default=True) is True
    assert config.env_flag("SHOWROOM_FLAG") is False


def test_api_prefix_default_and_normalization(monkeypatch):
    assert config.api_prefix() == "/api"
    monkeypatch.setenv("API_PREFIX", "v1/")
    assert config.api_prefix() == "/v1"
    monkeypatch.setenv("API_PREFIX", "/")
    assert config.api_prefix() == ""


def test_cors_origins_from_env(monkeypatch):
    assert "http://localhost:5173" in config.cors_origins()
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example ,")
    assert config.cors_origins() == ["https://a.example", "https://b.example"]


def test_log_level_name_rejects_unknown_levels(monkeypatch):
    assert config.log_level_name() == "INFO"
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config.log_level_name() == "DEBUG"
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert config.log_level_name() == "INFO"


def test_seed_password_is_cached_until_refresh(monkeypatch):
    assert config.seed_password() == "password123"
    monkeypatch.setenv("SHOWROOM_SEED_PASSWORD", "s3cret")
    assert config.seed_password() == "password123"
    config.refresh_config_cache()
    assert config.seed_password() == "s3cret"
