import logging

from d7_engine import config
from d7_engine.logging_setup import _parse_level


def test_defaults():
    settings = config.get_settings()
    assert settings.fetch_timeout == 15.0
    assert settings.cache_ttl == 300
    assert settings.openai_api_key == ""
    assert settings.openai_model == "gpt-4o-mini"
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("D7_SHEET_GID", "42")
    monkeypatch.setenv("D7_CACHE_TTL", "60")
    monkeypatch.setenv("OPENAI_API_KEY", '"sk-quoted"')
    monkeypatch.setenv("D7_LOG_LEVEL", "debug")

    settings = config.get_settings()
    assert "gid=42" in settings.csv_url
    assert settings.cache_ttl == 60
    assert settings.openai_api_key == "sk-quoted"
    assert settings.log_level == "DEBUG"


def test_settings_are_cached_until_reset(monkeypatch):
    first = config.get_settings()
    monkeypatch.setenv("D7_OPENAI_MODEL", "other")
    assert config.get_settings() is first

    config.reset_settings()
    assert config.get_settings().openai_model == "other"


def test_streamlit_secrets_take_precedence(monkeypatch):
    class FakeStreamlit:
        secrets = {"OPENAI_API_KEY": "from-secrets"}

    monkeypatch.setattr(config, "st", FakeStreamlit)
    monkeypatch.setenv("OPENAI_API_KEY", "from-env")
    assert config.get_settings().openai_api_key == "from-secrets"


def test_broken_secrets_fall_back_to_environment(monkeypatch):
    class BrokenSecrets:
        def __contains__(self, key):
            raise FileNotFoundError("no secrets.toml")

    class FakeStreamlit:
        secrets = BrokenSecrets()

    monkeypatch.setattr(config, "st", FakeStreamlit)
    monkeypatch.setenv("OPENAI_API_KEY", "from-env")
    assert config.get_settings().openai_api_key == "from-env"


def test_parse_level():
    assert _parse_level("warning") == logging.WARNING
    assert _parse_level("10") == 10
    assert _parse_level(logging.ERROR) == logging.ERROR
    assert _parse_level("nonsense") == logging.INFO


def test_malformed_numbers_fall_back_to_defaults(monkeypatch, caplog):
    caplog.set_level("WARNING", logger="d7_engine")
    monkeypatch.setenv("D7_FETCH_TIMEOUT", "fast")
    monkeypatch.setenv("D7_CACHE_TTL", "5 minutes")

    settings = config.get_settings()
    assert settings.fetch_timeout == 15.0
    assert settings.cache_ttl == 300
    assert any("D7_FETCH_TIMEOUT" in rec.getMessage() for rec in caplog.records)
