from __future__ import annotations

import logging
import sys
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from code_server import ServerSettings, create_app
from code_server import __main__ as cli


def test_settings_defaults():
    settings = ServerSettings()
    assert settings.host == "127.0.0.1"
    assert settings.port == 5000
    assert settings.debug is False
    assert settings.cors_origins == ["*"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CODE_SERVER_PORT", "8080")
    monkeypatch.setenv("CODE_SERVER_CORS_ORIGINS", '["https://app.example"]')
    settings = ServerSettings()
    assert settings.port == 8080
    assert settings.cors_origins == ["https://app.example"]


def test_cli_overrides_settings(monkeypatch):
    calls = {}

    def fake_create_app(settings):
        calls["settings"] = settings
        return SimpleNamespace(run=lambda **kwargs: calls.update(run=kwargs))

    monkeypatch.setattr(cli, "create_app", fake_create_app)
    monkeypatch.setattr(sys, "argv", ["code_server", "--host", "0.0.0.0", "--port", "9000"])
    cli.main()

    assert calls["settings"].host == "0.0.0.0"
    assert calls["run"]["port"] == 9000
    assert calls["run"]["threaded"] is True
    assert calls["run"]["use_reloader"] is False


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


@pytest.mark.parametrize("level", ["WARNING", "DEBUG"])
def test_create_app_applies_log_level(restore_root_level, level):
    create_app(ServerSettings(log_level=level))
    assert restore_root_level.level == getattr(logging, level)


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("CODE_SERVER_LOG_LEVEL", "error")
    assert ServerSettings().log_level == "ERROR"


def test_invalid_log_level_is_rejected(monkeypatch):
    with pytest.raises(ValidationError):
        ServerSettings(log_level="verbose")

    monkeypatch.setenv("CODE_SERVER_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        ServerSettings()


def test_cli_keeps_explicit_zero_port(monkeypatch):
    calls = {}

    def fake_create_app(settings):
        return SimpleNamespace(run=lambda **kwargs: calls.update(run=kwargs))

    monkeypatch.setattr(cli, "create_app", fake_create_app)
    monkeypatch.setattr(sys, "argv", ["code_server", "--port", "0"])
    cli.main()

    assert calls["run"]["port"] == 0
