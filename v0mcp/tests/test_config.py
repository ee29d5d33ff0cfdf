import os

import pytest
from pydantic import ValidationError

from v0mcp.core.config import ServerSettings


@pytest.fixture(autouse=True)
def _restore_env():
    original = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original)


def test_server_settings_reads_env(monkeypatch):
    monkeypatch.setenv("V0_API_KEY", "v0-key")
    monkeypatch.setenv("TRANSPORT", "http")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("STREAM_CHECKPOINT_INTERVAL", "25")

    settings = ServerSettings(_env_file=None)

    assert settings.v0_api_key.get_secret_value() == "v0-key"
    assert settings.transport == "http"
    assert settings.http_port == 8080
    assert settings.stream_checkpoint_interval == 25


def test_server_settings_defaults(monkeypatch):
    monkeypatch.setenv("V0_API_KEY", "v0-key")
    for name in ("TRANSPORT", "PORT", "HTTP_PORT", "V0_MODEL", "V0_API_BASE"):
        monkeypatch.delenv(name, raising=False)

    settings = ServerSettings(_env_file=None)

    assert settings.transport == "stdio"
    assert settings.http_port == 3000
    assert settings.v0_model == "v0-1.5-md"
    assert str(settings.v0_api_base).startswith("https://api.v0.dev/v1")
    assert settings.session_max_entries == 1000


def test_server_settings_requires_api_key(monkeypatch):
    monkeypatch.delenv("V0_API_KEY", raising=False)

    with pytest.raises(ValidationError) as excinfo:
        ServerSettings(_env_file=None)

    assert any(error["loc"] == ("v0_api_key",) for error in excinfo.value.errors())


def test_server_settings_rejects_unknown_transport(monkeypatch):
    monkeypatch.setenv("V0_API_KEY", "v0-key")
    monkeypatch.setenv("TRANSPORT", "websocket")

    with pytest.raises(ValidationError):
        ServerSettings(_env_file=None)
