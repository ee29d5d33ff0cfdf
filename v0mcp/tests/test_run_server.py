import pytest

from v0mcp.mcp.contract import default_runtime
from v0mcp.mcp.server import mcp
from v0mcp.scripts.run_server import main


def test_stdio_startup_opens_no_session(monkeypatch):
    calls = []
    monkeypatch.setenv("TRANSPORT", "stdio")
    monkeypatch.setattr(mcp, "run", lambda **kwargs: calls.append(kwargs))

    main()

    assert calls == [{"transport": "stdio", "show_banner": False}]
    assert len(default_runtime().sessions) == 0


def test_http_startup_runs_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setenv("TRANSPORT", "http")
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

    main()

    app, kwargs = calls[0]
    assert app == "v0mcp.llm.main:app"
    assert kwargs["port"] == 8123


def test_missing_api_key_exits_with_status_one(monkeypatch):
    monkeypatch.delenv("V0_API_KEY", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        main()

    assert excinfo.value.code == 1
