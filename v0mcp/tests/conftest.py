import os
from typing import Any

import pytest

# Settings are validated on first use; the credential must exist before any
# v0mcp module builds its logger.
os.environ.setdefault("V0_API_KEY", "test-v0-key")

from v0mcp.core.config import get_settings  # noqa: E402
from v0mcp.core.types import Completion  # noqa: E402
from v0mcp.llm.services.generation import GenerationBridge  # noqa: E402
from v0mcp.llm.services.session_metrics import SessionMetricsTracker  # noqa: E402
from v0mcp.mcp.contract import ToolRuntime, default_runtime  # noqa: E402


class FakeStream:
    def __init__(self, fragments, usage=None, fail_after=None):
        self._fragments = list(fragments)
        self._usage = usage or {}
        self._fail_after = fail_after

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        from v0mcp.core.exceptions import ProviderError

        for index, fragment in enumerate(self._fragments):
            if self._fail_after is not None and index == self._fail_after:
                raise ProviderError("connection reset by peer")
            yield fragment

    async def usage(self) -> dict[str, Any]:
        return self._usage


class FakeProvider:
    """Records every request and replays canned text."""

    def __init__(self, text="generated", fragments=None, usage=None, fail_after=None):
        self.text = text
        self.fragments = fragments if fragments is not None else [text]
        self.usage = usage or {"total_tokens": 42}
        self.fail_after = fail_after
        self.requests = []

    async def complete(self, request):
        self.requests.append(request)
        return Completion(text=self.text, usage=self.usage)

    async def stream(self, request):
        self.requests.append(request)
        return FakeStream(self.fragments, usage=self.usage, fail_after=self.fail_after)


@pytest.fixture(autouse=True)
def _reset_caches():
    get_settings.cache_clear()
    default_runtime.cache_clear()
    yield
    get_settings.cache_clear()
    default_runtime.cache_clear()


@pytest.fixture
def provider_factory():
    return FakeProvider


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def runtime(provider):
    return ToolRuntime(
        bridge=GenerationBridge(provider),
        sessions=SessionMetricsTracker(),
    )


@pytest.fixture
def use_runtime(monkeypatch, runtime):
    """Route default_runtime() lookups to the fake-backed runtime."""

    monkeypatch.setattr("v0mcp.mcp.contract.default_runtime", lambda: runtime)
    monkeypatch.setattr("v0mcp.mcp.resources.default_runtime", lambda: runtime)
    return runtime
