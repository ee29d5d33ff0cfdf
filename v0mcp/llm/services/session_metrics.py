"""In-memory per-session invocation metrics."""

from __future__ import annotations

import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable


def new_session_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class SessionRecord:
    started_at: float
    last_active: float
    tool_names: list[str] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class SessionMetrics:
    duration_ms: float
    tools_used_count: int
    tool_names: tuple[str, ...]
    average_tool_time_ms: float | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration_ms": round(self.duration_ms, 3),
            "tools_used": self.tools_used_count,
            "tool_names": list(self.tool_names),
            "average_tool_time_ms": (
                None if self.average_tool_time_ms is None else round(self.average_tool_time_ms, 3)
            ),
        }


class SessionMetricsTracker:
    """Track elapsed time and tool usage keyed by an opaque session id.

    Entries are evicted when idle for longer than ``max_age_seconds`` or when
    the registry grows beyond ``max_sessions`` (least recently active first).
    All access happens on the event loop thread, so no locking is required.
    """

    def __init__(
        self,
        max_sessions: int = 1000,
        max_age_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_sessions <= 0:
            raise ValueError("max_sessions must be positive")
        self._max_sessions = max_sessions
        self._max_age_seconds = max_age_seconds
        self._clock = clock
        self._sessions: OrderedDict[str, SessionRecord] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def has_session(self, session_id: str) -> bool:
        return session_id in self._sessions

    def start_session(self, session_id: str) -> None:
        """Create the session, resetting its history if it already exists."""

        self._sessions.pop(session_id, None)
        now = self._clock()
        self._sessions[session_id] = SessionRecord(started_at=now, last_active=now)
        self._evict()

    def track_tool(self, session_id: str, tool_name: str) -> None:
        record = self._sessions.get(session_id)
        if record is None:
            return
        record.tool_names.append(tool_name)
        record.last_active = self._clock()
        self._sessions.move_to_end(session_id)

    def get_metrics(self, session_id: str) -> SessionMetrics | None:
        record = self._sessions.get(session_id)
        if record is None:
            return None

        duration_ms = max(0.0, (self._clock() - record.started_at) * 1000.0)
        count = len(record.tool_names)
        return SessionMetrics(
            duration_ms=duration_ms,
            tools_used_count=count,
            tool_names=tuple(record.tool_names),
            average_tool_time_ms=duration_ms / count if count else None,
        )

    def clear(self) -> None:
        self._sessions.clear()

    def _evict(self) -> None:
        cutoff = self._clock() - self._max_age_seconds
        # Entries are kept in order of last activity, so idle ones sit at the front.
        while self._sessions:
            oldest_id, oldest = next(iter(self._sessions.items()))
            if oldest.last_active >= cutoff:
                break
            del self._sessions[oldest_id]
        while len(self._sessions) > self._max_sessions:
            self._sessions.popitem(last=False)
