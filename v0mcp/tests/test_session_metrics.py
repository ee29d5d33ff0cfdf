import pytest

from v0mcp.llm.services.session_metrics import SessionMetricsTracker, new_session_id


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_metrics_report_duration_and_average():
    clock = FakeClock()
    tracker = SessionMetricsTracker(clock=clock)

    tracker.start_session("s1")
    clock.now += 2.0
    tracker.track_tool("s1", "generate_component")
    tracker.track_tool("s1", "accessibility_auditor")

    metrics = tracker.get_metrics("s1")

    assert metrics.duration_ms == pytest.approx(2000.0)
    assert metrics.tools_used_count == 2
    assert metrics.tool_names == ("generate_component", "accessibility_auditor")
    assert metrics.average_tool_time_ms == pytest.approx(1000.0)
    assert metrics.to_dict()["tools_used"] == 2


def test_average_is_absent_when_no_tools_ran():
    tracker = SessionMetricsTracker(clock=FakeClock())
    tracker.start_session("idle")

    metrics = tracker.get_metrics("idle")

    assert metrics.tools_used_count == 0
    assert metrics.average_tool_time_ms is None
    assert metrics.to_dict()["average_tool_time_ms"] is None


def test_unknown_session_is_ignored():
    tracker = SessionMetricsTracker()

    tracker.track_tool("missing", "generate_component")

    assert tracker.get_metrics("missing") is None
    assert len(tracker) == 0


def test_start_session_resets_existing_history():
    clock = FakeClock()
    tracker = SessionMetricsTracker(clock=clock)
    tracker.start_session("s1")
    tracker.track_tool("s1", "generate_component")
    clock.now += 5.0

    tracker.start_session("s1")

    metrics = tracker.get_metrics("s1")
    assert metrics.tools_used_count == 0
    assert metrics.duration_ms == 0.0


def test_oldest_sessions_evicted_beyond_capacity():
    clock = FakeClock()
    tracker = SessionMetricsTracker(max_sessions=2, clock=clock)

    for session_id in ("a", "b", "c"):
        tracker.start_session(session_id)
        clock.now += 1.0

    assert len(tracker) == 2
    assert not tracker.has_session("a")
    assert tracker.has_session("c")


def test_expired_sessions_evicted_on_start():
    clock = FakeClock()
    tracker = SessionMetricsTracker(max_age_seconds=60, clock=clock)
    tracker.start_session("old")
    clock.now += 61.0

    tracker.start_session("new")

    assert not tracker.has_session("old")
    assert tracker.has_session("new")


def test_new_session_ids_are_unique():
    assert new_session_id() != new_session_id()


def test_active_session_survives_age_eviction():
    clock = FakeClock()
    tracker = SessionMetricsTracker(max_age_seconds=60, clock=clock)
    tracker.start_session("busy")

    for _ in range(6):
        clock.now += 20.0
        tracker.track_tool("busy", "generate_component")
    tracker.start_session("other")

    assert tracker.has_session("busy")
    assert tracker.get_metrics("busy").tools_used_count == 6


def test_capacity_eviction_drops_least_recently_active():
    clock = FakeClock()
    tracker = SessionMetricsTracker(max_sessions=2, clock=clock)
    tracker.start_session("a")
    tracker.start_session("b")
    tracker.track_tool("a", "generate_component")

    tracker.start_session("c")

    assert tracker.has_session("a")
    assert not tracker.has_session("b")
