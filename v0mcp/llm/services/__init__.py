"""Service layer exports."""

from .generation import GenerationBridge, TextProvider, TextStream
from .session_metrics import SessionMetrics, SessionMetricsTracker, new_session_id
from .v0_client import V0Client, get_v0_client

__all__ = [
    "GenerationBridge",
    "SessionMetrics",
    "SessionMetricsTracker",
    "TextProvider",
    "TextStream",
    "V0Client",
    "get_v0_client",
    "new_session_id",
]
