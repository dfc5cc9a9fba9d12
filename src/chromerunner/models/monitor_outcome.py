"""How a monitoring session ended."""

from enum import Enum


class MonitorOutcome(str, Enum):
    WINDOW_CLOSED = "window_closed"
    STREAM_ENDED = "stream_ended"
