"""Client for the remote heartbeat API."""

from .errors import HeartbeatError, HeartbeatTimeout
from .heartbeat import (
    HEARTBEAT_PATH,
    PROBE_TIMEOUT,
    build_heartbeats,
    check_heartbeat,
    heartbeat_url,
    send_test_heartbeat,
)

__all__ = [
    "HEARTBEAT_PATH",
    "PROBE_TIMEOUT",
    "HeartbeatError",
    "HeartbeatTimeout",
    "build_heartbeats",
    "check_heartbeat",
    "heartbeat_url",
    "send_test_heartbeat",
]
