"""Heartbeat probe exception types."""

from __future__ import annotations


class HeartbeatError(Exception):
    """Exception raised when the test heartbeat could not be delivered."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HeartbeatTimeout(HeartbeatError):
    """Exception raised when the server did not answer in time."""
