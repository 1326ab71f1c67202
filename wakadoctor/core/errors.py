"""Core exception types."""

from __future__ import annotations


class EndpointError(Exception):
    """Exception raised when the API URL fails a check."""


class ApiKeyError(Exception):
    """Exception raised when the API key is missing or malformed."""
