"""Checks for the configured API endpoint and key."""

from .api_key import check_api_key, is_canonical_uuid
from .endpoint import (
    DEFAULT_API_URL,
    check_api_path,
    check_scheme,
    classify_host,
    resolve_api_url,
)
from .errors import ApiKeyError, EndpointError
from .hosts import HOST_RULES, HostRule, KeyFormat, WakaHost, host_for

__all__ = [
    "ApiKeyError",
    "DEFAULT_API_URL",
    "EndpointError",
    "HOST_RULES",
    "HostRule",
    "KeyFormat",
    "WakaHost",
    "check_api_key",
    "check_api_path",
    "check_scheme",
    "classify_host",
    "host_for",
    "is_canonical_uuid",
    "resolve_api_url",
]
