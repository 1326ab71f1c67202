"""API key format checks."""

from __future__ import annotations

import uuid

from wakadoctor.io.reporting import StatusReporter

from .errors import ApiKeyError
from .hosts import WAKATIME_KEY_PREFIX, KeyFormat, WakaHost


def is_canonical_uuid(value: str) -> bool:
    """Return ``True`` if ``value`` is a hyphenated 8-4-4-4-12 UUID."""

    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    return str(parsed) == value.lower()


def key_matches(api_key: str, key_format: KeyFormat) -> bool:
    if key_format is KeyFormat.UUID:
        return is_canonical_uuid(api_key)
    if key_format is KeyFormat.PREFIXED_UUID:
        if not api_key.startswith(WAKATIME_KEY_PREFIX):
            return False
        return is_canonical_uuid(api_key.replace(WAKATIME_KEY_PREFIX, "", 1))
    return True


def check_api_key(api_key: str, host: WakaHost, reporter: StatusReporter) -> None:
    """Validate ``api_key`` against the format expected for ``host``.

    An empty key always fails. Hosts without a known key format accept any
    non-empty key without printing a line.
    """

    if not api_key:
        raise ApiKeyError("No API key in file")
    key_format = host.rule.key_format
    if key_format is KeyFormat.ANY:
        return
    if not key_matches(api_key, key_format):
        raise ApiKeyError(f"{host.display_name} API key is NOT in valid format")
    reporter.ok(f"{host.display_name} API key is in valid format")
