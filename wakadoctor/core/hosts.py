"""Known API hosts and the rules each one is checked against."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WakaHost(Enum):
    """Classification of the configured API host."""

    HACKATIME = "hackatime"
    OLD_HACKATIME = "old_hackatime"
    WAKATIME = "wakatime"
    CUSTOM = "custom"

    @property
    def rule(self) -> "HostRule":
        return HOST_RULES[self]

    @property
    def display_name(self) -> str:
        return self.rule.display_name

    def __str__(self) -> str:
        return self.display_name


class KeyFormat(Enum):
    """Accepted API key shapes."""

    ANY = "any"
    UUID = "uuid"
    PREFIXED_UUID = "prefixed_uuid"


@dataclass(frozen=True)
class HostRule:
    """Per-host expectations.

    ``api_path`` of ``None`` means the URL path is not checked; ``key_format``
    of :attr:`KeyFormat.ANY` means any non-empty key is accepted.
    """

    hostname: str | None
    display_name: str
    api_path: str | None
    key_format: KeyFormat


WAKATIME_KEY_PREFIX = "waka_"

HOST_RULES: dict[WakaHost, HostRule] = {
    WakaHost.HACKATIME: HostRule(
        hostname="hackatime.hackclub.com",
        display_name="Hackatime",
        api_path="/api/hackatime/v1",
        key_format=KeyFormat.UUID,
    ),
    WakaHost.OLD_HACKATIME: HostRule(
        hostname="waka.hackclub.com",
        display_name="Hackatime",
        api_path=None,
        key_format=KeyFormat.ANY,
    ),
    WakaHost.WAKATIME: HostRule(
        hostname="api.wakatime.com",
        display_name="Wakatime",
        api_path="/api/v1",
        key_format=KeyFormat.PREFIXED_UUID,
    ),
    WakaHost.CUSTOM: HostRule(
        hostname=None,
        display_name="Wakatime",
        api_path=None,
        key_format=KeyFormat.ANY,
    ),
}

_BY_HOSTNAME = {
    rule.hostname: host for host, rule in HOST_RULES.items() if rule.hostname
}


def host_for(hostname: str) -> WakaHost:
    """Return the :class:`WakaHost` for ``hostname`` (exact match)."""

    return _BY_HOSTNAME.get(hostname, WakaHost.CUSTOM)
