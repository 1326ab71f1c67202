"""API URL checks.

Each ``check_*`` function prints its own status line through the given
:class:`~wakadoctor.io.reporting.StatusReporter` and raises
:class:`~wakadoctor.core.errors.EndpointError` on failure.
"""

from __future__ import annotations

import logging

import httpx

from wakadoctor.io.reporting import StatusReporter

from .errors import EndpointError
from .hosts import WakaHost, host_for

log = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.wakatime.com/api/v1"


def resolve_api_url(api_url: str, reporter: StatusReporter) -> httpx.URL:
    """Return the configured API URL, or the default when it is empty."""

    if not api_url:
        reporter.warn(
            "Wakatime API URL is not specified - assuming default "
            f"({DEFAULT_API_URL})"
        )
        return httpx.URL(DEFAULT_API_URL)

    try:
        url = httpx.URL(api_url)
    except httpx.InvalidURL as exc:
        raise EndpointError(
            f"Wakatime API URL is not valid URL (failed parsing with error {exc})"
        ) from exc
    if not url.scheme:
        raise EndpointError(
            "Wakatime API URL is not valid URL "
            "(failed parsing with error relative URL without a base)"
        )
    log.debug("Resolved API URL %s", url)
    reporter.ok("Wakatime API URL is valid URL")
    return url


def classify_host(
    url: httpx.URL,
    reporter: StatusReporter,
    *,
    no_warn_default_waka: bool = False,
    custom_server: bool = False,
) -> WakaHost:
    """Classify ``url``'s host.

    Only an empty host fails; unknown hosts are treated as custom servers.
    """

    if not url.host:
        raise EndpointError("Wakatime API URL has null host")

    host = host_for(url.host)
    if host is WakaHost.HACKATIME:
        reporter.ok("Wakatime API host is Hackatime host")
    elif host is WakaHost.OLD_HACKATIME:
        reporter.warn("Wakatime API host is old Hackclub Wakatime host")
    elif host is WakaHost.WAKATIME:
        if no_warn_default_waka:
            reporter.ok("Wakatime API host is default Wakatime host")
        else:
            reporter.warn(
                "Wakatime API host is default Wakatime host "
                "(psst- disable this warning with --no-warn-default-waka)"
            )
    elif custom_server:
        reporter.ok("Wakatime API host is custom server host")
    else:
        reporter.warn(
            "Wakatime API host is custom server host or invalid host "
            "(psst- disable this warning with --custom-server)"
        )
    return host


def check_api_path(host: WakaHost, url: httpx.URL, reporter: StatusReporter) -> None:
    """Ensure ``url`` uses the API path expected for ``host``."""

    expected = host.rule.api_path
    if expected is None:
        log.debug("Not checking API path for %s host", host.name)
        return
    # Compare the percent-encoded path; ``url.path`` would decode ``%31`` to ``1``.
    path = url.raw_path.decode("ascii").split("?", 1)[0]
    if path != expected:
        raise EndpointError(
            f'{host.display_name} API path should be "{expected}", not "{path}"'
        )
    reporter.ok(f"{host.display_name} API path is correct.")


def check_scheme(url: httpx.URL, reporter: StatusReporter) -> None:
    """Ensure ``url`` uses HTTPS."""

    if url.scheme == "https":
        reporter.ok("Wakatime API URL is HTTPS")
        return
    if url.scheme == "http":
        raise EndpointError("Wakatime API URL is unsecured HTTP")
    raise EndpointError(f'Wakatime API URL has unknown scheme "{url.scheme}"')
