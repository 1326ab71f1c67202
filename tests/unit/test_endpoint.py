import httpx
import pytest

from wakadoctor.core.endpoint import (
    DEFAULT_API_URL,
    check_api_path,
    check_scheme,
    classify_host,
    resolve_api_url,
)
from wakadoctor.core.errors import EndpointError
from wakadoctor.core.hosts import HOST_RULES, WakaHost, host_for
from wakadoctor.io.reporting import Status


def test_empty_url_defaults_to_wakatime(reporter) -> None:
    url = resolve_api_url("", reporter)
    assert str(url) == DEFAULT_API_URL == "https://api.wakatime.com/api/v1"
    assert reporter.lines[-1].status is Status.WARN
    assert "assuming default (https://api.wakatime.com/api/v1)" in (
        reporter.lines[-1].message
    )
    assert classify_host(url, reporter) is WakaHost.WAKATIME


def test_configured_url_is_parsed(reporter) -> None:
    url = resolve_api_url("https://hackatime.hackclub.com/api/hackatime/v1", reporter)
    assert url.scheme == "https"
    assert url.host == "hackatime.hackclub.com"
    assert url.path == "/api/hackatime/v1"
    assert reporter.lines[-1].message == "Wakatime API URL is valid URL"


@pytest.mark.parametrize(
    "raw",
    [
        "api.wakatime.com/api/v1",
        "https://api.wakatime.com:notaport/api/v1",
    ],
)
def test_invalid_url(reporter, raw: str) -> None:
    with pytest.raises(EndpointError) as excinfo:
        resolve_api_url(raw, reporter)
    assert str(excinfo.value).startswith(
        "Wakatime API URL is not valid URL (failed parsing with error "
    )
    assert reporter.lines == []


def test_null_host(reporter) -> None:
    with pytest.raises(EndpointError, match="Wakatime API URL has null host"):
        classify_host(httpx.URL("file:///tmp/heartbeats"), reporter)


@pytest.mark.parametrize(
    "hostname, expected",
    [
        ("hackatime.hackclub.com", WakaHost.HACKATIME),
        ("waka.hackclub.com", WakaHost.OLD_HACKATIME),
        ("api.wakatime.com", WakaHost.WAKATIME),
        ("wakapi.example.org", WakaHost.CUSTOM),
        ("hackatime.hackclub.com.evil.test", WakaHost.CUSTOM),
    ],
)
def test_host_for(hostname: str, expected: WakaHost) -> None:
    assert host_for(hostname) is expected


def test_every_variant_has_a_rule() -> None:
    assert set(HOST_RULES) == set(WakaHost)
    assert WakaHost.HACKATIME.display_name == "Hackatime"
    assert WakaHost.OLD_HACKATIME.display_name == "Hackatime"
    assert WakaHost.WAKATIME.display_name == "Wakatime"
    assert WakaHost.CUSTOM.display_name == "Wakatime"


def test_hackatime_host_is_ok(reporter) -> None:
    url = httpx.URL("https://hackatime.hackclub.com/api/hackatime/v1")
    assert classify_host(url, reporter) is WakaHost.HACKATIME
    assert reporter.lines[-1].status is Status.OK


def test_old_hackatime_host_always_warns(reporter) -> None:
    url = httpx.URL("https://waka.hackclub.com/api")
    host = classify_host(url, reporter, no_warn_default_waka=True, custom_server=True)
    assert host is WakaHost.OLD_HACKATIME
    assert reporter.lines[-1].status is Status.WARN
    assert "old Hackclub Wakatime host" in reporter.lines[-1].message


@pytest.mark.parametrize("suppress, status", [(False, Status.WARN), (True, Status.OK)])
def test_wakatime_host_warning_can_be_suppressed(reporter, suppress, status) -> None:
    url = httpx.URL("https://api.wakatime.com/api/v1")
    classify_host(url, reporter, no_warn_default_waka=suppress)
    assert reporter.lines[-1].status is status
    assert ("--no-warn-default-waka" in reporter.lines[-1].message) is not suppress


@pytest.mark.parametrize("ack, status", [(False, Status.WARN), (True, Status.OK)])
def test_custom_host_warning_can_be_acknowledged(reporter, ack, status) -> None:
    url = httpx.URL("https://wakapi.example.org/api")
    assert classify_host(url, reporter, custom_server=ack) is WakaHost.CUSTOM
    assert reporter.lines[-1].status is status
    assert ("--custom-server" in reporter.lines[-1].message) is not ack


def test_hackatime_path(reporter) -> None:
    check_api_path(
        WakaHost.HACKATIME,
        httpx.URL("https://hackatime.hackclub.com/api/hackatime/v1"),
        reporter,
    )
    assert reporter.lines[-1].message == "Hackatime API path is correct."

    with pytest.raises(EndpointError) as excinfo:
        check_api_path(
            WakaHost.HACKATIME,
            httpx.URL("https://hackatime.hackclub.com/api/v1"),
            reporter,
        )
    assert str(excinfo.value) == (
        'Hackatime API path should be "/api/hackatime/v1", not "/api/v1"'
    )


def test_wakatime_path(reporter) -> None:
    check_api_path(
        WakaHost.WAKATIME, httpx.URL("https://api.wakatime.com/api/v1"), reporter
    )
    assert reporter.lines[-1].message == "Wakatime API path is correct."

    with pytest.raises(EndpointError) as excinfo:
        check_api_path(
            WakaHost.WAKATIME, httpx.URL("https://api.wakatime.com/api/v1/"), reporter
        )
    assert str(excinfo.value) == 'Wakatime API path should be "/api/v1", not "/api/v1/"'


@pytest.mark.parametrize("host", [WakaHost.OLD_HACKATIME, WakaHost.CUSTOM])
@pytest.mark.parametrize("path", ["/", "/api", "/api/v1", "/anything/at/all"])
def test_unchecked_paths_always_pass(reporter, host, path) -> None:
    check_api_path(host, httpx.URL(f"https://example.org{path}"), reporter)
    assert reporter.lines == []


def test_https_scheme(reporter) -> None:
    check_scheme(httpx.URL("https://api.wakatime.com/api/v1"), reporter)
    assert reporter.lines[-1].message == "Wakatime API URL is HTTPS"


@pytest.mark.parametrize(
    "raw",
    [
        "http://api.wakatime.com/api/v1",
        "http://hackatime.hackclub.com/wrong/path",
        "http://localhost:3000/api",
    ],
)
def test_http_scheme_rejected(reporter, raw: str) -> None:
    with pytest.raises(EndpointError, match="^Wakatime API URL is unsecured HTTP$"):
        check_scheme(httpx.URL(raw), reporter)


def test_unknown_scheme_rejected(reporter) -> None:
    with pytest.raises(EndpointError) as excinfo:
        check_scheme(httpx.URL("ftp://api.wakatime.com/api/v1"), reporter)
    assert str(excinfo.value) == 'Wakatime API URL has unknown scheme "ftp"'


def test_path_is_compared_percent_encoded(reporter) -> None:
    with pytest.raises(EndpointError) as excinfo:
        check_api_path(
            WakaHost.WAKATIME, httpx.URL("https://api.wakatime.com/api/v%31"), reporter
        )
    assert str(excinfo.value) == (
        'Wakatime API path should be "/api/v1", not "/api/v%31"'
    )


def test_query_string_is_not_part_of_path(reporter) -> None:
    check_api_path(
        WakaHost.WAKATIME, httpx.URL("https://api.wakatime.com/api/v1?x=1"), reporter
    )
    assert reporter.lines[-1].message == "Wakatime API path is correct."
