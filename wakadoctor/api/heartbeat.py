"""Send a test heartbeat to the configured API.

A single ``POST`` to ``users/current/heartbeats`` confirms that the server is
reachable and answers for the given key. There is no retry.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List

import httpx

from wakadoctor import __version__
from wakadoctor.core.hosts import WakaHost
from wakadoctor.io.reporting import StatusReporter

from .errors import HeartbeatError, HeartbeatTimeout

log = logging.getLogger(__name__)

HEARTBEAT_PATH = "users/current/heartbeats"
PROBE_TIMEOUT = 10.0
TEST_ENTITY = "wakadoctor-test.txt"
NO_STATUS = "no status code provided"


def heartbeat_url(api_url: httpx.URL) -> httpx.URL:
    """Return the heartbeats endpoint below ``api_url``.

    ``api_url`` is treated as a directory, so ``.../api/v1`` becomes
    ``.../api/v1/users/current/heartbeats``.
    """

    if not api_url.path.endswith("/"):
        api_url = api_url.copy_with(path=api_url.path + "/")
    return api_url.join(HEARTBEAT_PATH)


def build_heartbeats(now: float) -> List[Dict[str, Any]]:
    """Return the one-element heartbeat payload for time ``now``."""

    return [
        {
            "type": "file",
            "time": int(now),
            "entity": TEST_ENTITY,
            "language": "Text",
        }
    ]


async def send_test_heartbeat(
    api_url: httpx.URL,
    api_key: str,
    *,
    timeout: float = PROBE_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: Callable[[], float] = time.time,
) -> httpx.Response:
    """POST a test heartbeat and return the response.

    Transport errors and timeouts propagate as :class:`httpx.HTTPError`.
    """

    url = heartbeat_url(api_url)
    log.info("Sending test heartbeat to %s", url)
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.post(
            url,
            json=build_heartbeats(clock()),
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "User-Agent": f"wakadoctor/{__version__}",
            },
        )
    log.info("Test heartbeat answered with status %d", response.status_code)
    return response


async def check_heartbeat(
    api_url: httpx.URL,
    api_key: str,
    host: WakaHost,
    reporter: StatusReporter,
    *,
    strict_status: bool = False,
    timeout: float = PROBE_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Send a test heartbeat and report the outcome.

    Any completed exchange counts as success unless ``strict_status`` is set,
    in which case a non-2xx status raises :class:`HeartbeatError`.
    """

    name = host.display_name
    try:
        response = await send_test_heartbeat(
            api_url, api_key, timeout=timeout, transport=transport
        )
    except httpx.TimeoutException as exc:
        raise HeartbeatTimeout(
            f"Server timeout after {timeout:g} seconds. "
            f"{name} is NOT configured correctly."
        ) from exc
    except (httpx.HTTPError, UnicodeEncodeError) as exc:
        # Header values must be ASCII, so a non-ASCII key fails before sending.
        log.debug("Heartbeat request error: %s", exc)
        raise HeartbeatError(
            f"Got error status code ({NO_STATUS}). "
            f"{name} is NOT configured correctly."
        ) from exc

    if not response.is_success:
        if strict_status:
            raise HeartbeatError(
                f"Got error status code ({response.status_code}). "
                f"{name} is NOT configured correctly.",
                status_code=response.status_code,
            )
        log.warning(
            "Heartbeat returned status %d; treating the exchange as success",
            response.status_code,
        )
    reporter.ok(f"Got successful status code! {name} is configured correctly.")
