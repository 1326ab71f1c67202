"""wakadoctor CLI entry point.

Runs the checks in order and stops at the first failure::

    python -m wakadoctor.doctor --config-location ~/.wakatime.cfg

The process exits with status ``0`` only when every check passed (warnings
are allowed) and ``1`` otherwise.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import httpx

from wakadoctor import __version__
from wakadoctor.api import HeartbeatError, check_heartbeat
from wakadoctor.core import (
    ApiKeyError,
    EndpointError,
    WakaHost,
    check_api_key,
    check_api_path,
    check_scheme,
    classify_host,
    resolve_api_url,
)
from wakadoctor.io import (
    DEFAULT_CONFIG_LOCATION,
    ConfigError,
    expand_config_path,
    parse_settings,
    read_config,
)
from wakadoctor.io.reporting import StatusReporter, setup_logging

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    """Options for a single run, built from the command line."""

    config_location: str = DEFAULT_CONFIG_LOCATION
    no_warn_default_waka: bool = False
    custom_server: bool = False
    offline: bool = False
    strict_status: bool = False
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Options":
        return cls(
            config_location=args.config_location,
            no_warn_default_waka=args.no_warn_default_waka,
            custom_server=args.custom_server,
            offline=args.offline,
            strict_status=args.strict_status,
            log_level=args.log_level,
            log_file=args.log_file,
        )


async def run_checks(
    options: Options,
    reporter: StatusReporter,
    *,
    home: str | Path,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WakaHost:
    """Run every check in order and return the classified host.

    The first failing check raises; nothing after it runs.
    """

    path = expand_config_path(options.config_location, home)
    log.info("Checking config at %s", path)
    text = read_config(path)
    reporter.ok("Successfully read Wakatime config")

    settings = parse_settings(text)
    reporter.ok("Successfully parsed Wakatime config")
    if settings.debug:
        logging.getLogger("wakadoctor").setLevel(logging.DEBUG)

    url = resolve_api_url(settings.api_url, reporter)
    host = classify_host(
        url,
        reporter,
        no_warn_default_waka=options.no_warn_default_waka,
        custom_server=options.custom_server,
    )
    check_api_path(host, url, reporter)
    check_scheme(url, reporter)
    check_api_key(settings.api_key, host, reporter)

    if options.offline:
        reporter.warn(
            "Not attempting to perform online heartbeat check (--offline passed)"
        )
    else:
        await check_heartbeat(
            url,
            settings.api_key,
            host,
            reporter,
            strict_status=options.strict_status,
            transport=transport,
        )

    reporter.ok(f"{host.display_name} is configured correctly!")
    return host


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wakadoctor",
        description=(
            "Wakatime configuration tester. Validates the config file, API "
            "URL and API key, then sends a test heartbeat."
        ),
    )
    parser.add_argument(
        "-c",
        "--config-location",
        default=DEFAULT_CONFIG_LOCATION,
        help="Location of the wakatime config file",
    )
    parser.add_argument(
        "-w",
        "--no-warn-default-waka",
        action="store_true",
        help="Assume you AREN'T trying to use Hackatime",
    )
    parser.add_argument(
        "-u",
        "--custom-server",
        action="store_true",
        help="Assume you ARE trying to use a custom server",
    )
    parser.add_argument(
        "-o",
        "--offline",
        action="store_true",
        help="Do not attempt to send a heartbeat to test the server",
    )
    parser.add_argument(
        "--strict-status",
        action="store_true",
        help="Treat a non-2xx heartbeat response as a failure",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    options = Options.from_args(args)
    setup_logging(
        options.log_level, Path(options.log_file) if options.log_file else None
    )

    reporter = StatusReporter()
    reporter.console.print("Wakadoctor - Test your wakatime configuration")
    reporter.console.print(f"Version {__version__}")
    reporter.console.print()

    try:
        asyncio.run(run_checks(options, reporter, home=Path.home()))
    except KeyboardInterrupt:
        logging.info("Aborted by user via keyboard interrupt")
        reporter.console.print("[yellow]Aborted by user.[/yellow]")
        raise SystemExit(1)
    except (ConfigError, EndpointError, ApiKeyError, HeartbeatError) as exc:
        reporter.fail(str(exc))
        raise SystemExit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
