"""IO utilities for wakadoctor.

This package exposes the config loader along with the dataclass it produces.
Reporting helpers are loaded lazily so importing :mod:`wakadoctor.io` for
settings alone does not pull in ``rich``.
"""

from .config_loader import (
    DEFAULT_CONFIG_LOCATION,
    ConfigError,
    WakaSettings,
    expand_config_path,
    parse_settings,
    read_config,
)

__all__ = [
    "DEFAULT_CONFIG_LOCATION",
    "ConfigError",
    "WakaSettings",
    "expand_config_path",
    "parse_settings",
    "read_config",
    "Status",
    "StatusLine",
    "StatusReporter",
    "setup_logging",
]


def __getattr__(name: str):
    if name in {"Status", "StatusLine", "StatusReporter", "setup_logging"}:
        from . import reporting

        return getattr(reporting, name)
    raise AttributeError(name)
