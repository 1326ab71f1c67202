"""Configuration loader for wakadoctor.

This module reads a ``.wakatime.cfg`` file and parses its ``[settings]``
section into a :class:`WakaSettings` dataclass.
"""

from __future__ import annotations

import logging
from configparser import ConfigParser, Error as ConfigParserError
from dataclasses import dataclass, fields
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_CONFIG_LOCATION = "~/.wakatime.cfg"
SETTINGS_SECTION = "settings"


class ConfigError(Exception):
    """Raised when the config file cannot be read or parsed."""


@dataclass(frozen=True)
class WakaSettings:
    """Values from the ``[settings]`` section.

    Every field is optional. The ``hide_*`` privacy flags are not validated
    but must still parse.
    """

    debug: bool = False
    api_key: str = ""
    api_key_vault_cmd: str = ""
    api_url: str = ""
    hide_file_names: bool = False
    hide_project_names: bool = False
    hide_branch_names: bool = False
    hide_dependencies: bool = False
    hide_project_folder: bool = False


def expand_config_path(raw: str, home: str | Path) -> Path:
    """Return ``raw`` with a leading ``~`` replaced by ``home``."""

    if raw == "~" or raw.startswith("~/"):
        return Path(str(home) + raw[1:])
    return Path(raw)


def read_config(path: Path) -> str:
    """Return the full text of the config file at ``path``."""

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(
            f'Cannot read Wakatime config with error "{exc}"'
        ) from exc
    log.debug("Read %d characters from %s", len(text), path)
    return text


def parse_settings(text: str) -> WakaSettings:
    """Parse INI ``text`` into :class:`WakaSettings`.

    Unknown keys and sections are ignored; absent keys keep their defaults.
    """

    cp = ConfigParser(interpolation=None)
    try:
        cp.read_string(text)
        if not cp.has_section(SETTINGS_SECTION):
            raise ConfigError(
                "Cannot parse Wakatime config with error "
                f'"missing section [{SETTINGS_SECTION}]"'
            )
        values: dict[str, object] = {}
        for f in fields(WakaSettings):
            if not cp.has_option(SETTINGS_SECTION, f.name):
                continue
            if f.default is False:
                values[f.name] = cp.getboolean(SETTINGS_SECTION, f.name)
            else:
                values[f.name] = cp.get(SETTINGS_SECTION, f.name)
    except (ConfigParserError, ValueError) as exc:
        raise ConfigError(
            f'Cannot parse Wakatime config with error "{exc}"'
        ) from exc

    unknown = sorted(
        set(cp.options(SETTINGS_SECTION)) - {f.name for f in fields(WakaSettings)}
    )
    if unknown:
        log.debug("Ignoring unknown settings keys: %s", ", ".join(unknown))
    return WakaSettings(**values)  # type: ignore[arg-type]
