"""Status line and logging utilities for wakadoctor runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Status(Enum):
    """Outcome of a single check."""

    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


GLYPHS = {
    Status.OK: "✅",
    Status.WARN: "⚠️",
    Status.FAIL: "❌",
}

_STYLES = {
    Status.OK: "green",
    Status.WARN: "yellow",
    Status.FAIL: "red",
}

_LOG_LEVELS = {
    Status.OK: logging.INFO,
    Status.WARN: logging.WARNING,
    Status.FAIL: logging.ERROR,
}


@dataclass(frozen=True)
class StatusLine:
    """A single status line printed for a check."""

    status: Status
    message: str

    def render(self) -> str:
        return f"{GLYPHS[self.status]} - {self.message}"


class StatusReporter:
    """Print status lines to the console and keep a record of them.

    ``console`` defaults to a soft-wrapping :class:`rich.console.Console` on
    stdout so long messages are never split across lines.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(
            soft_wrap=True, highlight=False, emoji=False
        )
        self.lines: list[StatusLine] = []

    def emit(self, line: StatusLine) -> None:
        self.lines.append(line)
        log.log(_LOG_LEVELS[line.status], line.message)
        style = _STYLES[line.status]
        self.console.print(f"[{style}]{escape(line.render())}[/{style}]")

    def ok(self, message: str) -> None:
        self.emit(StatusLine(Status.OK, message))

    def warn(self, message: str) -> None:
        self.emit(StatusLine(Status.WARN, message))

    def fail(self, message: str) -> None:
        self.emit(StatusLine(Status.FAIL, message))


def setup_logging(level: str, log_file: Path | None = None) -> None:
    """Configure root logging.

    Parameters
    ----------
    level:
        Logging level name (e.g., ``"INFO"``). Unknown names fall back to
        ``WARNING``.
    log_file:
        Optional file to append log records to. When omitted, records go to
        stderr so stdout only carries status lines.
    """

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=str(log_file), level=numeric_level, format=LOG_FORMAT
        )
    else:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
