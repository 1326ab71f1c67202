from io import StringIO
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from wakadoctor.io.reporting import StatusReporter


def _make_config(**settings: str) -> str:
    lines = ["[settings]"]
    lines.extend(f"{key} = {value}" for key, value in settings.items())
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a ``[settings]`` config into ``tmp_path``."""

    def _write(**settings: str) -> Path:
        path = tmp_path / ".wakatime.cfg"
        path.write_text(_make_config(**settings), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reporter() -> StatusReporter:
    console = Console(
        file=StringIO(), soft_wrap=True, emoji=False, color_system=None
    )
    return StatusReporter(console)
