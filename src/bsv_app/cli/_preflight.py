"""Checks that the external tools the scaffold depends on are installed."""

from __future__ import annotations

import subprocess

from bsv_app.cli._errors import EnvironmentMissing
from bsv_app.cli._process import PACKAGE_MANAGER, SOURCE_CONTROL

_REQUIRED_TOOLS: tuple[tuple[str, str, str], ...] = (
    (SOURCE_CONTROL, "Git", "Please install Git and try again."),
    (PACKAGE_MANAGER, "npm", "Please install Node.js and try again."),
)


def check_tool(executable: str) -> bool:
    """Return whether ``<executable> --version`` runs and exits cleanly."""
    try:
        proc = subprocess.run(
            [executable, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return proc.returncode == 0


def check_environment() -> None:
    """Raise :class:`EnvironmentMissing` for the first unavailable tool."""
    for executable, display_name, hint in _REQUIRED_TOOLS:
        if not check_tool(executable):
            raise EnvironmentMissing(display_name, hint)
