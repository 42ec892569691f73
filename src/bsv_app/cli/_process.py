"""Thin wrappers around the external ``git`` and ``npm`` executables."""

from __future__ import annotations

import subprocess
from pathlib import Path

SOURCE_CONTROL = "git"
PACKAGE_MANAGER = "npm"


def run(
    argv: list[str],
    *,
    cwd: Path | None = None,
    capture: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run *argv* to completion without raising on a non-zero exit.

    A launch failure (missing executable, vanished working directory) is
    reported as a failed process whose stderr carries the OS error.
    """
    try:
        return subprocess.run(
            argv,
            cwd=str(cwd) if cwd is not None else None,
            text=True,
            check=False,
            capture_output=capture,
        )
    except OSError as exc:
        return subprocess.CompletedProcess(argv, 127, "", str(exc))


def error_text(proc: subprocess.CompletedProcess[str], argv: list[str]) -> str:
    """Best available description of why *proc* failed."""
    msg = (proc.stderr or "").strip() or (proc.stdout or "").strip()
    if not msg:
        msg = f"{' '.join(argv)} failed (exit {proc.returncode})"
    return msg
