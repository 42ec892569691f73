"""Turns a scaffold request into a project directory on disk."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from bsv_app.cli import _process
from bsv_app.cli._errors import (
    CloneFailure,
    GitInitFailure,
    InstallFailure,
    InvalidProjectName,
    ManifestError,
    TargetCollision,
)
from bsv_app.cli._process import PACKAGE_MANAGER, SOURCE_CONTROL
from bsv_app.cli._types import RunOptions, ScaffoldRequest

MANIFEST_NAME = "package.json"
INSTALL_SUBDIRECTORIES: tuple[str, ...] = ("frontend", "backend")

_console = Console()


def resolve_target(project_name: str, cwd: Path | None = None) -> Path:
    """Resolve *project_name* under *cwd* and refuse to reuse an existing path."""
    base = (cwd or Path.cwd()).resolve()
    project_dir = (base / project_name).resolve()
    if project_dir == base or not project_dir.is_relative_to(base):
        raise InvalidProjectName(
            f"'{project_name}' does not name a directory inside {base}."
        )
    if project_dir.exists():
        raise TargetCollision(f'Directory "{project_name}" already exists.')
    return project_dir


def clone_template(source: str, project_dir: Path) -> None:
    _console.print(f"[blue]Cloning repository from {escape(source)}...[/]")
    argv = [SOURCE_CONTROL, "clone", source, str(project_dir)]
    proc = _process.run(argv)
    if proc.returncode != 0:
        raise CloneFailure(f"Error cloning repository: {_process.error_text(proc, argv)}")
    _console.print(f"[green]Repository cloned to {escape(str(project_dir))}[/]")


def strip_history(project_dir: Path) -> bool:
    """Delete the cloned ``.git`` directory. Returns whether one was removed."""
    git_dir = project_dir / ".git"
    if not git_dir.exists():
        return False
    shutil.rmtree(git_dir)
    return True


def customize_manifest(project_dir: Path, name: str, author: str) -> dict[str, Any] | None:
    """Overwrite ``name`` and ``author`` in the project's ``package.json``.

    Empty values leave the corresponding field alone, as do all other fields.
    Returns the rewritten manifest, or ``None`` when the project has none.
    """
    manifest_path = project_dir / MANIFEST_NAME
    if not manifest_path.is_file():
        return None

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid {MANIFEST_NAME}: {exc}") from exc
    if not isinstance(manifest, dict):
        raise ManifestError(f"Invalid {MANIFEST_NAME}: expected a JSON object.")
    if name:
        manifest["name"] = name
    if author:
        manifest["author"] = author

    manifest_path.write_text(
        json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    return manifest


def _install_in(directory: Path) -> bool:
    if not (directory / MANIFEST_NAME).is_file():
        _console.print(
            f"[yellow]No {MANIFEST_NAME} found in {escape(str(directory))}. "
            "Skipping dependency installation.[/]"
        )
        return False

    _console.print(f"[blue]Installing dependencies in {escape(str(directory))}...[/]")
    argv = [PACKAGE_MANAGER, "install"]
    # npm output goes straight to the terminal
    proc = _process.run(argv, cwd=directory, capture=False)
    if proc.returncode != 0:
        raise InstallFailure(
            f"Error installing dependencies in {directory}: {_process.error_text(proc, argv)}"
        )
    _console.print(
        f"[green]Dependencies installed successfully in {escape(str(directory))}.[/]"
    )
    return True


def install_dependencies(project_dir: Path) -> list[Path]:
    """Run ``npm install`` in the project root and its frontend/backend parts.

    Returns the directories where an install ran. Stops at the first failure.
    """
    candidates = [project_dir]
    candidates.extend(
        project_dir / sub for sub in INSTALL_SUBDIRECTORIES if (project_dir / sub).is_dir()
    )
    return [directory for directory in candidates if _install_in(directory)]


def init_repository(project_dir: Path) -> None:
    _console.print("[blue]Initializing new git repository...[/]")
    argv = [SOURCE_CONTROL, "init"]
    proc = _process.run(argv, cwd=project_dir)
    if proc.returncode != 0:
        raise GitInitFailure(
            f"Error initializing git repository: {_process.error_text(proc, argv)}"
        )


def materialize(request: ScaffoldRequest, options: RunOptions, cwd: Path | None = None) -> Path:
    """Create the project described by *request*. Returns the project directory."""
    project_dir = resolve_target(request.project_name, cwd)

    clone_template(request.entry.source, project_dir)
    strip_history(project_dir)

    manifest = customize_manifest(project_dir, request.project_name, request.author)
    if manifest is not None:
        _console.print(f"Modified {MANIFEST_NAME}:")
        _console.print_json(data=manifest)

    if not options.skip_install:
        install_dependencies(project_dir)

    if options.git_init:
        init_repository(project_dir)

    return project_dir
