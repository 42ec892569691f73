"""Shared fixtures for the bsv-app test suite."""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest


@dataclass
class FakeTools:
    """Stands in for ``git`` and ``npm``; ``git clone`` lays out a fake template."""

    manifest: dict[str, Any] | None = field(
        default_factory=lambda: {"name": "meter", "version": "1.0.0"}
    )
    raw_manifest: str | None = None
    subprojects: dict[str, bool] = field(default_factory=dict)
    fail: set[str] = field(default_factory=set)
    stderr: str = "fatal: simulated failure"
    calls: list[tuple[list[str], Path | None]] = field(default_factory=list)

    def __call__(
        self, argv: list[str], *, cwd: Path | None = None, capture: bool = True
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append((list(argv), cwd))
        action = argv[1]
        if action in self.fail:
            return subprocess.CompletedProcess(argv, 1, "", self.stderr)
        if action == "clone":
            self._clone(Path(argv[3]))
        if action == "init":
            assert cwd is not None
            (cwd / ".git").mkdir()
        return subprocess.CompletedProcess(argv, 0, "", "")

    def _clone(self, dest: Path) -> None:
        dest.mkdir(parents=True)
        (dest / ".git").mkdir()
        (dest / ".git" / "HEAD").write_text("ref: refs/heads/master\n")
        (dest / "README.md").write_text("# meter\n")
        if self.raw_manifest is not None:
            (dest / "package.json").write_text(self.raw_manifest)
        elif self.manifest is not None:
            (dest / "package.json").write_text(json.dumps(self.manifest, indent=4))
        for name, has_manifest in self.subprojects.items():
            (dest / name).mkdir()
            if has_manifest:
                (dest / name / "package.json").write_text('{"name": "%s"}' % name)

    @property
    def commands(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]

    @property
    def installs(self) -> list[Path]:
        return [cwd for argv, cwd in self.calls if argv[:2] == ["npm", "install"] and cwd]


@pytest.fixture
def tools(monkeypatch: pytest.MonkeyPatch) -> FakeTools:
    fake = FakeTools()
    monkeypatch.setattr("bsv_app.cli._process.run", fake)
    return fake
