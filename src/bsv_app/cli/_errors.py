"""Failures that end a scaffolding run, each with the exit code it ends with."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for errors that terminate the run."""

    exit_code: int = 1


class EnvironmentMissing(ScaffoldError):
    """A required external tool is not installed or not on ``PATH``."""

    def __init__(self, tool: str, hint: str) -> None:
        super().__init__(f"{tool} is not installed or not available in PATH. {hint}")
        self.tool = tool


class TargetCollision(ScaffoldError):
    """The project directory already exists."""


class CloneFailure(ScaffoldError):
    """``git clone`` failed."""


class InstallFailure(ScaffoldError):
    """``npm install`` failed in one of the project directories."""


class GitInitFailure(ScaffoldError):
    """``git init`` failed in the new project directory."""


class UserCancelled(ScaffoldError):
    """The user aborted a prompt."""

    exit_code = 0


class PromptFailure(ScaffoldError):
    """A prompt could not be displayed."""

    exit_code = 0


class InvalidProjectName(ScaffoldError):
    """The project name resolves outside the current working directory."""


class ManifestError(ScaffoldError):
    """The template's ``package.json`` cannot be read as a JSON object."""
