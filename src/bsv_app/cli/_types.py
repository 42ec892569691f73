"""Template registry and the records passed between CLI stages."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PROJECT_NAME = "bsv-app"


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """A project template hosted in a remote git repository."""

    label: str
    source: str


TEMPLATES: tuple[TemplateEntry, ...] = (
    TemplateEntry(
        label="Meter - A feature-packed starting point",
        source="https://github.com/p2ppsr/meter.git",
    ),
)

DEFAULT_TEMPLATE = TEMPLATES[0]


def template_labels() -> list[str]:
    """Return the template labels in registry order."""
    return [t.label for t in TEMPLATES]


def get_template(label: str) -> TemplateEntry:
    """Look up a template by its exact label."""
    for entry in TEMPLATES:
        if entry.label == label:
            return entry
    raise KeyError(label)


@dataclass(frozen=True, slots=True)
class ScaffoldRequest:
    """What to create: the chosen template, project name and author."""

    template: str
    project_name: str
    author: str = ""

    @property
    def entry(self) -> TemplateEntry:
        return get_template(self.template)


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Flags controlling the optional materialization steps."""

    skip_install: bool = False
    git_init: bool = False
    non_interactive: bool = False
