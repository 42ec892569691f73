"""Tests for the template registry and run records."""

from __future__ import annotations

import dataclasses

import pytest

from bsv_app.cli._types import (
    DEFAULT_TEMPLATE,
    TEMPLATES,
    RunOptions,
    ScaffoldRequest,
    get_template,
    template_labels,
)


class TestRegistry:
    @pytest.mark.parametrize("entry", TEMPLATES, ids=lambda t: t.label)
    def test_lookup_yields_configured_source(self, entry) -> None:
        assert get_template(entry.label).source == entry.source

    def test_labels_are_unique(self) -> None:
        labels = template_labels()
        assert len(labels) == len(set(labels))

    def test_labels_in_registry_order(self) -> None:
        assert template_labels() == [t.label for t in TEMPLATES]

    def test_default_is_first_entry(self) -> None:
        assert DEFAULT_TEMPLATE is TEMPLATES[0]
        assert DEFAULT_TEMPLATE.source == "https://github.com/p2ppsr/meter.git"

    def test_unknown_label(self) -> None:
        with pytest.raises(KeyError):
            get_template("meter")

    def test_entries_are_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            TEMPLATES[0].source = "https://example.com/other.git"  # type: ignore[misc]


class TestRecords:
    def test_request_resolves_entry(self) -> None:
        request = ScaffoldRequest(DEFAULT_TEMPLATE.label, "demo")
        assert request.entry is DEFAULT_TEMPLATE
        assert request.author == ""

    def test_run_options_defaults(self) -> None:
        assert RunOptions() == RunOptions(
            skip_install=False, git_init=False, non_interactive=False
        )
