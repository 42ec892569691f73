"""Command line interface for bsv-app."""

from bsv_app.cli.app import app

__all__ = ["app"]
