"""bsv-app: scaffolding tool for BSV-powered applications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bsv-app")
except PackageNotFoundError:
    __version__ = "0.0.0"
