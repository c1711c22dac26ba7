"""docs-sync - documentation pipeline for the docs site and package READMEs."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("docs-sync")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"  # Fallback for development without install
