"""Command-line interface for rendering element descriptors and listing the catalog."""

from .main import main

__all__ = ["main"]
