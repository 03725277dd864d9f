"""Command-line interface for Deconstructor."""

from .app import app

__all__ = ["app"]
