"""Command-line interface for Guitar Tools."""

from .main import main

__all__ = ["main"]
