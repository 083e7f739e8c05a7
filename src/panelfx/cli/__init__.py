"""Command line interface for panelfx."""

from .main import cli

__all__ = ["cli"]
