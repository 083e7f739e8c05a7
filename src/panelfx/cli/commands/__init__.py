"""CLI commands for panelfx."""

from .config import config
from .effects import EFFECT_COMMANDS

__all__ = ["EFFECT_COMMANDS", "config"]
