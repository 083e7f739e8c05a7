"""Utility helpers for panelfx."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
