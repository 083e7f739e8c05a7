"""Data models for the effects API."""

from .animation import Frame, Panel, StreamAnimation
from .config import DeviceConfig
from .effect import EffectData, PaletteColor, PluginOption, PluginValue
from .enums import EffectCommand, PluginValueKind

__all__ = [
    # Config
    "DeviceConfig",
    # Enums
    "EffectCommand",
    # Models
    "EffectData",
    "Frame",
    "PaletteColor",
    "Panel",
    "PluginOption",
    "PluginValue",
    "PluginValueKind",
    "StreamAnimation",
]
