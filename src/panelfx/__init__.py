"""panelfx: effect control client for smart-lighting panel controllers."""

__version__ = "0.1.0"

from .client import EffectsClient
from .context import DeviceContext
from .models import (
    DeviceConfig,
    EffectData,
    Frame,
    PaletteColor,
    Panel,
    PluginOption,
    StreamAnimation,
)
from .transport import RequestsTransport, Transport, TransportResponse

__all__ = [
    # Client
    "DeviceContext",
    "EffectsClient",
    # Models
    "DeviceConfig",
    "EffectData",
    "Frame",
    "PaletteColor",
    "Panel",
    "PluginOption",
    "StreamAnimation",
    # Transport
    "RequestsTransport",
    "Transport",
    "TransportResponse",
]
