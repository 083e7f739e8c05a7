"""Immutable connection context shared by every client call."""

from pydantic import BaseModel, ConfigDict, Field

from panelfx.exceptions import ConfigurationError
from panelfx.models import DeviceConfig
from panelfx.transport import RequestsTransport, Transport


class DeviceContext(BaseModel):
    """
    Base URL, auth token and transport for one device.

    The model is frozen so one context can be shared by concurrent callers.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: str = Field(description="Device API root, without trailing slash")
    token: str = Field(min_length=1, description="Auth token embedded in every URL")
    transport: Transport = Field(repr=False, exclude=True)

    @property
    def effects_endpoint(self) -> str:
        """``<url>/<token>/effects``"""
        return f"{self.url.rstrip('/')}/{self.token}/effects"

    @classmethod
    def from_config(cls, config: DeviceConfig, transport: Transport | None = None) -> "DeviceContext":
        """
        Build a context from stored configuration.

        Args:
            config: Device configuration
            transport: Transport to use; a RequestsTransport honouring
                       ``config.timeout`` is created when omitted

        Raises:
            ConfigurationError: If no auth token is configured
        """
        if not config.is_paired:
            raise ConfigurationError(
                user_message="No auth token configured for the panel controller.",
                recoverable=True,
                recovery_hint="Store one with 'panelfx config set --token TOKEN' or pass --token.",
            )
        return cls(
            url=config.url,
            token=config.token,
            transport=transport or RequestsTransport(timeout=config.timeout),
        )
