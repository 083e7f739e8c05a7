"""
Effect control client.

Every operation is one self-contained round trip:

    build envelope -> transport GET/PUT -> check_status -> decode body

The client holds nothing but an immutable DeviceContext, so one instance can
be shared by concurrent callers. There is no caching and no retrying; the
device is the only source of truth and the first error is raised as-is.

Usage:
    config = DeviceConfig.load_or_default()
    with EffectsClient.from_config(config) as client:
        names = client.list_effects()
        client.select(names[0])
"""

import logging
from typing import Callable, Mapping

from panelfx.context import DeviceContext
from panelfx.exceptions import (
    EffectNotFoundError,
    EndpointNotFoundError,
    NotFoundError,
    PanelFXError,
)
from panelfx.models import DeviceConfig, EffectData, StreamAnimation
from panelfx.protocol import (
    Envelope,
    Expect,
    build_add,
    build_delete,
    build_display,
    build_display_temp,
    build_raw,
    build_rename,
    build_request,
    build_request_all,
    build_select,
    check_status,
    decode_effect_data,
    decode_effect_data_list,
    decode_string,
    decode_string_list,
    encode_animation,
)
from panelfx.transport import Transport

logger = logging.getLogger(__name__)

EFFECTS_LIST_PATH = "/effectsList"
SELECT_PATH = "/select"


class EffectsClient:
    """Typed operations on the device's effects endpoint."""

    def __init__(self, context: DeviceContext):
        """
        Initialize the client.

        Args:
            context: Base URL, token and transport for the device
        """
        self._context = context

    @classmethod
    def from_config(cls, config: DeviceConfig, transport: Transport | None = None) -> "EffectsClient":
        """Build a client from stored configuration (see DeviceContext.from_config)."""
        return cls(DeviceContext.from_config(config, transport))

    @property
    def context(self) -> DeviceContext:
        return self._context

    def close(self) -> None:
        """Release the transport, if it holds resources."""
        close = getattr(self._context.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "EffectsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # Reads

    def list_effects(self) -> list[str]:
        """
        Names of every effect stored on the device, in device order.

        Raises:
            UnauthorizedError, EndpointNotFoundError, UnexpectedResponseError,
            MalformedResponseError, TransportError
        """
        body = self._send(
            "list effects",
            path=EFFECTS_LIST_PATH,
            expect=Expect.BODY,
            not_found=lambda: EndpointNotFoundError(EFFECTS_LIST_PATH),
        )
        return decode_string_list(body)

    def get_selected(self) -> str:
        """Name of the currently active effect."""
        body = self._send(
            "get selected effect",
            path=SELECT_PATH,
            expect=Expect.BODY,
            not_found=lambda: EndpointNotFoundError(SELECT_PATH),
        )
        return decode_string(body)

    def fetch_effect(self, name: str) -> EffectData:
        """
        Full definition of one effect.

        Raises:
            UnauthorizedError, EffectNotFoundError, UnexpectedResponseError,
            MalformedResponseError, TransportError
        """
        body = self._send(
            "fetch effect",
            envelope=build_request(name),
            expect=Expect.BODY,
            not_found=lambda: EffectNotFoundError(name),
        )
        return decode_effect_data(body)

    def fetch_all_effects(self) -> list[EffectData]:
        """Full definitions of every effect, in device order."""
        body = self._send(
            "fetch all effects",
            envelope=build_request_all(),
            expect=Expect.BODY,
            not_found=EffectNotFoundError,
        )
        return decode_effect_data_list(body)

    # Mutations

    def select(self, name: str) -> None:
        """Activate a stored effect."""
        self._send(
            "select effect",
            envelope=build_select(name),
            expect=Expect.NO_CONTENT,
            not_found=lambda: EffectNotFoundError(name),
        )

    def rename(self, name: str, new_name: str) -> None:
        """Rename a stored effect."""
        self._send(
            "rename effect",
            envelope=build_rename(name, new_name),
            expect=Expect.NO_CONTENT,
            not_found=lambda: EffectNotFoundError(name),
        )

    def add_or_update(self, data: EffectData, name: str) -> None:
        """
        Create an effect, or overwrite the one called ``name``.

        ``command`` and ``name`` on the outgoing payload are always ``"add"``
        and ``name``, whatever ``data`` carries.
        """
        self._send(
            "add effect",
            envelope=build_add(data, name),
            expect=Expect.NO_CONTENT,
            not_found=lambda: EffectNotFoundError(name),
        )

    def delete(self, name: str) -> None:
        """Remove a stored effect."""
        self._send(
            "delete effect",
            envelope=build_delete(name),
            expect=Expect.NO_CONTENT,
            not_found=lambda: EffectNotFoundError(name),
        )

    def display(self, animation: str | StreamAnimation, loop: bool = True) -> None:
        """
        Show a custom RGB animation right away without storing it.

        Args:
            animation: Encoded animation data, or a StreamAnimation to encode
            loop: Repeat the animation until something else is selected
        """
        if isinstance(animation, StreamAnimation):
            animation = encode_animation(animation)

        self._send(
            "display animation",
            envelope=build_display(animation, loop),
            expect=Expect.NO_CONTENT,
        )

    def display_temporary(self, name: str, duration: int) -> None:
        """
        Show a stored effect for ``duration`` seconds, then revert.

        Returns once the device acknowledges; the timer runs on the device.
        """
        self._send(
            "display effect temporarily",
            envelope=build_display_temp(name, duration),
            expect=Expect.NO_CONTENT,
        )

    def write_raw(self, payload: Mapping) -> None:
        """Send ``{"write": payload}`` verbatim. The response body is ignored."""
        self._send(
            "raw write",
            envelope=build_raw(payload),
            expect=Expect.NO_CONTENT,
        )

    def _send(
        self,
        operation: str,
        *,
        expect: Expect,
        not_found: Callable[[], NotFoundError] | None = None,
        path: str = "",
        envelope: Envelope | None = None,
    ) -> bytes:
        """
        Issue one request and apply the status mapping.

        GET when no envelope is given, PUT with the envelope otherwise. Without
        ``not_found`` a 404 is reported as an unexpected status.

        Returns:
            The raw response body, only once the status has been accepted
        """
        url = f"{self._context.effects_endpoint}{path}"
        transport = self._context.transport

        if envelope is None:
            logger.debug(f"GET effects{path}")
            response = transport.get(url)
        else:
            logger.debug(f"PUT effects{path} ({envelope.label})")
            response = transport.put(url, envelope.to_wire())

        try:
            check_status(response.status_code, expect, not_found, operation)
        except PanelFXError as e:
            logger.warning(f"Failed to {operation}: {e.technical_message}")
            raise

        return response.content
