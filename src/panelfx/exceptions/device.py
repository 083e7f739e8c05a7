"""Device-related exceptions.

This module defines the failure kinds of a round trip to the controller:
- TransportError: No response was obtained at all
- UnauthorizedError: The device rejected the auth token (HTTP 401)
- NotFoundError: HTTP 404, split into EffectNotFoundError and EndpointNotFoundError
- UnexpectedResponseError: Status outside the expected set for the operation
- MalformedResponseError: Body does not parse into the expected shape
"""

from typing import Optional

from .base import PanelFXError


class DeviceError(PanelFXError):
    """A request to the panel controller failed."""

    def __init__(self, user_message: str, status_code: Optional[int] = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            status_code: HTTP status returned by the device (if any)
        """
        super().__init__(user_message, **kwargs)
        self.status_code = status_code


class TransportError(DeviceError):
    """No response was obtained from the device (network, DNS, timeout)."""

    def __init__(self, url: str, original_error: Optional[str] = None):
        """
        Initialize transport error.

        Args:
            url: The URL that was requested (token already redacted)
            original_error: The error message from the HTTP library
        """
        user_msg = "Could not reach the panel controller."
        tech_msg = f"Request to {url} failed"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint="Check that the device is powered on and the configured URL is correct.",
        )
        self.url = url
        self.original_error = original_error


class UnauthorizedError(DeviceError):
    """The device rejected the auth token."""

    def __init__(self):
        super().__init__(
            user_message="The panel controller rejected the auth token.",
            status_code=401,
            recoverable=True,
            recovery_hint=(
                "Pair a new token with the device and store it with "
                "'panelfx config set --token TOKEN'."
            ),
        )


class NotFoundError(DeviceError):
    """The device answered 404."""

    pass


class EffectNotFoundError(NotFoundError):
    """A named-effect operation targeted an effect the device does not know."""

    def __init__(self, effect: Optional[str] = None):
        """
        Initialize effect-not-found error.

        Args:
            effect: Name of the effect that was requested (if any)
        """
        if effect:
            user_msg = f"Effect '{effect}' not found."
        else:
            user_msg = "Effect not found."

        super().__init__(
            user_message=user_msg,
            status_code=404,
            recoverable=True,
            recovery_hint="Run 'panelfx list' to see the effects stored on the device.",
        )
        self.effect = effect


class EndpointNotFoundError(NotFoundError):
    """The requested API path does not exist on the device."""

    def __init__(self, path: str):
        """
        Initialize endpoint-not-found error.

        Args:
            path: API path relative to the effects endpoint
        """
        super().__init__(
            user_message=f"The panel controller has no resource at '{path}'.",
            status_code=404,
            recovery_hint="Check that the configured URL points at the device API root.",
        )
        self.path = path


class UnexpectedResponseError(DeviceError):
    """The device answered with a status the operation does not expect."""

    def __init__(self, status_code: int, expected: int, operation: str):
        """
        Initialize unexpected response error.

        Args:
            status_code: Status the device returned
            expected: Status the operation expected
            operation: Name of the operation
        """
        super().__init__(
            user_message=f"Unexpected response from the panel controller (HTTP {status_code}).",
            technical_message=(
                f"{operation}: expected HTTP {expected}, device returned {status_code}"
            ),
            status_code=status_code,
        )
        self.expected = expected
        self.operation = operation


class MalformedResponseError(DeviceError):
    """The response body does not match the expected shape."""

    def __init__(self, expected: str, parse_error: str):
        """
        Initialize malformed response error.

        Args:
            expected: Human description of the expected shape
            parse_error: The underlying parse/validation message
        """
        super().__init__(
            user_message=f"The panel controller sent an invalid response (expected {expected}).",
            technical_message=f"Could not decode {expected}: {parse_error}",
        )
        self.expected = expected
        self.parse_error = parse_error
