"""
Centralized error translation utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────────┘
                  ↑
                  │ PanelFXError
                  │
┌─────────────────────────────────────────┐
│  CLIENT LAYER (EffectsClient)       │
│  - Maps HTTP status to DeviceError  │
│  - Decodes bodies or fails loudly   │
└─────────────────────────────────────────┘
                  ↑
                  │ requests / pydantic exceptions
                  │
┌─────────────────────────────────────────┐
│  LOW LEVEL (transport, JSON, files) │
└─────────────────────────────────────────┘
```

| Scenario | Use This |
|----------|----------|
| requests raised while talking to the device | `wrap_transport_error(e, url)` |
| Config file failed pydantic validation | `wrap_pydantic_error(e, path)` |
| Printing any exception for a user | `format_error_for_display(e)` |
"""

import logging
from typing import Optional

from .base import PanelFXError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import TransportError


logger = logging.getLogger(__name__)


def wrap_transport_error(error: Exception, url: str) -> TransportError:
    """
    Convert an HTTP library failure to a TransportError.

    Args:
        error: The exception raised by the HTTP library
        url: The URL being requested (must not contain the token)

    Returns:
        TransportError carrying the original message
    """
    error_type = type(error).__name__
    return TransportError(url=url, original_error=f"{error_type}: {error}")


def wrap_pydantic_error(error: Exception, file_path: str) -> PanelFXError:
    """
    Convert Pydantic validation errors to panelfx exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, PanelFXError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
