"""
Custom exception hierarchy for panelfx.

## Exception Hierarchy

```
PanelFXError (base)
├── DeviceError
│   ├── TransportError
│   ├── UnauthorizedError
│   ├── NotFoundError
│   │   ├── EffectNotFoundError
│   │   └── EndpointNotFoundError
│   ├── UnexpectedResponseError
│   └── MalformedResponseError
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── DefinitionFileError
```

All custom exceptions inherit from `PanelFXError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

### Example: Effect Not Found

```python
from panelfx.exceptions import EffectNotFoundError

try:
    client.fetch_effect("Nope")
except EffectNotFoundError as e:
    print(e.user_message)   # "Effect 'Nope' not found."
    print(e.recovery_hint)  # "Run 'panelfx list' to see ..."
```

See `panelfx.exceptions.handlers` for the translation helpers.
"""

from .base import PanelFXError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .definition import DefinitionFileError
from .device import (
    DeviceError,
    EffectNotFoundError,
    EndpointNotFoundError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    UnexpectedResponseError,
)
from .handlers import format_error_for_display, wrap_pydantic_error, wrap_transport_error

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Definition files
    "DefinitionFileError",
    # Device
    "DeviceError",
    "EffectNotFoundError",
    "EndpointNotFoundError",
    "MalformedResponseError",
    "NotFoundError",
    # Base
    "PanelFXError",
    "TransportError",
    "UnauthorizedError",
    "UnexpectedResponseError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_transport_error",
]
