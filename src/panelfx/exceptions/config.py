"""Errors in the stored device configuration (``~/.panelfx/config.json``)."""

from .base import PanelFXError

_FIELD_EXAMPLES = {
    "url": "Example: http://192.168.1.20:16021/api/v1",
    "token": "Pair with the device to obtain a token",
    "timeout": "Use a positive number of seconds, e.g. 5.0",
}


class ConfigurationError(PanelFXError):
    """The device configuration is missing, unreadable or invalid."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the config file
            parse_error: Message from the JSON parser
        """
        super().__init__(
            user_message=f"Configuration file {file_path} is not valid JSON",
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=(
                f"{parse_error}\n"
                f"Fix the file by hand, or delete it and run "
                f"'panelfx config set --url URL --token TOKEN' to write a fresh one."
            ),
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A configuration value is out of range or has the wrong type."""

    def __init__(self, field: str, value: object, error_msg: str, file_path: str | None = None):
        """
        Initialize config validation error.

        Args:
            field: Name of the offending field ("multiple fields" when several failed)
            value: The rejected value
            error_msg: Why it was rejected
            file_path: Where the value came from (file path or "command line")
        """
        hint = f"Correct '{field}' with 'panelfx config set'"
        if file_path:
            hint += f" (source: {file_path})"
        if field in _FIELD_EXAMPLES:
            hint += f"\n{_FIELD_EXAMPLES[field]}"

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
