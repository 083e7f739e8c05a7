"""Enumerations for the effects API."""

from enum import Enum


class EffectCommand(str, Enum):
    """Command tags carried inside a ``write`` envelope."""

    REQUEST = "request"  # Full definition of one effect
    REQUEST_ALL = "requestAll"  # Definitions of every effect
    RENAME = "rename"
    ADD = "add"  # Create or overwrite
    DELETE = "delete"
    DISPLAY = "display"  # Show an ad-hoc animation without storing it
    DISPLAY_TEMP = "displayTemp"  # Show a stored effect for a bounded duration


class PluginValueKind(str, Enum):
    """Primitive kinds a plugin option value may take."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
