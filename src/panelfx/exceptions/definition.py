"""Exceptions for effect and animation files supplied on the command line."""

from .base import PanelFXError


class DefinitionFileError(PanelFXError):
    """An effect or animation file could not be read or does not match its model."""

    def __init__(self, file_path: str, kind: str, detail: str):
        """
        Initialize definition file error.

        Args:
            file_path: Path to the file given by the user
            kind: What the file should hold, e.g. "effect definition"
            detail: Parse or validation problems, one per line
        """
        if kind == "animation":
            example = '{"panels": [{"id": 1, "frames": [{"red": 255, "green": 0, "blue": 0}]}]}'
        else:
            example = "the output of 'panelfx show NAME'"

        super().__init__(
            user_message=f"Invalid {kind} file: {file_path}",
            technical_message=f"Could not load {kind} from {file_path}:\n{detail}",
            recoverable=True,
            recovery_hint=f"{detail}\n\nExpected shape: {example}",
        )
        self.file_path = file_path
        self.kind = kind
        self.detail = detail
