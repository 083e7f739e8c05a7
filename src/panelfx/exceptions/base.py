"""Root of the panelfx exception tree.

Every error raised by the library carries two messages: a short one fit for
the command line (``user_message``) and a detailed one for logs
(``technical_message``). Errors the user can act on also set ``recoverable``
and a ``recovery_hint``.
"""


class PanelFXError(Exception):
    """
    Base exception for panelfx.

    Attributes:
        user_message: Short message shown to the user; also what ``str()`` returns
        technical_message: Detailed message for logs
        recoverable: True if the user can fix the cause and try again
        recovery_hint: What to do about it, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        recoverable: bool = False,
        recovery_hint: str | None = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, when there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
