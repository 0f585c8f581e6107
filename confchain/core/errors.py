"""CLI error handling with actionable hints."""

import click


class ConfchainCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise ConfchainCliError(
            "config key 'PORT' (float64) could not be resolved",
            hint="Provide 'PORT' in one of the configured sources",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present."""
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg
