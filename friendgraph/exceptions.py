"""
friendgraph Exceptions and Error Utilities

File Purpose: Centralized exception types and simple error handling helpers
Primary Classes/Functions: FriendGraphError, InvalidArgumentError, SettingsError, handle_error
Inputs and Outputs (I/O): Accepts exceptions and console; prints user-friendly messages
"""

from typing import Optional

from rich.console import Console


class FriendGraphError(Exception):
    """Base exception for all friendgraph-specific errors."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.details = details
        self.original_error = original_error
        super().__init__(message)


class InvalidArgumentError(FriendGraphError, ValueError):
    """Raised when a caller passes an identifier, bound or kind the graph cannot accept."""

    pass


class SettingsError(FriendGraphError):
    """Raised when a settings file cannot be read or parsed."""

    pass


def handle_error(
    console: Console,
    error: FriendGraphError,
    operation: str,
    show_details: bool = False,
) -> None:
    """
    Report a rejected graph operation on the console.

    The message is the bare error text ("Unknown vertex", "Invalid type", ...)
    so callers see the same wording the graph raised. Details and the wrapped
    error are only printed when show_details is set (the CLI's --verbose).
    """
    console.print(f"[red]{operation} failed: {error.message}[/]")
    if show_details and error.details:
        console.print(f"[dim]   Details: {error.details}[/]")
    if show_details and error.original_error:
        console.print(f"[dim]   Original error: {error.original_error}[/]")
