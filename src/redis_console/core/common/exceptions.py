"""
Common exception classes for the Redis web console.

This module defines custom exception classes used throughout the application
for better error handling and categorization. Every interpreter error carries
an ``ErrorKind`` so it can be folded into a failed ``CommandResult``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of interpreter failures."""

    UNCLOSED_QUOTE = "UnclosedQuote"
    NO_COMMAND = "NoCommand"
    INVALID_ARGUMENTS = "InvalidArguments"
    UNSUPPORTED_COMMAND = "UnsupportedCommand"
    STORE_ERROR = "StoreError"
    CONFIGURATION_ERROR = "ConfigurationError"


class ConsoleError(Exception):
    """Base exception class for all console errors."""

    kind: ErrorKind = ErrorKind.STORE_ERROR

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        *,
        status_code: int | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            status_code: Optional HTTP status code hint for transport adapters
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code or 500

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "kind": self.kind.value,
            "details": self.details,
        }
        return {"error": error_dict}


class UnclosedQuoteError(ConsoleError):
    """Raised when a command line ends inside a quoted substring."""

    kind = ErrorKind.UNCLOSED_QUOTE

    def __init__(
        self,
        message: str = "unclosed quotes",
        details: dict | None = None,
        quote_char: str | None = None,
    ):
        det = details.copy() if details else {}
        if quote_char:
            det.setdefault("quote_char", quote_char)
        super().__init__(message, det, status_code=400)
        self.quote_char = quote_char


class NoCommandError(ConsoleError):
    """Raised when a command line holds no tokens."""

    kind = ErrorKind.NO_COMMAND

    def __init__(
        self, message: str = "No command provided", details: dict | None = None
    ):
        super().__init__(message, details, status_code=400)


class InvalidArgumentsError(ConsoleError):
    """Raised when arguments violate a command's arity or type rules."""

    kind = ErrorKind.INVALID_ARGUMENTS

    def __init__(
        self,
        message: str = "Invalid arguments",
        command_name: str | None = None,
        details: dict | None = None,
    ):
        det = details.copy() if details else {}
        if command_name:
            det.setdefault("command_name", command_name)
        super().__init__(message, det, status_code=400)
        self.command_name = command_name


class UnsupportedCommandError(ConsoleError):
    """Raised for unknown verbs when pass-through execution is disabled."""

    kind = ErrorKind.UNSUPPORTED_COMMAND

    def __init__(
        self,
        message: str = "Unsupported command",
        command_name: str | None = None,
        details: dict | None = None,
    ):
        det = details.copy() if details else {}
        if command_name:
            det.setdefault("command_name", command_name)
        super().__init__(message, det, status_code=400)
        self.command_name = command_name


class StoreError(ConsoleError):
    """Raised when a store operation fails.

    The message is the store's own message, unmodified.
    """

    kind = ErrorKind.STORE_ERROR

    def __init__(
        self,
        message: str = "Store operation failed",
        details: dict | None = None,
        **kwargs,
    ):
        status_code = kwargs.pop("status_code", 500)
        super().__init__(message, details, status_code=status_code)


class StoreNotConnectedError(StoreError):
    """Raised when the store is used before a connection is established."""

    def __init__(
        self, message: str = "not connected to store", details: dict | None = None
    ):
        super().__init__(message, details, status_code=503)


class ConfigurationError(ConsoleError):
    """Raised when there's a configuration issue."""

    kind = ErrorKind.CONFIGURATION_ERROR

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
    ):
        super().__init__(message, details, status_code=400)
