"""
Custom Exceptions.

Shell-specific exception classes. Every error a command handler can raise
derives from ApplicationError so the dispatcher can report it and carry on.
"""


class ApplicationError(Exception):
    """Base exception for all shell errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidArgumentError(ApplicationError):
    """Raised when a command is missing a required argument."""

    def __init__(self, message: str = "invalid argument") -> None:
        super().__init__(message, code="CMD_INVALID_ARGUMENT")


class UnsupportedCommandError(ApplicationError):
    """Raised when the first token of a line is not a known command."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unsupported command: {token}", code="CMD_UNSUPPORTED")


class TransportError(ApplicationError):
    """Raised when a request cannot be delivered or completed."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class DecodeError(ApplicationError):
    """Raised when a response body is not a valid query result."""

    def __init__(self, message: str = "Could not decode response") -> None:
        super().__init__(message, code="RES_DECODE_ERROR")
