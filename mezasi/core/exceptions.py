"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error propagates to the CLI entry point unmodified, which prints
the message and exits non-zero.
"""


class MezasiError(Exception):
    """Base exception for all mezasi errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(MezasiError):
    """Raised when the endpoint or profile cannot be resolved."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class InvalidArguments(MezasiError):
    """Raised when positional arguments or options do not fit a command."""

    def __init__(self, message: str = "invalid arguments", code: str = "ARG_INVALID") -> None:
        super().__init__(message, code=code)


class ArgumentCountError(InvalidArguments):
    """Raised when the number of positional arguments violates a command's arity."""

    def __init__(self, usage: str) -> None:
        self.usage = usage
        super().__init__(f"invalid argument\nUsage: {usage}", code="ARG_COUNT")


class MissingRequiredOption(MezasiError):
    """Raised when a required option is empty."""

    def __init__(self, usage: str, options: list[str]) -> None:
        self.usage = usage
        self.options = options
        missing = ", ".join(f"--{name}" for name in options)
        super().__init__(
            f"missing required option(s): {missing}\nUsage: {usage}",
            code="ARG_MISSING_OPTION",
        )


class UnknownCommand(MezasiError):
    """Raised when no command descriptor matches the first CLI token."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown command: {name}", code="CMD_UNKNOWN")


class InvalidPath(MezasiError):
    """Raised when a relative path is not a valid URL reference."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        message = f"invalid request path: {path!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, code="REQ_INVALID_PATH")


class AttachmentError(MezasiError):
    """Raised when a local file for a multipart part cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"cannot read {path}: {reason}", code="REQ_ATTACHMENT")


class TransportError(MezasiError):
    """Raised when the HTTP call fails (connection, DNS, timeout, TLS)."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="NET_TRANSPORT")


class RemoteLookupError(MezasiError):
    """Raised when a lookup against the VM service does not return success."""

    def __init__(self, message: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message, code="REMOTE_LOOKUP")


class FieldMissing(MezasiError):
    """Raised when a decoded response body lacks an expected field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"response has no {field!r} field", code="REMOTE_FIELD_MISSING")


class PresentationError(MezasiError):
    """Raised when a body declared as JSON cannot be decoded."""

    def __init__(self, message: str = "Malformed JSON response") -> None:
        super().__init__(message, code="OUT_PRESENTATION")


class UserDeclined(MezasiError):
    """Raised when an interactive confirmation is declined."""

    def __init__(self, message: str = "Aborted") -> None:
        super().__init__(message, code="USER_DECLINED")


class ExternalCommandError(MezasiError):
    """Raised when an external program cannot be located or started."""

    def __init__(self, message: str = "External command failed") -> None:
        super().__init__(message, code="EXT_COMMAND")
