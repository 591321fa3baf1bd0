"""Command framework errors.

Parse errors are recoverable: they describe what was wrong with a single
chat message and carry a message that is safe to show in chat. Registry
errors are startup defects.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of parse errors."""

    EMPTY_MESSAGE = "empty_message"
    UNKNOWN_COMMAND = "unknown_command"
    UNKNOWN_SUBCOMMAND = "unknown_subcommand"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_QUERY = "invalid_query"
    DUPLICATE_KEYWORD = "duplicate_keyword"
    UNEXPECTED_ARGUMENT = "unexpected_argument"


class CommandParseError(Exception):
    """Error during command parsing.

    Attributes:
        kind: ErrorKind of the failure
        message: Human-readable, chat-safe description
        token: Offending token, if any
        position: Index of the offending token in the message, if any
        argument: Name of the argument being bound, if any
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        position: Optional[int] = None,
        argument: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position
        self.argument = argument

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"token={self.token!r}, position={self.position!r})"
        )


class EmptyMessageError(CommandParseError):
    kind = ErrorKind.EMPTY_MESSAGE


class UnknownCommandError(CommandParseError):
    kind = ErrorKind.UNKNOWN_COMMAND


class UnknownSubcommandError(CommandParseError):
    kind = ErrorKind.UNKNOWN_SUBCOMMAND


class MissingArgumentError(CommandParseError):
    kind = ErrorKind.MISSING_ARGUMENT


class InvalidArgumentError(CommandParseError):
    kind = ErrorKind.INVALID_ARGUMENT


class InvalidQueryError(CommandParseError):
    kind = ErrorKind.INVALID_QUERY


class DuplicateKeywordError(CommandParseError):
    kind = ErrorKind.DUPLICATE_KEYWORD


class UnexpectedArgumentError(CommandParseError):
    kind = ErrorKind.UNEXPECTED_ARGUMENT


class CommandRegistryError(Exception):
    """Error raised while building or reading a CommandRegistry."""


class DuplicateCommandError(CommandRegistryError):
    """A command with the same name is already registered."""


class CommandNotFoundError(CommandRegistryError, LookupError):
    """No command is registered under the requested name."""


class RegistryFrozenError(CommandRegistryError):
    """The registry no longer accepts registrations."""
