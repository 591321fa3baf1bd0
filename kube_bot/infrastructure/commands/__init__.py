"""Command framework for chat message interpretation.

This framework provides:
- CommandDefinition and argument specs: declarative command schemas
- CommandRegistry: register and look up command definitions
- CommandParser: turn chat text into a CommandRequest
- ArgumentBinder: bind message tokens to argument specs

Example:
    from kube_bot.infrastructure.commands import (
        CommandDefinition, CommandParser, CommandRegistry, QueryArgument
    )

    registry = CommandRegistry()
    registry.register(
        CommandDefinition(name="get", argument_specs=(QueryArgument("query"),))
    )
    registry.freeze()

    request = CommandParser(registry).parse("get pods/api")
    request.augments["query"]  # Query(type="pods", name="api", revision=None)
"""

from kube_bot.infrastructure.commands.binder import ArgumentBinder
from kube_bot.infrastructure.commands.errors import (
    CommandNotFoundError,
    CommandParseError,
    CommandRegistryError,
    DuplicateCommandError,
    DuplicateKeywordError,
    EmptyMessageError,
    ErrorKind,
    InvalidArgumentError,
    InvalidQueryError,
    MissingArgumentError,
    RegistryFrozenError,
    UnexpectedArgumentError,
    UnknownCommandError,
    UnknownSubcommandError,
)
from kube_bot.infrastructure.commands.models import (
    ArgumentKind,
    ArgumentSpec,
    CommandDefinition,
    CommandRequest,
    KeywordGroup,
    OptionalPositional,
    Positional,
    Query,
    QueryArgument,
    TokenList,
)
from kube_bot.infrastructure.commands.parser import CommandParser
from kube_bot.infrastructure.commands.query import parse_query
from kube_bot.infrastructure.commands.registry import CommandRegistry
from kube_bot.infrastructure.commands.tokenizer import tokenize

__all__ = [
    # Models
    "ArgumentKind",
    "ArgumentSpec",
    "CommandDefinition",
    "CommandRequest",
    "KeywordGroup",
    "OptionalPositional",
    "Positional",
    "Query",
    "QueryArgument",
    "TokenList",
    # Core
    "ArgumentBinder",
    "CommandParser",
    "CommandRegistry",
    "parse_query",
    "tokenize",
    # Errors
    "ErrorKind",
    "CommandParseError",
    "EmptyMessageError",
    "UnknownCommandError",
    "UnknownSubcommandError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "InvalidQueryError",
    "DuplicateKeywordError",
    "UnexpectedArgumentError",
    "CommandRegistryError",
    "DuplicateCommandError",
    "CommandNotFoundError",
    "RegistryFrozenError",
]
