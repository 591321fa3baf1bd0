"""Argument binding: the grammar engine behind every command.

The binder walks a definition's argument specs in order and lets each
spec claim tokens from the message:

- Positional: the next unconsumed token
- OptionalPositional: the next unconsumed token, only if its converter accepts it
- KeywordGroup: the first unconsumed token anywhere that is one of its keywords
- TokenList: contiguous unconsumed tokens accepted by its predicate
- QueryArgument: the next unconsumed token, parsed as a Query

Every spec ends up bound, either from the message or from its default.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

from kube_bot.infrastructure.commands.errors import (
    DuplicateKeywordError,
    InvalidArgumentError,
    MissingArgumentError,
    UnexpectedArgumentError,
)
from kube_bot.infrastructure.commands.models import (
    ArgumentKind,
    ArgumentSpec,
    CommandDefinition,
    KeywordGroup,
    OptionalPositional,
    Positional,
    QueryArgument,
    TokenList,
)
from kube_bot.infrastructure.commands.query import parse_query


class TokenStream:
    """Tokens of one message with per-token consumed flags.

    Attributes:
        tokens: Tokens left after the command (and subcommand) were resolved
        offset: Index of tokens[0] in the full message
    """

    def __init__(self, tokens: Sequence[str], offset: int = 0):
        self.tokens = list(tokens)
        self.offset = offset
        self._consumed = [False] * len(self.tokens)

    def unconsumed(self) -> List[int]:
        """Indexes of tokens not yet claimed, in message order."""
        return [i for i, used in enumerate(self._consumed) if not used]

    def peek(self) -> Optional[int]:
        """Index of the next unconsumed token, or None."""
        for i, used in enumerate(self._consumed):
            if not used:
                return i
        return None

    def consume(self, index: int) -> str:
        self._consumed[index] = True
        return self.tokens[index]

    def position(self, index: int) -> int:
        """Position of tokens[index] in the full message."""
        return self.offset + index

    @property
    def end_position(self) -> int:
        return self.offset + len(self.tokens)


class ArgumentBinder:
    """Bind message tokens to a CommandDefinition's argument specs.

    Example:
        binder = ArgumentBinder()
        augments = binder.bind(logs_definition, ["deployment/api", "top", "50"])
        # {"query": Query("deployment", "api"), "direction": LogDirection.TOP,
        #  "lines": 50}
    """

    def __init__(self):
        self._binders: Dict[
            ArgumentKind, Callable[[CommandDefinition, Any, TokenStream], Any]
        ] = {
            ArgumentKind.POSITIONAL: self._bind_positional,
            ArgumentKind.OPTIONAL: self._bind_optional,
            ArgumentKind.KEYWORD_GROUP: self._bind_keyword_group,
            ArgumentKind.TOKEN_LIST: self._bind_token_list,
            ArgumentKind.QUERY: self._bind_query,
        }

    def bind(
        self,
        definition: CommandDefinition,
        tokens: Sequence[str],
        offset: int = 0,
    ) -> Dict[str, Any]:
        """Bind tokens to every spec of definition.

        Args:
            definition: Command definition with argument specs
            tokens: Tokens following the command (and subcommand)
            offset: Position of tokens[0] in the full message

        Returns:
            Augments dict with one entry per argument spec

        Raises:
            CommandParseError: First binding failure encountered
        """
        stream = TokenStream(tokens, offset)
        augments: Dict[str, Any] = {}

        for spec in definition.argument_specs:
            augments[spec.name] = self._binders[spec.kind](definition, spec, stream)

        leftover = stream.unconsumed()
        if leftover and not definition.allow_extra:
            index = leftover[0]
            token = stream.tokens[index]
            raise UnexpectedArgumentError(
                f"Unexpected argument '{token}' for {definition.name}",
                token=token,
                position=stream.position(index),
            )

        return augments

    def _next_required(self, spec: ArgumentSpec, stream: TokenStream) -> int:
        index = stream.peek()
        if index is None:
            raise MissingArgumentError(
                f"Missing required argument: {spec.name}",
                position=stream.end_position,
                argument=spec.name,
            )
        return index

    def _bind_positional(
        self, definition: CommandDefinition, spec: Positional, stream: TokenStream
    ) -> Any:
        index = self._next_required(spec, stream)
        token = stream.consume(index)
        if spec.convert is None:
            return token
        try:
            return spec.convert(token)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid value for {spec.name}: {token}",
                token=token,
                position=stream.position(index),
                argument=spec.name,
            ) from None

    def _bind_optional(
        self,
        definition: CommandDefinition,
        spec: OptionalPositional,
        stream: TokenStream,
    ) -> Any:
        index = stream.peek()
        if index is None:
            return spec.default
        try:
            value = spec.convert(stream.tokens[index])
        except ValueError:
            return spec.default
        stream.consume(index)
        return value

    def _bind_keyword_group(
        self, definition: CommandDefinition, spec: KeywordGroup, stream: TokenStream
    ) -> Any:
        matches = [i for i in stream.unconsumed() if stream.tokens[i] in spec.keywords]
        if not matches:
            return spec.default

        first = matches[0]
        if len(matches) > 1:
            duplicate = stream.tokens[matches[1]]
            raise DuplicateKeywordError(
                f"'{duplicate}' conflicts with '{stream.tokens[first]}', "
                f"only one of {', '.join(spec.keywords)} is allowed",
                token=duplicate,
                position=stream.position(matches[1]),
                argument=spec.name,
            )
        return spec.keywords[stream.consume(first)]

    def _bind_token_list(
        self, definition: CommandDefinition, spec: TokenList, stream: TokenStream
    ) -> List[str]:
        values = spec.default
        for index in stream.unconsumed():
            token = stream.tokens[index]
            if token in definition.reserved_keywords or not spec.accepts(token):
                break
            values.append(spec.value_of(stream.consume(index)))
        return values

    def _bind_query(
        self, definition: CommandDefinition, spec: QueryArgument, stream: TokenStream
    ) -> Any:
        index = self._next_required(spec, stream)
        return parse_query(stream.consume(index), position=stream.position(index))
