"""Command framework data models.

Commands are declared as data: a CommandDefinition holds an ordered tuple
of argument specs, and each spec kind knows how it is rendered back to
text. The ArgumentBinder dispatches on ``ArgumentSpec.kind``, so adding a
command never requires touching the binder.

Example:
    logs = CommandDefinition(
        name="logs",
        argument_specs=(
            QueryArgument("query"),
            KeywordGroup.from_enum("direction", LogDirection, LogDirection.BOTTOM),
            OptionalPositional("lines", convert=positive_integer, default=25),
        ),
    )
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    FrozenSet,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
)

from kube_bot.infrastructure.commands.converters import any_token, is_any


class ArgumentKind(Enum):
    """Supported argument spec kinds."""

    POSITIONAL = "positional"
    OPTIONAL = "optional"
    KEYWORD_GROUP = "keyword_group"
    TOKEN_LIST = "token_list"
    QUERY = "query"


@dataclass(frozen=True)
class Query:
    """Resource locator written as ``type/name[/revision]``."""

    type: str
    name: str
    revision: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.type, self.name]
        if self.revision is not None:
            parts.append(self.revision)
        return "/".join(parts)


@dataclass(frozen=True)
class ArgumentSpec:
    """Base class of all argument specs.

    Attributes:
        name: Key of the bound value in CommandRequest.augments
    """

    name: str

    kind: ClassVar[ArgumentKind]

    def render(self, value: Any) -> List[str]:
        """Render a bound value back into tokens."""
        return [str(value)]


@dataclass(frozen=True)
class Positional(ArgumentSpec):
    """Required positional argument, consumes exactly one token.

    Attributes:
        convert: Optional converter; a ValueError marks the token invalid
    """

    convert: Optional[Callable[[str], Any]] = None

    kind: ClassVar[ArgumentKind] = ArgumentKind.POSITIONAL


@dataclass(frozen=True)
class OptionalPositional(ArgumentSpec):
    """Optional positional argument bound only if its converter accepts the token.

    Attributes:
        convert: Converter; a ValueError leaves the token for later specs
        default: Value bound when the next token is absent or rejected
    """

    convert: Callable[[str], Any] = any_token
    default: Any = None

    kind: ClassVar[ArgumentKind] = ArgumentKind.OPTIONAL

    def render(self, value: Any) -> List[str]:
        return [] if value is None else [str(value)]


@dataclass(frozen=True)
class KeywordGroup(ArgumentSpec):
    """Mutually exclusive literal keywords mapping to one canonical value.

    Attributes:
        keywords: Literal keyword -> canonical value
        default: Canonical value bound when no keyword is present
    """

    keywords: Mapping[str, Enum] = field(default_factory=dict)
    default: Optional[Enum] = None

    kind: ClassVar[ArgumentKind] = ArgumentKind.KEYWORD_GROUP

    def __post_init__(self):
        if not self.keywords:
            raise ValueError(f"Keyword group '{self.name}' declares no keywords")
        for keyword in self.keywords:
            if not keyword or keyword != keyword.strip() or len(keyword.split()) != 1:
                raise ValueError(
                    f"Invalid keyword {keyword!r} in keyword group '{self.name}'"
                )
        if self.default not in self.keywords.values():
            raise ValueError(
                f"Default of keyword group '{self.name}' must be one of its values"
            )
        object.__setattr__(self, "keywords", MappingProxyType(dict(self.keywords)))

    @classmethod
    def from_enum(
        cls, name: str, choices: Type[Enum], default: Enum
    ) -> "KeywordGroup":
        """Build a group whose keywords are the enum's values."""
        return cls(
            name=name,
            keywords={member.value: member for member in choices},
            default=default,
        )

    def render(self, value: Any) -> List[str]:
        for keyword, canonical in self.keywords.items():
            if canonical == value:
                return [keyword]
        raise ValueError(f"{value!r} is not a value of keyword group '{self.name}'")


@dataclass(frozen=True)
class TokenList(ArgumentSpec):
    """Greedy list of contiguous tokens accepted by a predicate.

    Attributes:
        predicate: Token test, applied to the full token
        prefix: Literal prefix every token must carry; stripped from bound values
    """

    predicate: Callable[[str], bool] = is_any
    prefix: str = ""

    kind: ClassVar[ArgumentKind] = ArgumentKind.TOKEN_LIST

    @property
    def default(self) -> List[str]:
        """Empty list, meaning unrestricted."""
        return []

    def accepts(self, token: str) -> bool:
        if self.prefix and (
            not token.startswith(self.prefix) or len(token) == len(self.prefix)
        ):
            return False
        return self.predicate(token)

    def value_of(self, token: str) -> str:
        return token[len(self.prefix) :]

    def render(self, value: Any) -> List[str]:
        return [f"{self.prefix}{item}" for item in value]


@dataclass(frozen=True)
class QueryArgument(ArgumentSpec):
    """Resource locator argument, see Query."""

    kind: ClassVar[ArgumentKind] = ArgumentKind.QUERY


@dataclass(frozen=True)
class CommandDefinition:
    """Declarative schema of one command.

    Attributes:
        name: Command name, matched case-insensitively
        argument_specs: Argument specs in binding order
        subcommands: Literal subcommands; when non-empty one is required
        description: Human-readable description, shown by help
        usage: Usage line, shown by help
        allow_extra: Accept and ignore tokens left after binding
    """

    name: str
    argument_specs: Tuple[ArgumentSpec, ...] = ()
    subcommands: Tuple[str, ...] = ()
    description: str = ""
    usage: str = ""
    allow_extra: bool = False
    reserved_keywords: FrozenSet[str] = field(
        init=False, repr=False, compare=False, default=frozenset()
    )

    def __post_init__(self):
        if not self.name or len(self.name.split()) != 1 or self.name != self.name.strip():
            raise ValueError(f"Invalid command name: {self.name!r}")
        object.__setattr__(self, "argument_specs", tuple(self.argument_specs))
        object.__setattr__(self, "subcommands", tuple(self.subcommands))

        lowered = [sub.lower() for sub in self.subcommands]
        if len(set(lowered)) != len(lowered):
            raise ValueError(f"Duplicate subcommand in '{self.name}'")

        names = [spec.name for spec in self.argument_specs]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate argument name in '{self.name}'")

        reserved: set = set()
        for spec in self.argument_specs:
            if spec.kind is not ArgumentKind.KEYWORD_GROUP:
                continue
            shared = reserved.intersection(spec.keywords)
            if shared:
                raise ValueError(
                    f"Keyword(s) {', '.join(sorted(shared))} of '{spec.name}' "
                    f"already belong to another group in '{self.name}'"
                )
            reserved.update(spec.keywords)
        object.__setattr__(self, "reserved_keywords", frozenset(reserved))

    @property
    def key(self) -> str:
        """Registry key (lowercased name)."""
        return self.name.lower()

    def match_subcommand(self, token: str) -> Optional[str]:
        """Return the declared spelling of the subcommand matching token."""
        lowered = token.lower()
        for subcommand in self.subcommands:
            if subcommand.lower() == lowered:
                return subcommand
        return None


@dataclass
class CommandRequest:
    """Result of parsing one chat message.

    Attributes:
        definition: The CommandDefinition that was matched
        augments: Argument name -> bound value, one entry per spec
        subcommand: Resolved subcommand, if the command has any
        raw_text: Original message text
    """

    definition: CommandDefinition
    augments: Dict[str, Any]
    subcommand: Optional[str] = None
    raw_text: str = field(default="", compare=False)

    @property
    def name(self) -> str:
        return self.definition.name

    def to_text(self) -> str:
        """Render the canonical command text for this request."""
        parts = [self.definition.name]
        if self.subcommand is not None:
            parts.append(self.subcommand)
        for spec in self.definition.argument_specs:
            parts.extend(spec.render(self.augments[spec.name]))
        return " ".join(parts)
