"""Deployment tracking commands.

``track`` subscribes chat channels to the deployments of a GitHub
repository, filtered by commit author, deployment result and branch.
"""

from enum import Enum

from kube_bot.infrastructure.commands import (
    CommandDefinition,
    KeywordGroup,
    Positional,
    TokenList,
)
from kube_bot.infrastructure.commands.converters import is_bareword


class AuthorFilter(str, Enum):
    """Whose deployments to report."""

    ANYONES = "anyones"
    MINE = "mine"
    NONE = "none"


class ResultFilter(str, Enum):
    """Which deployment results to report."""

    ALL = "all"
    FAILURE = "failure"
    SUCCESS = "success"


TRACK = CommandDefinition(
    name="track",
    argument_specs=(
        Positional("repo"),
        TokenList("channels", prefix="#"),
        KeywordGroup.from_enum("author_filter", AuthorFilter, AuthorFilter.MINE),
        KeywordGroup.from_enum("result_filter", ResultFilter, ResultFilter.ALL),
        TokenList("branches", predicate=is_bareword),
    ),
    description="Report deployments of a GitHub repository",
    usage=(
        "track <owner/repo> [#channel...] [anyones|mine|none] "
        "[all|failure|success] [branch...]"
    ),
)

DEFINITIONS = (TRACK,)
