"""Kubernetes resource commands: get, describe, rollout, scale, logs."""

from enum import Enum

from kube_bot.infrastructure.commands import (
    CommandDefinition,
    KeywordGroup,
    OptionalPositional,
    Positional,
    QueryArgument,
)
from kube_bot.infrastructure.commands.converters import (
    non_negative_integer,
    positive_integer,
)

ROLLOUT_ACTIONS = ("status", "pause", "resume", "history", "undo")
DEFAULT_LOG_LINES = 25


class LogDirection(str, Enum):
    """End of the log to read from."""

    TOP = "top"
    BOTTOM = "bottom"


GET = CommandDefinition(
    name="get",
    argument_specs=(QueryArgument("query"),),
    description="Show a resource",
    usage="get <type/name[/revision]>",
)

DESCRIBE = CommandDefinition(
    name="describe",
    argument_specs=(QueryArgument("query"),),
    description="Show details of a resource",
    usage="describe <type/name[/revision]>",
)

ROLLOUT = CommandDefinition(
    name="rollout",
    subcommands=ROLLOUT_ACTIONS,
    argument_specs=(QueryArgument("query"),),
    description="Manage the rollout of a resource",
    usage=f"rollout {{{'|'.join(ROLLOUT_ACTIONS)}}} <type/name[/revision]>",
)

SCALE = CommandDefinition(
    name="scale",
    argument_specs=(
        QueryArgument("query"),
        Positional("replicas", convert=non_negative_integer),
    ),
    description="Set the number of replicas of a resource",
    usage="scale <type/name> <replicas>",
)

LOGS = CommandDefinition(
    name="logs",
    argument_specs=(
        QueryArgument("query"),
        KeywordGroup.from_enum("direction", LogDirection, LogDirection.BOTTOM),
        OptionalPositional(
            "lines", convert=positive_integer, default=DEFAULT_LOG_LINES
        ),
    ),
    description="Print the logs of a resource",
    usage=f"logs <type/name> [top|bottom] [lines, default {DEFAULT_LOG_LINES}]",
)

DEFINITIONS = (GET, DESCRIBE, ROLLOUT, SCALE, LOGS)
