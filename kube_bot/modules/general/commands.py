"""Bot level commands: version, config, help."""

from kube_bot.infrastructure.commands import CommandDefinition, OptionalPositional

VERSION = CommandDefinition(
    name="version",
    description="Show the bot version",
    usage="version",
    allow_extra=True,
)

CONFIG = CommandDefinition(
    name="config",
    argument_specs=(OptionalPositional("key"), OptionalPositional("value")),
    description="Show or change a bot setting",
    usage="config [key] [value]",
)

HELP = CommandDefinition(
    name="help",
    description="List the commands the bot understands",
    usage="help",
    allow_extra=True,
)

DEFINITIONS = (VERSION, CONFIG, HELP)
