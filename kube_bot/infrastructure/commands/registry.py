"""Command registry for registration and lookup."""

from typing import Dict, List

from kube_bot.infrastructure.commands.errors import (
    CommandNotFoundError,
    DuplicateCommandError,
    RegistryFrozenError,
)
from kube_bot.infrastructure.commands.models import CommandDefinition
from kube_bot.infrastructure.logging import get_module_logger

logger = get_module_logger()


class CommandRegistry:
    """Registry of command definitions keyed by lowercased name.

    A registry is filled once at startup and then frozen; after that it is
    only read, so a single instance can be shared by concurrent parses.

    Example:
        registry = CommandRegistry()
        registry.register(CommandDefinition(name="version", allow_extra=True))
        registry.freeze()

        registry.lookup("VERSION").name  # "version"
    """

    def __init__(self):
        self._commands: Dict[str, CommandDefinition] = {}
        self._frozen = False

    def register(self, definition: CommandDefinition) -> CommandDefinition:
        """Register a command definition.

        Raises:
            DuplicateCommandError: A command with the same name exists
            RegistryFrozenError: The registry was frozen
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{definition.name}', registry is frozen"
            )
        if definition.key in self._commands:
            raise DuplicateCommandError(
                f"Command '{definition.name}' is already registered"
            )
        self._commands[definition.key] = definition
        logger.debug("registered_command", name=definition.name)
        return definition

    def lookup(self, name: str) -> CommandDefinition:
        """Get a command definition by name, ignoring case.

        Raises:
            CommandNotFoundError: No command with that name
        """
        try:
            return self._commands[name.lower()]
        except KeyError:
            raise CommandNotFoundError(f"Unknown command: {name}") from None

    def list_commands(self) -> List[CommandDefinition]:
        """All definitions in registration order."""
        return list(self._commands.values())

    def freeze(self) -> "CommandRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def __len__(self) -> int:
        return len(self._commands)
