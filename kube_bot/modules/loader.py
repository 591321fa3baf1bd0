"""Registry loader for the built-in commands."""

from typing import Iterable, List, Optional

from kube_bot.infrastructure.commands import (
    CommandDefinition,
    CommandRegistry,
    CommandRegistryError,
)
from kube_bot.infrastructure.logging import get_module_logger
from kube_bot.modules import general, github, kubectl

logger = get_module_logger()


def builtin_definitions() -> List[CommandDefinition]:
    """Built-in command definitions in registration order."""
    return [*kubectl.DEFINITIONS, *github.DEFINITIONS, *general.DEFINITIONS]


def load_registry(
    definitions: Optional[Iterable[CommandDefinition]] = None,
) -> CommandRegistry:
    """Build and freeze a registry holding the given (or built-in) definitions.

    Raises:
        CommandRegistryError: A definition could not be registered. Callers
            treat this as fatal: the bot must not start with a partial registry.
    """
    registry = CommandRegistry()
    for definition in definitions if definitions is not None else builtin_definitions():
        try:
            registry.register(definition)
        except CommandRegistryError as e:
            logger.error(
                "registry_load_failed",
                command=definition.name,
                error=str(e),
            )
            raise
    registry.freeze()
    logger.info(
        "registry_loaded",
        commands=[definition.name for definition in registry.list_commands()],
    )
    return registry
