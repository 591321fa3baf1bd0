"""Command parsing: from chat text to a CommandRequest."""

from typing import Optional

from kube_bot.infrastructure.commands.binder import ArgumentBinder
from kube_bot.infrastructure.commands.errors import (
    CommandNotFoundError,
    CommandParseError,
    EmptyMessageError,
    UnknownCommandError,
    UnknownSubcommandError,
)
from kube_bot.infrastructure.commands.models import CommandRequest
from kube_bot.infrastructure.commands.registry import CommandRegistry
from kube_bot.infrastructure.commands.tokenizer import tokenize
from kube_bot.infrastructure.logging import get_module_logger

logger = get_module_logger()


class CommandParser:
    """Parse chat messages against a registry of command definitions.

    The parser holds no per-message state: one instance can serve any
    number of concurrent messages.

    Example:
        parser = CommandParser(load_registry())

        request = parser.parse("rollout status deployment/api/3")
        # CommandRequest(
        #     definition=<rollout>,
        #     subcommand="status",
        #     augments={"query": Query("deployment", "api", "3")},
        # )
    """

    def __init__(self, registry: CommandRegistry, binder: Optional[ArgumentBinder] = None):
        self.registry = registry
        self.binder = binder or ArgumentBinder()

    def parse(self, raw_text: Optional[str]) -> CommandRequest:
        """Parse raw message text.

        Args:
            raw_text: Message text with the bot mention already stripped

        Returns:
            CommandRequest with every argument bound

        Raises:
            CommandParseError: The first error found in the message
        """
        try:
            return self._parse(raw_text or "")
        except CommandParseError as e:
            logger.warning(
                "command_parse_error",
                kind=e.kind.value,
                token=e.token,
                position=e.position,
                raw_text=raw_text,
                error=e.message,
            )
            raise

    def _parse(self, raw_text: str) -> CommandRequest:
        tokens = tokenize(raw_text)
        if not tokens:
            raise EmptyMessageError("Empty message, try 'help'")

        try:
            definition = self.registry.lookup(tokens[0])
        except CommandNotFoundError:
            raise UnknownCommandError(
                f"Unknown command '{tokens[0]}', try 'help'",
                token=tokens[0],
                position=0,
            ) from None

        subcommand = None
        offset = 1
        if definition.subcommands:
            choices = "|".join(definition.subcommands)
            if len(tokens) < 2:
                raise UnknownSubcommandError(
                    f"{definition.name} needs one of {choices}",
                    position=1,
                )
            subcommand = definition.match_subcommand(tokens[1])
            if subcommand is None:
                raise UnknownSubcommandError(
                    f"Unknown {definition.name} subcommand '{tokens[1]}', "
                    f"expected one of {choices}",
                    token=tokens[1],
                    position=1,
                )
            offset = 2

        augments = self.binder.bind(definition, tokens[offset:], offset=offset)
        logger.debug(
            "command_parsed",
            command=definition.name,
            subcommand=subcommand,
        )
        return CommandRequest(
            definition=definition,
            augments=augments,
            subcommand=subcommand,
            raw_text=raw_text,
        )
