"""Chat module.

Listens for messages addressed to the bot, parses them into command
requests and replies in the same channel. Execution against the cluster is
not wired in yet: the bot answers with the arguments it understood.
"""

import re
from typing import List, Optional

from kube_bot.infrastructure.commands import (
    CommandParseError,
    CommandParser,
    CommandRegistry,
    CommandRequest,
)
from kube_bot.infrastructure.configuration import settings
from kube_bot.infrastructure.logging import bind_request_context, get_module_logger

logger = get_module_logger()

LEARNING_PREFIX = "I'm still learning, here are your arguments:"
ERROR_PREFIX = "Whoops I had a brain fart:"

_LEADING_MENTIONS = re.compile(r"^\s*(?:<@[A-Z0-9]+(?:\|[^>]*)?>[\s:,]*)+")
# Slack sends "#ops" as <#C0123|ops>
_CHANNEL_REFERENCE = re.compile(r"<#([A-Z0-9]+)(?:\|([^>]*))?>")


def register(bot, parser: CommandParser):
    """Register message listeners on a slack_bolt App."""

    def on_app_mention(event, say):
        handle_event(event, say, parser)

    def on_message(event, say):
        if event.get("channel_type") != "im" or event.get("subtype") or event.get(
            "bot_id"
        ):
            if settings.slack.LOG_UNHANDLED_EVENTS:
                logger.info(
                    "unhandled_event",
                    subtype=event.get("subtype"),
                    channel_type=event.get("channel_type"),
                )
            return
        handle_event(event, say, parser)

    bot.event("app_mention")(on_app_mention)
    bot.event("message")(on_message)


def handle_event(event: dict, say, parser: CommandParser):
    reply = handle_message(
        event.get("text", ""),
        parser,
        user_id=event.get("user"),
        channel_id=event.get("channel"),
        correlation_id=event.get("client_msg_id") or event.get("event_ts"),
    )
    say(reply)


def handle_message(
    text: str,
    parser: CommandParser,
    user_id: Optional[str] = None,
    channel_id: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> str:
    """Parse one message and compose the reply text."""
    with bind_request_context(
        correlation_id=correlation_id, user_id=user_id, channel_id=channel_id
    ):
        logger.info("message_received", text=text)
        try:
            request = parser.parse(normalize_message(text))
        except CommandParseError as e:
            return f"{ERROR_PREFIX} {e.message}"

        logger.info(
            "command_received",
            command=request.name,
            subcommand=request.subcommand,
        )
        if request.name == "help":
            return format_help(parser.registry)
        return format_arguments(request)


def normalize_message(text: str) -> str:
    """Strip leading bot mentions and turn channel references into #name."""
    text = _LEADING_MENTIONS.sub("", text or "")
    return _CHANNEL_REFERENCE.sub(
        lambda match: f"#{match.group(2) or match.group(1)}", text
    )


def format_arguments(request: CommandRequest) -> str:
    lines = [LEARNING_PREFIX]
    if request.subcommand is not None:
        lines.append(f"- subcommand={request.subcommand}")
    for spec in request.definition.argument_specs:
        lines.append(
            f"- {spec.name}={_display(spec.render(request.augments[spec.name]))}"
        )
    return "\n".join(lines)


def format_help(registry: CommandRegistry) -> str:
    lines = ["Here is what I understand:"]
    for definition in registry.list_commands():
        lines.append(f"- `{definition.usage or definition.name}` {definition.description}")
    return "\n".join(lines)


def _display(tokens: List[str]) -> str:
    return " ".join(tokens) if tokens else "(none)"
