"""Per-message context binding for structured logging.

Every log entry emitted while a chat message is handled carries the
message's correlation id together with the sender and channel ids.

Usage:
    from kube_bot.infrastructure.logging import bind_request_context

    with bind_request_context(user_id="U123", channel_id="C123"):
        logger.info("message_received")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[str] = None,
    channel_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind message-scoped context to all logs within the block.

    Args:
        correlation_id: Unique message identifier. Generated if not provided.
        user_id: Chat id of the sender.
        channel_id: Chat id of the channel the message arrived in.
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    if user_id is not None:
        context["user_id"] = user_id
    if channel_id is not None:
        context["channel_id"] = channel_id
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the correlation id bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")
