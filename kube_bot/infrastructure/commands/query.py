"""Parser for the ``type/name[/revision]`` resource locator."""

from typing import Optional

from kube_bot.infrastructure.commands.errors import InvalidQueryError
from kube_bot.infrastructure.commands.models import Query

QUERY_SEPARATOR = "/"


def parse_query(token: str, position: Optional[int] = None) -> Query:
    """Parse a query token.

    Args:
        token: Token such as ``deployment/api`` or ``deployment/api/3``
        position: Index of the token in the message, reported on error

    Returns:
        Query with revision set only for the three part form

    Raises:
        InvalidQueryError: Wrong number of parts or an empty part
    """
    parts = token.split(QUERY_SEPARATOR)
    if len(parts) not in (2, 3) or not all(parts):
        raise InvalidQueryError(
            f"Invalid resource '{token}', expected type/name or type/name/revision",
            token=token,
            position=position,
        )
    return Query(*parts)
