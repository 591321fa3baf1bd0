"""Token converters and predicates used by argument specs.

A converter takes a single token and returns the value to bind, raising
ValueError if the token is not acceptable. A predicate returns a bool.
"""


def any_token(token: str) -> str:
    """Accept any token as-is."""
    return token


def positive_integer(token: str) -> int:
    """Parse a strictly positive decimal integer (no sign, no separators)."""
    if not token.isdecimal():
        raise ValueError(f"not a positive integer: {token}")
    value = int(token)
    if value <= 0:
        raise ValueError(f"not a positive integer: {token}")
    return value


def non_negative_integer(token: str) -> int:
    """Parse a decimal integer >= 0 (no sign, no separators)."""
    if not token.isdecimal():
        raise ValueError(f"not a non-negative integer: {token}")
    return int(token)


def is_bareword(token: str) -> bool:
    """True for tokens that are not channel references or mentions."""
    return not token.startswith(("#", "@", "<"))


def is_any(token: str) -> bool:
    return True
