"""Whitespace tokenizer for chat messages.

Quoting and escaping are not supported: ``"two words"`` yields the two
tokens ``"two`` and ``words"``.
"""

from typing import List, Optional


def tokenize(text: Optional[str]) -> List[str]:
    """Split text on runs of whitespace.

    Example:
        >>> tokenize("  rollout   status deployment/api ")
        ['rollout', 'status', 'deployment/api']
        >>> tokenize("   ")
        []
    """
    if not text:
        return []
    return text.split()
