from tests.factories.commands import (
    Colour,
    Size,
    make_definition,
    make_keyword_group,
    make_registry,
)

__all__ = [
    "Colour",
    "Size",
    "make_definition",
    "make_keyword_group",
    "make_registry",
]
