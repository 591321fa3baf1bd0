import pytest

from kube_bot.infrastructure.commands import ArgumentBinder, CommandParser
from kube_bot.modules.loader import load_registry


@pytest.fixture
def registry():
    """Registry holding the built-in commands."""
    return load_registry()


@pytest.fixture
def parser(registry):
    """CommandParser over the built-in commands."""
    return CommandParser(registry)


@pytest.fixture
def binder():
    return ArgumentBinder()
