"""Unit tests for CommandRegistry."""

import pytest

from kube_bot.infrastructure.commands import (
    CommandNotFoundError,
    CommandRegistry,
    DuplicateCommandError,
    RegistryFrozenError,
)
from tests.factories import make_definition, make_registry


class TestCommandRegistry:
    def test_registry_starts_empty(self):
        registry = CommandRegistry()

        assert len(registry) == 0
        assert registry.list_commands() == []
        assert not registry.frozen

    def test_register_and_lookup(self):
        registry = CommandRegistry()
        definition = make_definition(name="get")

        assert registry.register(definition) is definition
        assert registry.lookup("get") is definition

    @pytest.mark.parametrize("name", ["get", "GET", "Get"])
    def test_lookup_ignores_case(self, name):
        registry = make_registry(make_definition(name="get"))

        assert registry.lookup(name).name == "get"
        assert name in registry

    def test_lookup_missing_raises_not_found(self):
        registry = make_registry(make_definition(name="get"))

        with pytest.raises(CommandNotFoundError, match="nope"):
            registry.lookup("nope")

    def test_not_found_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            CommandRegistry().lookup("get")

    def test_duplicate_name_raises(self):
        registry = CommandRegistry()
        registry.register(make_definition(name="get"))

        with pytest.raises(DuplicateCommandError, match="already registered"):
            registry.register(make_definition(name="GET"))

    def test_duplicate_does_not_replace_first(self):
        registry = CommandRegistry()
        first = registry.register(make_definition(name="get", description="first"))

        with pytest.raises(DuplicateCommandError):
            registry.register(make_definition(name="get", description="second"))

        assert registry.lookup("get") is first

    def test_list_commands_keeps_registration_order(self):
        registry = make_registry(
            make_definition(name="b"), make_definition(name="a"), make_definition(name="c")
        )
        assert [d.name for d in registry.list_commands()] == ["b", "a", "c"]

    def test_frozen_registry_rejects_registration(self):
        registry = make_registry(make_definition(name="get"))

        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register(make_definition(name="describe"))
        assert len(registry) == 1

    def test_freeze_returns_registry(self):
        registry = CommandRegistry()
        assert registry.freeze() is registry

    def test_contains_rejects_non_strings(self):
        registry = make_registry(make_definition(name="get"))
        assert 1 not in registry
