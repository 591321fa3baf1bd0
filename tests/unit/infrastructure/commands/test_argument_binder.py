"""Unit tests for ArgumentBinder."""

import pytest

from kube_bot.infrastructure.commands import (
    DuplicateKeywordError,
    InvalidArgumentError,
    InvalidQueryError,
    MissingArgumentError,
    OptionalPositional,
    Positional,
    Query,
    QueryArgument,
    TokenList,
    UnexpectedArgumentError,
)
from kube_bot.infrastructure.commands.converters import (
    is_bareword,
    non_negative_integer,
    positive_integer,
)
from tests.factories import Colour, Size, make_definition, make_keyword_group


class TestPositional:
    def test_consumes_next_token(self, binder):
        definition = make_definition(specs=[Positional("first"), Positional("second")])

        assert binder.bind(definition, ["a", "b"]) == {"first": "a", "second": "b"}

    def test_missing_token_raises(self, binder):
        definition = make_definition(specs=[Positional("first"), Positional("second")])

        with pytest.raises(MissingArgumentError) as exc_info:
            binder.bind(definition, ["a"], offset=1)

        assert exc_info.value.argument == "second"
        assert exc_info.value.position == 2

    def test_converter_applied(self, binder):
        definition = make_definition(
            specs=[Positional("replicas", convert=non_negative_integer)]
        )
        assert binder.bind(definition, ["0"]) == {"replicas": 0}

    def test_rejected_token_raises_invalid_argument(self, binder):
        definition = make_definition(
            specs=[Positional("replicas", convert=non_negative_integer)]
        )

        with pytest.raises(InvalidArgumentError) as exc_info:
            binder.bind(definition, ["three"], offset=2)

        assert exc_info.value.token == "three"
        assert exc_info.value.position == 2


class TestOptionalPositional:
    def test_binds_accepted_token(self, binder):
        definition = make_definition(
            specs=[OptionalPositional("lines", convert=positive_integer, default=25)]
        )
        assert binder.bind(definition, ["50"]) == {"lines": 50}

    def test_default_when_absent(self, binder):
        definition = make_definition(
            specs=[OptionalPositional("lines", convert=positive_integer, default=25)]
        )
        assert binder.bind(definition, []) == {"lines": 25}

    def test_rejected_token_is_left_for_later_specs(self, binder):
        definition = make_definition(
            specs=[
                OptionalPositional("lines", convert=positive_integer, default=25),
                Positional("name"),
            ]
        )
        assert binder.bind(definition, ["api"]) == {"lines": 25, "name": "api"}

    def test_rejected_token_without_later_spec_is_unexpected(self, binder):
        definition = make_definition(
            specs=[OptionalPositional("lines", convert=positive_integer, default=25)]
        )
        with pytest.raises(UnexpectedArgumentError) as exc_info:
            binder.bind(definition, ["0"])

        assert exc_info.value.token == "0"


class TestKeywordGroup:
    def test_binds_matching_keyword(self, binder):
        definition = make_definition(specs=[make_keyword_group("colour", Colour)])
        assert binder.bind(definition, ["green"]) == {"colour": Colour.GREEN}

    def test_default_when_no_keyword(self, binder):
        definition = make_definition(
            specs=[make_keyword_group("colour", Colour, default=Colour.GREEN)]
        )
        assert binder.bind(definition, []) == {"colour": Colour.GREEN}

    def test_scans_past_other_tokens(self, binder):
        definition = make_definition(
            specs=[make_keyword_group("colour", Colour), Positional("name")]
        )
        assert binder.bind(definition, ["api", "green"]) == {
            "colour": Colour.GREEN,
            "name": "api",
        }

    def test_two_keywords_of_one_group_raise(self, binder):
        definition = make_definition(specs=[make_keyword_group("colour", Colour)])

        with pytest.raises(DuplicateKeywordError) as exc_info:
            binder.bind(definition, ["red", "green"], offset=1)

        assert exc_info.value.token == "green"
        assert exc_info.value.position == 2
        assert exc_info.value.argument == "colour"

    def test_same_keyword_twice_raises(self, binder):
        definition = make_definition(specs=[make_keyword_group("colour", Colour)])

        with pytest.raises(DuplicateKeywordError):
            binder.bind(definition, ["red", "red"])

    def test_groups_are_independent(self, binder):
        definition = make_definition(
            specs=[make_keyword_group("colour", Colour), make_keyword_group("size", Size)]
        )
        assert binder.bind(definition, ["large", "green"]) == {
            "colour": Colour.GREEN,
            "size": Size.LARGE,
        }

    def test_keywords_are_case_sensitive(self, binder):
        definition = make_definition(specs=[make_keyword_group("colour", Colour)])

        with pytest.raises(UnexpectedArgumentError):
            binder.bind(definition, ["GREEN"])


class TestTokenList:
    def test_consumes_contiguous_matching_tokens(self, binder):
        definition = make_definition(
            specs=[TokenList("channels", prefix="#"), TokenList("rest")]
        )
        assert binder.bind(definition, ["#a", "#b", "c", "#d"]) == {
            "channels": ["a", "b"],
            "rest": ["c", "#d"],
        }

    def test_empty_match_binds_empty_list(self, binder):
        definition = make_definition(specs=[TokenList("channels", prefix="#")])
        assert binder.bind(definition, []) == {"channels": []}

    def test_stops_at_reserved_keyword(self, binder):
        definition = make_definition(
            specs=[TokenList("branches", predicate=is_bareword), make_keyword_group()]
        )
        assert binder.bind(definition, ["main", "red"]) == {
            "branches": ["main"],
            "colour": Colour.RED,
        }

    def test_stops_at_rejected_token(self, binder):
        definition = make_definition(specs=[TokenList("branches", predicate=is_bareword)])

        with pytest.raises(UnexpectedArgumentError) as exc_info:
            binder.bind(definition, ["main", "#ops", "dev"])

        assert exc_info.value.token == "#ops"
        assert exc_info.value.position == 1

    def test_skips_tokens_consumed_by_earlier_specs(self, binder):
        definition = make_definition(
            specs=[make_keyword_group(), TokenList("branches", predicate=is_bareword)]
        )
        assert binder.bind(definition, ["main", "green", "dev"]) == {
            "colour": Colour.GREEN,
            "branches": ["main", "dev"],
        }

    def test_bound_lists_are_not_shared(self, binder):
        definition = make_definition(specs=[TokenList("branches")])

        first = binder.bind(definition, [])
        first["branches"].append("main")

        assert binder.bind(definition, []) == {"branches": []}


class TestQueryArgument:
    def test_binds_query(self, binder):
        definition = make_definition(specs=[QueryArgument("query")])
        assert binder.bind(definition, ["pods/api"]) == {"query": Query("pods", "api")}

    def test_invalid_query_reports_position(self, binder):
        definition = make_definition(specs=[QueryArgument("query")])

        with pytest.raises(InvalidQueryError) as exc_info:
            binder.bind(definition, ["pods"], offset=2)

        assert exc_info.value.position == 2

    def test_missing_query_raises(self, binder):
        definition = make_definition(specs=[QueryArgument("query")])

        with pytest.raises(MissingArgumentError):
            binder.bind(definition, [])


class TestLeftoverTokens:
    def test_extra_tokens_raise(self, binder):
        definition = make_definition(specs=[Positional("name")])

        with pytest.raises(UnexpectedArgumentError) as exc_info:
            binder.bind(definition, ["a", "b"], offset=1)

        assert exc_info.value.token == "b"
        assert exc_info.value.position == 2

    def test_allow_extra_accepts_leftovers(self, binder):
        definition = make_definition(allow_extra=True)
        assert binder.bind(definition, ["anything", "goes"]) == {}

    def test_first_error_wins(self, binder):
        definition = make_definition(
            specs=[QueryArgument("query"), make_keyword_group()]
        )
        with pytest.raises(InvalidQueryError):
            binder.bind(definition, ["pods", "red", "green"])
