"""End-to-end tests for structured presenters (`$` / `%` accessors).

Covers:
    * Literal pass-through, key order, shorthand keys, miss-is-null
    * Wildcard plucking and nested specifications
    * Leaf conversion (datetime, __str__) and presentability rejection
    * Callables as transformers and as specification leaves
    * Presenter self-access, chained indirection and the recursion guard
    * Re-binding of mutable presenters
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest
from pydantic import BaseModel

from model_presenter import (
    AbstractPresenter,
    ConfigurationError,
    MutablePresenter,
    Presenter,
    RecursionLimitError,
    SpecificationError,
    UnpresentableValueError,
)
from model_presenter.resolution.transmogrifier import Transmogrifier


class Opaque:
    pass


class Author(BaseModel):
    name: str
    joined: date


def _source():
    return {"id": 1, "name": "World", "display_date": datetime(1970, 1, 1)}


def test_end_to_end_example():
    presenter = Presenter({"id": "$id", "name": "$name", "entry_date": "$display_date"})
    assert presenter.transform(_source()) == {
        "id": 1,
        "name": "World",
        "entry_date": "1970-01-01 00:00:00",
    }


def test_presenters_are_callable():
    presenter = Presenter({"name": "$name"})
    assert presenter(_source()) == presenter.transform(_source())


@pytest.mark.parametrize("literal", [None, True, False, 0, 42, 3.5])
def test_scalar_literals_pass_through(literal):
    transmogrifier = Transmogrifier(None, max_depth=8, datetime_format="%Y")
    assert transmogrifier.transmogrify(literal, {"any": "source"}) == literal


def test_literal_strings_under_explicit_keys():
    spec = {"greeting": "Hello", "count": 2, "flag": False, "nothing": None}
    assert Presenter(spec)({}) == spec


def test_key_order_follows_specification():
    result = Presenter({"c": "$c", "a": "$a", "b": "$missing"})({"a": 1, "c": 3})
    assert list(result) == ["c", "a", "b"]


def test_shorthand_equivalence():
    source = _source()
    shorthand = Presenter(["display_date"])(source)
    explicit = Presenter({"display_date": "$display_date"})(source)
    assert shorthand == explicit == {"display_date": "1970-01-01 00:00:00"}


def test_positional_entries_mix_shorthand_and_prefixed_paths():
    result = Presenter(["id", "$author.name"])({"id": 7, "author": {"name": "Ada"}})
    assert result == {"id": 7, "author.name": "Ada"}


def test_missing_field_is_null():
    assert Presenter({"x": "$x"})({}) == {"x": None}
    assert Presenter("$x")({}) is None
    assert Presenter(["x.y.z"])({"x": {}}) == {"x.y.z": None}


def test_wildcard_pluck():
    assert Presenter("$*.name")([{"name": "a"}, {"name": "b"}]) == ["a", "b"]


def test_nested_specification_with_wildcards():
    source = {
        "author": {"name": "Ada"},
        "posts": [{"title": "One"}, {"title": "Two"}],
    }
    spec = {"author": {"name": "$author.name", "titles": "$posts.*.title"}}
    assert Presenter(spec)(source) == {"author": {"name": "Ada", "titles": ["One", "Two"]}}


def test_sequence_specifications_stay_lists():
    assert Presenter([{"a": "$a"}, {"b": "$b"}])({"a": 1, "b": 2}) == [{"a": 1}, {"b": 2}]


def test_resolved_data_keeps_its_own_shape():
    source = {"meta": {"tags": ["x", "y"], "counts": {"views": 3}}}
    assert Presenter("$meta")(source) == {"tags": ["x", "y"], "counts": {"views": 3}}


def test_rich_leaves_are_converted():
    source = {"price": Decimal("9.99"), "author": Author(name="Ada", joined=date(2020, 5, 17))}
    spec = {"price": "$price", "name": "$author.name", "joined": "$author.joined"}
    assert Presenter(spec)(source) == {
        "price": "9.99",
        "name": "Ada",
        "joined": "2020-05-17 00:00:00",
    }


def test_datetime_format_override():
    presenter = Presenter({"d": "$d"}, datetime_format="%d/%m/%Y")
    assert presenter({"d": datetime(2021, 3, 4)}) == {"d": "04/03/2021"}


def test_unconvertible_object_is_rejected():
    with pytest.raises(UnpresentableValueError) as e:
        Presenter({"x": "$x"})({"x": Opaque()})
    assert "Opaque" in str(e.value)
    assert isinstance(e.value, TypeError)


def test_empty_resolved_container_is_rejected():
    with pytest.raises(UnpresentableValueError):
        Presenter({"tags": "$tags"})({"tags": []})


def test_ambiguous_positional_literal_is_a_specification_error():
    with pytest.raises(SpecificationError) as e:
        Presenter(["Hello, world!"])({})
    assert isinstance(e.value, ValueError)
    assert "Hello, world!" in str(e.value)


def test_callable_transformer_receives_context():
    def transformer(context):
        return ["id", "name"] if context.get("public") else ["id"]

    presenter = Presenter(transformer)
    assert presenter({"id": 1, "name": "n", "public": True}) == {"id": 1, "name": "n"}
    assert presenter({"id": 1, "name": "n"}) == {"id": 1}


def test_callable_leaves_are_invoked_with_context():
    spec = {
        "upper": lambda ctx: ctx["name"].upper(),
        "when": lambda ctx: ctx["display_date"],
    }
    assert Presenter(spec)(_source()) == {"upper": "WORLD", "when": "1970-01-01 00:00:00"}


def test_callable_leaf_returning_object_is_rejected():
    with pytest.raises(UnpresentableValueError):
        Presenter({"x": lambda ctx: Opaque()})({})


class ArticlePresenter(Presenter):
    site = "example.org"

    def url(self):
        return f"https://{self.site}/articles"

    def headline(self):
        return "$title"


def test_self_accessor_reads_presenter_attributes_and_methods():
    presenter = ArticlePresenter({"site": "%site", "url": "%url"})
    assert presenter({}) == {"site": "example.org", "url": "https://example.org/articles"}


def test_resolved_accessor_strings_chain():
    assert ArticlePresenter({"headline": "%headline"})({"title": "Hi"}) == {"headline": "Hi"}


def test_private_presenter_state_is_not_reachable():
    assert ArticlePresenter({"t": "%_transformer"})({}) == {"t": None}


class LoopingPresenter(Presenter):
    def loop(self):
        return "%loop"


def test_self_reference_hits_recursion_guard():
    with pytest.raises(RecursionLimitError) as e:
        LoopingPresenter({"x": "%loop"}, max_depth=10)({})
    assert isinstance(e.value, RecursionError)
    assert e.value.max_depth == 10


def test_abstract_presenter_subclass():
    class UserPresenter(AbstractPresenter):
        def transformer(self, context):
            return ["id", "email"]

    assert UserPresenter()({"id": 3, "email": "a@b.c", "password": "x"}) == {
        "id": 3,
        "email": "a@b.c",
    }


def test_invalid_transformer_fails_at_construction():
    with pytest.raises(ConfigurationError):
        Presenter(42)


def test_mutable_presenter_rebinding():
    presenter = MutablePresenter({"a": "$a"})
    assert presenter({"a": 1, "b": 2}) == {"a": 1}
    assert presenter.set_transformer({"b": "$b"}) is presenter
    assert presenter({"a": 1, "b": 2}) == {"b": 2}


def test_rebinding_during_transform_applies_to_next_call():
    presenter = MutablePresenter()

    def first(context):
        presenter.set_transformer({"second": "$b"})
        return {"first": "$a"}

    presenter.set_transformer(first)
    assert presenter({"a": 1, "b": 2}) == {"first": 1}
    assert presenter({"a": 1, "b": 2}) == {"second": 2}


def test_mutable_presenter_rejects_invalid_transformers():
    presenter = MutablePresenter({"a": "$a"})
    with pytest.raises(ConfigurationError):
        presenter.set_transformer(3.5)
    assert presenter({"a": 1}) == {"a": 1}


def test_unbound_mutable_presenter_fails():
    with pytest.raises(ConfigurationError):
        MutablePresenter()({})


def test_bytes_leaf_is_rejected():
    with pytest.raises(UnpresentableValueError) as e:
        Presenter({"b": "$b"})({"b": b"\x00ab"})
    assert "bytes" in str(e.value)
