"""Tests for dot-path and wildcard traversal (`data_get`).

Covers:
    * Resolver order: key, attribute, zero-argument method
    * Miss semantics (whole path -> None, falsy values are hits)
    * Privacy of underscore names and builtin container methods
    * Wildcard plucking, trailing wildcards and one-level collapse
"""
from __future__ import annotations

from types import SimpleNamespace

from pydantic import BaseModel

from model_presenter.resolution.path_access import MISSING, collapse, data_get, resolve_segment


class Author:
    def __init__(self, first, last):
        self.first = first
        self.last = last
        self._secret = "hidden"
        self.nickname = None

    def full_name(self):
        return f"{self.first} {self.last}"

    def greet(self, other):
        return f"hi {other}"

    @property
    def initials(self):
        return self.first[0] + self.last[0]


class Tag(BaseModel):
    name: str


def test_blank_path_returns_target():
    target = {"a": 1}
    assert data_get(target, "") is target
    assert data_get(target, "   ") is target
    assert data_get(target, None) is target


def test_nested_mapping_and_object_path():
    author = SimpleNamespace(name="Ada", profile={"city": "London"})
    assert data_get({"author": author}, "author.profile.city") == "London"


def test_miss_resolves_whole_path_to_none():
    assert data_get({"a": {"b": 1}}, "a.c.d") is None
    assert data_get({"a": None}, "a.b") is None
    assert data_get(5, "real") is None


def test_presence_not_truthiness():
    assert data_get({"a": 0}, "a") == 0
    assert data_get({"a": False}, "a") is False
    assert data_get({"a": ""}, "a") == ""


def test_sequence_indexes():
    data = {"items": ["x", "y"]}
    assert data_get(data, "items.1") == "y"
    assert data_get(data, "items.2") is None
    assert data_get(data, "items.-1") is None


def test_digit_segment_matches_int_key():
    assert data_get({1: "one"}, "1") == "one"
    assert data_get({"1": "string one", 1: "int one"}, "1") == "string one"


def test_attribute_property_and_zero_arg_method():
    author = Author("Ada", "Lovelace")
    assert data_get(author, "first") == "Ada"
    assert data_get(author, "initials") == "AL"
    assert data_get(author, "full_name") == "Ada Lovelace"


def test_method_requiring_arguments_is_a_miss():
    assert data_get(Author("Ada", "Lovelace"), "greet") is None


def test_none_attribute_is_unset():
    assert resolve_segment(Author("Ada", "Lovelace"), "nickname") is MISSING


def test_private_names_are_not_reachable():
    author = Author("Ada", "Lovelace")
    assert data_get(author, "_secret") is None
    assert data_get(author, "__class__") is None


def test_builtin_container_methods_are_not_reachable():
    assert data_get({"a": 1}, "items") is None
    assert data_get("abc", "upper") is None
    assert data_get([1, 2], "copy") is None


def test_pydantic_model_fields_resolve_as_attributes():
    assert data_get({"tag": Tag(name="python")}, "tag.name") == "python"


def test_wildcard_plucks_from_every_element():
    assert data_get([{"name": "a"}, {"name": "b"}], "*.name") == ["a", "b"]


def test_wildcard_over_mapping_uses_values_in_order():
    assert data_get({"x": {"n": 1}, "y": {"n": 2}}, "*.n") == [1, 2]


def test_trailing_wildcard_returns_elements():
    assert data_get({"tags": ("a", "b")}, "tags.*") == ["a", "b"]


def test_wildcard_keeps_per_element_misses():
    assert data_get([{"name": "a"}, {}], "*.name") == ["a", None]


def test_nested_wildcards_collapse_one_level():
    data = {
        "posts": [
            {"tags": [{"n": "a"}, {"n": "b"}]},
            {"tags": [{"n": "c"}]},
        ]
    }
    assert data_get(data, "posts.*.tags.*.n") == ["a", "b", "c"]


def test_wildcard_over_scalar_is_none():
    assert data_get({"n": 5}, "n.*") is None
    assert data_get({"s": "text"}, "s.*") is None


def test_wildcard_over_foreign_containers():
    tags = [Tag(name="a"), Tag(name="b")]
    assert data_get({"tags": (t for t in tags)}, "tags.*.name") == ["a", "b"]
    assert data_get(Tag(name="solo"), "*") == ["solo"]


def test_collapse_drops_non_sequences():
    assert collapse([[1, 2], None, (3,), "x"]) == [1, 2, 3]


class Counter:
    def __init__(self):
        self.reads = 0

    @property
    def empty(self):
        self.reads += 1
        return None


def test_property_is_read_once_per_segment():
    counter = Counter()
    assert data_get(counter, "empty") is None
    assert counter.reads == 1
