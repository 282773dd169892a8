import copy
import json
from collections import Counter

import pytest

from json_flattener import flatten
from json_flattener.flattening import is_flat, merge_array_into, merge_object_into


def scalars(value):
    """Multiset of scalar leaves, keyed by their JSON text."""
    found = Counter()

    def walk(v):
        if isinstance(v, dict):
            for inner in v.values():
                walk(inner)
        elif isinstance(v, list):
            for inner in v:
                walk(inner)
        else:
            found[json.dumps(v)] += 1

    walk(value)
    return found


DOCUMENTS = [
    {},
    {"id": "287947", "title": "Shazam!", "release_date": 1553299200, "genres": ["Action", "Comedy", "Fantasy"]},
    {"a": {"b": "c", "d": "e", "f": "g"}},
    {"a": [42, {"b": "c"}, {"b": "d"}, {"b": "e"}]},
    {"a": [{"b": "c"}, {"b": "d", "c": "e"}, 35], "a.b": "f"},
    {"a": [["b", "c"], {"d": "e"}, ["f", "g"], [{"h": "i"}, {"d": "j"}], ["k", "l"]]},
    {"a": ["b", ["c", "d"], {"e": ["f", "g"]}, [{"h": "i"}, {"e": ["j", {"z": "y"}]}], ["l"], "m"]},
    {"x": {"y": {"z": [1, {"w": None}]}, "y.z": True}, "x.y.z": False, "e": {}, "n": None},
]


def test_empty_object():
    assert flatten({}) == {}


def test_no_flattening():
    doc = {
        "id": "287947",
        "title": "Shazam!",
        "release_date": 1553299200,
        "genres": ["Action", "Comedy", "Fantasy"],
    }
    assert flatten(doc) == doc


def test_flatten_object():
    assert flatten({"a": {"b": "c", "d": "e", "f": "g"}}) == {
        "a.b": ["c"],
        "a.d": ["e"],
        "a.f": ["g"],
    }


def test_flatten_deep_object():
    assert flatten({"a": {"b": {"c": 1}}}) == {"a.b.c": [1]}


def test_flatten_array_of_objects():
    doc = {"a": [{"b": "c"}, {"b": "d"}, {"b": "e"}]}
    assert flatten(doc) == {"a.b": ["c", "d", "e"]}


def test_array_keeps_scalars():
    doc = {"a": [42, {"b": "c"}, {"b": "d"}, {"b": "e"}]}
    assert flatten(doc) == {"a": [42], "a.b": ["c", "d", "e"]}


def test_collision_with_object():
    assert flatten({"a": {"b": "c"}, "a.b": "d"}) == {"a.b": ["d", "c"]}


def test_collision_order_ignores_key_order():
    assert flatten({"a.b": "d", "a": {"b": "c"}}) == {"a.b": ["d", "c"]}


def test_collision_with_array():
    doc = {"a": [{"b": "c"}, {"b": "d", "c": "e"}, 35], "a.b": "f"}
    assert flatten(doc) == {"a.b": ["f", "c", "d"], "a.c": ["e"], "a": [35]}


def test_collision_between_nested_objects():
    doc = {"a": {"b": {"c": 1}, "b.c": 2}}
    assert flatten(doc) == {"a.b.c": [2, 1]}


def test_flatten_nested_arrays():
    doc = {"a": [["b", "c"], {"d": "e"}, ["f", "g"]]}
    assert flatten(doc) == {"a": ["b", "c", "f", "g"], "a.d": ["e"]}


def test_flatten_nested_arrays_with_objects():
    doc = {
        "a": [
            ["b", "c"],
            {"d": "e"},
            ["f", "g"],
            [{"h": "i"}, {"d": "j"}],
            ["k", "l"],
        ]
    }
    assert flatten(doc) == {
        "a": ["b", "c", "f", "g", "k", "l"],
        "a.d": ["e", "j"],
        "a.h": ["i"],
    }


def test_nested_array_scalars_keep_position():
    doc = {
        "a": [
            "b",
            ["c", "d"],
            {"e": ["f", "g"]},
            [{"h": "i"}, {"e": ["j", {"z": "y"}]}],
            ["l"],
            "m",
        ]
    }
    assert flatten(doc) == {
        "a": ["b", "c", "d", "l", "m"],
        "a.e": ["f", "g", "j"],
        "a.h": ["i"],
        "a.e.z": ["y"],
    }


def test_empty_containers_disappear():
    assert flatten({"a": {}, "b": [], "c": [[], {}], "d": 1}) == {"d": 1}


def test_null_values_are_kept():
    assert flatten({"a": None, "b": {"c": None}, "d": [None]}) == {
        "a": None,
        "b.c": [None],
        "d": [None],
    }


def test_array_survivors_precede_extracted_values():
    doc = {"a": {"b": [1, {"c": 2}]}, "a.b": [0]}
    assert flatten(doc) == {"a.b": [0, 1], "a.b.c": [2]}


def test_custom_separator():
    assert flatten({"a": {"b": [{"c": 1}]}}, sep="/") == {"a/b/c": [1]}


def test_input_is_not_modified():
    doc = {"a": [{"b": "c"}, ["d"]], "e": {"f": ["g"]}}
    before = copy.deepcopy(doc)
    flatten(doc)
    assert doc == before


def test_rejects_non_object():
    with pytest.raises(TypeError):
        flatten([1, 2])


def test_merge_object_into_wraps_values():
    target = {"a.b": "x"}
    merge_object_into(target, "a", {"b": "y", "c": {"d": 1}})
    assert target == {"a.b": ["x", "y"], "a.c.d": [1]}


def test_merge_array_into_returns_survivors():
    target = {}
    survivors = merge_array_into(target, "a", [1, [2, {"b": 3}], {"b": 4}, 5])
    assert survivors == [1, 2, 5]
    assert target == {"a.b": [3, 4]}


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_scalars_are_conserved(doc):
    assert scalars(flatten(doc)) == scalars(doc)


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_result_is_flat(doc):
    assert is_flat(flatten(doc))


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_flatten_is_idempotent(doc):
    once = flatten(doc)
    assert flatten(once) == once


def test_is_flat():
    assert is_flat({"a": 1, "b": [1, "x", None]})
    assert not is_flat({"a": {"b": 1}})
    assert not is_flat({"a": [[1]]})
    assert not is_flat([1])


def test_empty_top_level_key():
    assert flatten({"": {"b": 1}}) == {".b": [1]}


def test_empty_key_does_not_collide_with_plain_key():
    assert flatten({"b": 2, "": {"b": 1}}) == {"b": 2, ".b": [1]}


def test_empty_nested_key():
    assert flatten({"a": {"": {"b": 1}}}) == {"a..b": [1]}
