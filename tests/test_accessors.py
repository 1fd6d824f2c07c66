import pytest

from table_tree_converter.accessors import get_value_by_path, set_value_by_path
from table_tree_converter.paths import parse_header
from table_tree_converter.values import EmptyValuePolicy


def test_plain_and_nested_writes():
    record = {}
    set_value_by_path(record, "name", "Kim")
    set_value_by_path(record, "address.city", "Seoul")
    set_value_by_path(record, "address.zip", "04524")
    assert record == {"name": "Kim", "address": {"city": "Seoul", "zip": "04524"}}


@pytest.mark.parametrize("policy,expected", [
    (EmptyValuePolicy.NULL, {"field": None}),
    (EmptyValuePolicy.EMPTY, {"field": ""}),
    (EmptyValuePolicy.OMIT, {}),
    ("omit", {}),
])
def test_empty_value_policy(policy, expected):
    record = {}
    set_value_by_path(record, "field", "", policy)
    assert record == expected


def test_missing_cell_counts_as_blank():
    record = {}
    set_value_by_path(record, "field", None, EmptyValuePolicy.EMPTY)
    assert record == {"field": ""}


def test_scalar_array_appends():
    record = {}
    set_value_by_path(record, "hobby[]", "reading")
    set_value_by_path(record, "hobby[]", "hiking")
    assert record == {"hobby": ["reading", "hiking"]}


def test_scalar_array_keeps_blank_as_element():
    record = {}
    set_value_by_path(record, "hobby[]", "", EmptyValuePolicy.NULL)
    assert record == {"hobby": [None]}


def test_object_array_fills_one_element_across_fields():
    record = {}
    set_value_by_path(record, "family[]name", "Lee")
    set_value_by_path(record, "family[]age", "60")
    assert record == {"family": [{"name": "Lee", "age": "60"}]}


def test_object_array_starts_new_element_when_field_is_set():
    record = {}
    for header, value in [
        ("family[]name", "Lee"),
        ("family[]age", "60"),
        ("family[]name", "Park"),
        ("family[]age", "58"),
    ]:
        set_value_by_path(record, header, value)
    assert record == {"family": [{"name": "Lee", "age": "60"}, {"name": "Park", "age": "58"}]}


def test_null_counts_as_populated_field():
    record = {}
    set_value_by_path(record, "family[]name", "", EmptyValuePolicy.NULL)
    set_value_by_path(record, "family[]name", "Park", EmptyValuePolicy.NULL)
    assert record == {"family": [{"name": None}, {"name": "Park"}]}


def test_omit_creates_no_container():
    record = {}
    set_value_by_path(record, "family[]name", "", EmptyValuePolicy.OMIT)
    set_value_by_path(record, "address.city", "", EmptyValuePolicy.OMIT)
    set_value_by_path(record, "hobby[]", "", EmptyValuePolicy.OMIT)
    assert record == {}


def test_nested_object_inside_array_element():
    record = {}
    set_value_by_path(record, "orders[].item.name", "pen")
    set_value_by_path(record, "orders[].item.price", "3")
    set_value_by_path(record, "orders[].item.name", "ink")
    assert record == {
        "orders": [
            {"item": {"name": "pen", "price": "3"}},
            {"item": {"name": "ink"}},
        ]
    }


def test_conflicting_shape_is_replaced():
    record = {"a": "scalar"}
    set_value_by_path(record, "a.b", "x")
    assert record == {"a": {"b": "x"}}

    record = {"tags": "scalar"}
    set_value_by_path(record, "tags[]", "x")
    assert record == {"tags": ["x"]}


def test_empty_path_is_ignored():
    record = {}
    set_value_by_path(record, "[]", "value")
    assert record == {}


def test_accepts_parsed_path():
    record = {}
    set_value_by_path(record, parse_header("XX.name"), "Choi")
    assert record == {"XX": [{"name": "Choi"}]}


def test_returns_same_record():
    record = {}
    assert set_value_by_path(record, "a", "1") is record


def test_get_value_by_path():
    data = {"address": {"city": "Seoul"}, "hobby": ["a", "b"], "family": [{"name": "Lee"}]}
    assert get_value_by_path(data, "address.city") == "Seoul"
    assert get_value_by_path(data, "hobby[]") == ["a", "b"]
    assert get_value_by_path(data, "family[]name") == [{"name": "Lee"}]
    assert get_value_by_path(data, "address.zip") is None
    assert get_value_by_path(data, "address.city.more") is None
    assert get_value_by_path(data, "") is None
