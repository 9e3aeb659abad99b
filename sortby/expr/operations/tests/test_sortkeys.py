import operator
from types import SimpleNamespace

import pytest

import sortby.expr.operations as ops
import sortby.expr.types as ir
from sortby.common.enums import Direction
from sortby.common.exceptions import CoercionError, ValidationError


def by_age(person):
    return person.age


@pytest.mark.parametrize(
    ("element", "name", "expected"),
    [
        ({"age": 18}, "age", 18),
        (SimpleNamespace(age=18), "age", 18),
        ({"address": {"city": "Oslo"}}, "address.city", "Oslo"),
        ({"address": SimpleNamespace(city="Oslo")}, "address.city", "Oslo"),
        (SimpleNamespace(address={"city": "Oslo"}), "address.city", "Oslo"),
        (("Rich", 18), 1, 18),
        (["Rich", 18], -1, 18),
    ],
)
def test_field_extraction(element, name, expected):
    assert ops.Field(name)(element) == expected


def test_field_missing():
    with pytest.raises(KeyError):
        ops.Field("age")({"name": "Bob"})
    with pytest.raises(AttributeError):
        ops.Field("age")(SimpleNamespace(name="Bob"))
    with pytest.raises(IndexError):
        ops.Field(5)(("Bob", 9))


def test_field_name_must_be_str_or_int():
    with pytest.raises(ValidationError):
        ops.Field(1.5)


def test_sort_key_defaults():
    key = ops.SortKey(by_age)
    assert key.direction is Direction.ASCENDING
    assert key.ascending
    assert not key.descending
    assert key.name == "by_age"


def test_sort_key_direction_coercion():
    key = ops.SortKey(by_age, "desc")
    assert key.direction is Direction.DESCENDING
    assert key.descending

    with pytest.raises(ValidationError):
        ops.SortKey(by_age, "sideways")


def test_sort_key_requires_callable():
    with pytest.raises(ValidationError, match="extractor"):
        ops.SortKey(42)


@pytest.mark.parametrize(
    ("value", "extractor"),
    [
        ("age", ops.Field("age")),
        (0, ops.Field(0)),
        (by_age, by_age),
        (ops.Field("age"), ops.Field("age")),
    ],
)
def test_sort_key_coercion(value, extractor):
    key = ops.SortKey.__coerce__(value)
    assert key == ops.SortKey(extractor, Direction.ASCENDING)


def test_sort_key_coercion_keeps_or_overrides_direction():
    key = ops.SortKey(by_age, Direction.DESCENDING)
    assert ops.SortKey.__coerce__(key) is key
    assert ops.SortKey.__coerce__(key, direction=Direction.DESCENDING) is key
    assert ops.SortKey.__coerce__(key, direction=Direction.ASCENDING) == ops.SortKey(
        by_age
    )
    assert ops.SortKey.__coerce__(key.to_expr()) is key


@pytest.mark.parametrize("value", [None, 1.5, True, object()])
def test_sort_key_coercion_error(value):
    with pytest.raises(CoercionError):
        ops.SortKey.__coerce__(value)


def test_sort_key_names():
    assert ops.SortKey(ops.Field("address.city")).name == "address.city"
    assert ops.SortKey(ops.Field(2)).name == "2"
    assert ops.SortKey(len).name == "len"
    assert ops.SortKey(lambda p: p).name.endswith("<lambda>")
    assert "itemgetter" in ops.SortKey(operator.itemgetter(1)).name


def test_sort_key_equality_and_hashing():
    assert ops.SortKey(by_age) == ops.SortKey(by_age, "asc")
    assert ops.SortKey(by_age) != ops.SortKey(by_age, "desc")
    assert ops.SortKey(ops.Field("a")) == ops.SortKey(ops.Field("a"))
    assert hash(ops.SortKey(ops.Field("a"))) == hash(ops.SortKey(ops.Field("a")))


class Lookup:
    def __init__(self, mapping):
        self.mapping = mapping

    def __eq__(self, other):
        return isinstance(other, Lookup) and self.mapping == other.mapping

    def __call__(self, element):
        return self.mapping[element]


def test_sort_key_with_unhashable_extractor():
    lookup = Lookup({"a": 2, "b": 1})
    key = ops.SortKey(lookup)
    assert key == ops.SortKey(lookup)
    assert isinstance(hash(key), int)


def test_sort_key_to_expr():
    expr = ops.SortKey(by_age, "desc").to_expr()
    assert isinstance(expr, ir.SortExpr)
    assert expr.get_name() == "by_age"
    assert expr.direction is Direction.DESCENDING
    assert expr.asc().direction is Direction.ASCENDING
    assert expr.asc().desc().equals(expr)


def test_field_to_expr_is_ascending():
    expr = ops.Field("age").to_expr()
    assert expr.op() == ops.SortKey(ops.Field("age"))
