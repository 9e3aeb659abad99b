from __future__ import annotations

from collections.abc import Callable

import pytest

from sortby.common.enums import Direction
from sortby.common.exceptions import ValidationError
from sortby.common.grounds import Annotable, Concrete, Immutable


class Between(Concrete):
    lower: int
    upper: int = 10


class Step(Concrete):
    func: Callable
    direction: Direction = Direction.ASCENDING


class Settings(Annotable):
    flag: bool = False
    limit: int | None = None


def test_annotable_signature():
    assert Between.__argnames__ == ("lower", "upper")
    assert Between(1).upper == 10
    assert Between(1, 2) == Between(lower=1, upper=2)
    assert Between(1, 2).args == (1, 2)


def test_mandatory_arguments_precede_optional_ones():
    class Child(Between):
        step: int

    assert Child.__argnames__ == ("lower", "step", "upper")
    child = Child(1, 2)
    assert (child.lower, child.step, child.upper) == (1, 2, 10)


def test_missing_argument():
    with pytest.raises(TypeError):
        Between()


def test_validation_error():
    with pytest.raises(ValidationError, match="upper"):
        Between(1, "2")

    with pytest.raises(ValidationError, match="func"):
        Step(None)


def test_coercion_of_arguments():
    assert Step(len, "desc").direction is Direction.DESCENDING


def test_concrete_is_immutable():
    b = Between(1)
    with pytest.raises(TypeError, match="immutable"):
        b.lower = 2
    assert isinstance(b, Immutable)


def test_concrete_hash_and_equality():
    assert hash(Between(1)) == hash(Between(1, 10))
    assert Between(1) != Between(2)
    assert Between(1) != Step(len)
    assert len({Between(1), Between(1), Between(3)}) == 2


def test_concrete_uses_slots():
    b = Between(1)
    assert not hasattr(b, "__dict__")


def test_copy_with_overrides():
    b = Between(1)
    c = b.copy(upper=5)
    assert c == Between(1, 5)
    assert b == Between(1, 10)

    with pytest.raises(ValidationError):
        b.copy(upper="5")


def test_annotable_is_mutable_and_validated():
    s = Settings()
    s.flag = True
    s.limit = 3
    assert (s.flag, s.limit) == (True, 3)
    assert repr(s) == "Settings(flag=True, limit=3)"

    with pytest.raises(ValidationError):
        s.limit = "3"
    assert s.limit == 3

