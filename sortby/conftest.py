from __future__ import annotations

from dataclasses import dataclass

import pytest

import sortby


@dataclass(frozen=True)
class Person:
    name: str
    age: int


@pytest.fixture
def people():
    return [
        Person(name="Rich", age=18),
        Person(name="Bob", age=9),
        Person(name="Marc", age=21),
        Person(name="Alice", age=18),
    ]


@pytest.fixture
def records():
    return [
        {"name": "Rich", "age": 18, "address": {"city": "Oslo"}},
        {"name": "Bob", "age": 9, "address": {"city": "Bergen"}},
        {"name": "Marc", "age": 21, "address": {"city": "Alta"}},
        {"name": "Alice", "age": 18, "address": {"city": "Bergen"}},
    ]


@pytest.fixture(params=["keys", "compare"])
def strategy(request):
    with sortby.options._with_temporary({"strategy": request.param}):
        yield sortby.options.strategy
