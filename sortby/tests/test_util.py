import functools

import pytest

import sortby
from sortby import util


def test_log_is_silent_unless_verbose(capsys):
    util.log("hidden")
    assert capsys.readouterr().out == ""


def test_log_prints_by_default(capsys):
    with sortby.options._with_temporary({"verbose": True}):
        util.log("shown")
    assert capsys.readouterr().out == "shown\n"


def test_log_uses_verbose_log():
    messages = []
    with sortby.options._with_temporary({"verbose": True, "verbose_log": messages.append}):
        util.log("captured")
    assert messages == ["captured"]


def key(x):
    return x


@pytest.mark.parametrize(
    ("obj", "expected"),
    [
        (key, "key"),
        (len, "len"),
        (str.lower, "str.lower"),
        (functools.partial(key), "functools.partial(<function key"),
    ],
)
def test_describe(obj, expected):
    assert util.describe(obj).startswith(expected)
