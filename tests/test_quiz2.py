import pytest

from rustlings.lessons.quiz2 import Append, Trim, Uppercase, transformer


def test_it_works():
    output = transformer(
        [
            ("hello", Uppercase()),
            (" all roads lead to rome! ", Trim()),
            ("foo", Append(1)),
            ("bar", Append(5)),
        ]
    )
    assert output[0] == "HELLO"
    assert output[1] == "all roads lead to rome!"
    assert output[2] == "foobar"
    assert output[3] == "barbarbarbarbarbar"


def test_append_zero_times():
    assert transformer([("foo", Append(0))]) == ["foo"]


def test_empty_input():
    assert transformer([]) == []


def test_unknown_command():
    with pytest.raises(TypeError):
        transformer([("foo", "shout")])


def test_negative_append():
    with pytest.raises(ValueError):
        Append(-1)