import pickle
from copy import copy

import pytest

from xmlop.exceptions import (
    EmptyName,
    InvalidNameCharacter,
    NameValidationError,
    XmlopBaseException,
)


@pytest.mark.parametrize(
    ("error", "message"),
    (
        (EmptyName(), "XML name string should not be empty"),
        (
            InvalidNameCharacter(8, '"'),
            "Invalid name character at byte position 8: '\"'",
        ),
        (
            InvalidNameCharacter(0, "1"),
            "Invalid name character at byte position 0: '1'",
        ),
        (
            InvalidNameCharacter(3, ":"),
            "Invalid name character at byte position 3: ':'",
        ),
    ),
)
def test_messages(error, message):
    assert str(error) == message


def test_hierarchy():
    for error in (EmptyName(), InvalidNameCharacter(0, "1")):
        assert isinstance(error, NameValidationError)
        assert isinstance(error, XmlopBaseException)
        assert isinstance(error, ValueError)


def test_comparison():
    assert EmptyName() == EmptyName()
    assert InvalidNameCharacter(0, "1") == InvalidNameCharacter(0, "1")
    assert InvalidNameCharacter(0, "1") != InvalidNameCharacter(1, "1")
    assert InvalidNameCharacter(0, "1") != InvalidNameCharacter(0, "2")
    assert EmptyName() != InvalidNameCharacter(0, "1")
    assert len({EmptyName(), EmptyName(), InvalidNameCharacter(0, " ")}) == 2


@pytest.mark.parametrize("error", (EmptyName(), InvalidNameCharacter(5, "/")))
def test_copying_and_pickling(error):
    assert copy(error) == error
    assert pickle.loads(pickle.dumps(error)) == error


def test_details():
    error = InvalidNameCharacter(5, "/")
    assert error.position == 5
    assert error.character == "/"
    assert repr(error) == "InvalidNameCharacter(5, '/')"
    assert repr(EmptyName()) == "EmptyName()"

    with pytest.raises(AttributeError):
        error.position = 6  # type: ignore


@pytest.mark.parametrize(("position", "character"), ((-1, "a"), (0, ""), (0, "ab")))
def test_invalid_details(position, character):
    with pytest.raises(ValueError):  # noqa: PT011
        InvalidNameCharacter(position, character)
