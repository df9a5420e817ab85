# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Character classes and validators for the XML 1.1 ``Name`` production and the
``NCName`` production of *Namespaces in XML*.

See https://www.w3.org/TR/2006/REC-xml11-20060816/#NT-Name and
https://www.w3.org/TR/REC-xml-names/#NT-NCName
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from _xmlop.exceptions import EmptyName, InvalidNameCharacter

if TYPE_CHECKING:
    from _xmlop.typing import StringLike


# constants

# https://www.w3.org/TR/2006/REC-xml11-20060816/#NT-NameStartChar
ncname_start_characters: Final = (
    "A-Z_a-z"
    r"\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u02ff\u0370-\u037d\u037f-\u1fff"
    r"\u200c-\u200d\u2070-\u218f\u2c00-\u2fef"
    r"\u3001-\ud7ff"
    r"\uf900-\ufdcf\ufdf0-\ufffd"
    r"\U00010000-\U000effff"
)
name_start_characters: Final = ":" + ncname_start_characters

# https://www.w3.org/TR/2006/REC-xml11-20060816/#NT-NameChar
_additional_name_characters: Final = r"\.0-9\u00b7\u0300-\u036f\u203f-\u2040-"
ncname_characters: Final = ncname_start_characters + _additional_name_characters
name_characters: Final = name_start_characters + _additional_name_characters

name_pattern: Final = f"[{name_start_characters}][{name_characters}]*"
ncname_pattern: Final = f"[{ncname_start_characters}][{ncname_characters}]*"
# https://www.w3.org/TR/REC-xml-names/#NT-QName
qname_pattern: Final = f"(?:{ncname_pattern}:)?{ncname_pattern}"


# functions

_match_name_start_character: Final = re.compile(f"[{name_start_characters}]").fullmatch
_match_name_character: Final = re.compile(f"[{name_characters}]").fullmatch

_match_name: Final = re.compile(name_pattern).match
_is_xml_name: Final = re.compile(name_pattern).fullmatch


def is_name_start_char(character: str) -> bool:
    """
    Checks whether the given character is a ``NameStartChar``.

    >>> is_name_start_char(":")
    True
    >>> is_name_start_char("1")
    False
    """
    return _match_name_start_character(character) is not None


def is_name_char(character: str) -> bool:
    """
    Checks whether the given character is a ``NameChar``.

    >>> is_name_char("1")
    True
    >>> is_name_char(" ")
    False
    """
    return _match_name_character(character) is not None


def is_ncname_start_char(character: str) -> bool:
    """Checks whether the given character may start an ``NCName``."""
    return character != ":" and is_name_start_char(character)


def is_ncname_char(character: str) -> bool:
    """Checks whether the given character may continue an ``NCName``."""
    return character != ":" and is_name_char(character)


def is_name(candidate: object) -> bool:
    """Tests whether ``str(candidate)`` is an XML ``Name``."""
    return _is_xml_name(str(candidate)) is not None


def is_ncname(candidate: object) -> bool:
    """Tests whether ``str(candidate)`` is an ``NCName``."""
    string = str(candidate)
    return ":" not in string and _is_xml_name(string) is not None


def _byte_position(string: str, index: int) -> int:
    return len(string[:index].encode("utf-8", "surrogatepass"))


def _validate_name_string(string: str):
    if not string:
        raise EmptyName

    if (match := _match_name(string)) is None:
        raise InvalidNameCharacter(0, string[0])

    if (end := match.end()) < len(string):
        raise InvalidNameCharacter(_byte_position(string, end), string[end])


def validate_name(candidate: StringLike) -> StringLike:
    """
    Validates that ``str(candidate)`` is an XML ``Name`` and returns ``candidate``
    unchanged.

    :param candidate: A string or any other object that is cast to one for the test.
    :return: The very same object that was passed.
    :raises EmptyName: If the string is empty.
    :raises InvalidNameCharacter: For the first character that isn't allowed at its
                                  position.

    >>> validate_name("foo:bar")
    'foo:bar'
    >>> validate_name("1abc")
    Traceback (most recent call last):
    ...
    _xmlop.exceptions.InvalidNameCharacter: Invalid name character at byte position 0: '1'
    """  # noqa: E501
    _validate_name_string(str(candidate))
    return candidate


def validate_ncname(candidate: StringLike) -> StringLike:
    """
    Validates that ``str(candidate)`` is an ``NCName`` and returns ``candidate``
    unchanged.

    The string is validated as ``Name`` first, hence any character that isn't
    allowed in names is reported before a colon that may precede it.

    :raises EmptyName: If the string is empty.
    :raises InvalidNameCharacter: For the first offending character.

    >>> validate_ncname("foo:bar")
    Traceback (most recent call last):
    ...
    _xmlop.exceptions.InvalidNameCharacter: Invalid name character at byte position 3: ':'
    """  # noqa: E501
    string = str(candidate)
    _validate_name_string(string)
    if (index := string.find(":")) != -1:
        raise InvalidNameCharacter(_byte_position(string, index), ":")
    return candidate


__all__ = (
    "name_characters",
    "name_pattern",
    "name_start_characters",
    "ncname_characters",
    "ncname_pattern",
    "ncname_start_characters",
    "qname_pattern",
    is_name.__name__,
    is_name_char.__name__,
    is_name_start_char.__name__,
    is_ncname.__name__,
    is_ncname_char.__name__,
    is_ncname_start_char.__name__,
    validate_name.__name__,
    validate_ncname.__name__,
)
