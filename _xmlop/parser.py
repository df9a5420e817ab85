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
Recognition of names at a position within a larger text, as needed by tokenizers
and parsers of XML-based languages.

All functions return a :class:`Recognition` and raise a
:exc:`NameParsingError` when nothing can be recognized. They never alter any
state, so a failed attempt can be followed by another one at the same position.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, NamedTuple

from _xmlop.exceptions import NameParsingError
from _xmlop.grammar import name_pattern, ncname_pattern
from _xmlop.qname import Qname
from _xmlop.strings import NameView, NcnameView

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Final

    from _xmlop.strings import _ValidatedView


# constants & data structures


class Recognition(NamedTuple):
    value: Any
    """The recognized object."""
    remainder: str
    """The unconsumed rest of the text."""
    end: int
    """The index in the text where the remainder starts."""


_match_name: Final = re.compile(name_pattern).match
_match_ncname: Final = re.compile(ncname_pattern).match


# helpers


def _recognize(
    match: Callable[[str, int], re.Match | None],
    view_class: type[_ValidatedView],
    description: str,
    text: str,
    position: int,
) -> Any:
    if position < 0:
        raise ValueError("The position must not be negative.")

    if (result := match(text, position)) is None:
        raise NameParsingError(text, position, f"Expected {description}.")

    # the pattern is derived from the same character classes as the validator
    return view_class.from_str_unchecked(text, position, result.end())


# interface


def parse_name(text: str, position: int = 0) -> Recognition:
    """
    Recognizes an XML ``Name`` at ``position`` in ``text``. The value is a
    :class:`NameView` that refers to ``text``.

    >>> parse_name("foo:bar  ")
    Recognition(value=NameView('foo:bar'), remainder='  ', end=7)
    """
    view = _recognize(_match_name, NameView, "a name", text, position)
    end = view.span[1]
    return Recognition(view, text[end:], end)


def parse_name_string(text: str, position: int = 0) -> Recognition:
    """As :func:`parse_name`, but the value is a copy as :class:`NameString`."""
    view, remainder, end = parse_name(text, position)
    return Recognition(view.to_buffer(), remainder, end)


def parse_ncname(text: str, position: int = 0) -> Recognition:
    """
    Recognizes an ``NCName`` at ``position`` in ``text``. The value is a
    :class:`NcnameView` that refers to ``text``.

    >>> parse_ncname("foo:bar")
    Recognition(value=NcnameView('foo'), remainder=':bar', end=3)
    """
    view = _recognize(_match_ncname, NcnameView, "an NCName", text, position)
    end = view.span[1]
    return Recognition(view, text[end:], end)


def parse_ncname_string(text: str, position: int = 0) -> Recognition:
    """As :func:`parse_ncname`, but the value is a copy as :class:`NcnameString`."""
    view, remainder, end = parse_ncname(text, position)
    return Recognition(view.to_buffer(), remainder, end)


def parse_qname(text: str, position: int = 0) -> Recognition:
    """
    Recognizes a ``QName`` at ``position`` in ``text``. The value is a
    :class:`Qname`.

    An NCName that is followed by a colon is always taken as prefix. If no NCName
    follows the colon, the recognition fails rather than leaving the colon
    unconsumed.

    >>> parse_qname("foo:bar  ")
    Recognition(value=Qname(NcnameString('foo'), NcnameString('bar')), remainder='  ', end=7)
    """  # noqa: E501
    first = _recognize(_match_ncname, NcnameView, "an NCName", text, position)
    end = first.span[1]

    if text.startswith(":", end):
        local = _recognize(
            _match_ncname, NcnameView, "a local name after the colon", text, end + 1
        )
        qname = Qname.from_prefix_and_local(first, local)
        end = local.span[1]
    else:
        qname = Qname.from_local(first)

    return Recognition(qname, text[end:], end)


__all__ = (
    Recognition.__name__,
    parse_name.__name__,
    parse_name_string.__name__,
    parse_ncname.__name__,
    parse_ncname_string.__name__,
    parse_qname.__name__,
)
