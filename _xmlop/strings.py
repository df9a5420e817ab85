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
String types whose values are guaranteed to conform to a name grammar.

Each grammar is represented by a pair of types:

- a *view* that references a region of an existing string without copying it
- an immutable :class:`str` subclass that holds its own copy of the text

Both are only created by validating constructors or by the explicitly named
``*_unchecked`` constructors whose callers vouch for the validity of the text.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from _xmlop.exceptions import NameValidationError
from _xmlop.grammar import validate_name, validate_ncname
from _xmlop.options import ValidationOptions
from _xmlop.utils import _StringMixin

if TYPE_CHECKING:
    from _xmlop.typing import Self, Validator


def _verify_unchecked(validator: Validator, string: str, type_name: str):
    try:
        validator(string)
    except NameValidationError as e:
        raise AssertionError(
            f"An invalid string was passed to an unchecked constructor of {type_name}."
        ) from e


# generic bases


class _ValidatedView(_StringMixin):
    """
    The base for views on a region of a text. Subclasses are specialized with the
    ``validator`` class argument.
    """

    __slots__ = ("__end", "__start", "__text")

    _buffer_class: ClassVar[type[_ValidatedString]]
    _validator: ClassVar[Validator]

    def __init_subclass__(cls, validator: Optional[Validator] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if validator is not None:
            cls._validator = staticmethod(validator)

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None):
        if not isinstance(text, str):
            raise TypeError(f"A view can only refer to a string, not {type(text)}.")
        start, end, _ = slice(start, end).indices(len(text))
        self._validator(text[start:end])
        self.__text = text
        self.__start = start
        self.__end = end

    @classmethod
    def from_str_unchecked(
        cls, text: str, start: int = 0, end: Optional[int] = None
    ) -> Self:
        """
        Creates a view on the given text's region without validation.

        The caller must ensure that the region conforms to the grammar of the type.
        All other code relies on that, so any violation of this constraint results in
        unspecified behaviour. Enable
        :attr:`ValidationOptions.verify_unchecked` to audit the callers.
        """
        start, end, _ = slice(start, end).indices(len(text))
        if ValidationOptions.verify_unchecked:
            _verify_unchecked(cls._validator, text[start:end], cls.__name__)
        result = cls.__new__(cls)
        result.__text = text
        result.__start = start
        result.__end = end
        return result

    def __reduce__(self):
        return self.__class__, (self.__text, self.__start, self.__end)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_str()!r})"

    def __setattr__(self, name: str, value: Any):
        if hasattr(self, "_ValidatedView__end"):
            raise AttributeError(f"{self.__class__.__name__} objects are immutable.")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return self.as_str()

    def as_str(self) -> str:
        """Returns the referenced text as plain string."""
        return self.__text[self.__start : self.__end]

    @property
    def source(self) -> str:
        """The whole text that the view refers to."""
        return self.__text

    @property
    def span(self) -> tuple[int, int]:
        """The start and end index of the referenced region within :attr:`source`."""
        return self.__start, self.__end

    def to_buffer(self) -> _ValidatedString:
        """Copies the referenced text into the owning counterpart type."""
        return self._buffer_class.new_unchecked(self.as_str())


class _ValidatedString(str):
    """
    The base for immutable strings with a validated value. Subclasses are specialized
    with the ``validator`` and ``view_class`` class arguments.
    """

    __slots__ = ()

    _validator: ClassVar[Validator]
    _view_class: ClassVar[type[_ValidatedView]]

    def __init_subclass__(
        cls,
        validator: Optional[Validator] = None,
        view_class: Optional[type[_ValidatedView]] = None,
        **kwargs,
    ):
        super().__init_subclass__(**kwargs)
        if validator is not None:
            cls._validator = staticmethod(validator)
        if view_class is not None:
            cls._view_class = view_class
            view_class._buffer_class = cls

    def __new__(cls, string: str | _ValidatedView) -> Self:
        if isinstance(string, _ValidatedView):
            string = string.as_str()
        elif not isinstance(string, str):
            raise TypeError(f"Expected a string, got {type(string)}.")
        return str.__new__(cls, cls._validator(string))

    @classmethod
    def new_unchecked(cls, string: str) -> Self:
        """
        Creates an instance from the given string without validation.

        The caller must ensure that the string conforms to the grammar of the type.
        All other code relies on that, so any violation of this constraint results in
        unspecified behaviour. Enable :attr:`ValidationOptions.verify_unchecked` to
        audit the callers.
        """
        if ValidationOptions.verify_unchecked:
            _verify_unchecked(cls._validator, string, cls.__name__)
        return str.__new__(cls, string)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str.__repr__(self)})"

    def as_name_str(self) -> _ValidatedView:
        """Deprecated. Use :meth:`as_view`."""
        warnings.warn(
            "This method is deprecated. Use as_view instead.",
            category=DeprecationWarning,
            stacklevel=2,
        )
        return self.as_view()

    def as_str(self) -> str:
        """Returns the value as plain string."""
        return str.__str__(self)

    def as_view(self) -> _ValidatedView:
        """Returns a view that refers to this object's own text."""
        return self._view_class.from_str_unchecked(self)


# Name


class NameView(_ValidatedView, validator=validate_name):
    """
    Borrowed XML Name, a view on a region of a string.

    >>> NameView("foo:bar")
    NameView('foo:bar')
    >>> NameView("<foo:bar/>", 1, -2)
    NameView('foo:bar')

    See https://www.w3.org/TR/2006/REC-xml11-20060816/#NT-Name

    :param text: The referenced string.
    :param start: The index where the name starts.
    :param end: The index where the name ends, defaults to the end of ``text``.
    :raises NameValidationError: If the region isn't a valid name.
    """

    __slots__ = ()


class NameString(_ValidatedString, validator=validate_name, view_class=NameView):
    """
    Owned XML Name.

    >>> NameString("foo:bar") == "foo:bar"
    True

    See https://www.w3.org/TR/2006/REC-xml11-20060816/#NT-Name

    :raises NameValidationError: If the string isn't a valid name.
    """

    __slots__ = ()


# NCName


class NcnameView(_ValidatedView, validator=validate_ncname):
    """
    Borrowed NCName, a name without colons, as view on a region of a string.

    See https://www.w3.org/TR/REC-xml-names/#NT-NCName

    :raises NameValidationError: If the region isn't a valid NCName.
    """

    __slots__ = ()


class NcnameString(_ValidatedString, validator=validate_ncname, view_class=NcnameView):
    """
    Owned NCName, a name without colons.

    See https://www.w3.org/TR/REC-xml-names/#NT-NCName

    :raises NameValidationError: If the string isn't a valid NCName.
    """

    __slots__ = ()


__all__ = (
    NameString.__name__,
    NameView.__name__,
    NcnameString.__name__,
    NcnameView.__name__,
)
