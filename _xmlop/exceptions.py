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

"""These are the specific xmlop exceptions."""

from __future__ import annotations

from typing import Optional


class XmlopBaseException(Exception):
    pass


class NameValidationError(XmlopBaseException, ValueError):
    """
    Raised when a string doesn't conform to the grammar of a name type. Instances
    compare equal when they're of the same kind and carry the same details.
    """

    def _key(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, NameValidationError)
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.__class__, self._key()))


class EmptyName(NameValidationError):
    """Raised when the validated string has no characters at all."""

    def __init__(self):
        super().__init__("XML name string should not be empty")

    def __reduce__(self):
        return self.__class__, ()

    def __repr__(self) -> str:
        return "EmptyName()"


class InvalidNameCharacter(NameValidationError):
    """
    Raised when the validated string contains a character that isn't allowed at its
    position.

    :param position: The offset of the offending character within the validated
                     string, counted in bytes of its UTF-8 encoding.
    :param character: The offending character.
    """

    def __init__(self, position: int, character: str):
        if position < 0:
            raise ValueError("The position must not be negative.")
        if len(character) != 1:
            raise ValueError("Exactly one character must be provided.")
        self.__position = position
        self.__character = character
        super().__init__(
            f"Invalid name character at byte position {position}: {character!r}"
        )

    def __reduce__(self):
        return self.__class__, (self.__position, self.__character)

    def __repr__(self) -> str:
        return f"InvalidNameCharacter({self.__position}, {self.__character!r})"

    def _key(self) -> tuple:
        return self.__position, self.__character

    @property
    def character(self) -> str:
        """The offending character."""
        return self.__character

    @property
    def position(self) -> int:
        """The UTF-8 byte offset of the offending character."""
        return self.__position


class NameParsingError(XmlopBaseException):
    """
    Raised when a name can't be recognized at a position of a text.

    :param text: The text that was examined.
    :param position: The index within ``text`` where the recognition failed.
    :param message: Describes what was expected at ``position``.
    """

    def __init__(
        self,
        text: Optional[str] = None,
        position: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.text = text
        self.position = position
        self.message = message

    def __str__(self):
        text, position = self.text, self.position
        assert text is not None
        assert position is not None
        assert self.message is not None

        location = f"character {position}"
        if snippet := text[position : position + 16]:
            if len(text) > position + 16:
                snippet += "…"
            location += f" (`{snippet}`)"

        if (character := self.character) is None:
            found = "the end of the text"
        else:
            found = repr(character)

        return f"Name parsing error at {location}: {self.message} Found {found}."

    @property
    def character(self) -> Optional[str]:
        """
        The character that couldn't be consumed, ``None`` when the recognition failed
        at the end of the text.
        """
        if self.text is None or self.position is None:
            return None
        if self.position >= len(self.text):
            return None
        return self.text[self.position]


__all__ = (
    EmptyName.__name__,
    InvalidNameCharacter.__name__,
    NameParsingError.__name__,
    NameValidationError.__name__,
    XmlopBaseException.__name__,
)
