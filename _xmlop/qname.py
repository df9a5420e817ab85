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

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any, Optional

from _xmlop.exceptions import NameParsingError
from _xmlop.strings import NcnameString, NcnameView

if TYPE_CHECKING:
    from _xmlop.typing import NcnamePart


def _as_ncname_string(part: NcnamePart) -> NcnameString:
    if isinstance(part, NcnameString):
        return part
    elif isinstance(part, NcnameView):
        return part.to_buffer()
    else:
        raise TypeError(
            "The parts of a qualified name must be NcnameString or NcnameView "
            f"instances, got {type(part)}."
        )


@total_ordering
class Qname:
    """
    A qualified name that consists of an optional prefix and a local part.

    As the parts are already validated names, composing them can't fail. Instances are
    immutable.

    >>> str(Qname(NcnameString("xlink"), NcnameString("href")))
    'xlink:href'

    See https://www.w3.org/TR/REC-xml-names/#NT-QName

    :param prefix: The prefix or :obj:`None`.
    :param local: The local part.
    """

    __slots__ = ("__local", "__prefix")

    def __init__(self, prefix: Optional[NcnamePart], local: NcnamePart):
        self.__prefix: Optional[NcnameString] = (
            None if prefix is None else _as_ncname_string(prefix)
        )
        self.__local: NcnameString = _as_ncname_string(local)

    @classmethod
    def from_local(cls, local: NcnamePart) -> Qname:
        """Creates a qualified name without prefix."""
        return cls(None, local)

    @classmethod
    def from_prefix_and_local(cls, prefix: NcnamePart, local: NcnamePart) -> Qname:
        """Creates a qualified name with a prefix."""
        return cls(prefix, local)

    @classmethod
    def parse(cls, text: str) -> Qname:
        """
        Parses a string that consists of nothing but a qualified name.

        :raises NameParsingError: If the string isn't a qualified name.
        """
        from _xmlop.parser import parse_qname

        qname, remainder, end = parse_qname(text)
        if remainder:
            raise NameParsingError(text, end, "Unexpected trailing characters.")
        return qname

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Qname):
            return NotImplemented
        return self.__key() == other.__key()

    def __hash__(self) -> int:
        return hash(self.__key())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Qname):
            return NotImplemented
        return self.__key() < other.__key()

    def __reduce__(self):
        return self.__class__, (self.__prefix, self.__local)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__prefix!r}, {self.__local!r})"

    def __setattr__(self, name: str, value: Any):
        if hasattr(self, "_Qname__local"):
            raise AttributeError("Qname objects are immutable.")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        if self.__prefix is None:
            return self.__local.as_str()
        else:
            return f"{self.__prefix}:{self.__local}"

    def __key(self) -> tuple[tuple[str, ...], str]:
        # an absent prefix sorts before any present one
        prefix = () if self.__prefix is None else (self.__prefix.as_str(),)
        return prefix, self.__local.as_str()

    def deconstruct(self) -> tuple[Optional[NcnameString], NcnameString]:
        """Returns the prefix, which may be :obj:`None`, and the local part."""
        return self.__prefix, self.__local

    @property
    def local(self) -> NcnameView:
        """The local part."""
        return self.__local.as_view()

    @property
    def prefix(self) -> Optional[NcnameView]:
        """The prefix, :obj:`None` if there's none."""
        return None if self.__prefix is None else self.__prefix.as_view()


__all__ = (Qname.__name__,)
