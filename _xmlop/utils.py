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

import sys
from collections.abc import Iterator


class _StringMixin:
    # derived from CPython's stdlib collections.UserString, read-only parts only

    __slots__ = ()

    def __hash__(self):
        return hash(str(self))

    def __eq__(self, string):
        if isinstance(string, (str, _StringMixin)):
            return str(self) == str(string)
        return NotImplemented

    def __ne__(self, string):
        if isinstance(string, (str, _StringMixin)):
            return str(self) != str(string)
        return NotImplemented

    def __lt__(self, string):
        if isinstance(string, (str, _StringMixin)):
            return str(self) < str(string)
        return NotImplemented

    def __le__(self, string):
        if isinstance(string, (str, _StringMixin)):
            return str(self) <= str(string)
        return NotImplemented

    def __gt__(self, string):
        if isinstance(string, (str, _StringMixin)):
            return str(self) > str(string)
        return NotImplemented

    def __ge__(self, string):
        if isinstance(string, (str, _StringMixin)):
            return str(self) >= str(string)
        return NotImplemented

    def __contains__(self, char):
        return char in str(self)

    def __len__(self):
        return len(str(self))

    def __getitem__(self, index):
        return str(self)[index]

    def __iter__(self) -> Iterator[str]:
        return iter(str(self))

    def __add__(self, other):
        if isinstance(other, str):
            return str(self) + other
        return str(self) + str(other)

    def __radd__(self, other):
        if isinstance(other, str):
            return other + str(self)
        return str(other) + str(self)

    def __format__(self, format_spec):
        return format(str(self), format_spec)

    def count(self, sub, start=0, end=sys.maxsize):
        return str(self).count(sub, start, end)

    def encode(self, encoding="utf-8", errors="strict"):
        return str(self).encode(encoding, errors)

    def endswith(self, suffix, start=0, end=sys.maxsize):
        return str(self).endswith(suffix, start, end)

    def find(self, sub, start=0, end=sys.maxsize):
        return str(self).find(sub, start, end)

    def index(self, sub, start=0, end=sys.maxsize):
        return str(self).index(sub, start, end)

    def isascii(self):
        return str(self).isascii()

    def lower(self):
        return str(self).lower()

    def partition(self, sep):
        return str(self).partition(sep)

    def startswith(self, prefix, start=0, end=sys.maxsize):
        return str(self).startswith(prefix, start, end)

    def upper(self):
        return str(self).upper()


__all__: tuple[str, ...] = ()
