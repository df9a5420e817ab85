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
Validated string types for the lexical name productions of XML: ``Name``,
``NCName`` and ``QName``.
"""

from __future__ import annotations

from _xmlop.exceptions import (
    EmptyName,
    InvalidNameCharacter,
    NameParsingError,
    NameValidationError,
)
from _xmlop.grammar import (
    is_name,
    is_name_char,
    is_name_start_char,
    is_ncname,
    is_ncname_char,
    is_ncname_start_char,
    validate_name,
    validate_ncname,
)
from _xmlop.options import ValidationOptions
from _xmlop.parser import parse_name, parse_ncname, parse_qname
from _xmlop.qname import Qname
from _xmlop.strings import NameString, NameView, NcnameString, NcnameView


__all__ = (
    EmptyName.__name__,
    InvalidNameCharacter.__name__,
    NameParsingError.__name__,
    NameString.__name__,
    NameValidationError.__name__,
    NameView.__name__,
    NcnameString.__name__,
    NcnameView.__name__,
    Qname.__name__,
    ValidationOptions.__name__,
    is_name.__name__,
    is_name_char.__name__,
    is_name_start_char.__name__,
    is_ncname.__name__,
    is_ncname_char.__name__,
    is_ncname_start_char.__name__,
    parse_name.__name__,
    parse_ncname.__name__,
    parse_qname.__name__,
    validate_name.__name__,
    validate_ncname.__name__,
)
