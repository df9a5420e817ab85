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

from typing import ClassVar


class ValidationOptions:
    """
    This object's class variables are used to configure behaviour that applies to all
    name types.

    .. attention::

        Use this once to define behaviour on *application level*, e.g. in the setup of
        a test suite. Think thrice whether you want to use this facility in a library.
    """

    verify_unchecked: ClassVar[bool] = False
    """
    Whether the constructors that skip validation shall validate nonetheless. A
    violation is then reported with an :exc:`AssertionError`. This allows to audit
    the code paths that promise valid names.
    """

    @classmethod
    def reset_defaults(cls):
        """Restores the factory settings."""
        cls.verify_unchecked = False


__all__ = (ValidationOptions.__name__,)
