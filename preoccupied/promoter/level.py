# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this library; if not, see <http://www.gnu.org/licenses/>.

"""
preoccupied.promoter.level
Promotion levels describing how far a locked dependency may move.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from enum import Enum
from typing import Any


__all__ = (
    "Level",
    "parse_level",
)


class Level(str, Enum):
    """
    How aggressively a dependency may be promoted away from its locked
    version.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


    def __str__(self) -> str:
        return self.value


def parse_level(value: Any) -> Level:
    """
    Resolve `value` into a :class:`Level`. Strings are matched without regard
    to case, and a symbol-like leading colon (eg. ``":minor"``) is accepted.

    :param value: A Level or the name of one
    :raises ValueError: if value does not name one of major, minor, or patch
    """

    if isinstance(value, Level):
        return value

    if isinstance(value, str):
        name = value.lower()
        if name.startswith(":"):
            name = name[1:]
        for level in Level:
            if level.value == name:
                return level

    raise ValueError(
        f"Unexpected level {value!r}. Must be major, minor or patch"
    )


# The end.
