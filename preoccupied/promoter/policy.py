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
preoccupied.promoter.policy
Immutable promotion policy configuration.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .level import Level, parse_level


__all__ = (
    "PromotionPolicy",
)


class PromotionPolicy(BaseModel):
    """
    The requested promotion level and whether out-of-level candidates are
    dropped entirely (``strict``) or merely sorted last.

    Instances are frozen. Use :meth:`with_level` and :meth:`with_strict` to
    derive a changed policy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Level = Level.MAJOR
    strict: bool = False


    @field_validator("level", mode="before")
    @classmethod
    def _validate_level(cls, value: Any) -> Level:
        return parse_level(value)


    def with_level(self, level: Any) -> "PromotionPolicy":
        """
        A copy of this policy at `level`.

        :raises ValueError: if level is not one of major, minor, or patch
        """

        return self.model_copy(update={"level": parse_level(level)})


    def with_strict(self, strict: bool) -> "PromotionPolicy":
        return self.model_copy(update={"strict": strict})


    def is_major(self) -> bool:
        return self.level is Level.MAJOR


    def is_minor(self) -> bool:
        return self.level is Level.MINOR


    def is_patch(self) -> bool:
        return self.level is Level.PATCH


# The end.
