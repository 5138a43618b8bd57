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
preoccupied.promoter.package
Descriptions of the package being resolved and of its candidate versions.

The promoter only ever reads the attributes named by :class:`PackageLike` and
:class:`CandidateLike`, so a resolver may hand in its own objects. The pydantic
models here are the concrete forms used when no such objects exist.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Any, Iterable, List, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict
from semver import Version as SemVersion

from .version import Version


__all__ = (
    "Candidate",
    "CandidateLike",
    "Package",
    "PackageLike",
    "candidates_from",
)


class CandidateLike(Protocol):
    """
    Anything wrapping exactly one version. Other attributes are opaque.
    """

    @property
    def version(self) -> SemVersion:
        ...


class PackageLike(Protocol):
    """
    The facts about a dependency that influence candidate ordering.
    """

    @property
    def locked_version(self) -> Optional[SemVersion]:
        ...

    @property
    def unlock(self) -> bool:
        ...

    @property
    def prerelease_specified(self) -> bool:
        ...


class Candidate(BaseModel):
    """
    An available version of a package, plus whatever the resolver wants to
    carry alongside it.
    """

    model_config = ConfigDict(frozen=True)

    version: Version
    payload: Any = None


class Package(BaseModel):
    """
    A dependency under resolution.

    ``unlock`` is the caller's explicit permission to move away from
    ``locked_version``. ``prerelease_specified`` records whether the
    dependency's own requirement already names a prerelease.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    locked_version: Optional[Version] = None
    unlock: bool = False
    prerelease_specified: bool = False


def candidates_from(
        versions: Iterable[Union[str, SemVersion]],
        payload: Any = None) -> List[Candidate]:
    """
    Wrap each of `versions` as a :class:`Candidate` sharing `payload`.
    """

    return [Candidate(version=v, payload=payload) for v in versions]


# The end.
