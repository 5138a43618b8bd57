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
preoccupied.promoter
Namespace package segment ordering candidate versions of a dependency by
promotion level.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from .level import Level, parse_level
from .package import Candidate, CandidateLike, Package, PackageLike, candidates_from
from .policy import PromotionPolicy
from .promoter import (
    VersionPromoter, compare, filter_candidates, post_sort, sort_versions)
from .version import Version, ensure_version, is_prerelease, segments


__all__ = (
    "Level",
    "parse_level",

    "PromotionPolicy",
    "VersionPromoter",

    "Candidate",
    "CandidateLike",
    "Package",
    "PackageLike",
    "candidates_from",

    "compare",
    "filter_candidates",
    "post_sort",
    "sort_versions",

    "Version",
    "ensure_version",
    "is_prerelease",
    "segments",
)


# The end.
