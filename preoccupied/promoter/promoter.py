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
preoccupied.promoter.promoter

Ordering of a package's available versions for a resolution engine, giving
preference to the requested promotion level.

By default every candidate is returned, ordered to give preference to the
level's scope relative to the locked version. In complicated
requirement cases a resolver will by necessity promote some packages past the
requested level, or even revert them to older versions, and the ordering keeps
those options available as fallbacks.

With ``strict`` set the candidates outside the level's scope are removed
instead. That can leave a resolver reporting that no version exists when the
index does in fact hold one.

Example:

```python
promoter = VersionPromoter(level="minor")
package = Package(name="requests", locked_version="2.3.1")
ordered = promoter.sort_versions(package, candidates_from([
    "2.3.1", "2.3.5", "2.4.0", "3.0.0",
]))
assert [str(c.version) for c in ordered] == [
    "3.0.0", "2.3.5", "2.4.0", "2.3.1",
]
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import logging
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence, TypeVar

from semver import Version as SemVersion

from .level import Level, parse_level
from .package import CandidateLike, PackageLike
from .policy import PromotionPolicy
from .version import is_prerelease, segments


__all__ = (
    "VersionPromoter",
    "compare",
    "filter_candidates",
    "post_sort",
    "sort_versions",
)


logger = logging.getLogger(__name__)


C = TypeVar("C", bound=CandidateLike)


def filter_candidates(
        policy: PromotionPolicy,
        package: PackageLike,
        candidates: Sequence[C]) -> List[C]:
    """
    Keep only the candidates within the policy level's scope relative to the
    package's locked version. Without a locked version, or at the major
    level, every candidate is kept.
    """

    locked = package.locked_version
    if locked is None or policy.is_major():
        return list(candidates)

    must_match = (0,) if policy.is_minor() else (0, 1)
    locked_segs = segments(locked)

    kept = []
    for candidate in candidates:
        version = candidate.version
        segs = segments(version)
        if all(segs[i] == locked_segs[i] for i in must_match) and version >= locked:
            kept.append(candidate)
    return kept


def _segment_differs(a: SemVersion, b: SemVersion, index: int) -> bool:
    return segments(a)[index] != segments(b)[index]


def compare(
        policy: PromotionPolicy,
        package: PackageLike,
        a: CandidateLike,
        b: CandidateLike) -> int:
    """
    Pairwise ordering of two candidates. The first applicable rule decides:

    1. a prerelease sorts ahead of a final release, unless the package is
       locked and its requirement names a prerelease explicitly
    2. at the major level, ascending
    3. when either version is older than the locked version, ascending
    4. when the major segments differ, descending
    5. below the minor level, when the minor segments differ, descending
    6. otherwise ascending

    Rules 4 and 5 prefer the higher version once a boundary must be crossed
    anyway. Because the rule is chosen per pair this is not a strict weak
    ordering, and a sort over it only approximates the intended partition.
    :func:`post_sort` handles the one placement that matters.
    """

    a_ver = a.version
    b_ver = b.version
    locked = package.locked_version

    if not (locked is not None and package.prerelease_specified):
        a_pre = is_prerelease(a_ver)
        b_pre = is_prerelease(b_ver)
        if a_pre and not b_pre:
            return -1
        if b_pre and not a_pre:
            return 1

    if policy.is_major():
        return a_ver.compare(b_ver)

    if locked is not None and (a_ver < locked or b_ver < locked):
        return a_ver.compare(b_ver)

    if _segment_differs(a_ver, b_ver, 0):
        return b_ver.compare(a_ver)

    if not policy.is_minor() and _segment_differs(a_ver, b_ver, 1):
        return b_ver.compare(a_ver)

    return a_ver.compare(b_ver)


def post_sort(
        policy: PromotionPolicy,
        package: PackageLike,
        ordered: Sequence[C]) -> List[C]:
    """
    Move candidates matching the locked version to the end, unless the
    package is unlocked or the level is major. A sort cannot do this reliably
    since not every pair of elements is compared.
    """

    locked = package.locked_version
    if policy.is_major() or package.unlock or locked is None:
        return list(ordered)

    locked_str = str(locked)
    keep = []
    move = []
    for candidate in ordered:
        if str(candidate.version) == locked_str:
            move.append(candidate)
        else:
            keep.append(candidate)

    if move:
        logger.debug("Moved locked version %s to the end of %d candidates",
                     locked_str, len(ordered))

    keep.extend(move)
    return keep


def sort_versions(
        policy: PromotionPolicy,
        package: PackageLike,
        candidates: Sequence[C]) -> List[C]:
    """
    Order `candidates` for `package` according to `policy`, filtering them
    first if the policy is strict. Returns a new list.

    :param policy: The promotion level and strictness to apply
    :param package: The package being resolved
    :param candidates: The available versions of the package
    :return: The candidates in the order a resolver should try them
    """

    logger.debug("Sorting %d candidates for %s at level %s (strict=%s)",
                 len(candidates), getattr(package, "name", package),
                 policy.level, policy.strict)

    if policy.strict:
        candidates = filter_candidates(policy, package, candidates)
        logger.debug("Strict filtering kept %d candidates", len(candidates))

    result = sorted(candidates, key=cmp_to_key(
        lambda a, b: compare(policy, package, a, b)))

    return post_sort(policy, package, result)


class VersionPromoter:
    """
    Holds a :class:`PromotionPolicy` behind settable ``level`` and ``strict``
    properties. Each change replaces the policy, and each call to
    :meth:`sort_versions` works from whichever policy was current when it
    began.

    Either pass ``level`` and ``strict``, or an existing ``policy``.
    """

    def __init__(
            self,
            level: Any = None,
            strict: Optional[bool] = None,
            *,
            policy: Optional[PromotionPolicy] = None) -> None:

        if policy is None:
            policy = PromotionPolicy(
                level=Level.MAJOR if level is None else level,
                strict=bool(strict))

        elif level is not None or strict is not None:
            raise TypeError(
                "VersionPromoter accepts either a policy or level and"
                " strict settings, not both."
            )

        self._policy = policy


    @property
    def policy(self) -> PromotionPolicy:
        return self._policy


    @property
    def level(self) -> Level:
        return self._policy.level


    @level.setter
    def level(self, value: Any) -> None:
        # parse first, so a rejected value leaves the current policy alone
        level = parse_level(value)
        self._policy = self._policy.with_level(level)


    @property
    def strict(self) -> bool:
        return self._policy.strict


    @strict.setter
    def strict(self, value: bool) -> None:
        self._policy = self._policy.with_strict(value)


    def is_major(self) -> bool:
        return self._policy.is_major()


    def is_minor(self) -> bool:
        return self._policy.is_minor()


    def sort_versions(
            self,
            package: PackageLike,
            candidates: Sequence[C]) -> List[C]:
        """
        Order `candidates` for `package` using the current policy.
        """

        return sort_versions(self._policy, package, candidates)


# The end.
