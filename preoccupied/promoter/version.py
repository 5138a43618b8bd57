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
preoccupied.promoter.version
Semantic version value type and the segment helpers the promoter relies on.

Resolvers commonly hold plain ``semver.Version`` values already. Fields typed
as :class:`Version` accept those and rewrap them, so a candidate's or a
package's version is always this subclass and serializes to its canonical
string. The promoter itself only needs the comparison and segment behaviour
shared by both, which is why :func:`segments` and :func:`is_prerelease` take
any ``semver.Version``.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""

from typing import Any, Callable, Tuple

from semver import Version as SemVersion

from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema


__all__ = (
    "Version",
    "ensure_version",
    "is_prerelease",
    "segments",
)


def ensure_version(value: Any) -> SemVersion:
    """
    Convert supported inputs into a ``semver.Version`` instance.
    """

    if isinstance(value, Version):
        return value
    if isinstance(value, SemVersion):
        return Version(*value.to_tuple())
    if isinstance(value, str):
        return Version.parse(value.strip())
    raise TypeError(f"Unsupported version value: {value!r}")


def segments(version: SemVersion) -> Tuple[int, int, int]:
    """
    The numeric segments of a version, major first.
    """

    return (version.major, version.minor, version.patch)


def is_prerelease(version: SemVersion) -> bool:
    return bool(version.prerelease)


class Version(SemVersion):
    """
    Pydantic-compatible wrapper validating semantic version values.

    https://python-semver.readthedocs.io/en/3.0.4/advanced/combine-pydantic-and-semver.html
    """

    @classmethod
    def __get_pydantic_core_schema__(
            cls,
            _source_type: Any,
            _handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:

        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(ensure_version),
            ],
        )

        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(Version),
                    core_schema.chain_schema(
                        [
                            core_schema.is_instance_schema(SemVersion),
                            core_schema.no_info_plain_validator_function(ensure_version),
                        ],
                    ),
                    from_str_schema,
                ]
            ),
            serialization=core_schema.to_string_ser_schema(),
        )


    @classmethod
    def __get_pydantic_json_schema__(
            cls,
            _core_schema: core_schema.CoreSchema,
            handler: GetJsonSchemaHandler) -> JsonSchemaValue:

        return handler(core_schema.str_schema())


# The end.
