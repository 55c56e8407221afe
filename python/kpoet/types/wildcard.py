# Copyright Rand Arete @ Ananke 2025
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Wildcard (use-site variance) type references.

Kotlin spells the three shapes of a wildcard as projections:

    WildcardTypeName.subtype_of(CHAR_SEQUENCE)   ->  out CharSequence
    WildcardTypeName.supertype_of(STRING)        ->  in String
    WildcardTypeName.subtype_of(ANY)             ->  *

Structurally a wildcard always has exactly one upper bound; the
unconstrained star projection is the one whose upper bound is ``Any``.
A lower bound, when present, wins over the upper bound when rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Tuple

from kpoet.types.base import TypeName, check_argument
from kpoet.types.class_name import ANY

if TYPE_CHECKING:
    from kpoet.codegen.writer import CodeWriter


@dataclass(frozen=True)
class WildcardTypeName(TypeName):
    """An unknown type constrained by an upper or a lower bound.

    Prefer the ``subtype_of`` and ``supertype_of`` factories; direct
    construction is for adapters that already hold bound lists.

    Attributes:
        upper_bounds: Exactly one bound the unknown type is a subtype of
        lower_bounds: Zero or one bound the unknown type is a supertype of

    Raises:
        InvariantViolationError: If there is not exactly one upper bound,
            more than one lower bound, or a bound is itself a wildcard
    """

    upper_bounds: Tuple[TypeName, ...]
    lower_bounds: Tuple[TypeName, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "upper_bounds", tuple(self.upper_bounds))
        object.__setattr__(self, "lower_bounds", tuple(self.lower_bounds))

        check_argument(
            len(self.upper_bounds) == 1,
            "unexpected extends bounds: %s", list(self.upper_bounds),
        )
        check_argument(
            len(self.lower_bounds) <= 1,
            "unexpected super bounds: %s", list(self.lower_bounds),
        )
        for bound in self.upper_bounds + self.lower_bounds:
            check_argument(
                isinstance(bound, TypeName),
                "wildcard bound is not a TypeName: %r", bound,
            )
            check_argument(
                not isinstance(bound, WildcardTypeName),
                "wildcard bound cannot be a wildcard: %s", bound,
            )

    @classmethod
    def subtype_of(cls, upper_bound: Any) -> "WildcardTypeName":
        """Return a wildcard for an unknown subtype of ``upper_bound``.

        ``subtype_of(CHAR_SEQUENCE)`` renders ``out CharSequence``;
        ``subtype_of(ANY)`` is the star projection ``*``. Python runtime
        types are accepted and converted first.
        """
        return cls((_as_type_name(upper_bound),), ())

    @classmethod
    def supertype_of(cls, lower_bound: Any) -> "WildcardTypeName":
        """Return a wildcard for an unknown supertype of ``lower_bound``.

        ``supertype_of(STRING)`` renders ``in String``.
        """
        return cls((ANY,), (_as_type_name(lower_bound),))

    @property
    def is_star(self) -> bool:
        return not self.lower_bounds and self.upper_bounds[0] == ANY

    def _render_core(self, writer: "CodeWriter") -> None:
        if len(self.lower_bounds) == 1:
            writer.emit("in %T", self.lower_bounds[0])
        elif self.upper_bounds[0] == ANY:
            writer.emit("*")
        else:
            writer.emit("out %T", self.upper_bounds[0])


def _as_type_name(value: Any) -> TypeName:
    if isinstance(value, TypeName):
        return value
    from kpoet.reflect.runtime import type_name_of

    return type_name_of(value)


STAR = WildcardTypeName.subtype_of(ANY)
