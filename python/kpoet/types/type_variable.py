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
"""Type variables, at use sites and in declarations.

A use site (``List<T>``) renders just the name. A declaration
(``fun <T : Comparable<T>> sort()``) additionally renders variance,
``reified`` and the first bound; further bounds belong in a ``where``
clause. Which form to use is the caller's decision, so the two are
separate methods.

Bounds are deliberately left out of equality and hashing. ``T`` at a use
site is the same reference however its declaration is bounded, and a
bound that mentions the variable itself (``T : Comparable<T>``) would
otherwise make comparison recursive.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from kpoet.types.base import NullableTypeName, TypeName, check_argument

if TYPE_CHECKING:
    from kpoet.codegen.writer import CodeWriter


class Variance(Enum):
    """Declaration-site variance of a type parameter."""

    IN = "in"    # Contravariant, consumer position
    OUT = "out"  # Covariant, producer position

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TypeVariableName(NullableTypeName):
    """A type variable such as ``T``.

    Attributes:
        name: The variable name
        bounds: Upper bounds, kept as given. An explicit ``Any`` bound means
            a non-null ``T : Any``
        variance: Declaration-site variance, None when invariant
        reified: Whether the declaration is ``reified``
        nullable: Whether the use site is ``T?``
    """

    name: str
    bounds: Tuple[TypeName, ...] = field(default=(), compare=False)
    variance: Optional[Variance] = None
    reified: bool = False
    nullable: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        check_argument(bool(self.name), "type variable name is empty")
        object.__setattr__(self, "bounds", tuple(self.bounds))

    @classmethod
    def get(
        cls,
        name: str,
        *bounds: TypeName,
        variance: Optional[Variance] = None,
    ) -> "TypeVariableName":
        return cls(name, bounds, variance)

    def with_bounds(self, *bounds: TypeName) -> "TypeVariableName":
        """Return a copy with ``bounds`` appended to the existing ones."""
        return dataclasses.replace(self, bounds=self.bounds + bounds)

    def with_variance(self, variance: Optional[Variance]) -> "TypeVariableName":
        return dataclasses.replace(self, variance=variance)

    def with_reified(self, reified: bool = True) -> "TypeVariableName":
        return dataclasses.replace(self, reified=reified)

    def where_bounds(self) -> Iterable[TypeName]:
        """Bounds that a declaration has to move into a ``where`` clause."""
        return self.bounds[1:]

    def _render_core(self, writer: "CodeWriter") -> None:
        writer.emit("%L", self.name)
        self._render_nullable(writer)

    def render_declaration(self, writer: "CodeWriter") -> "CodeWriter":
        """Emit ``[reified ][in |out ]Name[ : FirstBound]``."""
        for annotation in self.annotations:
            annotation.render(writer, inline=True)
            writer.emit(" ")
        if self.reified:
            writer.emit("reified ")
        if self.variance is not None:
            writer.emit("%L ", self.variance.value)
        writer.emit("%L", self.name)
        if self.bounds:
            writer.emit(" : %T", self.bounds[0])
        return writer
