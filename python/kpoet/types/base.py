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
"""Base of the type-reference family.

Every reference a generated Kotlin file can make to a type is a TypeName:
class names, parameterized generics, type variables, wildcard projections
and function types. TypeNames are immutable values:

- Two independently built TypeNames describing the same type are equal
  and hash identically.
- "Modifying" operations (adding or stripping annotations, toggling
  nullability) return a new value of the same concrete class.
- A TypeName renders itself into a CodeWriter, which owns import
  elision and indentation. The type model never inspects those.

Malformed values cannot be constructed: every structural check happens in
``__post_init__`` and raises InvariantViolationError, so rendering a value
never fails for structural reasons.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Tuple, TypeVar

if TYPE_CHECKING:
    from kpoet.codegen.writer import CodeWriter
    from kpoet.types.annotation import AnnotationSpec


_T = TypeVar("_T", bound="TypeName")


class InvariantViolationError(ValueError):
    """A type reference would break one of its structural invariants.

    Raised at construction time only. This is a programmer error (a caller
    passed a malformed bound list, an empty name, ...), never a transient
    condition, so there is nothing to retry.
    """


def check_argument(condition: bool, message: str, *args: Any) -> None:
    """Raise InvariantViolationError with ``message % args`` unless condition holds."""
    if not condition:
        raise InvariantViolationError(message % args if args else message)


@dataclass(frozen=True)
class TypeName(ABC):
    """Abstract reference to some type.

    Attributes:
        annotations: Annotations rendered before the type, in order.
            Duplicates are allowed.
    """

    annotations: Tuple["AnnotationSpec", ...] = field(default=(), kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "annotations", tuple(self.annotations))

    @property
    def is_annotated(self) -> bool:
        return bool(self.annotations)

    def with_annotations(self: _T, annotations: Iterable["AnnotationSpec"]) -> _T:
        """Return a copy whose annotations are the existing ones followed by ``annotations``."""
        return dataclasses.replace(
            self, annotations=self.annotations + tuple(annotations)
        )

    def annotated(self: _T, *annotations: "AnnotationSpec") -> _T:
        return self.with_annotations(annotations)

    def without_annotations(self: _T) -> _T:
        """Return a copy with the same structure and no annotations."""
        return dataclasses.replace(self, annotations=())

    def render(self, writer: "CodeWriter") -> "CodeWriter":
        """Write this type as Kotlin source into ``writer``.

        Annotations come first, each followed by a space, then the
        variant's own syntax. Returns ``writer`` for chaining.
        """
        for annotation in self.annotations:
            annotation.render(writer, inline=True)
            writer.emit(" ")
        self._render_core(writer)
        return writer

    @abstractmethod
    def _render_core(self, writer: "CodeWriter") -> None:
        """Write the type itself, without annotations."""
        pass

    def __str__(self) -> str:
        from kpoet.codegen.writer import CodeWriter

        return self.render(CodeWriter()).getvalue()


class NullableTypeName(TypeName):
    """Mixin for the variants that carry Kotlin's ``?`` marker.

    Concrete subclasses declare a ``nullable: bool = False`` field.
    """

    nullable: bool

    def copy_nullable(self: _T, nullable: bool) -> _T:
        return dataclasses.replace(self, nullable=nullable)

    def as_nullable(self: _T) -> _T:
        return self.copy_nullable(True)

    def as_non_null(self: _T) -> _T:
        return self.copy_nullable(False)

    def _render_nullable(self, writer: "CodeWriter") -> None:
        if self.nullable:
            writer.emit("?")
