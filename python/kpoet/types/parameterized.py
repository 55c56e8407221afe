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
"""Parameterized (generic) type references such as ``Map<String, out Number>``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from kpoet.types.base import NullableTypeName, TypeName, check_argument
from kpoet.types.class_name import ClassName

if TYPE_CHECKING:
    from kpoet.codegen.writer import CodeWriter


@dataclass(frozen=True)
class ParameterizedTypeName(NullableTypeName):
    """A raw class applied to one or more type arguments.

    Attributes:
        raw_type: The generic class, never nullable itself
        type_arguments: The arguments, rendered in order (may include
            wildcards and type variables)
        nullable: Whether the whole reference is ``Raw<...>?``
    """

    raw_type: ClassName
    type_arguments: Tuple[TypeName, ...]
    nullable: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "type_arguments", tuple(self.type_arguments))
        check_argument(
            isinstance(self.raw_type, ClassName),
            "raw type must be a ClassName: %r", self.raw_type,
        )
        check_argument(
            not self.raw_type.nullable and not self.raw_type.annotations,
            "raw type must be a plain, non-null class: %s", self.raw_type,
        )
        check_argument(
            len(self.type_arguments) > 0,
            "no type arguments: %s", self.raw_type.canonical_name,
        )
        for argument in self.type_arguments:
            check_argument(
                isinstance(argument, TypeName),
                "type argument is not a TypeName: %r", argument,
            )

    @classmethod
    def get(cls, raw_type: ClassName, *type_arguments: TypeName) -> "ParameterizedTypeName":
        return cls(raw_type, type_arguments)

    def plus_parameter(self, type_argument: TypeName) -> "ParameterizedTypeName":
        return ParameterizedTypeName(
            self.raw_type,
            self.type_arguments + (type_argument,),
            self.nullable,
            annotations=self.annotations,
        )

    def _render_core(self, writer: "CodeWriter") -> None:
        writer.emit("%T<", self.raw_type)
        for i, argument in enumerate(self.type_arguments):
            if i > 0:
                writer.emit(", ")
            writer.emit("%T", argument)
        writer.emit(">")
        self._render_nullable(writer)
