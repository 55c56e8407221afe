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
"""Function type references: ``(Int, String) -> Boolean``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

from kpoet.types.base import NullableTypeName, TypeName, check_argument
from kpoet.types.class_name import UNIT
from kpoet.types.wildcard import WildcardTypeName

if TYPE_CHECKING:
    from kpoet.codegen.writer import CodeWriter


@dataclass(frozen=True)
class LambdaTypeName(NullableTypeName):
    """A Kotlin function type, optionally with a receiver.

    Attributes:
        parameters: Parameter types in order
        return_type: The result type, ``Unit`` by default
        receiver: Receiver type for ``T.() -> R`` literals
        suspending: Whether the type is ``suspend``
        nullable: Whether the reference is ``((...) -> R)?``
    """

    parameters: Tuple[TypeName, ...] = ()
    return_type: TypeName = field(default=UNIT)
    receiver: Optional[TypeName] = None
    suspending: bool = False
    nullable: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "parameters", tuple(self.parameters))
        for t in self.parameters + (self.return_type,):
            check_argument(
                not isinstance(t, WildcardTypeName),
                "lambda types cannot use projections: %s", t,
            )

    @classmethod
    def get(
        cls,
        *parameters: TypeName,
        returns: TypeName = UNIT,
        receiver: Optional[TypeName] = None,
    ) -> "LambdaTypeName":
        return cls(parameters, returns, receiver)

    def _render_core(self, writer: "CodeWriter") -> None:
        if self.nullable:
            writer.emit("(")
        if self.suspending:
            writer.emit("suspend ")
        if self.receiver is not None:
            # A function-typed receiver needs its own parentheses
            if isinstance(self.receiver, LambdaTypeName) and not self.receiver.nullable:
                writer.emit("(%T).", self.receiver)
            else:
                writer.emit("%T.", self.receiver)
        writer.emit("(")
        for i, parameter in enumerate(self.parameters):
            if i > 0:
                writer.emit(", ")
            writer.emit("%T", parameter)
        writer.emit(") -> %T", self.return_type)
        if self.nullable:
            writer.emit(")")
        self._render_nullable(writer)
