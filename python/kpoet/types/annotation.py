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
"""Annotations attached to type references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

from kpoet.types.base import check_argument

if TYPE_CHECKING:
    from kpoet.codegen.writer import CodeWriter
    from kpoet.types.class_name import ClassName


@dataclass(frozen=True)
class AnnotationSpec:
    """An annotation such as ``@Suppress("UNCHECKED_CAST")``.

    Attributes:
        type_name: The annotation class
        members: Member code, already formatted (e.g. ``"\\"unused\\""``,
            ``"level = DeprecationLevel.ERROR"``)
        use_site_target: Optional Kotlin use-site target (``field``,
            ``get``, ``param``, ...)
    """

    type_name: "ClassName"
    members: Tuple[str, ...] = field(default=())
    use_site_target: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))
        check_argument(
            not self.type_name.nullable,
            "annotation type cannot be nullable: %s", self.type_name,
        )

    @classmethod
    def get(cls, type_name: "ClassName", *members: str) -> "AnnotationSpec":
        return cls(type_name, members)

    def with_use_site_target(self, target: Optional[str]) -> "AnnotationSpec":
        return AnnotationSpec(self.type_name, self.members, target)

    def render(self, writer: "CodeWriter", inline: bool = True) -> "CodeWriter":
        """Emit ``@[target:]Type[(members)]``.

        Inline annotations keep their members on one line; otherwise each
        member goes on its own indented line.
        """
        writer.emit("@")
        if self.use_site_target:
            writer.emit("%L:", self.use_site_target)
        writer.emit("%T", self.type_name)
        if not self.members:
            return writer
        if inline or len(self.members) == 1:
            writer.emit("(%L)", ", ".join(self.members))
            return writer
        writer.emit("(\n%>")
        for i, member in enumerate(self.members):
            writer.emit("%L", member)
            writer.emit(",\n" if i < len(self.members) - 1 else "\n")
        writer.emit("%<)")
        return writer

    def __str__(self) -> str:
        from kpoet.codegen.writer import CodeWriter

        return self.render(CodeWriter()).getvalue()
