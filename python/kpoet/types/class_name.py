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
"""Named (class) type references and the Kotlin built-in names.

A ClassName is a package plus one or more simple names, outermost first:
``ClassName("kotlin.collections", ("Map", "Entry"))`` is
``kotlin.collections.Map.Entry``. Whether it renders as the simple or the
qualified spelling is the CodeWriter's decision.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from kpoet.types.base import (
    InvariantViolationError,
    NullableTypeName,
    check_argument,
)

if TYPE_CHECKING:
    from kpoet.codegen.writer import CodeWriter
    from kpoet.types.base import TypeName
    from kpoet.types.parameterized import ParameterizedTypeName


_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$|^`[^`\n]+`$")


@dataclass(frozen=True)
class ClassName(NullableTypeName):
    """A fully-qualified class, interface or object name.

    Attributes:
        package_name: Dotted package, empty for the default package
        simple_names: Simple names from the top-level class inwards
        nullable: Whether the reference is ``T?``
    """

    package_name: str
    simple_names: Tuple[str, ...]
    nullable: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "simple_names", tuple(self.simple_names))
        check_argument(
            len(self.simple_names) > 0,
            "class name %r has no simple names", self.package_name,
        )
        for name in self.simple_names:
            check_argument(
                bool(_IDENTIFIER.match(name)), "not a valid simple name: %r", name
            )

    @classmethod
    def get(cls, package_name: str, simple_name: str, *nested: str) -> "ClassName":
        return cls(package_name, (simple_name,) + nested)

    @classmethod
    def best_guess(cls, name: str) -> "ClassName":
        """Guess the split of a dotted name, treating capitalized parts as classes.

        ``best_guess("kotlin.collections.Map.Entry")`` yields package
        ``kotlin.collections`` and simple names ``("Map", "Entry")``.
        """
        parts = name.split(".")
        for i, part in enumerate(parts):
            if part[:1].isupper():
                return cls(".".join(parts[:i]), tuple(parts[i:]))
            check_argument(
                bool(part) and part[:1].islower(),
                "couldn't make a guess for %s", name,
            )
        raise InvariantViolationError(f"couldn't make a guess for {name}")

    @property
    def simple_name(self) -> str:
        return self.simple_names[-1]

    @property
    def canonical_name(self) -> str:
        names = ".".join(self.simple_names)
        return f"{self.package_name}.{names}" if self.package_name else names

    def enclosing_class_name(self) -> "ClassName | None":
        if len(self.simple_names) == 1:
            return None
        return ClassName(self.package_name, self.simple_names[:-1])

    def top_level_class_name(self) -> "ClassName":
        return ClassName(self.package_name, self.simple_names[:1])

    def nested_class(self, name: str) -> "ClassName":
        return ClassName(self.package_name, self.simple_names + (name,))

    def peer_class(self, name: str) -> "ClassName":
        return ClassName(self.package_name, self.simple_names[:-1] + (name,))

    def parameterized_by(self, *type_arguments: "TypeName") -> "ParameterizedTypeName":
        from kpoet.types.parameterized import ParameterizedTypeName

        return ParameterizedTypeName.get(self, *type_arguments)

    def _render_core(self, writer: "CodeWriter") -> None:
        writer.emit("%L", writer.lookup_name(self))
        self._render_nullable(writer)


# =============================================================================
# Kotlin built-ins
# =============================================================================

# Top type: the root of Kotlin's class hierarchy
ANY = ClassName("kotlin", ("Any",))
UNIT = ClassName("kotlin", ("Unit",))
NOTHING = ClassName("kotlin", ("Nothing",))

BOOLEAN = ClassName("kotlin", ("Boolean",))
BYTE = ClassName("kotlin", ("Byte",))
SHORT = ClassName("kotlin", ("Short",))
INT = ClassName("kotlin", ("Int",))
LONG = ClassName("kotlin", ("Long",))
CHAR = ClassName("kotlin", ("Char",))
FLOAT = ClassName("kotlin", ("Float",))
DOUBLE = ClassName("kotlin", ("Double",))

STRING = ClassName("kotlin", ("String",))
CHAR_SEQUENCE = ClassName("kotlin", ("CharSequence",))
NUMBER = ClassName("kotlin", ("Number",))
COMPARABLE = ClassName("kotlin", ("Comparable",))
ARRAY = ClassName("kotlin", ("Array",))
PAIR = ClassName("kotlin", ("Pair",))
TRIPLE = ClassName("kotlin", ("Triple",))

ITERABLE = ClassName("kotlin.collections", ("Iterable",))
COLLECTION = ClassName("kotlin.collections", ("Collection",))
LIST = ClassName("kotlin.collections", ("List",))
SET = ClassName("kotlin.collections", ("Set",))
MAP = ClassName("kotlin.collections", ("Map",))
MUTABLE_LIST = ClassName("kotlin.collections", ("MutableList",))
MUTABLE_SET = ClassName("kotlin.collections", ("MutableSet",))
MUTABLE_MAP = ClassName("kotlin.collections", ("MutableMap",))

# Primitive array classes keyed by their element type
PRIMITIVE_ARRAYS = {
    BOOLEAN: ClassName("kotlin", ("BooleanArray",)),
    BYTE: ClassName("kotlin", ("ByteArray",)),
    SHORT: ClassName("kotlin", ("ShortArray",)),
    INT: ClassName("kotlin", ("IntArray",)),
    LONG: ClassName("kotlin", ("LongArray",)),
    CHAR: ClassName("kotlin", ("CharArray",)),
    FLOAT: ClassName("kotlin", ("FloatArray",)),
    DOUBLE: ClassName("kotlin", ("DoubleArray",)),
}
