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
"""Configuration for the code writer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet


# Packages every Kotlin file imports implicitly
KOTLIN_DEFAULT_IMPORTS: FrozenSet[str] = frozenset({
    "kotlin",
    "kotlin.annotation",
    "kotlin.collections",
    "kotlin.comparisons",
    "kotlin.io",
    "kotlin.ranges",
    "kotlin.sequences",
    "kotlin.text",
})


@dataclass(frozen=True)
class WriterConfig:
    """Layout and import settings for a CodeWriter.

    Attributes:
        indent: String written once per indentation level.

        default_imports: Packages whose classes may be referenced by their
            simple name without an import statement.

        qualify_all: Always emit canonical names, ignoring imports,
            default imports and the current package.

    Example:
        >>> config = WriterConfig(indent="  ")
        >>> writer = CodeWriter(config=config)
    """

    indent: str = "    "
    default_imports: FrozenSet[str] = KOTLIN_DEFAULT_IMPORTS
    qualify_all: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "indent": self.indent,
            "default_imports": sorted(self.default_imports),
            "qualify_all": self.qualify_all,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WriterConfig":
        """Create from dictionary."""
        return cls(
            indent=d.get("indent", "    "),
            default_imports=frozenset(d.get("default_imports", KOTLIN_DEFAULT_IMPORTS)),
            qualify_all=d.get("qualify_all", False),
        )


# Default configuration singleton
DEFAULT_WRITER_CONFIG = WriterConfig()
