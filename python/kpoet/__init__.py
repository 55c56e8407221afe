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
"""kpoet: type references for generating Kotlin source code.

The package models every kind of type a generated Kotlin file can refer
to as an immutable value that renders itself through a CodeWriter.

Key Components:
    - types: TypeName and its variants (ClassName, ParameterizedTypeName,
      TypeVariableName, WildcardTypeName, LambdaTypeName), AnnotationSpec
    - codegen: CodeWriter emission context and WriterConfig
    - reflect: Adapters from compile-time mirrors and Python runtime types

Usage:
    >>> from kpoet import WildcardTypeName, CHAR_SEQUENCE, LIST
    >>> str(LIST.parameterized_by(WildcardTypeName.subtype_of(CHAR_SEQUENCE)))
    'List<out CharSequence>'
"""

from kpoet.types import *  # noqa: F401,F403
from kpoet.types import __all__ as _types_all
from kpoet.codegen import (
    DEFAULT_WRITER_CONFIG,
    CodeWriter,
    FormatError,
    RenderedCode,
    WriterConfig,
    render_code,
)
from kpoet.reflect import (
    type_name_of,
    type_name_of_mirror,
    wildcard_of,
    wildcard_of_mirror,
)

__version__ = "0.1.0"

__all__ = list(_types_all) + [
    "CodeWriter",
    "FormatError",
    "RenderedCode",
    "WriterConfig",
    "DEFAULT_WRITER_CONFIG",
    "render_code",
    "type_name_of",
    "type_name_of_mirror",
    "wildcard_of",
    "wildcard_of_mirror",
]
