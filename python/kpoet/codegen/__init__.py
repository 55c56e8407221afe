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
"""Emission context for type references."""

from kpoet.codegen.config import (
    DEFAULT_WRITER_CONFIG,
    KOTLIN_DEFAULT_IMPORTS,
    WriterConfig,
)
from kpoet.codegen.writer import (
    CodeWriter,
    FormatError,
    RenderedCode,
    render_code,
    string_literal,
)

__all__ = [
    "CodeWriter",
    "FormatError",
    "RenderedCode",
    "render_code",
    "string_literal",
    "WriterConfig",
    "DEFAULT_WRITER_CONFIG",
    "KOTLIN_DEFAULT_IMPORTS",
]
