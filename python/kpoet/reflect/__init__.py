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
"""Adapters from host type descriptions to TypeNames.

- mirrors / mirror_adapter: compile-time descriptions (annotation processors)
- runtime: Python runtime type objects
"""

from kpoet.reflect.mirrors import (
    ArrayTypeMirror,
    DeclaredTypeMirror,
    ExecutableTypeMirror,
    PrimitiveTypeMirror,
    TypeKind,
    TypeMirror,
    TypeVariableMirror,
    TypeVariableTypeMirror,
    VoidTypeMirror,
    WildcardMirror,
    WildcardTypeMirror,
)
from kpoet.reflect.mirror_adapter import type_name_of_mirror, wildcard_of_mirror
from kpoet.reflect.runtime import (
    ReflectedWildcard,
    WildcardType,
    type_name_of,
    wildcard_of,
)

__all__ = [
    "TypeKind",
    "TypeMirror",
    "WildcardMirror",
    "TypeVariableMirror",
    "DeclaredTypeMirror",
    "WildcardTypeMirror",
    "TypeVariableTypeMirror",
    "PrimitiveTypeMirror",
    "ArrayTypeMirror",
    "VoidTypeMirror",
    "ExecutableTypeMirror",
    "type_name_of_mirror",
    "wildcard_of_mirror",
    "ReflectedWildcard",
    "WildcardType",
    "type_name_of",
    "wildcard_of",
]
