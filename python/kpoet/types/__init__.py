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
"""Type references for generated Kotlin code.

Key Components:
- base: TypeName and InvariantViolationError
- class_name: ClassName and the Kotlin built-ins (ANY is the top type)
- parameterized: Generic applications
- type_variable: Type variables and Variance
- wildcard: Use-site projections (in, out, *)
- lambda_type: Function types
- annotation: AnnotationSpec
"""

from kpoet.types.base import (
    InvariantViolationError,
    NullableTypeName,
    TypeName,
    check_argument,
)
from kpoet.types.annotation import AnnotationSpec
from kpoet.types.class_name import (
    ANY,
    ARRAY,
    BOOLEAN,
    BYTE,
    CHAR,
    CHAR_SEQUENCE,
    COLLECTION,
    COMPARABLE,
    DOUBLE,
    FLOAT,
    INT,
    ITERABLE,
    LIST,
    LONG,
    MAP,
    MUTABLE_LIST,
    MUTABLE_MAP,
    MUTABLE_SET,
    NOTHING,
    NUMBER,
    PAIR,
    PRIMITIVE_ARRAYS,
    SET,
    SHORT,
    STRING,
    TRIPLE,
    UNIT,
    ClassName,
)
from kpoet.types.parameterized import ParameterizedTypeName
from kpoet.types.type_variable import TypeVariableName, Variance
from kpoet.types.wildcard import STAR, WildcardTypeName
from kpoet.types.lambda_type import LambdaTypeName

__all__ = [
    # Base
    "TypeName",
    "NullableTypeName",
    "InvariantViolationError",
    "check_argument",
    # Variants
    "AnnotationSpec",
    "ClassName",
    "ParameterizedTypeName",
    "TypeVariableName",
    "Variance",
    "WildcardTypeName",
    "LambdaTypeName",
    "STAR",
    # Built-ins
    "ANY",
    "UNIT",
    "NOTHING",
    "BOOLEAN",
    "BYTE",
    "SHORT",
    "INT",
    "LONG",
    "CHAR",
    "FLOAT",
    "DOUBLE",
    "STRING",
    "CHAR_SEQUENCE",
    "NUMBER",
    "COMPARABLE",
    "ARRAY",
    "PAIR",
    "TRIPLE",
    "ITERABLE",
    "COLLECTION",
    "LIST",
    "SET",
    "MAP",
    "MUTABLE_LIST",
    "MUTABLE_SET",
    "MUTABLE_MAP",
    "PRIMITIVE_ARRAYS",
]
