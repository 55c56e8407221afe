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
"""Conversion from compile-time mirrors to TypeNames.

Entry points:
- type_name_of_mirror: any mirror
- wildcard_of_mirror: a wildcard mirror

Both accept an optional memo map from type-variable key to the
TypeVariableName already built for it. The map breaks cycles such as
``T extends Comparable<T>`` and is owned by the caller: pass the same dict
to share variables across related conversions, or nothing to start fresh.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Optional, Tuple

from kpoet.reflect.mirrors import TypeKind, TypeMirror, TypeVariableMirror, WildcardMirror
from kpoet.types.base import InvariantViolationError, TypeName
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
    NUMBER,
    PRIMITIVE_ARRAYS,
    SET,
    SHORT,
    STRING,
    UNIT,
    ClassName,
)
from kpoet.types.lambda_type import LambdaTypeName
from kpoet.types.parameterized import ParameterizedTypeName
from kpoet.types.type_variable import TypeVariableName
from kpoet.types.wildcard import WildcardTypeName

logger = logging.getLogger(__name__)

MirrorTypeVariables = Dict[Tuple[Hashable, str], TypeVariableName]


_PRIMITIVES: Dict[str, ClassName] = {
    "boolean": BOOLEAN,
    "byte": BYTE,
    "short": SHORT,
    "int": INT,
    "long": LONG,
    "char": CHAR,
    "float": FLOAT,
    "double": DOUBLE,
}

# JVM platform classes that Kotlin code sees under a kotlin.* name
_PLATFORM_CLASSES: Dict[str, ClassName] = {
    "java.lang.Object": ANY,
    "java.lang.String": STRING,
    "java.lang.CharSequence": CHAR_SEQUENCE,
    "java.lang.Number": NUMBER,
    "java.lang.Comparable": COMPARABLE,
    "java.lang.Boolean": BOOLEAN,
    "java.lang.Byte": BYTE,
    "java.lang.Short": SHORT,
    "java.lang.Integer": INT,
    "java.lang.Long": LONG,
    "java.lang.Character": CHAR,
    "java.lang.Float": FLOAT,
    "java.lang.Double": DOUBLE,
    "java.lang.Iterable": ITERABLE,
    "java.util.Collection": COLLECTION,
    "java.util.List": LIST,
    "java.util.Set": SET,
    "java.util.Map": MAP,
}


def type_name_of_mirror(
    mirror: TypeMirror,
    type_variables: Optional[MirrorTypeVariables] = None,
) -> TypeName:
    """Convert a compile-time type description into a TypeName.

    Args:
        mirror: The description to convert
        type_variables: Memo map shared by one conversion; created when None

    Returns:
        The equivalent TypeName

    Raises:
        InvariantViolationError: If the mirror has an unknown kind or would
            produce a malformed type (e.g. a primitive named ``int128``)
    """
    if type_variables is None:
        type_variables = {}

    kind = mirror.kind
    if kind is TypeKind.DECLARED:
        return _declared(mirror, type_variables)
    if kind is TypeKind.WILDCARD:
        return wildcard_of_mirror(mirror, type_variables)
    if kind is TypeKind.TYPEVAR:
        return _type_variable(mirror, type_variables)
    if kind is TypeKind.PRIMITIVE:
        primitive = _PRIMITIVES.get(mirror.name)
        if primitive is None:
            raise InvariantViolationError(f"unexpected primitive type: {mirror.name}")
        return primitive
    if kind is TypeKind.ARRAY:
        component = type_name_of_mirror(mirror.component_type, type_variables)
        if mirror.component_type.kind is TypeKind.PRIMITIVE:
            return PRIMITIVE_ARRAYS[component]
        return ParameterizedTypeName.get(ARRAY, component)
    if kind is TypeKind.VOID:
        return UNIT
    if kind is TypeKind.EXECUTABLE:
        receiver = None
        if mirror.receiver_type is not None:
            receiver = type_name_of_mirror(mirror.receiver_type, type_variables)
        return LambdaTypeName(
            tuple(type_name_of_mirror(p, type_variables) for p in mirror.parameter_types),
            type_name_of_mirror(mirror.return_type, type_variables),
            receiver,
        )
    raise InvariantViolationError(f"unexpected type mirror: {mirror!r}")


def wildcard_of_mirror(
    mirror: WildcardMirror,
    type_variables: Optional[MirrorTypeVariables] = None,
) -> WildcardTypeName:
    """Convert a wildcard description.

    - ``? extends U`` becomes ``subtype_of(U)``
    - ``? super L`` becomes ``supertype_of(L)``
    - a bare ``?`` becomes ``subtype_of(Any)``, the star projection
    """
    if type_variables is None:
        type_variables = {}

    extends_bound = mirror.extends_bound
    if extends_bound is None:
        super_bound = mirror.super_bound
        if super_bound is None:
            return WildcardTypeName.subtype_of(ANY)
        return WildcardTypeName.supertype_of(type_name_of_mirror(super_bound, type_variables))
    return WildcardTypeName.subtype_of(type_name_of_mirror(extends_bound, type_variables))


def _declared(mirror: TypeMirror, type_variables: MirrorTypeVariables) -> TypeName:
    raw = _PLATFORM_CLASSES.get(mirror.qualified_name)
    if raw is None:
        raw = ClassName.best_guess(mirror.qualified_name)
    if mirror.type_arguments:
        return ParameterizedTypeName(
            raw,
            tuple(type_name_of_mirror(a, type_variables) for a in mirror.type_arguments),
            mirror.nullable,
        )
    return raw.copy_nullable(mirror.nullable)


def _type_variable(
    mirror: TypeVariableMirror,
    type_variables: MirrorTypeVariables,
) -> TypeVariableName:
    key = (mirror.owner, mirror.name)
    existing = type_variables.get(key)
    if existing is not None:
        logger.debug(f"Reusing type variable {mirror.name} of {mirror.owner!r}")
        return existing

    # Register a bound-less placeholder first so recursive bounds resolve to it
    placeholder = TypeVariableName(mirror.name)
    type_variables[key] = placeholder
    bounds = tuple(type_name_of_mirror(b, type_variables) for b in mirror.upper_bounds)
    # Object bounds are implicit
    bounds = tuple(b for b in bounds if b != ANY)
    result = placeholder.with_bounds(*bounds)
    type_variables[key] = result
    return result
