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
"""Conversion from Python runtime type objects to TypeNames.

Lets callers describe Kotlin types with ordinary Python annotations:

    type_name_of(dict[str, list[int]])       ->  Map<String, List<Int>>
    type_name_of(Optional[str])              ->  String?
    type_name_of(Callable[[int], bool])      ->  (Int) -> Boolean
    type_name_of(TypeVar("T", bound=Number)) ->  T

Python has no wildcard type, so wildcard descriptions come from any object
exposing ``upper_bounds`` and ``lower_bounds`` sequences (see
``ReflectedWildcard``). Those are passed straight to the WildcardTypeName
constructor, so a description with no upper bound is rejected exactly as a
direct construction would be.
"""

from __future__ import annotations

import collections.abc
import logging
import types
import typing
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable

from kpoet.types.annotation import AnnotationSpec
from kpoet.types.base import InvariantViolationError, NullableTypeName, TypeName
from kpoet.types.class_name import (
    ANY,
    BOOLEAN,
    BYTE,
    COLLECTION,
    DOUBLE,
    INT,
    ITERABLE,
    LIST,
    MAP,
    MUTABLE_LIST,
    MUTABLE_MAP,
    MUTABLE_SET,
    PAIR,
    PRIMITIVE_ARRAYS,
    SET,
    STRING,
    TRIPLE,
    UNIT,
    ClassName,
)
from kpoet.types.lambda_type import LambdaTypeName
from kpoet.types.parameterized import ParameterizedTypeName
from kpoet.types.type_variable import TypeVariableName, Variance
from kpoet.types.wildcard import WildcardTypeName

logger = logging.getLogger(__name__)

RuntimeTypeVariables = Dict[Any, TypeVariableName]


@runtime_checkable
class WildcardType(Protocol):
    """A reflective wildcard: exactly one upper bound, at most one lower bound."""

    @property
    def upper_bounds(self) -> Sequence[Any]: ...

    @property
    def lower_bounds(self) -> Sequence[Any]: ...


@dataclass(frozen=True)
class ReflectedWildcard:
    """A plain WildcardType. The defaults describe an unbounded ``?``."""

    upper_bounds: Tuple[Any, ...] = (object,)
    lower_bounds: Tuple[Any, ...] = ()


_BUILTINS: Dict[Any, ClassName] = {
    bool: BOOLEAN,
    int: INT,
    float: DOUBLE,
    str: STRING,
    bytes: PRIMITIVE_ARRAYS[BYTE],
    list: LIST,
    set: SET,
    frozenset: SET,
    dict: MAP,
    collections.abc.Iterable: ITERABLE,
    collections.abc.Collection: COLLECTION,
    collections.abc.Sequence: LIST,
    collections.abc.Set: SET,
    collections.abc.Mapping: MAP,
    collections.abc.MutableSequence: MUTABLE_LIST,
    collections.abc.MutableSet: MUTABLE_SET,
    collections.abc.MutableMapping: MUTABLE_MAP,
}


def type_name_of(
    tp: Any,
    type_variables: Optional[RuntimeTypeVariables] = None,
) -> TypeName:
    """Convert a Python runtime type into a TypeName.

    Args:
        tp: A class, ``typing`` construct, TypeVar, WildcardType or TypeName
        type_variables: Memo map shared by one conversion; created when None

    Returns:
        The equivalent TypeName

    Raises:
        InvariantViolationError: If ``tp`` has no Kotlin equivalent (bare
            unions, forward references, variadic tuples, ...)
    """
    if type_variables is None:
        type_variables = {}

    if isinstance(tp, TypeName):
        return tp
    if tp is None or tp is type(None):
        return UNIT
    if tp is typing.Any or tp is object:
        return ANY
    if isinstance(tp, typing.TypeVar):
        return _type_variable(tp, type_variables)
    if isinstance(tp, (str, typing.ForwardRef)):
        raise InvariantViolationError(f"unresolved forward reference: {tp!r}")
    if isinstance(tp, WildcardType) and not isinstance(tp, type):
        return wildcard_of(tp, type_variables)

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is typing.Annotated:
        inner = type_name_of(args[0], type_variables)
        return inner.with_annotations(a for a in args[1:] if isinstance(a, AnnotationSpec))

    if origin is typing.Union or origin is types.UnionType:
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1 and len(non_none) < len(args):
            inner = type_name_of(non_none[0], type_variables)
            if isinstance(inner, NullableTypeName):
                return inner.as_nullable()
        raise InvariantViolationError(f"union types have no Kotlin equivalent: {tp!r}")

    if origin is collections.abc.Callable:
        if len(args) != 2 or args[0] is Ellipsis:
            raise InvariantViolationError(f"callable needs explicit parameter types: {tp!r}")
        return LambdaTypeName(
            tuple(type_name_of(p, type_variables) for p in args[0]),
            type_name_of(args[1], type_variables),
        )

    if origin is tuple:
        if Ellipsis in args or len(args) not in (2, 3):
            raise InvariantViolationError(f"only 2- and 3-tuples map to Pair/Triple: {tp!r}")
        raw = PAIR if len(args) == 2 else TRIPLE
        return ParameterizedTypeName(raw, tuple(type_name_of(a, type_variables) for a in args))

    if origin is not None:
        raw = _class_name(origin)
        if not args:
            return raw
        return ParameterizedTypeName(raw, tuple(type_name_of(a, type_variables) for a in args))

    if isinstance(tp, type):
        return _class_name(tp)

    raise InvariantViolationError(f"unexpected type: {tp!r}")


def wildcard_of(
    wildcard: WildcardType,
    type_variables: Optional[RuntimeTypeVariables] = None,
) -> WildcardTypeName:
    """Convert a reflective wildcard by converting each of its bounds.

    The bound lists go straight to the WildcardTypeName constructor. Unlike
    ``wildcard_of_mirror`` there is no extends / super / unbounded branch,
    so a description with a lower bound but no upper bound is rejected
    rather than read as ``supertype_of``.

    Raises:
        InvariantViolationError: If the description does not carry exactly
            one upper bound and at most one lower bound
    """
    if type_variables is None:
        type_variables = {}

    return WildcardTypeName(
        tuple(type_name_of(b, type_variables) for b in wildcard.upper_bounds),
        tuple(type_name_of(b, type_variables) for b in wildcard.lower_bounds),
    )


def _class_name(cls: Any) -> ClassName:
    known = _BUILTINS.get(cls)
    if known is not None:
        return known
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", None)
    if module is None or qualname is None or module == "builtins":
        raise InvariantViolationError(f"no Kotlin equivalent for {cls!r}")
    return ClassName(module, tuple(qualname.split(".")))


def _type_variable(
    tp: typing.TypeVar,
    type_variables: RuntimeTypeVariables,
) -> TypeVariableName:
    existing = type_variables.get(tp)
    if existing is not None:
        logger.debug(f"Reusing type variable {tp.__name__}")
        return existing
    if tp.__constraints__:
        raise InvariantViolationError(f"constrained type variables have no Kotlin equivalent: {tp!r}")

    variance = None
    if tp.__covariant__:
        variance = Variance.OUT
    elif tp.__contravariant__:
        variance = Variance.IN

    placeholder = TypeVariableName(tp.__name__, variance=variance)
    type_variables[tp] = placeholder
    if tp.__bound__ is None:
        return placeholder
    bound = type_name_of(tp.__bound__, type_variables)
    # bound=object is the implicit bound
    if bound == ANY:
        return placeholder
    result = placeholder.with_bounds(bound)
    type_variables[tp] = result
    return result
