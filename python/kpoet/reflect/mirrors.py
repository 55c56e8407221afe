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
"""Compile-time type descriptions ("mirrors").

An annotation processor or compiler plugin describes the types it sees
with mirrors; the adapter in ``mirror_adapter`` turns them into TypeNames.
The adapter only relies on the protocols below, so any description source
can plug in. The dataclasses are ready-made implementations for callers
that build descriptions by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Hashable, List, Optional, Protocol, Sequence, Tuple, runtime_checkable


class TypeKind(Enum):
    """The shape of a mirror."""

    DECLARED = auto()    # Class or interface, possibly with type arguments
    WILDCARD = auto()    # ? extends X / ? super X / ?
    TYPEVAR = auto()     # Reference to a declared type parameter
    PRIMITIVE = auto()   # int, boolean, ...
    ARRAY = auto()       # T[]
    VOID = auto()        # void / Unit
    EXECUTABLE = auto()  # Function type


# =============================================================================
# Protocols
# =============================================================================


@runtime_checkable
class TypeMirror(Protocol):
    """Anything that can say what kind of type it describes."""

    @property
    def kind(self) -> TypeKind: ...


@runtime_checkable
class WildcardMirror(Protocol):
    """A wildcard description; at most one of the bounds is set."""

    @property
    def kind(self) -> TypeKind: ...

    @property
    def extends_bound(self) -> Optional[TypeMirror]: ...

    @property
    def super_bound(self) -> Optional[TypeMirror]: ...


@runtime_checkable
class TypeVariableMirror(Protocol):
    """A type parameter reference.

    ``owner`` identifies the declaring element so that two ``T`` from
    different declarations stay distinct in the memo map.
    """

    @property
    def kind(self) -> TypeKind: ...

    @property
    def name(self) -> str: ...

    @property
    def owner(self) -> Hashable: ...

    @property
    def upper_bounds(self) -> Sequence[TypeMirror]: ...


# =============================================================================
# Implementations
# =============================================================================


@dataclass(frozen=True)
class DeclaredTypeMirror:
    """A class or interface reference.

    Attributes:
        qualified_name: Dotted name, e.g. ``java.util.List``
        type_arguments: Mirrors for the type arguments, if any
        nullable: Whether the declaration site marks it nullable
    """

    qualified_name: str
    type_arguments: Tuple[TypeMirror, ...] = ()
    nullable: bool = False
    kind: TypeKind = field(default=TypeKind.DECLARED, init=False)


@dataclass(frozen=True)
class WildcardTypeMirror:
    extends_bound: Optional[TypeMirror] = None
    super_bound: Optional[TypeMirror] = None
    kind: TypeKind = field(default=TypeKind.WILDCARD, init=False)


@dataclass(eq=False)
class TypeVariableTypeMirror:
    """A type parameter reference.

    Mutable so that a bound can point back at the variable itself,
    as in ``T extends Comparable<T>``. Compared by identity.
    """

    name: str
    owner: Hashable
    upper_bounds: List[TypeMirror] = field(default_factory=list)
    kind: TypeKind = field(default=TypeKind.TYPEVAR, init=False)


@dataclass(frozen=True)
class PrimitiveTypeMirror:
    """A primitive such as ``int`` or ``boolean``."""

    name: str
    kind: TypeKind = field(default=TypeKind.PRIMITIVE, init=False)


@dataclass(frozen=True)
class ArrayTypeMirror:
    component_type: TypeMirror
    kind: TypeKind = field(default=TypeKind.ARRAY, init=False)


@dataclass(frozen=True)
class VoidTypeMirror:
    kind: TypeKind = field(default=TypeKind.VOID, init=False)


@dataclass(frozen=True)
class ExecutableTypeMirror:
    """A function signature, used for function-typed values."""

    parameter_types: Tuple[TypeMirror, ...] = ()
    return_type: TypeMirror = field(default_factory=VoidTypeMirror)
    receiver_type: Optional[TypeMirror] = None
    kind: TypeKind = field(default=TypeKind.EXECUTABLE, init=False)
