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
"""Tests for converting compile-time mirrors."""

import logging

import pytest

from kpoet.codegen.writer import CodeWriter
from kpoet.reflect.mirror_adapter import type_name_of_mirror, wildcard_of_mirror
from kpoet.reflect.mirrors import (
    ArrayTypeMirror,
    DeclaredTypeMirror,
    ExecutableTypeMirror,
    PrimitiveTypeMirror,
    TypeKind,
    TypeVariableTypeMirror,
    VoidTypeMirror,
    WildcardTypeMirror,
)
from kpoet.types.base import InvariantViolationError
from kpoet.types.class_name import (
    ANY,
    ARRAY,
    BOOLEAN,
    CHAR_SEQUENCE,
    COMPARABLE,
    INT,
    LIST,
    PRIMITIVE_ARRAYS,
    STRING,
    UNIT,
    ClassName,
)
from kpoet.types.lambda_type import LambdaTypeName
from kpoet.types.type_variable import TypeVariableName
from kpoet.types.wildcard import STAR, WildcardTypeName

OBJECT = DeclaredTypeMirror("java.lang.Object")
CHAR_SEQUENCE_MIRROR = DeclaredTypeMirror("java.lang.CharSequence")
STRING_MIRROR = DeclaredTypeMirror("java.lang.String")


class TestWildcardMirrors:
    """Tests for the extends / super / unbounded branches."""

    def test_extends_bound(self):
        wildcard = wildcard_of_mirror(WildcardTypeMirror(extends_bound=CHAR_SEQUENCE_MIRROR))
        assert wildcard == WildcardTypeName.subtype_of(CHAR_SEQUENCE)
        assert str(wildcard) == "out CharSequence"

    def test_super_bound(self):
        wildcard = wildcard_of_mirror(WildcardTypeMirror(super_bound=STRING_MIRROR))
        assert wildcard == WildcardTypeName.supertype_of(STRING)
        assert str(wildcard) == "in String"

    def test_unbounded(self):
        wildcard = wildcard_of_mirror(WildcardTypeMirror())
        assert wildcard == WildcardTypeName.subtype_of(ANY)
        assert str(wildcard) == "*"

    def test_extends_object_is_star(self):
        """Object maps to Any, so ? extends Object is also the star projection."""
        assert wildcard_of_mirror(WildcardTypeMirror(extends_bound=OBJECT)) == STAR

    def test_extends_wins_over_super(self):
        wildcard = wildcard_of_mirror(
            WildcardTypeMirror(extends_bound=CHAR_SEQUENCE_MIRROR, super_bound=STRING_MIRROR)
        )
        assert wildcard == WildcardTypeName.subtype_of(CHAR_SEQUENCE)

    def test_dispatch_through_type_name_of_mirror(self):
        assert type_name_of_mirror(WildcardTypeMirror()) == STAR

    def test_wildcard_of_wildcard_rejected(self):
        """A malformed description is rejected like a direct construction."""
        nested = WildcardTypeMirror(extends_bound=WildcardTypeMirror())
        with pytest.raises(InvariantViolationError):
            wildcard_of_mirror(nested)


class TestDeclaredMirrors:
    """Tests for class references."""

    def test_platform_class(self):
        assert type_name_of_mirror(STRING_MIRROR) == STRING
        assert type_name_of_mirror(OBJECT) == ANY

    def test_other_class(self):
        mirror = DeclaredTypeMirror("com.example.Outer.Inner")
        assert type_name_of_mirror(mirror) == ClassName.get("com.example", "Outer", "Inner")

    def test_nullable(self):
        mirror = DeclaredTypeMirror("java.lang.String", nullable=True)
        assert type_name_of_mirror(mirror) == STRING.as_nullable()

    def test_type_arguments(self):
        mirror = DeclaredTypeMirror(
            "java.util.List",
            (WildcardTypeMirror(extends_bound=CHAR_SEQUENCE_MIRROR),),
        )
        converted = type_name_of_mirror(mirror)
        assert converted == LIST.parameterized_by(WildcardTypeName.subtype_of(CHAR_SEQUENCE))
        assert str(converted) == "List<out CharSequence>"

    def test_star_argument(self):
        mirror = DeclaredTypeMirror("java.util.List", (WildcardTypeMirror(),))
        assert str(type_name_of_mirror(mirror)) == "List<*>"


class TestOtherMirrors:
    """Tests for primitives, arrays, void and executables."""

    def test_primitive(self):
        assert type_name_of_mirror(PrimitiveTypeMirror("int")) == INT
        assert type_name_of_mirror(PrimitiveTypeMirror("boolean")) == BOOLEAN

    def test_unknown_primitive(self):
        with pytest.raises(InvariantViolationError, match="unexpected primitive"):
            type_name_of_mirror(PrimitiveTypeMirror("int128"))

    def test_primitive_array(self):
        mirror = ArrayTypeMirror(PrimitiveTypeMirror("int"))
        assert type_name_of_mirror(mirror) == PRIMITIVE_ARRAYS[INT]

    def test_boxed_array(self):
        mirror = ArrayTypeMirror(DeclaredTypeMirror("java.lang.Integer"))
        assert type_name_of_mirror(mirror) == ARRAY.parameterized_by(INT)
        assert str(type_name_of_mirror(mirror)) == "Array<Int>"

    def test_void(self):
        assert type_name_of_mirror(VoidTypeMirror()) == UNIT

    def test_executable(self):
        mirror = ExecutableTypeMirror(
            (PrimitiveTypeMirror("int"),), STRING_MIRROR, receiver_type=STRING_MIRROR,
        )
        converted = type_name_of_mirror(mirror)
        assert converted == LambdaTypeName((INT,), STRING, STRING)
        assert str(converted) == "String.(Int) -> String"

    def test_unknown_kind(self):
        class Weird:
            kind = "weird"

        with pytest.raises(InvariantViolationError, match="unexpected type mirror"):
            type_name_of_mirror(Weird())

    def test_kinds(self):
        assert VoidTypeMirror().kind is TypeKind.VOID
        assert WildcardTypeMirror().kind is TypeKind.WILDCARD


class TestTypeVariableMirrors:
    """Tests for type variables and the memo map."""

    def _comparable_t(self, owner="sort"):
        t = TypeVariableTypeMirror("T", owner)
        t.upper_bounds.append(DeclaredTypeMirror("java.lang.Comparable", (t,)))
        return t

    def test_simple(self):
        t = TypeVariableTypeMirror("T", "identity", [OBJECT])
        converted = type_name_of_mirror(t)
        assert converted == TypeVariableName("T")
        assert converted.bounds == ()

    def test_recursive_bound(self):
        """T extends Comparable<T> should convert without recursing forever."""
        converted = type_name_of_mirror(self._comparable_t())
        assert converted.bounds == (COMPARABLE.parameterized_by(TypeVariableName("T")),)
        text = converted.render_declaration(CodeWriter()).getvalue()
        assert text == "T : Comparable<T>"

    def test_memo_is_filled(self, caplog):
        memo = {}
        with caplog.at_level(logging.DEBUG, logger="kpoet.reflect.mirror_adapter"):
            converted = type_name_of_mirror(self._comparable_t(), memo)
        assert memo[("sort", "T")] is converted
        assert "Reusing type variable T" in caplog.text

    def test_shared_memo_reuses_values(self):
        t = self._comparable_t()
        memo = {}
        first = type_name_of_mirror(t, memo)
        second = type_name_of_mirror(DeclaredTypeMirror("java.util.List", (t,)), memo)
        assert second.type_arguments[0] is first

    def test_owners_kept_apart(self):
        memo = {}
        type_name_of_mirror(TypeVariableTypeMirror("T", "first", [STRING_MIRROR]), memo)
        type_name_of_mirror(TypeVariableTypeMirror("T", "second", [CHAR_SEQUENCE_MIRROR]), memo)
        assert memo[("first", "T")].bounds == (STRING,)
        assert memo[("second", "T")].bounds == (CHAR_SEQUENCE,)

    def test_fresh_memo_per_call(self):
        t = TypeVariableTypeMirror("T", "f", [STRING_MIRROR])
        a = type_name_of_mirror(t)
        t.upper_bounds[:] = [CHAR_SEQUENCE_MIRROR]
        b = type_name_of_mirror(t)
        assert a.bounds == (STRING,)
        assert b.bounds == (CHAR_SEQUENCE,)
