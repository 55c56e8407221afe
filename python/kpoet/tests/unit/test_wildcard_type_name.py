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
"""Tests for wildcard type names."""

import pytest

from kpoet.types.base import InvariantViolationError
from kpoet.types.class_name import (
    ANY,
    CHAR_SEQUENCE,
    INT,
    LIST,
    MAP,
    NUMBER,
    STRING,
    ClassName,
)
from kpoet.types.type_variable import TypeVariableName
from kpoet.types.wildcard import STAR, WildcardTypeName


class TestWildcardConstruction:
    """Tests for the named constructors and direct construction."""

    def test_subtype_of(self):
        """subtype_of should hold a single upper bound and no lower bound."""
        wildcard = WildcardTypeName.subtype_of(CHAR_SEQUENCE)
        assert wildcard.upper_bounds == (CHAR_SEQUENCE,)
        assert wildcard.lower_bounds == ()

    def test_supertype_of(self):
        """supertype_of should fix the upper bound to Any."""
        wildcard = WildcardTypeName.supertype_of(STRING)
        assert wildcard.upper_bounds == (ANY,)
        assert wildcard.lower_bounds == (STRING,)

    def test_star_is_subtype_of_any(self):
        assert STAR == WildcardTypeName.subtype_of(ANY)
        assert STAR.is_star
        assert not WildcardTypeName.subtype_of(NUMBER).is_star
        assert not WildcardTypeName.supertype_of(NUMBER).is_star

    def test_lists_are_copied_to_tuples(self):
        """Bound lists passed in should not stay shared with the caller."""
        upper = [NUMBER]
        wildcard = WildcardTypeName(upper, [])
        upper.append(STRING)
        assert wildcard.upper_bounds == (NUMBER,)

    def test_no_upper_bound_fails(self):
        """An empty upper-bound list should be rejected at construction."""
        with pytest.raises(InvariantViolationError, match="unexpected extends bounds: \\[\\]"):
            WildcardTypeName((), ())

    def test_two_upper_bounds_fail(self):
        with pytest.raises(InvariantViolationError, match="unexpected extends bounds"):
            WildcardTypeName((NUMBER, CHAR_SEQUENCE), ())

    def test_two_lower_bounds_fail(self):
        with pytest.raises(InvariantViolationError, match="unexpected super bounds"):
            WildcardTypeName((ANY,), (INT, STRING))

    def test_wildcard_bound_fails(self):
        """Wildcards of wildcards have no Kotlin spelling."""
        with pytest.raises(InvariantViolationError, match="cannot be a wildcard"):
            WildcardTypeName.subtype_of(WildcardTypeName.subtype_of(NUMBER))
        with pytest.raises(InvariantViolationError, match="cannot be a wildcard"):
            WildcardTypeName.supertype_of(STAR)

    def test_non_type_bound_fails(self):
        with pytest.raises(InvariantViolationError):
            WildcardTypeName((42,), ())

    def test_runtime_types_are_converted(self):
        """Python types should be accepted as bounds."""
        assert WildcardTypeName.subtype_of(str) == WildcardTypeName.subtype_of(STRING)
        assert WildcardTypeName.supertype_of(int) == WildcardTypeName.supertype_of(INT)
        assert WildcardTypeName.subtype_of(object) == STAR


class TestWildcardRendering:
    """Tests for the in / * / out rendering precedence."""

    def test_out_projection(self):
        assert str(WildcardTypeName.subtype_of(CHAR_SEQUENCE)) == "out CharSequence"

    def test_star_projection(self):
        assert str(WildcardTypeName.subtype_of(ANY)) == "*"

    def test_in_projection(self):
        assert str(WildcardTypeName.supertype_of(STRING)) == "in String"

    def test_lower_bound_takes_precedence(self):
        """A lower bound should win even when an explicit upper bound exists."""
        wildcard = WildcardTypeName((NUMBER,), (INT,))
        assert str(wildcard) == "in Int"

    def test_nullable_any_is_not_star(self):
        assert str(WildcardTypeName.subtype_of(ANY.as_nullable())) == "out Any?"

    def test_annotated_any_is_not_star(self, nullable_annotation):
        """Only the plain top type triggers the star projection."""
        bound = ANY.annotated(nullable_annotation)
        assert str(WildcardTypeName.subtype_of(bound)) == (
            "out @org.jetbrains.annotations.Nullable Any"
        )

    def test_qualified_bound(self):
        bound = ClassName.get("com.example", "Shape")
        assert str(WildcardTypeName.subtype_of(bound)) == "out com.example.Shape"

    def test_generic_bound(self):
        bound = LIST.parameterized_by(TypeVariableName("T"))
        assert str(WildcardTypeName.supertype_of(bound)) == "in List<T>"

    def test_as_type_argument(self):
        map_type = MAP.parameterized_by(STRING, WildcardTypeName.subtype_of(NUMBER))
        assert str(map_type) == "Map<String, out Number>"
        assert str(LIST.parameterized_by(STAR)) == "List<*>"

    def test_render_returns_writer(self, writer):
        assert WildcardTypeName.subtype_of(NUMBER).render(writer) is writer
        assert writer.getvalue() == "out Number"

    def test_annotations_render_first(self, suppress_annotation):
        wildcard = WildcardTypeName.supertype_of(STRING).annotated(suppress_annotation)
        assert str(wildcard) == '@Suppress("UNCHECKED_CAST") in String'


class TestWildcardAnnotations:
    """Tests for annotation copies."""

    def test_with_annotations_keeps_bounds(self, nullable_annotation):
        wildcard = WildcardTypeName.supertype_of(STRING)
        annotated = wildcard.with_annotations([nullable_annotation])
        assert isinstance(annotated, WildcardTypeName)
        assert annotated.upper_bounds == wildcard.upper_bounds
        assert annotated.lower_bounds == wildcard.lower_bounds
        assert annotated.annotations == (nullable_annotation,)
        assert wildcard.annotations == ()

    def test_with_annotations_concatenates(self, nullable_annotation, suppress_annotation):
        wildcard = WildcardTypeName.subtype_of(NUMBER)
        annotated = (
            wildcard.with_annotations([nullable_annotation, suppress_annotation])
            .with_annotations([nullable_annotation])
        )
        assert annotated.annotations == (
            nullable_annotation, suppress_annotation, nullable_annotation,
        )

    def test_with_empty_annotations_is_equal_copy(self):
        wildcard = WildcardTypeName.subtype_of(NUMBER)
        assert wildcard.with_annotations([]) == wildcard

    def test_without_annotations(self, nullable_annotation):
        wildcard = WildcardTypeName.subtype_of(NUMBER).annotated(nullable_annotation)
        stripped = wildcard.without_annotations()
        assert stripped.annotations == ()
        assert stripped.upper_bounds == (NUMBER,)
        assert stripped == WildcardTypeName.subtype_of(NUMBER)
        assert stripped.without_annotations() == stripped


class TestWildcardEquality:
    """Tests for value semantics."""

    def test_equal_and_hash(self):
        a = WildcardTypeName.subtype_of(ClassName.get("com.example", "Shape"))
        b = WildcardTypeName.subtype_of(ClassName.get("com.example", "Shape"))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_bounds_differ(self):
        assert WildcardTypeName.subtype_of(NUMBER) != WildcardTypeName.subtype_of(INT)
        assert WildcardTypeName.subtype_of(NUMBER) != WildcardTypeName.supertype_of(NUMBER)

    def test_annotations_break_equality(self, nullable_annotation):
        wildcard = WildcardTypeName.subtype_of(NUMBER)
        assert wildcard != wildcard.annotated(nullable_annotation)

    def test_not_equal_to_bound(self):
        """A wildcard is never equal to a different variant."""
        assert WildcardTypeName.subtype_of(NUMBER) != NUMBER

    def test_immutable(self):
        wildcard = WildcardTypeName.subtype_of(NUMBER)
        with pytest.raises(AttributeError):
            wildcard.upper_bounds = (INT,)
