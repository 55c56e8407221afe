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
"""Pytest configuration for kpoet tests.

Puts the ``python`` directory on the path so the tests also run from a
plain checkout without installing the package.
"""

import sys
from pathlib import Path

import pytest

python_dir = Path(__file__).parent.parent.parent
if str(python_dir) not in sys.path:
    sys.path.insert(0, str(python_dir))

from kpoet.codegen.writer import CodeWriter  # noqa: E402
from kpoet.types.annotation import AnnotationSpec  # noqa: E402
from kpoet.types.class_name import ClassName  # noqa: E402


@pytest.fixture
def writer():
    """A fresh writer with the default configuration."""
    return CodeWriter()


@pytest.fixture
def nullable_annotation():
    return AnnotationSpec.get(ClassName.get("org.jetbrains.annotations", "Nullable"))


@pytest.fixture
def suppress_annotation():
    return AnnotationSpec.get(ClassName.get("kotlin", "Suppress"), '"UNCHECKED_CAST"')
