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
"""Emission context that turns type references into Kotlin source text.

CodeWriter accepts format strings with placeholders, much like a tiny
template language:

    %T  a type reference (TypeName, or a Python type converted first)
    %L  a literal, written with str()
    %S  a Kotlin string literal, quoted and escaped
    %N  a name (a str, or anything with a ``name`` attribute)
    %>  increase indentation
    %<  decrease indentation
    %%  a percent sign

Type references are written by calling back into ``TypeName.render``,
which emits nested references through the same writer, so output order is
exactly the order of those calls.

Import elision: ``lookup_name`` spells a class by its simple name when
that is unambiguous (explicitly imported, in the current package, or in a
default-imported package) and by its canonical name otherwise.
``render_code`` runs two passes to compute the imports a fragment needs.
"""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, TextIO, Union

from kpoet.codegen.config import DEFAULT_WRITER_CONFIG, WriterConfig
from kpoet.types.base import TypeName
from kpoet.types.class_name import ClassName

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"%(.?)", re.DOTALL)

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "$": "\\$",
}


class FormatError(ValueError):
    """A format string or its arguments are malformed."""


def string_literal(value: Optional[str]) -> str:
    """Return ``value`` as a double-quoted Kotlin string literal."""
    if value is None:
        return "null"
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in value) + '"'


class CodeWriter:
    """Accumulates Kotlin source text and tracks referenced classes.

    Not thread-safe; use one writer per rendering.

    Args:
        out: Any object with ``write(str)``. Defaults to an in-memory buffer
            readable through ``getvalue()``.
        config: Indentation and default-import settings
        package_name: Package of the file being written
        imports: Classes (or canonical names) the file imports explicitly
        clashes: Classes already known to be referenced, keyed by simple
            name, typically ``referenced`` of an earlier pass over the same
            fragment. A simple name with more than one known class is
            always qualified.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        config: WriterConfig = DEFAULT_WRITER_CONFIG,
        package_name: str = "",
        imports: Optional[Iterable[Union[ClassName, str]]] = None,
        clashes: Optional[Mapping[str, Iterable[ClassName]]] = None,
    ):
        self._out = out if out is not None else io.StringIO()
        self.config = config
        self.package_name = package_name
        self._imports: Dict[str, ClassName] = {}
        for imported in imports or ():
            if isinstance(imported, str):
                imported = ClassName.best_guess(imported)
            imported = imported.top_level_class_name()
            self._imports[imported.simple_name] = imported
        self._indent_level = 0
        self._at_line_start = True
        # Simple name -> top-level classes referenced under it
        self._referenced: Dict[str, Set[ClassName]] = {
            simple: set(classes) for simple, classes in (clashes or {}).items()
        }

    @property
    def imports(self) -> Dict[str, ClassName]:
        return dict(self._imports)

    @property
    def referenced(self) -> Dict[str, Set[ClassName]]:
        """Top-level classes referenced so far, keyed by simple name."""
        return {simple: set(classes) for simple, classes in self._referenced.items()}

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def emit(self, fmt: str, *args: Any) -> "CodeWriter":
        """Write ``fmt`` with its placeholders replaced by ``args``."""
        arg_index = 0
        pos = 0
        for match in _PLACEHOLDER.finditer(fmt):
            self._write(fmt[pos:match.start()])
            pos = match.end()
            kind = match.group(1)

            if kind == "%":
                self._write("%")
                continue
            if kind == ">":
                self.indent()
                continue
            if kind == "<":
                self.unindent()
                continue
            if not kind or kind not in "TLSN":
                raise FormatError(f"invalid format string: {fmt!r} (unknown %{kind})")
            if arg_index >= len(args):
                raise FormatError(f"index {arg_index} for %{kind} not in range (received {len(args)} arguments)")
            arg = args[arg_index]
            arg_index += 1

            if kind == "T":
                self._emit_type(arg)
            elif kind == "L":
                self._write(str(arg))
            elif kind == "S":
                self._write(string_literal(arg))
            else:
                self._write(self._name_of(arg))

        self._write(fmt[pos:])
        if arg_index != len(args):
            raise FormatError(f"unused arguments: expected {arg_index}, received {len(args)}")
        return self

    def _emit_type(self, arg: Any) -> None:
        if not isinstance(arg, TypeName):
            from kpoet.reflect.runtime import type_name_of

            arg = type_name_of(arg)
        arg.render(self)

    def _name_of(self, arg: Any) -> str:
        if isinstance(arg, str):
            return arg
        name = getattr(arg, "name", None)
        if isinstance(name, str):
            return name
        raise FormatError(f"expected name but was {arg!r}")

    def _write(self, text: str) -> None:
        if not text:
            return
        lines = text.split("\n")
        for i, line in enumerate(lines):
            if i > 0:
                self._out.write("\n")
                self._at_line_start = True
            if not line:
                continue
            if self._at_line_start:
                self._out.write(self.config.indent * self._indent_level)
                self._at_line_start = False
            self._out.write(line)

    def indent(self, levels: int = 1) -> "CodeWriter":
        self._indent_level += levels
        return self

    def unindent(self, levels: int = 1) -> "CodeWriter":
        if self._indent_level - levels < 0:
            raise FormatError(f"cannot unindent {levels} from {self._indent_level}")
        self._indent_level -= levels
        return self

    def getvalue(self) -> str:
        getvalue = getattr(self._out, "getvalue", None)
        if getvalue is None:
            raise TypeError(f"{type(self._out).__name__} output does not buffer text")
        return getvalue()

    # -------------------------------------------------------------------------
    # Names and imports
    # -------------------------------------------------------------------------

    def lookup_name(self, class_name: ClassName) -> str:
        """Return the shortest unambiguous spelling of ``class_name``.

        Records the reference so ``suggested_imports`` can report it. A
        simple name claimed by more than one known class is qualified unless
        the class is the one explicitly imported. Within a single pass only
        the classes seen so far are known; seed ``clashes`` (as
        ``render_code`` does) for a spelling that does not depend on order.
        """
        top = class_name.top_level_class_name()
        simple = top.simple_name
        claimants = self._referenced.setdefault(simple, set())
        claimants.add(top)

        nested = ".".join(class_name.simple_names)
        if self.config.qualify_all:
            return class_name.canonical_name

        imported = self._imports.get(simple)
        if imported is not None:
            return nested if imported == top else class_name.canonical_name

        if len(claimants) > 1:
            logger.debug(f"Simple name {simple} is ambiguous, qualifying {top.canonical_name}")
            return class_name.canonical_name

        if top.package_name == self.package_name or top.package_name in self.config.default_imports:
            return nested
        return class_name.canonical_name

    def suggested_imports(self) -> Dict[str, ClassName]:
        """Classes that should be imported for their simple names to resolve.

        Default-imported and same-package classes need no import. A simple
        name referenced by more than one class is left qualified.
        """
        suggestions: Dict[str, ClassName] = {}
        for simple, claimants in sorted(self._referenced.items()):
            if len(claimants) != 1:
                continue
            (top,) = claimants
            if not top.package_name or top.package_name == self.package_name:
                continue
            if top.package_name in self.config.default_imports:
                continue
            suggestions[simple] = top
        return suggestions


@dataclass(frozen=True)
class RenderedCode:
    """Output of ``render_code``.

    Attributes:
        text: The rendered fragment
        imports: Canonical names to import, sorted
    """

    text: str
    imports: List[str] = field(default_factory=list)


def render_code(
    fmt: str,
    *args: Any,
    package_name: str = "",
    config: WriterConfig = DEFAULT_WRITER_CONFIG,
) -> RenderedCode:
    """Render a fragment together with the imports it needs.

    The first pass only collects referenced classes; the second renders
    with the suggested imports in place and with every class of the first
    pass already known, so a clashing simple name is qualified at each of
    its uses.
    """
    collector = CodeWriter(config=config, package_name=package_name)
    collector.emit(fmt, *args)
    suggested = collector.suggested_imports()

    writer = CodeWriter(
        config=config,
        package_name=package_name,
        imports=suggested.values(),
        clashes=collector.referenced,
    )
    writer.emit(fmt, *args)
    return RenderedCode(
        text=writer.getvalue(),
        imports=sorted(c.canonical_name for c in suggested.values()),
    )
