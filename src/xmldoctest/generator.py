"""Generating pytest modules from documentation examples."""

from __future__ import annotations

import ast
import keyword
import logging
import textwrap
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .documentation import DocumentationRecord, load_documentation
from .exceptions import MissingDocumentationException
from .extract import Example, extract_examples
from .lines import comparable_lines, dedent_code
from .names import collectable_name
from .parsing import DEFAULT_COMMENT, parse_expected

__all__ = [
    "DEFAULT_CLASS_NAME",
    "Diagnostic",
    "GenerationResult",
    "check_class_name",
    "generate_for_file",
    "generate_test_module",
]

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NAME = "TestDocs"

HEADER = """\
# ------------------------------------------------------------------
# <auto-generated>
#     This code was generated by xmldoctest.
# </auto-generated>
# ------------------------------------------------------------------
"""

INDENT = "    "


@dataclass(frozen=True)
class Diagnostic:
    """A problem with the generator input."""

    id: str
    title: str
    message: str

    def __str__(self) -> str:
        return f"{self.id}: {self.title}. {self.message}"


def missing_documentation_file(path: str) -> Diagnostic:
    return Diagnostic("DOCTEST0001", "Missing XML documentation file", f"Add the documentation file {path}")


def invalid_class_name(name: str) -> Diagnostic:
    return Diagnostic("DOCTEST0002", "Class name must be a valid identifier", f"Rename {name}")


def uncollectable_class_name(name: str) -> Diagnostic:
    return Diagnostic("DOCTEST0003", "Class name must start with Test", f"Rename {name} to Test{name}")


def example_does_not_compile(name: str, error: SyntaxError) -> Diagnostic:
    return Diagnostic("DOCTEST0004", "Example code does not compile", f"Fix {name}: {error.msg} (line {error.lineno})")


@dataclass(frozen=True)
class GenerationResult:
    """Generated module source, or None when diagnostics prevented generation."""

    source: str | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def check_class_name(class_name: str) -> list[Diagnostic]:
    """Return diagnostics for a class name that pytest would not collect."""
    if not class_name.isidentifier() or keyword.iskeyword(class_name):
        return [invalid_class_name(class_name)]
    if not class_name.startswith("Test"):
        return [uncollectable_class_name(class_name)]
    return []


def _compile(code: str) -> None:
    """Compile example code the way ExecutionContext runs it; raises SyntaxError."""
    compile(code, "<doctest>", "exec", flags=ast.PyCF_ALLOW_TOP_LEVEL_AWAIT)


def _code_assignment(code: str) -> list[str]:
    """Return statements binding the example code to a local, one literal per source line."""
    lines = code.splitlines(keepends=True)
    if len(lines) < 2:
        return [f"code = {code!r}"]
    return ["code = (", *(f"{INDENT}{line!r}" for line in lines), ")"]


def _method(example: Example, method_name: str, comment: str) -> str:
    code = dedent_code(example.code).strip()
    expected = comparable_lines(parse_expected(example.code, comment).expected)
    filename = f"<doctest {example.name}>"
    lines = [
        f"def {method_name}(self):",
        f"{INDENT}{example.name!r}",
        *(f"{INDENT}{line}" for line in _code_assignment(code)),
        f"{INDENT}with ConsoleRedirector() as redirector:",
        f"{INDENT * 2}ExecutionContext(code, filename={filename!r}).run(dict(globals()))",
        "",
        f'{INDENT}assert redirector.captured_err == ""',
        f"{INDENT}assert comparable_lines(split_lines(redirector.captured_out)) == [",
        *(f"{INDENT * 2}{line!r}," for line in expected),
        f"{INDENT}]",
    ]
    return textwrap.indent("\n".join(lines), INDENT)


def generate_test_module(
    records: Iterable[DocumentationRecord],
    class_name: str = DEFAULT_CLASS_NAME,
    usings: Iterable[str] = (),
    comment: str = DEFAULT_COMMENT,
) -> GenerationResult:
    """Generate a pytest module with one test method per executable example."""
    diagnostics = check_class_name(class_name)
    if diagnostics:
        return GenerationResult(source=None, diagnostics=diagnostics)
    methods = []
    seen: set[str] = set()
    for example in extract_examples(records):
        try:
            _compile(dedent_code(example.code).strip())
        except SyntaxError as exc:
            diagnostics.append(example_does_not_compile(example.name, exc))
            continue
        method_name = collectable_name(example.name)
        unique_name = method_name
        suffix = 1
        while unique_name in seen:
            suffix += 1
            unique_name = f"{method_name}_{suffix}"
        seen.add(unique_name)
        methods.append(_method(example, unique_name, comment))
    imports = [
        "from xmldoctest.capture import ConsoleRedirector",
        "from xmldoctest.context import ExecutionContext",
        "from xmldoctest.lines import comparable_lines, split_lines",
    ]
    usings = list(usings)
    if usings:
        imports.append("")
        imports.extend(f"import {name}" for name in usings)
    if not methods:
        methods.append(f"{INDENT}pass")
    source = "\n".join([HEADER + "\n".join(imports), "", "", f"class {class_name}:", "\n\n".join(methods), ""])
    logger.debug("Generated %d test methods for %s", len(seen), class_name)
    return GenerationResult(source=source, diagnostics=diagnostics)


def generate_for_file(
    path: str | Path,
    class_name: str = DEFAULT_CLASS_NAME,
    usings: Iterable[str] = (),
    comment: str = DEFAULT_COMMENT,
) -> GenerationResult:
    """Generate a pytest module from an XML documentation file."""
    try:
        records = load_documentation(path)
    except MissingDocumentationException:
        return GenerationResult(source=None, diagnostics=[missing_documentation_file(f"{path}")])
    return generate_test_module(records, class_name=class_name, usings=usings, comment=comment)
