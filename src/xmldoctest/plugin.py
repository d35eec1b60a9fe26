"""pytest plugin collecting examples from XML documentation files."""

from __future__ import annotations

import pytest

from .context import ExecutionContext
from .documentation import is_documentation, load_documentation
from .exceptions import ExecutionFailure, NonEmptyStderr, OutputMismatch
from .parsing import DEFAULT_COMMENT
from .runner import DocTest, collect_doctests


def pytest_addoption(parser):
    group = parser.getgroup("xmldoctest", "examples in XML documentation files")
    group.addoption(
        "--xml-doctest",
        action="store_true",
        default=False,
        dest="xml_doctest",
        help="Run examples from XML documentation files as tests.",
    )
    group.addoption(
        "--xml-doctest-using",
        action="append",
        default=[],
        dest="xml_doctest_usings",
        metavar="MODULE",
        help="Import MODULE before each example (may be repeated).",
    )
    group.addoption(
        "--xml-doctest-comment",
        default=None,
        dest="xml_doctest_comment",
        metavar="TOKEN",
        help="Line comment token used by expected output blocks.",
    )
    parser.addini("xml_doctest_usings", type="args", default=[], help="Modules to import before each example.")
    parser.addini("xml_doctest_comment", default=DEFAULT_COMMENT, help="Line comment token of expected output.")


def pytest_collect_file(file_path, parent):
    if not parent.config.getoption("xml_doctest") or file_path.suffix != ".xml":
        return None
    if not is_documentation(file_path.read_text(encoding="utf-8-sig")):
        return None
    return XmlDocTestFile.from_parent(parent, path=file_path)


class XmlDocTestFile(pytest.File):
    def collect(self):
        config = self.config
        usings = list(config.getini("xml_doctest_usings")) + list(config.getoption("xml_doctest_usings"))
        comment = config.getoption("xml_doctest_comment") or config.getini("xml_doctest_comment")
        preamble = ExecutionContext.from_usings(usings)
        for doctest in collect_doctests(load_documentation(self.path), preamble, comment):
            yield XmlDocTestItem.from_parent(self, name=doctest.name, doctest=doctest)


class XmlDocTestItem(pytest.Item):
    def __init__(self, *, doctest: DocTest, **kwargs) -> None:
        super().__init__(**kwargs)
        self.doctest = doctest

    def runtest(self) -> None:
        self.doctest.run()

    def repr_failure(self, excinfo, style=None):
        error = excinfo.value
        if isinstance(error, OutputMismatch):
            lines = [f"Output of {self.name} does not match.", "Expected:"]
            lines.extend(f"    {line!r}" for line in error.expected)
            lines.append("Actual:")
            lines.extend(f"    {line!r}" for line in error.actual)
            return "\n".join(lines)
        if isinstance(error, NonEmptyStderr):
            return f"{self.name} wrote to stderr:\n{error.stderr}"
        if isinstance(error, ExecutionFailure):
            return f"{self.name} raised {error.description}\n{error.stderr}".rstrip()
        return super().repr_failure(excinfo, style=style)

    def reportinfo(self):
        return self.path, None, f"[xml-doctest] {self.name}"
