"""Run examples from XML documentation files and verify their output."""

from importlib.metadata import PackageNotFoundError, version

from .capture import CapturedOutput, ConsoleRedirector, capture
from .context import ExecutionContext
from .documentation import CodeBlock, DocumentationRecord, ExampleSection, load_documentation, parse_documentation
from .exceptions import (
    CaptureActiveException,
    DocTestException,
    DocumentationException,
    ExecutionFailure,
    MissingDocumentationException,
    NonEmptyStderr,
    OutputMismatch,
    VerificationFailure,
)
from .extract import Example, extract_examples
from .lines import split_lines
from .names import sanitize_name
from .parsing import parse_expected
from .runner import DocTest, DocTestOutcome, collect_doctests, run_doctests
from .verify import verify

try:
    __version__ = version("xmldoctest")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "CaptureActiveException",
    "CapturedOutput",
    "CodeBlock",
    "ConsoleRedirector",
    "DocTest",
    "DocTestException",
    "DocTestOutcome",
    "DocumentationException",
    "DocumentationRecord",
    "Example",
    "ExampleSection",
    "ExecutionContext",
    "ExecutionFailure",
    "MissingDocumentationException",
    "NonEmptyStderr",
    "OutputMismatch",
    "VerificationFailure",
    "capture",
    "collect_doctests",
    "extract_examples",
    "load_documentation",
    "parse_documentation",
    "parse_expected",
    "run_doctests",
    "sanitize_name",
    "split_lines",
    "verify",
]
