"""Running extracted examples as doctests."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .capture import capture
from .context import ExecutionContext
from .documentation import DocumentationRecord
from .exceptions import ExecutionFailure, VerificationFailure
from .extract import extract_examples
from .parsing import DEFAULT_COMMENT, parse_expected
from .verify import verify

__all__ = [
    "STATUS_ERROR",
    "STATUS_FAILED",
    "STATUS_PASSED",
    "DocTest",
    "DocTestOutcome",
    "collect_doctests",
    "run_doctest",
    "run_doctests",
]

logger = logging.getLogger(__name__)

STATUS_PASSED = "passed"
STATUS_FAILED = "failed"
STATUS_ERROR = "error"


class DocTest:
    """A named example that runs after a shared preamble."""

    def __init__(self, name: str, code: str, preamble: ExecutionContext, comment: str = DEFAULT_COMMENT) -> None:
        if name is None or code is None or preamble is None:
            raise TypeError("DocTest requires a name, code and a preamble.")
        self.name = name
        self.code = code
        self.comment = comment
        self._context = preamble.extend(code, filename=f"<doctest {name}>")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"DocTest({self.name!r})"

    @property
    def expected(self) -> list[str]:
        return parse_expected(self.code, self.comment).expected

    def run(self) -> None:
        """
        Run the example and verify its output.

        :raises ExecutionFailure: The example code failed to compile or raised
        :raises NonEmptyStderr: The example wrote to standard error
        :raises OutputMismatch: Standard output differs from the expected lines
        """
        logger.debug("Running doctest %s", self.name)
        captured = capture(self._context.run)
        if captured.error is not None:
            error = captured.error
            description = error.description if isinstance(error, ExecutionFailure) else f"{error}"
            raise ExecutionFailure(description, stdout=captured.stdout, stderr=captured.stderr) from error
        verify(self.expected, captured.stdout, captured.stderr)


@dataclass(frozen=True)
class DocTestOutcome:
    """The result of running one doctest."""

    name: str
    status: str
    message: str = ""
    expected: list[str] | None = None
    actual: list[str] | None = None

    @property
    def passed(self) -> bool:
        return self.status == STATUS_PASSED

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {"name": self.name, "status": self.status}
        if self.message:
            result["message"] = self.message
        if self.expected is not None:
            result["expected"] = self.expected
            result["actual"] = self.actual
        return result


def collect_doctests(
    records: Iterable[DocumentationRecord],
    preamble: ExecutionContext | None = None,
    comment: str = DEFAULT_COMMENT,
) -> Iterator[DocTest]:
    """Yield a DocTest for each executable example in the records."""
    if preamble is None:
        preamble = ExecutionContext.root()
    for example in extract_examples(records):
        yield DocTest(example.name, example.code, preamble, comment=comment)


def run_doctest(doctest: DocTest) -> DocTestOutcome:
    """Run one doctest and return its outcome instead of raising."""
    try:
        doctest.run()
    except ExecutionFailure as exc:
        logger.info("Doctest %s raised: %s", doctest.name, exc.description)
        return DocTestOutcome(name=doctest.name, status=STATUS_ERROR, message=exc.description)
    except VerificationFailure as exc:
        logger.info("Doctest %s failed: %s", doctest.name, exc)
        return DocTestOutcome(
            name=doctest.name,
            status=STATUS_FAILED,
            message=f"{exc}",
            expected=getattr(exc, "expected", None),
            actual=getattr(exc, "actual", None),
        )
    return DocTestOutcome(name=doctest.name, status=STATUS_PASSED)


def run_doctests(doctests: Iterable[DocTest]) -> list[DocTestOutcome]:
    """Run doctests one after another; a failure does not stop the others."""
    outcomes = [run_doctest(doctest) for doctest in doctests]
    failed = sum(1 for outcome in outcomes if not outcome.passed)
    logger.debug("Ran %d doctests, %d failed", len(outcomes), failed)
    return outcomes
