"""Tests for doctest exceptions."""

from xmldoctest.exceptions import (
    CaptureActiveException,
    DocTestException,
    DocumentationException,
    ExecutionFailure,
    MissingDocumentationException,
    NonEmptyStderr,
    OutputMismatch,
    VerificationFailure,
)


def test_specific_exceptions_inherit_from_base():
    for exc_type in (DocumentationException, VerificationFailure, CaptureActiveException):
        error = exc_type("bad input")
        assert isinstance(error, exc_type)
        assert isinstance(error, DocTestException)
    assert isinstance(MissingDocumentationException("x"), DocumentationException)


def test_execution_failure_is_not_a_verification_failure():
    error = ExecutionFailure("ValueError: boom", stdout="out")
    assert str(error) == "ValueError: boom"
    assert error.stdout == "out"
    assert error.stderr == ""
    assert not isinstance(error, VerificationFailure)


def test_verification_failures_carry_details():
    mismatch = OutputMismatch(["a"], ["b"])
    assert isinstance(mismatch, VerificationFailure)
    assert (mismatch.expected, mismatch.actual) == (["a"], ["b"])
    stderr = NonEmptyStderr("oops")
    assert isinstance(stderr, VerificationFailure)
    assert "oops" in str(stderr)
