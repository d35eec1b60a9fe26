"""Comparing captured output against expected output lines."""

from __future__ import annotations

from .exceptions import NonEmptyStderr, OutputMismatch
from .lines import comparable_lines, split_lines

__all__ = ["verify"]


def verify(expected: list[str], stdout: str, stderr: str) -> None:
    """
    Check captured output against the expected lines.

    Standard error must be empty. Standard output, split into lines, must
    equal the expected lines, ignoring one trailing empty line on each side.
    """
    if stderr != "":
        raise NonEmptyStderr(stderr)
    expected_lines = comparable_lines(expected)
    actual_lines = comparable_lines(split_lines(stdout))
    if actual_lines != expected_lines:
        raise OutputMismatch(expected_lines, actual_lines)
