"""Locating the output marker and deriving expected output lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from .lines import split_lines

__all__ = [
    "DEFAULT_COMMENT",
    "OUTPUT_MARKER",
    "ParsedExample",
    "find_output_marker",
    "parse_expected",
    "strip_comment_prefix",
]

DEFAULT_COMMENT = "#"
OUTPUT_MARKER = "Output:"


@dataclass(frozen=True)
class ParsedExample:
    """Example code split at its output marker."""

    code: str
    expected: list[str]


@lru_cache(maxsize=None)
def _marker_regex(comment: str) -> re.Pattern[str]:
    token = re.escape(comment)
    marker = re.escape(OUTPUT_MARKER)
    return re.compile(rf"^[ \t]*{token}[ \t]*{marker}[ \t]*(?:\r?\n|$)", re.MULTILINE)


@lru_cache(maxsize=None)
def _prefix_regex(comment: str) -> re.Pattern[str]:
    return re.compile(rf"^\s*(?:{re.escape(comment)} ?)?")


def find_output_marker(code: str, comment: str = DEFAULT_COMMENT) -> re.Match[str] | None:
    """Return the first output marker line in the code, or None."""
    return _marker_regex(comment).search(code)


def strip_comment_prefix(line: str, comment: str = DEFAULT_COMMENT) -> str:
    """Remove leading whitespace, a comment token and a single space from a line."""
    return _prefix_regex(comment).sub("", line, count=1)


def parse_expected(code: str, comment: str = DEFAULT_COMMENT) -> ParsedExample:
    """
    Split example code into the exercised code and the expected output lines.

    Without a marker the remainder is empty, which yields a single empty line.
    """
    match = find_output_marker(code, comment)
    if match is None:
        exercised, remainder = code, ""
    else:
        exercised, remainder = code[: match.start()], code[match.end() :]
    expected = [strip_comment_prefix(line, comment) for line in split_lines(remainder)]
    return ParsedExample(code=exercised, expected=expected)
