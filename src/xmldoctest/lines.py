"""Splitting text and captured output into lines."""

import re
import textwrap

__all__ = ["NEWLINES", "comparable_lines", "dedent_code", "split_lines"]

NEWLINES = ("\r\n", "\n")

_NEWLINE_REGEX = re.compile("|".join(re.escape(newline) for newline in NEWLINES))

# A first line ending like this opens a block or continues on the next line.
_CONTINUATION_SUFFIXES = ("\\", ":", "(", "[", "{", ",")


def split_lines(text: str) -> list[str]:
    """Split text on CRLF or LF, keeping empty leading and trailing segments."""
    return _NEWLINE_REGEX.split(text)


def comparable_lines(lines: list[str]) -> list[str]:
    """Return lines without a single trailing empty segment."""
    if lines and lines[-1] == "":
        return list(lines[:-1])
    return list(lines)


def dedent_code(code: str) -> str:
    """
    Remove common indentation from a code block.

    A first line that starts right after its opening tag, with the lines below
    it indented like the tag, is left out of the common indentation.
    """
    first, newline, rest = code.partition("\n")
    if (
        first.strip()
        and not first[:1].isspace()
        and not first.rstrip().endswith(_CONTINUATION_SUFFIXES)
        and rest.strip()
    ):
        return first + newline + textwrap.dedent(rest)
    return textwrap.dedent(code)
