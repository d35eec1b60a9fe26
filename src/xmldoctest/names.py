"""Mapping human-readable example names to identifiers."""

import re

__all__ = ["collectable_name", "sanitize_name"]

_SPECIAL_CHARS_REGEX = re.compile(r"[ <>*~`'\".,_\-+&#^@]")
_NON_IDENTIFIER_REGEX = re.compile(r"\W")


def sanitize_name(name: str) -> str:
    """Replace spaces and punctuation in a name with underscores."""
    return _SPECIAL_CHARS_REGEX.sub("_", name)


def collectable_name(name: str) -> str:
    """Return a method name for an example that pytest will collect."""
    # Names may still hold characters outside the sanitized set, e.g. brackets.
    return "test_" + _NON_IDENTIFIER_REGEX.sub("_", sanitize_name(name))
