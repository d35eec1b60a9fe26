"""Extracting executable examples from documentation records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .documentation import DocumentationRecord, ExampleSection

__all__ = ["Example", "example_name", "extract_examples"]

logger = logging.getLogger(__name__)

ORDINAL_SEPARATOR = " > "


@dataclass(frozen=True)
class Example:
    """One executable code block with its derived name."""

    name: str
    code: str
    record: str = ""

    def __str__(self) -> str:
        return self.name


def example_name(base: str, index: int, count: int) -> str:
    """Return the name of the block at index, given count flagged blocks in the section."""
    if count > 1:
        return f"{base}{ORDINAL_SEPARATOR}{index}"
    return base


def _section_examples(record: DocumentationRecord, section: ExampleSection) -> Iterator[Example]:
    blocks = [block for block in section.code_blocks if block.doctest]
    base = section.name if section.name is not None else record.name
    for index, block in enumerate(blocks):
        yield Example(name=example_name(base, index, len(blocks)), code=block.text, record=record.name)


def extract_examples(records: Iterable[DocumentationRecord]) -> Iterator[Example]:
    """Yield an Example for each flagged code block, in document order."""
    count = 0
    for record in records:
        for section in record.examples:
            for example in _section_examples(record, section):
                count += 1
                yield example
    logger.debug("Extracted %d examples", count)
