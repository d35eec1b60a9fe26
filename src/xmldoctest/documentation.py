"""Documentation records read from XML documentation files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import DocumentationException, MissingDocumentationException

__all__ = [
    "CodeBlock",
    "DocumentationRecord",
    "ExampleSection",
    "is_documentation",
    "load_documentation",
    "parse_documentation",
]

logger = logging.getLogger(__name__)

URL_SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class CodeBlock:
    """A code block inside an example section."""

    text: str
    doctest: bool = False


@dataclass(frozen=True)
class ExampleSection:
    """An example section with its declared name and code blocks."""

    name: str | None
    code_blocks: list[CodeBlock] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentationRecord:
    """A documented member, e.g. a type or a function."""

    name: str
    examples: list[ExampleSection] = field(default_factory=list)


def _soup(text: str):
    from bs4 import BeautifulSoup

    return BeautifulSoup(text, features="html.parser")


def is_documentation(text: str) -> bool:
    """Return True when the text looks like an XML documentation file."""
    return _soup(text).find("doc") is not None


def parse_documentation(text: str) -> list[DocumentationRecord]:
    """Parse an XML documentation file into documentation records."""
    soup = _soup(text)
    if soup.find("doc") is None:
        raise DocumentationException("Not an XML documentation file, no <doc> element found.")
    records = []
    for member in soup.find_all("member"):
        examples = []
        for example in member.find_all("example"):
            code_blocks = [
                CodeBlock(text=code.get_text(), doctest=code.get("doctest") == "true")
                for code in example.find_all("code", recursive=False)
            ]
            examples.append(ExampleSection(name=example.get("name"), code_blocks=code_blocks))
        records.append(DocumentationRecord(name=member.get("name", ""), examples=examples))
    logger.debug("Parsed %d documentation records", len(records))
    return records


def _read_url(url: str) -> str:
    import requests

    try:
        response = requests.get(url, timeout=30)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DocumentationException(f'Could not fetch documentation from "{url}": {exc}') from exc
    # XML documentation files are written with a byte order mark.
    return response.content.decode("utf-8-sig")


def _read_path(path: Path) -> str:
    if not path.is_file():
        raise MissingDocumentationException(f'Missing XML documentation file "{path}".')
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentationException(f'Could not read documentation file "{path}": {exc}') from exc


def load_documentation(source: str | Path) -> list[DocumentationRecord]:
    """
    Load documentation records from a file path or an http(s) URL.

    :param source: Path to an XML documentation file, or a URL serving one
    :return: Documentation records in document order
    """
    if isinstance(source, str) and source.startswith(URL_SCHEMES):
        logger.info("Fetching documentation from %s", source)
        text = _read_url(source)
    else:
        text = _read_path(Path(source))
    return parse_documentation(text)
