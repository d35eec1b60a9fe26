"""Settings read from the [tool.xmldoctest] table of pyproject.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from .exceptions import DocTestException
from .generator import DEFAULT_CLASS_NAME
from .parsing import DEFAULT_COMMENT

__all__ = ["DocTestConfig", "find_pyproject", "load_config"]

PYPROJECT = "pyproject.toml"


@dataclass(frozen=True)
class DocTestConfig:
    usings: list[str] = field(default_factory=list)
    comment: str = DEFAULT_COMMENT
    class_name: str = DEFAULT_CLASS_NAME

    def override(
        self, usings: list[str] | None = None, comment: str | None = None, class_name: str | None = None
    ) -> DocTestConfig:
        """Return a copy with the given non-empty values replacing the configured ones."""
        changes: dict[str, object] = {}
        if usings:
            changes["usings"] = list(usings)
        if comment:
            changes["comment"] = comment
        if class_name:
            changes["class_name"] = class_name
        return replace(self, **changes)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml in start or one of its parents."""
    directory = (start or Path.cwd()).resolve()
    for candidate in (directory, *directory.parents):
        path = candidate / PYPROJECT
        if path.is_file():
            return path
    return None


def load_config(path: Path | None = None) -> DocTestConfig:
    """Load settings from a pyproject.toml file, falling back to defaults."""
    if path is None:
        path = find_pyproject()
        if path is None:
            return DocTestConfig()
    try:
        with open(path, "rb") as toml_file:
            data = tomllib.load(toml_file)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise DocTestException(f'Could not read configuration from "{path}": {exc}') from exc
    table = data.get("tool", {}).get("xmldoctest", {})
    usings = table.get("usings", [])
    if not isinstance(usings, list) or not all(isinstance(name, str) for name in usings):
        raise DocTestException(f'Setting "usings" in "{path}" must be a list of module names.')
    comment = table.get("comment", DEFAULT_COMMENT)
    if not isinstance(comment, str) or not comment:
        raise DocTestException(f'Setting "comment" in "{path}" must be a non-empty string.')
    class_name = table.get("class_name", DEFAULT_CLASS_NAME)
    if not isinstance(class_name, str):
        raise DocTestException(f'Setting "class_name" in "{path}" must be a string.')
    return DocTestConfig(usings=usings, comment=comment, class_name=class_name)
