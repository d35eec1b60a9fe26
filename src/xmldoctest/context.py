"""Chained execution contexts for running example code."""

from __future__ import annotations

import ast
import asyncio
import inspect
from collections.abc import Iterable
from typing import Any

from .exceptions import ExecutionFailure
from .lines import dedent_code

__all__ = ["ExecutionContext"]


_COMPILE_FLAGS = ast.PyCF_ALLOW_TOP_LEVEL_AWAIT


class ExecutionContext:
    """
    Code to run, optionally after the code of a parent context.

    Contexts are immutable. Extending a context returns a new one and leaves
    the parent and any sibling extensions untouched, so one preamble can be
    shared by every example.
    """

    __slots__ = ("_code", "_filename", "_parent")

    def __init__(self, code: str = "", parent: ExecutionContext | None = None, filename: str = "<doctest>") -> None:
        self._code = code
        self._parent = parent
        self._filename = filename

    @classmethod
    def root(cls, code: str = "") -> ExecutionContext:
        """Return a context without a parent, holding the preamble code."""
        return cls(code, filename="<preamble>")

    @classmethod
    def from_usings(cls, usings: Iterable[str]) -> ExecutionContext:
        """Return a preamble importing the given modules."""
        return cls.root("".join(f"import {name}\n" for name in usings))

    @property
    def code(self) -> str:
        return self._code

    @property
    def parent(self) -> ExecutionContext | None:
        return self._parent

    def extend(self, code: str, filename: str = "<doctest>") -> ExecutionContext:
        """Return a context that runs this context's code, then the given code."""
        return ExecutionContext(code, parent=self, filename=filename)

    def chain(self) -> list[ExecutionContext]:
        """Return the contexts from the root down to this one."""
        contexts = []
        context: ExecutionContext | None = self
        while context is not None:
            contexts.append(context)
            context = context._parent
        contexts.reverse()
        return contexts

    def source(self) -> str:
        """Return the code of the whole chain as one string."""
        return "\n".join(dedent_code(context._code) for context in self.chain())

    def run(self, namespace: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Execute the chain top to bottom in one namespace and return it.

        A fresh namespace is used unless one is given. Any error raised while
        compiling or running the code is raised as ExecutionFailure.
        """
        if namespace is None:
            namespace = {"__name__": "__doctest__"}
        for context in self.chain():
            context._run_one(namespace)
        return namespace

    def _run_one(self, namespace: dict[str, Any]) -> None:
        try:
            code = compile(dedent_code(self._code), self._filename, "exec", flags=_COMPILE_FLAGS)
            result = eval(code, namespace)
            if inspect.isawaitable(result):
                asyncio.run(_await(result))
        except (Exception, SystemExit) as exc:
            raise ExecutionFailure(f"{type(exc).__name__}: {exc}") from exc


async def _await(awaitable):
    return await awaitable
