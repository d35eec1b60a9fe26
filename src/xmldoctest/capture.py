"""Capturing process-wide standard output and standard error."""

from __future__ import annotations

import io
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import CaptureActiveException

__all__ = ["CapturedOutput", "ConsoleRedirector", "capture"]

# sys.stdout and sys.stderr are shared by the whole process.
_capture_lock = threading.Lock()
_active = threading.local()


@dataclass(frozen=True)
class CapturedOutput:
    """Text written during one capture window, and the error raised, if any."""

    stdout: str
    stderr: str
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ConsoleRedirector:
    """
    Redirect sys.stdout and sys.stderr to buffers while the context is active.

    The previous streams are restored on exit, also when the body raised.
    Only one redirector can be active at a time; other threads wait for it.
    """

    def __init__(self) -> None:
        self._out_buffer = io.StringIO()
        self._err_buffer = io.StringIO()
        self._old_out = None
        self._old_err = None

    @property
    def captured_out(self) -> str:
        return self._out_buffer.getvalue()

    @property
    def captured_err(self) -> str:
        return self._err_buffer.getvalue()

    def __enter__(self) -> ConsoleRedirector:
        if getattr(_active, "redirector", None) is not None:
            raise CaptureActiveException("A capture window is already active in this thread.")
        _capture_lock.acquire()
        _active.redirector = self
        self._old_out = sys.stdout
        self._old_err = sys.stderr
        sys.stdout = self._out_buffer
        sys.stderr = self._err_buffer
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            sys.stdout = self._old_out
            sys.stderr = self._old_err
        finally:
            _active.redirector = None
            _capture_lock.release()


def capture(action: Callable[[], object]) -> CapturedOutput:
    """
    Run an action with standard output and standard error captured.

    Exceptions raised by the action are returned in the result together with
    whatever was written before the failure.
    """
    redirector = ConsoleRedirector()
    error = None
    with redirector:
        try:
            action()
        except (Exception, SystemExit) as exc:
            error = exc
    return CapturedOutput(stdout=redirector.captured_out, stderr=redirector.captured_err, error=error)
