class DocTestException(Exception):
    """Base exception for doctest errors."""


class DocumentationException(DocTestException):
    """Raised when a documentation source cannot be read or parsed."""


class MissingDocumentationException(DocumentationException):
    """Raised when a documentation file does not exist."""


class ExecutionFailure(DocTestException):
    """Raised when example code fails to compile or raises while running."""

    def __init__(self, description: str, stdout: str = "", stderr: str = "") -> None:
        super().__init__(description)
        self.description = description
        self.stdout = stdout
        self.stderr = stderr


class VerificationFailure(DocTestException):
    """Raised when captured output does not match the example."""


class NonEmptyStderr(VerificationFailure):
    """Raised when an example writes to standard error."""

    def __init__(self, stderr: str) -> None:
        super().__init__(f"Expected no output on stderr, got {stderr!r}.")
        self.stderr = stderr


class OutputMismatch(VerificationFailure):
    """Raised when captured stdout lines differ from the expected lines."""

    def __init__(self, expected: list[str], actual: list[str]) -> None:
        super().__init__(f"Expected output {expected!r}, got {actual!r}.")
        self.expected = expected
        self.actual = actual


class CaptureActiveException(DocTestException):
    """Raised when a capture window is opened while another one is active."""
