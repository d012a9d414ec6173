"""Error types for capability resolution and law checking."""

from __future__ import annotations

from typing import Any


class LawfulError(Exception):
    """Base class for all errors raised by lawful."""


class CapabilityNotFound(LawfulError, LookupError):
    """Raised when no instance of a capability can be resolved for a tag.

    Keeps the requested capability and tag so callers can report what was
    missing.
    """

    def __init__(self, capability: type, tag: Any) -> None:
        self.capability = capability
        self.tag = tag
        super().__init__(f"No {capability.__name__} instance for {tag!r}")


class ArityError(LawfulError, TypeError):
    """Raised when a product or a law receives the wrong number of values."""

    def __init__(self, message: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ArityError({super().__repr__()}, expected={self.expected}, actual={self.actual})"


class LawViolation(LawfulError, AssertionError):
    """Raised by LawReport.raise_for_failures() when any law failed."""

    def __init__(self, failures: list[Any]) -> None:
        self.failures = failures
        names = ", ".join(sorted({f.law for f in failures}))
        super().__init__(f"{len(failures)} law check(s) failed: {names}")
