"""Law check results - plain data, safe to serialize."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from lawful.errors import LawViolation


class LawResult(BaseModel):
    """Outcome of checking one law against one combination of samples."""

    model_config = ConfigDict(frozen=True)

    law: str
    passed: bool
    message: str | None = None
    samples: tuple[Any, ...] = ()

    @classmethod
    def success(cls, law: str, samples: tuple[Any, ...] = ()) -> Self:
        return cls(law=law, passed=True, samples=samples)

    @classmethod
    def failure(cls, law: str, message: str, samples: tuple[Any, ...] = ()) -> Self:
        return cls(law=law, passed=False, message=message, samples=samples)


class LawReport(BaseModel):
    """All results produced by checking a law-set against an instance.

    A report with no results passes vacuously.
    """

    results: list[LawResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[LawResult]:
        return [r for r in self.results if not r.passed]

    @property
    def checked(self) -> int:
        return len(self.results)

    def for_law(self, name: str) -> list[LawResult]:
        """Results recorded for the law called `name`."""
        return [r for r in self.results if r.law == name]

    def raise_for_failures(self) -> None:
        """Raise LawViolation if any law failed."""
        failures = self.failures
        if failures:
            raise LawViolation(failures)

    def __add__(self, other: LawReport) -> LawReport:
        return LawReport(results=self.results + other.results)
