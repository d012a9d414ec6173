"""Laws as data.

A law is a named predicate of fixed arity over a capability instance and that
many sample values. Laws combine with `+` into a `Laws` set; combination is
associative and `Laws.empty()` is its identity, so law-sets contributed by
different capabilities can be added up in any grouping.
"""

from __future__ import annotations

import itertools
import logging
import operator
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol

from lawful.errors import ArityError
from lawful.laws.result import LawReport, LawResult

logger = logging.getLogger(__name__)

EqualFn = Callable[[Any, Any], bool]

# A predicate receives the equality to use, the instance, then the samples.
# It returns a bool, or a (bool, message) pair to explain a failure.
Predicate = Callable[..., "bool | tuple[bool, str]"]


class SupportsEqual(Protocol):
    def equal(self, l: Any, r: Any) -> bool: ...


def equivalent(eq: EqualFn, actual: Any, expected: Any) -> tuple[bool, str]:
    """Compare with `eq`, explaining the mismatch when there is one."""
    return eq(actual, expected), f"{actual!r} is not equal to {expected!r}"


@dataclass(frozen=True)
class LawCheckConfig:
    """Options for Laws.check().

    Attributes:
        fail_fast: Stop at the first failing check.
        max_examples: Upper bound on sample combinations evaluated per law.
    """

    fail_fast: bool = False
    max_examples: int | None = None

    def __post_init__(self) -> None:
        if self.max_examples is not None and self.max_examples <= 0:
            raise ValueError("max_examples must be positive")


@dataclass(frozen=True)
class Law:
    """A named predicate consuming `arity` samples of the governed type."""

    name: str
    arity: int
    predicate: Predicate

    def __post_init__(self) -> None:
        if self.arity < 0:
            raise ValueError("arity must not be negative")

    @staticmethod
    def law1(name: str) -> Callable[[Predicate], Law]:
        return law(name, 1)

    @staticmethod
    def law2(name: str) -> Callable[[Predicate], Law]:
        return law(name, 2)

    @staticmethod
    def law3(name: str) -> Callable[[Predicate], Law]:
        return law(name, 3)

    def check(self, instance: Any, *samples: Any, equal: SupportsEqual | None = None) -> LawResult:
        """Check this law for one combination of samples.

        Exceptions raised by the predicate are reported as failures.

        Raises:
            ArityError: If the number of samples does not match the arity.
        """
        if len(samples) != self.arity:
            raise ArityError(
                f"{self.name} takes {self.arity} sample(s), got {len(samples)}",
                expected=self.arity,
                actual=len(samples),
            )
        eq: EqualFn = operator.eq if equal is None else equal.equal
        try:
            verdict = self.predicate(eq, instance, *samples)
        except Exception as exc:
            logger.debug("law %s raised on %r", self.name, samples, exc_info=True)
            return LawResult.failure(self.name, f"raised {type(exc).__name__}: {exc}", samples)

        if isinstance(verdict, tuple):
            passed, message = verdict
        else:
            passed, message = bool(verdict), None
        if passed:
            return LawResult.success(self.name, samples)

        logger.debug("law %s failed on %r", self.name, samples)
        return LawResult.failure(self.name, message or f"does not hold for {samples!r}", samples)

    def __add__(self, other: Law | Laws) -> Laws:
        return Laws((self,)) + other


@dataclass(frozen=True)
class Laws:
    """An ordered collection of laws checked together."""

    laws: tuple[Law, ...] = ()

    @staticmethod
    def empty() -> Laws:
        return Laws()

    @staticmethod
    def of(*laws: Law) -> Laws:
        return Laws(tuple(laws))

    @property
    def names(self) -> list[str]:
        return [law.name for law in self.laws]

    def __add__(self, other: Law | Laws) -> Laws:
        if isinstance(other, Law):
            return Laws(self.laws + (other,))
        if isinstance(other, Laws):
            return Laws(self.laws + other.laws)
        return NotImplemented

    def __iter__(self) -> Iterator[Law]:
        return iter(self.laws)

    def __len__(self) -> int:
        return len(self.laws)

    def check(
        self,
        instance: Any,
        samples: Iterable[Any],
        equal: SupportsEqual | None = None,
        config: LawCheckConfig | None = None,
    ) -> LawReport:
        """Check every law on every `arity`-length combination of samples.

        Args:
            instance: The capability instance under test
            samples: Values of the governed type
            equal: Equality used to compare results, defaults to `==`
            config: Check options

        Returns:
            LawReport with one LawResult per evaluated combination
        """
        config = config or LawCheckConfig()
        pool = tuple(samples)
        results: list[LawResult] = []

        for law in self.laws:
            combos: Iterable[tuple[Any, ...]] = itertools.product(pool, repeat=law.arity)
            if config.max_examples is not None:
                combos = itertools.islice(combos, config.max_examples)
            for combo in combos:
                result = law.check(instance, *combo, equal=equal)
                results.append(result)
                if config.fail_fast and not result.passed:
                    return LawReport(results=results)

        return LawReport(results=results)


def law(name: str, arity: int) -> Callable[[Predicate], Law]:
    """Decorator turning a predicate function into a Law.

    Example:
        >>> @law("left_identity_law", 1)
        ... def left_identity(eq, instance, a):
        ...     return eq(instance.combine(instance.identity, a), a)
    """
    if arity < 0:
        raise ValueError("arity must not be negative")

    def wrap(predicate: Predicate) -> Law:
        return Law(name, arity, predicate)

    return wrap
