"""Equal capability - equality as an explicit instance."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")


class Equal(ABC, Generic[A]):
    """Describes when two values of `A` are equal."""

    @abstractmethod
    def equal(self, l: A, r: A) -> bool:
        pass

    def not_equal(self, l: A, r: A) -> bool:
        return not self.equal(l, r)

    @staticmethod
    def make(fn: Callable[[A, A], bool]) -> Equal[A]:
        """Constructs an Equal instance from a comparison function."""
        return CallableEqual(fn)

    @staticmethod
    def default() -> Equal[Any]:
        """Equality by Python's `==`."""
        return _DEFAULT


@dataclass(frozen=True)
class CallableEqual(Equal[A]):
    fn: Callable[[A, A], bool]

    def equal(self, l: A, r: A) -> bool:
        return self.fn(l, r)


@dataclass(frozen=True)
class DefaultEqual(Equal[Any]):
    def equal(self, l: Any, r: Any) -> bool:
        return l == r


_DEFAULT = DefaultEqual()
