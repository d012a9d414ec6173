"""Associative capability."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from lawful.laws import ASSOCIATIVE_LAWS, Laws

A = TypeVar("A")


class Associative(ABC, Generic[A]):
    """An associative binary operator over `A`.

    For all values `a`, `b` and `c`, `combine(combine(a, b), c)` must equal
    `combine(a, combine(b, c))`. This is not checked on construction; run
    `Associative.laws` against the instance to verify it.
    """

    laws: ClassVar[Laws] = ASSOCIATIVE_LAWS

    @abstractmethod
    def combine(self, l: A, r: A) -> A:
        pass

    @staticmethod
    def make(op: Callable[[A, A], A]) -> Associative[A]:
        """Constructs an Associative instance from a binary operator."""
        return CallableAssociative(op)


@dataclass(frozen=True)
class CallableAssociative(Associative[A]):
    op: Callable[[A, A], A]

    def combine(self, l: A, r: A) -> A:
        return self.op(l, r)
