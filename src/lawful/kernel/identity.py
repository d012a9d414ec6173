"""Identity capability - an associative operator with an identity element."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from lawful.kernel.associative import Associative
from lawful.laws import IDENTITY_LAWS, Laws

if TYPE_CHECKING:
    from lawful.kernel.derive import Derive

A = TypeVar("A")


class Identity(Associative[A]):
    """An associative binary operator over `A` with an identity element.

    Combining any value with the identity element on either side must return
    the value unchanged. Zero is the identity element for integer addition and
    the empty string is the identity element for string concatenation.
    """

    laws: ClassVar[Laws] = IDENTITY_LAWS

    @property
    @abstractmethod
    def identity(self) -> A:
        """The identity element."""

    def combine_all(self, values: Iterable[A]) -> A:
        """Combine values left to right, starting from the identity."""
        result = self.identity
        for value in values:
            result = self.combine(result, value)
        return result

    @staticmethod
    def make(identity: A, op: Callable[[A, A], A]) -> Identity[A]:
        """Constructs an Identity instance from an identity element and an
        associative binary operator."""
        return CallableIdentity(identity, op)

    @staticmethod
    def derive(derive: Derive[Any, Identity[Any]], identity: Identity[A]) -> Identity[Any]:
        """Derives an `Identity[F[A]]` from a `Derive[F, Identity]` and an
        `Identity[A]`."""
        return derive.derive(identity)


@dataclass(frozen=True)
class CallableIdentity(Identity[A]):
    element: A
    op: Callable[[A, A], A]

    @property
    def identity(self) -> A:
        return self.element

    def combine(self, l: A, r: A) -> A:
        return self.op(l, r)
