"""Derivation capabilities for type constructors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from lawful.kernel.equal import Equal

F = TypeVar("F")
C = TypeVar("C")


class Derive(ABC, Generic[F, C]):
    """Lifts an instance of capability `C` for `A` to one for `F[A]`.

    `requires` names the capability needed for `A` when it is weaker than `C`;
    None means `C` itself.
    """

    requires: ClassVar[type | None] = None

    @abstractmethod
    def derive(self, instance: C) -> C:
        pass


class DeriveEqual(ABC, Generic[F]):
    """Derives equality of `F[A]` from equality of `A`."""

    @abstractmethod
    def derive(self, equal: Equal[Any]) -> Equal[Any]:
        pass
