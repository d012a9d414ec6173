"""Covariant and IdentityBoth capabilities for type constructors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

from lawful.laws import COVARIANT_LAWS, Laws

F = TypeVar("F")


class Covariant(ABC, Generic[F]):
    """Maps a function over the values held by `F[A]`."""

    laws: ClassVar[Laws] = COVARIANT_LAWS

    @abstractmethod
    def map(self, f: Callable[[Any], Any], fa: Any) -> Any:
        pass


class IdentityBoth(ABC, Generic[F]):
    """Combines two independent `F` values into an `F` of pairs.

    `any` is the unit: an `F` holding `()` that leaves the other side
    unchanged (up to pairing) when passed to `both`.
    """

    @property
    @abstractmethod
    def any(self) -> Any:
        pass

    @abstractmethod
    def both(self, fa: Any, fb: Any) -> Any:
        pass
