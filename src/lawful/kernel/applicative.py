"""Composite capabilities assembled from smaller ones.

Nothing here has an algorithm of its own: every operation delegates, unchanged,
to the capability it came from.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.kernel.covariant import Covariant, IdentityBoth
from lawful.kernel.derive import DeriveEqual
from lawful.kernel.equal import Equal

F = TypeVar("F")


class Applicative(Covariant[F], IdentityBoth[F]):
    """Covariant together with IdentityBoth."""

    def map2(self, f: Callable[[Any, Any], Any], fa: Any, fb: Any) -> Any:
        """Combine two independent values with `f`."""
        return self.map(lambda pair: f(*pair), self.both(fa, fb))

    def succeed(self, value: Any) -> Any:
        """Lift a plain value into `F` by replacing the unit."""
        return self.map(lambda _: value, self.any)

    @staticmethod
    def make(covariant: Covariant[F], identity_both: IdentityBoth[F]) -> Applicative[F]:
        return ComposedApplicative(covariant, identity_both)


class ApplicativeDeriveEqual(Applicative[F], DeriveEqual[F]):
    """Applicative that can also derive equality of `F[A]`."""

    @staticmethod
    def make(
        covariant: Covariant[F],
        identity_both: IdentityBoth[F],
        derive_equal: DeriveEqual[F],
    ) -> ApplicativeDeriveEqual[F]:
        return ComposedApplicativeDeriveEqual(covariant, identity_both, derive_equal)


@dataclass(frozen=True)
class ComposedApplicative(Applicative[F]):
    covariant: Covariant[F]
    identity_both: IdentityBoth[F]

    def map(self, f: Callable[[Any], Any], fa: Any) -> Any:
        return self.covariant.map(f, fa)

    @property
    def any(self) -> Any:
        return self.identity_both.any

    def both(self, fa: Any, fb: Any) -> Any:
        return self.identity_both.both(fa, fb)


@dataclass(frozen=True)
class ComposedApplicativeDeriveEqual(ApplicativeDeriveEqual[F]):
    covariant: Covariant[F]
    identity_both: IdentityBoth[F]
    derive_equal: DeriveEqual[F]

    def map(self, f: Callable[[Any], Any], fa: Any) -> Any:
        return self.covariant.map(f, fa)

    @property
    def any(self) -> Any:
        return self.identity_both.any

    def both(self, fa: Any, fb: Any) -> Any:
        return self.identity_both.both(fa, fb)

    def derive(self, equal: Equal[Any]) -> Equal[Any]:
        return self.derive_equal.derive(equal)
