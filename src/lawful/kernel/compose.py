"""Composite type constructors built from two others.

`Nested(outer, inner)` describes values shaped `outer[inner[A]]`;
`Both(left, right)` describes pairs `(left[A], right[A])`. Given Covariant and
IdentityBoth for the parts, both composites have Covariant and IdentityBoth
too, and so an Applicative.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lawful.kernel.covariant import Covariant, IdentityBoth
from lawful.kernel.derive import DeriveEqual
from lawful.kernel.equal import Equal


@dataclass(frozen=True)
class Nested:
    """Tag for the constructor `outer[inner[_]]`."""

    outer: Any
    inner: Any


@dataclass(frozen=True)
class Both:
    """Tag for the constructor `(left[_], right[_])`."""

    left: Any
    right: Any


@dataclass(frozen=True)
class NestedCovariant(Covariant[Nested]):
    outer: Covariant[Any]
    inner: Covariant[Any]

    def map(self, f: Callable[[Any], Any], fa: Any) -> Any:
        return self.outer.map(lambda ga: self.inner.map(f, ga), fa)


@dataclass(frozen=True)
class NestedIdentityBoth(IdentityBoth[Nested]):
    """Pairs the outer layers, then pairs the inner layers inside them."""

    outer_covariant: Covariant[Any]
    outer: IdentityBoth[Any]
    inner: IdentityBoth[Any]

    @property
    def any(self) -> Any:
        return self.outer_covariant.map(lambda _: self.inner.any, self.outer.any)

    def both(self, fa: Any, fb: Any) -> Any:
        return self.outer_covariant.map(
            lambda pair: self.inner.both(pair[0], pair[1]),
            self.outer.both(fa, fb),
        )


@dataclass(frozen=True)
class NestedDeriveEqual(DeriveEqual[Nested]):
    outer: DeriveEqual[Any]
    inner: DeriveEqual[Any]

    def derive(self, equal: Equal[Any]) -> Equal[Any]:
        return self.outer.derive(self.inner.derive(equal))


@dataclass(frozen=True)
class BothCovariant(Covariant[Both]):
    left: Covariant[Any]
    right: Covariant[Any]

    def map(self, f: Callable[[Any], Any], fa: Any) -> Any:
        fl, fr = fa
        return (self.left.map(f, fl), self.right.map(f, fr))


@dataclass(frozen=True)
class BothIdentityBoth(IdentityBoth[Both]):
    left: IdentityBoth[Any]
    right: IdentityBoth[Any]

    @property
    def any(self) -> Any:
        return (self.left.any, self.right.any)

    def both(self, fa: Any, fb: Any) -> Any:
        (la, ra), (lb, rb) = fa, fb
        return (self.left.both(la, lb), self.right.both(ra, rb))


@dataclass(frozen=True)
class BothDeriveEqual(DeriveEqual[Both]):
    left: DeriveEqual[Any]
    right: DeriveEqual[Any]

    def derive(self, equal: Equal[Any]) -> Equal[Any]:
        left, right = self.left.derive(equal), self.right.derive(equal)
        return Equal.make(lambda l, r: left.equal(l[0], r[0]) and right.equal(l[1], r[1]))
