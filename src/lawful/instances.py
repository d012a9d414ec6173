"""Standard instances for builtin types and type constructors."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lawful.kernel import (
    Associative,
    Covariant,
    Derive,
    DeriveEqual,
    Equal,
    Identity,
    IdentityBoth,
)
from lawful.laws import Laws

INT_SUM: Identity[int] = Identity.make(0, operator.add)
INT_PRODUCT: Identity[int] = Identity.make(1, operator.mul)
INT_MAX: Associative[int] = Associative.make(max)
INT_MIN: Associative[int] = Associative.make(min)
BOOL_ANY: Identity[bool] = Identity.make(False, operator.or_)
BOOL_ALL: Identity[bool] = Identity.make(True, operator.and_)
STR_CONCAT: Identity[str] = Identity.make("", operator.add)
TUPLE_CONCAT: Identity[tuple[Any, ...]] = Identity.make((), operator.add)
LAWS_CONCAT: Identity[Laws] = Identity.make(Laws.empty(), operator.add)


@dataclass(frozen=True)
class ListConcat(Identity[list[Any]]):
    """List concatenation; each access to the identity gives a new empty list."""

    @property
    def identity(self) -> list[Any]:
        return []

    def combine(self, l: list[Any], r: list[Any]) -> list[Any]:
        return l + r


@dataclass(frozen=True)
class ListCovariant(Covariant[list]):
    def map(self, f: Callable[[Any], Any], fa: list[Any]) -> list[Any]:
        return [f(a) for a in fa]


@dataclass(frozen=True)
class ListIdentityBoth(IdentityBoth[list]):
    """Every pairing of the two lists, left elements varying slowest."""

    @property
    def any(self) -> list[Any]:
        return [()]

    def both(self, fa: list[Any], fb: list[Any]) -> list[tuple[Any, Any]]:
        return [(a, b) for a in fa for b in fb]


@dataclass(frozen=True)
class ListDeriveEqual(DeriveEqual[list]):
    def derive(self, equal: Equal[Any]) -> Equal[list[Any]]:
        def list_equal(l: list[Any], r: list[Any]) -> bool:
            return len(l) == len(r) and all(equal.equal(x, y) for x, y in zip(l, r))

        return Equal.make(list_equal)


@dataclass(frozen=True)
class DictIdentity(Identity[dict[Any, Any]]):
    """Key union; values under a shared key are combined left to right."""

    values: Associative[Any]

    @property
    def identity(self) -> dict[Any, Any]:
        return {}

    def combine(self, l: dict[Any, Any], r: dict[Any, Any]) -> dict[Any, Any]:
        result = dict(l)
        for key, value in r.items():
            result[key] = self.values.combine(result[key], value) if key in result else value
        return result


@dataclass(frozen=True)
class DictDeriveIdentity(Derive[dict, Identity[Any]]):
    """Only needs the values to be Associative."""

    requires = Associative

    def derive(self, instance: Associative[Any]) -> Identity[dict[Any, Any]]:
        return DictIdentity(instance)


LIST_CONCAT: Identity[list[Any]] = ListConcat()
LIST_COVARIANT = ListCovariant()
LIST_IDENTITY_BOTH = ListIdentityBoth()
LIST_DERIVE_EQUAL = ListDeriveEqual()
DICT_DERIVE_IDENTITY = DictDeriveIdentity()
