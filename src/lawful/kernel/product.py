"""Derivation of capabilities for fixed-size tuples.

One algorithm serves every arity: the derived instance works slot by slot,
combining position `i` of the left tuple with position `i` of the right tuple
using the instance given for that position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lawful.errors import ArityError
from lawful.kernel.associative import Associative
from lawful.kernel.equal import Equal
from lawful.kernel.identity import Identity


def _require_arity(value: Any, arity: int) -> tuple[Any, ...]:
    if not isinstance(value, tuple):
        raise ArityError(
            f"Expected a tuple of {arity} values, got {type(value).__name__}",
            expected=arity,
            actual=-1,
        )
    if len(value) != arity:
        raise ArityError(
            f"Expected a tuple of {arity} values, got {len(value)}",
            expected=arity,
            actual=len(value),
        )
    return value


@dataclass(frozen=True)
class TupleAssociative(Associative[tuple[Any, ...]]):
    """Slot-wise combination of tuples."""

    components: tuple[Associative[Any], ...]

    @property
    def arity(self) -> int:
        return len(self.components)

    def combine(self, l: tuple[Any, ...], r: tuple[Any, ...]) -> tuple[Any, ...]:
        l = _require_arity(l, self.arity)
        r = _require_arity(r, self.arity)
        return tuple(c.combine(x, y) for c, x, y in zip(self.components, l, r))


@dataclass(frozen=True)
class TupleIdentity(TupleAssociative, Identity[tuple[Any, ...]]):
    """Slot-wise combination of tuples with the tuple of identities."""

    components: tuple[Identity[Any], ...]

    @property
    def identity(self) -> tuple[Any, ...]:
        return tuple(c.identity for c in self.components)


@dataclass(frozen=True)
class TupleEqual(Equal[tuple[Any, ...]]):
    components: tuple[Equal[Any], ...]

    def equal(self, l: tuple[Any, ...], r: tuple[Any, ...]) -> bool:
        if not isinstance(l, tuple) or not isinstance(r, tuple):
            return False
        if len(l) != len(self.components) or len(r) != len(self.components):
            return False
        return all(c.equal(x, y) for c, x, y in zip(self.components, l, r))


def derive_tuple(*instances: Associative[Any]) -> Associative[Any]:
    """Derive an instance for the tuple of the given slot instances.

    Returns an Identity when every slot is an Identity, otherwise an
    Associative. A single instance is returned as-is; no instances give the
    instance for the empty tuple.

    Example:
        >>> from lawful.instances import INT_SUM, STR_CONCAT
        >>> pair = derive_tuple(INT_SUM, STR_CONCAT)
        >>> pair.identity
        (0, '')
        >>> pair.combine((3, "ab"), (4, "cd"))
        (7, 'abcd')
    """
    if len(instances) == 1:
        return instances[0]
    return derive_product(instances)


def derive_product(components: tuple[Associative[Any], ...]) -> TupleAssociative:
    """Slot-wise instance for tuples shaped exactly like `components`.

    Unlike derive_tuple, a single component still yields an instance over
    1-tuples.
    """
    if all(isinstance(c, Identity) for c in components):
        return TupleIdentity(tuple(components))
    return TupleAssociative(tuple(components))


def derive_tuple_equal(*equals: Equal[Any]) -> Equal[Any]:
    """Slot-wise equality for tuples; a single instance is returned as-is."""
    if len(equals) == 1:
        return equals[0]
    return TupleEqual(tuple(equals))
