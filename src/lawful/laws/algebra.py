"""Laws of the algebraic capabilities."""

from __future__ import annotations

from typing import Any

from lawful.laws.law import EqualFn, Laws, equivalent, law


@law("associativity_law", 3)
def associativity_law(eq: EqualFn, instance: Any, a: Any, b: Any, c: Any) -> tuple[bool, str]:
    """(a * b) * c === a * (b * c)"""
    left = instance.combine(instance.combine(a, b), c)
    right = instance.combine(a, instance.combine(b, c))
    return equivalent(eq, left, right)


@law("left_identity_law", 1)
def left_identity_law(eq: EqualFn, instance: Any, a: Any) -> tuple[bool, str]:
    """identity * a === a"""
    return equivalent(eq, instance.combine(instance.identity, a), a)


@law("right_identity_law", 1)
def right_identity_law(eq: EqualFn, instance: Any, a: Any) -> tuple[bool, str]:
    """a * identity === a"""
    return equivalent(eq, instance.combine(a, instance.identity), a)


@law("covariant_identity_law", 1)
def covariant_identity_law(eq: EqualFn, instance: Any, fa: Any) -> tuple[bool, str]:
    """map(identity, fa) === fa"""
    return equivalent(eq, instance.map(lambda a: a, fa), fa)


ASSOCIATIVE_LAWS = Laws.of(associativity_law)

IDENTITY_LAWS = left_identity_law + right_identity_law

COVARIANT_LAWS = Laws.of(covariant_identity_law)
