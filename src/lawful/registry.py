"""Capability registry - explicit resolution of instances by capability and type.

Instances are registered under a `(capability, tag)` key, where the tag is a
class (`int`), a parameterized alias (`tuple[int, str]`, `list[int]`) or a
composite constructor tag (`Nested(list, list)`). Lookups that are not
registered directly are answered by refinement (an `Identity` satisfies
`Associative`) and then by derivation rules.

Variadic aliases such as `tuple[int, ...]` are not resolved, and a parameterized
alias never falls back to the instance registered for its bare class.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar, get_args, get_origin

from lawful.errors import CapabilityNotFound
from lawful.instances import (
    BOOL_ANY,
    DICT_DERIVE_IDENTITY,
    INT_SUM,
    LAWS_CONCAT,
    LIST_CONCAT,
    LIST_COVARIANT,
    LIST_DERIVE_EQUAL,
    LIST_IDENTITY_BOTH,
    STR_CONCAT,
    TUPLE_CONCAT,
)
from lawful.kernel import (
    Applicative,
    ApplicativeDeriveEqual,
    Associative,
    Both,
    Covariant,
    Derive,
    DeriveEqual,
    Equal,
    Identity,
    IdentityBoth,
    Nested,
    derive_product,
    derive_tuple_equal,
)
from lawful.kernel.compose import (
    BothCovariant,
    BothDeriveEqual,
    BothIdentityBoth,
    NestedCovariant,
    NestedDeriveEqual,
    NestedIdentityBoth,
)
from lawful.laws import Laws

logger = logging.getLogger(__name__)

C = TypeVar("C")

# A rule returns an instance of `capability` for `tag`, or None if it does not
# apply. It may summon other instances from the registry it is given.
Rule = Callable[["CapabilityRegistry", type, Any], Any]


class CapabilityRegistry:
    """Registry mapping (capability, tag) pairs to instances."""

    def __init__(self, rules: Iterable[Rule] | None = None, derive_builtin: bool = True) -> None:
        self._instances: dict[tuple[type, Any], Any] = {}
        self._resolved: dict[tuple[type, Any], Any] = {}
        self._rules: list[Rule] = list(BUILTIN_RULES) if derive_builtin else []
        self._rules.extend(rules or ())

    def register(self, capability: type[C], tag: Any, instance: C) -> None:
        """Register the canonical instance of `capability` for `tag`.

        A later registration for the same key replaces the earlier one.
        """
        if not isinstance(instance, capability):
            raise TypeError(f"{instance!r} is not a {capability.__name__} instance")
        # Derive instances are keyed by (constructor, derived capability)
        if capability is Derive and not (isinstance(tag, tuple) and len(tag) == 2):
            raise TypeError("Derive instances are registered under a (constructor, capability) tag")
        key = (capability, tag)
        if key in self._instances:
            logger.debug("replacing %s instance for %r", capability.__name__, tag)
        self._instances[key] = instance
        self._resolved.clear()

    def add_rule(self, rule: Rule) -> None:
        """Add a derivation rule, tried after the existing ones."""
        self._rules.append(rule)
        self._resolved.clear()

    def registered(self, capability: type[C]) -> Iterator[tuple[Any, C]]:
        """Yield (tag, instance) for every instance registered under a
        capability refining `capability`."""
        for (cap, tag), instance in self._instances.items():
            if issubclass(cap, capability):
                yield tag, instance

    def summon(self, capability: type[C], tag: Any) -> C:
        """Return the instance of `capability` for `tag`.

        Raises:
            CapabilityNotFound: If no instance is registered or derivable.
        """
        key = (capability, tag)
        if key in self._instances:
            return self._instances[key]
        if key in self._resolved:
            return self._resolved[key]

        instance = self._refined(capability, tag)
        if instance is None:
            instance = self._derive(capability, tag)
        self._resolved[key] = instance
        return instance

    def get(self, capability: type[C], tag: Any, default: Any = None) -> Any:
        try:
            return self.summon(capability, tag)
        except CapabilityNotFound:
            return default

    def identity_for(self, value: Any) -> Any:
        """The identity element of the Identity instance for `type(value)`."""
        return self.summon(Identity, type(value)).identity

    def __getitem__(self, key: tuple[type[C], Any]) -> C:
        capability, tag = key
        return self.summon(capability, tag)

    def __setitem__(self, key: tuple[type[C], Any], instance: C) -> None:
        capability, tag = key
        self.register(capability, tag, instance)

    def contains(self, capability: type, tag: Any) -> bool:
        """Whether an instance of `capability` for `tag` can be resolved."""
        return self.get(capability, tag) is not None

    def __contains__(self, key: tuple[type, Any]) -> bool:
        capability, tag = key
        return self.contains(capability, tag)

    def _refined(self, capability: type, tag: Any) -> Any:
        for (cap, registered_tag), instance in self._instances.items():
            if registered_tag == tag and issubclass(cap, capability):
                return instance
        return None

    def _derive(self, capability: type, tag: Any) -> Any:
        missing: CapabilityNotFound | None = None
        for rule in self._rules:
            try:
                instance = rule(self, capability, tag)
            except CapabilityNotFound as exc:
                missing = missing or exc
                continue
            if instance is not None:
                logger.debug("derived %s for %r via %r", capability.__name__, tag, rule)
                return instance
        if missing is not None:
            raise CapabilityNotFound(capability, tag) from missing
        raise CapabilityNotFound(capability, tag)


def derive_tuple_rule(registry: CapabilityRegistry, capability: type, tag: Any) -> Any:
    """Slot-wise instances for `tuple[A, B, ...]`."""
    if get_origin(tag) is not tuple:
        return None
    args = get_args(tag)
    if Ellipsis in args:
        return None
    if capability is Equal:
        return derive_tuple_equal(*(registry.summon(Equal, arg) for arg in args))
    if capability in (Associative, Identity):
        return derive_product(tuple(registry.summon(capability, arg) for arg in args))
    return None


def composite_rule(registry: CapabilityRegistry, capability: type, tag: Any) -> Any:
    """Applicative capabilities assembled from their parts."""
    if capability is ApplicativeDeriveEqual:
        return ApplicativeDeriveEqual.make(
            registry.summon(Covariant, tag),
            registry.summon(IdentityBoth, tag),
            registry.summon(DeriveEqual, tag),
        )
    if capability is Applicative:
        return Applicative.make(
            registry.summon(Covariant, tag),
            registry.summon(IdentityBoth, tag),
        )
    return None


def compose_rule(registry: CapabilityRegistry, capability: type, tag: Any) -> Any:
    """Capabilities of `Nested` and `Both` constructors from their parts."""
    if isinstance(tag, Nested):
        if capability is Covariant:
            return NestedCovariant(
                registry.summon(Covariant, tag.outer),
                registry.summon(Covariant, tag.inner),
            )
        if capability is IdentityBoth:
            return NestedIdentityBoth(
                registry.summon(Covariant, tag.outer),
                registry.summon(IdentityBoth, tag.outer),
                registry.summon(IdentityBoth, tag.inner),
            )
        if capability is DeriveEqual:
            return NestedDeriveEqual(
                registry.summon(DeriveEqual, tag.outer),
                registry.summon(DeriveEqual, tag.inner),
            )
    if isinstance(tag, Both):
        if capability is Covariant:
            return BothCovariant(
                registry.summon(Covariant, tag.left),
                registry.summon(Covariant, tag.right),
            )
        if capability is IdentityBoth:
            return BothIdentityBoth(
                registry.summon(IdentityBoth, tag.left),
                registry.summon(IdentityBoth, tag.right),
            )
        if capability is DeriveEqual:
            return BothDeriveEqual(
                registry.summon(DeriveEqual, tag.left),
                registry.summon(DeriveEqual, tag.right),
            )
    return None


def derive_equal_rule(registry: CapabilityRegistry, capability: type, tag: Any) -> Any:
    """Equal for `F[A]` from DeriveEqual for `F` and Equal for `A`."""
    origin = get_origin(tag)
    if capability is not Equal or origin is None or origin is tuple:
        return None
    args = get_args(tag)
    if len(args) != 1:
        return None
    return registry.summon(DeriveEqual, origin).derive(registry.summon(Equal, args[0]))


def derive_rule(registry: CapabilityRegistry, capability: type, tag: Any) -> Any:
    """Instances for `F[..., A]` from a `Derive` registered under `(F, C)`.

    `C` may refine the requested capability, so a `Derive[F, Identity]` also
    answers requests for Associative.
    A `Derive` with `requires` set summons that weaker capability for `A`.
    """
    origin = get_origin(tag)
    args = get_args(tag)
    if origin is None or origin is tuple or not args:
        return None
    for key, derive in registry.registered(Derive):
        constructor, derived = key
        if constructor is origin and issubclass(derived, capability):
            needs = derive.requires or derived
            return derive.derive(registry.summon(needs, args[-1]))
    return None


BUILTIN_RULES: tuple[Rule, ...] = (
    derive_tuple_rule,
    composite_rule,
    compose_rule,
    derive_equal_rule,
    derive_rule,
)


def default_registry() -> CapabilityRegistry:
    """Create a registry holding the standard instances."""
    registry = CapabilityRegistry()

    registry.register(Identity, int, INT_SUM)
    registry.register(Identity, bool, BOOL_ANY)
    registry.register(Identity, str, STR_CONCAT)
    registry.register(Identity, tuple, TUPLE_CONCAT)
    registry.register(Identity, list, LIST_CONCAT)
    registry.register(Identity, Laws, LAWS_CONCAT)

    for tag in (int, bool, str, float, bytes):
        registry.register(Equal, tag, Equal.default())

    registry.register(Covariant, list, LIST_COVARIANT)
    registry.register(IdentityBoth, list, LIST_IDENTITY_BOTH)
    registry.register(DeriveEqual, list, LIST_DERIVE_EQUAL)
    registry.register(Derive, (dict, Identity), DICT_DERIVE_IDENTITY)
    return registry


_default: CapabilityRegistry | None = None


def summon(capability: type[C], tag: Any) -> C:
    """Resolve an instance from the shared default registry."""
    global _default
    if _default is None:
        _default = default_registry()
    return _default.summon(capability, tag)
