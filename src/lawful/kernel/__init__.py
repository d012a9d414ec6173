"""Kernel layer - capability interfaces and their derivations."""

from lawful.kernel.applicative import Applicative, ApplicativeDeriveEqual
from lawful.kernel.associative import Associative
from lawful.kernel.compose import Both, Nested
from lawful.kernel.covariant import Covariant, IdentityBoth
from lawful.kernel.derive import Derive, DeriveEqual
from lawful.kernel.equal import Equal
from lawful.kernel.identity import Identity
from lawful.kernel.product import derive_product, derive_tuple, derive_tuple_equal

__all__ = [
    "Equal",
    "Associative",
    "Identity",
    "Covariant",
    "IdentityBoth",
    "Derive",
    "DeriveEqual",
    "Applicative",
    "ApplicativeDeriveEqual",
    # Derivation
    "derive_tuple",
    "derive_product",
    "derive_tuple_equal",
    "Nested",
    "Both",
]
