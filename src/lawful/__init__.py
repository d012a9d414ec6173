from .errors import ArityError, CapabilityNotFound, LawfulError, LawViolation
from .kernel import (
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
    derive_tuple,
    derive_tuple_equal,
)
from .laws import Law, LawCheckConfig, LawReport, LawResult, Laws
from .registry import CapabilityRegistry, default_registry, summon

__all__ = [
    # Capabilities
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
    "derive_tuple_equal",
    "Nested",
    "Both",
    # Resolution
    "CapabilityRegistry",
    "default_registry",
    "summon",
    # Laws
    "Law",
    "Laws",
    "LawCheckConfig",
    "LawResult",
    "LawReport",
    # Errors
    "LawfulError",
    "CapabilityNotFound",
    "ArityError",
    "LawViolation",
]
