"""Law registry - laws as data, law-sets and their results."""

from lawful.laws.algebra import (
    ASSOCIATIVE_LAWS,
    COVARIANT_LAWS,
    IDENTITY_LAWS,
    associativity_law,
    covariant_identity_law,
    left_identity_law,
    right_identity_law,
)
from lawful.laws.law import Law, LawCheckConfig, Laws, equivalent, law
from lawful.laws.result import LawReport, LawResult

__all__ = [
    "Law",
    "Laws",
    "LawCheckConfig",
    "LawResult",
    "LawReport",
    "law",
    "equivalent",
    # Algebraic laws
    "associativity_law",
    "left_identity_law",
    "right_identity_law",
    "covariant_identity_law",
    "ASSOCIATIVE_LAWS",
    "IDENTITY_LAWS",
    "COVARIANT_LAWS",
]
