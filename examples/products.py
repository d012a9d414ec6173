from __future__ import annotations

import logging

from lawful import Identity, default_registry, derive_tuple
from lawful.instances import BOOL_ANY, INT_PRODUCT, INT_SUM, STR_CONCAT
from lawful.laws import ASSOCIATIVE_LAWS, IDENTITY_LAWS


def main() -> None:
    pair = derive_tuple(INT_SUM, STR_CONCAT)
    print("pair identity:", pair.identity)
    print("pair combine:", pair.combine((3, "ab"), (4, "cd")))

    triple = derive_tuple(INT_SUM, INT_PRODUCT, BOOL_ANY)
    print("triple identity:", triple.identity)

    # The same instances, resolved by type instead of assembled by hand
    registry = default_registry()
    resolved = registry.summon(Identity, tuple[int, str, dict[str, int]])
    samples = [(1, "a", {"k": 1}), (0, "", {}), (2, "b", {"j": 3})]
    report = (IDENTITY_LAWS + ASSOCIATIVE_LAWS).check(resolved, samples)
    print(f"laws: {report.checked} checks, passed={report.passed}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
