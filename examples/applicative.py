from __future__ import annotations

from lawful import ApplicativeDeriveEqual, Both, Equal, Nested, default_registry


def main() -> None:
    registry = default_registry()

    lists = registry.summon(ApplicativeDeriveEqual, list)
    print("map2:", lists.map2(lambda a, b: f"{a}{b}", [1, 2], ["x", "y"]))
    print("equal:", lists.derive(Equal.default()).equal([1, 2], [1, 2]))

    nested = registry.summon(ApplicativeDeriveEqual, Nested(list, list))
    print("nested map:", nested.map(lambda x: x * 10, [[1], [2, 3]]))

    both = registry.summon(ApplicativeDeriveEqual, Both(list, list))
    print("both:", both.both(([1], [2]), (["a"], ["b"])))


if __name__ == "__main__":
    main()
