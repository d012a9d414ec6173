"""Tests for slot-wise derivation over tuples."""

import pytest
from hypothesis import given, strategies as st

from lawful import ArityError, Associative, Equal, Identity, derive_tuple, derive_tuple_equal
from lawful.instances import BOOL_ANY, INT_MAX, INT_PRODUCT, INT_SUM, STR_CONCAT
from lawful.kernel import derive_product
from lawful.laws import ASSOCIATIVE_LAWS, IDENTITY_LAWS

PAIR = derive_tuple(INT_SUM, STR_CONCAT)


def test_pair_identity_is_tuple_of_identities() -> None:
    assert PAIR.identity == (0, "")


def test_pair_combines_position_wise() -> None:
    assert PAIR.combine((3, "ab"), (4, "cd")) == (7, "abcd")


def test_triple_identity() -> None:
    triple = derive_tuple(INT_SUM, INT_PRODUCT, BOOL_ANY)
    assert triple.identity == (0, 1, False)
    assert triple.combine((1, 2, False), (3, 4, True)) == (4, 8, True)


def test_empty_product() -> None:
    unit = derive_tuple()
    assert isinstance(unit, Identity)
    assert unit.identity == ()
    assert unit.combine((), ()) == ()


def test_single_instance_is_returned_unchanged() -> None:
    assert derive_tuple(INT_SUM) is INT_SUM


def test_derive_product_keeps_single_slot_tuples() -> None:
    single = derive_product((INT_SUM,))
    assert single.identity == (0,)
    assert single.combine((1,), (2,)) == (3,)


def test_any_associative_slot_gives_associative() -> None:
    derived = derive_tuple(INT_SUM, INT_MAX)
    assert isinstance(derived, Associative)
    assert not isinstance(derived, Identity)
    assert derived.combine((1, 5), (2, 3)) == (3, 5)


def test_large_arity() -> None:
    instances = [INT_SUM, STR_CONCAT] * 11
    derived = derive_tuple(*instances)
    assert len(derived.identity) == 22
    left = tuple(i if n % 2 == 0 else "x" for n, i in enumerate(range(22)))
    combined = derived.combine(left, left)
    assert combined[0] == 0
    assert combined[1] == "xx"
    assert combined[20] == 40


def test_wrong_arity_is_rejected() -> None:
    with pytest.raises(ArityError) as info:
        PAIR.combine((1, "a", True), (2, "b"))
    assert info.value.expected == 2
    assert info.value.actual == 3


def test_non_tuple_is_rejected() -> None:
    with pytest.raises(ArityError):
        PAIR.combine([1, "a"], (2, "b"))


def test_tuple_equal() -> None:
    equal = derive_tuple_equal(Equal.default(), Equal.make(lambda l, r: l.lower() == r.lower()))
    assert equal.equal((1, "AB"), (1, "ab"))
    assert equal.not_equal((1, "AB"), (2, "ab"))
    assert not equal.equal((1, "AB"), (1, "ab", 3))


def test_tuple_equal_with_non_tuple_is_false() -> None:
    equal = derive_tuple_equal(Equal.default(), Equal.default())
    assert not equal.equal(1, (1, 2))
    assert not equal.equal((1, 2), [1, 2])
    assert equal.not_equal(None, (1, 2))


@given(
    st.tuples(st.integers(), st.text(max_size=4)),
    st.tuples(st.integers(), st.text(max_size=4)),
)
def test_combine_matches_independent_slots(l: tuple[int, str], r: tuple[int, str]) -> None:
    assert PAIR.combine(l, r) == (INT_SUM.combine(l[0], r[0]), STR_CONCAT.combine(l[1], r[1]))


@given(st.lists(st.tuples(st.integers(), st.integers(), st.booleans()), max_size=3))
def test_derived_instance_preserves_laws(samples: list[tuple[int, int, bool]]) -> None:
    triple = derive_tuple(INT_SUM, INT_PRODUCT, BOOL_ANY)
    (IDENTITY_LAWS + ASSOCIATIVE_LAWS).check(triple, samples).raise_for_failures()
