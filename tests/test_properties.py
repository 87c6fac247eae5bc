"""Algebraic properties that hold for every bitset."""

import itertools
import random

import pytest

from pybitset import Bitset, InvalidElement

ELEMENTS = range(1, 33)

_rng = random.Random(1234)
WORDS = [0, 1, 0x80000000, 0xFFFFFFFF, 0x55555555, 0xAAAAAAAA] + [
    _rng.getrandbits(32) for _ in range(10)
]
SETS = [Bitset.from_raw_bits(word) for word in WORDS]
PAIRS = list(itertools.product(SETS, repeat=2))


@pytest.mark.parametrize("element", ELEMENTS)
def test_add_then_contains(element: int) -> None:
    b = Bitset()
    b.add(element)
    assert element in b
    b.add(element)
    assert len(b) == 1
    b.discard(element)
    assert element not in b


@pytest.mark.parametrize("element", [-5, 0, 33, 64, 2**40])
def test_out_of_range_elements_fail(element: int) -> None:
    b = Bitset([1, 2])
    for operation in (b.add, b.contains, b.remove, b.discard):
        with pytest.raises(InvalidElement):
            operation(element)
    assert b == Bitset([1, 2])


def test_cardinality_bounds() -> None:
    assert len(Bitset()) == 0
    assert len(Bitset(ELEMENTS)) == 32
    assert Bitset(ELEMENTS).raw_bits() == 0xFFFFFFFF


def test_raw_round_trip_samples() -> None:
    for word in WORDS + [1 << shift for shift in range(32)]:
        assert Bitset.from_raw_bits(word).raw_bits() == word


def test_len_matches_iteration() -> None:
    for b in SETS:
        members = list(b)
        assert len(b) == len(members)
        assert members == sorted(members)
        assert Bitset(members) == b


@pytest.mark.parametrize("a", SETS)
def test_self_operations(a: Bitset) -> None:
    assert a.union(a) == a
    assert a.intersection(a) == a
    assert a.difference(a) == Bitset()
    assert a.symmetric_difference(a) == Bitset()
    assert a <= a and a >= a
    assert not a < a and not a > a


def test_binary_laws() -> None:
    for a, b in PAIRS:
        assert a.union(b).difference(b).issubset(a)
        assert a.symmetric_difference(b) == a.union(b).difference(a.intersection(b))
        assert a.issubset(b) == b.issuperset(a)
        assert a.isdisjoint(b) == (len(a.intersection(b)) == 0)
        assert (a < b) == (a != b and a <= b)
        assert (a > b) == (a != b and a >= b)
        assert len(a.union(b)) == len(a) + len(b) - len(a.intersection(b))
        assert set(a.union(b)) == set(a) | set(b)
        assert set(a.difference(b)) == set(a) - set(b)


def test_partial_order() -> None:
    a, b = Bitset([1]), Bitset([2])
    assert not a.issubset(b) and not b.issubset(a)
    assert [a < b, a <= b, a > b, a >= b] == [False, False, False, False]


def test_pop_is_minimum() -> None:
    for b in SETS:
        b = b.copy()
        expected = sorted(b)
        popped = []
        while b:
            popped.append(b.pop())
        assert popped == expected


def test_disjoint_examples() -> None:
    assert Bitset([1, 2]).isdisjoint(Bitset([3, 4]))
    assert not Bitset([1, 2]).isdisjoint(Bitset([2, 3]))
