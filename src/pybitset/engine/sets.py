"""The :class:`Bitset` value type: a mutable set of integers in [1, 32]."""
from __future__ import annotations

from collections.abc import Iterable

from .bitset import (
    and_bits,
    check_element,
    check_word,
    clear_bits,
    count_bits,
    element_bit,
    make_bitset,
    or_bits,
    pop_lowest,
    set_bits,
    xor_bits,
)
from .errors import EmptySet, MissingElement, TypeMismatch
from .models import Operand, OperandKind


class BitsetIterator:
    """One-shot ascending iterator over a snapshot of a bitset's word."""

    __slots__ = ("_remaining",)

    def __init__(self, word: int) -> None:
        self._remaining = word

    def __iter__(self) -> BitsetIterator:
        return self

    def __next__(self) -> int:
        if not self._remaining:
            raise StopIteration
        element, self._remaining = pop_lowest(self._remaining)
        return element

    def __length_hint__(self) -> int:
        return count_bits(self._remaining)


class Bitset:
    """Bitset(iterable) --> Bitset object

    Build a set of integers in the range [1, 32], stored as one 32-bit word.
    A bare integer is not accepted as a seed; use :meth:`from_raw_bits` to
    restore a raw word.
    """

    __slots__ = ("_bits",)

    def __init__(self, elements: Iterable[object] = ()) -> None:
        self._bits = make_bitset(elements)

    @classmethod
    def from_raw_bits(cls, word: int) -> Bitset:
        """Build a bitset directly from a raw 32-bit word."""
        result = cls()
        result._bits = check_word(word)
        return result

    def raw_bits(self) -> int:
        return self._bits

    def _new(self, word: int) -> Bitset:
        result = type(self)()
        result._bits = word
        return result

    @staticmethod
    def _operand(other: Bitset | Iterable[object]) -> Operand:
        if isinstance(other, Bitset):
            return Operand(OperandKind.BITSET, other._bits)
        return Operand(OperandKind.SEQUENCE, make_bitset(other))

    # ---- membership ----
    def contains(self, element: object) -> bool:
        return bool(self._bits & element_bit(element))

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return count_bits(self._bits)

    def __iter__(self) -> BitsetIterator:
        return BitsetIterator(self._bits)

    # ---- mutation ----
    def add(self, element: object) -> None:
        """Add an element to a bitset.

        This has no effect if the element is already present.
        """
        self._bits = set_bits(self._bits, element_bit(element))

    def discard(self, element: object) -> None:
        """Remove an element from a bitset if it is a member.

        If the element is not a member, do nothing.
        """
        self._bits = clear_bits(self._bits, element_bit(element))

    def remove(self, element: object) -> None:
        """Remove an element from a bitset; it must be a member.

        If the element is not a member, raise :class:`MissingElement`.
        """
        bit = element_bit(element)
        if not self._bits & bit:
            raise MissingElement(check_element(element))
        self._bits = clear_bits(self._bits, bit)

    def pop(self) -> int:
        """Remove and return the lowest element."""
        if not self._bits:
            raise EmptySet()
        element, self._bits = pop_lowest(self._bits)
        return element

    def clear(self) -> None:
        self._bits = 0

    def copy(self) -> Bitset:
        return self._new(self._bits)

    __copy__ = copy

    # ---- in-place algebra ----
    def update(self, other: Bitset | Iterable[object]) -> None:
        """Update a bitset with the union of itself and another."""
        self._bits = or_bits(self._bits, self._operand(other).word)

    def intersection_update(self, other: Bitset | Iterable[object]) -> None:
        self._bits = and_bits(self._bits, self._operand(other).word)

    def difference_update(self, other: Bitset | Iterable[object]) -> None:
        """Remove all elements of another bitset from this bitset."""
        self._bits = clear_bits(self._bits, self._operand(other).word)

    def symmetric_difference_update(self, other: Bitset | Iterable[object]) -> None:
        self._bits = xor_bits(self._bits, self._operand(other).word)

    # ---- algebra returning a new bitset ----
    def union(self, other: Bitset | Iterable[object]) -> Bitset:
        """Return the union of two bitsets as a new bitset.

        (i.e. all elements that are in either bitset.)
        """
        result = self.copy()
        result.update(other)
        return result

    def intersection(self, other: Bitset | Iterable[object]) -> Bitset:
        """Return the intersection of two bitsets as a new bitset.

        (i.e. all elements that are in both bitsets.)
        """
        result = self.copy()
        result.intersection_update(other)
        return result

    def difference(self, other: Bitset | Iterable[object]) -> Bitset:
        """Return the difference of two bitsets as a new bitset.

        (i.e. all elements that are in this bitset but not the other.)
        """
        result = self.copy()
        result.difference_update(other)
        return result

    def symmetric_difference(self, other: Bitset | Iterable[object]) -> Bitset:
        """Return the symmetric difference of two bitsets as a new bitset.

        (i.e. all elements that are in exactly one of the bitsets.)
        """
        result = self.copy()
        result.symmetric_difference_update(other)
        return result

    # ---- predicates ----
    def issubset(self, other: Bitset | Iterable[object]) -> bool:
        """Report whether another bitset contains this bitset."""
        return clear_bits(self._bits, self._operand(other).word) == 0

    def issuperset(self, other: Bitset | Iterable[object]) -> bool:
        """Report whether this bitset contains another bitset."""
        return clear_bits(self._operand(other).word, self._bits) == 0

    def isdisjoint(self, other: Bitset | Iterable[object]) -> bool:
        """Return True if two bitsets have a null intersection."""
        return and_bits(self._bits, self._operand(other).word) == 0

    # ---- operators (bitset operands only) ----
    def __or__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.symmetric_difference(other)

    def __ior__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        self.update(other)
        return self

    def __iand__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        self.intersection_update(other)
        return self

    def __isub__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        self.difference_update(other)
        return self

    def __ixor__(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            return NotImplemented
        self.symmetric_difference_update(other)
        return self

    # ---- comparison ----
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitset):
            return False
        return self._bits == other._bits

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None  # mutable

    def _ordered(self, other: object) -> Bitset:
        if not isinstance(other, Bitset):
            raise TypeMismatch(other)
        return other

    def __le__(self, other: object) -> bool:
        return self.issubset(self._ordered(other))

    def __lt__(self, other: object) -> bool:
        other = self._ordered(other)
        return self._bits != other._bits and self.issubset(other)

    def __ge__(self, other: object) -> bool:
        return self.issuperset(self._ordered(other))

    def __gt__(self, other: object) -> bool:
        other = self._ordered(other)
        return self._bits != other._bits and self.issuperset(other)

    # ---- persistence / debug ----
    def __reduce__(self) -> tuple[type, tuple, int]:
        return (type(self), (), self._bits)

    def __setstate__(self, state: int) -> None:
        self._bits = check_word(state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


