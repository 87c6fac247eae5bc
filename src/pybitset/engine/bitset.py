"""Word-level primitives for 32-bit element sets.

Element ``e`` in [1, 32] lives at bit ``e - 1`` of an unsigned 32-bit word.
Everything here works on plain ``int`` words; :mod:`pybitset.engine.sets`
wraps them in the :class:`~pybitset.engine.sets.Bitset` value type.
"""
from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

from .errors import InvalidElement, InvalidWord

MIN_ELEMENT = 1
MAX_ELEMENT = 32
WORD_MASK = 0xFFFFFFFF


def check_element(value: object) -> int:
    """Return ``value`` as an int in [1, 32] or raise :class:`InvalidElement`."""
    if isinstance(value, bool):
        raise InvalidElement(value)
    try:
        element = operator.index(value)
    except TypeError:
        raise InvalidElement(value) from None
    if element < MIN_ELEMENT or element > MAX_ELEMENT:
        raise InvalidElement(value)
    return element


def element_bit(value: object) -> int:
    return 1 << (check_element(value) - 1)


def check_word(word: object) -> int:
    if isinstance(word, bool) or not isinstance(word, int):
        raise InvalidWord(word)
    if word < 0 or word > WORD_MASK:
        raise InvalidWord(word)
    return word


def make_bitset(elements: Iterable[object]) -> int:
    """Fold ``elements`` into a word.

    The fold runs in a local accumulator, so a bad element aborts the whole
    call without the caller ever seeing a partial word.
    """
    value = 0
    for element in elements:
        value |= element_bit(element)
    return value


def count_bits(value: int) -> int:
    """Population count of a 32-bit word (SWAR reduction)."""
    value = value - ((value >> 1) & 0x55555555)
    value = (value & 0x33333333) + ((value >> 2) & 0x33333333)
    value = (value + (value >> 4)) & 0x0F0F0F0F
    return ((value * 0x01010101) & WORD_MASK) >> 24


def lowest_bit_index(value: int) -> int:
    """Position of the lowest set bit of a non-zero word.

    Binary search over the trailing zeros: odd words short-circuit, then the
    16/8/4/2-bit halves are tested in turn.
    """
    if value & 0x1:
        return 0
    index = 1
    if (value & 0xFFFF) == 0:
        value >>= 16
        index += 16
    if (value & 0xFF) == 0:
        value >>= 8
        index += 8
    if (value & 0xF) == 0:
        value >>= 4
        index += 4
    if (value & 0x3) == 0:
        value >>= 2
        index += 2
    return index - (value & 0x1)


def pop_lowest(value: int) -> tuple[int, int]:
    """Split a non-zero word into ``(lowest element, remaining word)``."""
    index = lowest_bit_index(value)
    return index + 1, value & ~(1 << index) & WORD_MASK


def iter_elements(value: int) -> Iterator[int]:
    while value:
        element, value = pop_lowest(value)
        yield element


def clear_bits(base: int, remove: int) -> int:
    return base & ~remove & WORD_MASK


def set_bits(base: int, add: int) -> int:
    return base | add


def and_bits(a: int, b: int) -> int:
    return a & b


def or_bits(a: int, b: int) -> int:
    return a | b


def xor_bits(a: int, b: int) -> int:
    return a ^ b
