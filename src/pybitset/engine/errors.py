"""Exceptions raised by the bitset engine."""
from __future__ import annotations


class BitsetError(Exception):
    """Base class for every bitset failure."""


class InvalidElement(BitsetError, TypeError, ValueError):
    """An element is not an integer in the range [1, 32]."""

    def __init__(self, element: object) -> None:
        super().__init__(f"bitsets can only contain integers [1..32], got {element!r}")
        self.element = element


class MissingElement(BitsetError, KeyError):
    """``remove`` was asked for an element that is not a member."""

    def __init__(self, element: int) -> None:
        super().__init__(element)
        self.element = element


class EmptySet(BitsetError, KeyError):
    def __init__(self) -> None:
        super().__init__("pop from an empty bitset")


class TypeMismatch(BitsetError, TypeError):
    """Ordering comparison against something that is not a bitset."""

    def __init__(self, other: object) -> None:
        super().__init__(f"can only compare to a bitset, not {type(other).__name__}")


class InvalidWord(BitsetError, ValueError):
    """A raw state word is not an unsigned 32-bit integer."""

    def __init__(self, word: object) -> None:
        super().__init__(f"invalid bitset state {word!r}; expected an int in [0, 0xFFFFFFFF]")
        self.word = word
