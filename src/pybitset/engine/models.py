"""Data models shared across the pybitset engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class OperandKind(str, enum.Enum):
    BITSET = "bitset"
    SEQUENCE = "sequence"


class DisplayStyle(str, enum.Enum):
    LIST = "list"
    HEX = "hex"


@dataclass(frozen=True)
class Operand:
    """Right-hand side of a binary set operation, resolved to a word.

    kind: where the word came from
        - BITSET: copied from another bitset, no validation needed
        - SEQUENCE: folded from an iterable of elements, fully validated
    word: the 32-bit word to combine with
    """
    kind: OperandKind
    word: int


@dataclass(frozen=True)
class DisplayOptions:
    """Options for rendering a bitset as text.

    style: LIST renders members (``[1, 3, 32]``), HEX renders the raw word
    width: minimum number of hex digits for HEX (zero padded)
    """
    style: DisplayStyle = DisplayStyle.LIST
    width: int = 8

    def with_style(self, style: DisplayStyle | str) -> DisplayOptions:
        return DisplayOptions(style=DisplayStyle(style), width=self.width)
