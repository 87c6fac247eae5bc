"""Rendering helpers for bitsets and the relations between them."""
from __future__ import annotations

from .models import DisplayOptions, DisplayStyle
from .sets import Bitset


def format_bitset(bitset: Bitset, options: DisplayOptions | None = None) -> str:
    options = options or DisplayOptions()
    if options.style is DisplayStyle.HEX:
        return f"0x{bitset.raw_bits():0{options.width}X}"
    return repr(list(bitset))


def bitset_dict(bitset: Bitset) -> dict[str, object]:
    return {
        "elements": list(bitset),
        "bits": bitset.raw_bits(),
        "hex": format_bitset(bitset, DisplayOptions(style=DisplayStyle.HEX)),
        "size": len(bitset),
    }


def relation_dict(left: Bitset, right: Bitset) -> dict[str, bool]:
    """Report every subset-order relation between two bitsets.

    The order is partial: when neither side contains the other, ``comparable``
    is False and all of the subset/superset flags are False too.
    """
    subset = left <= right
    superset = left >= right
    return {
        "equal": left == right,
        "subset": subset,
        "superset": superset,
        "proper_subset": left < right,
        "proper_superset": left > right,
        "disjoint": left.isdisjoint(right),
        "comparable": subset or superset,
    }


def relation_text(
    left: Bitset, right: Bitset, options: DisplayOptions | None = None
) -> str:
    relations = relation_dict(left, right)
    if relations["equal"]:
        symbol = "=="
    elif relations["proper_subset"]:
        symbol = "<"
    elif relations["proper_superset"]:
        symbol = ">"
    else:
        symbol = "?"
    text = f"{format_bitset(left, options)} {symbol} {format_bitset(right, options)}"
    if relations["disjoint"]:
        text += " (disjoint)"
    return text


def summarize_text(bitset: Bitset, options: DisplayOptions | None = None) -> str:
    size = len(bitset)
    noun = "element" if size == 1 else "elements"
    return f"{format_bitset(bitset, options)}: {size} {noun}"
