"""pybitset: sets of integers in [1, 32] packed into a single 32-bit word."""

from collections.abc import Sequence

from .engine.errors import (
    BitsetError,
    EmptySet,
    InvalidElement,
    InvalidWord,
    MissingElement,
    TypeMismatch,
)
from .engine.sets import Bitset, BitsetIterator


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`pybitset.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "Bitset",
    "BitsetError",
    "BitsetIterator",
    "EmptySet",
    "InvalidElement",
    "InvalidWord",
    "MissingElement",
    "TypeMismatch",
    "main",
]
