"""Test configuration ensuring the src/ package is importable without installing."""

from __future__ import annotations

import pathlib
import sys

import pytest

SRC = pathlib.Path(__file__).resolve().parents[1] / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pybitset import Bitset  # noqa: E402


@pytest.fixture
def samples() -> dict[str, Bitset]:
    return {
        "b1": Bitset([1, 2, 3, 4, 8, 9, 32]),
        "b2": Bitset([2, 3, 4, 6, 9]),
        "b3": Bitset([2, 3, 4, 32]),
        "b4": Bitset([5, 7, 15]),
        "full": Bitset(range(1, 33)),
        "empty": Bitset(),
    }
