"""Tests for data models."""

import dataclasses

import pytest

from pybitset import Bitset
from pybitset.engine.models import DisplayOptions, DisplayStyle, Operand, OperandKind


def test_display_options_with_style() -> None:
    options = DisplayOptions(width=4)
    hexed = options.with_style("hex")
    assert hexed.style is DisplayStyle.HEX
    assert hexed.width == 4
    assert options.style is DisplayStyle.LIST


def test_models_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DisplayOptions().width = 2  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        Operand(OperandKind.BITSET, 0).word = 1  # type: ignore[misc]


def test_operand_resolution() -> None:
    source = Bitset([1, 2])
    operand = Bitset._operand(source)
    assert operand == Operand(OperandKind.BITSET, 0b11)
    source.add(3)
    assert operand.word == 0b11

    assert Bitset._operand([1, 32]) == Operand(OperandKind.SEQUENCE, 0x80000001)
