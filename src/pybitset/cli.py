"""Command line interface for the pybitset small-integer set tool."""
from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import io
from .engine.errors import BitsetError
from .engine.explain import bitset_dict, format_bitset, relation_dict, relation_text, summarize_text
from .engine.models import DisplayOptions, DisplayStyle
from .engine.sets import Bitset

_OPERATIONS = ("union", "intersection", "difference", "symmetric_difference")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pybitset", description="Sets of integers in [1, 32]")
    parser.add_argument("-V", "--version", action="version", version="pybitset 0.1")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_output_options(cmd: argparse.ArgumentParser, styled: bool = True) -> None:
        if styled:
            cmd.add_argument("--style", choices=[s.value for s in DisplayStyle], default="list")
            cmd.add_argument("--width", type=int, default=8)
        cmd.add_argument("--format", choices=["text", "json"], default="text")
        cmd.add_argument("--out", default="-")

    encode = sub.add_parser("encode", help="encode elements as a bitset word")
    encode.add_argument("elements", nargs="?", default="", help="comma separated elements, e.g. 1,3,32")
    encode.add_argument("--input", help="read elements from a text, JSON lines or CSV file")
    encode.add_argument("--save", help="store the result in a JSON bitset store")
    encode.add_argument("--name", default="default", help="name to store the result under")
    add_output_options(encode)

    decode = sub.add_parser("decode", help="decode a raw word into its elements")
    decode.add_argument("word", help="raw word: decimal, 0x hex or 0b binary")
    add_output_options(decode, styled=False)

    combine = sub.add_parser("combine", help="apply a set operation to two bitsets")
    combine.add_argument("--op", choices=_OPERATIONS, required=True)
    combine.add_argument("left")
    combine.add_argument("right")
    add_output_options(combine)

    compare = sub.add_parser("compare", help="report subset/superset relations")
    compare.add_argument("left")
    compare.add_argument("right")
    add_output_options(compare)

    show = sub.add_parser("show", help="list the bitsets in a store")
    show.add_argument("--store", required=True)
    add_output_options(show)
    return parser


def _display_options(args: argparse.Namespace) -> DisplayOptions:
    options = DisplayOptions(width=getattr(args, "width", 8))
    return options.with_style(getattr(args, "style", DisplayStyle.LIST))


def _emit(data: dict[str, object] | str, fmt: str, out_path: str) -> None:
    if fmt == "json":
        payload = {"text": data} if isinstance(data, str) else data
        io.write_json(payload, out_path)
    else:
        text = data if isinstance(data, str) else str(data)
        io.write_text(text + ("\n" if not text.endswith("\n") else ""), out_path)


def _command_encode(args: argparse.Namespace) -> None:
    elements = io.read_elements(args.input) if args.input else io.parse_elements(args.elements)
    bitset = Bitset(elements)
    if args.save:
        io.add_bitset(args.save, args.name, bitset)
    if args.format == "json":
        _emit(bitset_dict(bitset), "json", args.out)
    else:
        _emit(format_bitset(bitset, _display_options(args)), "text", args.out)


def _command_decode(args: argparse.Namespace) -> None:
    bitset = Bitset.from_raw_bits(io.parse_word(args.word))
    if args.format == "json":
        _emit(bitset_dict(bitset), "json", args.out)
    else:
        _emit(",".join(str(element) for element in bitset), "text", args.out)


def _command_combine(args: argparse.Namespace) -> None:
    left = Bitset(io.parse_elements(args.left))
    right = Bitset(io.parse_elements(args.right))
    result = getattr(left, args.op)(right)
    if args.format == "json":
        _emit(bitset_dict(result), "json", args.out)
    else:
        _emit(format_bitset(result, _display_options(args)), "text", args.out)


def _command_compare(args: argparse.Namespace) -> None:
    left = Bitset(io.parse_elements(args.left))
    right = Bitset(io.parse_elements(args.right))
    if args.format == "json":
        _emit(relation_dict(left, right), "json", args.out)
    else:
        _emit(relation_text(left, right, _display_options(args)), "text", args.out)


def _command_show(args: argparse.Namespace) -> None:
    bitsets = io.load_bitsets(args.store)
    if args.format == "json":
        _emit({name: bitset_dict(bitset) for name, bitset in bitsets.items()}, "json", args.out)
        return
    options = _display_options(args)
    lines = [f"{name}\t{summarize_text(bitset, options)}" for name, bitset in sorted(bitsets.items())]
    _emit("\n".join(lines), "text", args.out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    handlers = {
        "encode": _command_encode,
        "decode": _command_decode,
        "combine": _command_combine,
        "compare": _command_compare,
        "show": _command_show,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"unknown command {args.command}")
        return 1
    try:
        handler(args)
    except (BitsetError, ValueError, OSError) as exc:
        sys.stderr.write(f"pybitset: error: {exc}\n")
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
