"""Input/output helpers for the pybitset CLI."""
import csv
import json
import logging
import os
from collections.abc import Iterable, Mapping
from typing import TextIO

from .engine.sets import Bitset

logger = logging.getLogger(__name__)


def _read_text_values(handle: TextIO) -> list[int]:
    values: list[int] = []
    for line in handle:
        values.extend(int(token) for token in line.replace(",", " ").split())
    return values


def _read_jsonl(handle: TextIO) -> list[object]:
    """Decoded values are passed through as is; Bitset validates them."""
    data: list[object] = []
    for raw in handle:
        raw = raw.strip()
        if not raw:
            continue
        obj = json.loads(raw)
        if isinstance(obj, dict) and "element" in obj:
            value = obj["element"]
        else:
            value = obj
        data.append(value)
    return data


def _read_csv(handle: TextIO, column: str = "element") -> list[int]:
    reader = csv.DictReader(handle)
    if column not in (reader.fieldnames or []):
        raise ValueError(f"CSV missing required column '{column}'")
    return [int(row[column]) for row in reader if row.get(column)]


def _open_path(path: str) -> Iterable[object]:
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext in {".json", ".jsonl"}:
        with open(path, encoding="utf-8") as handle:
            yield from _read_jsonl(handle)
    elif ext in {".csv"}:
        with open(path, encoding="utf-8", newline="") as handle:
            yield from _read_csv(handle)
    else:
        with open(path, encoding="utf-8") as handle:
            yield from _read_text_values(handle)


def read_elements(path: str) -> list[object]:
    return list(_open_path(path))


def parse_elements(text: str) -> list[int]:
    """Parse ``"1,3,32"`` (or whitespace separated) into a list of ints."""
    return [int(token) for token in text.replace(",", " ").split()]


def parse_word(text: str) -> int:
    """Parse a raw word written in decimal, ``0x`` hex or ``0b`` binary."""
    return int(text.strip(), 0)


def save_bitsets(bitsets: Mapping[str, Bitset], path: str) -> None:
    payload = {"bitsets": {name: bitset.raw_bits() for name, bitset in bitsets.items()}}
    try:
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
    except OSError as exc:
        logger.error(f"Failed to save bitsets to {path}: {exc}")
        raise
    logger.debug(f"Saved {len(bitsets)} bitsets to {path}")


def load_bitsets(path: str) -> dict[str, Bitset]:
    try:
        with open(path, encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError:
        logger.error(f"Bitset store not found: {path}")
        raise
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to load bitsets from {path}: {exc}")
        raise
    stored = payload.get("bitsets") if isinstance(payload, dict) else None
    if not isinstance(stored, dict):
        logger.error(f"Malformed bitset store {path}: missing 'bitsets' object")
        raise ValueError(f"{path}: store must contain a 'bitsets' object")
    bitsets = {name: Bitset.from_raw_bits(word) for name, word in stored.items()}
    logger.debug(f"Loaded {len(bitsets)} bitsets from {path}")
    return bitsets


def add_bitset(path: str, name: str, bitset: Bitset) -> dict[str, Bitset]:
    """Insert or replace ``name`` in the store at ``path``, creating it if needed."""
    bitsets = load_bitsets(path) if os.path.exists(path) else {}
    bitsets[name] = bitset
    save_bitsets(bitsets, path)
    return bitsets


def write_json(obj: object, path: str) -> None:
    if path == "-":
        json.dump(obj, os.sys.stdout, indent=2, sort_keys=True)
        os.sys.stdout.write("\n")
        os.sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        os.sys.stdout.write(text)
        if not text.endswith("\n"):
            os.sys.stdout.write("\n")
        os.sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
