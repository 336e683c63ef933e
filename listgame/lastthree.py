"""Convert the last-three-choices table from 16-bit to 8-bit entries."""

from __future__ import annotations

import argparse
import struct
import sys
from pathlib import Path
from typing import Iterable, Sequence

from listgame.workfunction import SerializationError

_COUNT = struct.Struct("<Q")
_SHORT_ROW = struct.Struct("<3h")
_INT8_ROW = struct.Struct("<3b")


def _to_int8(value: int) -> int:
    return (value + 128) % 256 - 128


def read_last_three_shorts(path) -> list[tuple[int, int, int]]:
    data = Path(path).read_bytes()
    if len(data) < _COUNT.size:
        raise SerializationError("row count was not read correctly")
    (count,) = _COUNT.unpack_from(data)
    body = data[_COUNT.size:]
    if len(body) < count * _SHORT_ROW.size:
        raise SerializationError("the last three choices array was not read correctly")
    return [_SHORT_ROW.unpack_from(body, i * _SHORT_ROW.size) for i in range(count)]


def write_last_three_int8(path, rows: Iterable[Sequence[int]]) -> None:
    rows = list(rows)
    with open(path, "wb") as handle:
        handle.write(_COUNT.pack(len(rows)))
        for row in rows:
            handle.write(_INT8_ROW.pack(*(_to_int8(v) for v in row)))


def convert(source, target) -> list[tuple[int, int, int]]:
    """Rewrite ``source`` as ``target`` with 8-bit entries; return the rows read."""
    rows = read_last_three_shorts(source)
    write_last_three_int8(target, rows)
    return rows


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", nargs="?", default="last-three-maximizers-5-shorts.bin")
    parser.add_argument("target", nargs="?", default="last-three-maximizers-5-int8t.bin")
    args = parser.parse_args(argv)
    rows = convert(args.source, args.target)
    print(f"advsize read as {len(rows)}", file=sys.stderr)
    for i, row in enumerate(rows[:3]):
        print(f"{i}: {', '.join(str(_to_int8(v)) for v in row)}.", file=sys.stderr)
    return 0