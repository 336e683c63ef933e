import struct

import pytest

from listgame.lastthree import convert, main, read_last_three_shorts, write_last_three_int8
from listgame.workfunction import SerializationError


def _write_shorts(path, rows):
    data = struct.pack("<Q", len(rows)) + b"".join(struct.pack("<3h", *r) for r in rows)
    path.write_bytes(data)


def test_read_shorts(tmp_path):
    rows = [(1, -2, 3), (0, 0, 4)]
    src = tmp_path / "s.bin"
    _write_shorts(src, rows)
    assert read_last_three_shorts(src) == rows


def test_read_truncated(tmp_path):
    src = tmp_path / "s.bin"
    src.write_bytes(struct.pack("<Q", 2) + struct.pack("<3h", 1, 2, 3))
    with pytest.raises(SerializationError):
        read_last_three_shorts(src)


def test_write_int8_wraps(tmp_path):
    out = tmp_path / "o.bin"
    write_last_three_int8(out, [(200, -1, 5)])
    data = out.read_bytes()
    assert data[:8] == struct.pack("<Q", 1)
    assert data[8:] == bytes([200, 255, 5])


def test_convert(tmp_path):
    rows = [(1, 2, 3), (-1, 0, 7), (4, 4, 4)]
    src, dst = tmp_path / "s.bin", tmp_path / "d.bin"
    _write_shorts(src, rows)
    assert convert(src, dst) == rows
    body = dst.read_bytes()[8:]
    assert [struct.unpack_from("<3b", body, 3 * i) for i in range(3)] == rows


def test_main(tmp_path):
    rows = [(2, 1, 0)]
    src, dst = tmp_path / "s.bin", tmp_path / "d.bin"
    _write_shorts(src, rows)
    assert main([str(src), str(dst)]) == 0
    assert dst.read_bytes() == struct.pack("<Q", 1) + struct.pack("<3b", *rows[0])