"""Work functions: one value per permutation, with a binary record format."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Sequence

from listgame.permutation_graph import diameter_bound

_DELIMITER = -1
_SHORT = struct.Struct("<h")


class SerializationError(ValueError):
    """Raised when a binary record is truncated or malformed."""


@dataclass
class WorkFunction:
    vals: list[int] = field(default_factory=list)

    def min(self) -> int:
        return min(self.vals)

    def max(self) -> int:
        return max(self.vals)

    def validate(self, size: int) -> None:
        bound = diameter_bound(size)
        for i, value in enumerate(self.vals):
            if not 0 <= value <= bound:
                raise ValueError(f"wf[{i}] = {value} outside [0, {bound}]")

    def format(self) -> str:
        return "".join(f"wf[{i}] = {v}.\n" for i, v in enumerate(self.vals))

    @classmethod
    def read_from(cls, stream: BinaryIO, count: int) -> "WorkFunction":
        """Read ``count`` shorts followed by a -1 delimiter."""
        payload = stream.read(_SHORT.size * count)
        if len(payload) != _SHORT.size * count:
            raise SerializationError("not enough shorts in the stream")
        vals = list(struct.unpack(f"<{count}h", payload))
        tail = stream.read(_SHORT.size)
        if len(tail) != _SHORT.size or _SHORT.unpack(tail)[0] != _DELIMITER:
            raise SerializationError("missing delimiter")
        return cls(vals)

    @classmethod
    def from_buffer(cls, buffer: Sequence[int], start: int, count: int) -> "WorkFunction":
        end = start + count
        if end >= len(buffer) or buffer[end] != _DELIMITER:
            raise SerializationError("missing delimiter")
        return cls(list(buffer[start:end]))

    def write_to(self, stream: BinaryIO) -> None:
        stream.write(struct.pack(f"<{len(self.vals) + 1}h", *self.vals, _DELIMITER))
        stream.flush()

    def to_buffer(self) -> list[int]:
        return [*self.vals, _DELIMITER]