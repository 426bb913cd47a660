"""Low-level binary reader with typed reads over a seekable stream."""

import io
import os
import struct
from typing import BinaryIO


class BinaryReader:
    """Wraps a seekable binary stream with typed little-endian reads.

    The stream length is measured once up front, so every read and seek is
    checked against it before touching the stream. A read that would run
    past the end raises instead of returning short data.
    """

    __slots__ = ("_stream", "_length")

    def __init__(self, source: BinaryIO | bytes | bytearray | memoryview) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._stream = source
        start = source.tell()
        self._length = source.seek(0, os.SEEK_END)
        source.seek(start)

    @property
    def position(self) -> int:
        return self._stream.tell()

    @property
    def length(self) -> int:
        return self._length

    @property
    def remaining(self) -> int:
        return max(self._length - self.position, 0)

    def _read(self, size: int) -> bytes:
        pos = self.position
        if size < 0 or pos + size > self._length:
            raise ValueError(
                f"Read of {size} bytes at offset {pos} "
                f"would exceed boundary at {self._length}"
            )
        chunk = self._stream.read(size)
        if len(chunk) != size:
            # Stream shrank underneath us (e.g. file truncated mid-read).
            raise ValueError(
                f"Short read at offset {pos}: expected {size} bytes, got {len(chunk)}"
            )
        return chunk

    def int32(self) -> int:
        return struct.unpack("<i", self._read(4))[0]

    def bytes(self, size: int) -> bytes:
        return self._read(size)

    def seek(self, offset: int) -> None:
        """Seek to an absolute position within the stream."""
        if offset < 0 or offset > self._length:
            raise ValueError(f"Seek to {offset} is outside bounds [0, {self._length}]")
        self._stream.seek(offset)
