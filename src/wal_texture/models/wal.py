"""WAL texture data classes."""

from collections.abc import Iterator
from dataclasses import dataclass


HEADER_SIZE = 100
NAME_SIZE = 32
MIP_LEVELS = 4


@dataclass(frozen=True, slots=True)
class WalHeader:
    """100-byte header at the start of every WAL file.

    Name fields are kept as the raw 32 bytes from disk; trimming at NUL and
    decoding to text is left to whoever displays them.
    """
    texture_name: bytes                        # 32 raw bytes
    width: int
    height: int
    mip_offsets: tuple[int, int, int, int]     # absolute file offsets, largest level first
    animation_name: bytes                      # 32 raw bytes, next frame or empty
    flags: int                                 # surface flags, opaque
    contents: int                              # content type, opaque
    value: int

    @property
    def pixel_count(self) -> int:
        """width * height as stored, unvalidated."""
        return self.width * self.height


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """Palette indices of the largest mip level, row-major, one byte per pixel."""
    indices: bytes
    width: int
    height: int

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __getitem__(self, index):
        return self.indices[index]
