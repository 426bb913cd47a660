"""Decode WAL (id Tech 2 texture) headers and the largest mip level.

Layout, all integers little-endian int32:
  texture_name   32 bytes
  width, height
  mip_offsets    4 x int32, absolute offsets of each level, largest first
  animation_name 32 bytes
  flags, contents, value

Each mip level i is (width >> i) * (height >> i) palette indices, one byte
per pixel. Only level 0 is decoded here.
"""

import sys
from os import PathLike
from typing import BinaryIO

from wal_texture.models.errors import (
    InvalidDimensions,
    InvalidOffset,
    SourceUnavailable,
    TruncatedHeader,
    TruncatedPixelData,
)
from wal_texture.models.wal import HEADER_SIZE, MIP_LEVELS, NAME_SIZE, PixelBuffer, WalHeader
from wal_texture.parser.binary_reader import BinaryReader


Source = BinaryIO | bytes | bytearray | memoryview

# Largest pixel count a single read may request.
_MAX_PIXELS = sys.maxsize


def decode_header(source: Source) -> WalHeader:
    """Read the 100-byte header at the current position of *source*.

    Field values are returned as stored, negative or zero dimensions
    included. On success exactly HEADER_SIZE bytes are consumed; on
    TruncatedHeader the position is left untouched.
    """
    reader = BinaryReader(source)
    if reader.remaining < HEADER_SIZE:
        raise TruncatedHeader(
            f"WAL header needs {HEADER_SIZE} bytes, "
            f"only {reader.remaining} available at offset {reader.position}"
        )

    start = reader.position
    try:
        texture_name = reader.bytes(NAME_SIZE)
        width = reader.int32()
        height = reader.int32()
        mip_offsets = tuple(reader.int32() for _ in range(MIP_LEVELS))
        animation_name = reader.bytes(NAME_SIZE)
        flags = reader.int32()
        contents = reader.int32()
        value = reader.int32()
    except ValueError as exc:
        reader.seek(start)
        raise TruncatedHeader(f"WAL header at offset {start} is incomplete: {exc}") from exc

    return WalHeader(
        texture_name=texture_name,
        width=width,
        height=height,
        mip_offsets=mip_offsets,
        animation_name=animation_name,
        flags=flags,
        contents=contents,
        value=value,
    )


def _first_mip_size(header: WalHeader) -> int:
    if header.width <= 0 or header.height <= 0:
        raise InvalidDimensions(
            f"Invalid texture dimensions {header.width}x{header.height}"
        )
    size = header.width * header.height
    if size > _MAX_PIXELS:
        raise InvalidDimensions(
            f"Texture dimensions {header.width}x{header.height} "
            f"exceed addressable size {_MAX_PIXELS}"
        )
    return size


def decode_first_mip(source: Source, header: WalHeader) -> PixelBuffer:
    """Read the width * height palette indices of mip level 0.

    Dimensions, offset and remaining length are all checked before any
    pixel bytes are read, so a bad header never causes a short or
    oversized read.
    """
    size = _first_mip_size(header)
    offset = header.mip_offsets[0]

    reader = BinaryReader(source)
    try:
        reader.seek(offset)
    except ValueError as exc:
        raise InvalidOffset(f"Mip level 0 offset {offset} is invalid: {exc}") from exc

    if reader.remaining < size:
        raise TruncatedPixelData(
            f"Mip level 0 needs {size} bytes at offset {offset}, "
            f"only {reader.remaining} available"
        )

    try:
        indices = reader.bytes(size)
    except ValueError as exc:
        raise TruncatedPixelData(str(exc)) from exc

    return PixelBuffer(indices=indices, width=header.width, height=header.height)


def _open(path: str | PathLike) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise SourceUnavailable(f"Could not open file {path} for reading: {exc}") from exc


def read_wal_header(path: str | PathLike) -> WalHeader:
    """Open *path* and decode just its header."""
    with _open(path) as f:
        try:
            return decode_header(f)
        except OSError as exc:
            raise SourceUnavailable(f"Error reading {path}: {exc}") from exc


def read_wal(path: str | PathLike) -> tuple[WalHeader, PixelBuffer]:
    """Open *path* and decode its header and mip level 0."""
    with _open(path) as f:
        try:
            header = decode_header(f)
            return header, decode_first_mip(f, header)
        except OSError as exc:
            raise SourceUnavailable(f"Error reading {path}: {exc}") from exc
