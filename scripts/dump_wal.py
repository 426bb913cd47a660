"""Print the header fields of one or more WAL textures.

Usage:
    python -m scripts.dump_wal PATH [PATH ...] [--header-only] [--indices N]
"""

import argparse
import sys
from pathlib import Path

from wal_texture.models.errors import WalFormatError
from wal_texture.models.wal import MIP_LEVELS, PixelBuffer, WalHeader
from wal_texture.parser.wal_parser import decode_first_mip, decode_header


def decode_name(raw: bytes) -> str:
    """Trim a fixed-size name field at its first NUL and decode it as ASCII."""
    return raw.split(b"\x00", 1)[0].decode("ascii", errors="replace")


def mip_dimensions(width: int, height: int) -> list[tuple[int, int]]:
    """(width, height) of each mip level, halving per level, never below 1."""
    return [(max(width >> i, 1), max(height >> i, 1)) for i in range(MIP_LEVELS)]


def format_header(header: WalHeader) -> list[str]:
    lines = [
        f"The tex name is {decode_name(header.texture_name)}",
        f"The width is {header.width}",
        f"The height is {header.height}",
    ]
    if header.width > 0 and header.height > 0:
        dims = mip_dimensions(header.width, header.height)
    else:
        dims = [None] * MIP_LEVELS
    for level, (offset, dim) in enumerate(zip(header.mip_offsets, dims)):
        size = f" ({dim[0]}x{dim[1]})" if dim else ""
        lines.append(f"Mip {level} offset {offset}{size}")
    anim = decode_name(header.animation_name)
    lines.append(f"The anim name is {anim or '(none)'}")
    lines.append(f"Flags    0x{header.flags & 0xFFFFFFFF:08X} ({header.flags})")
    lines.append(f"Contents 0x{header.contents & 0xFFFFFFFF:08X} ({header.contents})")
    lines.append(f"Value    {header.value}")
    return lines


def format_pixels(pixels: PixelBuffer, limit: int) -> list[str]:
    lines = [f"Pixel data: {len(pixels)} bytes"]
    if limit > 0:
        shown = " ".join(f"{i:3d}" for i in pixels.indices[:limit])
        lines.append(f"First {min(limit, len(pixels))} indices: {shown}")
    return lines


def dump_file(path: Path, *, header_only: bool = False, indices: int = 0) -> int:
    """Print one file's fields. Returns the exit status for that file."""
    try:
        f = open(path, "rb")
    except OSError:
        print(f"Could not open file {path} for reading", file=sys.stderr)
        return 1

    with f:
        try:
            header = decode_header(f)
        except (WalFormatError, OSError) as exc:
            print(f"Error: {path}: {exc}", file=sys.stderr)
            return 1

        for line in format_header(header):
            print(line)
        if header_only:
            return 0

        # Header stays printed even when the pixel data is bad.
        try:
            pixels = decode_first_mip(f, header)
        except (WalFormatError, OSError) as exc:
            print(f"Error: {path}: {exc}", file=sys.stderr)
            return 1

    for line in format_pixels(pixels, indices):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump WAL texture headers")
    parser.add_argument("paths", type=Path, nargs="+", help="WAL file(s) to read")
    parser.add_argument("--header-only", action="store_true",
                        help="Skip decoding mip level 0")
    parser.add_argument("--indices", type=int, default=0, metavar="N",
                        help="Also print the first N palette indices")
    args = parser.parse_args(argv)

    status = 0
    for i, path in enumerate(args.paths):
        if len(args.paths) > 1:
            if i:
                print()
            print(f"== {path}")
        status |= dump_file(path, header_only=args.header_only, indices=args.indices)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
