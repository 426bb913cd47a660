import struct

import scripts.dump_wal as dump_wal


def _wal_bytes(width=64, height=64, name=b"wall01", anim=b"", flags=0, pixel_bytes=None):
    header = struct.pack(
        "<32sii4i32siii",
        name, width, height, 100, 4196, 5220, 5476, anim, flags, 0, 0,
    )
    if pixel_bytes is None:
        pixel_bytes = max(width, 0) * max(height, 0)
    return header + bytes(i % 256 for i in range(pixel_bytes))


def test_decode_name_trims_at_first_nul():
    assert dump_wal.decode_name(b"wall01\x00junk\x00\x00") == "wall01"


def test_decode_name_without_nul_uses_whole_field():
    assert dump_wal.decode_name(b"a" * 32) == "a" * 32


def test_decode_name_replaces_non_ascii():
    assert dump_wal.decode_name(b"w\xffl\x00") == "w\ufffdl"


def test_mip_dimensions_halve_per_level():
    assert dump_wal.mip_dimensions(64, 64) == [(64, 64), (32, 32), (16, 16), (8, 8)]


def test_mip_dimensions_never_drop_below_one():
    assert dump_wal.mip_dimensions(4, 2) == [(4, 2), (2, 1), (1, 1), (1, 1)]


def test_main_prints_header_and_pixel_count(tmp_path, capsys):
    path = tmp_path / "wall01.wal"
    path.write_bytes(_wal_bytes(anim=b"wall02", flags=-1))

    assert dump_wal.main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "The tex name is wall01\n" in out
    assert "The width is 64\n" in out
    assert "The height is 64\n" in out
    assert "Mip 1 offset 4196 (32x32)" in out
    assert "The anim name is wall02" in out
    assert "Flags    0xFFFFFFFF (-1)" in out
    assert "Pixel data: 4096 bytes" in out


def test_main_prints_first_indices(tmp_path, capsys):
    path = tmp_path / "wall01.wal"
    path.write_bytes(_wal_bytes())

    assert dump_wal.main([str(path), "--indices", "3"]) == 0

    assert "First 3 indices:   0   1   2" in capsys.readouterr().out


def test_main_header_only_skips_pixels(tmp_path, capsys):
    path = tmp_path / "header.wal"
    path.write_bytes(_wal_bytes(pixel_bytes=0))

    assert dump_wal.main([str(path), "--header-only"]) == 0

    out = capsys.readouterr().out
    assert "The width is 64" in out
    assert "Pixel data" not in out


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.wal"

    assert dump_wal.main([str(path)]) == 1

    assert f"Could not open file {path} for reading" in capsys.readouterr().err


def test_main_truncated_pixels_still_prints_header(tmp_path, capsys):
    path = tmp_path / "short.wal"
    path.write_bytes(_wal_bytes()[:4000])

    assert dump_wal.main([str(path)]) == 1

    captured = capsys.readouterr()
    assert "The width is 64" in captured.out
    assert "Pixel data" not in captured.out
    assert "4096 bytes" in captured.err


def test_main_zero_width_reports_invalid_dimensions(tmp_path, capsys):
    path = tmp_path / "empty.wal"
    path.write_bytes(_wal_bytes(width=0))

    assert dump_wal.main([str(path)]) == 1

    captured = capsys.readouterr()
    assert "Mip 0 offset 100\n" in captured.out
    assert "Invalid texture dimensions 0x64" in captured.err


def test_main_truncated_header(tmp_path, capsys):
    path = tmp_path / "tiny.wal"
    path.write_bytes(b"wall")

    assert dump_wal.main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "100 bytes" in captured.err


def test_main_multiple_files_reports_any_failure(tmp_path, capsys):
    good = tmp_path / "good.wal"
    good.write_bytes(_wal_bytes(width=2, height=2))
    bad = tmp_path / "bad.wal"

    assert dump_wal.main([str(good), str(bad)]) == 1

    captured = capsys.readouterr()
    assert f"== {good}" in captured.out
    assert f"== {bad}" in captured.out
    assert "Pixel data: 4 bytes" in captured.out
