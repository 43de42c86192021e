from pathlib import Path

from libhasm.output.formats import (
    OutputFormat,
    words_to_bytes,
    words_to_text,
    write_program_file,
)


def test_words_to_text() -> None:
    assert words_to_text([2, 0xEC10]) == "0000000000000010\n1110110000010000\n"
    assert words_to_text([]) == ""


def test_words_to_bytes_little_endian() -> None:
    assert words_to_bytes([0x0002, 0xEC10]) == b"\x02\x00\x10\xec"


def test_output_format_suffix() -> None:
    assert OutputFormat.HACK.file_suffix == ".hack"
    assert OutputFormat.BINARY.file_suffix == ".bin"
    assert OutputFormat("binary") is OutputFormat.BINARY


def test_write_program_file(tmp_path: Path) -> None:
    hack = tmp_path / "Add.hack"
    write_program_file(hack, [3, 0xEC10], OutputFormat.HACK)
    assert hack.read_text() == "0000000000000011\n1110110000010000\n"

    binary = tmp_path / "Add.bin"
    write_program_file(binary, [3, 0xEC10], OutputFormat.BINARY)
    assert binary.read_bytes() == b"\x03\x00\x10\xec"
