from pathlib import Path

import pytest

from libhasm.source.errors import InputUnavailableError
from libhasm.source.io import read_source_file_lines


def test_read_source_file_lines(tmp_path: Path) -> None:
    path = tmp_path / "Add.asm"
    path.write_text("@2\r\nD=A\n\n// end\n", encoding="utf-8")
    assert read_source_file_lines(path) == ["@2", "D=A", "", "// end"]


def test_read_source_file_lines_missing(tmp_path: Path) -> None:
    with pytest.raises(InputUnavailableError):
        read_source_file_lines(tmp_path / "Missing.asm")


def test_read_source_file_lines_directory(tmp_path: Path) -> None:
    with pytest.raises(InputUnavailableError):
        read_source_file_lines(tmp_path)
