from pathlib import Path

from libhasm.source.helpers import (
    is_blank,
    is_comment,
    is_label_declaration,
    strip_comment,
)
from libhasm.source.location import SourceLocation
from libhasm.source.normalizer import normalize_line, normalize_source_lines


def test_is_blank() -> None:
    assert is_blank("")
    assert is_blank("   \t")
    assert not is_blank("  D=M")


def test_is_comment_checks_raw_line() -> None:
    assert is_comment("// comment")
    assert is_comment("//")
    assert not is_comment("   // indented comment")
    assert not is_comment("D=M // trailing")


def test_strip_comment() -> None:
    assert strip_comment("D=M // trailing") == "D=M "
    assert strip_comment("D=M") == "D=M"
    # Marker at the very beginning is an comment line, returned unchanged
    assert strip_comment("// comment") == "// comment"


def test_is_label_declaration() -> None:
    assert is_label_declaration("(LOOP)")
    assert is_label_declaration("()")
    assert not is_label_declaration("(LOOP")
    assert not is_label_declaration("@LOOP")


def test_normalize_line() -> None:
    assert normalize_line("   D=M   ") == "D=M"
    assert normalize_line("  @17 // load") == "@17"
    assert normalize_line("(END)// halt") == "(END)"
    assert normalize_line("") is None
    assert normalize_line("   ") is None
    assert normalize_line("// comment") is None
    assert normalize_line("    // indented comment") is None


def test_normalize_source_lines_drops_blank_and_comments() -> None:
    lines = [
        "// Adds 2 and 3",
        "",
        "   @2",
        "   D=A   // D = 2",
        "    // indented",
        "(END)",
    ]
    normalized = list(normalize_source_lines("toolchain", lines))
    assert [line.text for line in normalized] == ["@2", "D=A", "(END)"]
    assert [line.location.line_number for line in normalized] == [2, 3, 5]
    assert normalized[0].location.col_number == 3


def test_normalize_source_lines_file_location() -> None:
    path = Path("Add.asm")
    (line,) = normalize_source_lines(path, ["", "  M=D"])
    assert line.location == SourceLocation(line_number=1, col_number=2, filepath=path)
    assert repr(line.location) == "'Add.asm:2:3'"


def test_normalize_source_lines_in_memory_location() -> None:
    (line,) = normalize_source_lines("toolchain", ["// header", "D=M"])
    assert line.location.source == "toolchain"
    assert line.location.filepath is None
    assert repr(line.location) == "'(hasm-toolchain-internals):2'"
