from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from libhasm.encoder.encoder import WORD_WIDTH, format_word

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

WORD_BYTES = WORD_WIDTH // 8


class OutputFormat(Enum):
    """Format of an assembled program file."""

    # One line of 16 `0`/`1` characters per word
    HACK = "hack"

    # Two bytes per word, low byte first
    BINARY = "binary"

    @property
    def file_suffix(self) -> str:
        match self:
            case OutputFormat.HACK:
                return ".hack"
            case OutputFormat.BINARY:
                return ".bin"


def words_to_text(words: Iterable[int]) -> str:
    """Serialize words into text format, each word is newline-terminated."""
    return "".join(f"{format_word(word)}\n" for word in words)


def words_to_bytes(words: Iterable[int]) -> bytes:
    """Serialize words into raw little-endian bytes."""
    return b"".join(word.to_bytes(WORD_BYTES, byteorder="little") for word in words)


def write_program_file(
    path: Path,
    words: Iterable[int],
    output_format: OutputFormat = OutputFormat.HACK,
) -> None:
    """Write assembled words into file with given format.

    Caller must pass fully assembled program, as partial output must never be written.
    """
    match output_format:
        case OutputFormat.HACK:
            path.write_text(words_to_text(words), encoding="ascii", newline="\n")
        case OutputFormat.BINARY:
            path.write_bytes(words_to_bytes(words))
