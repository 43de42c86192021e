from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from libhasm.source.helpers import (
    find_code_start,
    is_blank,
    is_comment,
    strip_comment,
)
from libhasm.source.location import SourceLocation

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class NormalizedLine:
    """Source line with comments and surrounding whitespace removed.

    Never empty and never starts with an comment marker.
    """

    text: str
    location: SourceLocation

    def __post_init__(self) -> None:
        assert self.text, "Normalized line must not be empty"
        assert not is_comment(self.text), "Normalized line must not be an comment"


def normalize_source_lines(
    source: Path | Literal["toolchain"],
    lines: Iterable[str],
) -> Generator[NormalizedLine]:
    """Stream normalized lines, dropping blank and comment lines.

    :returns normalizer: Generator of lines in order from top to bottom of an file
    """
    for row, line in enumerate(lines, start=0):
        normalized = normalize_line(line)
        if normalized is None:
            continue

        yield NormalizedLine(
            text=normalized,
            location=SourceLocation.from_source(
                source,
                line_number=row,
                col_number=find_code_start(line),
            ),
        )


def normalize_line(line: str) -> str | None:
    """Normalize single raw line or return None if it contributes nothing (blank or comment)."""
    if is_blank(line) or is_comment(line):
        return None

    # Indented comment (`  // ...`) leaves nothing after stripping
    text = strip_comment(line).strip()
    if not text:
        return None
    return text
