"""Source reading and normalization (comments, whitespace and blank lines removal)."""

from .io import read_source_file_lines
from .location import SourceLocation
from .normalizer import NormalizedLine, normalize_line, normalize_source_lines

__all__ = [
    "NormalizedLine",
    "SourceLocation",
    "normalize_line",
    "normalize_source_lines",
    "read_source_file_lines",
]
