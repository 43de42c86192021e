from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of an instruction within assembly source file."""

    line_number: int
    col_number: int

    filepath: Path | None = None
    source: Literal["file", "toolchain"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "toolchain":
            return f"'(hasm-toolchain-internals):{self.line_number + 1}'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}:{self.col_number + 1}'"

    @classmethod
    def from_source(
        cls,
        source: Path | Literal["toolchain"],
        line_number: int,
        col_number: int,
    ) -> SourceLocation:
        """Create a location for given source which may be an file or pseudo-source."""
        if source == "toolchain":
            return cls(
                line_number=line_number,
                col_number=col_number,
                source=source,
            )
        return cls(
            line_number=line_number,
            col_number=col_number,
            filepath=source,
        )
