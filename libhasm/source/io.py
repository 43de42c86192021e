from __future__ import annotations

from typing import TYPE_CHECKING

from libhasm.source.errors import InputUnavailableError

if TYPE_CHECKING:
    from pathlib import Path


def read_source_file_lines(path: Path) -> list[str]:
    """Read whole source file as list of lines (without line terminators).

    Whole file is read before any assembly pass is performed.
    """
    if not path.is_file():
        raise InputUnavailableError(path, reason="File does not exist or is not an file")
    try:
        with path.open(encoding="utf-8", errors="strict") as fd:
            return fd.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailableError(path, reason=str(e)) from e
