from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from libhasm.exceptions import HasmError


class TestStatus(Enum):
    SKIPPED = auto()

    TOOLCHAIN_ERROR = auto()

    OUTPUT_MISMATCH = auto()

    SUCCESS = auto()


@dataclass(frozen=True)
class OutputMismatch:
    """First machine word that differs from expected one."""

    address: int
    expected: str | None
    actual: str | None


@dataclass(frozen=False)
class Test:
    path: Path
    status: TestStatus

    expected_path: Path | None = None

    error: HasmError | None = None
    mismatch: OutputMismatch | None = None
