from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from libhasm.encoder.encoder import MachineWord
    from libhasm.symbols.table import SymbolTable


@dataclass(frozen=True)
class AssembledProgram:
    """Result of an assembly run for single source.

    Symbol table is the one owned by that run, after both passes (labels, variables and reserved symbols).
    """

    source: Path | str
    machine_words: list[MachineWord]
    symbols: SymbolTable

    @property
    def words(self) -> list[int]:
        return [word.value for word in self.machine_words]

    def __len__(self) -> int:
        return len(self.machine_words)
