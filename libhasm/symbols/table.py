from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from libhasm.symbols.errors import UndefinedSymbolError
from libhasm.symbols.reserved import RESERVED_SYMBOLS

if TYPE_CHECKING:
    from collections.abc import ItemsView, Iterator

    from libhasm.source.location import SourceLocation


@dataclass(frozen=False)
class SymbolTable:
    """Mapping from symbolic name to an address.

    Owned by single assembly run, only grows during assembly (no removal).
    """

    symbols: dict[str, int] = field(default_factory=dict)

    # Names bound by assembly itself (labels and variables), reserved preload is not tracked
    bound_names: set[str] = field(default_factory=set)

    def initialize(self) -> Self:
        """Preload (or restore) architecture reserved symbols."""
        self.symbols.update(RESERVED_SYMBOLS)
        self.bound_names.difference_update(RESERVED_SYMBOLS)
        return self

    def add(self, name: str, address: int) -> None:
        """Bind name to given address, overwriting previous binding if any."""
        assert address >= 0, "Symbol address must be non-negative"
        self.symbols[name] = address
        self.bound_names.add(name)

    def contains(self, name: str) -> bool:
        return name in self.symbols

    def get(self, name: str, at: SourceLocation | None = None) -> int:
        """Get address bound to given name or raise error if symbol is not bound."""
        if (address := self.symbols.get(name)) is None:
            raise UndefinedSymbolError(name=name, at=at)
        return address

    def items(self) -> ItemsView[str, int]:
        return self.symbols.items()

    def bound_items(self) -> list[tuple[str, int]]:
        """Get bindings made by assembly run (labels and variables), even when they shadow reserved names."""
        return [(name, self.symbols[name]) for name in self.bound_names]

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)


def new_symbol_table() -> SymbolTable:
    """Construct fresh symbol table with reserved symbols preloaded."""
    return SymbolTable().initialize()
