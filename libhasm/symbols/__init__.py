"""Symbol table with Hack reserved symbols."""

from .reserved import RESERVED_SYMBOLS
from .table import SymbolTable, new_symbol_table

__all__ = [
    "RESERVED_SYMBOLS",
    "SymbolTable",
    "new_symbol_table",
]
