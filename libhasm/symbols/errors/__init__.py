"""Errors collections that symbol resolution may raise (user-facing ones)."""

from .duplicate_label_declaration import DuplicateLabelDeclarationError
from .undefined_symbol import UndefinedSymbolError

__all__ = [
    "DuplicateLabelDeclarationError",
    "UndefinedSymbolError",
]
