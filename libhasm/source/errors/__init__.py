"""Errors collections that source reader and normalizer may raise (user-facing ones)."""

from .input_unavailable import InputUnavailableError
from .malformed_label_declaration import MalformedLabelDeclarationError

__all__ = [
    "InputUnavailableError",
    "MalformedLabelDeclarationError",
]
