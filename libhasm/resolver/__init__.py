"""First assembler pass (label resolution)."""

from .resolver import resolve_labels

__all__ = ["resolve_labels"]
