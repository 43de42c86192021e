"""Serialization of assembled machine words into output files."""

from .formats import OutputFormat, words_to_bytes, words_to_text, write_program_file

__all__ = [
    "OutputFormat",
    "words_to_bytes",
    "words_to_text",
    "write_program_file",
]
