"""Hack assembler core entry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libhasm.config import AssemblerConfig
from libhasm.encoder.encoder import encode_instructions
from libhasm.instructions.decoder import decode_instructions
from libhasm.program import AssembledProgram
from libhasm.resolver.resolver import resolve_labels
from libhasm.source.io import read_source_file_lines
from libhasm.source.normalizer import normalize_source_lines
from libhasm.symbols.table import new_symbol_table

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


def assemble_source_lines(
    lines: Iterable[str],
    *,
    source: Path | Literal["toolchain"] = "toolchain",
    config: AssemblerConfig | None = None,
) -> AssembledProgram:
    """Core entry for Hack assembler API.

    Assembles given raw source lines into machine words.
    Whole source is normalized and decoded before first pass,
    first pass (labels) completes before second pass (encoding and variables) begins.

    Each call owns fresh symbol table, so no state is shared between runs.
    """
    config = config or AssemblerConfig()
    symbols = new_symbol_table()

    instructions = decode_instructions(normalize_source_lines(source, lines))

    resolve_labels(
        instructions,
        symbols,
        strict_label_declarations=config.strict_label_declarations,
    )
    machine_words = list(encode_instructions(instructions, symbols, config))

    return AssembledProgram(
        source=source,
        machine_words=machine_words,
        symbols=symbols,
    )


def process_input_file(
    filepath: Path,
    *,
    config: AssemblerConfig | None = None,
) -> AssembledProgram:
    """Read and assemble given source file.

    Does not write anything, see `libhasm.output` for emitting assembled program.
    """
    lines = read_source_file_lines(filepath)
    return assemble_source_lines(lines, source=filepath, config=config)
