"""Hack assembler toolchain.

Provides CLI (`hasm`) and testkit (`hasm-testkit`) on top of `libhasm` core.
"""

from libhasm import assemble_source_lines, process_input_file

__all__ = [
    "assemble_source_lines",
    "process_input_file",
]
