"""Hack assembler library.

Two-pass assembler that translates Hack assembly into 16-bit machine words:
- Source normalization (comments and whitespace removal) and decoding into instructions
- First pass resolves label declarations into addresses
- Second pass encodes instructions and allocates variables
"""

from .config import AssemblerConfig
from .hasm import assemble_source_lines, process_input_file
from .program import AssembledProgram

__all__ = [
    "AssembledProgram",
    "AssemblerConfig",
    "assemble_source_lines",
    "process_input_file",
]
