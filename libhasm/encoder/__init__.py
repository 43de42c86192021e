"""Second assembler pass (encoding instructions into machine words)."""

from .encoder import (
    MachineWord,
    encode_computation_instruction,
    encode_field,
    encode_instructions,
    format_word,
)
from .mnemonics import COMP_MNEMONICS, DEST_MNEMONICS, JUMP_MNEMONICS

__all__ = [
    "COMP_MNEMONICS",
    "DEST_MNEMONICS",
    "JUMP_MNEMONICS",
    "MachineWord",
    "encode_computation_instruction",
    "encode_field",
    "encode_instructions",
    "format_word",
]
