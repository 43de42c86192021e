"""Hack instructions (address, computation, label declaration) and their decoder."""

from .decoder import (
    command_type,
    comp_field,
    decode_instruction,
    decode_instructions,
    dest_field,
    is_variable_reference,
    jump_field,
)
from .instruction import (
    AddressInstruction,
    ComputationInstruction,
    Instruction,
    InstructionKind,
    LabelDeclaration,
)

__all__ = [
    "AddressInstruction",
    "ComputationInstruction",
    "Instruction",
    "InstructionKind",
    "LabelDeclaration",
    "command_type",
    "comp_field",
    "decode_instruction",
    "decode_instructions",
    "dest_field",
    "is_variable_reference",
    "jump_field",
]
