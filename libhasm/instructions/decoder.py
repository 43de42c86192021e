"""Decoder for normalized lines into instructions.

Each line is classified and split into fields exactly once,
both assembler passes consume already decoded instructions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from libhasm.instructions.instruction import (
    AddressInstruction,
    ComputationInstruction,
    Instruction,
    InstructionKind,
    LabelDeclaration,
)
from libhasm.source.errors import MalformedLabelDeclarationError
from libhasm.source.helpers import (
    LABEL_CLOSE,
    LABEL_OPEN,
    is_all_digits,
    is_label_declaration,
    is_valid_symbol,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libhasm.source.normalizer import NormalizedLine

ADDRESS_MARK = "@"
DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"


def command_type(line: str) -> InstructionKind:
    """Classify normalized line into instruction kind."""
    if line.startswith(ADDRESS_MARK):
        return InstructionKind.ADDRESS
    if is_label_declaration(line):
        return InstructionKind.LABEL
    return InstructionKind.COMPUTATION


def dest_field(line: str) -> str:
    """Text before `=` or empty string if there is no destination."""
    dest_ends_at = line.find(DEST_SEPARATOR)
    if dest_ends_at == -1:
        return ""
    return line[:dest_ends_at]


def comp_field(line: str) -> str:
    """Text between `=` (or line start) and `;` (or line end)."""
    comp_starts_at = line.find(DEST_SEPARATOR) + 1
    comp_ends_at = line.find(JUMP_SEPARATOR)
    if comp_ends_at == -1:
        return line[comp_starts_at:]
    return line[comp_starts_at:comp_ends_at]


def jump_field(line: str) -> str:
    """Text after `;` or empty string if there is no jump."""
    jump_starts_at = line.find(JUMP_SEPARATOR)
    if jump_starts_at == -1:
        return ""
    return line[jump_starts_at + 1 :]


def is_variable_reference(token: str) -> bool:
    """Is given token is an `@symbol` which requires symbol table resolution (not an numeric literal)."""
    if not token.startswith(ADDRESS_MARK):
        return False
    return not is_all_digits(token.removeprefix(ADDRESS_MARK))


def decode_instruction(line: NormalizedLine) -> Instruction:
    """Decode single normalized line into an instruction."""
    match command_type(line.text):
        case InstructionKind.ADDRESS:
            return AddressInstruction(
                operand=line.text.removeprefix(ADDRESS_MARK),
                is_symbolic=is_variable_reference(line.text),
                text=line.text,
                location=line.location,
            )
        case InstructionKind.LABEL:
            return LabelDeclaration(
                name=_extract_label_name(line),
                text=line.text,
                location=line.location,
            )
        case InstructionKind.COMPUTATION:
            return ComputationInstruction(
                dest=dest_field(line.text),
                comp=comp_field(line.text),
                jump=jump_field(line.text),
                text=line.text,
                location=line.location,
            )


def decode_instructions(lines: Iterable[NormalizedLine]) -> list[Instruction]:
    """Decode all normalized lines, whole program is decoded before any pass begins."""
    return [decode_instruction(line) for line in lines]


def _extract_label_name(line: NormalizedLine) -> str:
    name = line.text.removeprefix(LABEL_OPEN).removesuffix(LABEL_CLOSE)
    if not is_valid_symbol(name):
        raise MalformedLabelDeclarationError(at=line.location, declaration=line.text)
    return name
