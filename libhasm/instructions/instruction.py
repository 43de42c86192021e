from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libhasm.source.location import SourceLocation


class InstructionKind(IntEnum):
    """Kind of an Hack instruction.

    Label operands (`@LOOP`) are not separate kind, they are address instruction resolved via symbol table.
    """

    # `@value`
    ADDRESS = auto()

    # `dest=comp;jump`
    COMPUTATION = auto()

    # `(NAME)`, pseudo-instruction that emits no code
    LABEL = auto()


@dataclass(frozen=True, slots=True)
class AddressInstruction:
    """Loads an 15-bit value (literal or symbol address) into A register."""

    operand: str

    # Operand requires symbol table resolution (label, reserved symbol or variable)
    is_symbolic: bool

    text: str
    location: SourceLocation

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.ADDRESS

    @property
    def is_literal(self) -> bool:
        return not self.is_symbolic


@dataclass(frozen=True, slots=True)
class LabelDeclaration:
    """Binds name to address of the next emitted instruction."""

    name: str

    text: str
    location: SourceLocation

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.LABEL


@dataclass(frozen=True, slots=True)
class ComputationInstruction:
    """ALU computation with optional destination and optional jump.

    Empty `dest` or `jump` means that field is omitted.
    """

    dest: str
    comp: str
    jump: str

    text: str
    location: SourceLocation

    @property
    def kind(self) -> InstructionKind:
        return InstructionKind.COMPUTATION


type Instruction = AddressInstruction | LabelDeclaration | ComputationInstruction
