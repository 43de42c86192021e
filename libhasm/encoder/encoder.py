from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from libhasm.config import MAX_ADDRESS, AssemblerConfig
from libhasm.encoder.errors import AddressOutOfRangeError, UnknownMnemonicError
from libhasm.encoder.mnemonics import (
    COMP_FIELD_WIDTH,
    COMP_MNEMONICS,
    DEST_FIELD_WIDTH,
    DEST_MNEMONICS,
    JUMP_FIELD_WIDTH,
    JUMP_MNEMONICS,
)
from libhasm.instructions.instruction import (
    AddressInstruction,
    ComputationInstruction,
    InstructionKind,
)
from libhasm.source.helpers import is_valid_symbol
from libhasm.symbols.errors import UndefinedSymbolError

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Mapping

    from libhasm.instructions.instruction import Instruction
    from libhasm.source.location import SourceLocation
    from libhasm.symbols.table import SymbolTable

WORD_WIDTH = 16

# Leading `111` marks computation instruction
COMPUTATION_OPCODE = 0b111

COMP_SHIFT = DEST_FIELD_WIDTH + JUMP_FIELD_WIDTH
DEST_SHIFT = JUMP_FIELD_WIDTH
OPCODE_SHIFT = COMP_SHIFT + COMP_FIELD_WIDTH

type FIELD_T = Literal["dest", "comp", "jump"]

FIELD_MNEMONICS: dict[FIELD_T, Mapping[str, int]] = {
    "dest": DEST_MNEMONICS,
    "comp": COMP_MNEMONICS,
    "jump": JUMP_MNEMONICS,
}


@dataclass(frozen=True, slots=True)
class MachineWord:
    """Single emitted 16-bit word with address it was emitted at."""

    address: int
    value: int
    instruction: AddressInstruction | ComputationInstruction

    def __post_init__(self) -> None:
        assert 0 <= self.value < (1 << WORD_WIDTH), "Machine word must fit into 16 bits"

    @property
    def bits(self) -> str:
        return format_word(self.value)


@dataclass(frozen=False)
class EncoderState:
    """State for second pass which only required for internal usages."""

    symbols: SymbolTable
    config: AssemblerConfig

    address: int = 0
    next_variable_address: int = 0

    def __post_init__(self) -> None:
        self.next_variable_address = self.config.variable_base_address

    def allocate_variable(self, name: str) -> int:
        address = self.next_variable_address
        self.symbols.add(name, address)
        self.next_variable_address += 1
        return address


def encode_instructions(
    instructions: Iterable[Instruction],
    symbols: SymbolTable,
    config: AssemblerConfig | None = None,
) -> Generator[MachineWord]:
    """Stream machine words for every non-declaration instruction (second pass).

    Expects labels to be already resolved by first pass,
    new variables are allocated into given symbol table on first reference.
    """
    state = EncoderState(symbols=symbols, config=config or AssemblerConfig())

    for instruction in instructions:
        match instruction.kind:
            case InstructionKind.LABEL:
                continue
            case InstructionKind.ADDRESS:
                assert isinstance(instruction, AddressInstruction)
                value = encode_address_instruction(instruction, state)
            case InstructionKind.COMPUTATION:
                assert isinstance(instruction, ComputationInstruction)
                value = encode_computation_instruction(instruction)

        yield MachineWord(address=state.address, value=value, instruction=instruction)
        state.address += 1


def encode_address_instruction(
    instruction: AddressInstruction,
    state: EncoderState,
) -> int:
    """Encode `@value` as `0vvvvvvvvvvvvvvv`, resolving or allocating symbols."""
    operand = instruction.operand
    address = _resolve_operand(instruction, state)

    if address > MAX_ADDRESS:
        if state.config.check_address_range:
            raise AddressOutOfRangeError(
                operand=operand,
                address=address,
                max_address=MAX_ADDRESS,
                at=instruction.location,
            )
        address &= MAX_ADDRESS
    return address


def encode_computation_instruction(instruction: ComputationInstruction) -> int:
    """Encode `dest=comp;jump` as `111accccccdddjjj`."""
    at = instruction.location
    comp = encode_field("comp", instruction.comp, at=at)
    dest = encode_field("dest", instruction.dest, at=at)
    jump = encode_field("jump", instruction.jump, at=at)
    return (
        (COMPUTATION_OPCODE << OPCODE_SHIFT)
        | (comp << COMP_SHIFT)
        | (dest << DEST_SHIFT)
        | jump
    )


def encode_field(
    field: FIELD_T,
    mnemonic: str,
    at: SourceLocation | None = None,
) -> int:
    """Get bits for given mnemonic of an computation field or raise error if mnemonic is unknown."""
    table = FIELD_MNEMONICS[field]
    if (bits := table.get(mnemonic)) is None:
        raise UnknownMnemonicError(
            field=field,
            mnemonic=mnemonic,
            known_mnemonics=table.keys(),
            at=at,
        )
    return bits


def format_word(value: int) -> str:
    """Format word as 16 `0`/`1` characters, most significant bit first."""
    return f"{value:0{WORD_WIDTH}b}"


def _resolve_operand(instruction: AddressInstruction, state: EncoderState) -> int:
    operand, at = instruction.operand, instruction.location
    if instruction.is_literal:
        return int(operand, base=10)

    if state.symbols.contains(operand):
        return state.symbols.get(operand, at=at)

    if not is_valid_symbol(operand):
        raise UndefinedSymbolError(name=operand, at=at)
    return state.allocate_variable(operand)
