from __future__ import annotations

from typing import TYPE_CHECKING

from libhasm.instructions.instruction import LabelDeclaration
from libhasm.symbols.errors import DuplicateLabelDeclarationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libhasm.instructions.instruction import Instruction
    from libhasm.source.location import SourceLocation
    from libhasm.symbols.table import SymbolTable


def resolve_labels(
    instructions: Iterable[Instruction],
    symbols: SymbolTable,
    *,
    strict_label_declarations: bool = False,
) -> int:
    """Bind every label declaration to address of the next emitted instruction (first pass).

    Emits no code, label declarations do not advance instruction counter.
    Redeclared label silently overwrites its address unless strict declarations requested.

    :returns count: Amount of instructions that will be emitted by second pass
    """
    instruction_counter = 0
    declared_at: dict[str, SourceLocation] = {}

    for instruction in instructions:
        if not isinstance(instruction, LabelDeclaration):
            instruction_counter += 1
            continue

        name = instruction.name
        if strict_label_declarations and name in declared_at:
            raise DuplicateLabelDeclarationError(
                name=name,
                at=instruction.location,
                previously_declared_at=declared_at[name],
            )

        declared_at[name] = instruction.location
        symbols.add(name, instruction_counter)

    return instruction_counter
