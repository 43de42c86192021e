from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hasm.cli.goals._batch import cli_assemble_each_source_file

if TYPE_CHECKING:
    from hasm.cli.parser.arguments import CLIArguments
    from libhasm.program import AssembledProgram

DISPLAY_RESERVED_SYMBOLS = False


def cli_perform_symbols_goal(args: CLIArguments) -> NoReturn:
    """Perform symbols display only goal that emits resolved symbol table into stdout."""
    assert args.symbols, "Cannot perform symbols goal with no symbols flag set!"

    failures = cli_assemble_each_source_file(args, on_assembled=_emit_symbols_into_stdout)
    return sys.exit(1 if failures else 0)


def _emit_symbols_into_stdout(program: AssembledProgram) -> None:
    print("Symbol table:", program.source)
    symbols = program.symbols.items() if DISPLAY_RESERVED_SYMBOLS else program.symbols.bound_items()
    for name, address in sorted(symbols, key=lambda symbol: (symbol[1], symbol[0])):
        print(f"\t{address:>5} {name}")
