from __future__ import annotations

from typing import TYPE_CHECKING

from hasm.cli.output import cli_message
from libhasm.exceptions import HasmError
from libhasm.hasm import process_input_file

if TYPE_CHECKING:
    from collections.abc import Callable

    from hasm.cli.parser.arguments import CLIArguments
    from libhasm.program import AssembledProgram


def cli_assemble_each_source_file(
    args: CLIArguments,
    on_assembled: Callable[[AssembledProgram], None],
) -> int:
    """Assemble each input file independently and pass successfully assembled programs to callback.

    Each file is assembled with its own symbol table.
    With fail-fast, first error is propagated to CLI error handler.

    :returns failures: Amount of files that failed to assemble
    """
    failures = 0
    for path in args.source_filepaths:
        cli_message("INFO", f"Assembling '{path}'...", verbose=args.verbose)
        try:
            program = process_input_file(path, config=args.assembler)
        except HasmError as he:
            if args.fail_fast or len(args.source_filepaths) == 1:
                raise
            cli_message("ERROR", repr(he))
            failures += 1
            continue

        on_assembled(program)
    return failures
