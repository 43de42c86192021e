from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from hasm.cli.goals._batch import cli_assemble_each_source_file
from hasm.cli.infer import infer_output_filename
from hasm.cli.output import cli_message
from libhasm.output.formats import write_program_file

if TYPE_CHECKING:
    from hasm.cli.parser.arguments import CLIArguments
    from libhasm.program import AssembledProgram


def cli_perform_assemble_goal(args: CLIArguments) -> NoReturn:
    """Assemble input source files and write machine code file for each of them."""

    def write_assembled_program(program: AssembledProgram) -> None:
        assert isinstance(program.source, Path)
        output = args.output_filepath or infer_output_filename(
            program.source,
            args.output_format,
        )
        write_program_file(output, program.words, args.output_format)
        cli_message(
            "INFO",
            f"Assembled '{program.source}' into '{output}' ({len(program)} words)",
            verbose=args.verbose,
        )

    failures = cli_assemble_each_source_file(args, on_assembled=write_assembled_program)
    if failures:
        cli_message(
            "ERROR",
            f"{failures} of {len(args.source_filepaths)} file(s) failed to assemble!",
        )
        return sys.exit(1)
    return sys.exit(0)
