from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hasm.cli.goals._batch import cli_assemble_each_source_file

if TYPE_CHECKING:
    from hasm.cli.parser.arguments import CLIArguments
    from libhasm.program import AssembledProgram


def cli_perform_listing_goal(args: CLIArguments) -> NoReturn:
    """Perform listing display only goal that emits every machine word with its source into stdout."""
    assert args.listing, "Cannot perform listing goal with no listing flag set!"

    failures = cli_assemble_each_source_file(args, on_assembled=_emit_listing_into_stdout)
    return sys.exit(1 if failures else 0)


def _emit_listing_into_stdout(program: AssembledProgram) -> None:
    print("Listing:", program.source)
    for word in program.machine_words:
        print(f"\t{word.address:>5} {word.bits}  {word.instruction.text}")
