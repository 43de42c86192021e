from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hasm.cli.infer import infer_output_filename
from hasm.cli.output import cli_fatal_abort
from hasm.cli.parser.arguments import CLIArguments
from libhasm.config import MAX_ADDRESS, AssemblerConfig
from libhasm.output.formats import OutputFormat

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)
    source_filepaths = _process_source_filepaths(args)
    output_format = OutputFormat(args.output_format)
    output = _process_output_path(source_filepaths, args, output_format)
    assembler = _process_assembler_config(args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        symbols=bool(args.symbols),
        listing=bool(args.listing),
        # Rest of these are mostly goal-specific
        source_filepaths=source_filepaths,
        output_filepath=output,
        output_format=output_format,
        fail_fast=bool(args.fail_fast),
        verbose=bool(args.verbose),
        assembler=assembler,
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    """Validate that goal flags is not present as mutually exclusive."""
    if sum([args.version, args.symbols, args.listing]) in (0, 1):
        return None

    return cli_fatal_abort("Goal flags is mutually exclusive!")


def _process_source_filepaths(args: Namespace) -> list[Path]:
    """Process input source files as paths."""
    paths = [Path(f) for f in args.source_files]
    if args.version:
        return paths

    if len(paths) == 0:
        return cli_fatal_abort("Expected source files to assemble!")

    if len(set(paths)) != len(paths):
        return cli_fatal_abort("Same source file is given more than once!")
    return paths


def _process_output_path(
    source_filepaths: list[Path],
    args: Namespace,
    output_format: OutputFormat,
) -> Path | None:
    """Process explicit output path, inferred paths are per source file and resolved at assembly."""
    if not args.output:
        for source_filepath in source_filepaths:
            if infer_output_filename(source_filepath, output_format) in source_filepaths:
                return cli_fatal_abort(
                    f"Inferred output path for '{source_filepath}' will rewrite another input file, please rename it.",
                )
        return None

    if len(source_filepaths) > 1:
        return cli_fatal_abort(
            "Output file path can be specified only for single input file, omit it to infer output paths!",
        )

    output = Path(args.output)
    if output in source_filepaths:
        return cli_fatal_abort(
            "Specified output file path will rewrite existing input file, please specify another output path.",
        )
    return output


def _process_assembler_config(args: Namespace) -> AssemblerConfig:
    """Process assembler options into assembler configuration."""
    variable_base_address = int(args.variable_base_address)
    if not 0 <= variable_base_address <= MAX_ADDRESS:
        return cli_fatal_abort(
            f"Variable base address must be in range 0..{MAX_ADDRESS}, got {variable_base_address}!",
        )

    return AssemblerConfig(
        variable_base_address=variable_base_address,
        strict_label_declarations=bool(args.strict_label_declarations),
        check_address_range=bool(args.check_address_range),
    )
