from dataclasses import dataclass
from pathlib import Path

from libhasm.config import AssemblerConfig
from libhasm.output.formats import OutputFormat


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Hack assembler toolchain process."""

    source_filepaths: list[Path]
    output_filepath: Path | None
    output_format: OutputFormat

    version: bool
    symbols: bool
    listing: bool

    fail_fast: bool
    verbose: bool

    assembler: AssemblerConfig

    cli_debug_user_friendly_errors: bool
