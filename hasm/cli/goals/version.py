import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from hasm.cli.parser.arguments import CLIArguments
from libhasm.encoder.mnemonics import COMP_MNEMONICS, DEST_MNEMONICS, JUMP_MNEMONICS
from libhasm.output.formats import OutputFormat
from libhasm.symbols.reserved import RESERVED_SYMBOLS

DISTRIBUTION_NAME = "hasm"


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Hack assembler toolchain]")
    print(f"\tVersion: {_get_distribution_version()}")
    print("Target (Hack 16-bit):")
    print(f"\tReserved symbols: {len(RESERVED_SYMBOLS)}")
    print(
        f"\tMnemonics: {len(COMP_MNEMONICS)} comp, {len(DEST_MNEMONICS)} dest, {len(JUMP_MNEMONICS)} jump",
    )
    print(f"\tOutput formats: {', '.join(f.value for f in OutputFormat)}")
    print(f"\tVariable base address: {args.assembler.variable_base_address}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def _get_distribution_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "(not installed)"
