import argparse
from argparse import ArgumentParser

from libhasm.config import DEFAULT_VARIABLE_BASE_ADDRESS
from libhasm.output.formats import OutputFormat


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Control assembly output")
    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Output file path to generate, by default will be inferred from input filename (only for single input file)",
    )
    group.add_argument(
        "--output-format",
        "-of",
        type=str,
        required=False,
        help="Assembly output format. `hack` is text with 16 binary digits per line, `binary` is raw little-endian words.",
        default=OutputFormat.HACK.value,
        choices=[f.value for f in OutputFormat],
    )
    group.add_argument(
        "--fail-fast",
        default=False,
        action="store_true",
        help="If passed, will stop at first file that failed to assemble (by default every file is attempted)",
    )


def add_inspection_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with inspection goals into given parser."""
    group = parser.add_argument_group("Inspection", "Display assembly internals instead of writing output")
    group.add_argument(
        "--symbols",
        "-S",
        required=False,
        action="store_true",
        help="If passed will just emit resolved symbol table of provided file(s) into stdout.",
    )
    group.add_argument(
        "--listing",
        "-l",
        required=False,
        action="store_true",
        help="If passed will just emit address, machine word and source of each instruction into stdout.",
    )


def add_assembler_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with assembler options into given parser."""
    group = parser.add_argument_group("Assembler", "Fine control how source is assembled")
    group.add_argument(
        "--strict-labels",
        dest="strict_label_declarations",
        default=False,
        action="store_true",
        help="If passed, label declared twice is an error (by default latest declaration wins)",
    )
    group.add_argument(
        "--no-range-check",
        dest="check_address_range",
        default=True,
        action="store_false",
        help="If passed, addresses that does not fit into 15 bits are masked instead of being an error",
    )
    group.add_argument(
        "--variable-base",
        dest="variable_base_address",
        type=int,
        default=DEFAULT_VARIABLE_BASE_ADDRESS,
        help=f"Address of first allocated variable, defaults to {DEFAULT_VARIABLE_BASE_ADDRESS}",
    )


def add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging", "Toolchain messages")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from assembler.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
