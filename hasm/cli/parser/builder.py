from argparse import ArgumentParser

from hasm.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Hack Assembler - CLI for translating Hack assembly into Hack machine code",
        usage=f"{prog} files... [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Input source code files in Hack assembly to process (`.asm` files)",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_output_group(parser)
    groups.add_inspection_group(parser)
    groups.add_assembler_group(parser)
    groups.add_logging_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
