from __future__ import annotations

import os
from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path

from hasm.cli.executable import cli_get_executable_program

THREAD_OPTIMAL_WORKERS_COUNT = (os.cpu_count() or 1) * 2


@dataclass(frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole Hack assembler testkit process."""

    directory: Path
    verbose: bool

    test_files_pattern: str
    excluded_test_files: list[str]
    expected_suffix: str

    fail_with_abnormal_exit_code: bool
    max_thread_workers: int


def parse_cli_arguments(argv: list[str] | None = None) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    parser = _construct_argument_parser()
    args = parser.parse_args(argv)

    return CLIArguments(
        verbose=not bool(args.silent),
        directory=Path(args.directory),
        max_thread_workers=args.max_thread_workers,
        excluded_test_files=args.excluded_test_files,
        test_files_pattern=args.test_files_pattern,
        expected_suffix=args.expected_suffix,
        fail_with_abnormal_exit_code=bool(args.fail_with_abnormal_exit_code),
    )


def _construct_argument_parser() -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Hack Assembler Testkit - CLI for testing assembler against expected machine code",
        add_help=True,
        prog=cli_get_executable_program(module="hasm.testkit", warn_proper_installation=False),
    )

    parser.add_argument(
        "--directory",
        "-d",
        type=str,
        default="./tests",
        help="Directory where to search test cases, defaults to `./tests`",
    )

    parser.add_argument(
        "--pattern",
        "-p",
        dest="test_files_pattern",
        default="**/*.asm",
        help="Pattern for file that is treated as test cases, defaults to `**/*.asm`",
    )

    parser.add_argument(
        "--exclude",
        "-e",
        dest="excluded_test_files",
        default=[],
        action="append",
        help="Filename of test case to exclude, may be passed several times",
    )

    parser.add_argument(
        "--expected-suffix",
        default=".cmp",
        help="Suffix of file with expected machine code near test case, defaults to `.cmp`",
    )

    parser.add_argument(
        "--fail-with-abnormal-exit-code",
        dest="fail_with_abnormal_exit_code",
        default=False,
        action="store_true",
        help="If passed will exit abnormally if any test is failing",
    )

    parser.add_argument(
        "--max-thread-workers",
        type=int,
        default=THREAD_OPTIMAL_WORKERS_COUNT,
        help=f"Max amount of threads to assemble test cases, defaults to {THREAD_OPTIMAL_WORKERS_COUNT}",
    )

    parser.add_argument(
        "--silent",
        "-s",
        default=False,
        action="store_true",
        help="If passed will hide INFO level messages",
    )
    return parser
