from __future__ import annotations

import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from hasm.cli.errors.error_handler import cli_hasm_error_handler
from hasm.cli.output import cli_message
from hasm.testkit.cli.matrix import display_test_matrix
from hasm.testkit.test import TestStatus

from .cli.arguments import CLIArguments, parse_cli_arguments
from .evaluate import evaluate_test_case

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from .test import Test

NANOS_TO_SECONDS = 1_000_000_000


def cli_entry_point(argv: list[str] | None = None) -> None:
    """CLI main entry."""
    with cli_hasm_error_handler(
        debug_user_friendly_errors=False,
    ):
        args = parse_cli_arguments(argv)
        cli_process_testkit_runner(args)
        return sys.exit(0)


def cli_process_testkit_runner(args: CLIArguments) -> None:
    """Process full testkit run."""
    cli_message(level="INFO", text="Searching test files...", verbose=args.verbose)

    test_paths = search_test_case_files(
        args.directory,
        args.test_files_pattern,
        excluded_filenames=args.excluded_test_files,
    )
    cli_message(
        level="INFO",
        text=f"Found {len(test_paths)} test case files.",
        verbose=args.verbose,
    )

    start_time = time.perf_counter_ns()
    test_matrix = evaluate_test_matrix_threaded(test_paths, args=args)

    time_taken = (time.perf_counter_ns() - start_time) / NANOS_TO_SECONDS
    cli_message(
        level="INFO",
        text=f"Completed testkit run with {len(test_paths)} cases in {time_taken:.2f}s.",
        verbose=args.verbose,
    )
    display_test_matrix(test_matrix)
    display_test_errors(test_matrix)

    has_failing_tests = any(
        t.status in (TestStatus.TOOLCHAIN_ERROR, TestStatus.OUTPUT_MISMATCH)
        for t in test_matrix
    )
    if has_failing_tests and args.fail_with_abnormal_exit_code:
        # CI mostly:
        print()
        cli_message("ERROR", "Some test(s) failing, exiting abnormally (exit code 1)")
        return sys.exit(1)

    return sys.exit(0)


def evaluate_test_matrix_threaded(
    test_paths: Sequence[Path],
    *,
    args: CLIArguments,
) -> list[Test]:
    def evaluate_single_test(test_path: Path) -> Test:
        return evaluate_test_case(test_path, expected_suffix=args.expected_suffix)

    max_workers = max(1, min(len(test_paths), args.max_thread_workers))

    if max_workers <= 1:
        return [evaluate_single_test(test_path) for test_path in test_paths]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(evaluate_single_test, test_path) for test_path in test_paths
        ]

        return [future.result() for future in futures]


def display_test_errors(matrix: list[Test]) -> None:
    if any(test.error or test.mismatch for test in matrix):
        cli_message("ERROR", "While running tests, some errors were occurred:")
    for test in matrix:
        if test.error is not None:
            cli_message("INFO", f"While testing `{test.path}`:")
            cli_message("ERROR", repr(test.error))
            continue
        if test.mismatch is not None:
            mismatch = test.mismatch
            cli_message("INFO", f"While testing `{test.path}`:")
            cli_message(
                "ERROR",
                f"Machine word at address {mismatch.address} is '{mismatch.actual}' while expected '{mismatch.expected}' (from `{test.expected_path}`)",
            )


def search_test_case_files(
    directory: Path,
    pattern: str,
    excluded_filenames: list[str],
) -> list[Path]:
    return sorted(
        p
        for p in directory.glob(pattern, case_sensitive=False)
        if p.name not in excluded_filenames and p.is_file()
    )
