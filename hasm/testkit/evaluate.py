from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

from libhasm.exceptions import HasmError
from libhasm.hasm import process_input_file

from .test import OutputMismatch, Test, TestStatus

if TYPE_CHECKING:
    from pathlib import Path

    from libhasm.config import AssemblerConfig


def evaluate_test_case(
    path: Path,
    expected_suffix: str,
    config: AssemblerConfig | None = None,
) -> Test:
    """Assemble single test case and compare it with expected machine code file near it."""
    expected_path = path.with_suffix(expected_suffix)
    if not expected_path.is_file():
        return Test(path=path, status=TestStatus.SKIPPED)

    try:
        program = process_input_file(path, config=config)
    except HasmError as e:
        return Test(
            path=path,
            status=TestStatus.TOOLCHAIN_ERROR,
            expected_path=expected_path,
            error=e,
        )

    expected = read_expected_words(expected_path)
    actual = [word.bits for word in program.machine_words]
    if mismatch := find_first_mismatch(expected, actual):
        return Test(
            path=path,
            status=TestStatus.OUTPUT_MISMATCH,
            expected_path=expected_path,
            mismatch=mismatch,
        )

    return Test(path=path, status=TestStatus.SUCCESS, expected_path=expected_path)


def read_expected_words(path: Path) -> list[str]:
    """Read expected machine words, ignoring surrounding whitespace and blank lines."""
    lines = path.read_text(encoding="ascii").splitlines()
    return [line.strip() for line in lines if line.strip()]


def find_first_mismatch(expected: list[str], actual: list[str]) -> OutputMismatch | None:
    for address, (expected_word, actual_word) in enumerate(zip_longest(expected, actual)):
        if expected_word != actual_word:
            return OutputMismatch(
                address=address,
                expected=expected_word,
                actual=actual_word,
            )
    return None
