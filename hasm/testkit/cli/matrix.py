from hasm.cli.output import CLIColor
from hasm.testkit.test import Test, TestStatus

COLORS: dict[TestStatus, str] = {
    TestStatus.SUCCESS: CLIColor.GREEN,
    TestStatus.TOOLCHAIN_ERROR: CLIColor.RED,
    TestStatus.OUTPUT_MISMATCH: CLIColor.RED,
    TestStatus.SKIPPED: CLIColor.RESET,
}

ICONS: dict[TestStatus, str] = {
    TestStatus.SUCCESS: "+",
    TestStatus.TOOLCHAIN_ERROR: "-",
    TestStatus.OUTPUT_MISMATCH: "@",
    TestStatus.SKIPPED: ".",
}


def display_test_matrix(matrix: list[Test]) -> None:
    for test in matrix:
        color = COLORS[test.status]
        icon = ICONS[test.status]
        print(f"{color}{icon}{CLIColor.RESET}", test.path)
