from __future__ import annotations

import sys
from typing import Literal, NoReturn

type LEVEL_T = Literal["INFO", "WARNING", "ERROR", "SUCCESS"]


class CLIColor:
    """ANSI escape sequences for colored terminal output."""

    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"


LEVEL_COLORS: dict[LEVEL_T, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
    "SUCCESS": CLIColor.GREEN,
}


def cli_message(level: LEVEL_T, text: str, *, verbose: bool = True) -> None:
    """Emit message for CLI user, INFO messages are only displayed when verbose."""
    if level == "INFO" and not verbose:
        return

    stream = sys.stderr if level in ("ERROR", "WARNING") else sys.stdout
    color = LEVEL_COLORS[level] if stream.isatty() else ""
    reset = CLIColor.RESET if color else ""
    print(f"{color}[{level}]{reset} {text}", file=stream)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error and exit abnormally."""
    cli_message("ERROR", text)
    sys.exit(1)
