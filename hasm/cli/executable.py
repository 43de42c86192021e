from __future__ import annotations

import sys
from pathlib import Path

from hasm.cli.output import cli_message

# Displayed program name when invoked as an module (`argv[0]` is `.../__main__.py`)
MODULE_INVOCATION_PROG = "python -m {module}"


def cli_get_executable_program(
    *,
    override: str | None = None,
    module: str = "hasm",
    warn_proper_installation: bool,
) -> str:
    """Get program name for usage and help messages."""
    if override:
        return override

    executable = Path(sys.argv[0]).name
    if executable != "__main__.py":
        return executable

    prog = MODULE_INVOCATION_PROG.format(module=module)
    if warn_proper_installation:
        cli_message(
            "WARNING",
            f"Running as `{prog}`, consider installing package to get console script!",
        )
    return prog
