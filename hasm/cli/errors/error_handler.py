import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from hasm.cli.output import cli_fatal_abort, cli_message
from libhasm.exceptions import HasmError


@contextmanager
def cli_hasm_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap goal so assembler and filesystem errors are emitted as fatal CLI messages instead of tracebacks.

    Source read failures are already `HasmError`, so `OSError` here is an output (write) failure.
    """
    try:
        yield
    except HasmError as he:
        if not debug_user_friendly_errors:
            raise
        return cli_fatal_abort(repr(he))
    except OSError as oe:
        if not debug_user_friendly_errors:
            raise
        target = f" '{oe.filename}'" if oe.filename else ""
        return cli_fatal_abort(f"Unable to write output{target}: {oe.strerror or oe}")
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Assembly interrupted by user (Ctrl+C), partially written outputs may remain!")
        return sys.exit(0)
    cli_fatal_abort("Bug in an CLI: error handler must has no-return")
