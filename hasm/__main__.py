"""Entry point for CLI.

Only for calling via `python -m hasm`, which is considered as bad practice.
"""

from hasm.cli.__main__ import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
