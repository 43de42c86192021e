from pathlib import Path

from libhasm.exceptions import HasmError


class InputUnavailableError(HasmError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to read source file '{self.path}'!

Reason: {self.reason}
Ensure that file exists and is readable text file.

{self.generic_error_name}"""
