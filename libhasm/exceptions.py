from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libhasm.source.location import SourceLocation


def error_class_tag(error_class: type[BaseException]) -> str:
    """Get kebab-case tag of an error class (`UnknownMnemonicError` -> `unknown-mnemonic-error`)."""
    return re.sub(r"(?<!^)(?=[A-Z])", "-", error_class.__name__).lower()


class HasmError(Exception):
    """Parent for all Hack assembler errors (exceptions).

    Subclasses render an full user-facing message within `__repr__` (emitted by CLI as-is),
    while `str()` gives only first (headline) line of it.
    """

    # Location of an offending instruction, if error is bound to one
    at: SourceLocation | None = None

    def __repr__(self) -> str:
        return f"""Undocumented assembler error{self.where} {self.args!r}!

{self.generic_error_name}"""

    def __str__(self) -> str:
        return repr(self).partition("\n")[0]

    @property
    def where(self) -> str:
        """Location suffix for headline (` at 'Prog.asm:3:1'`), empty when error has no location."""
        return f" at {self.at}" if self.at is not None else ""

    @property
    def generic_error_name(self) -> str:
        return f"[{error_class_tag(type(self))}]"
