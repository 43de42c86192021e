from collections.abc import Iterable
from difflib import get_close_matches
from typing import Literal

from libhasm.exceptions import HasmError
from libhasm.source.location import SourceLocation


class UnknownMnemonicError(HasmError):
    def __init__(
        self,
        field: Literal["dest", "comp", "jump"],
        mnemonic: str,
        known_mnemonics: Iterable[str],
        at: SourceLocation | None = None,
    ) -> None:
        self.field = field
        self.mnemonic = mnemonic
        self.known_mnemonics = [m for m in known_mnemonics if m]
        self.at = at

    def __repr__(self) -> str:
        best_match = get_close_matches(self.mnemonic, self.known_mnemonics, n=1)
        did_you_mean = f"\nDid you mean '{best_match[0]}'?" if best_match else ""
        return f"""Unknown `{self.field}` mnemonic '{self.mnemonic}'{self.where}!

Known `{self.field}` mnemonics: {", ".join(self.known_mnemonics)}{did_you_mean}

{self.generic_error_name}"""
