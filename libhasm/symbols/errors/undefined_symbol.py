from libhasm.exceptions import HasmError
from libhasm.source.location import SourceLocation


class UndefinedSymbolError(HasmError):
    def __init__(self, name: str, at: SourceLocation | None = None) -> None:
        self.name = name
        self.at = at

    def __repr__(self) -> str:
        return f"""Undefined symbol '{self.name}'{self.where}!

Symbol cannot be resolved as label, variable or numeric address.
Symbols must consist of letters, digits, `_`, `.`, `$`, `:` (not starting with digit).

{self.generic_error_name}"""
