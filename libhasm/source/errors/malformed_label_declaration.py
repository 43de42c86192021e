from libhasm.exceptions import HasmError
from libhasm.source.location import SourceLocation


class MalformedLabelDeclarationError(HasmError):
    def __init__(self, at: SourceLocation, declaration: str) -> None:
        self.at = at
        self.declaration = declaration

    def __repr__(self) -> str:
        return f"""Malformed label declaration{self.where}!

Declaration: '{self.declaration}'
Label name must be non-empty and consist of letters, digits, `_`, `.`, `$`, `:` (not starting with digit).
Did you forgot to name that label?

{self.generic_error_name}"""
