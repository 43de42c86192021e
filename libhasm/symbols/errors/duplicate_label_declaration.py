from libhasm.exceptions import HasmError
from libhasm.source.location import SourceLocation


class DuplicateLabelDeclarationError(HasmError):
    def __init__(
        self,
        name: str,
        at: SourceLocation,
        previously_declared_at: SourceLocation,
    ) -> None:
        self.name = name
        self.at = at
        self.previously_declared_at = previously_declared_at

    def __repr__(self) -> str:
        return f"""Label '{self.name}' declared twice{self.where}!

Previous declaration was at {self.previously_declared_at}
Rename one of labels or disable strict label declarations.

{self.generic_error_name}"""
