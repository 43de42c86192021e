from libhasm.exceptions import HasmError
from libhasm.source.location import SourceLocation


class AddressOutOfRangeError(HasmError):
    def __init__(
        self,
        operand: str,
        address: int,
        max_address: int,
        at: SourceLocation | None = None,
    ) -> None:
        self.operand = operand
        self.address = address
        self.max_address = max_address
        self.at = at

    def __repr__(self) -> str:
        return f"""Address {self.address} (from '@{self.operand}') is out of range{self.where}!

Address instruction may only load values in range 0..{self.max_address} (15 bits).

{self.generic_error_name}"""
