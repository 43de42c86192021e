from dataclasses import dataclass, field

# Hack data memory layout: R0..R15 occupy 0..15, variables start right after
DEFAULT_VARIABLE_BASE_ADDRESS = 16

# Address instruction carries 15 bits of payload (bit 15 is opcode, always zero)
MAX_ADDRESS = (1 << 15) - 1


@dataclass(frozen=True)
class AssemblerConfig:
    """Configuration for an assembly run.

    Defaults reproduce reference Hack assembler behavior,
    stricter checks are opt-in (except address range check which is a hardening).
    """

    # First address that is given to newly referenced variable
    variable_base_address: int = field(default=DEFAULT_VARIABLE_BASE_ADDRESS)

    # Raise an error when same label is declared twice
    # False means latest declaration silently wins
    strict_label_declarations: bool = field(default=False)

    # Raise an error for addresses that does not fit into 15 bits
    # False means address is masked to 15 bits
    check_address_range: bool = field(default=True)
