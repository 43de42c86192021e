"""Symbols that are predefined by Hack architecture and preloaded into every symbol table."""

from collections.abc import Mapping
from types import MappingProxyType

GENERAL_PURPOSE_REGISTERS_COUNT = 16

SCREEN_ADDRESS = 16384
KEYBOARD_ADDRESS = 24576

# Virtual machine pointers share addresses with R0..R4 (e.g SP and R0 both are 0)
_POINTER_REGISTERS: dict[str, int] = {
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
}

_GENERAL_PURPOSE_REGISTERS: dict[str, int] = {
    f"R{register}": register for register in range(GENERAL_PURPOSE_REGISTERS_COUNT)
}

_MEMORY_MAPPED_IO: dict[str, int] = {
    "SCREEN": SCREEN_ADDRESS,
    "KBD": KEYBOARD_ADDRESS,
}

RESERVED_SYMBOLS: Mapping[str, int] = MappingProxyType(
    {
        **_POINTER_REGISTERS,
        **_GENERAL_PURPOSE_REGISTERS,
        **_MEMORY_MAPPED_IO,
    },
)
