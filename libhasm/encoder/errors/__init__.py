"""Errors collections that encoder may raise (user-facing ones)."""

from .address_out_of_range import AddressOutOfRangeError
from .unknown_mnemonic import UnknownMnemonicError

__all__ = [
    "AddressOutOfRangeError",
    "UnknownMnemonicError",
]
