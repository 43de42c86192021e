import pytest

from libhasm.config import AssemblerConfig
from libhasm.encoder.encoder import (
    encode_field,
    encode_instructions,
    format_word,
)
from libhasm.encoder.errors import AddressOutOfRangeError, UnknownMnemonicError
from libhasm.encoder.mnemonics import COMP_MNEMONICS, DEST_MNEMONICS, JUMP_MNEMONICS
from libhasm.instructions.decoder import decode_instructions
from libhasm.instructions.instruction import AddressInstruction
from libhasm.source.location import SourceLocation
from libhasm.source.normalizer import normalize_source_lines
from libhasm.symbols.errors import UndefinedSymbolError
from libhasm.symbols.table import SymbolTable, new_symbol_table


def test_mnemonic_tables_size() -> None:
    assert len(DEST_MNEMONICS) == 8
    assert len(JUMP_MNEMONICS) == 8
    assert len(COMP_MNEMONICS) == 28


def test_encode_field_deterministic() -> None:
    for mnemonic in COMP_MNEMONICS:
        assert encode_field("comp", mnemonic) == encode_field("comp", mnemonic)


def test_encode_field_empty_dest_and_jump() -> None:
    assert encode_field("dest", "") == 0
    assert encode_field("jump", "") == 0


def test_encode_field_empty_comp_unknown() -> None:
    with pytest.raises(UnknownMnemonicError):
        encode_field("comp", "")


def test_encode_field_unknown() -> None:
    with pytest.raises(UnknownMnemonicError) as e:
        encode_field("jump", "JMPP")
    assert "Did you mean 'JMP'?" in repr(e.value)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("D=A", "1110110000010000"),
        ("D=D+A", "1110000010010000"),
        ("M=D", "1110001100001000"),
        ("0;JMP", "1110101010000111"),
        ("AMD=M+1;JLE", "1111110111111110"),
        ("D;JGT", "1110001100000001"),
        ("M=!M", "1111110001001000"),
        ("D=D|M", "1111010101010000"),
        ("A=-1", "1110111010100000"),
    ],
)
def test_encode_computation_instruction(line: str, expected: str) -> None:
    (word,) = _encode([line], new_symbol_table())
    assert word == expected


def test_encode_computation_unknown_comp() -> None:
    with pytest.raises(UnknownMnemonicError) as e:
        _encode(["D=FOO"], new_symbol_table())
    assert e.value.field == "comp"
    assert e.value.mnemonic == "FOO"


def test_encode_computation_unknown_dest() -> None:
    with pytest.raises(UnknownMnemonicError) as e:
        _encode(["X=D"], new_symbol_table())
    assert e.value.field == "dest"


def test_encode_address_literal() -> None:
    assert _encode(["@0", "@21", "@32767"], new_symbol_table()) == [
        "0000000000000000",
        "0000000000010101",
        "0111111111111111",
    ]


def test_encode_address_reserved_symbols() -> None:
    assert _encode(["@SCREEN", "@KBD", "@R15", "@THAT"], new_symbol_table()) == [
        format_word(16384),
        format_word(24576),
        format_word(15),
        format_word(4),
    ]


def test_encode_address_out_of_range() -> None:
    with pytest.raises(AddressOutOfRangeError):
        _encode(["@32768"], new_symbol_table())


def test_encode_address_out_of_range_unchecked_is_masked() -> None:
    config = AssemblerConfig(check_address_range=False)
    assert _encode(["@32769"], new_symbol_table(), config) == ["0000000000000001"]


def test_encode_variables_allocation() -> None:
    symbols = new_symbol_table()
    words = _encode(["@foo", "M=1", "@bar", "M=1", "@foo", "M=1"], symbols)
    assert symbols.get("foo") == 16
    assert symbols.get("bar") == 17
    assert words[0] == words[4] == format_word(16)
    assert words[2] == format_word(17)


def test_encode_variables_custom_base() -> None:
    symbols = new_symbol_table()
    _encode(["@x", "@y"], symbols, AssemblerConfig(variable_base_address=1024))
    assert symbols.get("x") == 1024
    assert symbols.get("y") == 1025


def test_encode_skips_label_declarations_and_counts_addresses() -> None:
    instructions = decode_instructions(
        normalize_source_lines("toolchain", ["(A_LABEL)", "@1", "(B_LABEL)", "D=A", "@2"]),
    )
    symbols = new_symbol_table()
    words = list(encode_instructions(instructions, symbols))
    assert [word.address for word in words] == [0, 1, 2]
    assert [word.instruction.text for word in words] == ["@1", "D=A", "@2"]


def test_encode_invalid_operand_undefined() -> None:
    with pytest.raises(UndefinedSymbolError):
        _encode(["@"], new_symbol_table())
    with pytest.raises(UndefinedSymbolError):
        _encode(["@1abc"], new_symbol_table())


def test_encode_address_operand_kind_comes_from_decoded_instruction() -> None:
    at = SourceLocation.from_source("toolchain", 0, 0)
    symbols = new_symbol_table()
    symbols.add("100", 7)

    literal = AddressInstruction(operand="100", is_symbolic=False, text="@100", location=at)
    symbolic = AddressInstruction(operand="100", is_symbolic=True, text="@100", location=at)
    variable = AddressInstruction(operand="counter", is_symbolic=True, text="@counter", location=at)

    words = list(encode_instructions([literal, symbolic, variable], symbols))
    assert [word.value for word in words] == [100, 7, 16]
    assert symbols.get("counter") == 16


def test_format_word() -> None:
    assert format_word(0) == "0" * 16
    assert format_word(0xFFFF) == "1" * 16
    assert format_word(5) == "0000000000000101"


def _encode(
    lines: list[str],
    symbols: SymbolTable,
    config: AssemblerConfig | None = None,
) -> list[str]:
    instructions = decode_instructions(normalize_source_lines("toolchain", lines))
    return [word.bits for word in encode_instructions(instructions, symbols, config)]
