from pathlib import Path

import pytest

from hasm.cli.__main__ import cli_entry_point

ADD_SOURCE = "// Computes R0 = 2 + 3\n@2\nD=A\n@3\nD=D+A\n@0\nM=D\n"
ADD_EXPECTED = (
    "0000000000000010\n"
    "1110110000010000\n"
    "0000000000000011\n"
    "1110000010010000\n"
    "0000000000000000\n"
    "1110001100001000\n"
)


def test_cli_assemble_goal(tmp_path: Path) -> None:
    source = tmp_path / "Add.asm"
    source.write_text(ADD_SOURCE)

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(source)])
    assert e.value.code == 0
    assert (tmp_path / "Add.hack").read_text() == ADD_EXPECTED


def test_cli_assemble_goal_binary_output(tmp_path: Path) -> None:
    source = tmp_path / "Add.asm"
    source.write_text(ADD_SOURCE)
    output = tmp_path / "add.out"

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(source), "-o", str(output), "-of", "binary"])
    assert e.value.code == 0
    assert output.read_bytes()[:4] == b"\x02\x00\x10\xec"
    assert len(output.read_bytes()) == 12


def test_cli_assemble_goal_error_writes_nothing(tmp_path: Path) -> None:
    source = tmp_path / "Broken.asm"
    source.write_text("@1\nD=FOO\n")

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(source)])
    assert e.value.code == 1
    assert not (tmp_path / "Broken.hack").exists()


def test_cli_assemble_goal_continues_after_failed_file(tmp_path: Path) -> None:
    broken = tmp_path / "Broken.asm"
    broken.write_text("@1\nD=FOO\n")
    source = tmp_path / "Add.asm"
    source.write_text(ADD_SOURCE)

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(broken), str(source)])
    assert e.value.code == 1
    assert not (tmp_path / "Broken.hack").exists()
    assert (tmp_path / "Add.hack").read_text() == ADD_EXPECTED


def test_cli_assemble_goal_fail_fast(tmp_path: Path) -> None:
    broken = tmp_path / "Broken.asm"
    broken.write_text("@1\nD=FOO\n")
    source = tmp_path / "Add.asm"
    source.write_text(ADD_SOURCE)

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(broken), str(source), "--fail-fast"])
    assert e.value.code == 1
    assert not (tmp_path / "Add.hack").exists()


def test_cli_assemble_goal_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(tmp_path / "Missing.asm")])
    assert e.value.code == 1


def test_cli_symbols_goal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "Loop.asm"
    source.write_text("@i\nM=1\n(LOOP)\n@LOOP\n0;JMP\n")

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(source), "--symbols"])
    assert e.value.code == 0

    out = capsys.readouterr().out
    assert "2 LOOP" in out
    assert "16 i" in out
    assert "SCREEN" not in out
    assert not (tmp_path / "Loop.hack").exists()


def test_cli_symbols_goal_shows_label_redeclaring_reserved_name(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "Shadow.asm"
    source.write_text("(R0)\n@R0\n0;JMP\n")

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(source), "--symbols"])
    assert e.value.code == 0

    out = capsys.readouterr().out
    assert "\t    0 R0\n" in out
    assert "SP" not in out
    assert "R1\n" not in out


def test_cli_listing_goal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "Loop.asm"
    source.write_text("(LOOP)\n@LOOP\n0;JMP\n")

    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=[str(source), "--listing"])
    assert e.value.code == 0

    out = capsys.readouterr().out
    assert "0 0000000000000000  @LOOP" in out
    assert "1 1110101010000111  0;JMP" in out


def test_cli_version_goal(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as e:
        cli_entry_point(prog="hasm", argv=["--version"])
    assert e.value.code == 0
    assert "Reserved symbols: 23" in capsys.readouterr().out
