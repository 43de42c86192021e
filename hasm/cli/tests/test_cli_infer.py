from pathlib import Path

from hasm.cli.infer import infer_output_filename
from libhasm.output.formats import OutputFormat


def test_infer_output_filename() -> None:
    assert infer_output_filename(Path("prog/Max.asm"), OutputFormat.HACK) == Path("prog/Max.hack")
    assert infer_output_filename(Path("Max.asm"), OutputFormat.BINARY) == Path("Max.bin")
    assert infer_output_filename(Path("Max"), OutputFormat.HACK) == Path("Max.hack")


def test_infer_output_filename_same_suffix() -> None:
    assert infer_output_filename(Path("Max.hack"), OutputFormat.HACK) == Path("Max.hack.hack")
