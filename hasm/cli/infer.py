from pathlib import Path

from libhasm.output.formats import OutputFormat


def infer_output_filename(
    source_filepath: Path,
    output_format: OutputFormat,
) -> Path:
    """Infer filename for output from input source file by replacing its suffix."""
    suffix = output_format.file_suffix

    if source_filepath.suffix == suffix:
        suffix = source_filepath.suffix + suffix
    return source_filepath.with_suffix(suffix)
