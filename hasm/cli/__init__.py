"""Command-line interface for Hack assembler toolchain."""
