"""Testkit for Hack assembler, assembles sample programs and compares them against expected machine code."""
