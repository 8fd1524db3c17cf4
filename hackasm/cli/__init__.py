"""Command-line interface for the assembler toolchain."""
