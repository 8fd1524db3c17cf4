"""Hack assembler.

Provides toolchain including CLI and two-pass assembler translating Hack assembly into machine words.
"""

from .hackasm import assemble_lines, process_input_file

__all__ = [
    "assemble_lines",
    "process_input_file",
]
