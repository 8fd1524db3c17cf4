"""Lexer stage: sanitizing raw source lines and classifying them into instructions."""

from .classifier import classify_line, is_valid_symbol_name
from .instructions import (
    NULL_FIELD,
    AddressInstruction,
    ComputeInstruction,
    Instruction,
    LabelDeclaration,
    MachineInstruction,
)
from .lexer import lex_instructions
from .location import SourceLocation
from .sanitizer import sanitize_line

__all__ = [
    "NULL_FIELD",
    "AddressInstruction",
    "ComputeInstruction",
    "Instruction",
    "LabelDeclaration",
    "MachineInstruction",
    "SourceLocation",
    "classify_line",
    "is_valid_symbol_name",
    "lex_instructions",
    "sanitize_line",
]
