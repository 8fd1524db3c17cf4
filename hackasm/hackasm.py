"""Assembler core entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hackasm.codegen.tables import HACK_FIELD_TABLES
from hackasm.exceptions import AssemblyFailedError, HackAsmError
from hackasm.lexer.io import open_source_file_line_stream
from hackasm.lexer.lexer import lex_instructions
from hackasm.passes.first_pass import perform_first_pass
from hackasm.passes.second_pass import perform_second_pass

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from hackasm.codegen.tables import FieldEncodingTables
    from hackasm.config import AssemblerConfig
    from hackasm.symbols.table import SymbolTable

HACK_FILE_SUFFIX = ".hack"


@dataclass(frozen=True, slots=True)
class AssemblyResult:
    """Machine words of an program (index is an ROM address) with final symbol table."""

    words: tuple[str, ...]
    symbols: SymbolTable


def assemble_lines(
    lines: Iterable[str],
    *,
    filepath: Path | None = None,
    config: AssemblerConfig | None = None,
    tables: FieldEncodingTables = HACK_FIELD_TABLES,
) -> AssemblyResult:
    """Core entry for assembler API.

    Translates raw source lines into machine words, line-by-line.
    Errors from both passes are collected, and if there is any, no words are returned.

    :raises AssemblyFailedError: With every error found within given lines
    """
    errors: list[HackAsmError] = []

    instructions = lex_instructions(
        lines,
        filepath=filepath,
        config=config,
        on_error=errors.append,
    )
    first_pass = perform_first_pass(instructions, on_error=errors.append)
    second_pass = perform_second_pass(
        first_pass,
        tables=tables,
        config=config,
        on_error=errors.append,
    )

    if errors:
        raise AssemblyFailedError(errors)
    return AssemblyResult(words=second_pass.words, symbols=second_pass.symbols)


def process_input_file(
    filepath: Path,
    *,
    config: AssemblerConfig | None = None,
) -> AssemblyResult:
    """Assemble given source file (`.asm`)."""
    io = open_source_file_line_stream(filepath)
    return assemble_lines(io, filepath=filepath, config=config)


def write_hack_file(filepath: Path, words: Iterable[str]) -> None:
    """Write machine words as text, one word per line."""
    with filepath.open("w", encoding="utf-8") as fd:
        fd.writelines(f"{word}\n" for word in words)


def infer_hack_filepath(source: Path) -> Path:
    return source.with_suffix(HACK_FILE_SUFFIX)
