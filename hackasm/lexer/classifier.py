"""Classification of sanitized lines into label / address / compute instructions."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING

from hackasm.config import AssemblerConfig, build_default_assembler_config

from .errors import MalformedAddressOperandError, MalformedLabelError
from .instructions import (
    NULL_FIELD,
    AddressInstruction,
    ComputeInstruction,
    Instruction,
    LabelDeclaration,
)

if TYPE_CHECKING:
    from .location import SourceLocation

LABEL_OPEN = "("
LABEL_CLOSE = ")"
ADDRESS_MARK = "@"
DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"

LITERAL_ADDRESS_PATTERN = re.compile(r"[0-9]+")

_SYMBOL_HEAD = "A-Za-z"
_SYMBOL_TAIL = "A-Za-z0-9_"
_SYMBOL_EXTENDED = r"_.$:"


def classify_line(
    line: str,
    location: SourceLocation,
    config: AssemblerConfig | None = None,
) -> Instruction:
    """Classify sanitized (non-empty) line into an instruction.

    :raises MalformedLabelError: If label declaration is not properly closed or named
    :raises MalformedAddressOperandError: If `@` operand is neither number nor symbol
    """
    assert line, f"{classify_line.__name__} expects sanitized non-empty line"
    config = config or build_default_assembler_config()

    if line.startswith(LABEL_OPEN):
        return _classify_label(line, location, config)

    if line.startswith(ADDRESS_MARK):
        return _classify_address(line, location, config)

    return _classify_compute(line, location)


def is_valid_symbol_name(name: str, config: AssemblerConfig) -> bool:
    """Check that given name may be used as symbol under given configuration."""
    pattern = _symbol_name_pattern(
        allow_single_letter=config.allow_single_letter_symbols,
        allow_extended_alphabet=config.allow_extended_symbol_alphabet,
    )
    return pattern.fullmatch(name) is not None


def _classify_label(
    line: str,
    location: SourceLocation,
    config: AssemblerConfig,
) -> LabelDeclaration:
    close_at = line.find(LABEL_CLOSE)
    if close_at == -1:
        raise MalformedLabelError(line, "Missing closing parenthesis `)`.", location)

    if trailing := line[close_at + len(LABEL_CLOSE) :]:
        raise MalformedLabelError(
            line,
            f"Unexpected text `{trailing}` after closing parenthesis.",
            location,
        )

    symbol = line[len(LABEL_OPEN) : close_at]
    if not symbol:
        raise MalformedLabelError(line, "Label name is empty.", location)
    if not is_valid_symbol_name(symbol, config):
        raise MalformedLabelError(
            line,
            f"Label name `{symbol}` is not an valid symbol name.",
            location,
        )
    return LabelDeclaration(symbol=symbol, location=location)


def _classify_address(
    line: str,
    location: SourceLocation,
    config: AssemblerConfig,
) -> AddressInstruction:
    operand = line[len(ADDRESS_MARK) :]

    if LITERAL_ADDRESS_PATTERN.fullmatch(operand):
        # Range is validated at encoding, as literal is still an well-formed number here
        return AddressInstruction(operand=int(operand), location=location)

    if is_valid_symbol_name(operand, config):
        return AddressInstruction(operand=operand, location=location)

    raise MalformedAddressOperandError(operand, location)


def _classify_compute(line: str, location: SourceLocation) -> ComputeInstruction:
    # First occurrence only, multiple separators are left for field lookup to reject.
    dest_at = line.find(DEST_SEPARATOR)
    jump_at = line.find(JUMP_SEPARATOR)

    dest = NULL_FIELD
    comp_from = 0
    if dest_at != -1:
        dest = line[:dest_at]
        comp_from = dest_at + len(DEST_SEPARATOR)

    if jump_at == -1:
        return ComputeInstruction(
            dest=dest,
            comp=line[comp_from:],
            jump=NULL_FIELD,
            location=location,
        )

    return ComputeInstruction(
        dest=dest,
        comp=line[comp_from:jump_at],
        jump=line[jump_at + len(JUMP_SEPARATOR) :],
        location=location,
    )


@lru_cache
def _symbol_name_pattern(
    *,
    allow_single_letter: bool,
    allow_extended_alphabet: bool,
) -> re.Pattern[str]:
    head, tail = _SYMBOL_HEAD, _SYMBOL_TAIL
    if allow_extended_alphabet:
        head += _SYMBOL_EXTENDED
        tail += _SYMBOL_EXTENDED
    quantifier = "*" if allow_single_letter else "+"
    return re.compile(f"[{head}][{tail}]{quantifier}")
