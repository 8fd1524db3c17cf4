"""Decoding of 16-bit machine words back into assembly text (disassembler)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.lexer.instructions import NULL_FIELD

from .encoder import (
    ADDRESS_INSTRUCTION_PREFIX,
    COMPUTE_INSTRUCTION_PREFIX,
    WORD_WIDTH,
)
from .errors import MalformedBinaryWordError
from .tables import COMP_FIELD_WIDTH, DEST_FIELD_WIDTH, HACK_FIELD_TABLES

if TYPE_CHECKING:
    from hackasm.lexer.location import SourceLocation

    from .tables import FieldEncodingTables, FieldName

BINARY_ALPHABET = frozenset("01")

_COMP_FROM = len(COMPUTE_INSTRUCTION_PREFIX)
_DEST_FROM = _COMP_FROM + COMP_FIELD_WIDTH
_JUMP_FROM = _DEST_FROM + DEST_FIELD_WIDTH


def decode_word(
    word: str,
    tables: FieldEncodingTables = HACK_FIELD_TABLES,
    *,
    at: SourceLocation | None = None,
) -> str:
    """Decode machine word into instruction text (`@N` or `dest=comp;jump` with null fields omitted).

    :raises MalformedBinaryWordError: If word cannot be an Hack instruction
    """
    _validate_word(word, at)
    if word.startswith(ADDRESS_INSTRUCTION_PREFIX):
        return f"@{int(word, 2)}"

    dest, comp, jump = decode_compute_fields(word, tables, at=at)
    text = comp
    if dest != NULL_FIELD:
        text = f"{dest}={text}"
    if jump != NULL_FIELD:
        text = f"{text};{jump}"
    return text


def decode_compute_fields(
    word: str,
    tables: FieldEncodingTables = HACK_FIELD_TABLES,
    *,
    at: SourceLocation | None = None,
) -> tuple[str, str, str]:
    """Decode compute instruction word into (dest, comp, jump) textual tokens."""
    _validate_word(word, at)
    if not word.startswith(COMPUTE_INSTRUCTION_PREFIX):
        raise MalformedBinaryWordError(
            word,
            f"Compute instruction must start with `{COMPUTE_INSTRUCTION_PREFIX}`.",
            at,
        )

    inverted = tables.inverted()
    comp = _decode_field("comp", word[_COMP_FROM:_DEST_FROM], inverted, word, at)
    dest = _decode_field("dest", word[_DEST_FROM:_JUMP_FROM], inverted, word, at)
    jump = _decode_field("jump", word[_JUMP_FROM:], inverted, word, at)
    return dest, comp, jump


def _validate_word(word: str, at: SourceLocation | None) -> None:
    if len(word) != WORD_WIDTH:
        raise MalformedBinaryWordError(
            word,
            f"Expected {WORD_WIDTH} bits but got {len(word)}.",
            at,
        )
    if not BINARY_ALPHABET.issuperset(word):
        raise MalformedBinaryWordError(word, "Word must contain only `0` and `1`.", at)


def _decode_field(
    field: FieldName,
    bits: str,
    inverted: FieldEncodingTables,
    word: str,
    at: SourceLocation | None,
) -> str:
    if (token := inverted.for_field(field).get(bits)) is None:
        raise MalformedBinaryWordError(
            word,
            f"Bits `{bits}` does not encode any `{field}` field.",
            at,
        )
    return token
