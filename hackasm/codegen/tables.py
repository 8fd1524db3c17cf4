"""Field encoding tables of compute instruction (`dest`, `comp`, `jump`).

Tables are immutable and constructed once, encoder / decoder receive them explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal, TypeAlias, assert_never

if TYPE_CHECKING:
    from collections.abc import Mapping

FieldName: TypeAlias = Literal["dest", "comp", "jump"]

DEST_FIELD_WIDTH = 3
COMP_FIELD_WIDTH = 7
JUMP_FIELD_WIDTH = 3

# Bits are (A, D, M) registers to store result into
DEST_TABLE = MappingProxyType(
    {
        "null": "000",
        "M": "001",
        "D": "010",
        "MD": "011",
        "A": "100",
        "AM": "101",
        "AD": "110",
        "AMD": "111",
    },
)

JUMP_TABLE = MappingProxyType(
    {
        "null": "000",
        "JGT": "001",
        "JEQ": "010",
        "JGE": "011",
        "JLT": "100",
        "JNE": "101",
        "JLE": "110",
        "JMP": "111",
    },
)

# `a` bit followed by ALU control bits (zx, nx, zy, ny, f, no)
COMP_TABLE = MappingProxyType(
    {
        # a=0, operate on A register
        "0": "0101010",
        "1": "0111111",
        "-1": "0111010",
        "D": "0001100",
        "A": "0110000",
        "!D": "0001101",
        "!A": "0110001",
        "-D": "0001111",
        "-A": "0110011",
        "D+1": "0011111",
        "A+1": "0110111",
        "D-1": "0001110",
        "A-1": "0110010",
        "D+A": "0000010",
        "D-A": "0010011",
        "A-D": "0000111",
        "D&A": "0000000",
        "D|A": "0010101",
        # a=1, operate on M (memory at A)
        "M": "1110000",
        "!M": "1110001",
        "-M": "1110011",
        "M+1": "1110111",
        "M-1": "1110010",
        "D+M": "1000010",
        "D-M": "1010011",
        "M-D": "1000111",
        "D&M": "1000000",
        "D|M": "1010101",
    },
)


@dataclass(frozen=True, slots=True)
class FieldEncodingTables:
    """Mapping from textual field token into its binary encoding, for each field."""

    dest: Mapping[str, str]
    comp: Mapping[str, str]
    jump: Mapping[str, str]

    def for_field(self, field: FieldName) -> Mapping[str, str]:
        match field:
            case "dest":
                return self.dest
            case "comp":
                return self.comp
            case "jump":
                return self.jump
            case _:
                assert_never(field)

    def inverted(self) -> FieldEncodingTables:
        """Tables mapping binary encoding back into textual token (for decoding)."""
        return FieldEncodingTables(
            dest=_invert_table(self.dest),
            comp=_invert_table(self.comp),
            jump=_invert_table(self.jump),
        )


def _invert_table(table: Mapping[str, str]) -> Mapping[str, str]:
    inverted = {bits: token for token, bits in table.items()}
    assert len(inverted) == len(table), "Encoding table must be an bijection"
    return MappingProxyType(inverted)


HACK_FIELD_TABLES = FieldEncodingTables(
    dest=DEST_TABLE,
    comp=COMP_TABLE,
    jump=JUMP_TABLE,
)
