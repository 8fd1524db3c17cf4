from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .location import SourceLocation

NULL_FIELD = "null"


@dataclass(frozen=True, slots=True)
class LabelDeclaration:
    """`(NAME)` pseudo-instruction, does not occupy any ROM address."""

    symbol: str
    location: SourceLocation


@dataclass(frozen=True, slots=True)
class AddressInstruction:
    """`@value` or `@symbol` instruction that loads address register."""

    operand: int | str
    location: SourceLocation

    @property
    def is_literal(self) -> bool:
        return isinstance(self.operand, int)


@dataclass(frozen=True, slots=True)
class ComputeInstruction:
    """`dest=comp;jump` instruction, where missing fields are `null`."""

    dest: str
    comp: str
    jump: str
    location: SourceLocation

    @property
    def text(self) -> str:
        text = self.comp
        if self.dest != NULL_FIELD:
            text = f"{self.dest}={text}"
        if self.jump != NULL_FIELD:
            text = f"{text};{self.jump}"
        return text


Instruction: TypeAlias = LabelDeclaration | AddressInstruction | ComputeInstruction

# Instructions that occupy an ROM address (e.g everything except labels)
MachineInstruction: TypeAlias = AddressInstruction | ComputeInstruction
