"""First pass: bind labels to ROM addresses and collect machine instructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from hackasm.exceptions import HackAsmError
from hackasm.lexer.instructions import (
    AddressInstruction,
    ComputeInstruction,
    LabelDeclaration,
)
from hackasm.symbols.table import new_symbol_table

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from hackasm.lexer.instructions import Instruction, MachineInstruction
    from hackasm.symbols.table import SymbolTable


@dataclass(frozen=True, slots=True)
class FirstPassResult:
    """Symbols with all labels bound and instructions where index is an ROM address."""

    symbols: SymbolTable
    instructions: tuple[MachineInstruction, ...]


def perform_first_pass(
    instructions: Iterable[Instruction],
    *,
    symbols: SymbolTable | None = None,
    on_error: Callable[[HackAsmError], None] | None = None,
) -> FirstPassResult:
    """Scan instructions in source order, binding each label to address of an next machine instruction.

    Variables are left unbound, as only second pass may know that symbol is not an label.
    """
    symbols = new_symbol_table() if symbols is None else symbols
    machine_instructions: list[MachineInstruction] = []

    for instruction in instructions:
        match instruction:
            case LabelDeclaration():
                # Label does not occupy ROM, so it points to next instruction
                rom_address = len(machine_instructions)
                try:
                    symbols.bind(
                        instruction.symbol,
                        rom_address,
                        at=instruction.location,
                    )
                except HackAsmError as e:
                    if on_error is None:
                        raise
                    on_error(e)
            case AddressInstruction() | ComputeInstruction():
                machine_instructions.append(instruction)
            case _:
                assert_never(instruction)

    return FirstPassResult(
        symbols=symbols,
        instructions=tuple(machine_instructions),
    )
