"""Second pass: resolve address symbols (allocating variables) and encode instructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from hackasm.codegen.encoder import encode_address, encode_compute
from hackasm.codegen.errors import VariableMemoryExhaustedError
from hackasm.codegen.tables import HACK_FIELD_TABLES
from hackasm.config import build_default_assembler_config
from hackasm.exceptions import HackAsmError
from hackasm.feature_flags import FEATURE_VARIABLE_MEMORY_LIMIT_CHECK
from hackasm.lexer.instructions import AddressInstruction, ComputeInstruction
from hackasm.symbols.predefined import SCREEN_BASE_ADDRESS

if TYPE_CHECKING:
    from collections.abc import Callable

    from hackasm.codegen.tables import FieldEncodingTables
    from hackasm.config import AssemblerConfig
    from hackasm.symbols.table import SymbolTable

    from .first_pass import FirstPassResult


@dataclass(frozen=True, slots=True)
class SecondPassResult:
    """Machine words (index is an ROM address) and symbols with variables bound."""

    words: tuple[str, ...]
    symbols: SymbolTable


@dataclass(slots=True)
class _VariableAllocator:
    next_address: int

    def allocate(self, symbols: SymbolTable, instruction: AddressInstruction) -> int:
        assert isinstance(instruction.operand, str)
        address = self.next_address
        if FEATURE_VARIABLE_MEMORY_LIMIT_CHECK and address >= SCREEN_BASE_ADDRESS:
            raise VariableMemoryExhaustedError(
                instruction.operand,
                address,
                at=instruction.location,
            )

        symbols.bind(instruction.operand, address, at=instruction.location)
        self.next_address += 1
        return address


def perform_second_pass(
    first_pass: FirstPassResult,
    *,
    tables: FieldEncodingTables = HACK_FIELD_TABLES,
    config: AssemblerConfig | None = None,
    on_error: Callable[[HackAsmError], None] | None = None,
) -> SecondPassResult:
    """Encode each instruction into exactly one word, in order.

    Symbols from first pass are copied, so given first pass result is left untouched.
    Instruction that failed to encode emits no word, but sweep continues if `on_error` is given.
    """
    config = config or build_default_assembler_config()
    symbols = first_pass.symbols.copy()
    allocator = _VariableAllocator(next_address=config.variable_base_address)
    words: list[str] = []

    for instruction in first_pass.instructions:
        try:
            match instruction:
                case AddressInstruction():
                    address = _resolve_address(instruction, symbols, allocator)
                    words.append(encode_address(address, at=instruction.location))
                case ComputeInstruction():
                    words.append(encode_compute(instruction, tables))
                case _:
                    assert_never(instruction)
        except HackAsmError as e:
            if on_error is None:
                raise
            on_error(e)

    return SecondPassResult(words=tuple(words), symbols=symbols)


def _resolve_address(
    instruction: AddressInstruction,
    symbols: SymbolTable,
    allocator: _VariableAllocator,
) -> int:
    operand = instruction.operand
    if isinstance(operand, int):
        return operand

    if (address := symbols.lookup(operand)) is not None:
        return address
    return allocator.allocate(symbols, instruction)
