from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.exceptions import HackAsmError

if TYPE_CHECKING:
    from hackasm.lexer.location import SourceLocation


class SymbolRedefinitionError(HackAsmError):
    def __init__(
        self,
        name: str,
        address: int,
        bound_address: int,
        redefined: SourceLocation | None,
        original: SourceLocation | None,
    ) -> None:
        super().__init__(name, address, bound_address)
        self.name = name
        self.address = address
        self.bound_address = bound_address
        self.redefined = redefined
        self.original = original

    def __repr__(self) -> str:
        original = (
            f"Original definition found at {self.original}."
            if self.original
            else "Symbol is an predefined symbol of the platform."
        )
        return f"""Redefinition of an symbol '{self.name}' at {self.redefined or "'(unknown)'"}

Symbol is already bound to address {self.bound_address} but tried to bind it to {self.address}.
{original}

Only single definition allowed for symbols, did you declare label twice?
{self.generic_error_name}"""
