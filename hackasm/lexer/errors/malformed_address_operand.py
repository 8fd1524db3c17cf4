from hackasm.exceptions import HackAsmError
from hackasm.lexer.location import SourceLocation


class MalformedAddressOperandError(HackAsmError):
    def __init__(self, operand: str, at: SourceLocation) -> None:
        super().__init__(operand, at)
        self.operand = operand
        self.at = at

    def __repr__(self) -> str:
        shown = self.operand if self.operand else "(empty)"
        return f"""Malformed address operand `{shown}` at {self.at}!

Address instruction expects non-negative decimal number (`@42`) or symbol name (`@LOOP`).
Symbols must start with letter, did you mistype an symbol?

{self.generic_error_name}"""
