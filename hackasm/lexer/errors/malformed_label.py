from hackasm.exceptions import HackAsmError
from hackasm.lexer.location import SourceLocation


class MalformedLabelError(HackAsmError):
    def __init__(self, text: str, reason: str, at: SourceLocation) -> None:
        super().__init__(text, reason, at)
        self.text = text
        self.reason = reason
        self.at = at

    def __repr__(self) -> str:
        return f"""Malformed label declaration `{self.text}` at {self.at}!

{self.reason}
Labels are declared as `(NAME)` on their own line.

{self.generic_error_name}"""
