from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.exceptions import HackAsmError

if TYPE_CHECKING:
    from hackasm.lexer.location import SourceLocation


class MalformedBinaryWordError(HackAsmError):
    def __init__(
        self,
        word: str,
        reason: str,
        at: SourceLocation | None = None,
    ) -> None:
        super().__init__(word, reason, at)
        self.word = word
        self.reason = reason
        self.at = at

    def __repr__(self) -> str:
        return f"""Malformed machine word `{self.word}` at {self.at or "'(unknown)'"}!

{self.reason}

{self.generic_error_name}"""
