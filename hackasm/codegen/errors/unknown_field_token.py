from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.exceptions import HackAsmError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hackasm.codegen.tables import FieldName
    from hackasm.lexer.location import SourceLocation


class UnknownFieldTokenError(HackAsmError):
    def __init__(
        self,
        field: FieldName,
        token: str,
        known_tokens: Iterable[str],
        at: SourceLocation,
    ) -> None:
        super().__init__(field, token, at)
        self.field = field
        self.token = token
        self.known_tokens = tuple(known_tokens)
        self.at = at

    def __repr__(self) -> str:
        return f"""Unknown `{self.field}` field `{self.token}` at {self.at}!

Expected one of: {", ".join(self.known_tokens)}
Whitespace within an instruction is not allowed, did you write `D = A` instead of `D=A`?

{self.generic_error_name}"""
