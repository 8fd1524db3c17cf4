from hackasm.exceptions import HackAsmError
from hackasm.lexer.location import SourceLocation


class VariableMemoryExhaustedError(HackAsmError):
    def __init__(self, name: str, address: int, at: SourceLocation) -> None:
        super().__init__(name, address, at)
        self.name = name
        self.address = address
        self.at = at

    def __repr__(self) -> str:
        return f"""No memory left for variable '{self.name}' at {self.at}!

Variable would be allocated at address {self.address}, which overlaps memory-mapped screen.
Too many variables in program, or did you mistype an label name?

{self.generic_error_name}"""
