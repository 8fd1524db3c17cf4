from hackasm.exceptions import HackAsmError
from hackasm.lexer.location import SourceLocation


class AddressOverflowError(HackAsmError):
    def __init__(self, address: int, limit: int, at: SourceLocation) -> None:
        super().__init__(address, limit, at)
        self.address = address
        self.limit = limit
        self.at = at

    def __repr__(self) -> str:
        return f"""Address {self.address} at {self.at} does not fit into address instruction!

Address instruction holds 15-bit unsigned address, so maximal address is {self.limit - 1}.

{self.generic_error_name}"""
