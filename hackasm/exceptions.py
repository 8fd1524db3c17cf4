import re
from abc import abstractmethod


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class HackAsmError(Exception):
    """Parent for all assembler errors (exceptions)."""

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"


class AssemblyFailedError(HackAsmError):
    """Aggregate of all errors found within single assembly run."""

    def __init__(self, errors: list[HackAsmError]) -> None:
        assert errors, "Assembly cannot fail without any error"
        super().__init__(errors)
        self.errors = errors

    def __repr__(self) -> str:
        details = "\n\n".join(repr(e) for e in self.errors)
        return f"""Assembly failed with {len(self.errors)} error(s), no machine code emitted!

{details}"""
