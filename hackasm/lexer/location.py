from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of an source line within assembly program.

    Line numbers are 1-based as in any text editor.
    """

    line_number: int

    filepath: Path | None = None
    source: Literal["file", "memory"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None
        assert self.line_number >= 1, "Line numbers are counted from 1"

    def __repr__(self) -> str:
        if self.source == "memory":
            return f"'(memory):{self.line_number}'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number}'"

    @classmethod
    def memory(cls, line_number: int) -> SourceLocation:
        """Create a location for lines that are not backed by any file."""
        return cls(line_number=line_number, source="memory")

    @classmethod
    def file(cls, filepath: Path, line_number: int) -> SourceLocation:
        return cls(line_number=line_number, filepath=filepath, source="file")
