from __future__ import annotations

from typing import TYPE_CHECKING

from hackasm.exceptions import HackAsmError

from .classifier import classify_line
from .location import SourceLocation
from .sanitizer import sanitize_line

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Iterable
    from pathlib import Path

    from hackasm.config import AssemblerConfig

    from .instructions import Instruction


def lex_instructions(
    lines: Iterable[str],
    *,
    filepath: Path | None = None,
    config: AssemblerConfig | None = None,
    on_error: Callable[[HackAsmError], None] | None = None,
) -> Generator[Instruction]:
    """Stream instructions from raw source lines, in order from top to bottom (blank and comment lines are skipped).

    Malformed lines are passed into `on_error` and skipped, so all of them can be reported at once.
    Without `on_error` first malformed line raises.
    """
    for line_number, raw in enumerate(lines, start=1):
        line = sanitize_line(raw)
        if line is None:
            continue

        location = (
            SourceLocation.file(filepath, line_number)
            if filepath
            else SourceLocation.memory(line_number)
        )
        try:
            yield classify_line(line, location, config)
        except HackAsmError as e:
            if on_error is None:
                raise
            on_error(e)
