from dataclasses import dataclass
from pathlib import Path

from hackasm.config import AssemblerConfig


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole assembler toolchain process."""

    source_filepaths: list[Path]
    output_filepath: Path | None
    output_to_stdout: bool

    version: bool
    disassemble: bool
    symbols: bool

    config: AssemblerConfig

    verbose: bool
    cli_debug_user_friendly_errors: bool
