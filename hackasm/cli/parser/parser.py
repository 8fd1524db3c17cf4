from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from hackasm.cli.output import cli_fatal_abort
from hackasm.cli.parser.arguments import CLIArguments
from hackasm.config import AssemblerConfig, build_default_assembler_config
from hackasm.hackasm import infer_hack_filepath

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    source_filepaths = _process_source_filepaths(args)
    output = _process_output_path(source_filepaths, args)
    config = _process_assembler_config(args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        disassemble=bool(args.disassemble),
        symbols=bool(args.symbols),
        # Rest of these are mostly goal-specific
        source_filepaths=source_filepaths,
        output_filepath=output,
        output_to_stdout=bool(args.stdout),
        config=config,
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_source_filepaths(args: Namespace) -> list[Path]:
    """Process input source files as paths and validate it."""
    paths = [Path(f) for f in args.source_files]
    if args.version:
        return paths

    if len(paths) == 0:
        return cli_fatal_abort("Expected source file to assemble!")

    if len(paths) > 1:
        return cli_fatal_abort("Assembling several files not implemented.")

    if any(not p.is_file() for p in paths):
        return cli_fatal_abort(
            text="Input source file does not exist, aborting assembly as safe mechanism.",
        )

    return paths


def _process_output_path(source_filepaths: list[Path], args: Namespace) -> Path | None:
    """Process output path, inferred from source file if not given."""
    if args.output:
        return Path(args.output)
    # Goals other than assembly emit into stdout, unless output is given explicitly
    if args.stdout or args.disassemble or args.symbols or not source_filepaths:
        return None
    return infer_hack_filepath(source_filepaths[0])


def _process_assembler_config(args: Namespace) -> AssemblerConfig:
    """Apply symbol naming flags onto default configuration."""
    return replace(
        build_default_assembler_config(),
        allow_single_letter_symbols=not args.strict_symbols,
        allow_extended_symbol_alphabet=bool(args.extended_symbols),
    )
