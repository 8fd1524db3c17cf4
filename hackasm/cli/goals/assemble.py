from __future__ import annotations

import sys
from contextlib import contextmanager
from time import perf_counter_ns
from typing import TYPE_CHECKING, NoReturn

from hackasm.cli.output import cli_message
from hackasm.hackasm import process_input_file, write_hack_file

if TYPE_CHECKING:
    from collections.abc import Generator

    from hackasm.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


@contextmanager
def wrap_with_perf_time_taken(message: str, *, verbose: bool) -> Generator[None]:
    start_time = perf_counter_ns()
    yield
    time_taken = (perf_counter_ns() - start_time) / NANOS_TO_SECONDS
    cli_message(
        level="INFO",
        text=f"{message} took {time_taken:.2f}s",
        verbose=verbose,
    )


def cli_perform_assemble_goal(args: CLIArguments) -> NoReturn:
    """Assemble input source file into machine words."""
    source = args.source_filepaths[0]
    cli_message(level="INFO", text=f"Assembling `{source}`...", verbose=args.verbose)

    with wrap_with_perf_time_taken("Assembly (two passes)", verbose=args.verbose):
        result = process_input_file(source, config=args.config)

    if args.output_filepath is None:
        for word in result.words:
            print(word)
        return sys.exit(0)

    write_hack_file(args.output_filepath, result.words)
    cli_message(
        level="INFO",
        text=f"Assembled {len(result.words)} instruction(s) into `{args.output_filepath}`!",
        verbose=args.verbose,
    )
    return sys.exit(0)
