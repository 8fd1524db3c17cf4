import argparse
from argparse import ArgumentParser


def add_goals_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with goal options into given parser."""
    group = parser.add_argument_group("Goals", "What to do with input file, by default it is assembled")
    goals = group.add_mutually_exclusive_group()
    goals.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )
    goals.add_argument(
        "--disassemble",
        "-d",
        default=False,
        action="store_true",
        help="If passed will treat input as `.hack` file and emit assembly text of it into stdout",
    )
    goals.add_argument(
        "--symbols",
        default=False,
        action="store_true",
        help="If passed will assemble input and emit symbols (labels and variables) with their addresses into stdout",
    )


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Control assembly output")
    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Output file path to generate, by default will be inferred from input filename (`.hack`)",
    )
    group.add_argument(
        "--stdout",
        default=False,
        action="store_true",
        help="If passed will emit machine words into stdout instead of output file",
    )


def add_symbols_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with symbol naming options into given parser."""
    group = parser.add_argument_group("Symbols", "Which symbol names are accepted")
    group.add_argument(
        "--strict-symbols",
        default=False,
        action="store_true",
        help="If passed, symbols must be at least two characters long (legacy behavior, rejects `@i`)",
    )
    group.add_argument(
        "--extended-symbols",
        default=False,
        action="store_true",
        help="If passed, symbols may contain `.`, `$` and `:` (as VM translator emits, e.g `Main.counter`)",
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Debugging")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from assembler.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
