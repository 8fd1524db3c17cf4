import sys
from typing import NoReturn

from hackasm.cli.output import cli_message
from hackasm.cli.parser.arguments import CLIArguments
from hackasm.hackasm import process_input_file


def cli_perform_symbols_goal(args: CLIArguments) -> NoReturn:
    """Assemble input file and display symbols bound by program (labels and variables)."""
    result = process_input_file(args.source_filepaths[0], config=args.config)

    symbols = list(result.symbols.user_defined())
    if not symbols:
        cli_message("INFO", "Program has no labels or variables.", verbose=args.verbose)

    lines = [f"{name} {address}" for name, address in symbols]
    if args.output_filepath is None:
        for line in lines:
            print(line)
        return sys.exit(0)

    args.output_filepath.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return sys.exit(0)
