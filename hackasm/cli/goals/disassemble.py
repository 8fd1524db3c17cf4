import sys
from typing import NoReturn

from hackasm.cli.output import cli_message
from hackasm.cli.parser.arguments import CLIArguments
from hackasm.codegen.decoder import decode_word
from hackasm.lexer.io import open_source_file_line_stream
from hackasm.lexer.location import SourceLocation


def cli_perform_disassemble_goal(args: CLIArguments) -> NoReturn:
    """Decode machine words of `.hack` file back into assembly text."""
    source = args.source_filepaths[0]
    cli_message(level="INFO", text=f"Disassembling `{source}`...", verbose=args.verbose)

    lines: list[str] = []
    for line_number, word in enumerate(open_source_file_line_stream(source), start=1):
        if not (word := word.strip()):
            continue
        lines.append(decode_word(word, at=SourceLocation.file(source, line_number)))

    if args.output_filepath is None:
        for line in lines:
            print(line)
        return sys.exit(0)

    args.output_filepath.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    cli_message(
        level="INFO",
        text=f"Disassembled {len(lines)} word(s) into `{args.output_filepath}`!",
        verbose=args.verbose,
    )
    return sys.exit(0)
