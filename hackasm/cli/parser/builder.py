from argparse import ArgumentParser

from hackasm.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Hack assembler - translates Hack assembly (`.asm`) into machine words (`.hack`)",
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Input source file to process (`.asm` file, or `.hack` file when disassembling)",
        nargs="*",
        default=[],
    )

    groups.add_goals_group(parser)
    groups.add_output_group(parser)
    groups.add_symbols_group(parser)
    groups.add_debug_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
