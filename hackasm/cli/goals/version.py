import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from hackasm.cli.parser.arguments import CLIArguments
from hackasm.feature_flags import FEATURE_VARIABLE_MEMORY_LIMIT_CHECK


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Hack assembler toolchain]")
    print(f"\tVersion: {_get_toolchain_version()}")
    print("Configuration:")
    print(f"\tSingle letter symbols: {args.config.allow_single_letter_symbols}")
    print(f"\tExtended symbol alphabet: {args.config.allow_extended_symbol_alphabet}")
    print(f"\tVariables base address: {args.config.variable_base_address}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    print("Features:")
    print(f"\tFEATURE_VARIABLE_MEMORY_LIMIT_CHECK = {FEATURE_VARIABLE_MEMORY_LIMIT_CHECK}")
    return sys.exit(0)


def _get_toolchain_version() -> str:
    try:
        return version("hackasm")
    except PackageNotFoundError:
        return "(not installed)"
