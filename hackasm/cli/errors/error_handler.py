import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from hackasm.cli.output import cli_fatal_abort, cli_message
from hackasm.exceptions import HackAsmError


@contextmanager
def cli_hackasm_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit assembler errors."""
    try:
        yield
    except HackAsmError as he:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(he))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except (OSError, UnicodeDecodeError) as oe:
        if debug_user_friendly_errors:
            return cli_fatal_abort(f"Unable to access file: {oe}")
        raise
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
