import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

_LEVEL_COLORS: dict[MessageLevel, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}
_RESET_COLOR = "\033[0m"


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit an message to CLI user with given level, INFO messages are omitted if not verbose."""
    if level == "INFO" and not verbose:
        return

    prefix = f"[{level}]"
    if sys.stderr.isatty():
        prefix = f"{_LEVEL_COLORS[level]}{prefix}{_RESET_COLOR}"
    print(prefix, text, file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    cli_message("ERROR", text)
    sys.exit(1)
