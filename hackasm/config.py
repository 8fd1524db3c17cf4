from dataclasses import dataclass

from hackasm.symbols.predefined import VARIABLES_BASE_ADDRESS


@dataclass(slots=True, frozen=True)
class AssemblerConfig:
    """Configuration for single assembly run, passed explicitly through the pipeline."""

    # Accept `@i` like references (pattern `[A-Za-z][A-Za-z0-9_]*`)
    # Disabled means legacy pattern which requires at least two characters
    allow_single_letter_symbols: bool = True

    # Accept `.`, `$` and `:` within symbols as emitted by VM translators (e.g `Main.counter`)
    allow_extended_symbol_alphabet: bool = False

    # First RAM address that is given to the variables
    variable_base_address: int = VARIABLES_BASE_ADDRESS


def build_default_assembler_config() -> AssemblerConfig:
    return AssemblerConfig()
