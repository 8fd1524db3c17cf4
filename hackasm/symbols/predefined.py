"""Predefined symbols of the Hack platform that are bound before first pass."""

from types import MappingProxyType

SCREEN_BASE_ADDRESS = 16384
KEYBOARD_ADDRESS = 24576

# Variables are allocated right after virtual registers R0..R15
VARIABLES_BASE_ADDRESS = 16

VIRTUAL_REGISTERS_COUNT = 16

PREDEFINED_SYMBOLS = MappingProxyType(
    {
        **{f"R{i}": i for i in range(VIRTUAL_REGISTERS_COUNT)},
        "SCREEN": SCREEN_BASE_ADDRESS,
        "KBD": KEYBOARD_ADDRESS,
        "SP": 0,
        "LCL": 1,
        "ARG": 2,
        "THIS": 3,
        "THAT": 4,
    },
)
