"""Errors collections that code generation (encoding / decoding) may raise (user-facing ones)."""

from .address_overflow import AddressOverflowError
from .malformed_binary_word import MalformedBinaryWordError
from .unknown_field_token import UnknownFieldTokenError
from .variable_memory_exhausted import VariableMemoryExhaustedError

__all__ = [
    "AddressOverflowError",
    "MalformedBinaryWordError",
    "UnknownFieldTokenError",
    "VariableMemoryExhaustedError",
]
