"""Errors collections that lexer may raise (user-facing ones)."""

from .malformed_address_operand import MalformedAddressOperandError
from .malformed_label import MalformedLabelError

__all__ = [
    "MalformedAddressOperandError",
    "MalformedLabelError",
]
