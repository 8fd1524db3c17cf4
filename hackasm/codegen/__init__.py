"""Code generation: field encoding tables, encoding of instructions into machine words and back."""

from .decoder import decode_compute_fields, decode_word
from .encoder import encode_address, encode_compute
from .tables import HACK_FIELD_TABLES, FieldEncodingTables

__all__ = [
    "HACK_FIELD_TABLES",
    "FieldEncodingTables",
    "decode_compute_fields",
    "decode_word",
    "encode_address",
    "encode_compute",
]
