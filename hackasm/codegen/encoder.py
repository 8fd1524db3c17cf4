"""Binary encoding of single machine instructions into 16-bit words."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import AddressOverflowError, UnknownFieldTokenError

if TYPE_CHECKING:
    from hackasm.lexer.instructions import ComputeInstruction
    from hackasm.lexer.location import SourceLocation

    from .tables import FieldEncodingTables, FieldName

WORD_WIDTH = 16
ADDRESS_WIDTH = 15
ADDRESS_LIMIT = 1 << ADDRESS_WIDTH

ADDRESS_INSTRUCTION_PREFIX = "0"
COMPUTE_INSTRUCTION_PREFIX = "111"


def encode_address(address: int, at: SourceLocation) -> str:
    """Encode address instruction with already resolved address.

    :raises AddressOverflowError: If address does not fit into 15 bits
    """
    assert address >= 0, "Address must be resolved into non-negative number"
    if address >= ADDRESS_LIMIT:
        raise AddressOverflowError(address, limit=ADDRESS_LIMIT, at=at)
    return f"{ADDRESS_INSTRUCTION_PREFIX}{address:0{ADDRESS_WIDTH}b}"


def encode_compute(
    instruction: ComputeInstruction,
    tables: FieldEncodingTables,
) -> str:
    """Encode compute instruction as `111` + comp + dest + jump.

    :raises UnknownFieldTokenError: If any of fields is not known to the tables (comp is checked first)
    """
    comp = _encode_field("comp", instruction.comp, tables, instruction.location)
    dest = _encode_field("dest", instruction.dest, tables, instruction.location)
    jump = _encode_field("jump", instruction.jump, tables, instruction.location)
    return f"{COMPUTE_INSTRUCTION_PREFIX}{comp}{dest}{jump}"


def _encode_field(
    field: FieldName,
    token: str,
    tables: FieldEncodingTables,
    at: SourceLocation,
) -> str:
    table = tables.for_field(field)
    if (bits := table.get(token)) is None:
        raise UnknownFieldTokenError(field, token, known_tokens=table.keys(), at=at)
    return bits
