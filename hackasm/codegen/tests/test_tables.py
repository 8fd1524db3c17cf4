import pytest

from hackasm.codegen.tables import (
    COMP_FIELD_WIDTH,
    COMP_TABLE,
    DEST_FIELD_WIDTH,
    DEST_TABLE,
    HACK_FIELD_TABLES,
    JUMP_FIELD_WIDTH,
    JUMP_TABLE,
)


def test_tables_are_complete() -> None:
    assert len(DEST_TABLE) == 8
    assert len(JUMP_TABLE) == 8
    assert len(COMP_TABLE) == 28
    assert all(len(bits) == DEST_FIELD_WIDTH for bits in DEST_TABLE.values())
    assert all(len(bits) == COMP_FIELD_WIDTH for bits in COMP_TABLE.values())
    assert all(len(bits) == JUMP_FIELD_WIDTH for bits in JUMP_TABLE.values())


def test_dest_bits_flag_registers() -> None:
    for token, bits in DEST_TABLE.items():
        if token == "null":
            assert bits == "000"
            continue
        assert bits == "".join("1" if r in token else "0" for r in "ADM")


def test_comp_a_bit_selects_memory() -> None:
    for token, bits in COMP_TABLE.items():
        assert bits[0] == ("1" if "M" in token else "0")
        if "M" in token:
            assert COMP_TABLE[token.replace("M", "A")][1:] == bits[1:]


def test_tables_are_immutable() -> None:
    with pytest.raises(TypeError):
        HACK_FIELD_TABLES.dest["X"] = "000"  # type: ignore[index]


def test_tables_inverted() -> None:
    inverted = HACK_FIELD_TABLES.inverted()
    assert inverted.comp["0001100"] == "D"
    assert inverted.dest["010"] == "D"
    assert inverted.jump["111"] == "JMP"
