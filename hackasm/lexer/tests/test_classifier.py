import pytest

from hackasm.config import AssemblerConfig
from hackasm.lexer.classifier import classify_line, is_valid_symbol_name
from hackasm.lexer.errors import MalformedAddressOperandError, MalformedLabelError
from hackasm.lexer.instructions import (
    AddressInstruction,
    ComputeInstruction,
    LabelDeclaration,
)
from hackasm.lexer.location import SourceLocation

AT = SourceLocation.memory(1)


def test_classify_label() -> None:
    instruction = classify_line("(LOOP)", AT)
    assert isinstance(instruction, LabelDeclaration)
    assert instruction.symbol == "LOOP"
    assert instruction.location == AT


@pytest.mark.parametrize("line", ["(LOOP", "()", "(LOOP)x", "(1ABC)"])
def test_classify_malformed_label(line: str) -> None:
    with pytest.raises(MalformedLabelError) as e:
        classify_line(line, AT)
    assert e.value.at == AT


def test_classify_literal_address() -> None:
    instruction = classify_line("@2", AT)
    assert isinstance(instruction, AddressInstruction)
    assert instruction.operand == 2
    assert instruction.is_literal


def test_classify_literal_address_out_of_range_is_still_literal() -> None:
    instruction = classify_line("@32768", AT)
    assert isinstance(instruction, AddressInstruction)
    assert instruction.operand == 32768


def test_classify_symbol_address() -> None:
    instruction = classify_line("@sum_1", AT)
    assert isinstance(instruction, AddressInstruction)
    assert instruction.operand == "sum_1"
    assert not instruction.is_literal


@pytest.mark.parametrize("operand", ["", "-1", "1abc", "_x", "a b", "Main.x", "0x10"])
def test_classify_malformed_address(operand: str) -> None:
    with pytest.raises(MalformedAddressOperandError) as e:
        classify_line(f"@{operand}", AT)
    assert e.value.operand == operand


def test_classify_single_letter_symbol() -> None:
    instruction = classify_line("@i", AT)
    assert isinstance(instruction, AddressInstruction)
    assert instruction.operand == "i"

    strict = AssemblerConfig(allow_single_letter_symbols=False)
    with pytest.raises(MalformedAddressOperandError):
        classify_line("@i", AT, strict)


def test_classify_extended_symbol_alphabet() -> None:
    extended = AssemblerConfig(allow_extended_symbol_alphabet=True)
    instruction = classify_line("@Sys.init$ret.0", AT, extended)
    assert isinstance(instruction, AddressInstruction)
    assert instruction.operand == "Sys.init$ret.0"

    label = classify_line("(Main.main)", AT, extended)
    assert isinstance(label, LabelDeclaration)
    assert label.symbol == "Main.main"


@pytest.mark.parametrize(
    ("line", "dest", "comp", "jump"),
    [
        ("D=D+A", "D", "D+A", "null"),
        ("D;JGT", "null", "D", "JGT"),
        ("0;JMP", "null", "0", "JMP"),
        ("AMD=M+1;JNE", "AMD", "M+1", "JNE"),
        ("M", "null", "M", "null"),
        ("A=M=D", "A", "M=D", "null"),
        ("D;JGT;JMP", "null", "D", "JGT;JMP"),
        ("D;J=M", "D;J", "", "J=M"),
    ],
)
def test_classify_compute_fields(line: str, dest: str, comp: str, jump: str) -> None:
    instruction = classify_line(line, AT)
    assert isinstance(instruction, ComputeInstruction)
    assert (instruction.dest, instruction.comp, instruction.jump) == (dest, comp, jump)


def test_compute_instruction_text_omits_null_fields() -> None:
    assert classify_line("D=D+A", AT).text == "D=D+A"  # type: ignore[union-attr]
    assert classify_line("0;JMP", AT).text == "0;JMP"  # type: ignore[union-attr]
    assert classify_line("D", AT).text == "D"  # type: ignore[union-attr]


def test_is_valid_symbol_name() -> None:
    default = AssemblerConfig()
    assert is_valid_symbol_name("LOOP", default)
    assert is_valid_symbol_name("x", default)
    assert not is_valid_symbol_name("9lives", default)
    assert not is_valid_symbol_name("ball.x", default)
    assert not is_valid_symbol_name("LOOP\n", default)
