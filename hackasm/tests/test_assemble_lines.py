from pathlib import Path

import pytest

from hackasm.codegen.errors import AddressOverflowError, UnknownFieldTokenError
from hackasm.exceptions import AssemblyFailedError
from hackasm.hackasm import (
    assemble_lines,
    infer_hack_filepath,
    process_input_file,
    write_hack_file,
)
from hackasm.lexer.errors import MalformedAddressOperandError
from hackasm.symbols.errors import SymbolRedefinitionError

MAX_PROGRAM = """\
// Computes R2 = max(R0, R1)

   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_HACK = [
    "0000000000000000",
    "1111110000010000",
    "0000000000000001",
    "1111010011010000",
    "0000000000001010",
    "1110001100000001",
    "0000000000000001",
    "1111110000010000",
    "0000000000001100",
    "1110101010000111",
    "0000000000000000",
    "1111110000010000",
    "0000000000000010",
    "1110001100001000",
    "0000000000001110",
    "1110101010000111",
]


@pytest.mark.parametrize(
    ("lines", "words"),
    [
        (["@2"], ["0000000000000010"]),
        (["D=D+A"], ["1110000010010000"]),
        (["D;JGT"], ["1110001100000001"]),
        (["(LOOP)", "@LOOP", "0;JMP"], ["0000000000000000", "1110101010000111"]),
        (
            ["@foo", "@bar", "@foo"],
            ["0000000000010000", "0000000000010001", "0000000000010000"],
        ),
    ],
)
def test_assemble_lines_scenarios(lines: list[str], words: list[str]) -> None:
    assert list(assemble_lines(lines).words) == words


def test_assemble_lines_address_overflow() -> None:
    with pytest.raises(AssemblyFailedError) as e:
        assemble_lines(["@32768"])
    assert [type(error) for error in e.value.errors] == [AddressOverflowError]


def test_assemble_lines_word_count_matches_instruction_lines() -> None:
    lines = ["// comment", "@2", "", "D=A", "   ", "@3", "D=D+A // add", "@0", "M=D"]
    result = assemble_lines(lines)
    assert len(result.words) == 6


def test_assemble_lines_max_program() -> None:
    result = assemble_lines(MAX_PROGRAM.splitlines())
    assert list(result.words) == MAX_HACK
    assert list(result.symbols.user_defined()) == [
        ("OUTPUT_FIRST", 10),
        ("OUTPUT_D", 12),
        ("INFINITE_LOOP", 14),
    ]


def test_assemble_lines_reports_all_errors_with_lines() -> None:
    lines = ["@-5", "(END)", "D=D*A", "(END)", "@1", "@99999"]
    with pytest.raises(AssemblyFailedError) as e:
        assemble_lines(lines)

    errors = e.value.errors
    assert [type(error) for error in errors] == [
        MalformedAddressOperandError,
        SymbolRedefinitionError,
        UnknownFieldTokenError,
        AddressOverflowError,
    ]
    assert "'(memory):1'" in repr(e.value)
    assert "'(memory):6'" in repr(e.value)
    assert "4 error(s)" in repr(e.value)


def test_process_input_file_and_write(tmp_path: Path) -> None:
    source = tmp_path / "Max.asm"
    source.write_text(MAX_PROGRAM, encoding="utf-8")

    result = process_input_file(source)
    output = infer_hack_filepath(source)
    write_hack_file(output, result.words)

    assert output == tmp_path / "Max.hack"
    assert output.read_text(encoding="utf-8") == "".join(f"{w}\n" for w in MAX_HACK)


def test_process_input_file_error_locations(tmp_path: Path) -> None:
    source = tmp_path / "Broken.asm"
    source.write_text("@1\n\nD=Q\n", encoding="utf-8")

    with pytest.raises(AssemblyFailedError) as e:
        process_input_file(source)
    assert "'Broken.asm:3'" in repr(e.value)
