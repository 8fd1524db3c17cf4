from pathlib import Path

import pytest

from hackasm.cli.main import cli_entry_point

PROGRAM = "(LOOP)\n@counter\nM=M+1\n@LOOP\n0;JMP\n"
PROGRAM_WORDS = [
    "0000000000010000",
    "1111110111001000",
    "0000000000000000",
    "1110101010000111",
]


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr("sys.argv", ["hackasm", *argv])
    with pytest.raises(SystemExit) as e:
        cli_entry_point()
    return int(e.value.code or 0)


def test_cli_assemble_into_inferred_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    source = tmp_path / "Loop.asm"
    source.write_text(PROGRAM, encoding="utf-8")

    assert _run(monkeypatch, str(source)) == 0
    assert (tmp_path / "Loop.hack").read_text(encoding="utf-8").split() == PROGRAM_WORDS


def test_cli_assemble_into_stdout(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "Loop.asm"
    source.write_text(PROGRAM, encoding="utf-8")

    assert _run(monkeypatch, str(source), "--stdout") == 0
    assert capsys.readouterr().out.split() == PROGRAM_WORDS
    assert not (tmp_path / "Loop.hack").exists()


def test_cli_assemble_errors_are_reported(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "Broken.asm"
    source.write_text("@1\nD=D*A\n@40000\n", encoding="utf-8")

    assert _run(monkeypatch, str(source)) == 1
    err = capsys.readouterr().err
    assert "'Broken.asm:2'" in err
    assert "'Broken.asm:3'" in err
    assert not (tmp_path / "Broken.hack").exists()


def test_cli_strict_symbols(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "Single.asm"
    source.write_text("@i\nM=0\n", encoding="utf-8")

    assert _run(monkeypatch, str(source), "--stdout") == 0
    assert capsys.readouterr().out.split()[0] == "0000000000010000"

    assert _run(monkeypatch, str(source), "--stdout", "--strict-symbols") == 1
    assert "[malformed-address-operand-error]" in capsys.readouterr().err


def test_cli_symbols_goal(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "Loop.asm"
    source.write_text(PROGRAM, encoding="utf-8")

    assert _run(monkeypatch, str(source), "--symbols") == 0
    assert capsys.readouterr().out.splitlines() == ["LOOP 0", "counter 16"]


def test_cli_disassemble_goal(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "Loop.hack"
    source.write_text("\n".join(PROGRAM_WORDS), encoding="utf-8")

    assert _run(monkeypatch, str(source), "--disassemble") == 0
    assert capsys.readouterr().out.splitlines() == ["@16", "M=M+1", "@0", "0;JMP"]
    # Input must be left untouched
    assert source.read_text(encoding="utf-8").split() == PROGRAM_WORDS


def test_cli_missing_source(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    assert _run(monkeypatch, str(tmp_path / "Missing.asm")) == 1
    assert _run(monkeypatch) == 1


def test_cli_version_goal(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, "--version") == 0
    assert "[Hack assembler toolchain]" in capsys.readouterr().out
