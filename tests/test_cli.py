"""Tests for bfinterp.cli — main() with patched standard streams."""

from __future__ import annotations

import io
import sys

import pytest

from bfinterp.cli import build_parser, main


class _FakeStdin(io.TextIOWrapper):
    """Text stdin over a byte buffer, with a configurable isatty()."""

    def __init__(self, data: bytes, tty: bool = False) -> None:
        super().__init__(io.BytesIO(data), encoding="utf-8")
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


@pytest.fixture
def stdin(monkeypatch):
    def _install(data: bytes, tty: bool = False) -> _FakeStdin:
        fake = _FakeStdin(data, tty=tty)
        monkeypatch.setattr(sys, "stdin", fake)
        return fake

    return _install


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.program_file is None
        assert args.config is None
        assert args.cells is None
        assert not args.verbose

    def test_rejects_unknown_policy(self, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--value-overflow", "clamp"])


class TestProgramFromStdin:
    def test_piped_program(self, stdin, capsys):
        stdin(b"++++++++[>++++++++<-]>+.\n")
        assert main([]) == 0
        assert capsys.readouterr().out == "A"

    def test_terminal_reads_one_line(self, stdin, capsys):
        stdin(b"+++++++[>++++++++++<-]>.\n+++.\n", tty=True)
        assert main([]) == 0
        assert capsys.readouterr().out == "F"

    def test_input_after_piped_program_is_eof(self, stdin, capsys):
        # EOF wraps to 255, so the cell reads back as 255 then +1 wraps to 0.
        stdin(b",+[.]")
        assert main([]) == 0
        assert capsys.readouterr().out == ""

    def test_terminal_input_follows_program_line(self, stdin, capsys):
        stdin(b",.\nA", tty=True)
        assert main([]) == 0
        assert capsys.readouterr().out == "A"

    def test_piped_program_not_utf8(self, stdin, capsys):
        stdin(b"+\xff.")
        assert main([]) == 1
        assert "Error while running the CLI" in capsys.readouterr().err

    def test_blank_program(self, stdin, capsys):
        stdin(b"  \n\n")
        assert main([]) == 1
        assert "Program source was empty" in capsys.readouterr().err


class TestProgramFromFile:
    def test_runs_file_and_reads_stdin(self, tmp_path, stdin, capsys):
        program = tmp_path / "echo.b"
        program.write_text(",+[-.,+]")
        stdin(b"ok")
        assert main(["-i", str(program)]) == 0
        assert capsys.readouterr().out == "ok"

    def test_latin1_comment_in_file(self, tmp_path, stdin, capsys):
        program = tmp_path / "cafe.b"
        program.write_bytes(b"+++ caf\xe9 .")
        stdin(b"")
        assert main(["-i", str(program)]) == 0
        assert capsys.readouterr().out == "\x03"

    def test_missing_file(self, tmp_path, stdin, capsys):
        stdin(b"")
        assert main(["-i", str(tmp_path / "missing.b")]) == 1
        assert "Error while running the CLI" in capsys.readouterr().err

    def test_unbalanced_program(self, tmp_path, stdin, capsys):
        program = tmp_path / "bad.b"
        program.write_text("+[")
        stdin(b"")
        assert main(["--input", str(program)]) == 1
        err = capsys.readouterr().err
        assert "Error while running the CLI: Unbalanced loop bracket at position 1" in err


class TestConfiguration:
    def test_config_file(self, tmp_path, stdin, capsys):
        config = tmp_path / "strict.yaml"
        config.write_text("value_overflow: throw_exception\n")
        stdin(b"-")
        assert main(["--config", str(config)]) == 1
        assert "Cell value overflow" in capsys.readouterr().err

    def test_flag_overrides_config(self, tmp_path, stdin, capsys):
        config = tmp_path / "strict.yaml"
        config.write_text("value_overflow: throw_exception\n")
        stdin(b"-")
        assert main(["--config", str(config), "--value-overflow", "wrap_around"]) == 0
        assert capsys.readouterr().err == ""

    def test_pointer_policy_flag(self, stdin, capsys):
        stdin(b"<")
        assert main(["--cells", "4", "--pointer-overflow", "throw_exception"]) == 1
        assert "Cell overflow" in capsys.readouterr().err

    def test_zero_cells(self, stdin, capsys):
        stdin(b"+")
        assert main(["--cells", "0"]) == 1
        assert "cell_count must be a positive integer" in capsys.readouterr().err


class TestVerbose:
    def test_debug_logging(self, stdin, capsys, caplog):
        stdin(b"+.")
        with caplog.at_level("DEBUG", logger="bfinterp"):
            assert main(["-v"]) == 0
        assert "Interpreter created" in caplog.text
