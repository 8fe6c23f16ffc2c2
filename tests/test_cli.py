"""Tests for the command-line interface.

WHY: The CLI is how most people use the converter. Flags must override
the environment, stdin must work for pipelines, and configuration
errors must exit cleanly instead of printing a traceback.

HOW: main() is called with explicit argv; capsys captures stdout and
stderr, monkeypatch supplies stdin and PHONETIC_* variables.
"""

import io

import pytest

from phonetic_text.cli import build_parser, main


class TestParser:
    """build_parser() argument handling."""

    def test_encode_arguments(self):
        args = build_parser().parse_args(["encode", "--case-prefix", "--delimiter", " | ", "AB"])
        assert args.command == "encode"
        assert args.text == "AB"
        assert args.case_prefix is True
        assert args.delimiter == " | "

    def test_flags_default_to_none(self):
        args = build_parser().parse_args(["decode"])
        assert args.text is None
        assert args.case_prefix is None
        assert args.delimiter is None
        assert args.alphabet is None

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2


class TestEncodeCommand:
    """``phonetic_text encode``."""

    def test_encode_argument(self, capsys):
        main(["encode", "AB"])
        assert capsys.readouterr().out == "A: Alpha\nB: Bravo\nSTOP\n"

    def test_encode_with_delimiter(self, capsys):
        main(["encode", "--delimiter", " | ", "AB"])
        assert capsys.readouterr().out == "A: Alpha | B: Bravo | STOP\n"

    def test_encode_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("Hi\n"))
        main(["encode"])
        assert capsys.readouterr().out == "H: Hotel\ni: india\nSTOP\n"

    def test_dash_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("9"))
        main(["encode", "-"])
        assert capsys.readouterr().out == "9: Niner\nSTOP\n"

    def test_environment_case_prefix(self, capsys, monkeypatch):
        monkeypatch.setenv("PHONETIC_INCLUDE_CASE_PREFIX", "true")
        main(["encode", "A"])
        assert capsys.readouterr().out == "A: Capital Alpha\nSTOP\n"

    def test_flag_overrides_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("PHONETIC_INCLUDE_CASE_PREFIX", "true")
        main(["encode", "--no-case-prefix", "A"])
        assert capsys.readouterr().out == "A: Alpha\nSTOP\n"


class TestDecodeCommand:
    """``phonetic_text decode``."""

    def test_decode_argument(self, capsys):
        main(["decode", "a: Lowercase alpha\nSPACE\n; Semicolon\nSTOP"])
        assert capsys.readouterr().out == "a ;\n"

    def test_decode_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("x: xray | C: Charlie | STOP\n"))
        main(["decode", "--delimiter", " | "])
        assert capsys.readouterr().out == "xC\n"


class TestErrors:
    """Configuration errors exit with status 1 and a message on stderr."""

    def test_unknown_alphabet(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "--alphabet", "klingon", "A"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Unknown phonetic alphabet 'klingon'" in captured.err
        assert captured.out == ""

    def test_unknown_alphabet_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("PHONETIC_ALPHABET", "klingon")
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "A"])
        assert exc_info.value.code == 1

    def test_empty_delimiter(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["encode", "--delimiter", "", "A"])
        assert exc_info.value.code == 1
        assert "delimiter" in capsys.readouterr().err
