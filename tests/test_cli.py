"""
Tests for the command-line entry point and the conversion service behind it.
"""

from __future__ import annotations

import logging

import pytest

from main import main
from roman_numeral.converter import NumeralConverter
from roman_numeral.exceptions import EmptyInputError, NumeralRangeError
from roman_numeral.models import Notation


# ═══════════════════════════════════════════════════════════════════════
# CONVERTER
# ═══════════════════════════════════════════════════════════════════════


class TestNumeralConverter:
    def test_digits_are_integers(self):
        result = NumeralConverter().convert("1983")
        assert result.direction == "to_roman"
        assert result.roman == "MCMLXXXIII"
        assert result.summary == "1983 => MCMLXXXIII"

    def test_text_is_numeral(self):
        result = NumeralConverter().convert("mcmxxciiv")
        assert result.direction == "to_decimal"
        assert result.decimal == 1983
        assert result.summary == "MCMXXCIIV => 1983"

    def test_whitespace_stripped(self):
        assert NumeralConverter().convert("  42 ").roman == "XLII"

    def test_notation_from_environment(self, monkeypatch):
        monkeypatch.setenv("ROMAN_NOTATION", "ascii")
        converter = NumeralConverter()
        assert converter.notation is Notation.ASCII
        assert converter.convert("5000").roman == "_V"

    def test_explicit_notation_wins(self, monkeypatch):
        monkeypatch.setenv("ROMAN_NOTATION", "ascii")
        assert NumeralConverter("unicode").convert("5000").roman == "V̅"

    def test_unknown_notation_setting(self, monkeypatch):
        monkeypatch.setenv("ROMAN_NOTATION", "greek")
        with pytest.raises(ValueError, match="ROMAN_NOTATION"):
            NumeralConverter()

    def test_errors_propagate(self):
        with pytest.raises(NumeralRangeError):
            NumeralConverter().convert("4000000")
        with pytest.raises(EmptyInputError):
            NumeralConverter().convert("")

    def test_oversized_integer_is_out_of_range(self):
        with pytest.raises(NumeralRangeError, match="5000-digit"):
            NumeralConverter().convert("9" * 5000)

    def test_leading_zeros_do_not_count(self):
        result = NumeralConverter().convert("0" * 5000 + "42")
        assert result.decimal == 42
        assert result.roman == "XLII"

    def test_logs_only_at_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger="roman_numeral"):
            NumeralConverter().convert("1983")
            NumeralConverter().convert("MCMLXXXIII")
        assert caplog.records == []

        with caplog.at_level(logging.DEBUG, logger="roman_numeral.converter"):
            NumeralConverter().convert("1983")
        assert any(r.levelno == logging.DEBUG for r in caplog.records)


# ═══════════════════════════════════════════════════════════════════════
# CLI
# ═══════════════════════════════════════════════════════════════════════


class TestMain:
    def test_numeral_argument(self, capsys):
        assert main(["MCMXXCIII"]) == 0
        assert capsys.readouterr().out.strip() == "MCMXXCIII => 1983"

    def test_integer_argument(self, capsys):
        assert main(["2014"]) == 0
        assert capsys.readouterr().out.strip() == "2014 => MMXIV"

    def test_ascii_flag(self, capsys):
        assert main(["4506", "--ascii"]) == 0
        assert capsys.readouterr().out.strip() == "4506 => _I_VDVI"

    def test_canonical_flag(self, capsys):
        assert main(["MCMXXCIIV", "--canonical"]) == 0
        out = capsys.readouterr().out
        assert "MCMXXCIIV => 1983" in out
        assert "MCMLXXXIII" in out

    def test_error_exits_nonzero(self, capsys):
        assert main(["4000000"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "OUT_OF_RANGE" in captured.err

    def test_modifier_error(self, capsys):
        assert main(["_N"]) == 1
        assert "UNEXPECTED_MODIFIER" in capsys.readouterr().err

    def test_oversized_integer_exits_nonzero(self, capsys):
        assert main(["9" * 5000]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "OUT_OF_RANGE" in captured.err

    def test_unknown_notation_setting_exits_nonzero(self, monkeypatch, capsys):
        monkeypatch.setenv("ROMAN_NOTATION", "greek")
        assert main(["12"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ROMAN_NOTATION" in captured.err
