"""
Tests for the command-line interface.
"""

import argparse
import json

import pytest
import uvicorn

from aerounits.cli.main import cli, create_parser, parse_operand


class TestParseOperand:
    """Tests for operand parsing."""

    def test_number(self):
        """Test a bare number."""
        assert parse_operand("2.5") == 2.5

    def test_quantity(self):
        """Test VALUE:UNIT."""
        assert parse_operand("1:ft") == {"value": 1.0, "unit": "ft"}

    def test_invalid(self):
        """Test a non-numeric value."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_operand("one:ft")


class TestParser:
    """Tests for argument parsing."""

    def test_calc_arguments(self):
        """Test calc argument parsing."""
        args = create_parser().parse_args(["calc", "divide", "3:knots", "4"])
        assert args.command == "calc"
        assert args.operation == "divide"
        assert args.b == 4.0

    def test_unknown_dimension(self):
        """Test that --dimension is a closed choice."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["units", "--dimension", "luminosity"])


class TestCommands:
    """Tests for command handlers."""

    def test_no_command(self, capsys):
        """Test that help is printed without a command."""
        assert cli([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_units(self, capsys):
        """Test listing units of one dimension."""
        assert cli(["units", "--dimension", "temperature"]) == 0
        out = capsys.readouterr().out
        lines = out.strip().splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("* c")
        assert "degrees fahrenheit" in lines[1]

    def test_convert(self, capsys):
        """Test a conversion."""
        assert cli(["convert", "1", "ft", "in"]) == 0
        assert capsys.readouterr().out.strip() == "12.0 in"

    def test_convert_json(self, capsys):
        """Test JSON conversion output."""
        assert cli(["convert", "10", "ms", "kph", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["result"] == {"value": 36.0, "unit": "kph"}

    def test_convert_mismatch(self, capsys):
        """Test that incompatible units exit with status 1."""
        assert cli(["convert", "1", "ms", "ft"]) == 1
        err = capsys.readouterr().err
        assert "Error: metres per second (velocity) cannot be converted to feet (length)" in err

    def test_convert_unknown_unit(self, capsys):
        """Test that unknown identifiers exit with status 1."""
        assert cli(["convert", "1", "feet", "in"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_calc_add(self, capsys):
        """Test a cross-unit sum."""
        assert cli(["calc", "add", "1:in", "1:ft"]) == 0
        assert capsys.readouterr().out.strip() == "13.0 in"

    def test_calc_multiply(self, capsys):
        """Test a product in the base unit."""
        assert cli(["calc", "multiply", "1:m", "200:cm"]) == 0
        assert capsys.readouterr().out.strip() == "2.0 m2"

    def test_calc_numbers(self, capsys):
        """Test plain number arithmetic."""
        assert cli(["calc", "add", "1", "2"]) == 0
        assert capsys.readouterr().out.strip() == "3.0"

    def test_calc_negate_json(self, capsys):
        """Test unary negate with JSON output."""
        assert cli(["calc", "negate", "3:mm", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["operation"] == "negate"
        assert data["result"] == {"value": -3.0, "unit": "mm"}
        assert data["dimension"] == "length"

    def test_calc_mixed(self, capsys):
        """Test that number + quantity exits with status 1."""
        assert cli(["calc", "add", "1", "1:ft"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_calc_divide_by_zero(self, capsys):
        """Test division by zero."""
        assert cli(["calc", "divide", "1:m", "0:s"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_q(self, capsys):
        """Test dynamic pressure output."""
        assert cli(["q", "154.412", "knots", "--altitude", "15000", "ft", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["unit"] == "psf"
        assert data["value"] == pytest.approx(49.392, abs=1e-3)

    def test_q_wrong_dimension(self, capsys):
        """Test that a non-velocity exits with status 1."""
        assert cli(["q", "175", "ft"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_calc_overflow(self, capsys):
        """Test that a non-finite result exits with status 1."""
        assert cli(["calc", "multiply", "1e308", "10"]) == 1
        assert "non-finite" in capsys.readouterr().err

    def test_serve(self, monkeypatch):
        """Test that serve hands the app and options to uvicorn."""
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        assert cli(["serve", "--port", "9000"]) == 0
        assert calls == [
            ("aerounits.api.server:app", {"host": "127.0.0.1", "port": 9000, "reload": False}),
        ]
