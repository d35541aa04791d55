"""Tests for the command line interface."""

import json
from decimal import Decimal

from png_payroll.cli import EXIT_ERROR, EXIT_INVALID, EXIT_OK, PayrollCli


def run(args):
    return PayrollCli().run(args)


class TestCalculateCommand:
    def test_text_output(self, capsys):
        assert run(["calculate", "50000"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Tax bracket:       4" in out
        assert "Annual tax:        K11,500.00" in out
        assert "Annual income:     K50,000.00" in out

    def test_json_output(self, capsys):
        assert run(["calculate", "50000", "--json"]) == EXIT_OK

        data = json.loads(capsys.readouterr().out)
        assert data["tax_bracket"] == 4
        assert Decimal(data["annual_tax"]) == Decimal("11499.9965")

    def test_invalid_income(self, capsys):
        assert run(["calculate", "abc"]) == EXIT_INVALID
        assert "ERROR:" in capsys.readouterr().err

    def test_unknown_builtin_year(self, capsys):
        assert run(["calculate", "50000", "--tax-year", "1999"]) == EXIT_INVALID
        assert "No tax brackets" in capsys.readouterr().err

    def test_derive_base_tax_from_file(self, tmp_path, capsys):
        path = tmp_path / "table.json"
        path.write_text(
            json.dumps(
                [
                    {"bracket_number": 1, "min_income": 0, "max_income": 12500, "tax_rate": 0},
                    {"bracket_number": 2, "min_income": 12500, "max_income": 20000, "tax_rate": 22},
                    {"bracket_number": 3, "min_income": 20000, "max_income": None, "tax_rate": 30},
                ]
            ),
            encoding="utf-8",
        )

        assert run(["calculate", "30000", "--brackets", str(path), "--derive-base-tax", "--json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["annual_tax"]) == Decimal("4650")


class TestBracketsCommand:
    def test_builtin_table(self, capsys):
        assert run(["brackets"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "No limit" in out
        assert "42.00%" in out
        assert "issue(s) found" not in out

    def test_issues_reported(self, tmp_path, capsys):
        path = tmp_path / "bounded.json"
        path.write_text(
            json.dumps(
                {
                    "brackets": [
                        {"bracket_number": 1, "min_income": 0, "max_income": 12500, "tax_rate": 0},
                        {"bracket_number": 2, "min_income": 12500, "max_income": 20000, "tax_rate": 22},
                    ]
                }
            ),
            encoding="utf-8",
        )

        assert run(["brackets", "--brackets", str(path)]) == EXIT_INVALID
        out = capsys.readouterr().out
        assert "1 issue(s) found" in out
        assert "No bracket without an upper limit" in out


class TestBracketFileErrors:
    """Unreadable bracket files are invalid input, not crashes."""

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "nope.json"

        assert run(["calculate", "50000", "--brackets", str(missing)]) == EXIT_INVALID
        assert "Invalid brackets" in capsys.readouterr().err

    def test_malformed_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        assert run(["calculate", "50000", "--brackets", str(path)]) == EXIT_INVALID
        assert "not valid JSON" in capsys.readouterr().err

    def test_rows_that_are_not_objects(self, tmp_path, capsys):
        path = tmp_path / "numbers.json"
        path.write_text("[1, 2]", encoding="utf-8")

        assert run(["calculate", "50000", "--brackets", str(path)]) == EXIT_INVALID
        assert "must be an object" in capsys.readouterr().err

    def test_brackets_command_with_missing_file(self, tmp_path):
        assert run(["brackets", "--brackets", str(tmp_path / "nope.json")]) == EXIT_INVALID


class TestHoursCommand:
    def test_day_shift(self, capsys):
        assert run(["hours", "08:00", "16:30", "--break", "30"]) == EXIT_OK
        assert "Working hours: 8.0" in capsys.readouterr().out

    def test_invalid_time(self, capsys):
        assert run(["hours", "25:00", "16:30"]) == EXIT_INVALID


def test_no_command_prints_help(capsys):
    assert run([]) == EXIT_ERROR
    assert "usage:" in capsys.readouterr().out
