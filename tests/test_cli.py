"""
tests/test_cli.py - Command Line Tests

Each invocation prints one line on stdout; failures print 'ERROR: ...'
on stderr and return 1.

Author: odds-calc contributors
License: MIT
"""

import pytest
from datetime import date

from odds_calc.cli import main

TODAY = date(2026, 10, 19)


def run(capsys, *argv):
    code = main(list(argv), today=TODAY)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestSubcommands:

    @pytest.mark.parametrize("argv, expected", [
        (["std", "0"], "0% (1 in 2)"),
        (["std", "95"], "2.0"),
        (["std", "1000"], "3.1"),
        (["reimann-zeta", "1"], "100%"),
        (["rz", "1", "-p", "4"], "25%"),
        (["rz", "1", "--positions", "2"], "50%"),
        (["die-next-year-france", "2026"], "0.33%"),
        (["dny", "1931", "-g", "female"], "18.59%"),
        (["dny", "1931", "--gender", "FEMALE"], "18.59%"),
        (["days-left", "2000"], "15157 days"),
        (["expected-age-of-death", "2000"], "67.50"),
        (["ead", "2000", "-g", "female"], "67.50"),
    ])
    def test_output_line(self, capsys, argv, expected):
        code, out, err = run(capsys, *argv)

        assert code == 0, f"{argv} failed: {err}"
        assert out == expected + "\n"


class TestErrors:

    def test_too_old(self, capsys):
        code, out, err = run(capsys, "days-left", "1917")

        assert code == 1
        assert out == ""
        assert "ERROR: you are too old" in err

    def test_invalid_gender(self, capsys):
        code, out, err = run(capsys, "dny", "1990", "-g", "other")

        assert code == 1
        assert "Invalid gender" in err
        assert "Value error" not in err

    def test_future_birth_year(self, capsys):
        code, _, err = run(capsys, "dny", "2030")

        assert code == 1
        assert "out of range" in err

    @pytest.mark.parametrize("argv", [["rz", "0"], ["rz", "5", "-p", "0"]])
    def test_zero_divisors(self, capsys, argv):
        code, _, err = run(capsys, *argv)

        assert code == 1
        assert "ERROR:" in err

    def test_n_too_large_for_a_float(self, capsys):
        code, out, err = run(capsys, "rz", "1" + "0" * 400)

        assert code == 1
        assert out == ""
        assert "ERROR:" in err

    def test_nan_std(self, capsys):
        code, _, err = run(capsys, "std", "nan")

        assert code == 1
        assert "non-finite" in err

    def test_unknown_command_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["nope"], today=TODAY)
        assert exc.value.code == 2
