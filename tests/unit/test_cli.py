"""Тесты CLI (терминальный рендерер)."""

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from calc_engine.cli import app

runner = CliRunner()


class TestPressCommand:
    """calc-engine press."""

    def test_precedence(self):
        result = runner.invoke(app, ["press", "2", "+", "3", "*", "4", "Enter"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "14"

    def test_trace(self):
        result = runner.invoke(app, ["press", "1", "2", "+", "--trace"])
        assert result.exit_code == 0
        assert result.stdout.split() == ["1", "12", "12+"]

    def test_initial_display(self):
        result = runner.invoke(app, ["press", "5", "Enter", "--initial", "10+"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "15"

    def test_division_by_zero(self):
        result = runner.invoke(app, ["press", "8", "/", "0", "Enter"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Cannot divide by zero"

    def test_unmapped_key_ignored(self):
        result = runner.invoke(app, ["press", "7", "F1", "8"])
        assert result.exit_code == 0
        assert result.stdout.strip().splitlines()[-1] == "78"

    @pytest.mark.parametrize("initial", ["+5", "×2", "÷"])
    def test_invalid_initial_display(self, initial):
        """Недопустимый --initial → сообщение и код 1, без трейсбека pydantic."""
        result = runner.invoke(app, ["press", "1", "--initial", initial])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert not isinstance(result.exception, ValidationError)


class TestEvalCommand:
    """calc-engine eval."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2+3*4", "14"),
            ("2+3×4", "14"),
            ("1/3", "0.3333333333"),
            ("10 - 2 * 3", "4"),
        ],
    )
    def test_eval(self, expression, expected):
        result = runner.invoke(app, ["eval", expression])
        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_leading_minus(self):
        """Ведущий минус передаётся после "--", иначе click примет его за опцию."""
        result = runner.invoke(app, ["eval", "--", "-5+3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "-2"

    def test_division_by_zero_exit_code(self):
        result = runner.invoke(app, ["eval", "8/0"])
        assert result.exit_code == 1

    def test_malformed_exit_code(self):
        result = runner.invoke(app, ["eval", "5++3"])
        assert result.exit_code == 1
