from __future__ import annotations

from typer.testing import CliRunner

from rummy_melds.cli.main import app

runner = CliRunner()


def test_arrange_sorts_run_and_reports_value() -> None:
    result = runner.invoke(app, ["arrange", "run", "7H", "5H", "6H"])
    assert result.exit_code == 0, result.output
    assert "Value: 18" in result.output
    assert "valid" in result.output


def test_arrange_incomplete_set() -> None:
    result = runner.invoke(app, ["arrange", "set", "5C", "5D"])
    assert result.exit_code == 0, result.output
    assert "incomplete" in result.output
    assert "Value: 0" in result.output


def test_fit_reports_joker_replacement() -> None:
    result = runner.invoke(app, ["fit", "run", "6H", "5H", "JOKER-R", "7H"])
    assert result.exit_code == 0, result.output
    assert "fits" in result.output
    assert "replacing" in result.output


def test_fit_rejection_exits_non_zero() -> None:
    result = runner.invoke(app, ["fit", "set", "6C", "5C", "5D"])
    assert result.exit_code == 1
    assert "does not fit" in result.output


def test_value_of_untyped_slot() -> None:
    result = runner.invoke(app, ["value", "none", "5H", "JOKER-R"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "25"


def test_bad_card_code_is_a_usage_error() -> None:
    result = runner.invoke(app, ["value", "none", "5X"])
    assert result.exit_code == 2
