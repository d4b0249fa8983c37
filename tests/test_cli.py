# tests/test_cli.py

from __future__ import annotations

from typer.testing import CliRunner

from scifi_classes.cli import app
from scifi_classes.config import get_config
from scifi_classes import utils

runner = CliRunner()


def test_quote_command_prints_single_quote() -> None:
    result = runner.invoke(app, ["quote", str(utils.tests_data_path("quotes_single.txt"))])

    assert result.exit_code == 0
    assert "Live long and prosper — Spock" in result.output


def test_quote_command_first_flag() -> None:
    result = runner.invoke(
        app, ["quote", str(utils.tests_data_path("quotes_mixed.txt")), "--first"]
    )

    assert result.exit_code == 0
    assert "Live long and prosper — Spock" in result.output


def test_quote_command_seed_is_reproducible() -> None:
    args = ["quote", str(utils.tests_data_path("quotes_mixed.txt")), "--seed", "7"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)

    assert first.exit_code == 0
    assert first.output == second.output


def test_quote_command_missing_file_exits_non_zero() -> None:
    result = runner.invoke(app, ["quote", str(utils.tests_data_path("nope.txt"))])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_quote_command_empty_file_reports_no_quotes() -> None:
    result = runner.invoke(app, ["quote", str(utils.tests_data_path("quotes_empty.txt"))])

    assert result.exit_code == 0
    assert "No quotes available." in result.output


def test_no_command_prints_quote_from_default_file() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert " — " in result.output


def test_list_command_shows_table() -> None:
    result = runner.invoke(app, ["list", str(utils.tests_data_path("quotes_mixed.txt"))])

    assert result.exit_code == 0
    assert "Spock" in result.output
    assert "3 loaded" in result.output


def test_greet_command_default() -> None:
    result = runner.invoke(app, ["greet", "Ada"])

    assert result.exit_code == 0
    assert "Hi, I'm Ada" in result.output


def test_greet_command_at_time() -> None:
    result = runner.invoke(app, ["greet", "Ada", "--time", "morning"])

    assert result.exit_code == 0
    assert "Good morning, Ada" in result.output


def test_greet_command_custom_greeting_without_name() -> None:
    result = runner.invoke(app, ["greet", "--greeting", "Greetings,"])

    assert result.exit_code == 0
    assert "Greetings, Anonymous" in result.output


def test_quote_command_bad_selection_mode_reports_error(monkeypatch) -> None:
    monkeypatch.setitem(get_config().quotes, "selection", "last")

    result = runner.invoke(app, ["quote", str(utils.tests_data_path("quotes_mixed.txt"))])

    assert result.exit_code == 1
    assert "Unknown selection mode: last" in result.output
    assert not isinstance(result.exception, ValueError)


def test_greet_command_rejects_time_with_greeting() -> None:
    result = runner.invoke(app, ["greet", "Ada", "--time", "morning", "--greeting", "Yo"])

    assert result.exit_code == 2
    assert "Good morning, Ada" not in result.output
