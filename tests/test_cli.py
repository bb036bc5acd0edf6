# tests/test_cli.py

from typer.testing import CliRunner

from bizbook.cli.app import app

runner = CliRunner()


def test_run_executes_lines_in_order():
    result = runner.invoke(app, ["run", "addcli n/Alice Tan p/91234567", "listcli"])

    assert result.exit_code == 0
    assert "New client added: Alice Tan" in result.output
    assert "1. Alice Tan" in result.output


def test_run_reports_failures_and_continues():
    result = runner.invoke(app, ["run", "addx n/Alice", "addcli n/Bob Lee p/88887777"])

    assert result.exit_code == 0
    assert "Unknown command" in result.output
    assert "New client added: Bob Lee" in result.output


def test_run_strict_stops_at_first_failure():
    result = runner.invoke(app, ["run", "--strict", "addcli n/Alice", "addcli n/Bob Lee p/88887777"])

    assert result.exit_code == 1
    assert "Invalid command format!" in result.output
    assert "Bob Lee" not in result.output


def test_run_stops_at_exit():
    result = runner.invoke(app, ["run", "exit", "addcli n/Bob Lee p/88887777"])

    assert result.exit_code == 0
    assert "Bob Lee" not in result.output


def test_run_help_prints_usages():
    result = runner.invoke(app, ["run", "help"])

    assert result.exit_code == 0
    assert "addcli:" in result.output
    assert "profit:" in result.output


def test_shell_reads_until_exit():
    user_input = "addcli n/Alice Tan p/91234567\n\nlistcli\nexit\nlistcli\n"
    result = runner.invoke(app, ["shell"], input=user_input)

    assert result.exit_code == 0
    assert "New client added: Alice Tan" in result.output
    assert result.output.count("1. Alice Tan") == 1
    assert "Exiting" in result.output


def test_shell_stops_at_end_of_input():
    result = runner.invoke(app, ["shell"], input="addsvc t/Manicure du/1 a/30\n")

    assert result.exit_code == 0
    assert "New service added" in result.output
