"""Integration tests for end-to-end CLI workflows."""

import json

from coinwallet.cli.main import cli


def _invoke(cli_runner, db_path, *args, session="s1", input=None):
    return cli_runner.invoke(
        cli, ["--db-path", db_path, "--session", session, *args], input=input
    )


def test_full_workflow(cli_runner, db_path, tmp_path):
    """Test init → settings → add → status → stats → undo → export → import."""
    result = _invoke(cli_runner, db_path, "init", "1,000")
    assert result.exit_code == 0
    assert "Initialized wallet with 1,000 coins" in result.output

    result = _invoke(cli_runner, db_path, "settings", "set", "--primary", "500")
    assert result.exit_code == 0

    result = _invoke(cli_runner, db_path, "add", "1300", "--date", "2024-01-01")
    assert result.exit_code == 0
    assert "Earned +300" in result.output
    assert "Previous balance: 1,000" in result.output

    result = _invoke(cli_runner, db_path, "add", "1100", "--mode", "premium", "--date", "2024-01-01")
    assert result.exit_code == 0
    assert "Premium box -200" in result.output

    result = _invoke(cli_runner, db_path, "add", "2000", "--date", "2024-01-02")
    assert result.exit_code == 0

    result = _invoke(cli_runner, db_path, "status")
    assert result.exit_code == 0
    assert "Balance: 2,000" in result.output
    # Day 1: 300 of 500, day 2: 900 of 500 repays it
    assert "Debt: 0" in result.output

    result = _invoke(cli_runner, db_path, "stats")
    assert result.exit_code == 0
    assert "earned +1,200" in result.output

    result = _invoke(cli_runner, db_path, "stats", "--monthly")
    assert result.exit_code == 0
    assert "2024-01" in result.output

    result = _invoke(cli_runner, db_path, "undo", "--yes")
    assert result.exit_code == 0
    assert "Balance is now 1,100" in result.output

    result = _invoke(cli_runner, db_path, "status")
    assert "Debt: 200" in result.output

    export_path = tmp_path / "export.json"
    result = _invoke(cli_runner, db_path, "export", "--output", str(export_path))
    assert result.exit_code == 0
    exported = json.loads(export_path.read_text())
    assert exported["initialCoinAmount"] == 1000
    assert len(exported["records"]) == 2
    assert exported["settings"]["primaryGoal"] == 500

    result = _invoke(cli_runner, db_path, "import", str(export_path), "--yes")
    assert result.exit_code == 0
    assert "Imported 2 records" in result.output


def test_commands_require_initialized_wallet(cli_runner, db_path):
    result = _invoke(cli_runner, db_path, "status")

    assert result.exit_code == 1
    assert "not initialized" in result.output


def test_init_refuses_to_overwrite(cli_runner, db_path):
    assert _invoke(cli_runner, db_path, "init", "100").exit_code == 0

    result = _invoke(cli_runner, db_path, "init", "200")
    assert result.exit_code == 1
    assert "already initialized" in result.output

    result = _invoke(cli_runner, db_path, "init", "200", "--force")
    assert result.exit_code == 0


def test_add_rejects_wrong_direction_and_backdating(cli_runner, db_path):
    _invoke(cli_runner, db_path, "init", "1000")

    result = _invoke(cli_runner, db_path, "add", "900", "--date", "2024-01-01")
    assert result.exit_code == 1
    assert "Earning mode requires the balance to increase" in result.output

    result = _invoke(cli_runner, db_path, "add", "1200", "--mode", "pick", "--date", "2024-01-01")
    assert result.exit_code == 1
    assert "requires the balance to decrease" in result.output

    assert _invoke(cli_runner, db_path, "add", "1500", "--date", "2024-01-01").exit_code == 0
    result = _invoke(cli_runner, db_path, "add", "1600", "--date", "2023-12-31")
    assert result.exit_code == 1
    assert "earlier than the last record's date (2024-01-01)" in result.output


def test_add_rejects_bad_input(cli_runner, db_path):
    _invoke(cli_runner, db_path, "init", "1000")

    result = _invoke(cli_runner, db_path, "add", "lots")
    assert result.exit_code == 1
    assert "Invalid amount format" in result.output

    result = _invoke(cli_runner, db_path, "add", "1200", "--date", "someday soon")
    assert result.exit_code == 1
    assert "Invalid date format" in result.output


def test_undo_is_bounded_to_session(cli_runner, db_path):
    _invoke(cli_runner, db_path, "init", "1000")
    _invoke(cli_runner, db_path, "add", "1500", "--date", "2024-01-01", session="first")

    result = _invoke(cli_runner, db_path, "undo", "--yes", session="second")
    assert result.exit_code == 1
    assert "No record added in this session" in result.output

    result = _invoke(cli_runner, db_path, "session", "end", session="first")
    assert result.exit_code == 0
    result = _invoke(cli_runner, db_path, "undo", "--yes", session="first")
    assert result.exit_code == 1


def test_undo_asks_for_confirmation(cli_runner, db_path):
    _invoke(cli_runner, db_path, "init", "1000")
    _invoke(cli_runner, db_path, "add", "1500", "--date", "2024-01-01")

    result = _invoke(cli_runner, db_path, "undo", input="n\n")
    assert result.exit_code == 1

    result = _invoke(cli_runner, db_path, "last")
    assert "balance 1,500" in result.output


def test_settings_show_and_weekday_goals(cli_runner, db_path):
    _invoke(cli_runner, db_path, "init", "1000")

    result = _invoke(
        cli_runner, db_path, "settings", "set", "--primary-weekdays", "0,100,100,100,100,100,200"
    )
    assert result.exit_code == 0

    result = _invoke(cli_runner, db_path, "settings", "show")
    assert result.exit_code == 0
    assert "Sat:        200 / 300" in result.output
    assert "Wed:        100 / 200" in result.output

    result = _invoke(cli_runner, db_path, "settings", "set", "--primary-weekdays", "1,2")
    assert result.exit_code == 1
    assert "Invalid goal" in result.output


def test_import_rejects_malformed_file(cli_runner, db_path, tmp_path):
    _invoke(cli_runner, db_path, "init", "1000")
    bad = tmp_path / "bad.json"
    bad.write_text('{"initialCoinAmount": "x", "records": []}')

    result = _invoke(cli_runner, db_path, "import", str(bad), "--yes")

    assert result.exit_code == 1
    assert "Invalid JSON format" in result.output
    result = _invoke(cli_runner, db_path, "status")
    assert "Balance: 1,000" in result.output


def test_last_and_goals(cli_runner, db_path):
    _invoke(cli_runner, db_path, "init", "1000")

    result = _invoke(cli_runner, db_path, "last")
    assert "No records found." in result.output

    _invoke(cli_runner, db_path, "add", "1500", "--date", "2024-01-01")
    result = _invoke(cli_runner, db_path, "last")
    assert result.exit_code == 0
    assert "2024-01-01" in result.output
    assert "ID:" in result.output

    result = _invoke(cli_runner, db_path, "goals", "--days", "3")
    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 3
