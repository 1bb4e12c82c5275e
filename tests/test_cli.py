import json

from typer.testing import CliRunner

from networth.cli import app

runner = CliRunner()


def write_seed(tmp_path, transactions):
    path = tmp_path / "seed.json"
    accounts = {"on_budget": [{"id": "a1", "name": "Checking"}], "tracking": [{"id": "a2", "name": "Loan"}]}
    path.write_text(json.dumps({"accounts": accounts, "transactions": transactions}), encoding="utf-8")
    return path


def test_report_json(tmp_path):
    seed = write_seed(tmp_path, [
        {"id": "t1", "date": "2024-01-05", "account_id": "a1", "amount": 100},
        {"id": "t2", "date": "2024-03-05", "account_id": "a2", "amount": -300},
    ])
    result = runner.invoke(app, ["report", str(seed), "--from", "2024-01-01", "--to", "2024-04-30"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["labels"] == ["Jan 2024", "Feb 2024", "Mar 2024", "Apr 2024"]
    assert payload["netWorths"] == [100, 100, -200, -200]
    assert payload["debtRatios"][2] == 300.0


def test_report_excludes_accounts_and_splits(tmp_path):
    seed = write_seed(tmp_path, [
        {"id": "t1", "date": "2024-01-05", "account_id": "a1", "amount": 100},
        {"id": "t2", "date": "2024-01-06", "account_id": "a2", "amount": -300},
    ])
    result = runner.invoke(app, ["report", str(seed), "--exclude", "a2", "--split-by-account"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["debts"] == [0]
    assert payload["axisBounds"] == [0, 200]


def test_report_table(tmp_path):
    seed = write_seed(tmp_path, [{"id": "t1", "date": "2024-01-05", "account_id": "a1", "amount": 100}])
    result = runner.invoke(app, ["report", str(seed), "--format", "table"])

    assert result.exit_code == 0, result.output
    assert "Jan 2024" in result.stdout
    assert "net_worth" in result.stdout


def test_report_missing_file(tmp_path):
    result = runner.invoke(app, ["report", str(tmp_path / "nope.json")])
    assert result.exit_code == 1


def test_report_invalid_transaction(tmp_path):
    seed = write_seed(tmp_path, [{"id": "t1", "date": "2024-01-05", "account_id": "a1", "amount": "lots"}])
    result = runner.invoke(app, ["report", str(seed)])
    assert result.exit_code == 1


def _reject_constant(token):
    raise ValueError(f"non-standard JSON token {token}")


def test_report_infinite_debt_ratio_is_strict_json(tmp_path):
    seed = write_seed(tmp_path, [
        {"id": "t1", "date": "2023-01-15", "account_id": "a1", "amount": 100},
        {"id": "t2", "date": "2023-02-15", "account_id": "a1", "amount": -300},
    ])
    result = runner.invoke(app, ["report", str(seed)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout, parse_constant=_reject_constant)
    assert payload["debts"] == [0, 200]
    assert payload["debtRatios"] == [0.0, "Infinity"]
