from __future__ import annotations

import pytest

from ledger_core.repository import LedgerRepository
from ledger_core.storage import JSONStorage
from meow_ledger.cli import main


@pytest.fixture
def run(tmp_path):
    data_dir = tmp_path / "data"

    def _run(*args: str) -> int:
        return main(["--data-dir", str(data_dir), "--month", "2024-03", *args])

    _run.data_dir = data_dir
    return _run


def _stored(run):
    return LedgerRepository(JSONStorage(run.data_dir)).load_transactions()


def test_add_and_summary(run, capsys):
    assert run("tx", "add", "50", "c1", "--date", "2024-03-05", "--note", "ramen") == 0
    assert run("tx", "add", "2000", "c9", "--type", "income", "--date", "2024-03-01") == 0
    capsys.readouterr()

    assert run("summary") == 0
    out = capsys.readouterr().out
    assert "Daily - 2024-03" in out
    assert "Balance this month: 1,950.00" in out
    assert "Total assets: 1,950.00" in out


def test_list_groups_by_day(run, capsys):
    run("tx", "add", "50", "c1", "--date", "2024-03-05")
    run("tx", "add", "8", "c8", "--date", "2024-03-05")
    run("tx", "add", "2000", "c9", "--type", "income", "--date", "2024-03-01")
    capsys.readouterr()

    assert run("tx", "list") == 0
    out = capsys.readouterr().out
    assert out.index("2024-03-05") < out.index("2024-03-01")
    assert "expense 58.00" in out
    assert "Snacks" in out


def test_empty_month_message(run, capsys):
    assert run("tx", "list") == 0
    assert "No transactions in 2024-03." in capsys.readouterr().out


def test_category_type_mismatch_fails(run, capsys):
    assert run("tx", "add", "5", "c9", "--date", "2024-03-05") == 1
    assert "Validation error" in capsys.readouterr().err
    assert _stored(run) == []


def test_zero_amount_rejected_by_parser(run):
    with pytest.raises(SystemExit):
        run("tx", "add", "0", "c1")


@pytest.mark.parametrize("amount", ["nan", "sNaN", "inf", "Infinity"])
def test_non_finite_amount_rejected_by_parser(run, amount, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run("tx", "add", amount, "c1")

    assert excinfo.value.code == 2
    assert "numeric value" in capsys.readouterr().err
    assert _stored(run) == []



def test_delete_with_prompt(run, capsys, monkeypatch):
    run("tx", "add", "50", "c1", "--date", "2024-03-05")
    (tx,) = _stored(run)

    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    assert run("tx", "delete", tx.id) == 0
    assert "cancelled" in capsys.readouterr().out
    assert len(_stored(run)) == 1

    monkeypatch.setattr("builtins.input", lambda prompt: "y")
    assert run("tx", "delete", tx.id) == 0
    assert _stored(run) == []


def test_delete_with_yes_and_unknown_id(run, capsys):
    run("tx", "add", "50", "c1", "--date", "2024-03-05")
    (tx,) = _stored(run)

    assert run("tx", "delete", tx.id, "--yes") == 0
    assert run("tx", "delete", tx.id, "--yes") == 1
    assert "not found" in capsys.readouterr().err


def test_ledger_switch_and_stats(run, capsys):
    run("tx", "add", "30", "c1", "--date", "2024-03-05")
    run("tx", "add", "10", "c2", "--date", "2024-03-06")
    capsys.readouterr()

    assert run("stats") == 0
    out = capsys.readouterr().out
    assert " 1. Dining" in out
    assert "75.0%" in out

    assert run("ledger", "use", "l2") == 0
    assert run("ledger", "list") == 0
    assert "* l2" in capsys.readouterr().out

    assert run("stats") == 0
    assert "No expenses in 2024-03." in capsys.readouterr().out


def test_unknown_ledger(run, capsys):
    assert run("ledger", "use", "l7") == 1
    assert "Ledger l7 not found" in capsys.readouterr().err


def test_categories_listing(run, capsys):
    assert run("categories", "--type", "income") == 0
    out = capsys.readouterr().out
    assert "Salary" in out
    assert "Dining" not in out
