from __future__ import annotations

import json
import logging

import pytest

from ledger_core.defaults import DEFAULT_ACTIVE_LEDGER_ID, DEFAULT_CATEGORIES, DEFAULT_LEDGERS
from ledger_core.exceptions import PersistenceError
from ledger_core.models import Category, Ledger, TransactionType
from ledger_core.storage import JSONStorage


def test_absent_keys_fall_back_to_defaults(repository):
    assert repository.load_transactions() == []
    assert repository.load_ledgers() == DEFAULT_LEDGERS
    assert repository.load_categories() == DEFAULT_CATEGORIES
    assert repository.load_active_ledger_id() == DEFAULT_ACTIVE_LEDGER_ID == "l1"


def test_seed_categories_cover_both_types_and_unique_ids():
    ids = [category.id for category in DEFAULT_CATEGORIES]
    assert len(ids) == len(set(ids))
    types = {category.type for category in DEFAULT_CATEGORIES}
    assert types == {TransactionType.EXPENSE, TransactionType.INCOME}


def test_transactions_persist_and_reload(repository, march_pair):
    repository.save_transactions(list(march_pair))

    assert repository.load_transactions() == list(march_pair)
    raw = json.loads((repository.storage.base_path / "transactions.json").read_text("utf-8"))
    assert [record["id"] for record in raw] == ["exp-50", "inc-2000"]


def test_empty_transaction_list_is_written(repository, march_pair):
    repository.save_transactions(list(march_pair))
    repository.save_transactions([])

    assert repository.load_transactions() == []
    assert repository.storage.exists("transactions")


def test_active_ledger_round_trip(repository):
    repository.save_active_ledger_id("l2")
    assert repository.load_active_ledger_id() == "l2"


def test_corrupted_json_falls_back_and_logs(repository, caplog):
    (repository.storage.base_path / "ledgers.json").write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="ledger_core.repository"):
        ledgers = repository.load_ledgers()

    assert ledgers == DEFAULT_LEDGERS
    assert "ledgers" in caplog.text


def test_wrong_shape_falls_back(repository):
    (repository.storage.base_path / "transactions.json").write_text('{"id": 1}', encoding="utf-8")
    (repository.storage.base_path / "active_ledger_id.json").write_text("42", encoding="utf-8")

    assert repository.load_transactions() == []
    assert repository.load_active_ledger_id() == DEFAULT_ACTIVE_LEDGER_ID


def test_malformed_record_falls_back(repository):
    payload = [{"id": "c1", "name": "Broken", "type": "transfer"}]
    (repository.storage.base_path / "categories.json").write_text(json.dumps(payload), encoding="utf-8")

    assert repository.load_categories() == DEFAULT_CATEGORIES


def test_ledgers_round_trip(repository):
    ledgers = [*DEFAULT_LEDGERS, Ledger(id="l3", name="Pets", cover_color="bg-amber-400", icon="Fish")]

    repository.save_ledgers(ledgers)

    assert repository.load_ledgers() == ledgers
    raw = json.loads((repository.storage.base_path / "ledgers.json").read_text("utf-8"))
    assert raw[-1]["coverColor"] == "bg-amber-400"


def test_categories_round_trip(repository):
    categories = [
        Category(id="c1", name="Dining", icon="Utensils", type=TransactionType.EXPENSE, color="bg-orange-400"),
        Category(id="c9", name="Salary", icon="Wallet", type=TransactionType.INCOME, color="bg-emerald-400"),
    ]

    repository.save_categories(categories)

    assert repository.load_categories() == categories


def test_malformed_transactions_are_moved_aside(repository, march_pair, caplog):
    repository.save_transactions(list(march_pair))
    path = repository.storage.base_path / "transactions.json"
    good = json.loads(path.read_text("utf-8"))
    path.write_text(json.dumps([*good, {"id": "broken"}]), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="ledger_core.repository"):
        assert repository.load_transactions() == []

    backup = repository.storage.base_path / "transactions.json.corrupt"
    assert not path.exists()
    assert json.loads(backup.read_text("utf-8"))[:2] == good
    assert "transactions.json.corrupt" in caplog.text

    repository.save_transactions([])
    assert backup.exists()


def test_unreadable_json_is_moved_aside(repository):
    (repository.storage.base_path / "categories.json").write_text("[", encoding="utf-8")

    assert repository.load_categories() == DEFAULT_CATEGORIES
    assert (repository.storage.base_path / "categories.json.corrupt").read_text("utf-8") == "["


def test_storage_raises_on_corrupt_document(tmp_path):
    storage = JSONStorage(tmp_path)
    (tmp_path / "transactions.json").write_text("[", encoding="utf-8")

    with pytest.raises(PersistenceError):
        storage.load("transactions")


def test_storage_load_missing_key_returns_none(tmp_path):
    assert JSONStorage(tmp_path).load("nothing") is None


def test_storage_save_leaves_no_temp_file(tmp_path):
    storage = JSONStorage(tmp_path)
    storage.save("active_ledger_id", "l2")

    assert storage.load("active_ledger_id") == "l2"
    assert not list(tmp_path.glob("*.tmp"))


def test_storage_quarantine_missing_key_returns_none(tmp_path):
    assert JSONStorage(tmp_path).quarantine("nothing") is None
