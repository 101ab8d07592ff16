"""Console interface for the ledger."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional

from ledger_core.aggregation import MonthKey, MonthlySnapshot
from ledger_core.exceptions import PersistenceError, RecordNotFoundError, ValidationError
from ledger_core.models import Transaction, TransactionDraft, TransactionType
from ledger_core.navigation import LedgerController
from ledger_core.presentation import format_money, format_percentage, format_signed
from ledger_core.repository import LedgerRepository
from ledger_core.storage import JSONStorage, default_data_dir
from ledger_core.validators import parse_amount, parse_month


def _parse_month(value: str) -> MonthKey:
    try:
        year, month = parse_month(value)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid month '{value}'. Expected format YYYY-MM."
        ) from exc
    return MonthKey(year, month)


def _parse_date(value: str) -> str:
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from exc
    return value


def _parse_amount(value: str) -> str:
    try:
        parse_amount(value, "amount")
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def _load_controller(data_dir: Path, month: Optional[MonthKey]) -> LedgerController:
    repository = LedgerRepository(JSONStorage(data_dir))
    return LedgerController(repository, month=month)


def _format_transaction(controller: LedgerController, tx: Transaction) -> str:
    category = controller.categories.resolve(tx.category_id, tx.type)
    signed = format_signed(tx.amount, tx.type is TransactionType.INCOME)
    note = f"  {tx.note}" if tx.note else ""
    return f"  [{tx.id}] {tx.date.isoformat()} {category.name:<14} {signed:>12}{note}"


def _print_summary(controller: LedgerController, snapshot: MonthlySnapshot) -> None:
    ledger = controller.active_ledger()
    name = ledger.name if ledger else controller.active_ledger_id
    print(f"{name} - {snapshot.month.label}")
    print(f"  Balance this month: {format_money(snapshot.stats.balance)}")
    print(f"  Income: {format_money(snapshot.stats.income)}  Expense: {format_money(snapshot.stats.expense)}")
    print(f"  Total assets: {format_money(snapshot.total_balance)}")


def handle_tx(args: argparse.Namespace, controller: LedgerController) -> int:
    if args.command == "add":
        draft = TransactionDraft(
            amount=args.amount,
            type=TransactionType(args.type),
            category_id=args.category_id,
            date=args.date or date.today().isoformat(),
            note=args.note or "",
        )
        outcome = controller.submit(draft)
        if not outcome.ok:
            print(f"Validation error: {outcome.error}", file=sys.stderr)
            return 1
        print("Transaction added:\n" + _format_transaction(controller, outcome.transaction))
    elif args.command == "list":
        snapshot = controller.snapshot()
        if not snapshot.daily_groups:
            print(f"No transactions in {snapshot.month.label}.")
            return 0
        for group in snapshot.daily_groups:
            print(
                f"{group.date.isoformat()}  income {format_money(group.total_income)}"
                f"  expense {format_money(group.total_expense)}"
            )
            for tx in group.transactions:
                print(_format_transaction(controller, tx))
    elif args.command == "delete":
        confirm: Callable[[str], bool] = (lambda _prompt: True) if args.yes else _ask
        if controller.request_delete(args.id, confirm):
            print(f"Transaction {args.id} deleted.")
        else:
            print("Deletion cancelled.")
    return 0


def handle_ledger(args: argparse.Namespace, controller: LedgerController) -> int:
    if args.command == "list":
        for ledger in controller.ledgers.list():
            marker = "*" if ledger.id == controller.active_ledger_id else " "
            print(f"{marker} {ledger.id:<6} {ledger.name}")
    elif args.command == "use":
        ledger = controller.switch_ledger(args.id)
        print(f"Active ledger: {ledger.name}")
    return 0


def handle_summary(args: argparse.Namespace, controller: LedgerController) -> int:
    _print_summary(controller, controller.snapshot())
    return 0


def handle_stats(args: argparse.Namespace, controller: LedgerController) -> int:
    snapshot = controller.snapshot()
    print(f"Expenses {format_money(snapshot.stats.expense)}  Income +{format_money(snapshot.stats.income)}")
    if not snapshot.ranking:
        print(f"No expenses in {snapshot.month.label}.")
        return 0
    for rank, share in enumerate(snapshot.ranking, start=1):
        print(
            f"{rank:>2}. {share.name:<14} {format_money(share.total):>12}"
            f"  {format_percentage(share.percentage):>6}"
        )
    return 0


def handle_categories(args: argparse.Namespace, controller: LedgerController) -> int:
    for category in controller.categories.list(args.type):
        print(f"{category.id:<5} {category.type.value:<8} {category.name}")
    return 0


def _ask(prompt: str) -> bool:
    answer = input(f"{prompt} [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Meow Ledger CLI")
    parser.add_argument(
        "--data-dir",
        default=None,
        type=Path,
        help="Directory to store JSON data (default: $MEOW_LEDGER_DATA_DIR or ./data)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--month",
        type=_parse_month,
        help="Month to display as YYYY-MM (default: current month)",
    )

    subparsers = parser.add_subparsers(dest="entity", required=True)

    tx_parser = subparsers.add_parser("tx", help="Manage transactions of the active ledger")
    tx_sub = tx_parser.add_subparsers(dest="command", required=True)

    tx_add = tx_sub.add_parser("add", help="Add a new transaction")
    tx_add.add_argument("amount", type=_parse_amount)
    tx_add.add_argument("category_id")
    tx_add.add_argument(
        "--type",
        choices=[member.value for member in TransactionType],
        default=TransactionType.EXPENSE.value,
    )
    tx_add.add_argument("--date", type=_parse_date, help="YYYY-MM-DD (default: today)")
    tx_add.add_argument("--note")

    tx_sub.add_parser("list", help="List transactions grouped by day")

    tx_delete = tx_sub.add_parser("delete", help="Delete a transaction")
    tx_delete.add_argument("id")
    tx_delete.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    ledger_parser = subparsers.add_parser("ledger", help="List or switch ledgers")
    ledger_sub = ledger_parser.add_subparsers(dest="command", required=True)
    ledger_sub.add_parser("list", help="List ledgers")
    ledger_use = ledger_sub.add_parser("use", help="Switch the active ledger")
    ledger_use.add_argument("id")

    subparsers.add_parser("summary", help="Show monthly totals and total assets")
    subparsers.add_parser("stats", help="Rank expense categories for the month")

    categories_parser = subparsers.add_parser("categories", help="List categories")
    categories_parser.add_argument("--type", choices=[member.value for member in TransactionType])

    return parser


HANDLERS = {
    "tx": handle_tx,
    "ledger": handle_ledger,
    "summary": handle_summary,
    "stats": handle_stats,
    "categories": handle_categories,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        controller = _load_controller(args.data_dir or default_data_dir(), args.month)
        return HANDLERS[args.entity](args, controller)
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except RecordNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except PersistenceError as exc:
        print(f"Storage error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
