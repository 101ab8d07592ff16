"""Navigation state machine and the top-level controller that owns it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Union

from .aggregation import MonthKey, MonthlySnapshot, build_snapshot
from .entry_form import EntryForm
from .exceptions import ValidationError
from .models import Ledger, Transaction, TransactionDraft, TransactionType, ViewState
from .repository import LedgerRepository
from .services import CategoryService, LedgerService, TransactionService

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Delete this record?"


class NavEvent(str, Enum):
    SHOW_HOME = "show_home"
    SHOW_STATS = "show_stats"
    SHOW_LEDGERS = "show_ledgers"
    BACK = "back"
    OPEN_MODAL = "open_modal"
    CLOSE_MODAL = "close_modal"
    LEDGER_SELECTED = "ledger_selected"
    SAVED = "saved"


@dataclass(frozen=True)
class NavigationState:
    view: ViewState = ViewState.HOME
    modal_open: bool = False


def transition(state: NavigationState, event: NavEvent) -> NavigationState:
    """Return the state reached from ``state`` on ``event``."""
    if event is NavEvent.SHOW_HOME:
        return replace(state, view=ViewState.HOME)
    if event is NavEvent.SHOW_STATS:
        return replace(state, view=ViewState.STATS)
    if event is NavEvent.SHOW_LEDGERS:
        # The ledger switcher is a full screen; it never shows the entry form.
        return NavigationState(view=ViewState.LEDGERS, modal_open=False)
    if event in (NavEvent.BACK, NavEvent.LEDGER_SELECTED):
        if state.view is ViewState.LEDGERS:
            return NavigationState(view=ViewState.HOME, modal_open=False)
        return state
    if event is NavEvent.OPEN_MODAL:
        if state.view is ViewState.LEDGERS:
            return state
        return replace(state, modal_open=True)
    if event in (NavEvent.CLOSE_MODAL, NavEvent.SAVED):
        return replace(state, modal_open=False)
    raise ValueError(f"Unknown navigation event: {event!r}")


@dataclass(frozen=True)
class SubmitOutcome:
    transaction: Optional[Transaction] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.transaction is not None


class LedgerController:
    """Single owner of navigation, the selected month and the ledger services."""

    def __init__(
        self,
        repository: LedgerRepository,
        month: Optional[MonthKey] = None,
    ) -> None:
        self.categories = CategoryService(repository)
        self.ledgers = LedgerService(repository)
        self.transactions = TransactionService(repository, self.categories)
        self.state = NavigationState()
        self.month = month or MonthKey.today()

    @property
    def view(self) -> ViewState:
        return self.state.view

    @property
    def modal_open(self) -> bool:
        return self.state.modal_open

    @property
    def active_ledger_id(self) -> str:
        return self.ledgers.active_ledger_id

    def active_ledger(self) -> Optional[Ledger]:
        return self.ledgers.active_ledger()

    def navigate(self, event: Union[NavEvent, str]) -> NavigationState:
        self.state = transition(self.state, NavEvent(event))
        return self.state

    # Entry form -----------------------------------------------------------
    def open_entry(self, type: TransactionType = TransactionType.EXPENSE) -> Optional[EntryForm]:
        self.navigate(NavEvent.OPEN_MODAL)
        if not self.state.modal_open:
            return None
        return EntryForm(self.categories.list(), type=type)

    def close_entry(self) -> None:
        self.navigate(NavEvent.CLOSE_MODAL)

    def submit(self, entry: Union[EntryForm, TransactionDraft]) -> SubmitOutcome:
        """Add a transaction to the active ledger; invalid input is reported, not raised."""
        try:
            draft = entry.to_draft() if isinstance(entry, EntryForm) else entry
            transaction = self.transactions.add(draft, self.active_ledger_id)
        except ValidationError as exc:
            logger.debug("Rejected transaction draft: %s", exc)
            return SubmitOutcome(error=str(exc))
        self.navigate(NavEvent.SAVED)
        return SubmitOutcome(transaction=transaction)

    # Mutations ------------------------------------------------------------
    def request_delete(self, transaction_id: str, confirm: Callable[[str], bool]) -> bool:
        """Delete after ``confirm`` approves; declining leaves every view unchanged."""
        self.transactions.get(transaction_id)
        if not confirm(DELETE_PROMPT):
            logger.debug("Deletion of %s cancelled", transaction_id)
            return False
        self.transactions.delete(transaction_id)
        return True

    def switch_ledger(self, ledger_id: str) -> Ledger:
        ledger = self.ledgers.switch(ledger_id)
        self.navigate(NavEvent.LEDGER_SELECTED)
        return ledger

    def change_month(self, delta: int) -> MonthKey:
        self.month = self.month.shift(delta)
        return self.month

    # Derived views --------------------------------------------------------
    def snapshot(self) -> MonthlySnapshot:
        return build_snapshot(
            self.transactions.list(),
            self.categories.list(),
            self.active_ledger_id,
            self.month,
        )
