"""Tkinter desktop application for the ledger."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from datetime import date
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Callable, Dict, Iterable, Optional

from ledger_core.aggregation import MonthlySnapshot
from ledger_core.entry_form import BACKSPACE, EntryForm
from ledger_core.exceptions import PersistenceError, RecordNotFoundError
from ledger_core.models import TransactionType, ViewState
from ledger_core.navigation import LedgerController, NavEvent
from ledger_core.presentation import (
    chart_color,
    color_hex,
    format_money,
    format_percentage,
    format_signed,
    icon_glyph,
)
from ledger_core.repository import LedgerRepository
from ledger_core.storage import JSONStorage, default_data_dir

PRIMARY_BG = "#fff1f2"
SECONDARY_BG = "#ffffff"
ACCENT_BG = "#fb7185"
ACCENT_ACTIVE_BG = "#f43f5e"
TEXT_PRIMARY = "#1f2937"
TEXT_MUTED = "#9ca3af"
INCOME_FG = "#10b981"

KEYPAD_ROWS = (("1", "2", "3"), ("4", "5", "6"), ("7", "8", "9"), (".", "0", BACKSPACE))


class HomeScreen(ttk.Frame):
    """Ledger chip, month switcher, balances and the day-grouped transaction list."""

    def __init__(self, master: tk.Misc, app: "MeowLedgerApp") -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.app = app
        self.ledger_var = tk.StringVar()
        self.month_var = tk.StringVar()
        self.balance_var = tk.StringVar(value="0.00")
        self.assets_var = tk.StringVar(value="0.00")
        self.income_var = tk.StringVar(value="0.00")
        self.expense_var = tk.StringVar(value="0.00")
        self._build()

    def _build(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(3, weight=1)

        header = ttk.Frame(self, style="Panel.TFrame")
        header.grid(row=0, column=0, sticky="ew")
        header.columnconfigure(1, weight=1)
        ttk.Button(
            header,
            textvariable=self.ledger_var,
            command=lambda: self.app.navigate(NavEvent.SHOW_LEDGERS),
            style="Secondary.TButton",
        ).grid(row=0, column=0, sticky="w")
        month_bar = ttk.Frame(header, style="Panel.TFrame")
        month_bar.grid(row=0, column=2, sticky="e")
        ttk.Button(month_bar, text="<", width=2, command=lambda: self.app.change_month(-1),
                   style="Secondary.TButton").grid(row=0, column=0)
        ttk.Label(month_bar, textvariable=self.month_var, style="FormLabel.TLabel").grid(
            row=0, column=1, padx=6
        )
        ttk.Button(month_bar, text=">", width=2, command=lambda: self.app.change_month(1),
                   style="Secondary.TButton").grid(row=0, column=2)

        summary = ttk.Frame(self, padding=(0, 16), style="Panel.TFrame")
        summary.grid(row=1, column=0, sticky="ew")
        summary.columnconfigure(0, weight=1)
        ttk.Label(summary, text="Balance this month", style="MetricLabel.TLabel").grid(row=0, column=0)
        ttk.Label(summary, textvariable=self.balance_var, style="Header.TLabel").grid(row=1, column=0)
        assets = ttk.Frame(summary, style="Panel.TFrame")
        assets.grid(row=2, column=0, pady=(4, 8))
        ttk.Label(assets, text=f"{icon_glyph('PiggyBank')} Total assets", style="FormLabel.TLabel").grid(
            row=0, column=0, padx=4
        )
        ttk.Label(assets, textvariable=self.assets_var, style="MetricValue.TLabel").grid(row=0, column=1)

        metrics = ttk.Frame(summary, style="Panel.TFrame")
        metrics.grid(row=3, column=0)
        for column, (label, var) in enumerate((("Income", self.income_var), ("Expense", self.expense_var))):
            ttk.Label(metrics, text=label, style="MetricLabel.TLabel").grid(row=0, column=column, padx=24)
            ttk.Label(metrics, textvariable=var, style="MetricValue.TLabel").grid(row=1, column=column, padx=24)

        columns = ("category", "note", "amount")
        self.tree = ttk.Treeview(self, columns=columns, show="tree headings", height=12, style="App.Treeview")
        self.tree.heading("#0", text="Date", anchor="w")
        self.tree.column("#0", width=150, anchor="w")
        for key, label, width in (("category", "Category", 150), ("note", "Note", 180), ("amount", "Amount", 110)):
            self.tree.heading(key, text=label, anchor="w")
            self.tree.column(key, width=width, anchor="w")
        self.tree.tag_configure("income", foreground=INCOME_FG)
        self.tree.tag_configure("day", foreground=TEXT_MUTED)
        self.tree.grid(row=3, column=0, sticky="nsew")
        self.tree.bind("<Double-1>", self._handle_double_click)

        self.empty_label = ttk.Label(
            self, text=f"{icon_glyph('Cat')} No records this month yet ~", style="FormLabel.TLabel"
        )

    def populate(self, snapshot: MonthlySnapshot) -> None:
        ledger = self.app.controller.active_ledger()
        self.ledger_var.set(
            f"{icon_glyph(ledger.icon)} {ledger.name}  >" if ledger else "Default ledger  >"
        )
        self.month_var.set(snapshot.month.label)
        self.balance_var.set(format_money(snapshot.stats.balance))
        self.assets_var.set(format_money(snapshot.total_balance))
        self.income_var.set(format_money(snapshot.stats.income))
        self.expense_var.set(format_money(snapshot.stats.expense))

        self.tree.delete(*self.tree.get_children())
        for group in snapshot.daily_groups:
            day_id = f"day:{group.date.isoformat()}"
            self.tree.insert(
                "",
                "end",
                iid=day_id,
                text=group.date.isoformat(),
                values=(
                    "",
                    f"in {format_money(group.total_income)}  out {format_money(group.total_expense)}",
                    "",
                ),
                open=True,
                tags=("day",),
            )
            for tx in group.transactions:
                category = self.app.controller.categories.resolve(tx.category_id, tx.type)
                income = tx.type is TransactionType.INCOME
                self.tree.insert(
                    day_id,
                    "end",
                    iid=tx.id,
                    text="",
                    values=(
                        f"{icon_glyph(category.icon)} {category.name}",
                        tx.note or "",
                        format_signed(tx.amount, income),
                    ),
                    tags=("income",) if income else (),
                )
        if snapshot.daily_groups:
            self.empty_label.grid_remove()
        else:
            self.empty_label.grid(row=4, column=0, pady=24)

    def _handle_double_click(self, _event: object) -> None:
        selection = self.tree.selection()
        if not selection or selection[0].startswith("day:"):
            return
        self.app.delete_transaction(selection[0])


class StatsScreen(ttk.Frame):
    """Monthly totals, category pie chart and ranking."""

    CHART_SIZE = 220

    def __init__(self, master: tk.Misc, app: "MeowLedgerApp") -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.app = app
        self.expense_var = tk.StringVar(value="0.00")
        self.income_var = tk.StringVar(value="+0.00")
        self._build()

    def _build(self) -> None:
        self.columnconfigure(0, weight=1)
        ttk.Label(self, text="Statistics", style="Header.TLabel").grid(row=0, column=0, sticky="w")

        totals = ttk.Frame(self, padding=(0, 12), style="Panel.TFrame")
        totals.grid(row=1, column=0, sticky="ew")
        totals.columnconfigure(1, weight=1)
        ttk.Label(totals, text="Expense this month", style="MetricLabel.TLabel").grid(row=0, column=0, sticky="w")
        ttk.Label(totals, textvariable=self.expense_var, style="MetricValue.TLabel").grid(row=1, column=0, sticky="w")
        ttk.Label(totals, text="Income this month", style="MetricLabel.TLabel").grid(row=0, column=2, sticky="e")
        ttk.Label(totals, textvariable=self.income_var, style="Income.TLabel").grid(row=1, column=2, sticky="e")

        self.canvas = tk.Canvas(
            self,
            width=self.CHART_SIZE,
            height=self.CHART_SIZE,
            background=SECONDARY_BG,
            highlightthickness=0,
        )
        self.canvas.grid(row=2, column=0, pady=8)

        self.ranking = ttk.Frame(self, style="Panel.TFrame")
        self.ranking.grid(row=3, column=0, sticky="ew")
        self.ranking.columnconfigure(1, weight=1)

    def populate(self, snapshot: MonthlySnapshot) -> None:
        self.expense_var.set(format_money(snapshot.stats.expense))
        self.income_var.set(f"+{format_money(snapshot.stats.income)}")
        self.canvas.delete("all")
        for child in self.ranking.winfo_children():
            child.destroy()

        if not snapshot.ranking:
            self.canvas.grid_remove()
            ttk.Label(self.ranking, text="No expenses this month", style="FormLabel.TLabel").grid(
                row=0, column=0, columnspan=3, pady=24
            )
            return

        self.canvas.grid()
        self._draw_chart(snapshot)
        ttk.Label(self.ranking, text="Ranking", style="MetricLabel.TLabel").grid(row=0, column=0, sticky="w")
        for index, share in enumerate(snapshot.ranking, start=1):
            ttk.Label(self.ranking, text=f"{index}. {icon_glyph(share.icon)} {share.name}",
                      style="TLabel").grid(row=index, column=0, sticky="w", pady=2)
            ttk.Label(self.ranking, text=format_money(share.total), style="TLabel").grid(
                row=index, column=1, sticky="e"
            )
            ttk.Label(self.ranking, text=format_percentage(share.percentage), style="FormLabel.TLabel").grid(
                row=index, column=2, sticky="e", padx=(12, 0)
            )

    def _draw_chart(self, snapshot: MonthlySnapshot) -> None:
        pad = 10
        bounds = (pad, pad, self.CHART_SIZE - pad, self.CHART_SIZE - pad)
        if len(snapshot.ranking) == 1:
            self.canvas.create_oval(*bounds, fill=chart_color(0), outline="")
        else:
            start = 90.0
            for index, share in enumerate(snapshot.ranking):
                extent = float(share.percentage) * 3.6
                self.canvas.create_arc(
                    *bounds, start=start, extent=-extent, fill=chart_color(index), outline=SECONDARY_BG
                )
                start -= extent
        inner = self.CHART_SIZE * 0.22
        center = self.CHART_SIZE / 2
        self.canvas.create_oval(
            center - inner, center - inner, center + inner, center + inner, fill=SECONDARY_BG, outline=""
        )
        self.canvas.create_text(center, center, text="Spending", fill=TEXT_MUTED)


class LedgersScreen(ttk.Frame):
    """Ledger switcher."""

    def __init__(self, master: tk.Misc, app: "MeowLedgerApp") -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.app = app
        self.columnconfigure(0, weight=1)
        header = ttk.Frame(self, style="Panel.TFrame")
        header.grid(row=0, column=0, sticky="ew", pady=(0, 16))
        ttk.Button(header, text="<", width=2, command=lambda: self.app.navigate(NavEvent.BACK),
                   style="Secondary.TButton").grid(row=0, column=0)
        ttk.Label(header, text="My ledgers", style="Header.TLabel").grid(row=0, column=1, padx=8)
        self.cards = ttk.Frame(self, style="Panel.TFrame")
        self.cards.grid(row=1, column=0, sticky="ew")
        self.cards.columnconfigure(0, weight=1)

    def populate(self) -> None:
        for child in self.cards.winfo_children():
            child.destroy()
        controller = self.app.controller
        ledgers = controller.ledgers.list()
        for row, ledger in enumerate(ledgers):
            active = ledger.id == controller.active_ledger_id
            card = tk.Frame(
                self.cards,
                background=SECONDARY_BG,
                highlightbackground=ACCENT_BG if active else color_hex("gray-300"),
                highlightthickness=3 if active else 1,
                cursor="hand2",
            )
            card.grid(row=row, column=0, sticky="ew", pady=6)
            badge = tk.Label(
                card,
                text=icon_glyph(ledger.icon),
                background=color_hex(ledger.cover_color),
                width=3,
                font=("Segoe UI", 18),
            )
            badge.grid(row=0, column=0, rowspan=2, padx=12, pady=12)
            title = tk.Label(card, text=ledger.name, background=SECONDARY_BG, foreground=TEXT_PRIMARY,
                             font=("Segoe UI", 13, "bold"))
            title.grid(row=0, column=1, sticky="w")
            hint = tk.Label(card, text="In use" if active else "Click to switch", background=SECONDARY_BG,
                            foreground=TEXT_MUTED)
            hint.grid(row=1, column=1, sticky="w")
            for widget in (card, badge, title, hint):
                widget.bind("<Button-1>", lambda _event, ledger_id=ledger.id: self.app.switch_ledger(ledger_id))

        ttk.Button(self.cards, text="+ New ledger", state="disabled", style="Secondary.TButton").grid(
            row=len(ledgers), column=0, sticky="ew", pady=6
        )


class EntryDialog(tk.Toplevel):
    """Modal add-transaction form with a numeric keypad."""

    def __init__(
        self,
        master: tk.Misc,
        form: EntryForm,
        on_submit: Callable[[EntryForm], Optional[str]],
        on_close: Callable[[], None],
    ) -> None:
        super().__init__(master, background=SECONDARY_BG, padx=16, pady=16)
        self.title("New record")
        self.transient(master)
        self.resizable(False, False)
        self.form = form
        self.on_submit = on_submit
        self.on_close = on_close

        self.type_var = tk.StringVar(value=form.type.value)
        self.amount_var = tk.StringVar()
        self.category_var = tk.StringVar(value=form.category_id or "")
        self.note_var = tk.StringVar()
        self.date_var = tk.StringVar(value=form.date.isoformat())

        self._build()
        self._sync_amount()
        self.protocol("WM_DELETE_WINDOW", self.close)
        self.grab_set()

    def _build(self) -> None:
        toggle = ttk.Frame(self, style="Panel.TFrame")
        toggle.grid(row=0, column=0, columnspan=4, pady=(0, 8))
        for column, (label, value) in enumerate((("Expense", "expense"), ("Income", "income"))):
            ttk.Radiobutton(
                toggle,
                text=label,
                value=value,
                variable=self.type_var,
                command=self._handle_type_change,
            ).grid(row=0, column=column, padx=12)

        ttk.Label(self, text="Amount", style="FormLabel.TLabel").grid(row=1, column=3, sticky="e")
        ttk.Label(self, textvariable=self.amount_var, style="Header.TLabel").grid(
            row=2, column=0, columnspan=4, sticky="e"
        )

        self.category_frame = ttk.Frame(self, style="Panel.TFrame")
        self.category_frame.grid(row=3, column=0, columnspan=4, sticky="ew", pady=8)
        self._render_categories()

        details = ttk.Frame(self, style="Panel.TFrame")
        details.grid(row=4, column=0, columnspan=4, sticky="ew", pady=(0, 8))
        details.columnconfigure(1, weight=1)
        ttk.Label(details, text="Note", style="FormLabel.TLabel").grid(row=0, column=0, padx=(0, 6))
        ttk.Entry(details, textvariable=self.note_var, style="App.TEntry").grid(row=0, column=1, sticky="ew")
        ttk.Label(details, text="Date", style="FormLabel.TLabel").grid(row=0, column=2, padx=6)
        ttk.Entry(details, textvariable=self.date_var, width=11, style="App.TEntry").grid(row=0, column=3)

        for row, keys in enumerate(KEYPAD_ROWS, start=5):
            for column, key in enumerate(keys):
                ttk.Button(
                    self,
                    text="←" if key == BACKSPACE else key,
                    command=lambda key=key: self._press(key),
                    style="Secondary.TButton",
                ).grid(row=row, column=column, sticky="nsew", padx=2, pady=2)
        ttk.Button(self, text="Done", command=self.submit, style="Primary.TButton").grid(
            row=5, column=3, rowspan=4, sticky="nsew", padx=2, pady=2
        )
        ttk.Button(self, text="Cancel", command=self.close, style="Secondary.TButton").grid(
            row=9, column=0, columnspan=4, sticky="ew", pady=(8, 0)
        )

    def _render_categories(self) -> None:
        for child in self.category_frame.winfo_children():
            child.destroy()
        for index, category in enumerate(self.form.available_categories):
            ttk.Radiobutton(
                self.category_frame,
                text=f"{icon_glyph(category.icon)} {category.name}",
                value=category.id,
                variable=self.category_var,
                command=lambda category_id=category.id: self.form.select_category(category_id),
            ).grid(row=index // 4, column=index % 4, sticky="w", padx=4, pady=2)
        self.category_var.set(self.form.category_id or "")

    def _handle_type_change(self) -> None:
        self.form.set_type(TransactionType(self.type_var.get()))
        self._render_categories()
        self._sync_amount()

    def _press(self, key: str) -> None:
        self.form.press(key)
        self._sync_amount()

    def _sync_amount(self) -> None:
        sign = "+" if self.form.type is TransactionType.INCOME else "-"
        self.amount_var.set(f"{sign}{self.form.amount_text}")

    def submit(self) -> None:
        self.form.note = self.note_var.get()
        try:
            self.form.date = date.fromisoformat(self.date_var.get().strip())
        except ValueError:
            messagebox.showerror("Invalid record", "Provide a date as YYYY-MM-DD.", parent=self)
            return
        error = self.on_submit(self.form)
        if error:
            messagebox.showerror("Invalid record", error, parent=self)
            return
        self.destroy()

    def close(self) -> None:
        self.on_close()
        self.destroy()


class MeowLedgerApp(tk.Tk):
    """Main application window."""

    def __init__(self, data_dir: Path) -> None:
        super().__init__()
        self.title("Meow Ledger")
        self.geometry("480x760")
        self.minsize(420, 640)
        self.configure(bg=PRIMARY_BG)

        self._configure_styles()

        self.controller = LedgerController(LedgerRepository(JSONStorage(data_dir)))
        self.dialog: Optional[EntryDialog] = None

        self._build_layout()
        self.render()

    def _configure_styles(self) -> None:
        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass

        style.configure("TFrame", background=PRIMARY_BG)
        style.configure("TLabel", background=SECONDARY_BG, foreground=TEXT_PRIMARY)
        style.configure("TRadiobutton", background=SECONDARY_BG, foreground=TEXT_PRIMARY)
        style.configure("Panel.TFrame", background=SECONDARY_BG, relief="flat")
        style.configure("Nav.TFrame", background=PRIMARY_BG)

        style.configure("FormLabel.TLabel", background=SECONDARY_BG, foreground=TEXT_MUTED, font=("Segoe UI", 9))
        style.configure("Header.TLabel", background=SECONDARY_BG, foreground=TEXT_PRIMARY, font=("Segoe UI", 22, "bold"))
        style.configure("MetricLabel.TLabel", background=SECONDARY_BG, foreground=TEXT_MUTED, font=("Segoe UI", 9, "bold"))
        style.configure("MetricValue.TLabel", background=SECONDARY_BG, foreground=TEXT_PRIMARY, font=("Segoe UI", 14, "bold"))
        style.configure("Income.TLabel", background=SECONDARY_BG, foreground=INCOME_FG, font=("Segoe UI", 14, "bold"))

        style.configure(
            "App.TEntry",
            fieldbackground=SECONDARY_BG,
            background=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            insertcolor=TEXT_PRIMARY,
            bordercolor=ACCENT_BG,
        )

        style.configure(
            "Primary.TButton",
            background=ACCENT_BG,
            foreground=SECONDARY_BG,
            bordercolor=ACCENT_BG,
            padding=(18, 6),
        )
        style.map(
            "Primary.TButton",
            background=[("active", ACCENT_ACTIVE_BG)],
            foreground=[("disabled", TEXT_MUTED)],
        )

        style.configure(
            "Secondary.TButton",
            background=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            bordercolor=PRIMARY_BG,
            padding=(10, 6),
        )
        style.map(
            "Secondary.TButton",
            background=[("active", PRIMARY_BG)],
            foreground=[("disabled", TEXT_MUTED)],
        )

        style.configure(
            "Nav.TButton",
            background=PRIMARY_BG,
            foreground=TEXT_MUTED,
            borderwidth=0,
            padding=(14, 8),
        )
        style.configure(
            "NavActive.TButton",
            background=PRIMARY_BG,
            foreground=ACCENT_ACTIVE_BG,
            borderwidth=0,
            padding=(14, 8),
        )

        style.configure(
            "App.Treeview",
            background=SECONDARY_BG,
            fieldbackground=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            bordercolor=SECONDARY_BG,
            rowheight=28,
        )
        style.configure(
            "App.Treeview.Heading",
            background=SECONDARY_BG,
            foreground=TEXT_MUTED,
            relief="flat",
        )
        style.map(
            "App.Treeview",
            background=[("selected", PRIMARY_BG)],
            foreground=[("selected", TEXT_PRIMARY)],
        )

    def _build_layout(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        self.screens: Dict[ViewState, ttk.Frame] = {
            ViewState.HOME: HomeScreen(self, self),
            ViewState.STATS: StatsScreen(self, self),
            ViewState.LEDGERS: LedgersScreen(self, self),
        }
        for screen in self.screens.values():
            screen.grid(row=0, column=0, sticky="nsew")

        self.nav = ttk.Frame(self, padding=(16, 8), style="Nav.TFrame")
        self.nav.grid(row=1, column=0, sticky="ew")
        self.nav.columnconfigure((0, 1, 2), weight=1)
        self.home_button = ttk.Button(self.nav, text="Details",
                                      command=lambda: self.navigate(NavEvent.SHOW_HOME))
        self.home_button.grid(row=0, column=0)
        ttk.Button(self.nav, text="+", width=4, command=self.open_entry, style="Primary.TButton").grid(
            row=0, column=1
        )
        self.stats_button = ttk.Button(self.nav, text="Stats",
                                       command=lambda: self.navigate(NavEvent.SHOW_STATS))
        self.stats_button.grid(row=0, column=2)

    # Actions --------------------------------------------------------------
    def navigate(self, event: NavEvent) -> None:
        self.controller.navigate(event)
        self.render()

    def change_month(self, delta: int) -> None:
        self.controller.change_month(delta)
        self.render()

    def switch_ledger(self, ledger_id: str) -> None:
        try:
            self.controller.switch_ledger(ledger_id)
        except (RecordNotFoundError, PersistenceError) as exc:
            messagebox.showerror("Ledger", str(exc), parent=self)
        self.render()

    def open_entry(self) -> None:
        form = self.controller.open_entry()
        if form is None:
            return
        self.dialog = EntryDialog(self, form, self._submit_entry, self._close_entry)

    def _submit_entry(self, form: EntryForm) -> Optional[str]:
        try:
            outcome = self.controller.submit(form)
        except PersistenceError as exc:
            return f"Storage error: {exc}"
        if not outcome.ok:
            return outcome.error
        self.dialog = None
        self.render()
        return None

    def _close_entry(self) -> None:
        self.controller.close_entry()
        self.dialog = None

    def delete_transaction(self, transaction_id: str) -> None:
        def confirm(prompt: str) -> bool:
            return messagebox.askyesno("Delete", prompt, parent=self)

        try:
            self.controller.request_delete(transaction_id, confirm)
        except RecordNotFoundError as exc:
            messagebox.showwarning("Not Found", str(exc), parent=self)
        except PersistenceError as exc:
            messagebox.showerror("Storage Error", str(exc), parent=self)
        self.render()

    # Rendering ------------------------------------------------------------
    def render(self) -> None:
        view = self.controller.view
        if view is ViewState.LEDGERS:
            self.screens[ViewState.LEDGERS].populate()
            self.nav.grid_remove()
        else:
            snapshot = self.controller.snapshot()
            self.screens[view].populate(snapshot)
            self.nav.grid()
            self.home_button.configure(style="NavActive.TButton" if view is ViewState.HOME else "Nav.TButton")
            self.stats_button.configure(style="NavActive.TButton" if view is ViewState.STATS else "Nav.TButton")
        self.screens[view].tkraise()


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Tkinter desktop app for the ledger")
    parser.add_argument(
        "--data-dir",
        default=None,
        type=Path,
        help="Directory containing JSON storage files (default: $MEOW_LEDGER_DATA_DIR or ./data)",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = MeowLedgerApp(args.data_dir or default_data_dir())
    app.mainloop()


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
