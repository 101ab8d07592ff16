"""Built-in seed ledgers and categories used when storage holds none."""

from __future__ import annotations

from typing import List

from .models import Category, Ledger, TransactionType

DEFAULT_LEDGERS: List[Ledger] = [
    Ledger(id="l1", name="Daily", cover_color="bg-rose-400", icon="Cat"),
    Ledger(id="l2", name="Travel Fund", cover_color="bg-sky-400", icon="Bus"),
]

_E = TransactionType.EXPENSE
_I = TransactionType.INCOME

DEFAULT_CATEGORIES: List[Category] = [
    Category(id="c1", name="Dining", icon="Utensils", type=_E, color="bg-orange-400"),
    Category(id="c2", name="Transport", icon="Bus", type=_E, color="bg-blue-400"),
    Category(id="c3", name="Shopping", icon="ShoppingBag", type=_E, color="bg-pink-400"),
    Category(id="c4", name="Housing", icon="Home", type=_E, color="bg-indigo-400"),
    Category(id="c5", name="Entertainment", icon="Gamepad2", type=_E, color="bg-purple-400"),
    Category(id="c6", name="Medical", icon="HeartPulse", type=_E, color="bg-red-400"),
    Category(id="c7", name="Education", icon="GraduationCap", type=_E, color="bg-teal-400"),
    Category(id="c8", name="Snacks", icon="Coffee", type=_E, color="bg-amber-400"),
    Category(id="c9", name="Salary", icon="Briefcase", type=_I, color="bg-emerald-500"),
    Category(id="c10", name="Side Job", icon="Banknote", type=_I, color="bg-lime-500"),
    Category(id="c11", name="Investments", icon="PiggyBank", type=_I, color="bg-yellow-500"),
    Category(id="c12", name="Gifts", icon="Gift", type=_I, color="bg-rose-500"),
]

DEFAULT_ACTIVE_LEDGER_ID = DEFAULT_LEDGERS[0].id
