"""Icon, color and number formatting lookups shared by the front ends."""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Union

FALLBACK_ICON = "Cat"
FALLBACK_COLOR = "#9ca3af"

ICON_GLYPHS: Dict[str, str] = {
    "Utensils": "\U0001F374",
    "Bus": "\U0001F68C",
    "ShoppingBag": "\U0001F6CD",
    "Home": "\U0001F3E0",
    "Gamepad2": "\U0001F3AE",
    "HeartPulse": "\U0001F493",
    "GraduationCap": "\U0001F393",
    "Banknote": "\U0001F4B5",
    "Briefcase": "\U0001F4BC",
    "Gift": "\U0001F381",
    "Coffee": "☕",
    "Cat": "\U0001F431",
    "Wallet": "\U0001F45B",
    "PiggyBank": "\U0001F416",
    "CreditCard": "\U0001F4B3",
}

# Tailwind palette entries used by the seed ledgers and categories.
COLOR_HEX: Dict[str, str] = {
    "amber-400": "#fbbf24",
    "blue-400": "#60a5fa",
    "emerald-500": "#10b981",
    "gray-300": "#d1d5db",
    "gray-400": "#9ca3af",
    "indigo-400": "#818cf8",
    "lime-500": "#84cc16",
    "orange-400": "#fb923c",
    "pink-400": "#f472b6",
    "purple-400": "#c084fc",
    "red-400": "#f87171",
    "rose-400": "#fb7185",
    "rose-500": "#f43f5e",
    "sky-400": "#38bdf8",
    "teal-400": "#2dd4bf",
    "yellow-500": "#eab308",
}

CHART_PALETTE = ("#fb7185", "#38bdf8", "#f472b6", "#818cf8", "#a78bfa", "#34d399", "#fbbf24")


def icon_glyph(name: str) -> str:
    """Glyph for a symbolic icon name; unknown names get the cat."""
    return ICON_GLYPHS.get(name, ICON_GLYPHS[FALLBACK_ICON])


def color_hex(token: str) -> str:
    """Hex color for a token such as ``bg-rose-400`` or ``rose-400``."""
    if not token:
        return FALLBACK_COLOR
    key = token[3:] if token.startswith("bg-") else token
    return COLOR_HEX.get(key, FALLBACK_COLOR)


def chart_color(index: int) -> str:
    return CHART_PALETTE[index % len(CHART_PALETTE)]


def format_money(amount: Union[Decimal, int, float, str]) -> str:
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{value:,.2f}"


def format_percentage(value: Union[Decimal, float]) -> str:
    return f"{Decimal(str(value)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"


def format_signed(amount: Decimal, income: bool) -> str:
    return f"{'+' if income else '-'}{format_money(amount)}"
