"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Color, Suit
from ..slot import MeldSlot
from .views import SlotSummaryView

_SUIT_SYMBOLS = {
    Suit.SPADES: ("♠", "cyan"),
    Suit.HEARTS: ("♥", "red"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.CLUBS: ("♣", "green"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_joker:
        color = "red" if card.color is Color.RED else "white"
        return f"[{color}]🃏[/{color}]"
    assert card.suit is not None
    symbol, color = _SUIT_SYMBOLS[card.suit]
    return f"[{color}]{card.rank.label}{symbol}[/{color}]"


def render_slot(slot: MeldSlot, *, title: str | None = None) -> RenderableType:
    """Return a Rich panel describing ``slot``."""

    view = SlotSummaryView(slot=slot, card_formatter=format_card)
    return Panel(view.render(), title=title or slot.name, padding=(0, 1), border_style="cyan")
