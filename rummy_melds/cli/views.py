"""Composable view primitives for the meld CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table

from ..cards import Card
from ..melds import is_valid_run, is_valid_set
from ..ordering import effective_ranks
from ..rules import MeldType
from ..slot import MeldSlot


@dataclass(slots=True)
class SlotSummaryView:
    """Renderable summarising one slot's cards, validity and value."""

    slot: MeldSlot
    card_formatter: Callable[[Card], str]

    def _validity(self) -> str:
        cards = self.slot.cards
        if self.slot.meld_type is MeldType.RUN:
            valid = is_valid_run(cards)
        elif self.slot.meld_type is MeldType.SET:
            valid = is_valid_set(cards)
        else:
            return "[dim]no meld[/dim]"
        return "[bold green]valid[/bold green]" if valid else "[yellow]incomplete[/yellow]"

    def render(self) -> RenderableType:
        cards = self.slot.cards

        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("#", justify="right", style="bold")
        table.add_column("Card", justify="left")
        if self.slot.meld_type is MeldType.RUN:
            table.add_column("Effective rank", justify="right")
            for idx, (card, rank) in enumerate(zip(cards, effective_ranks(cards))):
                table.add_row(str(idx), self.card_formatter(card), str(rank))
        else:
            for idx, card in enumerate(cards):
                table.add_row(str(idx), self.card_formatter(card))

        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Type[/cyan]: {self.slot.meld_type.value}")
        grid.add_row(f"[cyan]Status[/cyan]: {self._validity()}")
        grid.add_row(f"[cyan]Value[/cyan]: {self.slot.get_value()}")
        return Group(table, grid)
