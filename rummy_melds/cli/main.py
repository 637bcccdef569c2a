"""Typer entry-point wiring for the meld CLI."""

from __future__ import annotations

from typing import List, Sequence

import typer
from rich.console import Console

from ..cards import Card, cards_from_codes
from ..logging_config import setup_logging
from ..rules import MeldConfig, MeldType
from ..slot import MeldSlot
from .render import format_card, render_slot

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _parse_cards(codes: Sequence[str]) -> list[Card]:
    try:
        return cards_from_codes(codes)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_slot(meld_type: MeldType, codes: Sequence[str], joker_value: int) -> MeldSlot:
    slot = MeldSlot(name="cli", meld_type=meld_type, config=MeldConfig(joker_value=joker_value))
    for card in _parse_cards(codes):
        slot.add_card(card)
    return slot


@app.callback()
def configure(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level for engine diagnostics."),
) -> None:
    """Inspect how a rummy slot arranges, accepts and scores cards."""

    setup_logging(log_level)


@app.command()
def arrange(
    meld_type: MeldType = typer.Argument(..., help="Slot type: none, run or set."),
    cards: List[str] = typer.Argument(..., help="Card codes added in order, e.g. 5H JOKER-R 7H."),
    joker_value: int = typer.Option(20, min=0, help="Value of a joker in an untyped slot."),
) -> None:
    """Add cards one at a time and show the resulting slot."""

    slot = _build_slot(meld_type, cards, joker_value)
    console.print(render_slot(slot, title=f"{meld_type.value.title()} slot"))


@app.command()
def fit(
    meld_type: MeldType = typer.Argument(..., help="Slot type: none, run or set."),
    candidate: str = typer.Argument(..., help="Card code to test against the slot."),
    cards: List[str] = typer.Argument(None, help="Card codes already in the slot."),
) -> None:
    """Check whether CANDIDATE may be added to a slot holding CARDS."""

    slot = _build_slot(meld_type, cards or [], joker_value=20)
    new_card = _parse_cards([candidate])[0]
    outcome = slot.can_fit(new_card)

    console.print(render_slot(slot))
    if not outcome:
        console.print(f"{format_card(new_card)} [red]does not fit[/red]")
        raise typer.Exit(code=1)
    if outcome.replaces is not None:
        console.print(f"{format_card(new_card)} [green]fits[/green], replacing {format_card(outcome.replaces)}")
    else:
        console.print(f"{format_card(new_card)} [green]fits[/green]")


@app.command()
def value(
    meld_type: MeldType = typer.Argument(..., help="Slot type: none, run or set."),
    cards: List[str] = typer.Argument(..., help="Card codes added in order."),
    joker_value: int = typer.Option(20, min=0, help="Value of a joker in an untyped slot."),
) -> None:
    """Print the value of a slot holding CARDS."""

    slot = _build_slot(meld_type, cards, joker_value)
    console.print(slot.get_value())


def main() -> None:
    """Entry-point for ``python -m rummy_melds.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
