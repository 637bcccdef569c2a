"""Point value of a slot's current contents."""

from __future__ import annotations

from typing import Sequence

from .cards import JOKER_VALUE, Card
from .melds import RunView, SetView, is_valid_run, is_valid_set
from .rules import MeldType

__all__ = ["slot_value"]


def slot_value(meld_type: MeldType, cards: Sequence[Card], *, joker_value: int = JOKER_VALUE) -> int:
    """Return what the cards in a slot are currently worth.

    Runs and sets only score once they are valid; while one is still being
    built, or mid joker swap, the value is ``0``. Untyped slots add up the
    face value of every card, counting each joker as ``joker_value``.
    """

    if meld_type is MeldType.RUN:
        return RunView(cards).value if is_valid_run(cards) else 0
    if meld_type is MeldType.SET:
        return SetView(cards).value if is_valid_set(cards) else 0
    return sum(joker_value if card.is_joker else card.value for card in cards)
