"""Joker rank inference for cards laid in a run."""

from __future__ import annotations

from typing import Sequence

from .cards import ACE_LOW, Card, Rank
from .rules import UnresolvedJokerRank

__all__ = ["first_non_joker_index", "resolve_joker_rank"]


def first_non_joker_index(cards: Sequence[Card], start: int, upwards: bool) -> int:
    """Return the index of the nearest non-joker from ``start``, or ``-1``.

    ``start`` itself is inspected. The scan walks towards the end of the
    sequence when ``upwards`` is set and towards the front otherwise.
    """

    step = 1 if upwards else -1
    idx = start
    while 0 <= idx < len(cards):
        if not cards[idx].is_joker:
            return idx
        idx += step
    return -1


def _rank_from_below(cards: Sequence[Card], index: int) -> int | None:
    lower = first_non_joker_index(cards, index - 1, upwards=False)
    if lower == -1:
        return None
    if lower == 0 and cards[lower].rank is Rank.ACE:
        return ACE_LOW + index
    return int(cards[lower].rank) + (index - lower)


def _rank_from_above(cards: Sequence[Card], index: int) -> int | None:
    higher = first_non_joker_index(cards, index + 1, upwards=True)
    if higher == -1:
        return None
    return int(cards[higher].rank) - (higher - index)


def resolve_joker_rank(cards: Sequence[Card], index: int, *, prefer_above: bool = False) -> int:
    """Infer the effective rank the joker at ``index`` stands in for.

    The nearest non-joker below the joker is consulted first, then the nearest
    one above (reversed with ``prefer_above``). An Ace at the very start of the
    run counts as rank 1. The result is an effective rank: ``1`` means ace-low
    and values past ``Rank.ACE`` mean the run cannot hold the joker there.

    Raises:
        UnresolvedJokerRank: the sequence holds no non-joker card to anchor on.
    """

    lookups = (_rank_from_above, _rank_from_below) if prefer_above else (_rank_from_below, _rank_from_above)
    for lookup in lookups:
        rank = lookup(cards, index)
        if rank is not None:
            return rank
    raise UnresolvedJokerRank(index)
