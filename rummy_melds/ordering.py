"""Canonical ordering of cards inside a run."""

from __future__ import annotations

import logging
from typing import Sequence

from .cards import ACE_LOW, Card, Rank
from .jokers import resolve_joker_rank
from .logging_config import LoggerLike
from .rules import UnresolvedJokerRank

__all__ = ["effective_rank_at", "effective_ranks", "highest_effective_rank", "insertion_index"]

logger = logging.getLogger(__name__)


def effective_rank_at(cards: Sequence[Card], index: int) -> int:
    """Return the rank position ``index`` contributes to the run.

    Raises:
        UnresolvedJokerRank: the position holds a joker with no anchor.
    """

    card = cards[index]
    if card.is_joker:
        return resolve_joker_rank(cards, index)
    if index == 0 and card.rank is Rank.ACE:
        return ACE_LOW
    return int(card.rank)


def effective_ranks(cards: Sequence[Card]) -> list[int]:
    """Return the effective rank of every position, unresolved jokers as ``JOKER``."""

    ranks: list[int] = []
    for idx in range(len(cards)):
        try:
            ranks.append(effective_rank_at(cards, idx))
        except UnresolvedJokerRank:
            ranks.append(int(Rank.JOKER))
    return ranks


def highest_effective_rank(cards: Sequence[Card]) -> int:
    """Return the effective rank at the top of the run, ``JOKER`` if unknown."""

    if not cards:
        return int(Rank.JOKER)
    try:
        return effective_rank_at(cards, len(cards) - 1)
    except UnresolvedJokerRank:
        return int(Rank.JOKER)


def insertion_index(cards: Sequence[Card], new_card: Card, *, log: LoggerLike | None = None) -> int:
    """Return where ``new_card`` belongs in the run ``cards``.

    An Ace goes in front unless the run tops out at King. A joker goes to the
    end, or to the front when the run already ends on an Ace. Every other card
    lands before the first position whose effective rank is higher.
    """

    log = log or logger
    if not cards:
        return 0

    highest = highest_effective_rank(cards)
    if new_card.rank is Rank.ACE and highest != Rank.KING:
        return 0
    if new_card.is_joker:
        return 0 if highest == Rank.ACE else len(cards)

    for idx, card in enumerate(cards):
        if card.is_joker and len(cards) == 1:
            # a lone joker is being laid down, so the next card follows it
            return 1
        try:
            rank = effective_rank_at(cards, idx)
        except UnresolvedJokerRank as exc:
            log.error("%s while placing %s; treating it as the highest rank", exc, new_card)
            rank = int(Rank.JOKER)
        if rank > new_card.rank:
            return idx
    return len(cards)
