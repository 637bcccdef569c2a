"""Run and set views plus the structural validity checks behind them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .cards import ACE_LOW, Card, Color, Rank, Suit, rank_from_effective
from .ordering import effective_ranks
from .rules import MAX_SET_CARDS_PER_COLOR, MAX_SET_JOKERS, MAX_SET_SIZE, MIN_MELD_SIZE

__all__ = ["RunView", "SetView", "is_valid_run", "is_valid_set"]


def _non_jokers(cards: Sequence[Card]) -> list[Card]:
    return [card for card in cards if not card.is_joker]


@dataclass(frozen=True, slots=True)
class RunView:
    """Snapshot of a run-typed slot, recomputed from its cards on demand."""

    cards: Sequence[Card]

    @property
    def suit(self) -> Suit | None:
        for card in self.cards:
            if not card.is_joker:
                return card.suit
        return None

    @property
    def color(self) -> Color | None:
        suit = self.suit
        if suit is not None:
            return suit.color
        if self.cards:
            return self.cards[0].color
        return None

    @property
    def ranks(self) -> list[int]:
        return effective_ranks(self.cards)

    @property
    def lowest_rank(self) -> Rank | None:
        if not self.cards:
            return None
        return rank_from_effective(self.ranks[0])

    @property
    def highest_rank(self) -> Rank | None:
        if not self.cards:
            return None
        return rank_from_effective(self.ranks[-1])

    @property
    def value(self) -> int:
        return sum(self.ranks)


@dataclass(frozen=True, slots=True)
class SetView:
    """Snapshot of a set-typed slot, recomputed from its cards on demand."""

    cards: Sequence[Card]

    @property
    def rank(self) -> Rank | None:
        for card in self.cards:
            if not card.is_joker:
                return card.rank
        return None

    @property
    def joker(self) -> Card | None:
        return next((card for card in self.cards if card.is_joker), None)

    @property
    def value(self) -> int:
        rank = self.rank
        if rank is None:
            return 0
        return int(rank) * len(self.cards)

    def _count_color(self, color: Color) -> int:
        return sum(1 for card in _non_jokers(self.cards) if card.color is color)

    @property
    def has_two_black_cards(self) -> bool:
        return self._count_color(Color.BLACK) >= 2

    @property
    def has_two_red_cards(self) -> bool:
        return self._count_color(Color.RED) >= 2


def is_valid_run(cards: Sequence[Card]) -> bool:
    """Return ``True`` when ``cards`` in their current order form a run.

    A run holds at least three cards of one suit with consecutive effective
    ranks. Jokers must match the suit's color. Ace may only sit at either end.
    """

    if len(cards) < MIN_MELD_SIZE:
        return False
    real = _non_jokers(cards)
    if not real:
        return False
    suit = real[0].suit
    if any(card.suit is not suit for card in real):
        return False
    assert suit is not None
    if any(card.color is not suit.color for card in cards if card.is_joker):
        return False

    ranks = effective_ranks(cards)
    if ranks[0] < ACE_LOW or ranks[-1] > Rank.ACE:
        return False
    return all(upper == lower + 1 for lower, upper in zip(ranks, ranks[1:]))


def is_valid_set(cards: Sequence[Card]) -> bool:
    """Return ``True`` when ``cards`` form a set of three or four.

    At most one joker may stand in, the real cards share a rank and have
    distinct suits, and no color appears more than twice (the joker counting
    as its own color).
    """

    if not MIN_MELD_SIZE <= len(cards) <= MAX_SET_SIZE:
        return False
    jokers = [card for card in cards if card.is_joker]
    if len(jokers) > MAX_SET_JOKERS:
        return False
    real = _non_jokers(cards)
    if len({card.rank for card in real}) != 1:
        return False
    if len({card.suit for card in real}) != len(real):
        return False
    for color in Color:
        if sum(1 for card in cards if card.color is color) > MAX_SET_CARDS_PER_COLOR:
            return False
    return True
