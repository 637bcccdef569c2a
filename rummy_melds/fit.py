"""Decide whether a card may join a slot, and which joker it displaces."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .cards import Card, Rank, rank_from_effective
from .jokers import resolve_joker_rank
from .logging_config import LoggerLike
from .melds import RunView, SetView
from .rules import MeldType, UnresolvedJokerRank

__all__ = ["FitOutcome", "can_fit"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FitOutcome:
    """Result of a fit check: rejected, or accepted with an optional joker swap."""

    fits: bool
    replaces: Card | None = None

    @classmethod
    def rejected(cls) -> "FitOutcome":
        return cls(fits=False)

    @classmethod
    def accepted(cls, replaces: Card | None = None) -> "FitOutcome":
        return cls(fits=True, replaces=replaces)

    def __bool__(self) -> bool:
        return self.fits


def _fit_set(cards: Sequence[Card], new_card: Card) -> FitOutcome:
    meld = SetView(cards)
    joker = meld.joker

    if new_card.is_joker:
        if joker is not None:
            return FitOutcome.rejected()
        if new_card.is_black() and meld.has_two_black_cards:
            return FitOutcome.rejected()
        if new_card.is_red() and meld.has_two_red_cards:
            return FitOutcome.rejected()
        return FitOutcome.accepted()

    if meld.rank is not None and new_card.rank is not meld.rank:
        return FitOutcome.rejected()

    if joker is None:
        if any(card.suit is new_card.suit for card in cards):
            return FitOutcome.rejected()
        return FitOutcome.accepted()

    # a third card of one color is only allowed when the joker is that color
    if meld.has_two_black_cards and joker.is_red() and new_card.is_black():
        return FitOutcome.rejected()
    if meld.has_two_red_cards and joker.is_black() and new_card.is_red():
        return FitOutcome.rejected()

    if any(card.suit is new_card.suit for card in cards if not card.is_joker):
        return FitOutcome.rejected()
    return FitOutcome.accepted(joker if joker.color is new_card.color else None)


def _replaceable_joker(cards: Sequence[Card], new_card: Card, log: LoggerLike) -> Card | None:
    for idx, card in enumerate(cards):
        if not card.is_joker:
            continue
        try:
            represented = resolve_joker_rank(cards, idx, prefer_above=True)
        except UnresolvedJokerRank as exc:
            log.error("%s while checking %s", exc, new_card)
            continue
        if rank_from_effective(represented) is new_card.rank:
            return card
    return None


def _fit_run(cards: Sequence[Card], new_card: Card, log: LoggerLike) -> FitOutcome:
    run = RunView(cards)

    if new_card.is_joker:
        bounded_by_aces = run.highest_rank is Rank.ACE and run.lowest_rank is Rank.ACE
        if new_card.color is run.color and not bounded_by_aces:
            return FitOutcome.accepted()
        return FitOutcome.rejected()

    if run.suit is not None:
        if new_card.suit is not run.suit:
            return FitOutcome.rejected()
    elif new_card.color is not run.color:
        return FitOutcome.rejected()

    joker = _replaceable_joker(cards, new_card, log)
    if joker is not None:
        return FitOutcome.accepted(joker)

    highest = run.highest_rank
    lowest = run.lowest_rank
    assert highest is not None and lowest is not None
    extends = (
        (highest is not Rank.ACE and new_card.rank == highest + 1)
        or (lowest not in (Rank.ACE, Rank.JOKER) and new_card.rank == lowest - 1)
        or (new_card.rank is Rank.ACE and lowest is Rank.TWO)
    )
    return FitOutcome.accepted() if extends else FitOutcome.rejected()


def can_fit(
    meld_type: MeldType,
    cards: Sequence[Card],
    new_card: Card,
    *,
    log: LoggerLike | None = None,
) -> FitOutcome:
    """Return whether ``new_card`` may be added to a slot holding ``cards``.

    Slots without a declared meld type accept nothing. An empty run or set
    accepts any card. When the outcome names a joker in ``replaces``, the new
    card takes over that joker's place and the joker goes back to the player.
    """

    log = log or logger
    if meld_type is MeldType.NONE:
        return FitOutcome.rejected()
    if not cards:
        return FitOutcome.accepted()
    if meld_type is MeldType.SET:
        return _fit_set(cards, new_card)
    return _fit_run(cards, new_card, log)
