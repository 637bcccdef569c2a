"""Top-level package for the rummy meld engine."""

from . import cards, fit, jokers, melds, ordering, rules, scoring, slot
from .cards import Card, Color, Rank, Suit
from .fit import FitOutcome
from .rules import CardDoesNotFit, DuplicateCardError, MeldConfig, MeldType, UnresolvedJokerRank
from .slot import MeldSlot

__all__ = [
    "cards",
    "fit",
    "jokers",
    "melds",
    "ordering",
    "rules",
    "scoring",
    "slot",
    "Card",
    "CardDoesNotFit",
    "Color",
    "DuplicateCardError",
    "FitOutcome",
    "MeldConfig",
    "MeldSlot",
    "MeldType",
    "Rank",
    "Suit",
    "UnresolvedJokerRank",
]
