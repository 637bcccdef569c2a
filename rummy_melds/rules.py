"""Rule constants, configuration and error types for meld slots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .cards import JOKER_VALUE

__all__ = [
    "MeldType",
    "MeldConfig",
    "DEFAULT_MELD_CONFIG",
    "MIN_MELD_SIZE",
    "MAX_SET_SIZE",
    "MAX_SET_JOKERS",
    "MAX_SET_CARDS_PER_COLOR",
    "MeldError",
    "DuplicateCardError",
    "UnresolvedJokerRank",
    "CardDoesNotFit",
]

MIN_MELD_SIZE: Final[int] = 3
MAX_SET_SIZE: Final[int] = 4
MAX_SET_JOKERS: Final[int] = 1
MAX_SET_CARDS_PER_COLOR: Final[int] = 2


class MeldType(str, Enum):
    """Declared type of a slot; set by the caller when a meld is started."""

    NONE = "none"
    RUN = "run"
    SET = "set"


@dataclass(frozen=True, slots=True)
class MeldConfig:
    """Tunable behaviour shared by every slot of a table."""

    joker_value: int = JOKER_VALUE
    strict_duplicates: bool = False


DEFAULT_MELD_CONFIG: Final[MeldConfig] = MeldConfig()


class MeldError(RuntimeError):
    """Base class for meld engine errors."""


class DuplicateCardError(MeldError):
    """Raised when a card is added to a slot that already holds it."""


class UnresolvedJokerRank(MeldError):
    """Raised when a joker has no non-joker neighbour to infer its rank from."""

    def __init__(self, index: int) -> None:
        super().__init__(f"rank of joker at position {index} could not be figured out")
        self.index = index


class CardDoesNotFit(MeldError):
    """Raised when a card is laid onto a slot that rejects it."""
