"""Card abstractions and helpers for rummy melds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final, Iterable, Sequence


class Color(str, Enum):
    """Card colors used by the set balance rules."""

    BLACK = "black"
    RED = "red"


class Suit(str, Enum):
    """Enumeration of the four suits in a rummy deck."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def color(self) -> Color:
        if self in (Suit.CLUBS, Suit.SPADES):
            return Color.BLACK
        return Color.RED


class Rank(IntEnum):
    """Ranks ordered the way runs are built.

    Ace is stored high (after King). At the start of a run it counts as
    ``ACE_LOW`` instead. ``JOKER`` sorts above every real rank and doubles as
    the "unknown" marker for positions that cannot be resolved.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
    JOKER = 15

    @property
    def label(self) -> str:
        return _RANK_LABELS[self]


ACE_LOW: Final[int] = 1

_RANK_LABELS: Final[dict[Rank, str]] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
    Rank.JOKER: "JOKER",
}
_LABEL_TO_RANK: Final[dict[str, Rank]] = {label: rank for rank, label in _RANK_LABELS.items()}
_JOKER_VARIANTS: Final[dict[str, Color]] = {"B": Color.BLACK, "R": Color.RED}
_FACE_VALUE: Final[int] = 10
_ACE_VALUE: Final[int] = 11
JOKER_VALUE: Final[int] = 20


def rank_from_effective(value: int) -> Rank:
    """Map an effective rank (``1`` meaning ace-low) back onto :class:`Rank`.

    Values outside the playable range come back as ``Rank.JOKER``.
    """

    if value == ACE_LOW:
        return Rank.ACE
    if Rank.TWO <= value <= Rank.ACE:
        return Rank(value)
    return Rank.JOKER


@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """A physical card.

    Equality is identity: two decks are in play, so two ``5H`` cards are still
    different cards. Jokers have no suit and carry their own color.
    """

    rank: Rank
    suit: Suit | None = None
    joker_color: Color | None = None

    def __post_init__(self) -> None:
        if self.rank is Rank.JOKER:
            if self.suit is not None or self.joker_color is None:
                raise ValueError("a joker needs a color and no suit")
        elif self.suit is None:
            raise ValueError(f"card of rank {self.rank.label} needs a suit")

    @classmethod
    def joker(cls, color: Color) -> "Card":
        return cls(rank=Rank.JOKER, joker_color=color)

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a code such as ``"10H"``, ``"AS"`` or ``"JOKER-R"``."""

        text = code.strip().upper()
        if text.startswith("JOKER"):
            _, _, variant = text.partition("-")
            color = _JOKER_VARIANTS.get(variant)
            if color is None:
                raise ValueError(f"invalid joker code '{code}'")
            return cls.joker(color)
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        rank = _LABEL_TO_RANK.get(text[:-1])
        if rank is None or rank is Rank.JOKER:
            raise ValueError(f"invalid rank in card code '{code}'")
        try:
            suit = Suit(text[-1])
        except ValueError:
            raise ValueError(f"invalid suit in card code '{code}'") from None
        return cls(rank=rank, suit=suit)

    @property
    def is_joker(self) -> bool:
        return self.rank is Rank.JOKER

    @property
    def color(self) -> Color:
        if self.suit is None:
            assert self.joker_color is not None
            return self.joker_color
        return self.suit.color

    def is_black(self) -> bool:
        return self.color is Color.BLACK

    def is_red(self) -> bool:
        return self.color is Color.RED

    @property
    def value(self) -> int:
        """Face value used when cards lie in a slot without a meld type."""

        if self.is_joker:
            return JOKER_VALUE
        if self.rank is Rank.ACE:
            return _ACE_VALUE
        if self.rank >= Rank.JACK:
            return _FACE_VALUE
        return int(self.rank)

    @property
    def code(self) -> str:
        if self.is_joker:
            return "JOKER-B" if self.color is Color.BLACK else "JOKER-R"
        assert self.suit is not None
        return f"{self.rank.label}{self.suit.value}"

    def __str__(self) -> str:
        return self.code


def cards_from_codes(codes: Iterable[str]) -> list[Card]:
    """Return fresh cards for every code in ``codes``."""

    return [Card.from_code(code) for code in codes]


def index_of(cards: Sequence[Card], card: Card) -> int:
    """Return the position of ``card`` by identity, or ``-1``."""

    for idx, candidate in enumerate(cards):
        if candidate is card:
            return idx
    return -1


def contains(cards: Sequence[Card], card: Card) -> bool:
    return index_of(cards, card) != -1
