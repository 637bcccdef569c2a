"""The slot aggregate that owns one meld's cards on the table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .cards import Card, contains, index_of
from .fit import FitOutcome, can_fit
from .logging_config import LoggerLike, SlotLoggerAdapter
from .ordering import insertion_index
from .rules import DEFAULT_MELD_CONFIG, CardDoesNotFit, DuplicateCardError, MeldConfig, MeldType
from .scoring import slot_value

__all__ = ["MeldSlot"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MeldSlot:
    """Ordered cards of one meld plus its declared type.

    The slot trusts its caller: ``add_card`` does not consult ``can_fit``.
    Every mutation bumps ``version`` so a renderer reading ``cards`` can tell
    when the snapshot changed.
    """

    name: str = "slot"
    meld_type: MeldType = MeldType.NONE
    config: MeldConfig = DEFAULT_MELD_CONFIG
    on_release: Callable[[Card], None] | None = None
    logger: LoggerLike | None = field(default=None, repr=False)
    _cards: list[Card] = field(init=False, default_factory=list, repr=False)
    _version: int = field(init=False, default=0)
    _log: LoggerLike = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._log = SlotLoggerAdapter(self.logger or logger, {"slot": self.name})

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def has_cards(self) -> bool:
        return bool(self._cards)

    @property
    def version(self) -> int:
        return self._version

    def add_card(self, card: Card) -> None:
        """Add ``card``, keeping runs in rank order and appending otherwise."""

        if self.meld_type is MeldType.RUN:
            idx = insertion_index(self._cards, card, log=self._log)
            self._cards.insert(idx, card)
        else:
            if contains(self._cards, card):
                error = DuplicateCardError(f"slot {self.name} already contains {card}")
                if self.config.strict_duplicates:
                    raise error
                self._log.error("%s", error)
            self._cards.append(card)
        self._version += 1

    def remove_card(self, card: Card) -> None:
        idx = index_of(self._cards, card)
        if idx == -1:
            self._log.warning("cannot remove %s, it is not in the slot", card)
            return
        del self._cards[idx]
        self._version += 1

    def reset_spot(self) -> None:
        """Empty the slot, release every removed card and clear the type."""

        removed, self._cards = self._cards, []
        self.meld_type = MeldType.NONE
        self._version += 1
        if self.on_release is not None:
            for card in removed:
                self.on_release(card)
        self._log.info("reset, %d card(s) released", len(removed))

    def can_fit(self, card: Card) -> FitOutcome:
        return can_fit(self.meld_type, self._cards, card, log=self._log)

    def get_value(self) -> int:
        return slot_value(self.meld_type, self._cards, joker_value=self.config.joker_value)

    def lay_card(self, card: Card) -> Card | None:
        """Add ``card`` if it fits and return the joker it swapped out, if any.

        The nominated joker leaves the slot before ``card`` is placed, so the
        run ordering sees the remaining cards only.

        Raises:
            CardDoesNotFit: ``can_fit`` rejected the card.
        """

        outcome = self.can_fit(card)
        if not outcome:
            raise CardDoesNotFit(f"{card} does not fit slot {self.name} ({self.meld_type.value})")
        joker = outcome.replaces
        if joker is not None:
            self.remove_card(joker)
        self.add_card(card)
        if joker is not None:
            self._log.info("%s replaced %s", card, joker)
        return joker
