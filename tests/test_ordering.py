from __future__ import annotations

import logging
from itertools import permutations
from typing import Sequence

import pytest

from rummy_melds.cards import Card, cards_from_codes
from rummy_melds.ordering import effective_ranks, highest_effective_rank, insertion_index
from rummy_melds.rules import MeldType
from rummy_melds.slot import MeldSlot


def _run(codes: Sequence[str]) -> MeldSlot:
    slot = MeldSlot(name="run", meld_type=MeldType.RUN)
    for card in cards_from_codes(codes):
        slot.add_card(card)
    return slot


def _codes(slot: MeldSlot) -> list[str]:
    return [card.code for card in slot.cards]


@pytest.mark.parametrize("order", list(permutations(["4S", "5S", "6S", "7S"])))
def test_run_sorts_any_insertion_order(order: tuple[str, ...]) -> None:
    assert _codes(_run(order)) == ["4S", "5S", "6S", "7S"]


def test_ace_goes_after_king() -> None:
    assert _codes(_run(["10H", "JH", "QH", "KH", "AH"])) == ["10H", "JH", "QH", "KH", "AH"]


def test_ace_goes_before_two() -> None:
    assert _codes(_run(["2H", "3H", "4H", "AH"])) == ["AH", "2H", "3H", "4H"]


def test_leading_ace_counts_low_when_sorting() -> None:
    assert _codes(_run(["AH", "3H", "2H", "4H"])) == ["AH", "2H", "3H", "4H"]


def test_joker_is_appended() -> None:
    assert _codes(_run(["5H", "6H", "JOKER-R"])) == ["5H", "6H", "JOKER-R"]


def test_joker_goes_in_front_of_ace_high_run() -> None:
    assert _codes(_run(["QH", "KH", "AH", "JOKER-R"])) == ["JOKER-R", "QH", "KH", "AH"]


def test_card_follows_lone_joker() -> None:
    assert _codes(_run(["JOKER-R", "5H"])) == ["JOKER-R", "5H"]


def test_card_after_joker_gap() -> None:
    assert _codes(_run(["5H", "JOKER-R", "7H"])) == ["5H", "JOKER-R", "7H"]


def test_card_sorted_around_joker() -> None:
    cards = cards_from_codes(["5H", "JOKER-R", "7H"])
    assert insertion_index(cards, Card.from_code("6H")) == 2
    assert insertion_index(cards, Card.from_code("4H")) == 0
    assert insertion_index(cards, Card.from_code("8H")) == 3


def test_empty_run_inserts_at_zero() -> None:
    assert insertion_index([], Card.from_code("9C")) == 0


def test_unresolved_joker_counts_as_highest(caplog: pytest.LogCaptureFixture) -> None:
    cards = cards_from_codes(["JOKER-R", "JOKER-B"])
    with caplog.at_level(logging.ERROR):
        assert insertion_index(cards, Card.from_code("5H")) == 0
    assert [record.levelno for record in caplog.records] == [logging.ERROR]
    assert "could not be figured out" in caplog.records[0].getMessage()


def test_effective_ranks_and_highest() -> None:
    cards = cards_from_codes(["AH", "JOKER-R", "3H"])
    assert effective_ranks(cards) == [1, 2, 3]
    assert highest_effective_rank(cards) == 3
    assert highest_effective_rank(cards_from_codes(["QD", "KD", "AD"])) == 14
    assert highest_effective_rank(cards_from_codes(["JOKER-R"])) == 15
    assert highest_effective_rank([]) == 15


def test_set_and_untyped_slots_append() -> None:
    for meld_type in (MeldType.SET, MeldType.NONE):
        slot = MeldSlot(meld_type=meld_type)
        for card in cards_from_codes(["9C", "2H", "9D"]):
            slot.add_card(card)
        assert _codes(slot) == ["9C", "2H", "9D"]
