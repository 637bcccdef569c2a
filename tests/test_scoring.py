from __future__ import annotations

from typing import Sequence

import pytest

from rummy_melds.cards import cards_from_codes
from rummy_melds.ordering import effective_ranks
from rummy_melds.rules import MeldConfig, MeldType
from rummy_melds.scoring import slot_value
from rummy_melds.slot import MeldSlot


def _slot(meld_type: MeldType, codes: Sequence[str], config: MeldConfig | None = None) -> MeldSlot:
    slot = MeldSlot(meld_type=meld_type, config=config or MeldConfig())
    for card in cards_from_codes(codes):
        slot.add_card(card)
    return slot


def test_incomplete_run_is_worth_nothing() -> None:
    assert _slot(MeldType.RUN, ["5H", "9H"]).get_value() == 0


@pytest.mark.parametrize(
    ("codes", "expected"),
    [
        (["AH", "2H", "3H"], 6),
        (["5H", "JOKER-R", "7H"], 18),
        (["QH", "KH", "AH"], 39),
        (["JOKER-R", "5H", "6H"], 15),
        (["9S", "10S", "JS", "QS", "KS"], 55),
    ],
)
def test_valid_run_is_sum_of_effective_ranks(codes: list[str], expected: int) -> None:
    slot = _slot(MeldType.RUN, codes)
    assert slot.get_value() == expected
    assert slot.get_value() == sum(effective_ranks(slot.cards))


def test_valid_set_value() -> None:
    assert _slot(MeldType.SET, ["5C", "5D", "5H"]).get_value() == 15
    assert _slot(MeldType.SET, ["KC", "KD", "JOKER-R"]).get_value() == 39


def test_set_mid_swap_is_worth_nothing() -> None:
    assert _slot(MeldType.SET, ["5C", "5D", "5H", "JOKER-B", "5S"]).get_value() == 0


def test_untyped_slot_counts_face_values() -> None:
    codes = ["5H", "KH", "AH", "JOKER-B"]
    assert _slot(MeldType.NONE, codes).get_value() == 5 + 10 + 11 + 20
    assert _slot(MeldType.NONE, codes, MeldConfig(joker_value=25)).get_value() == 5 + 10 + 11 + 25


def test_slot_value_ignores_validity_for_untyped_cards() -> None:
    assert slot_value(MeldType.NONE, cards_from_codes(["2C", "9H"])) == 11
    assert slot_value(MeldType.RUN, cards_from_codes(["2C", "9H", "4D"])) == 0
