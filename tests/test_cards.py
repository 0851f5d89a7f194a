import pytest

from ddc.domain.cards import Card, Deck, DeckExhaustedError, Hand
from tests.helpers.scripted_rng import ScriptedRNG


def _hand(*ranks: str) -> Hand:
    return Hand(cards=[Card(rank, "♥") for rank in ranks])


def test_card_values_and_display() -> None:
    assert Card("A", "♠").hard_value == 11
    assert Card("Q", "♦").hard_value == 10
    assert Card("7", "♣").hard_value == 7
    assert str(Card("10", "♥")) == "10♥"


def test_ace_and_face_card_is_blackjack() -> None:
    hand = _hand("A", "K")
    assert hand.total() == 21
    assert hand.is_blackjack


def test_three_card_twenty_one_is_not_blackjack() -> None:
    hand = _hand("A", "A", "9")
    assert hand.total() == 21
    assert not hand.is_blackjack


def test_soft_and_hard_seventeen() -> None:
    assert _hand("A", "6").is_soft_17
    hard = _hand("A", "6", "K")
    assert hard.total() == 17
    assert not hard.is_soft_17


def test_bust_detection() -> None:
    assert _hand("K", "Q", "5").is_bust
    assert not _hand("A", "A", "A", "A").is_bust


def test_hand_str_and_clear() -> None:
    hand = _hand("2", "J")
    assert str(hand) == "2♥ J♥"
    hand.clear()
    assert hand.total() == 0


def test_deck_holds_fifty_two_cards_per_deck() -> None:
    assert Deck(ScriptedRNG(), num_decks=2).size() == 104


def test_drawing_past_the_end_raises() -> None:
    deck = Deck(ScriptedRNG())
    for _ in range(52):
        deck.draw()
    with pytest.raises(DeckExhaustedError):
        deck.draw()
