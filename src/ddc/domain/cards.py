"""Card, shoe and hand models for the blackjack table."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ddc.core.rng import RNG

SUITS: Tuple[str, ...] = ("♣", "♦", "♥", "♠")
RANKS: Tuple[str, ...] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
FACE_RANKS = frozenset({"J", "Q", "K"})


class DeckExhaustedError(Exception):
    """Raised when drawing from an empty shoe."""


@dataclass(frozen=True, slots=True)
class Card:
    rank: str
    suit: str

    @property
    def hard_value(self) -> int:
        """Value with aces counted as 11."""
        if self.rank == "A":
            return 11
        if self.rank in FACE_RANKS:
            return 10
        return int(self.rank)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


class Deck:
    """A shuffled shoe of one or more 52-card decks."""

    def __init__(self, rng: RNG, num_decks: int = 1) -> None:
        self._cards: List[Card] = [
            Card(rank, suit) for _ in range(num_decks) for suit in SUITS for rank in RANKS
        ]
        rng.shuffle(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            raise DeckExhaustedError("No cards left in the shoe.")
        return self._cards.pop()

    def size(self) -> int:
        return len(self._cards)


@dataclass(slots=True)
class Hand:
    cards: List[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def clear(self) -> None:
        self.cards.clear()

    def _soft_total(self) -> Tuple[int, bool]:
        total = sum(card.hard_value for card in self.cards)
        aces = sum(1 for card in self.cards if card.rank == "A")
        demoted = 0
        while total > 21 and demoted < aces:
            total -= 10
            demoted += 1
        # an ace still counted as 11 makes the hand soft
        return total, demoted < aces

    def total(self) -> int:
        return self._soft_total()[0]

    @property
    def is_blackjack(self) -> bool:
        return len(self.cards) == 2 and self.total() == 21

    @property
    def is_bust(self) -> bool:
        return self.total() > 21

    @property
    def is_soft_17(self) -> bool:
        total, soft = self._soft_total()
        return total == 17 and soft

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)


@dataclass(slots=True)
class TableState:
    """One seat against the dealer, carried across rounds."""

    deck: Deck
    player: Hand = field(default_factory=Hand)
    dealer: Hand = field(default_factory=Hand)
    round_number: int = 0
    is_round_over: bool = True
    result: str | None = None
