"""Blackjack rules: dealing, hitting, standing and the dealer's play."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from ddc.core.rng import RNG
from ddc.domain.cards import Card, Deck, Hand, TableState
from ddc.services.errors import TableError

RoundResult = Literal[
    "push_blackjack",
    "player_blackjack",
    "dealer_blackjack",
    "player_bust",
    "dealer_bust",
    "player_wins",
    "dealer_wins",
    "push",
]

_RESULT_MESSAGES = {
    "push_blackjack": "Push: both have blackjack.",
    "player_blackjack": "Blackjack! You win.",
    "dealer_blackjack": "Dealer has blackjack. You lose.",
    "player_bust": "Bust. You lose.",
    "dealer_bust": "Dealer busts. You win!",
    "player_wins": "You win!",
    "dealer_wins": "You lose.",
    "push": "Push.",
}


@dataclass(slots=True)
class TableEvent:
    """Base blackjack event."""


@dataclass(slots=True)
class RoundStartedEvent(TableEvent):
    round_number: int
    shoe_replenished: bool


@dataclass(slots=True)
class CardDrawnEvent(TableEvent):
    seat: Literal["player", "dealer"]
    card: str
    total: int


@dataclass(slots=True)
class RoundResolvedEvent(TableEvent):
    result: RoundResult
    message: str
    player_total: int
    dealer_total: int


@dataclass(slots=True)
class TableView:
    player_cards: str
    player_total: str
    dealer_cards: str
    dealer_total: str
    is_round_over: bool


class BlackjackService:
    """Dealer logic for a multi-deck shoe.

    The shoe is replaced before it can run dry, so ``DeckExhaustedError`` only
    surfaces if ``reshuffle_below`` is misconfigured.
    """

    def __init__(
        self,
        rng: RNG,
        *,
        num_decks: int = 4,
        reshuffle_below: int = 15,
        stand_on_soft_17: bool = True,
    ) -> None:
        self._rng = rng
        self._num_decks = num_decks
        self._reshuffle_below = reshuffle_below
        self._stand_on_soft_17 = stand_on_soft_17

    def new_table(self) -> TableState:
        return TableState(deck=self._new_deck())

    def start_round(self, table: TableState) -> List[TableEvent]:
        replenished = False
        if table.deck.size() < self._reshuffle_below:
            table.deck = self._new_deck()
            replenished = True
        table.player.clear()
        table.dealer.clear()
        table.round_number += 1
        table.is_round_over = False
        table.result = None
        events: List[TableEvent] = [RoundStartedEvent(round_number=table.round_number, shoe_replenished=replenished)]

        for _ in range(2):
            table.player.add(table.deck.draw())
            table.dealer.add(table.deck.draw())

        player_bj = table.player.is_blackjack
        dealer_bj = table.dealer.is_blackjack
        if player_bj and dealer_bj:
            events.append(self._resolve(table, "push_blackjack"))
        elif player_bj:
            events.append(self._resolve(table, "player_blackjack"))
        elif dealer_bj:
            events.append(self._resolve(table, "dealer_blackjack"))
        return events

    def hit(self, table: TableState) -> List[TableEvent]:
        self._require_open_round(table)
        card = table.deck.draw()
        table.player.add(card)
        events: List[TableEvent] = [CardDrawnEvent(seat="player", card=str(card), total=table.player.total())]
        if table.player.is_bust:
            events.append(self._resolve(table, "player_bust"))
        return events

    def stand(self, table: TableState) -> List[TableEvent]:
        self._require_open_round(table)
        events: List[TableEvent] = [
            CardDrawnEvent(seat="dealer", card=str(card), total=total)
            for card, total in self._play_dealer(table)
        ]
        player_total = table.player.total()
        dealer_total = table.dealer.total()
        if table.dealer.is_bust:
            result: RoundResult = "dealer_bust"
        elif player_total > dealer_total:
            result = "player_wins"
        elif player_total < dealer_total:
            result = "dealer_wins"
        else:
            result = "push"
        events.append(self._resolve(table, result))
        return events

    def get_table_view(self, table: TableState) -> TableView:
        """Hide the dealer's hole card until the round is over."""
        if table.is_round_over or not table.dealer.cards:
            dealer_cards = str(table.dealer)
            dealer_total = str(table.dealer.total())
        else:
            dealer_cards = f"{table.dealer.cards[0]} ??"
            dealer_total = "??"
        return TableView(
            player_cards=str(table.player),
            player_total=str(table.player.total()),
            dealer_cards=dealer_cards,
            dealer_total=dealer_total,
            is_round_over=table.is_round_over,
        )

    def _play_dealer(self, table: TableState) -> List[tuple[Card, int]]:
        drawn: List[tuple[Card, int]] = []
        while self._dealer_should_hit(table.dealer):
            card = table.deck.draw()
            table.dealer.add(card)
            drawn.append((card, table.dealer.total()))
        return drawn

    def _dealer_should_hit(self, hand: Hand) -> bool:
        if hand.total() < 17:
            return True
        return not self._stand_on_soft_17 and hand.is_soft_17

    def _resolve(self, table: TableState, result: RoundResult) -> RoundResolvedEvent:
        table.is_round_over = True
        table.result = result
        return RoundResolvedEvent(
            result=result,
            message=_RESULT_MESSAGES[result],
            player_total=table.player.total(),
            dealer_total=table.dealer.total(),
        )

    def _require_open_round(self, table: TableState) -> None:
        if table.is_round_over:
            raise TableError("No round in progress; deal a new round first.")

    def _new_deck(self) -> Deck:
        return Deck(self._rng, num_decks=self._num_decks)
