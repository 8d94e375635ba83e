"""The scripted table bot: play the first card that fits, else draw.

The bot never looks ahead and never plays combos. Given the same state it
always makes the same choice, which keeps games reproducible in tests.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Sequence

from eights_engine.cards import Suit
from eights_engine.moves import ChooseSuit, Draw, Play
from eights_engine.state import GamePhase
from eights_engine.validator import playable_cards
from strategies.base import Strategy

if TYPE_CHECKING:
    from eights_engine.cards import Card
    from eights_engine.moves import Move
    from eights_engine.state import GameState

DEFAULT_SUIT = Suit.HEARTS


def select_play(state: GameState) -> Move:
    """Pick the first playable card in hand order, or draw.

    Queens are skipped because a lone Queen would be uncovered.
    """
    candidates = playable_cards(state)
    if candidates:
        return Play(cards=(candidates[0],))
    return Draw()


def select_suit(hand: Sequence[Card]) -> Suit:
    """Declare the suit the hand holds most of.

    Ties go to the earlier suit in hearts, diamonds, clubs, spades order;
    an empty hand declares hearts.
    """
    if not hand:
        return DEFAULT_SUIT
    counts = Counter(card.suit for card in hand)
    return max(Suit, key=lambda suit: (counts[suit], -suit.value))


class FirstMatchStrategy(Strategy):
    """Deterministic bot used for the computer-controlled seats."""

    @property
    def name(self) -> str:
        return "FirstMatch"

    def select_move(self, state: GameState, legal_moves: list[Move]) -> Move:
        """Select a move; ``legal_moves`` is not consulted."""
        if state.phase == GamePhase.SELECTING_SUIT:
            return ChooseSuit(suit=select_suit(state.current_seat_state.hand))
        return select_play(state)
