"""Random strategy for baseline testing and invariant fuzzing."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from eights_engine.moves import Play
from eights_engine.validator import cards_connect, is_queen_covered
from strategies.base import Strategy

if TYPE_CHECKING:
    from eights_engine.moves import Move
    from eights_engine.state import GameState


class RandomStrategy(Strategy):
    """Strategy that selects legal moves uniformly at random.

    With ``combo_chance`` above zero, a chosen play is sometimes grown into a
    longer combo by appending random connecting cards from the hand, so
    simulations also exercise multi-card plays.
    """

    def __init__(self, seed: int | None = None, combo_chance: float = 0.5):
        """Initialize the random strategy.

        Args:
            seed: Optional random seed for reproducibility.
            combo_chance: Probability of extending a play by one more card,
                checked again after each card added.
        """
        self._rng = random.Random(seed)
        self.combo_chance = combo_chance

    @property
    def name(self) -> str:
        return "Random"

    def select_move(self, state: GameState, legal_moves: list[Move]) -> Move:
        """Select a random legal move, possibly extended into a combo."""
        if not legal_moves:
            raise ValueError("No legal moves available")
        move = self._rng.choice(legal_moves)
        if isinstance(move, Play):
            return self._extend(state, move)
        return move

    def _extend(self, state: GameState, move: Play) -> Play:
        cards = list(move.cards)
        remaining = [c for c in state.current_seat_state.hand if c not in cards]

        while remaining and self._rng.random() < self.combo_chance:
            followers = [c for c in remaining if cards_connect(cards[-1], c)]
            if not followers:
                break
            nxt = self._rng.choice(followers)
            cards.append(nxt)
            remaining.remove(nxt)

        # Back off to the longest prefix that leaves no Queen uncovered
        while len(cards) > len(move.cards) and not is_queen_covered(cards):
            cards.pop()
        return Play(cards=tuple(cards))
