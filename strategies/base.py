"""Base strategy interface for Eights bots."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eights_engine.moves import Move
    from eights_engine.state import GameState


class Strategy(ABC):
    """Abstract base class for bot strategies.

    Strategies are pure decision functions: they never sleep or schedule,
    and they return the same intents a human would submit.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this strategy."""
        ...

    @abstractmethod
    def select_move(self, state: GameState, legal_moves: list[Move]) -> Move:
        """Select a move for the acting seat.

        Args:
            state: Current game state.
            legal_moves: Moves from ``generate_legal_moves`` for this state.

        Returns:
            The selected move.
        """
        ...

    def on_game_start(self, state: GameState, seat: int) -> None:
        """Called when a game starts.

        Override to initialize per-game state.

        Args:
            state: Initial game state.
            seat: Which seat this strategy controls (0-3).
        """
        pass

    def on_game_end(self, state: GameState, winner: int | None) -> None:
        """Called when a game ends.

        Args:
            state: Final game state.
            winner: Winning seat, or None if the game was cut short.
        """
        pass
