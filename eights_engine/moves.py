"""Intents a seat (human or bot) can submit to the engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eights_engine.cards import Card, Suit


class MoveType(IntEnum):
    """Type of move."""

    START_GAME = auto()  # Deal a fresh game, replacing the current one
    PLAY = auto()  # Play one or more cards as a combo
    DRAW = auto()  # Draw one card, or the whole pending penalty
    CHOOSE_SUIT = auto()  # Declare a suit after an Ace
    PASS = auto()  # Pass without playing (nothing playable, no penalty owed)


@dataclass(frozen=True, slots=True)
class Move(ABC):
    """Base class for all moves."""

    @property
    @abstractmethod
    def move_type(self) -> MoveType:
        """The type of this move."""
        ...

    @abstractmethod
    def __str__(self) -> str:
        """Human-readable move description."""
        ...


@dataclass(frozen=True, slots=True)
class StartGame(Move):
    """Start a new game with a freshly shuffled deck."""

    seed: int | None = None

    @property
    def move_type(self) -> MoveType:
        return MoveType.START_GAME

    def __str__(self) -> str:
        return "Start game"


@dataclass(frozen=True, slots=True)
class Play(Move):
    """Play cards from hand, in order, onto the discard pile."""

    cards: tuple[Card, ...]

    @property
    def move_type(self) -> MoveType:
        return MoveType.PLAY

    def __str__(self) -> str:
        return "Play " + " ".join(str(c) for c in self.cards)


@dataclass(frozen=True, slots=True)
class Draw(Move):
    """Draw from the draw pile."""

    @property
    def move_type(self) -> MoveType:
        return MoveType.DRAW

    def __str__(self) -> str:
        return "Draw"


@dataclass(frozen=True, slots=True)
class ChooseSuit(Move):
    """Declare the active suit after playing an Ace."""

    suit: Suit

    @property
    def move_type(self) -> MoveType:
        return MoveType.CHOOSE_SUIT

    def __str__(self) -> str:
        return f"Choose {self.suit.name.lower()}"


@dataclass(frozen=True, slots=True)
class Pass(Move):
    """Pass the turn."""

    @property
    def move_type(self) -> MoveType:
        return MoveType.PASS

    def __str__(self) -> str:
        return "Pass"
