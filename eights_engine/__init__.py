"""Eights card game engine."""

from eights_engine.cards import Card, Rank, Suit
from eights_engine.errors import (
    IllegalMoveError,
    IllegalPhaseActionError,
    InvalidComboError,
    InvariantViolationError,
    PassNotAllowedError,
    RejectionReason,
)
from eights_engine.game import TransitionResult, check_invariants, dispatch, start_game
from eights_engine.moves import ChooseSuit, Draw, Move, Pass, Play, StartGame
from eights_engine.state import GamePhase, GameState, LastTurn, SeatState

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "GameState",
    "SeatState",
    "LastTurn",
    "GamePhase",
    "Move",
    "StartGame",
    "Play",
    "Draw",
    "ChooseSuit",
    "Pass",
    "TransitionResult",
    "dispatch",
    "start_game",
    "check_invariants",
    "RejectionReason",
    "IllegalMoveError",
    "InvalidComboError",
    "IllegalPhaseActionError",
    "PassNotAllowedError",
    "InvariantViolationError",
]
