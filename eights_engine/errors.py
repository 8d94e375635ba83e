"""Rejection reasons and errors raised by the engine."""

from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    """Why an intent was refused."""

    EMPTY_PLAY = "empty_play"
    DUPLICATE_CARDS = "duplicate_cards"
    CARD_NOT_IN_HAND = "card_not_in_hand"
    INVALID_COMBO = "invalid_combo"
    UNCOVERED_QUEEN = "uncovered_queen"
    WRONG_PHASE = "wrong_phase"
    GAME_OVER = "game_over"
    PASS_NOT_ALLOWED = "pass_not_allowed"
    UNKNOWN_MOVE = "unknown_move"


class IllegalMoveError(Exception):
    """Raised when an illegal move is attempted."""

    reason: RejectionReason = RejectionReason.UNKNOWN_MOVE

    def __init__(self, message: str, reason: RejectionReason | None = None):
        super().__init__(message)
        if reason is not None:
            self.reason = reason


class InvalidComboError(IllegalMoveError):
    """The cards do not form a legal play on the current pile."""

    reason = RejectionReason.INVALID_COMBO


class IllegalPhaseActionError(IllegalMoveError):
    """The intent is not accepted in the current phase."""

    reason = RejectionReason.WRONG_PHASE


class PassNotAllowedError(IllegalMoveError):
    """Passing while a card could be played or a penalty is owed."""

    reason = RejectionReason.PASS_NOT_ALLOWED


class InvariantViolationError(RuntimeError):
    """A card was duplicated or lost. Always a programming error."""
