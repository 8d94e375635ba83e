"""Game state machine: the single entry point for callers.

Callers own one ``GameState`` and thread it through ``dispatch``. Every call
is a pure function of ``(state, intent)``; a rejected intent hands back the
same state together with the reason, so a caller never sees a half-applied
move.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from eights_engine.cards import create_deck
from eights_engine.errors import IllegalMoveError, InvariantViolationError, RejectionReason
from eights_engine.executor import execute_move
from eights_engine.moves import Play, StartGame
from eights_engine.state import (
    DEFAULT_BOT_SEATS,
    DEFAULT_SEAT_NAMES,
    NUM_SEATS,
    GamePhase,
    create_initial_state,
)

if TYPE_CHECKING:
    from eights_engine.moves import Move
    from eights_engine.state import GameState
    from strategies.base import Strategy

logger = logging.getLogger(__name__)

FULL_DECK = frozenset(create_deck())


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """Outcome of dispatching one intent.

    Attributes:
        state: State after the intent, or the unchanged state if rejected
        rejection: Why the intent was refused, None on success
        detail: Message suitable for showing to the player
    """

    state: GameState
    rejection: RejectionReason | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.rejection is None


def start_game(
    seed: int | None = None,
    seat_names: tuple[str, ...] = DEFAULT_SEAT_NAMES,
    bot_seats: frozenset[int] = DEFAULT_BOT_SEATS,
) -> GameState:
    """Deal a fresh game."""
    state = create_initial_state(seed=seed, seat_names=seat_names, bot_seats=bot_seats)
    logger.debug("New game (seed=%s), starter card %s", seed, state.top_card)
    return state


def dispatch(state: GameState | None, intent: Move) -> TransitionResult:
    """Apply an intent to the state.

    ``StartGame`` replaces the state wholesale, keeping the seat names and
    bot flags of ``state`` when there is one.
    """
    if isinstance(intent, StartGame):
        if state is None:
            return TransitionResult(state=start_game(seed=intent.seed))
        return TransitionResult(
            state=start_game(
                seed=intent.seed,
                seat_names=tuple(s.name for s in state.seats),
                bot_seats=frozenset(s.index for s in state.seats if s.is_bot),
            )
        )

    if state is None:
        raise ValueError("No game in progress; dispatch StartGame first")

    try:
        new_state = execute_move(state, intent)
    except IllegalMoveError as e:
        logger.info(
            "Rejected %s from seat %d: %s (%s)",
            intent,
            state.current_seat,
            e,
            e.reason.value,
        )
        return TransitionResult(state=state, rejection=e.reason, detail=str(e))

    logger.debug("Seat %d: %s -> %s", state.current_seat, intent, new_state.message)
    return TransitionResult(state=new_state, detail=new_state.message)


def acting_seat(state: GameState) -> int | None:
    """Seat expected to submit the next intent, or None once the game is over."""
    if state.is_game_over:
        return None
    return state.current_seat


def is_bot_turn(state: GameState) -> bool:
    """Whether a bot should act now."""
    seat = acting_seat(state)
    return seat is not None and state.seats[seat].is_bot


def run_bot_turn(state: GameState, strategy: Strategy) -> GameState:
    """Let ``strategy`` take the acting seat's whole turn.

    When the bot plays an Ace its suit choice is applied straight away, so
    the returned state is never waiting on the bot.

    Raises:
        IllegalMoveError: If the strategy picks an illegal move.
    """
    from eights_engine.move_generator import generate_legal_moves

    move = strategy.select_move(state, generate_legal_moves(state))
    new_state = execute_move(state, move)

    if new_state.phase == GamePhase.SELECTING_SUIT:
        suit_move = strategy.select_move(new_state, generate_legal_moves(new_state))
        new_state = execute_move(new_state, suit_move)

    if isinstance(move, Play):
        logger.debug("%s (%s) played %s", state.current_seat_state.name, strategy.name, move)

    return new_state


def check_invariants(state: GameState) -> None:
    """Verify the state is internally consistent.

    Raises:
        InvariantViolationError: On any duplicated or missing card, or an
            out-of-range seat, direction or penalty.
    """
    cards = state.all_cards()
    duplicates = [card for card, n in Counter(cards).items() if n > 1]
    if duplicates:
        raise InvariantViolationError(
            "Duplicated cards: " + ", ".join(str(c) for c in sorted(duplicates))
        )
    missing = FULL_DECK - set(cards)
    if missing:
        raise InvariantViolationError(
            "Missing cards: " + ", ".join(str(c) for c in sorted(missing))
        )

    if len(state.seats) != NUM_SEATS:
        raise InvariantViolationError(f"Expected {NUM_SEATS} seats, got {len(state.seats)}")
    if not 0 <= state.current_seat < NUM_SEATS:
        raise InvariantViolationError(f"Seat index out of range: {state.current_seat}")
    if state.direction not in (1, -1):
        raise InvariantViolationError(f"Bad direction: {state.direction}")
    if state.pending_penalty < 0 or not 0 <= state.black_jack_penalty <= state.pending_penalty:
        raise InvariantViolationError(
            f"Bad penalty: {state.pending_penalty} (black Jacks {state.black_jack_penalty})"
        )
    if (state.winner is None) != (state.phase != GamePhase.GAME_OVER):
        raise InvariantViolationError(
            f"Winner {state.winner} inconsistent with phase {state.phase.name}"
        )
