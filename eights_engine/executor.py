"""Move execution for Eights."""

from __future__ import annotations

from dataclasses import dataclass

from eights_engine.cards import Card, Rank
from eights_engine.errors import (
    IllegalMoveError,
    IllegalPhaseActionError,
    PassNotAllowedError,
    RejectionReason,
)
from eights_engine.moves import ChooseSuit, Draw, Move, Pass, Play
from eights_engine.state import GamePhase, GameState, LastTurn
from eights_engine.validator import can_pass, validate_play

TWO_PENALTY = 2
BLACK_JACK_PENALTY = 7


@dataclass(frozen=True, slots=True)
class ComboEffects:
    """Net effect of a combo, computed before anything is applied.

    Attributes:
        reverse: Whether the direction of play flips
        skips: Extra seats skipped beyond the normal advance
        pending_penalty: Pending penalty once the combo lands
        black_jack_penalty: Part of pending_penalty owed to black Jacks
        selects_suit: Whether the combo ends on an Ace
    """

    reverse: bool
    skips: int
    pending_penalty: int
    black_jack_penalty: int
    selects_suit: bool


def execute_move(state: GameState, move: Move) -> GameState:
    """Execute a move and return the new game state.

    Args:
        state: Current game state.
        move: Move to execute.

    Returns:
        New game state after the move.

    Raises:
        IllegalMoveError: If the move is not legal.
    """
    if state.is_game_over:
        raise IllegalPhaseActionError("Game is already over", RejectionReason.GAME_OVER)

    match move:
        case Play():
            new_state = _execute_play(state, move)
        case Draw():
            new_state = _execute_draw(state)
        case ChooseSuit():
            new_state = _execute_choose_suit(state, move)
        case Pass():
            new_state = _execute_pass(state)
        case _:
            raise IllegalMoveError(f"Unknown move type: {type(move)}")

    return new_state.with_turn_number(state.turn_number + 1)


def compute_combo_effects(state: GameState, cards: tuple[Card, ...]) -> ComboEffects:
    """Work out what a validated combo does to direction, skips and penalty."""
    kings = sum(1 for c in cards if c.rank == Rank.KING)
    eights = sum(1 for c in cards if c.rank == Rank.EIGHT)
    twos = sum(1 for c in cards if c.rank == Rank.TWO)

    pending = state.pending_penalty
    black_jack_part = state.black_jack_penalty

    # Opening a red Jack on a black Jack cancels exactly the black Jack share
    if pending > 0 and state.top_card.is_black_jack and cards[0].is_red_jack:
        pending -= black_jack_part
        black_jack_part = 0

    pending += TWO_PENALTY * twos

    trailing_black_jacks = 0
    for card in reversed(cards):
        if not card.is_black_jack:
            break
        trailing_black_jacks += 1
    added = BLACK_JACK_PENALTY * trailing_black_jacks
    pending += added
    black_jack_part += added

    return ComboEffects(
        reverse=kings % 2 == 1,
        skips=eights,
        pending_penalty=pending,
        black_jack_penalty=black_jack_part,
        selects_suit=cards[-1].rank == Rank.ACE,
    )


def _execute_play(state: GameState, move: Play) -> GameState:
    """Execute playing one or more cards."""
    if state.phase != GamePhase.PLAYING:
        raise IllegalPhaseActionError("Can only play cards during play phase")

    cards = tuple(move.cards)
    validate_play(state, cards)

    seat = state.current_seat_state
    played = set(cards)
    new_hand = tuple(c for c in seat.hand if c not in played)

    new_state = (
        state.with_seat(seat.with_hand(new_hand))
        .with_discard_pile(state.discard_pile + cards)
        .with_last_turn(LastTurn(seat=seat.index, cards=cards))
    )

    if not new_hand:
        return new_state.with_winner(seat.index).with_message(
            f"{seat.name} emptied their hand and won!"
        )

    effects = compute_combo_effects(state, cards)

    direction = -state.direction if effects.reverse else state.direction
    new_state = (
        new_state.with_direction(direction)
        .with_penalty(effects.pending_penalty, effects.black_jack_penalty)
        .with_active_suit(None)
        .with_message(f"{seat.name} played {len(cards)} card{'s' if len(cards) != 1 else ''}.")
    )

    if effects.selects_suit:
        return new_state.with_phase(GamePhase.SELECTING_SUIT)

    return _advance(new_state, 1 + effects.skips)


def _execute_draw(state: GameState) -> GameState:
    """Execute a draw: one card, or the whole pending penalty."""
    if state.phase != GamePhase.PLAYING:
        raise IllegalPhaseActionError("Can only draw during play phase")

    # The discard pile is never reshuffled; a short pile just yields fewer cards
    count = min(max(state.pending_penalty, 1), len(state.draw_pile))
    drawn = state.draw_pile[:count]

    seat = state.current_seat_state
    new_state = (
        state.with_seat(seat.with_hand(seat.hand + drawn))
        .with_draw_pile(state.draw_pile[count:])
        .with_penalty(0, 0)
        .with_message(f"{seat.name} drew {count} card{'s' if count != 1 else ''}")
    )
    return _advance(new_state, 1)


def _execute_choose_suit(state: GameState, move: ChooseSuit) -> GameState:
    """Execute declaring the active suit after an Ace."""
    if state.phase != GamePhase.SELECTING_SUIT:
        raise IllegalPhaseActionError("Can only choose a suit right after an Ace")

    new_state = (
        state.with_active_suit(move.suit)
        .with_phase(GamePhase.PLAYING)
        .with_message(f"Suit changed to {move.suit.name.lower()}")
    )
    return _advance(new_state, 1)


def _execute_pass(state: GameState) -> GameState:
    """Execute passing the turn."""
    if state.phase != GamePhase.PLAYING:
        raise IllegalPhaseActionError("Can only pass during play phase")
    if not can_pass(state):
        if state.pending_penalty > 0:
            raise PassNotAllowedError(f"Must draw {state.pending_penalty} cards")
        raise PassNotAllowedError("Cannot pass while a card can be played")

    seat = state.current_seat_state
    return _advance(state.with_message(f"{seat.name} passed."), 1)


def _advance(state: GameState, steps: int) -> GameState:
    """Move the turn ``steps`` seats along the current direction."""
    return state.with_current_seat(state.seat_after(steps))
