"""Legal move generation for Eights."""

from __future__ import annotations

from eights_engine.cards import Suit
from eights_engine.moves import ChooseSuit, Draw, Move, Pass, Play
from eights_engine.state import GamePhase, GameState
from eights_engine.validator import can_pass, playable_cards, queen_cover_pairs


def generate_legal_moves(state: GameState) -> list[Move]:
    """Generate legal moves for the acting seat.

    Plays are limited to single cards and Queen-plus-cover pairs; longer
    combos are legal too but are left to the caller to assemble.

    Args:
        state: Current game state.

    Returns:
        List of legal moves for the current phase.
    """
    if state.is_game_over:
        return []

    match state.phase:
        case GamePhase.PLAYING:
            return _generate_playing_moves(state)
        case GamePhase.SELECTING_SUIT:
            return [ChooseSuit(suit=suit) for suit in Suit]
        case GamePhase.GAME_OVER:
            return []

    return []


def _generate_playing_moves(state: GameState) -> list[Move]:
    """Generate moves for a normal turn."""
    moves: list[Move] = [Play(cards=(card,)) for card in playable_cards(state)]
    moves.extend(Play(cards=pair) for pair in queen_cover_pairs(state))

    # Drawing is always allowed, even when a card could be played
    moves.append(Draw())

    if can_pass(state):
        moves.append(Pass())

    return moves
