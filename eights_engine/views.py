"""Per-viewer snapshots of the game for renderers.

The engine keeps every hand in the state; redaction happens here, when a
caller asks for what one seat is allowed to see.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from eights_engine.cards import Card
    from eights_engine.state import GameState


class CardView(BaseModel):
    """A face-up card."""

    rank: int
    rank_symbol: str
    rank_name: str
    suit: int
    suit_symbol: str
    suit_name: str
    display: str


class SeatView(BaseModel):
    """One seat as seen by the viewer."""

    index: int
    name: str
    is_bot: bool
    hand_count: int
    hand: list[CardView] | None = Field(
        None, description="Cards in hand; None when hidden from the viewer"
    )
    is_current: bool = False


class LastTurnView(BaseModel):
    """The most recent play."""

    seat: int
    cards: list[CardView]


class GameView(BaseModel):
    """Everything a renderer needs to draw the table for one viewer."""

    viewer: int | None
    phase: str
    current_seat: int
    direction: int
    pending_penalty: int
    active_suit: str | None
    top_card: CardView
    draw_pile_count: int
    discard_pile_count: int
    winner: int | None
    message: str
    turn_number: int
    last_turn: LastTurnView | None = None
    seats: list[SeatView]


def card_view(card: Card) -> CardView:
    """Convert a Card to its view model."""
    return CardView(
        rank=card.rank.value,
        rank_symbol=card.rank.symbol,
        rank_name=card.rank.name,
        suit=card.suit.value,
        suit_symbol=card.suit.symbol,
        suit_name=card.suit.name,
        display=str(card),
    )


def build_view(state: GameState, viewer: int | None = 0, reveal_all: bool = False) -> GameView:
    """Build the snapshot a seat is allowed to see.

    Args:
        state: Current game state.
        viewer: Seat looking at the table, or None for a spectator.
        reveal_all: Show every hand (for watching bots play).
    """
    seats = [
        SeatView(
            index=seat.index,
            name=seat.name,
            is_bot=seat.is_bot,
            hand_count=len(seat.hand),
            hand=(
                [card_view(c) for c in seat.hand]
                if reveal_all or seat.index == viewer
                else None
            ),
            is_current=seat.index == state.current_seat,
        )
        for seat in state.seats
    ]

    last_turn = None
    if state.last_turn is not None:
        last_turn = LastTurnView(
            seat=state.last_turn.seat,
            cards=[card_view(c) for c in state.last_turn.cards],
        )

    return GameView(
        viewer=viewer,
        phase=state.phase.name,
        current_seat=state.current_seat,
        direction=state.direction,
        pending_penalty=state.pending_penalty,
        active_suit=state.active_suit.name if state.active_suit is not None else None,
        top_card=card_view(state.top_card),
        draw_pile_count=len(state.draw_pile),
        discard_pile_count=len(state.discard_pile),
        winner=state.winner,
        message=state.message,
        turn_number=state.turn_number,
        last_turn=last_turn,
        seats=seats,
    )
